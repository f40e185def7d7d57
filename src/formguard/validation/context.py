"""ValidationContext: call-scoped accumulator of validation failures.

One context is created per validation pass and handed to every convertor and
validator taking part in it. Recorded messages keep their append order.
Contexts are never shared across unrelated passes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from formguard.validation.messages import MessageResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationMessage:
    """One recorded failure: which property, which message id, which arguments.

    ``args`` are positional; by convention ``args[0]`` is the display name.
    """

    property_name: str
    message_id: str
    args: tuple[Any, ...] = ()

    def format(self, resolver: MessageResolver, locale: str | None = None) -> str:
        """Render the message text through *resolver*."""
        return resolver.format(self.message_id, locale, *self.args)

    def to_dict(self) -> dict[str, Any]:
        return {
            "property": self.property_name,
            "message_id": self.message_id,
            "args": [_plain_arg(a) for a in self.args],
        }


def _plain_arg(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float)):
        return value
    return str(value)


class ValidationContext:
    """Ordered collection of ValidationMessage for a single validation pass."""

    def __init__(self) -> None:
        self._messages: list[ValidationMessage] = []

    @property
    def messages(self) -> list[ValidationMessage]:
        """Recorded messages in append order (a copy)."""
        return list(self._messages)

    @property
    def is_valid(self) -> bool:
        return not self._messages

    def add_result_message(self, property_name: str, message_id: str, *args: Any) -> None:
        """Record a validation failure for *property_name*."""
        message = ValidationMessage(property_name=property_name, message_id=message_id, args=args)
        self._messages.append(message)
        logger.debug("Validation failed for %s: %s", property_name, message_id)

    def messages_for(self, property_name: str) -> list[ValidationMessage]:
        """Recorded messages for one property."""
        return [m for m in self._messages if m.property_name == property_name]

    def __len__(self) -> int:
        return len(self._messages)
