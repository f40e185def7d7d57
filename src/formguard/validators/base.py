"""RangeValidator: shared routine behind the number and decimal validators.

Both invocation styles go through :meth:`RangeValidator.validate`:

- a static descriptor (``NumberRange`` / ``DecimalRange``), or
- a configuration mapping with ``min`` / ``max`` / ``messageId`` keys, which
  is adapted into the validator's descriptor type first.

Message id precedence on failure:

1. the rule's own non-empty ``message_id``;
2. ``max_and_min_message_id`` when both bounds are set;
3. ``min_message_id`` when only ``min`` is set;
4. ``max_message_id`` otherwise.

Messages are recorded with ``(display_name, min, max)``; an unset bound
still occupies its slot (as ``None``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from formguard.domain.range import to_decimal

if TYPE_CHECKING:
    from formguard.domain.range import BoundedRange
    from formguard.domain.rules import RangeRule, RangeRuleModel
    from formguard.validation.context import ValidationContext


class RangeValidator(ABC):
    """Validates a number against a range rule and records a message on failure.

    The three default message ids are wired once at construction and never
    change afterwards, so one instance can serve any number of contexts.
    """

    rule_kind: ClassVar[str]
    rule_type: ClassVar[type[RangeRuleModel]]

    def __init__(
        self,
        *,
        min_message_id: str = "",
        max_message_id: str = "",
        max_and_min_message_id: str = "",
    ) -> None:
        self._min_message_id = min_message_id
        self._max_message_id = max_message_id
        self._max_and_min_message_id = max_and_min_message_id

    @property
    def min_message_id(self) -> str:
        return self._min_message_id

    @property
    def max_message_id(self) -> str:
        return self._max_message_id

    @property
    def max_and_min_message_id(self) -> str:
        return self._max_and_min_message_id

    def rule_from_params(self, params: Mapping[str, Any]) -> RangeRule:
        """Adapt a ``{"min", "max", "messageId"}`` mapping into this validator's rule."""
        return self.rule_type.from_params(params)

    def validate(
        self,
        context: ValidationContext,
        property_name: str,
        display_name: Any,
        rule: RangeRule | Mapping[str, Any],
        value: Any,
    ) -> bool:
        """Check *value* against *rule*.

        Returns:
            True if *value* is None (whatever the rule holds) or inside the
            range; False after recording a message in *context* otherwise.

        Raises:
            InvalidRangeDefinition: If the rule's bounds cannot be parsed.
            UnsupportedValueType: If *value* is not number-like.
        """
        if value is None:
            return True
        if isinstance(rule, Mapping):
            rule = self.rule_from_params(rule)

        bounded = rule.to_range()
        if bounded.includes(to_decimal(value)):
            return True

        context.add_result_message(
            property_name,
            self.select_message_id(rule),
            display_name,
            *self._message_bounds(rule, bounded),
        )
        return False

    def select_message_id(self, rule: RangeRule) -> str:
        """Pick the message id for a failed check against *rule*."""
        if rule.message_id:
            return rule.message_id
        if rule.has_min and rule.has_max:
            return self._max_and_min_message_id
        if rule.has_min:
            return self._min_message_id
        return self._max_message_id

    @abstractmethod
    def _message_bounds(self, rule: RangeRule, bounded: BoundedRange) -> tuple[Any, Any]:
        """Return the ``(min, max)`` message arguments for *rule*."""
