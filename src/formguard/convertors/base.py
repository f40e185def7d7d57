"""Convertor protocol: the "convert or reject" contract run before validators.

The binding layer first asks ``is_convertible``; a False answer has already
recorded a message in the context. Only then does it call ``convert``.
``convert`` must never raise for malformed user input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from formguard.validation.context import ValidationContext


@runtime_checkable
class Convertor(Protocol):
    """Coerces raw form input into one target semantic type."""

    target_type: ClassVar[Any]

    def convert(
        self,
        context: ValidationContext,
        property_name: str,
        value: Any,
        rule: Any = None,
    ) -> Any:
        """Best-effort coercion of *value*; never raises for bad input."""
        ...

    def is_convertible(
        self,
        context: ValidationContext,
        property_name: str,
        display_name: Any,
        value: Any,
        rule: Any = None,
    ) -> bool:
        """Whether *value* is a legal raw instance of the target type.

        Records a failure message in *context* when returning False.
        """
        ...


def is_string_array(value: Any) -> bool:
    """Whether *value* is the multi-value form representation.

    Lists and tuples whose elements are all ``str`` or ``None`` qualify.
    """
    if not isinstance(value, (list, tuple)):
        return False
    return all(item is None or isinstance(item, str) for item in value)
