"""StringArrayConvertor: identity coercion for multi-value form fields."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from formguard.convertors.base import is_string_array
from formguard.domain.errors import UnsupportedConversionType

if TYPE_CHECKING:
    from formguard.validation.context import ValidationContext


class StringArrayConvertor:
    """Convertor targeting ``list[str]``; values pass through unchanged.

    Only string arrays (or ``None``) can reach this convertor. Anything else
    is a wiring bug upstream and raises instead of being reported as a
    validation failure.
    """

    target_type = list[str]

    def convert(
        self,
        context: ValidationContext,
        property_name: str,
        value: Any,
        rule: Any = None,
    ) -> Any:
        return value

    def is_convertible(
        self,
        context: ValidationContext,
        property_name: str,
        display_name: Any,
        value: Any,
        rule: Any = None,
    ) -> bool:
        if value is not None and not is_string_array(value):
            raise UnsupportedConversionType(type(value))
        return True
