"""BooleanConvertor: coerce ``"true"``/``"false"`` form input to ``bool``.

Accepted raw shapes: ``None``, a native ``bool``, a plain string, or a
one-element string array (form fields always arrive as arrays, even for
scalar properties).

NOTE: ``convert`` maps anything it cannot interpret to False instead of
raising. Malformed input is reported by ``is_convertible``, which callers are
expected to run first.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from formguard.convertors.base import is_string_array

if TYPE_CHECKING:
    from formguard.validation.context import ValidationContext

_BOOLEAN_PATTERN = re.compile(r"true|false", re.IGNORECASE)


def is_boolean_string(value: str) -> bool:
    """Case-insensitive match of the literal tokens ``true`` / ``false``."""
    return _BOOLEAN_PATTERN.fullmatch(value) is not None


class BooleanConvertor:
    """Convertor targeting ``bool``.

    Args:
        conversion_failed_message_id: Message id recorded when a value is not
            convertible. Template example: ``"{0} is not valid."``
        allow_null_value: Whether ``None`` (and ``[None]``) is acceptable.
    """

    target_type = bool

    def __init__(
        self,
        conversion_failed_message_id: str = "",
        *,
        allow_null_value: bool = True,
    ) -> None:
        self._conversion_failed_message_id = conversion_failed_message_id
        self._allow_null_value = allow_null_value

    @property
    def conversion_failed_message_id(self) -> str:
        return self._conversion_failed_message_id

    @property
    def allow_null_value(self) -> bool:
        return self._allow_null_value

    def convert(
        self,
        context: ValidationContext,
        property_name: str,
        value: Any,
        rule: Any = None,
    ) -> bool:
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        if is_string_array(value):
            if not value or value[0] is None:
                return False
            return value[0].lower() == "true"
        return str(value).lower() == "true"

    def is_convertible(
        self,
        context: ValidationContext,
        property_name: str,
        display_name: Any,
        value: Any,
        rule: Any = None,
    ) -> bool:
        convertible = self._is_convertible(value)
        if not convertible:
            context.add_result_message(
                property_name, self._conversion_failed_message_id, display_name
            )
        return convertible

    def _is_convertible(self, value: Any) -> bool:
        if value is None:
            return self._allow_null_value
        if isinstance(value, bool):
            return True
        if isinstance(value, str):
            return is_boolean_string(value)
        if is_string_array(value):
            if len(value) != 1:
                return False
            sole = value[0]
            if sole is None:
                return self._allow_null_value
            return is_boolean_string(sole)
        return False
