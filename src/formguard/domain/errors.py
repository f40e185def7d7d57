"""Configuration errors raised by the validation core.

These are developer/wiring bugs, never user input problems. They abort the
current validation call and are never recorded in a ValidationContext.
Validation failures are reported through the context instead.
"""

from __future__ import annotations


class FormguardConfigurationError(Exception):
    """Base class for errors that indicate a wiring or declaration bug."""


class InvalidRangeDefinition(FormguardConfigurationError, ValueError):
    """A range bound could not be parsed as a decimal number."""

    def __init__(self, message: str, *, bound: str | None = None) -> None:
        super().__init__(message)
        self.bound = bound


class UnsupportedValueType(FormguardConfigurationError, TypeError):
    """A range validator received a value that is not number-like."""

    def __init__(self, value_type: type) -> None:
        msg = (
            "unsupported data type. supported type:[Number], "
            f"actual type:{value_type.__module__}.{value_type.__qualname__}"
        )
        super().__init__(msg)
        self.value_type = value_type


class UnsupportedConversionType(FormguardConfigurationError, TypeError):
    """A convertor received a runtime type its caller contract forbids."""

    def __init__(self, value_type: type) -> None:
        msg = (
            "Convert type was not supported. "
            f"type = {value_type.__module__}.{value_type.__qualname__}"
        )
        super().__init__(msg)
        self.value_type = value_type
