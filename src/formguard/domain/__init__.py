"""Domain layer: ranges, rule descriptors, and configuration errors.

This layer depends only on stdlib and pydantic.
It must never import from services, validators, commands, or config.
"""

from formguard.domain.errors import (
    FormguardConfigurationError,
    InvalidRangeDefinition,
    UnsupportedConversionType,
    UnsupportedValueType,
)
from formguard.domain.range import LONG_MAX_VALUE, LONG_MIN_VALUE, BoundedRange
from formguard.domain.rules import DecimalRange, NumberRange, RangeRule

__all__ = [
    "LONG_MAX_VALUE",
    "LONG_MIN_VALUE",
    "BoundedRange",
    "DecimalRange",
    "FormguardConfigurationError",
    "InvalidRangeDefinition",
    "NumberRange",
    "RangeRule",
    "UnsupportedConversionType",
    "UnsupportedValueType",
]
