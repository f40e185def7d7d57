"""Range validators run after coercion."""

from formguard.validators.base import RangeValidator
from formguard.validators.decimal_range import DecimalRangeValidator
from formguard.validators.number_range import NumberRangeValidator

__all__ = ["DecimalRangeValidator", "NumberRangeValidator", "RangeValidator"]
