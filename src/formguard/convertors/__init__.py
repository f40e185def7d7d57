"""Type convertors that coerce raw form input before validation."""

from formguard.convertors.base import Convertor
from formguard.convertors.boolean import BooleanConvertor
from formguard.convertors.string_array import StringArrayConvertor

__all__ = ["BooleanConvertor", "Convertor", "StringArrayConvertor"]
