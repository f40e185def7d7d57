"""Arbitrary-precision numeric ranges.

A BoundedRange is an interval with optional ends. All comparisons are done on
``decimal.Decimal`` values so boundary values such as ``0.99999`` compare
exactly; binary floating point never takes part in a membership test.

INVARIANT: ``min <= max`` is the caller's responsibility. The range only
answers membership questions.
"""

from __future__ import annotations

import math
import numbers
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from formguard.domain.errors import InvalidRangeDefinition, UnsupportedValueType

LONG_MIN_VALUE = -(2**63)
LONG_MAX_VALUE = 2**63 - 1

# Plain or scientific notation, no surrounding whitespace, no digit separators.
_DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_decimal(text: str) -> Decimal:
    """Parse *text* as a finite decimal number.

    Raises:
        InvalidRangeDefinition: If *text* is not a decimal literal.
    """
    if not _DECIMAL_PATTERN.fullmatch(text):
        msg = f"not a decimal number: {text!r}"
        raise InvalidRangeDefinition(msg, bound=text)
    return Decimal(text)


def to_decimal(value: object) -> Decimal:
    """Return the arbitrary-precision representation of a number-like *value*.

    ``Decimal`` passes through unchanged, ``int`` converts exactly and every
    other number is stringified and re-parsed, so ``0.1`` becomes
    ``Decimal("0.1")`` rather than its binary expansion.

    Raises:
        UnsupportedValueType: If *value* is not a finite number. ``bool`` is
            rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        raise UnsupportedValueType(type(value))
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise UnsupportedValueType(type(value))
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float) and not math.isfinite(value):
        raise UnsupportedValueType(type(value))
    try:
        converted = Decimal(str(value))
    except InvalidOperation as exc:
        raise UnsupportedValueType(type(value)) from exc
    if not converted.is_finite():
        raise UnsupportedValueType(type(value))
    return converted


def _plain(value: Decimal | None) -> str | None:
    return format(value, "f") if value is not None else None


@dataclass(frozen=True, slots=True)
class BoundedRange:
    """Closed numeric interval whose ends may be absent (unbounded).

    Attributes:
        min: Inclusive lower bound, or None for no lower bound.
        max: Inclusive upper bound, or None for no upper bound.
    """

    min: Decimal | None = None
    max: Decimal | None = None

    @classmethod
    def from_strings(cls, min_text: str | None, max_text: str | None) -> BoundedRange:
        """Build a range from decimal strings; ``None`` or ``""`` means unbounded.

        Raises:
            InvalidRangeDefinition: If a non-empty bound is not a decimal.
        """
        return cls(_parse_bound(min_text), _parse_bound(max_text))

    @classmethod
    def from_integers(cls, min_value: int | None, max_value: int | None) -> BoundedRange:
        """Build a range from integer bounds.

        ``None`` and the 64-bit extremes (``LONG_MIN_VALUE`` for *min_value*,
        ``LONG_MAX_VALUE`` for *max_value*) both mean unbounded on that side.
        """
        lower = None if min_value is None or min_value == LONG_MIN_VALUE else Decimal(min_value)
        upper = None if max_value is None or max_value == LONG_MAX_VALUE else Decimal(max_value)
        return cls(lower, upper)

    @property
    def has_min(self) -> bool:
        return self.min is not None

    @property
    def has_max(self) -> bool:
        return self.max is not None

    @property
    def min_string(self) -> str | None:
        """Lower bound in plain notation (no exponent), or None if unbounded."""
        return _plain(self.min)

    @property
    def max_string(self) -> str | None:
        """Upper bound in plain notation (no exponent), or None if unbounded."""
        return _plain(self.max)

    def includes(self, value: Decimal) -> bool:
        """Whether *value* lies within the range, both ends inclusive."""
        if self.min is not None and value < self.min:
            return False
        return self.max is None or value <= self.max

    def __contains__(self, value: object) -> bool:
        return self.includes(to_decimal(value))

    def __str__(self) -> str:
        lower = self.min_string if self.min is not None else "-inf"
        upper = self.max_string if self.max is not None else "+inf"
        return f"[{lower}, {upper}]"


def _parse_bound(text: str | None) -> Decimal | None:
    if text is None or text == "":
        return None
    return parse_decimal(text)
