"""DecimalRangeValidator: range check with decimal bounds.

Use it for values with a fractional part, e.g. a rate between ``0.00001`` and
``0.99999``::

    validator.validate(ctx, "rate", "Rate", DecimalRange(min="0.00001", max="0.99999"), rate)

Only number-like values are accepted. Input must already have been coerced to
a number upstream; a string reaching this validator raises
UnsupportedValueType rather than being reported as a validation failure.
Bound arguments are passed to the message as their plain decimal strings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from formguard.domain.rules import DecimalRange
from formguard.validators.base import RangeValidator

if TYPE_CHECKING:
    from formguard.domain.range import BoundedRange
    from formguard.domain.rules import RangeRule


class DecimalRangeValidator(RangeValidator):
    """Range validator for :class:`DecimalRange` rules."""

    rule_kind = "decimal_range"
    rule_type = DecimalRange

    def _message_bounds(self, rule: RangeRule, bounded: BoundedRange) -> tuple[Any, Any]:
        return bounded.min_string, bounded.max_string
