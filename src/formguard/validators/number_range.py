"""NumberRangeValidator: integer-bounded range check.

Wiring example (message templates shown for reference)::

    validator = NumberRangeValidator(
        max_message_id="range.max",              # "{0} cannot be greater than {2}."
        max_and_min_message_id="range.min_max",  # "{0} is not in the range {1} through {2}."
        min_message_id="range.min",              # "{0} cannot be lesser than {1}."
    )
    validator.validate(ctx, "sales", "Sales", NumberRange(min=1, max=10), 11)
    validator.validate(ctx, "sales", "Sales", {"min": 0}, -1)

The input may be any number (``int``, ``float``, ``Decimal``); it is compared
through its decimal representation, so ``10.1`` is inside ``[10, 20]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from formguard.domain.rules import NumberRange
from formguard.validators.base import RangeValidator

if TYPE_CHECKING:
    from formguard.domain.range import BoundedRange
    from formguard.domain.rules import RangeRule


class NumberRangeValidator(RangeValidator):
    """Range validator for :class:`NumberRange` rules."""

    rule_kind = "number_range"
    rule_type = NumberRange

    def _message_bounds(self, rule: RangeRule, bounded: BoundedRange) -> tuple[Any, Any]:
        lower = int(bounded.min) if bounded.min is not None else None
        upper = int(bounded.max) if bounded.max is not None else None
        return lower, upper
