"""Tests for BoundedRange and the decimal helpers."""

from decimal import Decimal

import pytest

from formguard.domain.errors import InvalidRangeDefinition, UnsupportedValueType
from formguard.domain.range import (
    LONG_MAX_VALUE,
    LONG_MIN_VALUE,
    BoundedRange,
    parse_decimal,
    to_decimal,
)


class TestParseDecimal:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", Decimal("0")),
            ("-1.5", Decimal("-1.5")),
            ("+2", Decimal("2")),
            (".5", Decimal("0.5")),
            ("1.", Decimal("1")),
            ("1e3", Decimal("1000")),
            ("0.00001", Decimal("0.00001")),
        ],
    )
    def test_valid(self, text: str, expected: Decimal) -> None:
        assert parse_decimal(text) == expected

    @pytest.mark.parametrize(
        "text", ["a", " ", " 1", "1 ", "1\n", "\n1", "1_000", "NaN", "Infinity", ""]
    )
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidRangeDefinition) as exc_info:
            parse_decimal(text)
        assert exc_info.value.bound == text


class TestToDecimal:
    def test_int_is_exact(self) -> None:
        assert to_decimal(LONG_MAX_VALUE) == Decimal(LONG_MAX_VALUE)

    def test_float_uses_shortest_repr(self) -> None:
        assert to_decimal(0.1) == Decimal("0.1")

    def test_decimal_passes_through(self) -> None:
        value = Decimal("0.999991")
        assert to_decimal(value) is value

    @pytest.mark.parametrize(
        "value",
        ["1", True, None, float("nan"), float("inf"), Decimal("NaN"), Decimal("-Infinity")],
    )
    def test_rejects_non_numbers(self, value: object) -> None:
        with pytest.raises(UnsupportedValueType):
            to_decimal(value)

    def test_error_names_the_type(self) -> None:
        with pytest.raises(UnsupportedValueType, match=r"actual type:builtins\.str"):
            to_decimal("a")


class TestBoundedRange:
    def test_unbounded_contains_everything(self) -> None:
        rng = BoundedRange()
        assert not rng.has_min
        assert not rng.has_max
        assert 10**30 in rng
        assert -(10**30) in rng

    def test_bounds_are_inclusive(self) -> None:
        rng = BoundedRange.from_strings("0.00001", "0.99999")
        assert Decimal("0.00001") in rng
        assert Decimal("0.99999") in rng
        assert Decimal("0.000001") not in rng
        assert Decimal("0.999991") not in rng

    def test_float_boundary_compares_exactly(self) -> None:
        rng = BoundedRange.from_strings("0.00001", "0.99999")
        assert 0.99 in rng
        assert 0.999991 not in rng

    def test_empty_string_means_unbounded(self) -> None:
        rng = BoundedRange.from_strings("", "1")
        assert rng.min is None
        assert rng.max == Decimal("1")

    def test_from_strings_rejects_garbage(self) -> None:
        with pytest.raises(InvalidRangeDefinition):
            BoundedRange.from_strings("1", " ")

    def test_from_integers_sentinels(self) -> None:
        rng = BoundedRange.from_integers(LONG_MIN_VALUE, LONG_MAX_VALUE)
        assert rng == BoundedRange()

    def test_from_integers_one_side(self) -> None:
        rng = BoundedRange.from_integers(0, LONG_MAX_VALUE)
        assert rng.has_min
        assert not rng.has_max
        assert -1 not in rng
        assert LONG_MAX_VALUE in rng

    def test_includes_rejects_str_via_contains(self) -> None:
        with pytest.raises(UnsupportedValueType):
            "1" in BoundedRange()  # noqa: B015

    def test_plain_strings(self) -> None:
        rng = BoundedRange.from_strings("1e3", "")
        assert rng.min_string == "1000"
        assert rng.max_string is None

    def test_str(self) -> None:
        assert str(BoundedRange.from_strings("1", "")) == "[1, +inf]"
        assert str(BoundedRange.from_strings("", "2.5")) == "[-inf, 2.5]"

    def test_frozen(self) -> None:
        rng = BoundedRange()
        with pytest.raises(AttributeError):
            rng.min = Decimal(1)  # type: ignore[misc]
