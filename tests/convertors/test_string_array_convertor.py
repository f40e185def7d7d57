"""Tests for StringArrayConvertor."""

from decimal import Decimal
from typing import Any

import pytest

from formguard.convertors.base import Convertor, is_string_array
from formguard.convertors.string_array import StringArrayConvertor
from formguard.domain.errors import UnsupportedConversionType
from formguard.validation.context import ValidationContext


@pytest.fixture
def convertor() -> StringArrayConvertor:
    return StringArrayConvertor()


class TestIsStringArray:
    @pytest.mark.parametrize("value", [[], ["a"], ("a", "b"), [None], ["a", None]])
    def test_string_arrays(self, value: Any) -> None:
        assert is_string_array(value)

    @pytest.mark.parametrize("value", ["abc", None, [1, 2], {"a": "b"}, Decimal(1)])
    def test_not_string_arrays(self, value: Any) -> None:
        assert not is_string_array(value)


class TestConvertible:
    @pytest.mark.parametrize("value", [["1", "2"], ["1", "2", "3"], [None], [], None])
    def test_identity(
        self, convertor: StringArrayConvertor, context: ValidationContext, value: Any
    ) -> None:
        assert convertor.is_convertible(context, "param", "param", value)
        assert convertor.convert(context, "param", value) is value
        assert context.is_valid


class TestNotConvertible:
    @pytest.mark.parametrize("value", [[1, 2, 3], ["1", 2], "string", Decimal(1), 1])
    def test_raises(
        self, convertor: StringArrayConvertor, context: ValidationContext, value: Any
    ) -> None:
        with pytest.raises(UnsupportedConversionType, match="Convert type was not supported"):
            convertor.is_convertible(context, "prop", "prop", value)
        assert context.is_valid

    def test_is_a_type_error(
        self, convertor: StringArrayConvertor, context: ValidationContext
    ) -> None:
        with pytest.raises(TypeError, match=r"type = builtins\.str"):
            convertor.is_convertible(context, "prop", "prop", "string")


def test_satisfies_protocol(convertor: StringArrayConvertor) -> None:
    assert isinstance(convertor, Convertor)
