"""Tests for ValidationContext and ValidationMessage."""

from decimal import Decimal

import pytest

from formguard.validation.context import ValidationContext, ValidationMessage
from formguard.validation.messages import MessageCatalog


class TestValidationContext:
    def test_starts_valid(self, context: ValidationContext) -> None:
        assert context.is_valid
        assert context.messages == []
        assert len(context) == 0

    def test_records_in_order(self, context: ValidationContext) -> None:
        context.add_result_message("a", "m1", "A")
        context.add_result_message("b", "m2", "B", 1, 2)
        assert [m.message_id for m in context.messages] == ["m1", "m2"]
        assert context.messages[1].args == ("B", 1, 2)
        assert not context.is_valid

    def test_messages_is_a_copy(self, context: ValidationContext) -> None:
        context.add_result_message("a", "m1")
        context.messages.clear()
        assert len(context) == 1

    def test_messages_for_property(self, context: ValidationContext) -> None:
        context.add_result_message("age", "m1", "Age")
        context.add_result_message("name", "m2", "Name")
        assert [m.message_id for m in context.messages_for("age")] == ["m1"]
        assert context.messages_for("email") == []

    def test_logs_failures(
        self, context: ValidationContext, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("DEBUG", logger="formguard.validation.context"):
            context.add_result_message("age", "range.max", "Age")
        assert "range.max" in caplog.text


class TestValidationMessage:
    def test_format(self) -> None:
        catalog = MessageCatalog({"en": {"m": "{0} must be at most {2}."}})
        message = ValidationMessage("age", "m", ("Age", None, 20))
        assert message.format(catalog) == "Age must be at most 20."

    def test_to_dict_stringifies_decimals(self) -> None:
        message = ValidationMessage("rate", "m", ("Rate", Decimal("0.5"), None))
        assert message.to_dict() == {
            "property": "rate",
            "message_id": "m",
            "args": ["Rate", "0.5", None],
        }

    def test_frozen(self) -> None:
        message = ValidationMessage("age", "m")
        with pytest.raises(AttributeError):
            message.message_id = "x"  # type: ignore[misc]
