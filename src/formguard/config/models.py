"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, formguard.toml only contains
overrides. A fresh project needs no file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Default message ids ---

RANGE_MAX_MESSAGE_ID = "formguard.range.max"
RANGE_MIN_MESSAGE_ID = "formguard.range.min"
RANGE_MIN_MAX_MESSAGE_ID = "formguard.range.min_max"
BOOLEAN_INVALID_MESSAGE_ID = "formguard.boolean.invalid"


def _default_catalog() -> dict[str, dict[str, str]]:
    return {
        "en": {
            RANGE_MAX_MESSAGE_ID: "{0} cannot be greater than {2}.",
            RANGE_MIN_MESSAGE_ID: "{0} cannot be lesser than {1}.",
            RANGE_MIN_MAX_MESSAGE_ID: "{0} is not in the range {1} through {2}.",
            BOOLEAN_INVALID_MESSAGE_ID: "value of {0} is not valid.",
        },
        "ja": {
            RANGE_MAX_MESSAGE_ID: "{0}は{2}以下で入力してください。",
            RANGE_MIN_MESSAGE_ID: "{0}は{1}以上で入力してください。",
            RANGE_MIN_MAX_MESSAGE_ID: "{0}は{1}以上{2}以下で入力してください。",
            BOOLEAN_INVALID_MESSAGE_ID: "{0}が正しくありません。",
        },
    }


# --- formguard.toml sections ---


class RangeMessagesConfig(BaseModel):
    """[number_range] / [decimal_range] sections."""

    model_config = {"frozen": True}

    min_message_id: str = RANGE_MIN_MESSAGE_ID
    max_message_id: str = RANGE_MAX_MESSAGE_ID
    max_and_min_message_id: str = RANGE_MIN_MAX_MESSAGE_ID


class BooleanConversionConfig(BaseModel):
    """[boolean] section."""

    model_config = {"frozen": True}

    conversion_failed_message_id: str = BOOLEAN_INVALID_MESSAGE_ID
    allow_null_value: bool = True


class MessagesConfig(BaseModel):
    """[messages] section.

    ``catalog`` maps locale → message id → template. Entries given in TOML
    replace the defaults for that locale wholesale.
    """

    model_config = {"frozen": True}

    default_locale: str = "en"
    catalog: dict[str, dict[str, str]] = Field(default_factory=_default_catalog)


class FormguardConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    number_range: RangeMessagesConfig = Field(default_factory=RangeMessagesConfig)
    decimal_range: RangeMessagesConfig = Field(default_factory=RangeMessagesConfig)
    boolean: BooleanConversionConfig = Field(default_factory=BooleanConversionConfig)
    messages: MessagesConfig = Field(default_factory=MessagesConfig)
