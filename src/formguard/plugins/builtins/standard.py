"""Built-in plugin registering the standard validators and convertors."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

from formguard.convertors.boolean import BooleanConvertor
from formguard.convertors.string_array import StringArrayConvertor
from formguard.validators.decimal_range import DecimalRangeValidator
from formguard.validators.number_range import NumberRangeValidator

if TYPE_CHECKING:
    from formguard.config.models import FormguardConfig
    from formguard.config.settings import FormguardSettings
    from formguard.convertors.base import Convertor
    from formguard.validators.base import RangeValidator

hookimpl = pluggy.HookimplMarker("formguard")


class StandardPlugin:
    """Wires message ids from config into the built-in validators and convertors.

    Instances are built once; the returned objects are shared by every
    validation pass.
    """

    def __init__(self, config: FormguardConfig | FormguardSettings) -> None:
        number = config.number_range
        decimal = config.decimal_range
        self._validators: dict[str, RangeValidator] = {
            NumberRangeValidator.rule_kind: NumberRangeValidator(
                min_message_id=number.min_message_id,
                max_message_id=number.max_message_id,
                max_and_min_message_id=number.max_and_min_message_id,
            ),
            DecimalRangeValidator.rule_kind: DecimalRangeValidator(
                min_message_id=decimal.min_message_id,
                max_message_id=decimal.max_message_id,
                max_and_min_message_id=decimal.max_and_min_message_id,
            ),
        }
        self._convertors: dict[str, Convertor] = {
            "boolean": BooleanConvertor(
                config.boolean.conversion_failed_message_id,
                allow_null_value=config.boolean.allow_null_value,
            ),
            "string_array": StringArrayConvertor(),
        }

    @hookimpl
    def register_validators(self) -> dict[str, RangeValidator]:
        return dict(self._validators)

    @hookimpl
    def register_convertors(self) -> dict[str, Convertor]:
        return dict(self._convertors)
