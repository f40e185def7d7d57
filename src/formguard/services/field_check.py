"""FieldCheckService: run one validation pass over a single field.

A pass mirrors what the form-binding layer does for one property:

1. optional coercion: ``is_convertible`` (records a message on failure),
   then ``convert``;
2. optional range validation against a rule given as a configuration
   mapping (``{"min", "max", "messageId"}``);
3. rendering of every recorded message through the message catalog.

Configuration errors (bad bounds, wrong value types) come back as
``ok=False`` results with a stable error code; they are never mixed into the
recorded validation messages.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import structlog

from formguard.domain.errors import (
    FormguardConfigurationError,
    InvalidRangeDefinition,
    UnsupportedConversionType,
    UnsupportedValueType,
)
from formguard.domain.range import parse_decimal
from formguard.plugins.builtins.standard import StandardPlugin
from formguard.plugins.manager import PluginManager
from formguard.services.result import ServiceError, ServiceResult
from formguard.validation.context import ValidationContext
from formguard.validation.messages import MessageCatalog

if TYPE_CHECKING:
    from formguard.config.models import FormguardConfig
    from formguard.config.settings import FormguardSettings
    from formguard.convertors.base import Convertor
    from formguard.validation.messages import MessageResolver
    from formguard.validators.base import RangeValidator

log = structlog.get_logger(__name__)

_ERROR_CODES: dict[type[FormguardConfigurationError], str] = {
    InvalidRangeDefinition: "INVALID_RANGE",
    UnsupportedValueType: "UNSUPPORTED_VALUE",
    UnsupportedConversionType: "UNSUPPORTED_CONVERSION",
}


def parse_number(raw: Any) -> Any:
    """Turn numeric form text into ``int`` or ``Decimal``; other values pass through.

    A one-element string array is unwrapped first.

    Raises:
        ValueError: If *raw* is text that is not a decimal number.
    """
    if isinstance(raw, (list, tuple)) and len(raw) == 1 and isinstance(raw[0], str):
        raw = raw[0]
    if not isinstance(raw, str):
        return raw
    try:
        number = parse_decimal(raw)
    except InvalidRangeDefinition as exc:
        msg = f"not a number: {raw!r}"
        raise ValueError(msg) from exc
    if "." not in raw and "e" not in raw.lower():
        return int(number)
    return number


def _json_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, tuple):
        return list(value)
    return value


class FieldCheckService:
    """Validate single fields with a fixed set of validators and convertors.

    Args:
        validators: rule kind -> validator.
        convertors: target kind -> convertor.
        resolver: Renders recorded messages.
        locale: Locale passed to *resolver*; None means its default.
    """

    def __init__(
        self,
        *,
        validators: Mapping[str, RangeValidator],
        convertors: Mapping[str, Convertor],
        resolver: MessageResolver,
        locale: str | None = None,
    ) -> None:
        self._validators = dict(validators)
        self._convertors = dict(convertors)
        self._resolver = resolver
        self._locale = locale

    @classmethod
    def from_config(
        cls,
        config: FormguardConfig | FormguardSettings,
        *,
        plugins: Sequence[object] = (),
        discover: bool = False,
        locale: str | None = None,
    ) -> FieldCheckService:
        """Wire the built-in plugin, then *plugins*, then entry-point plugins.

        Later registrations override earlier ones for the same kind.
        """
        pm = PluginManager()
        pm.register_plugin(StandardPlugin(config), name="formguard-standard")
        for plugin in plugins:
            pm.register_plugin(plugin)
        if discover:
            loaded = pm.discover_and_load()
            log.debug("field_check.plugins_loaded", plugins=loaded)
        return cls(
            validators=pm.collect_validators(),
            convertors=pm.collect_convertors(),
            resolver=MessageCatalog.from_config(config.messages),
            locale=locale,
        )

    @property
    def rule_kinds(self) -> list[str]:
        return sorted(self._validators)

    @property
    def convertor_kinds(self) -> list[str]:
        return sorted(self._convertors)

    def check_field(
        self,
        *,
        property_name: str,
        value: Any,
        display_name: Any = None,
        convertor: str | None = None,
        rule_kind: str | None = None,
        rule: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        """Coerce and/or range-check *value* for *property_name*."""
        op = "check_field"
        shown_name = display_name if display_name is not None else property_name
        context = ValidationContext()

        try:
            if convertor is not None:
                conv = self._convertors.get(convertor)
                if conv is None:
                    return self._error(op, "UNKNOWN_CONVERTOR", f"No convertor {convertor!r}")
                if not conv.is_convertible(context, property_name, shown_name, value):
                    return self._validated(op, property_name, value, context)
                value = conv.convert(context, property_name, value)

            if rule_kind is not None:
                validator = self._validators.get(rule_kind)
                if validator is None:
                    return self._error(op, "UNKNOWN_RULE", f"No validator {rule_kind!r}")
                try:
                    value = parse_number(value)
                except ValueError as exc:
                    return self._error(op, "INVALID_INPUT", str(exc))
                validator.validate(context, property_name, shown_name, rule or {}, value)
        except FormguardConfigurationError as exc:
            code = _ERROR_CODES.get(type(exc), "CONFIGURATION_ERROR")
            log.warning("field_check.configuration_error", property=property_name, code=code)
            return self._error(op, code, str(exc), detail={"property": property_name})

        return self._validated(op, property_name, value, context)

    def _validated(
        self, op: str, property_name: str, value: Any, context: ValidationContext
    ) -> ServiceResult:
        messages = []
        warnings: list[str] = []
        for message in context.messages:
            entry = message.to_dict()
            try:
                entry["text"] = message.format(self._resolver, self._locale)
            except KeyError:
                entry["text"] = None
                warnings.append(f"No message template for {message.message_id!r}")
            messages.append(entry)
        if not context.is_valid:
            log.debug("field_check.invalid", property=property_name, count=len(messages))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "property": property_name,
                "valid": context.is_valid,
                "value": _json_value(value),
                "messages": messages,
            },
            warnings=warnings,
        )

    @staticmethod
    def _error(
        op: str, code: str, message: str, *, detail: dict[str, Any] | None = None
    ) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
