"""Command group: validate a single field value."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from formguard.commands._base import FormguardGroup
from formguard.domain.rules import PARAM_MAX, PARAM_MESSAGE_ID, PARAM_MIN
from formguard.validators.decimal_range import DecimalRangeValidator
from formguard.validators.number_range import NumberRangeValidator

if TYPE_CHECKING:
    from formguard.commands._context import AppContext

_CHECK_EXAMPLES = """\
  formguard check number 42 --min 1 --max 100
  formguard check decimal 12.345 --max 12.34
  formguard check boolean true
  formguard --locale ja check number 0 --min 1"""

_strict_option = click.option(
    "--strict", is_flag=True, help="Exit with code 2 when the value is invalid."
)
_property_option = click.option(
    "--property", "property_name", default="value", show_default=True, help="Property name."
)
_display_name_option = click.option(
    "--display-name", default=None, help="Name shown in messages (defaults to the property)."
)


def _rule(min_value: Any, max_value: Any, message_id: str | None) -> dict[str, Any]:
    rule: dict[str, Any] = {PARAM_MIN: min_value, PARAM_MAX: max_value}
    if message_id:
        rule[PARAM_MESSAGE_ID] = message_id
    return rule


@click.group(cls=FormguardGroup, examples=_CHECK_EXAMPLES)
def check() -> None:
    """Validate one field value against a rule or a coercion."""


@check.command(
    examples="""\
  formguard check number 42 --min 1 --max 100
  formguard check number -5 --min 0
  formguard check number 101 --max 100 --message-id custom.too_big
  formguard --json check number 7 --min 10 --strict"""
)
@click.argument("value")
@click.option("--min", "min_value", type=int, default=None, help="Inclusive lower bound.")
@click.option("--max", "max_value", type=int, default=None, help="Inclusive upper bound.")
@click.option("--message-id", default=None, help="Message id overriding the default choice.")
@_property_option
@_display_name_option
@_strict_option
@click.pass_obj
def number(
    app: AppContext,
    value: str,
    min_value: int | None,
    max_value: int | None,
    message_id: str | None,
    property_name: str,
    display_name: str | None,
    strict: bool,
) -> None:
    """Check an integer range (bounds are whole numbers)."""
    result = app.service.check_field(
        property_name=property_name,
        value=value,
        display_name=display_name,
        rule_kind=NumberRangeValidator.rule_kind,
        rule=_rule(min_value, max_value, message_id),
    )
    app.emit(result, strict=strict)


@check.command(
    examples="""\
  formguard check decimal 12.345 --max 12.34
  formguard check decimal -0.5 --min -1.0 --max 1.0
  formguard check decimal 1e3 --max 999.99"""
)
@click.argument("value")
@click.option("--min", "min_value", default=None, help="Inclusive lower bound (decimal text).")
@click.option("--max", "max_value", default=None, help="Inclusive upper bound (decimal text).")
@click.option("--message-id", default=None, help="Message id overriding the default choice.")
@_property_option
@_display_name_option
@_strict_option
@click.pass_obj
def decimal(
    app: AppContext,
    value: str,
    min_value: str | None,
    max_value: str | None,
    message_id: str | None,
    property_name: str,
    display_name: str | None,
    strict: bool,
) -> None:
    """Check an arbitrary-precision decimal range."""
    result = app.service.check_field(
        property_name=property_name,
        value=value,
        display_name=display_name,
        rule_kind=DecimalRangeValidator.rule_kind,
        rule=_rule(min_value, max_value, message_id),
    )
    app.emit(result, strict=strict)


@check.command(
    examples="""\
  formguard check boolean true
  formguard check boolean FALSE
  formguard check boolean yes --strict
  formguard check boolean --disallow-null"""
)
@click.argument("values", nargs=-1)
@click.option("--disallow-null", is_flag=True, help="Treat a missing value as invalid.")
@_property_option
@_display_name_option
@_strict_option
@click.pass_obj
def boolean(
    app: AppContext,
    values: tuple[str, ...],
    disallow_null: bool,
    property_name: str,
    display_name: str | None,
    strict: bool,
) -> None:
    """Coerce form text to a boolean.

    Several VALUES form a string array; only the first one is read. No
    VALUES means the field was not submitted.
    """
    service = app.service
    if disallow_null:
        settings = app.settings
        boolean_config = settings.boolean.model_copy(update={"allow_null_value": False})
        service = app.build_service(settings.model_copy(update={"boolean": boolean_config}))
    result = service.check_field(
        property_name=property_name,
        value=list(values) if values else None,
        display_name=display_name,
        convertor="boolean",
    )
    app.emit(result, strict=strict)
