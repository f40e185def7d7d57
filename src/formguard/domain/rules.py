"""Range rule descriptors.

A range rule is anything exposing ``min``, ``max`` and ``message_id`` plus a
way to build its BoundedRange. Two forms exist for each validator:

- the static descriptor, declared once next to a field
  (``NumberRange(min=1, max=10)``);
- the dynamic configuration mapping (``{"min": 1, "max": 10,
  "messageId": "..."}``), adapted into the same descriptor type by
  ``from_params``.

INVARIANT: both forms normalise to one descriptor model, so validators see a
single type and the two invocation styles cannot drift apart.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, Self, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from formguard.domain.errors import InvalidRangeDefinition
from formguard.domain.range import LONG_MAX_VALUE, LONG_MIN_VALUE, BoundedRange

PARAM_MIN = "min"
PARAM_MAX = "max"
PARAM_MESSAGE_ID = "messageId"


@runtime_checkable
class RangeRule(Protocol):
    """Provider of range bounds and an optional message override."""

    @property
    def message_id(self) -> str: ...

    @property
    def has_min(self) -> bool: ...

    @property
    def has_max(self) -> bool: ...

    def to_range(self) -> BoundedRange: ...


class RangeRuleModel(BaseModel):
    """Common base for the static range descriptors."""

    model_config = ConfigDict(frozen=True, strict=True)

    message_id: str = ""

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> Self:
        """Adapt a configuration mapping into this descriptor.

        Missing ``min``/``max`` keys (or ``None`` values) fall back to the
        unset sentinel; a missing or blank ``messageId`` means no override.

        Raises:
            InvalidRangeDefinition: If a value has the wrong type for this rule.
        """
        data: dict[str, Any] = {}
        for key in (PARAM_MIN, PARAM_MAX):
            if params.get(key) is not None:
                data[key] = params[key]
        message_id = params.get(PARAM_MESSAGE_ID)
        if message_id:
            data["message_id"] = message_id
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            msg = f"invalid {cls.__name__} definition: {params!r}"
            raise InvalidRangeDefinition(msg) from exc

    @property
    def has_message_id(self) -> bool:
        return bool(self.message_id)


class NumberRange(RangeRuleModel):
    """Integer-bounded range rule.

    ``LONG_MIN_VALUE`` / ``LONG_MAX_VALUE`` are the "unset" defaults, so a
    rule may declare only one side: ``NumberRange(min=0)``.
    """

    min: int = Field(default=LONG_MIN_VALUE, ge=LONG_MIN_VALUE, le=LONG_MAX_VALUE)
    max: int = Field(default=LONG_MAX_VALUE, ge=LONG_MIN_VALUE, le=LONG_MAX_VALUE)

    @field_validator("min", mode="before")
    @classmethod
    def _unset_min(cls, value: Any) -> Any:
        return LONG_MIN_VALUE if value is None else value

    @field_validator("max", mode="before")
    @classmethod
    def _unset_max(cls, value: Any) -> Any:
        return LONG_MAX_VALUE if value is None else value

    @property
    def has_min(self) -> bool:
        return self.min != LONG_MIN_VALUE

    @property
    def has_max(self) -> bool:
        return self.max != LONG_MAX_VALUE

    def to_range(self) -> BoundedRange:
        return BoundedRange.from_integers(self.min, self.max)


class DecimalRange(RangeRuleModel):
    """Decimal-bounded range rule; bounds are decimal strings, ``""`` or None = unset.

    Bounds are kept as declared and only parsed by :meth:`to_range`, so a
    malformed bound surfaces when the rule is first used.
    """

    min: str = ""
    max: str = ""

    @field_validator("min", "max", mode="before")
    @classmethod
    def _unset_bound(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def has_min(self) -> bool:
        return self.min != ""

    @property
    def has_max(self) -> bool:
        return self.max != ""

    def to_range(self) -> BoundedRange:
        """Parse the declared bounds.

        Raises:
            InvalidRangeDefinition: ``"invalid decimal range."`` chained from
                the parse failure.
        """
        try:
            return BoundedRange.from_strings(self.min, self.max)
        except InvalidRangeDefinition as exc:
            raise InvalidRangeDefinition("invalid decimal range.", bound=exc.bound) from exc
