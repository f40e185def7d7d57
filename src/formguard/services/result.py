"""ServiceResult / ServiceError: what every service call returns.

``ok`` answers "did the call itself work". A field that fails validation is a
working call (``ok=True``) whose data says ``valid: false``; ``ok=False`` is
reserved for configuration errors and bad invocations.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServiceError(BaseModel):
    """Machine-readable ``code`` plus a human ``message``."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False only when the operation could not run.
        op: Operation name, e.g. ``"check_field"``.
        data: Operation payload.
        warnings: Problems that did not stop the operation.
        error: Set when ``ok`` is False.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
