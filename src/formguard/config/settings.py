"""FormguardSettings: one object for CLI flags, env vars and ``formguard.toml``.

Precedence, highest first: keyword arguments (CLI flags), ``FORMGUARD_*``
env vars (``__`` separates nested keys, e.g.
``FORMGUARD_BOOLEAN__ALLOW_NULL_VALUE``), the TOML file, code defaults.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from formguard.config.discovery import find_config
from formguard.config.models import (
    BooleanConversionConfig,
    MessagesConfig,
    RangeMessagesConfig,
)

# The TOML path cannot be passed through BaseSettings.__init__, so from_cli
# parks it here for settings_customise_sources to pick up.
_pending = threading.local()


def _read_toml(path: Path | None) -> dict[str, Any]:
    if path is None or not path.is_file():
        return {}
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a parsed ``formguard.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = _read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class FormguardSettings(BaseSettings):
    """Resolved settings for one CLI invocation.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        locale: Locale used to render messages; None means the catalog default.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FORMGUARD_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False
    locale: str | None = None

    number_range: RangeMessagesConfig = Field(default_factory=RangeMessagesConfig)
    decimal_range: RangeMessagesConfig = Field(default_factory=RangeMessagesConfig)
    boolean: BooleanConversionConfig = Field(default_factory=BooleanConversionConfig)
    messages: MessagesConfig = Field(default_factory=MessagesConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_source = TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None))
        return init_settings, env_settings, toml_source

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> FormguardSettings:
        """Build settings for a CLI run.

        An explicit *config_path* skips discovery; otherwise ``formguard.toml``
        is looked up from *cwd*. Flags whose value is None are ignored so an
        unset CLI flag never hides an env or TOML value.

        Raises:
            click.ClickException: If the TOML file cannot be parsed.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(cwd)

        overrides = {name: value for name, value in cli_flags.items() if value is not None}
        _pending.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _pending.toml_path = None
