"""Locating and reading ``formguard.toml``.

Lookup order: the ``FORMGUARD_CONFIG`` env var, then the nearest
``formguard.toml`` in the start directory or any of its parents.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from formguard.config.models import FormguardConfig

CONFIG_FILENAME = "formguard.toml"
CONFIG_ENV_VAR = "FORMGUARD_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    An env var pointing at a missing file disables the walk-up.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> FormguardConfig:
    """Read *path* (or the discovered file) into a FormguardConfig.

    Without any file the code defaults apply.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        pydantic.ValidationError: If a section has the wrong shape.
    """
    source = path or find_config(cwd)
    if source is None:
        return FormguardConfig()
    with source.open("rb") as fh:
        return FormguardConfig.model_validate(tomllib.load(fh))
