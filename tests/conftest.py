"""Shared pytest fixtures for formguard tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from formguard.config.models import (
    RANGE_MAX_MESSAGE_ID,
    RANGE_MIN_MAX_MESSAGE_ID,
    RANGE_MIN_MESSAGE_ID,
    FormguardConfig,
)
from formguard.services.field_check import FieldCheckService
from formguard.validation.context import ValidationContext
from formguard.validators.decimal_range import DecimalRangeValidator
from formguard.validators.number_range import NumberRangeValidator


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def context() -> ValidationContext:
    """Fresh validation context for one pass."""
    return ValidationContext()


@pytest.fixture
def number_validator() -> NumberRangeValidator:
    return NumberRangeValidator(
        min_message_id=RANGE_MIN_MESSAGE_ID,
        max_message_id=RANGE_MAX_MESSAGE_ID,
        max_and_min_message_id=RANGE_MIN_MAX_MESSAGE_ID,
    )


@pytest.fixture
def decimal_validator() -> DecimalRangeValidator:
    return DecimalRangeValidator(
        min_message_id=RANGE_MIN_MESSAGE_ID,
        max_message_id=RANGE_MAX_MESSAGE_ID,
        max_and_min_message_id=RANGE_MIN_MAX_MESSAGE_ID,
    )


@pytest.fixture
def service() -> FieldCheckService:
    """Service wired with the default configuration and no entry-point plugins."""
    return FieldCheckService.from_config(FormguardConfig())


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory with no config discovery overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FORMGUARD_CONFIG", raising=False)
    monkeypatch.delenv("FORMGUARD_LOCALE", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI configures logging on every invocation; handlers bound to a
    test's captured stream must not outlive it.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    fg = logging.getLogger("formguard")
    fg_level = fg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    fg.setLevel(fg_level)
