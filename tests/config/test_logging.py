"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from formguard.config.logging import configure_logging


class TestConfigureLogging:
    def test_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger("formguard").level == logging.WARNING
        assert logging.getLogger().level == logging.WARNING

    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("formguard").level == logging.DEBUG
        assert logging.getLogger("pluggy").level == logging.WARNING

    def test_single_handler(self) -> None:
        configure_logging()
        configure_logging(log_json=True)
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_json_mode_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        structlog.get_logger("formguard.test").warning("field_check.sample", code="X")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "field_check.sample"
        assert payload["code"] == "X"
        assert payload["level"] == "warning"

    def test_stdlib_records_rendered(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("formguard.validation.context").debug("Validation failed for %s", "x")
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["event"] == "Validation failed for x"
