"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from formguard.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config, load_config
from formguard.config.models import RANGE_MIN_MESSAGE_ID


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_in_start_dir(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config(tmp_path) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert find_config(tmp_path) == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path: Path) -> None:
        config = load_config(cwd=tmp_path)
        assert config.number_range.min_message_id == RANGE_MIN_MESSAGE_ID

    def test_reads_sections(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text(
            '[decimal_range]\nmax_message_id = "rate.max"\n'
            "[boolean]\nallow_null_value = false\n"
            '[messages]\ndefault_locale = "ja"\n'
        )
        config = load_config(path)
        assert config.decimal_range.max_message_id == "rate.max"
        assert config.boolean.allow_null_value is False
        assert config.messages.default_locale == "ja"
