"""
Tests for recovery_tracker/config.py.

What we test
------------
- The committed config/default.toml loads and validates.
- local.toml next to the config file deep-merges over it.
- RECOVERY_TRACKER_* environment variables override TOML values.
- Invalid values (non-http URL, non-positive timeout, zero row limit,
  unknown log level) are rejected.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from recovery_tracker.config import (
    DEFAULT_API_URL,
    ApiConfig,
    AppConfig,
    LoggingConfig,
    ReportConfig,
    _deep_merge,
    load_config,
)

_ENV_VARS = (
    "RECOVERY_TRACKER_API_URL",
    "RECOVERY_TRACKER_USE_FIXTURE",
    "RECOVERY_TRACKER_LOG_LEVEL",
    "RECOVERY_TRACKER_DEBUG",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_default_toml_loads(self):
        config = load_config()
        assert isinstance(config, AppConfig)
        assert config.api.base_url == DEFAULT_API_URL
        assert config.report.top_reused_n == 5
        assert config.logging.level == "INFO"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")

    def test_empty_toml_uses_model_defaults(self, tmp_path):
        config = load_config(_write(tmp_path / "c.toml", ""))
        assert config == AppConfig()

    def test_local_toml_overrides(self, tmp_path):
        cfg = _write(tmp_path / "default.toml", "[report]\ntop_reused_n = 5\nrecent_recoveries_n = 7\n")
        _write(tmp_path / "local.toml", "[report]\ntop_reused_n = 3\n")
        config = load_config(cfg)
        assert config.report.top_reused_n == 3
        assert config.report.recent_recoveries_n == 7

    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RECOVERY_TRACKER_API_URL", "http://localhost:6673/v4/")
        monkeypatch.setenv("RECOVERY_TRACKER_USE_FIXTURE", "true")
        monkeypatch.setenv("RECOVERY_TRACKER_LOG_LEVEL", "debug")
        monkeypatch.setenv("RECOVERY_TRACKER_DEBUG", "1")
        config = load_config(_write(tmp_path / "c.toml", "[api]\nuse_fixture = false\n"))
        assert config.api.base_url == "http://localhost:6673/v4"
        assert config.api.use_fixture is True
        assert config.logging.level == "DEBUG"
        assert config.debug is True

    def test_env_flag_false_values(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RECOVERY_TRACKER_USE_FIXTURE", "no")
        config = load_config(_write(tmp_path / "c.toml", "[api]\nuse_fixture = true\n"))
        assert config.api.use_fixture is False

    def test_invalid_value_raises(self, tmp_path):
        with pytest.raises(ValidationError):
            load_config(_write(tmp_path / "c.toml", "[api]\ntimeout_seconds = 0\n"))


class TestSubConfigs:
    def test_base_url_trailing_slash_stripped(self):
        assert ApiConfig(base_url="https://example.test/v4/").base_url == "https://example.test/v4"

    def test_base_url_must_be_http(self):
        with pytest.raises(ValidationError, match="http"):
            ApiConfig(base_url="ftp://example.test")

    @pytest.mark.parametrize("field", ["top_reused_n", "recent_recoveries_n", "dashboard_recent_n"])
    def test_row_limits_positive(self, field):
        with pytest.raises(ValidationError):
            ReportConfig(**{field: 0})

    def test_log_level_normalised(self):
        assert LoggingConfig(level="warning").level == "WARNING"

    def test_log_level_invalid(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_frozen(self):
        with pytest.raises(ValidationError):
            AppConfig().debug = True


def test_deep_merge_nested():
    merged = _deep_merge({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}, "c": 4})
    assert merged == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}
