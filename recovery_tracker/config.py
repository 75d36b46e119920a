"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``RECOVERY_TRACKER_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The upstream data-source endpoint lives in ``AppConfig.api.base_url`` and is
handed to ``SpaceXClient`` at construction time — no module reads it from the
environment directly.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_API_URL = "https://api.spacexdata.com/v4"

# ── Sub-config models ─────────────────────────────────────────────────────────


class ApiConfig(BaseModel):
    """SpaceX REST API connection settings."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_API_URL
    timeout_seconds: float = 10.0
    use_fixture: bool = False

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got '{v}'.")
        return v.rstrip("/")

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {v}.")
        return v


class ReportConfig(BaseModel):
    """Row limits for ranked and recency-truncated report views."""

    model_config = ConfigDict(frozen=True)

    top_reused_n: int = 5
    recent_recoveries_n: int = 10
    recent_failures_n: int = 10
    dashboard_top_cores_n: int = 15
    dashboard_recent_n: int = 15

    @field_validator(
        "top_reused_n",
        "recent_recoveries_n",
        "recent_failures_n",
        "dashboard_top_cores_n",
        "dashboard_recent_n",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Report row limits must be >= 1, got {v}.")
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    CLI commands and the dashboard receive an ``AppConfig`` instance built by
    ``load_config()``, which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    api: ApiConfig = ApiConfig()
    report: ReportConfig = ReportConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply RECOVERY_TRACKER_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _env_flag(value: str) -> bool:
    return value.lower() in ("1", "true", "yes")


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply RECOVERY_TRACKER_* env vars to the raw config dict.

    Supported overrides:
      RECOVERY_TRACKER_API_URL      → raw["api"]["base_url"]
      RECOVERY_TRACKER_USE_FIXTURE  → raw["api"]["use_fixture"]
      RECOVERY_TRACKER_LOG_LEVEL    → raw["logging"]["level"]
      RECOVERY_TRACKER_DEBUG        → raw["debug"]
    """
    if api_url := os.environ.get("RECOVERY_TRACKER_API_URL"):
        raw.setdefault("api", {})["base_url"] = api_url

    if use_fixture := os.environ.get("RECOVERY_TRACKER_USE_FIXTURE"):
        raw.setdefault("api", {})["use_fixture"] = _env_flag(use_fixture)

    if log_level := os.environ.get("RECOVERY_TRACKER_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if debug := os.environ.get("RECOVERY_TRACKER_DEBUG"):
        raw["debug"] = _env_flag(debug)

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    return AppConfig(
        api=ApiConfig(**raw.get("api", {})),
        report=ReportConfig(**raw.get("report", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", False),
    )
