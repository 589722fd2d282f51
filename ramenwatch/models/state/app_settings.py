"""Application settings models and loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ramenwatch.constants.defaults import (
    COMMAND_TIMEOUT_DEFAULT,
    LOG_LEVEL_DEFAULT,
    NAMESPACE_ALLOWLIST_DEFAULT,
    POLL_TIMEOUT_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    REQUEST_TIMEOUT_DEFAULT,
    RESOURCE_KIND_DEFAULT,
)
from ramenwatch.constants.limits import COMMAND_TIMEOUT_MIN, REFRESH_INTERVAL_MIN

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    # Kubeconfig paths
    hub_kubeconfig: str = ""
    dr1_kubeconfig: str = ""
    dr2_kubeconfig: str = ""

    # Refresh cycle
    refresh_interval: float = Field(
        default=REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN
    )  # seconds

    # Remote queries
    namespace_allowlist: list[str] = Field(
        default_factory=lambda: list(NAMESPACE_ALLOWLIST_DEFAULT)
    )
    resource_kind: str = RESOURCE_KIND_DEFAULT
    request_timeout: str = REQUEST_TIMEOUT_DEFAULT
    command_timeout: int = Field(default=COMMAND_TIMEOUT_DEFAULT, ge=COMMAND_TIMEOUT_MIN)
    poll_timeout: float = Field(default=POLL_TIMEOUT_DEFAULT, gt=0)

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = ""

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = str(value).strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"unsupported log level: {value!r}")
        return normalized

    @field_validator("resource_kind")
    @classmethod
    def _require_resource_kind(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("resource_kind must not be empty")
        return value


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigManager:
    """Read-only loader for the optional YAML settings file."""

    @staticmethod
    def load(path: str | Path | None = None) -> AppSettings:
        """Load settings from ``path``; defaults when no path is given.

        Raises:
            ConfigLoadError: The file is missing, is not valid YAML, is not a
                mapping, or fails validation.
        """
        if path is None:
            return AppSettings()

        config_path = Path(path).expanduser()
        try:
            raw_text = config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigLoadError(f"cannot read config file {config_path}: {exc}") from exc

        try:
            document = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ConfigLoadError(f"invalid YAML in {config_path}: {exc}") from exc

        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ConfigLoadError(f"config file {config_path} must contain a mapping")

        try:
            settings = AppSettings.model_validate(document)
        except ValidationError as exc:
            raise ConfigLoadError(f"invalid settings in {config_path}: {exc}") from exc

        logger.debug("Loaded settings from %s", config_path)
        return settings

    @staticmethod
    def apply_overrides(settings: AppSettings, **overrides: Any) -> AppSettings:
        """Return a validated copy with every non-None override applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return settings
        merged = settings.model_dump()
        merged.update(updates)
        try:
            return AppSettings.model_validate(merged)
        except ValidationError as exc:
            raise ConfigLoadError(f"invalid command-line settings: {exc}") from exc


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]
