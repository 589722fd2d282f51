"""State models: settings and the dashboard snapshot."""

from ramenwatch.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigManager,
)
from ramenwatch.models.state.dashboard_state import DashboardState

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "DashboardState",
]
