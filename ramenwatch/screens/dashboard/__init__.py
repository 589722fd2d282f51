"""Dashboard screen and its pure presenter."""

from ramenwatch.screens.dashboard.dashboard_screen import DashboardScreen
from ramenwatch.screens.dashboard.presenter import build_frame, render

__all__ = ["DashboardScreen", "build_frame", "render"]
