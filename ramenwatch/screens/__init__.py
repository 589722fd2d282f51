"""RamenWatch TUI Screens.

Domain Structure:
    - dashboard/ - Hub and DR cluster overview (single-screen dashboard)
"""

from __future__ import annotations

from ramenwatch.screens.dashboard import DashboardScreen

__all__ = [
    "DashboardScreen",
]
