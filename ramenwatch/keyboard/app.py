"""App-level keyboard bindings.

This module contains the key names the dashboard reacts to and the Textual
Binding objects that forward them to the state machine.
"""

from typing import Final

from textual.binding import Binding

# ============================================================================
# Key groups understood by the dashboard state machine
# ============================================================================

QUIT_KEYS: Final = frozenset({"q", "ctrl+c"})
UP_KEYS: Final = frozenset({"up", "k"})
DOWN_KEYS: Final = frozenset({"down", "j"})

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("q", "dashboard_key('q')", "Quit", priority=True),
    Binding("ctrl+c", "dashboard_key('ctrl+c')", "Quit", show=False, priority=True),
    Binding("up", "dashboard_key('up')", "Up", priority=True),
    Binding("k", "dashboard_key('k')", "Up", show=False, priority=True),
    Binding("down", "dashboard_key('down')", "Down", priority=True),
    Binding("j", "dashboard_key('j')", "Down", show=False, priority=True),
]

__all__ = [
    "APP_BINDINGS",
    "DOWN_KEYS",
    "QUIT_KEYS",
    "UP_KEYS",
]
