"""Keyboard bindings module.

This module provides the keyboard bindings for the RamenWatch TUI:

- app: App-level bindings (APP_BINDINGS) and the key groups the
  dashboard state machine understands.
"""

from ramenwatch.keyboard.app import APP_BINDINGS, DOWN_KEYS, QUIT_KEYS, UP_KEYS

__all__ = [
    "APP_BINDINGS",
    "DOWN_KEYS",
    "QUIT_KEYS",
    "UP_KEYS",
]
