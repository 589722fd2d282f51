"""Dashboard screen: a single full-screen frame built by the presenter."""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.css.query import NoMatches, WrongType
from textual.screen import Screen
from textual.widgets import Static

from ramenwatch.models.state.dashboard_state import DashboardState
from ramenwatch.screens.dashboard.config import FRAME_WIDGET_ID
from ramenwatch.screens.dashboard.presenter import build_frame


class DashboardScreen(Screen[None]):
    """Shows the latest dashboard snapshot."""

    DEFAULT_CSS = """
    DashboardScreen {
        background: $background;
        overflow: hidden hidden;
    }

    #dashboard-frame {
        width: 100%;
        height: auto;
    }
    """

    def __init__(self, state: DashboardState | None = None) -> None:
        super().__init__()
        self._state = state

    def compose(self) -> ComposeResult:
        yield Static(
            build_frame(self._state) if self._state is not None else "",
            id=FRAME_WIDGET_ID,
        )

    @property
    def state(self) -> DashboardState | None:
        return self._state

    def show(self, state: DashboardState) -> None:
        """Redraw the frame for ``state``."""
        self._state = state
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{FRAME_WIDGET_ID}", Static).update(build_frame(state))
