"""Main application class for RamenWatch TUI."""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding
from textual.events import Resize
from textual.message import Message
from textual.worker import Worker

from ramenwatch.constants import APP_TITLE
from ramenwatch.controllers.cluster import ClientFactory, make_factory, poll_all
from ramenwatch.controllers.dashboard import (
    BatchArrived,
    Command,
    Event,
    Init,
    KeyPressed,
    Resized,
    ScheduleTick,
    StartPollBatch,
    Stop,
    TickElapsed,
    transition,
)
from ramenwatch.keyboard.app import APP_BINDINGS
from ramenwatch.models.core.status import BatchResult, PollFailure
from ramenwatch.models.core.target import TargetRegistry
from ramenwatch.models.state.app_settings import AppSettings
from ramenwatch.models.state.dashboard_state import DashboardState
from ramenwatch.screens.dashboard import DashboardScreen

logger = logging.getLogger(__name__)


# ============================================================================
# Messages posted back into the app's queue
# ============================================================================


class BatchCompleted(Message):
    """A background poll batch finished."""

    def __init__(self, batch: BatchResult) -> None:
        super().__init__()
        self.batch = batch


class TickFired(Message):
    """The one-shot refresh timer fired."""


class RamenWatchApp(App[None]):
    """Single-screen dashboard for a Ramen DR hub and its managed clusters.

    The app owns the current ``DashboardState``. Terminal input, timer ticks
    and finished poll batches all arrive as messages on the app's queue and
    are turned into state machine events in ``apply_event``, one at a time.
    """

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS
    POLL_WORKER_GROUP = "poll"

    def __init__(
        self,
        registry: TargetRegistry,
        *,
        settings: AppSettings | None = None,
        factory: ClientFactory | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.registry = registry
        self.settings = settings or AppSettings()
        self.factory = factory or make_factory(self.settings)
        self.state = DashboardState.initial(registry)
        self._dashboard: DashboardScreen | None = None

    # ------------------------------------------------------------------
    # Event intake
    # ------------------------------------------------------------------

    async def on_mount(self) -> None:
        """Show the dashboard and kick off the first poll cycle."""
        self._dashboard = DashboardScreen(self.state)
        await self.push_screen(self._dashboard)
        self.apply_event(Resized(self.size.width, self.size.height))
        self.apply_event(Init())

    def on_resize(self, event: Resize) -> None:
        self.apply_event(Resized(event.size.width, event.size.height))

    def action_dashboard_key(self, key: str) -> None:
        self.apply_event(KeyPressed(key))

    def on_tick_fired(self, _: TickFired) -> None:
        self.apply_event(TickElapsed())

    def on_batch_completed(self, message: BatchCompleted) -> None:
        self.apply_event(BatchArrived(message.batch))

    # ------------------------------------------------------------------
    # State machine driver
    # ------------------------------------------------------------------

    def apply_event(self, event: Event) -> list[Command]:
        """Apply one event, redraw, then run the resulting commands."""
        previous = self.state
        self.state, commands = transition(
            self.state,
            event,
            tick_interval=self.settings.refresh_interval,
        )
        if self.state is not previous and self._dashboard is not None:
            self._dashboard.show(self.state)
        for command in commands:
            self._execute(command)
        return commands

    def _execute(self, command: Command) -> None:
        if isinstance(command, StartPollBatch):
            self._start_poll_batch(command.generation)
        elif isinstance(command, ScheduleTick):
            self.set_timer(command.delay, self._post_tick, name="refresh-tick")
        elif isinstance(command, Stop):
            self._stop()
        else:
            raise TypeError(f"unhandled dashboard command: {command!r}")

    def _post_tick(self) -> None:
        self.post_message(TickFired())

    def _start_poll_batch(self, generation: int) -> Worker[None]:
        logger.debug("Starting poll batch %d", generation)
        return self.run_worker(
            self._poll_batch(generation),
            name=f"poll-batch-{generation}",
            group=self.POLL_WORKER_GROUP,
            exclusive=False,
            exit_on_error=False,
        )

    async def _poll_batch(self, generation: int) -> None:
        try:
            batch = await poll_all(
                self.registry,
                self.factory,
                settings=self.settings,
                generation=generation,
            )
        except Exception as exc:
            # Always post a batch: the machine polls again only once it arrives.
            logger.exception("Poll batch %d failed", generation)
            reason = str(exc).strip() or type(exc).__name__
            batch = BatchResult(
                generation=generation,
                outcomes=tuple(
                    (target, PollFailure(reason=reason, generation=generation))
                    for target in self.registry
                ),
            )
        self.post_message(BatchCompleted(batch))

    def _stop(self) -> None:
        logger.debug("Stopping dashboard")
        self.exit()


__all__ = [
    "BatchCompleted",
    "RamenWatchApp",
    "TickFired",
]
