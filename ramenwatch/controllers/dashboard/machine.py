"""Dashboard state machine.

``transition(state, event)`` is a pure function returning the next state and
the commands the runtime must execute. It never performs I/O, so every
ordering and consistency property can be checked without a terminal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Final

from ramenwatch.constants.enums import DashboardMode
from ramenwatch.constants.timeouts import TICK_INTERVAL
from ramenwatch.controllers.dashboard.commands import (
    Command,
    ScheduleTick,
    StartPollBatch,
    Stop,
)
from ramenwatch.controllers.dashboard.events import (
    BatchArrived,
    Event,
    Init,
    KeyPressed,
    Resized,
    TickElapsed,
)
from ramenwatch.keyboard.app import DOWN_KEYS, QUIT_KEYS, UP_KEYS
from ramenwatch.models.core.status import outcome_to_status
from ramenwatch.models.state.dashboard_state import DashboardState

logger = logging.getLogger(__name__)

Transition = tuple[DashboardState, list[Command]]


def _start_cycle(state: DashboardState, tick_interval: float) -> Transition:
    if state.poll_in_flight:
        logger.debug(
            "Batch %d still in flight, skipping poll for this tick",
            state.pending_generation,
        )
        return state, [ScheduleTick(delay=tick_interval)]

    generation = state.polls_started + 1
    next_state = state.model_copy(
        update={"polls_started": generation, "pending_generation": generation}
    )
    return next_state, [StartPollBatch(generation=generation), ScheduleTick(delay=tick_interval)]


def _on_init(state: DashboardState, event: Init, tick_interval: float) -> Transition:
    return _start_cycle(state, tick_interval)


def _on_tick(state: DashboardState, event: TickElapsed, tick_interval: float) -> Transition:
    return _start_cycle(state, tick_interval)


def _on_batch(state: DashboardState, event: BatchArrived, tick_interval: float) -> Transition:
    batch = event.batch
    if batch.generation < state.last_generation:
        logger.warning(
            "Applying batch %d after newer batch %d",
            batch.generation,
            state.last_generation,
        )

    statuses = list(state.statuses)
    index_by_name = {target.name: index for index, target in enumerate(state.targets)}
    for target, outcome in batch.outcomes:
        index = index_by_name.get(target.name)
        if index is None:
            logger.warning("Ignoring batch entry for unknown target %r", target.name)
            continue
        statuses[index] = outcome_to_status(outcome)

    pending = state.pending_generation
    if batch.generation == pending:
        pending = 0

    next_state = state.model_copy(
        update={
            "statuses": tuple(statuses),
            "last_generation": batch.generation,
            "pending_generation": pending,
        }
    )
    return next_state, []


def _on_key(state: DashboardState, event: KeyPressed, tick_interval: float) -> Transition:
    key = event.key
    if key in QUIT_KEYS:
        return state.model_copy(update={"mode": DashboardMode.TERMINATING}), [Stop()]

    last_index = len(state.targets) - 1
    if key in UP_KEYS:
        cursor = max(0, state.cursor - 1)
    elif key in DOWN_KEYS:
        cursor = min(last_index, state.cursor + 1)
    else:
        return state, []

    if cursor == state.cursor:
        return state, []
    return state.model_copy(update={"cursor": cursor}), []


def _on_resize(state: DashboardState, event: Resized, tick_interval: float) -> Transition:
    width = max(0, event.width)
    height = max(0, event.height)
    if (width, height) == (state.width, state.height):
        return state, []
    return state.model_copy(update={"width": width, "height": height}), []


_Handler = Callable[[DashboardState, Event, float], Transition]

HANDLERS: Final[dict[type, _Handler]] = {
    Init: _on_init,
    TickElapsed: _on_tick,
    BatchArrived: _on_batch,
    KeyPressed: _on_key,
    Resized: _on_resize,
}

HANDLED_EVENTS: Final = frozenset(HANDLERS)


def transition(
    state: DashboardState,
    event: Event,
    *,
    tick_interval: float = TICK_INTERVAL,
) -> Transition:
    """Apply ``event`` to ``state``.

    Raises:
        TypeError: ``event`` is not one of the known event kinds.
    """
    handler = HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"unhandled dashboard event: {event!r}")

    if state.is_terminating:
        # Late events after quit (most often an in-flight batch) are
        # accepted but change nothing and schedule nothing.
        logger.debug("Ignoring %s while terminating", type(event).__name__)
        return state, []

    next_state, commands = handler(state, event, tick_interval)
    if commands:
        logger.debug("%s -> %s", type(event).__name__, commands)
    return next_state, commands


__all__ = [
    "HANDLED_EVENTS",
    "HANDLERS",
    "Transition",
    "transition",
]
