"""Dashboard state machine: events, commands and the transition function."""

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
from ramenwatch.controllers.dashboard.machine import HANDLED_EVENTS, transition

__all__ = [
    "HANDLED_EVENTS",
    "BatchArrived",
    "Command",
    "Event",
    "Init",
    "KeyPressed",
    "Resized",
    "ScheduleTick",
    "StartPollBatch",
    "Stop",
    "TickElapsed",
    "transition",
]
