"""Side effects requested by the dashboard state machine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class StartPollBatch:
    """Poll every target in the background and report back as one batch."""

    generation: int


@dataclass(frozen=True)
class ScheduleTick:
    """Fire a single TickElapsed after ``delay`` seconds."""

    delay: float


@dataclass(frozen=True)
class Stop:
    """Tear down the dashboard and exit."""


Command = Union[StartPollBatch, ScheduleTick, Stop]

__all__ = [
    "Command",
    "ScheduleTick",
    "StartPollBatch",
    "Stop",
]
