"""Events consumed by the dashboard state machine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ramenwatch.models.core.status import BatchResult


@dataclass(frozen=True)
class Init:
    """Dashboard started."""


@dataclass(frozen=True)
class TickElapsed:
    """The refresh timer fired."""


@dataclass(frozen=True)
class BatchArrived:
    """A poll batch finished and its results are ready to apply."""

    batch: BatchResult


@dataclass(frozen=True)
class KeyPressed:
    """A named key, as reported by the terminal (``up``, ``q``, ``ctrl+c``...)."""

    key: str


@dataclass(frozen=True)
class Resized:
    """The terminal viewport changed size."""

    width: int
    height: int


Event = Union[Init, TickElapsed, BatchArrived, KeyPressed, Resized]

__all__ = [
    "BatchArrived",
    "Event",
    "Init",
    "KeyPressed",
    "Resized",
    "TickElapsed",
]
