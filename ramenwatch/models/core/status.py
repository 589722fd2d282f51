"""Per-target poll results and the batch that carries them."""

from __future__ import annotations

from datetime import datetime
from typing import Union

from pydantic import BaseModel, ConfigDict

from ramenwatch.constants.enums import Health
from ramenwatch.models.core.target import Target


class TargetStatus(BaseModel):
    """Latest observed state of one target.

    A status is always produced by exactly one poll attempt and is replaced
    as a whole; ``generation`` identifies that attempt.
    """

    model_config = ConfigDict(frozen=True)

    health: Health = Health.UNKNOWN
    namespaces: tuple[str, ...] = ()
    resources: tuple[str, ...] = ()
    error: str | None = None
    generation: int = 0
    polled_at: datetime | None = None

    @classmethod
    def failed(
        cls,
        reason: str,
        *,
        generation: int = 0,
        polled_at: datetime | None = None,
    ) -> TargetStatus:
        """Status for a target whose client could not be used at all."""
        return cls(
            health=Health.ERROR,
            error=reason,
            generation=generation,
            polled_at=polled_at,
        )


class PollFailure(BaseModel):
    """Marker for a target whose poll did not produce a status."""

    model_config = ConfigDict(frozen=True)

    reason: str
    generation: int = 0

    def to_status(self) -> TargetStatus:
        return TargetStatus.failed(self.reason, generation=self.generation)


PollOutcome = Union[TargetStatus, PollFailure]


class BatchResult(BaseModel):
    """One complete polling round over every target."""

    model_config = ConfigDict(frozen=True)

    generation: int
    outcomes: tuple[tuple[Target, PollOutcome], ...] = ()

    def __len__(self) -> int:
        return len(self.outcomes)


def outcome_to_status(outcome: PollOutcome) -> TargetStatus:
    """Normalize a batch outcome into the status that will be displayed."""
    if isinstance(outcome, PollFailure):
        return outcome.to_status()
    return outcome


__all__ = [
    "BatchResult",
    "PollFailure",
    "PollOutcome",
    "TargetStatus",
    "outcome_to_status",
]
