"""Dashboard state owned by the state machine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ramenwatch.constants.enums import DashboardMode
from ramenwatch.models.core.status import TargetStatus
from ramenwatch.models.core.target import Target, TargetRegistry


class DashboardState(BaseModel):
    """Full snapshot: one status per target plus UI-only fields.

    ``statuses`` is index-aligned with ``targets``. Instances are frozen;
    transitions produce new states with ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)

    targets: tuple[Target, ...]
    statuses: tuple[TargetStatus, ...]
    cursor: int = 0
    width: int = 0
    height: int = 0
    mode: DashboardMode = DashboardMode.RUNNING
    polls_started: int = 0
    last_generation: int = 0
    # Generation of the batch still being polled, 0 when none is outstanding.
    pending_generation: int = 0

    @classmethod
    def initial(cls, registry: TargetRegistry) -> DashboardState:
        """All targets Unknown, cursor on the first target."""
        return cls(
            targets=registry.targets,
            statuses=tuple(TargetStatus() for _ in registry),
        )

    @property
    def poll_in_flight(self) -> bool:
        return self.pending_generation > 0

    @property
    def is_terminating(self) -> bool:
        return self.mode is DashboardMode.TERMINATING

    @property
    def selected(self) -> Target:
        return self.targets[self.cursor]

    def status_for(self, name: str) -> TargetStatus:
        """Return the status of the target called ``name``."""
        for target, status in zip(self.targets, self.statuses):
            if target.name == name:
                return status
        raise KeyError(name)

    def pairs(self) -> tuple[tuple[Target, TargetStatus], ...]:
        return tuple(zip(self.targets, self.statuses))


__all__ = ["DashboardState"]
