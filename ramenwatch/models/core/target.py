"""Monitored target identity and the startup target registry."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from pydantic import BaseModel, ConfigDict

from ramenwatch.constants.enums import TargetRole
from ramenwatch.constants.values import (
    DR1_TARGET_NAME,
    DR2_TARGET_NAME,
    HUB_TARGET_NAME,
)


class RegistryError(ValueError):
    """Raised when the configured target set is not a valid topology."""


class Target(BaseModel):
    """One monitored cluster: name, role and connection descriptor."""

    model_config = ConfigDict(frozen=True)

    name: str
    role: TargetRole
    descriptor: str = ""

    @property
    def is_primary(self) -> bool:
        return self.role is TargetRole.PRIMARY


class TargetRegistry:
    """Ordered, read-only set of targets fixed at startup.

    The registry requires unique names and exactly one primary target.
    Order is preserved and is the display/cursor order.
    """

    __slots__ = ("_targets",)

    def __init__(self, targets: Sequence[Target]) -> None:
        targets = tuple(targets)
        if not targets:
            raise RegistryError("at least one target is required")

        seen: set[str] = set()
        for target in targets:
            if target.name in seen:
                raise RegistryError(f"duplicate target name: {target.name!r}")
            seen.add(target.name)

        primaries = [t for t in targets if t.is_primary]
        if len(primaries) != 1:
            raise RegistryError(
                f"exactly one primary target expected, found {len(primaries)}"
            )
        self._targets: tuple[Target, ...] = targets

    @classmethod
    def from_descriptors(cls, hub: str, dr1: str, dr2: str) -> TargetRegistry:
        """Build the standard hub + two managed clusters registry."""
        return cls(
            [
                Target(name=HUB_TARGET_NAME, role=TargetRole.PRIMARY, descriptor=hub),
                Target(name=DR1_TARGET_NAME, role=TargetRole.SECONDARY, descriptor=dr1),
                Target(name=DR2_TARGET_NAME, role=TargetRole.SECONDARY, descriptor=dr2),
            ]
        )

    @property
    def targets(self) -> tuple[Target, ...]:
        return self._targets

    @property
    def primary(self) -> Target:
        return next(t for t in self._targets if t.is_primary)

    @property
    def secondaries(self) -> tuple[Target, ...]:
        return tuple(t for t in self._targets if not t.is_primary)

    def index_of(self, name: str) -> int | None:
        """Return the registry index of ``name`` or None when unknown."""
        for index, target in enumerate(self._targets):
            if target.name == name:
                return index
        return None

    def __len__(self) -> int:
        return len(self._targets)

    def __iter__(self) -> Iterator[Target]:
        return iter(self._targets)

    def __getitem__(self, index: int) -> Target:
        return self._targets[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TargetRegistry):
            return NotImplemented
        return self._targets == other._targets

    def __hash__(self) -> int:
        return hash(self._targets)

    def __repr__(self) -> str:
        names = ", ".join(t.name for t in self._targets)
        return f"TargetRegistry([{names}])"


__all__ = [
    "RegistryError",
    "Target",
    "TargetRegistry",
]
