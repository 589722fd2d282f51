"""Snapshot aggregator: one poll per target, joined into a single batch."""

from __future__ import annotations

import asyncio
import logging
import time
import weakref
from collections.abc import Iterable

from ramenwatch.constants.timeouts import POLL_DEADLINE_GRACE
from ramenwatch.controllers.cluster.factory import ClientFactory
from ramenwatch.controllers.cluster.poller import poll
from ramenwatch.models.core.status import BatchResult, PollFailure, PollOutcome
from ramenwatch.models.core.target import Target
from ramenwatch.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)


class PollGates:
    """One lock per target so a target never has two polls running at once.

    Overlapping batches queue behind a hung cluster's poll instead of
    starting more of its kubectl calls, so the shared thread pool stays
    free for the healthy targets.
    """

    _loop_gates: weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, PollGates] = (
        weakref.WeakKeyDictionary()
    )

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}

    @classmethod
    def for_running_loop(cls) -> PollGates:
        """Get or create the gates shared by every batch on the running loop."""
        loop = asyncio.get_running_loop()
        gates = cls._loop_gates.get(loop)
        if gates is None:
            gates = cls()
            cls._loop_gates[loop] = gates
        return gates

    def get_lock(self, target: Target) -> asyncio.Lock:
        lock = self._locks.get(target.name)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[target.name] = lock
        return lock


async def _gated_poll(
    target: Target,
    factory: ClientFactory,
    settings: AppSettings,
    generation: int,
    gates: PollGates,
) -> PollOutcome:
    lock = gates.get_lock(target)
    if lock.locked():
        logger.debug("[%s] waiting for previous poll (generation=%d)", target.name, generation)
    async with lock:
        return await poll(target, factory, settings=settings, generation=generation)


async def _poll_isolated(
    target: Target,
    factory: ClientFactory,
    settings: AppSettings,
    generation: int,
    gates: PollGates,
) -> PollOutcome:
    """Run one gated poll under a deadline; any escape becomes a failure marker."""
    deadline = settings.poll_timeout + POLL_DEADLINE_GRACE
    try:
        return await asyncio.wait_for(
            _gated_poll(target, factory, settings, generation, gates),
            timeout=deadline,
        )
    except asyncio.TimeoutError:
        logger.warning(
            "[%s] poll exceeded %.1fs deadline (generation=%d)",
            target.name,
            deadline,
            generation,
        )
        return PollFailure(
            reason=f"poll timed out after {deadline:g}s",
            generation=generation,
        )
    except Exception as exc:
        logger.exception("[%s] unexpected poll failure", target.name)
        return PollFailure(
            reason=str(exc).strip() or type(exc).__name__,
            generation=generation,
        )


async def poll_all(
    targets: Iterable[Target],
    factory: ClientFactory,
    *,
    settings: AppSettings | None = None,
    generation: int = 0,
    gates: PollGates | None = None,
) -> BatchResult:
    """Poll every target concurrently and return the joined batch.

    Results keep the order of ``targets`` regardless of completion order.
    Each coroutine owns its intermediate result until the gather returns.
    Batches on the same loop share ``PollGates`` unless ``gates`` is given.
    """
    settings = settings or AppSettings()
    gates = gates or PollGates.for_running_loop()
    ordered = tuple(targets)
    started = time.monotonic()
    outcomes = await asyncio.gather(
        *(
            _poll_isolated(target, factory, settings, generation, gates)
            for target in ordered
        )
    )
    logger.debug(
        "Batch %d finished for %d targets in %.0fms",
        generation,
        len(ordered),
        (time.monotonic() - started) * 1000,
    )
    return BatchResult(
        generation=generation,
        outcomes=tuple(zip(ordered, outcomes)),
    )


__all__ = ["PollGates", "poll_all"]
