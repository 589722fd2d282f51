"""Single-target poll: connect, probe health, collect inventory.

Each step may fail independently. A failed connect or health probe
short-circuits the poll; a failed listing keeps what was captured before
it. All steps share one time budget (``settings.poll_timeout``); a step that
runs out of budget fails like any other remote call. Nothing here raises a
cluster error to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Iterable
from datetime import datetime, timezone
from typing import TypeVar

from ramenwatch.constants.enums import Health, PollStep
from ramenwatch.controllers.cluster.factory import ClientFactory, ClusterClient
from ramenwatch.controllers.errors import (
    ClusterConnectionError,
    PollTimeoutError,
    RemoteCallError,
)
from ramenwatch.models.core.status import TargetStatus
from ramenwatch.models.core.target import Target
from ramenwatch.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


def filter_namespaces(names: Iterable[str], allowlist: Iterable[str]) -> tuple[str, ...]:
    """Keep names in the allow-set (exact match), preserving listing order."""
    allowed = frozenset(allowlist)
    return tuple(name for name in names if name in allowed)


def _step_error(step: PollStep, error: Exception) -> str:
    return f"{step.value}: {error}"


async def _connect(factory: ClientFactory, target: Target) -> ClusterClient:
    return await asyncio.to_thread(factory, target.descriptor)


async def _within_budget(call: Awaitable[_T], deadline: float, budget: float) -> _T:
    """Await ``call`` with whatever is left until ``deadline``.

    Raises:
        PollTimeoutError: The budget ran out before ``call`` finished.
    """
    remaining = deadline - asyncio.get_running_loop().time()
    try:
        return await asyncio.wait_for(call, timeout=max(remaining, 0.0))
    except asyncio.TimeoutError as exc:
        raise PollTimeoutError(f"timed out after {budget:g}s poll budget") from exc


async def poll(
    target: Target,
    factory: ClientFactory,
    *,
    settings: AppSettings | None = None,
    generation: int = 0,
) -> TargetStatus:
    """Poll one target and return a status built from this attempt only."""
    settings = settings or AppSettings()
    polled_at = datetime.now(timezone.utc)
    budget = settings.poll_timeout
    deadline = asyncio.get_running_loop().time() + budget

    logger.debug("[%s] %s (generation=%d)", target.name, PollStep.CONNECT.value, generation)
    try:
        client = await _within_budget(_connect(factory, target), deadline, budget)
    except (ClusterConnectionError, PollTimeoutError) as exc:
        logger.warning("[%s] connection failed: %s", target.name, exc)
        return TargetStatus.failed(
            _step_error(PollStep.CONNECT, exc),
            generation=generation,
            polled_at=polled_at,
        )

    logger.debug("[%s] %s", target.name, PollStep.HEALTH_PROBE.value)
    try:
        await _within_budget(client.list_nodes(), deadline, budget)
    except RemoteCallError as exc:
        logger.warning("[%s] health probe failed: %s", target.name, exc)
        return TargetStatus.failed(
            _step_error(PollStep.HEALTH_PROBE, exc),
            generation=generation,
            polled_at=polled_at,
        )

    namespaces: tuple[str, ...] = ()
    resources: tuple[str, ...] = ()
    error: str | None = None

    logger.debug("[%s] %s", target.name, PollStep.NAMESPACES.value)
    try:
        namespaces = filter_namespaces(
            await _within_budget(client.list_namespaces(), deadline, budget),
            settings.namespace_allowlist,
        )
    except RemoteCallError as exc:
        logger.warning("[%s] namespace listing failed: %s", target.name, exc)
        error = _step_error(PollStep.NAMESPACES, exc)

    # Only the primary carries resource inventory; secondaries stay empty.
    if error is None and target.is_primary:
        logger.debug("[%s] %s (%s)", target.name, PollStep.RESOURCES.value, settings.resource_kind)
        try:
            resources = tuple(
                await _within_budget(
                    client.list_custom_resources(settings.resource_kind),
                    deadline,
                    budget,
                )
            )
        except RemoteCallError as exc:
            logger.warning("[%s] resource listing failed: %s", target.name, exc)
            error = _step_error(PollStep.RESOURCES, exc)

    return TargetStatus(
        health=Health.HEALTHY,
        namespaces=namespaces,
        resources=resources,
        error=error,
        generation=generation,
        polled_at=polled_at,
    )


__all__ = ["filter_namespaces", "poll"]
