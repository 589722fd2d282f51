"""Tests for the snapshot aggregator."""

from __future__ import annotations

import asyncio
import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from ramenwatch.constants.enums import Health
from ramenwatch.controllers.cluster import aggregator
from ramenwatch.controllers.cluster.aggregator import PollGates, poll_all
from ramenwatch.controllers.errors import ClusterConnectionError
from ramenwatch.models.core.status import PollFailure, TargetStatus
from ramenwatch.models.core.target import TargetRegistry
from ramenwatch.models.state.app_settings import AppSettings


class TestPollAll:
    """Tests for poll_all()."""

    @pytest.mark.asyncio
    async def test_batch_in_registry_order(self, registry: TargetRegistry, healthy_factory) -> None:
        """One outcome per target, in registry order, tagged with the generation."""
        batch = await poll_all(registry, healthy_factory, generation=9)

        assert batch.generation == 9
        assert [target.name for target, _ in batch.outcomes] == ["Hub", "DR1", "DR2"]
        assert all(isinstance(outcome, TargetStatus) for _, outcome in batch.outcomes)
        assert all(outcome.generation == 9 for _, outcome in batch.outcomes)

    @pytest.mark.asyncio
    async def test_connection_error_isolated(
        self, registry: TargetRegistry, fake_client, fake_factory
    ) -> None:
        """One unreachable cluster does not affect the others."""
        factory = fake_factory(
            {
                "hub.kubeconfig": fake_client(namespaces=["ramen-system"], resources=["drpc-a"]),
                "dr1.kubeconfig": ClusterConnectionError("unreachable"),
                "dr2.kubeconfig": fake_client(namespaces=["ramen-ops"]),
            }
        )

        batch = await poll_all(registry, factory)
        statuses = {target.name: outcome for target, outcome in batch.outcomes}

        assert statuses["DR1"].health is Health.ERROR
        assert statuses["Hub"].health is Health.HEALTHY
        assert statuses["Hub"].resources == ("drpc-a",)
        assert statuses["DR2"].namespaces == ("ramen-ops",)

    @pytest.mark.asyncio
    async def test_secondary_resources_always_empty(
        self, registry: TargetRegistry, fake_client, fake_factory
    ) -> None:
        """Secondary outcomes never carry resources."""
        factory = fake_factory(
            {
                descriptor: fake_client(namespaces=["ramen-system"], resources=["drpc-x"])
                for descriptor in ("hub.kubeconfig", "dr1.kubeconfig", "dr2.kubeconfig")
            }
        )

        batch = await poll_all(registry, factory)

        for target, outcome in batch.outcomes:
            if not target.is_primary:
                assert outcome.resources == ()

    @pytest.mark.asyncio
    async def test_hung_target_reports_error(
        self, registry: TargetRegistry, fake_client, fake_factory
    ) -> None:
        """A target that outlives its poll budget is Error; others still complete."""

        class HangingClient(fake_client):
            async def list_nodes(self) -> list[str]:
                await asyncio.sleep(10)
                return []

        factory = fake_factory(
            {
                "hub.kubeconfig": fake_client(),
                "dr1.kubeconfig": HangingClient(),
                "dr2.kubeconfig": fake_client(),
            }
        )
        settings = AppSettings(poll_timeout=0.2)

        batch = await poll_all(registry, factory, settings=settings, generation=2)
        outcomes = dict((target.name, outcome) for target, outcome in batch.outcomes)

        assert isinstance(outcomes["DR1"], TargetStatus)
        assert outcomes["DR1"].health is Health.ERROR
        assert outcomes["DR1"].generation == 2
        assert "timed out" in (outcomes["DR1"].error or "")
        assert outcomes["Hub"].health is Health.HEALTHY
        assert outcomes["DR2"].health is Health.HEALTHY

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_failure(
        self, registry: TargetRegistry, fake_client, fake_factory
    ) -> None:
        """Errors outside the cluster taxonomy are contained per target."""
        factory = fake_factory(
            {
                "hub.kubeconfig": fake_client(),
                "dr1.kubeconfig": RuntimeError("factory bug"),
                "dr2.kubeconfig": fake_client(),
            }
        )

        batch = await poll_all(registry, factory)
        outcomes = dict((target.name, outcome) for target, outcome in batch.outcomes)

        assert isinstance(outcomes["DR1"], PollFailure)
        assert outcomes["DR1"].reason == "factory bug"
        assert outcomes["Hub"].health is Health.HEALTHY

    @pytest.mark.asyncio
    async def test_targets_polled_concurrently(
        self, registry: TargetRegistry, fake_client, fake_factory
    ) -> None:
        """Total latency tracks the slowest target, not the sum."""

        class SlowClient(fake_client):
            async def list_nodes(self) -> list[str]:
                await asyncio.sleep(0.3)
                return ["n"]

        factory = fake_factory(
            {d: SlowClient() for d in ("hub.kubeconfig", "dr1.kubeconfig", "dr2.kubeconfig")}
        )

        loop = asyncio.get_running_loop()
        started = loop.time()
        await poll_all(registry, factory)
        assert loop.time() - started < 0.85

    @pytest.mark.asyncio
    async def test_deadline_backstop_becomes_failure(
        self, registry: TargetRegistry, healthy_factory, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A poll that never returns is cut off and reported as a PollFailure."""

        async def never_returns(target, factory, *, settings, generation):
            if target.name == "DR2":
                await asyncio.sleep(10)
            return TargetStatus(health=Health.HEALTHY, generation=generation)

        monkeypatch.setattr(aggregator, "poll", never_returns)
        monkeypatch.setattr(aggregator, "POLL_DEADLINE_GRACE", 0.05)

        batch = await poll_all(
            registry, healthy_factory, settings=AppSettings(poll_timeout=0.1), generation=3
        )
        outcomes = dict((target.name, outcome) for target, outcome in batch.outcomes)

        assert isinstance(outcomes["DR2"], PollFailure)
        assert outcomes["DR2"].generation == 3
        assert "timed out" in outcomes["DR2"].reason
        assert outcomes["Hub"].health is Health.HEALTHY


class TestOverlappingBatches:
    """Overlapping batches against a cluster that blocks worker threads."""

    @pytest.mark.asyncio
    async def test_blocked_cluster_does_not_starve_healthy_ones(
        self, registry: TargetRegistry, fake_client, fake_factory
    ) -> None:
        """Healthy targets stay Healthy while a stuck one holds pool threads."""
        active = 0
        peak = 0
        counter_lock = threading.Lock()

        def blocking_node_listing() -> list[str]:
            nonlocal active, peak
            with counter_lock:
                active += 1
                peak = max(peak, active)
            try:
                time.sleep(0.3)
            finally:
                with counter_lock:
                    active -= 1
            return ["node-1"]

        class BlockingClient(fake_client):
            async def list_nodes(self) -> list[str]:
                return await asyncio.to_thread(blocking_node_listing)

        factory = fake_factory(
            {
                "hub.kubeconfig": fake_client(namespaces=["ramen-system"]),
                "dr1.kubeconfig": BlockingClient(),
                "dr2.kubeconfig": fake_client(namespaces=["ramen-ops"]),
            }
        )
        settings = AppSettings(poll_timeout=0.25)
        executor = ThreadPoolExecutor(max_workers=4)
        asyncio.get_running_loop().set_default_executor(executor)

        async def delayed_batch(generation: int):
            await asyncio.sleep(0.05 * generation)
            return await poll_all(registry, factory, settings=settings, generation=generation)

        try:
            batches = await asyncio.gather(*(delayed_batch(g) for g in range(1, 7)))
        finally:
            executor.shutdown(wait=True)

        starved = [
            (batch.generation, target.name)
            for batch in batches
            for target, outcome in batch.outcomes
            if target.name != "DR1"
            and (isinstance(outcome, PollFailure) or outcome.health is not Health.HEALTHY)
        ]
        assert starved == []
        assert peak <= 2

    @pytest.mark.asyncio
    async def test_polls_of_one_target_run_one_at_a_time(
        self, registry: TargetRegistry, fake_client, fake_factory
    ) -> None:
        """Shared gates serialise polls of the same target across batches."""
        running = 0
        peak = 0

        class CountingClient(fake_client):
            async def list_nodes(self) -> list[str]:
                nonlocal running, peak
                running += 1
                peak = max(peak, running)
                try:
                    await asyncio.sleep(0.05)
                finally:
                    running -= 1
                return ["node-1"]

        factory = fake_factory(
            {
                "hub.kubeconfig": CountingClient(),
                "dr1.kubeconfig": fake_client(),
                "dr2.kubeconfig": fake_client(),
            }
        )
        gates = PollGates()

        await asyncio.gather(
            *(poll_all(registry, factory, generation=g, gates=gates) for g in range(1, 5))
        )

        assert peak == 1
