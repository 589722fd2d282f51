"""Shared fixtures for RamenWatch tests."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pytest
import yaml

from ramenwatch.controllers.errors import ClusterConnectionError, RemoteCallError
from ramenwatch.models.core.target import TargetRegistry
from ramenwatch.models.state.app_settings import AppSettings


class FakeClusterClient:
    """In-memory cluster client.

    Each listing is either a list of names or an exception instance that the
    corresponding call raises.
    """

    def __init__(
        self,
        *,
        nodes: list[str] | Exception | None = None,
        namespaces: list[str] | Exception | None = None,
        resources: list[str] | Exception | None = None,
    ) -> None:
        self.nodes = ["node-1"] if nodes is None else nodes
        self.namespaces = [] if namespaces is None else namespaces
        self.resources = [] if resources is None else resources
        self.calls: list[str] = []

    @staticmethod
    def _answer(value: list[str] | Exception) -> list[str]:
        if isinstance(value, Exception):
            raise value
        return list(value)

    async def list_nodes(self) -> list[str]:
        self.calls.append("nodes")
        return self._answer(self.nodes)

    async def list_namespaces(self) -> list[str]:
        self.calls.append("namespaces")
        return self._answer(self.namespaces)

    async def list_custom_resources(self, kind: str) -> list[str]:
        self.calls.append(f"resources:{kind}")
        return self._answer(self.resources)


class FakeFactory:
    """Maps descriptors to fake clients or construction errors."""

    def __init__(self, clients: Mapping[str, FakeClusterClient | Exception]) -> None:
        self.clients = dict(clients)
        self.requested: list[str] = []

    def __call__(self, descriptor: str) -> FakeClusterClient:
        self.requested.append(descriptor)
        client = self.clients.get(descriptor)
        if client is None:
            raise ClusterConnectionError(f"no cluster for {descriptor!r}")
        if isinstance(client, Exception):
            raise client
        return client


@pytest.fixture
def registry() -> TargetRegistry:
    """Standard hub + two managed clusters registry."""
    return TargetRegistry.from_descriptors("hub.kubeconfig", "dr1.kubeconfig", "dr2.kubeconfig")


@pytest.fixture
def settings() -> AppSettings:
    """Default settings with a fast refresh for runtime tests."""
    return AppSettings(refresh_interval=0.1)


@pytest.fixture
def fake_client() -> type[FakeClusterClient]:
    """The fake client class, for building per-test clusters."""
    return FakeClusterClient


@pytest.fixture
def fake_factory() -> type[FakeFactory]:
    """The fake factory class, for building per-test topologies."""
    return FakeFactory


@pytest.fixture
def remote_error() -> Callable[[str], RemoteCallError]:
    """Build a RemoteCallError with a message."""
    return lambda message: RemoteCallError(message)


@pytest.fixture
def healthy_factory() -> FakeFactory:
    """Factory where every cluster is reachable and the hub runs Ramen."""
    return FakeFactory(
        {
            "hub.kubeconfig": FakeClusterClient(
                namespaces=["default", "ramen-system"],
                resources=["drpc-a"],
            ),
            "dr1.kubeconfig": FakeClusterClient(namespaces=["default"]),
            "dr2.kubeconfig": FakeClusterClient(namespaces=["kube-system"]),
        }
    )


@pytest.fixture
def write_kubeconfig(tmp_path: Path) -> Callable[..., Path]:
    """Write a kubeconfig document to a temp file and return its path."""

    def _write(
        document: Any = None,
        *,
        name: str = "kubeconfig",
        raw: str | None = None,
    ) -> Path:
        path = tmp_path / name
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
            return path
        if document is None:
            document = {
                "apiVersion": "v1",
                "kind": "Config",
                "clusters": [{"name": "hub", "cluster": {"server": "https://hub:6443"}}],
                "users": [{"name": "admin", "user": {"token": "t"}}],
                "contexts": [
                    {"name": "hub-admin", "context": {"cluster": "hub", "user": "admin"}},
                    {"name": "hub-view", "context": {"cluster": "hub", "user": "admin"}},
                ],
                "current-context": "hub-admin",
            }
        path.write_text(yaml.safe_dump(document), encoding="utf-8")
        return path

    return _write
