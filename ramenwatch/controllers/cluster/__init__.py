"""Cluster access: client factory, per-target poller and batch aggregator."""

from ramenwatch.controllers.cluster.aggregator import PollGates, poll_all
from ramenwatch.controllers.cluster.client import KubectlClient
from ramenwatch.controllers.cluster.factory import (
    ClientFactory,
    ClusterClient,
    connect,
    make_factory,
)
from ramenwatch.controllers.cluster.poller import filter_namespaces, poll

__all__ = [
    "ClientFactory",
    "ClusterClient",
    "KubectlClient",
    "PollGates",
    "connect",
    "filter_namespaces",
    "make_factory",
    "poll",
    "poll_all",
]
