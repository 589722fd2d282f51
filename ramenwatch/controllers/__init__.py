"""Controllers module for RamenWatch TUI.

This module provides the cluster polling pipeline (client factory, poller,
aggregator) and the dashboard state machine that consumes its batches.
"""

from __future__ import annotations

# Cluster domain
from ramenwatch.controllers.cluster import (
    ClientFactory,
    ClusterClient,
    KubectlClient,
    connect,
    make_factory,
    poll,
    poll_all,
)

# Dashboard domain
from ramenwatch.controllers.dashboard import transition

# Errors
from ramenwatch.controllers.errors import (
    ClusterConnectionError,
    RamenWatchError,
    RemoteCallError,
)

__all__ = [
    "ClientFactory",
    "ClusterClient",
    "ClusterConnectionError",
    "KubectlClient",
    "RamenWatchError",
    "RemoteCallError",
    "connect",
    "make_factory",
    "poll",
    "poll_all",
    "transition",
]
