"""Error taxonomy for remote cluster access.

Both errors are local to one target: the poller converts them into a
degraded ``TargetStatus`` and they never escape a poll batch.
"""

from __future__ import annotations


class RamenWatchError(Exception):
    """Base exception for RamenWatch runtime errors."""


class ClusterConnectionError(RamenWatchError):
    """Raised when a cluster client cannot be constructed.

    Covers an empty or unreadable kubeconfig, a document that is not a
    kubeconfig, or a kubeconfig without a usable context.
    """


class RemoteCallError(RamenWatchError):
    """Raised when a single query fails on an established client."""

    def __init__(self, message: str, *, resource: str | None = None) -> None:
        super().__init__(message)
        self.resource = resource


class PollTimeoutError(RemoteCallError):
    """Raised when a poll step runs past what is left of the poll budget."""


__all__ = [
    "ClusterConnectionError",
    "PollTimeoutError",
    "RamenWatchError",
    "RemoteCallError",
]
