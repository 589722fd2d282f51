"""Client factory: turn a kubeconfig descriptor into a connected client."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, Protocol

import yaml

from ramenwatch.controllers.cluster.client import KubectlClient
from ramenwatch.controllers.errors import ClusterConnectionError
from ramenwatch.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)


class ClusterClient(Protocol):
    """Read-only query surface a poll needs from a cluster."""

    async def list_nodes(self) -> list[str]: ...

    async def list_namespaces(self) -> list[str]: ...

    async def list_custom_resources(self, kind: str) -> list[str]: ...


ClientFactory = Callable[[str], ClusterClient]


def _context_names(document: dict[str, Any]) -> list[str]:
    names: list[str] = []
    for entry in document.get("contexts") or []:
        if isinstance(entry, dict) and entry.get("name"):
            names.append(str(entry["name"]))
    return names


def resolve_context(document: dict[str, Any]) -> str:
    """Return the current context of a parsed kubeconfig once it is known to exist.

    Raises:
        ClusterConnectionError: No contexts, no current context, or the
            current context is not defined.
    """
    names = _context_names(document)
    if not names:
        raise ClusterConnectionError("kubeconfig defines no contexts")

    wanted = str(document.get("current-context") or "").strip()
    if not wanted:
        raise ClusterConnectionError("kubeconfig has no current-context")
    if wanted not in names:
        raise ClusterConnectionError(f"context {wanted!r} not found in kubeconfig")
    return wanted


def connect(descriptor: str, *, settings: AppSettings | None = None) -> KubectlClient:
    """Build a client for the kubeconfig at ``descriptor``.

    No caching and no retries: every call re-reads the kubeconfig so an
    edited or newly created file is picked up on the next poll.

    Raises:
        ClusterConnectionError: The descriptor cannot yield a usable client.
    """
    settings = settings or AppSettings()
    raw = str(descriptor or "").strip()
    if not raw:
        raise ClusterConnectionError("no kubeconfig path configured")

    path = Path(raw).expanduser()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ClusterConnectionError(f"cannot read kubeconfig {path}: {exc.strerror or exc}") from exc

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ClusterConnectionError(f"kubeconfig {path} is not valid YAML") from exc
    if not isinstance(document, dict):
        raise ClusterConnectionError(f"kubeconfig {path} is not a mapping")

    context = resolve_context(document)
    logger.debug("Connected client for %s (context=%s)", path, context)
    return KubectlClient(
        str(path),
        context=context,
        request_timeout=settings.request_timeout,
        command_timeout=settings.command_timeout,
    )


def make_factory(settings: AppSettings) -> ClientFactory:
    """Bind settings into ``connect`` so pollers only pass a descriptor."""
    return functools.partial(connect, settings=settings)


__all__ = [
    "ClientFactory",
    "ClusterClient",
    "connect",
    "make_factory",
    "resolve_context",
]
