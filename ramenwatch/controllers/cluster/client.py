"""kubectl-backed client for the read-only queries a poll issues."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import subprocess
from typing import Any

from ramenwatch.constants.limits import ERROR_MESSAGE_MAX_LENGTH
from ramenwatch.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from ramenwatch.controllers.errors import RemoteCallError

logger = logging.getLogger(__name__)


class KubectlClient:
    """Connected handle for one cluster.

    Every query shells out to ``kubectl --kubeconfig <path>`` in a worker
    thread so the calling event loop never blocks on remote I/O.
    """

    _PREFERRED_ERROR_TOKENS = (
        "unable to connect to the server",
        "you must be logged in",
        "context deadline exceeded",
        "timed out",
        "certificate",
        "no such host",
        "forbidden",
        "unauthorized",
        "the server doesn't have a resource type",
    )

    def __init__(
        self,
        kubeconfig: str,
        *,
        context: str | None = None,
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
        command_timeout: int = KUBECTL_COMMAND_TIMEOUT,
        kubectl_binary: str = "kubectl",
    ) -> None:
        self.kubeconfig = kubeconfig
        self.context = context
        self.request_timeout = request_timeout
        self.command_timeout = command_timeout
        self.kubectl_binary = kubectl_binary

    def __repr__(self) -> str:
        return f"KubectlClient(kubeconfig={self.kubeconfig!r}, context={self.context!r})"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list_nodes(self) -> list[str]:
        """List node names; used as the cluster health probe."""
        return await self._list_names(("get", "nodes"), resource="nodes")

    async def list_namespaces(self) -> list[str]:
        """List namespace names in server order."""
        return await self._list_names(("get", "namespaces"), resource="namespaces")

    async def list_custom_resources(self, kind: str) -> list[str]:
        """List names of ``kind`` across all namespaces in server order."""
        return await self._list_names(
            ("get", kind, "--all-namespaces"),
            resource=kind,
        )

    # ------------------------------------------------------------------
    # kubectl plumbing
    # ------------------------------------------------------------------

    def _build_command(self, args: tuple[str, ...]) -> list[str]:
        cmd = [self.kubectl_binary, "--kubeconfig", self.kubeconfig]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        cmd.extend(["-o", "json", f"--request-timeout={self.request_timeout}"])
        return cmd

    def _effective_timeout(self) -> int:
        # During pytest runs, keep subprocess timeouts tight so worker
        # threads never outlive a test.
        if os.environ.get("PYTEST_CURRENT_TEST"):
            return min(self.command_timeout, 10)
        return self.command_timeout

    def _run_kubectl_sync(self, args: tuple[str, ...], resource: str) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = self._build_command(args)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self._effective_timeout(),
            )
        except subprocess.TimeoutExpired as exc:
            raise RemoteCallError(
                f"kubectl get {resource} timed out after {exc.timeout}s",
                resource=resource,
            ) from exc
        except OSError as exc:
            raise RemoteCallError(
                f"cannot run {self.kubectl_binary}: {exc}",
                resource=resource,
            ) from exc

        if result.returncode != 0:
            raise RemoteCallError(
                self.summarize_error(result.stderr or ""),
                resource=resource,
            )
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...], resource: str) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args, resource)

    async def _list_names(self, args: tuple[str, ...], *, resource: str) -> list[str]:
        output = await self._run_kubectl(args, resource)
        return self.parse_item_names(output, resource=resource)

    @staticmethod
    def parse_item_names(output: str, *, resource: str = "items") -> list[str]:
        """Extract ``items[].metadata.name`` from a kubectl list document."""
        if not output.strip():
            return []
        try:
            data: Any = json.loads(output)
        except json.JSONDecodeError as exc:
            raise RemoteCallError(
                f"invalid JSON from kubectl get {resource}",
                resource=resource,
            ) from exc
        if not isinstance(data, dict):
            raise RemoteCallError(
                f"unexpected kubectl get {resource} payload",
                resource=resource,
            )

        names: list[str] = []
        for item in data.get("items") or []:
            if not isinstance(item, dict):
                continue
            name = str((item.get("metadata") or {}).get("name") or "").strip()
            if name:
                names.append(name)
        return names

    @classmethod
    def summarize_error(cls, stderr: str) -> str:
        """Extract a concise, user-facing error from kubectl stderr."""
        lines = [line.strip() for line in stderr.splitlines() if line.strip()]
        if not lines:
            return "kubectl command failed"

        selected_line = lines[-1]
        for line in reversed(lines):
            lower_line = line.lower()
            if line.startswith("error:") or any(
                token in lower_line for token in cls._PREFERRED_ERROR_TOKENS
            ):
                selected_line = line
                break

        cleaned = selected_line.removeprefix("error:").strip()
        if len(cleaned) > ERROR_MESSAGE_MAX_LENGTH:
            return f"{cleaned[: ERROR_MESSAGE_MAX_LENGTH - 3].rstrip()}..."
        return cleaned or "kubectl command failed"


__all__ = ["KubectlClient"]
