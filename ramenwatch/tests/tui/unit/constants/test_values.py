"""Unit tests for scalar, timeout and limit constants."""

from __future__ import annotations

from ramenwatch.constants import (
    CLUSTER_REQUEST_TIMEOUT,
    DRPC_RESOURCE_KIND,
    KUBECTL_COMMAND_TIMEOUT,
    RAMEN_NAMESPACES,
    REFRESH_INTERVAL_DEFAULT,
    REFRESH_INTERVAL_MIN,
    TICK_INTERVAL,
)
from ramenwatch.constants.values import DR1_TARGET_NAME, DR2_TARGET_NAME, HUB_TARGET_NAME


class TestTargetNames:
    """Test the standard topology names."""

    def test_names_unique(self) -> None:
        assert len({HUB_TARGET_NAME, DR1_TARGET_NAME, DR2_TARGET_NAME}) == 3


class TestRemoteInventory:
    """Test remote inventory constants."""

    def test_ramen_namespaces(self) -> None:
        assert "ramen-system" in RAMEN_NAMESPACES
        assert len(set(RAMEN_NAMESPACES)) == len(RAMEN_NAMESPACES)

    def test_drpc_kind_is_fully_qualified(self) -> None:
        assert DRPC_RESOURCE_KIND.endswith(".ramendr.openshift.io")


class TestTimeouts:
    """Test timeout relationships."""

    def test_command_timeout_exceeds_request_timeout(self) -> None:
        assert KUBECTL_COMMAND_TIMEOUT > int(CLUSTER_REQUEST_TIMEOUT.rstrip("s"))

    def test_refresh_default(self) -> None:
        assert REFRESH_INTERVAL_DEFAULT == TICK_INTERVAL == 1.0
        assert REFRESH_INTERVAL_MIN < REFRESH_INTERVAL_DEFAULT
