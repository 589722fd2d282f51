"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

from ramenwatch.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    TARGET_POLL_TIMEOUT,
    TICK_INTERVAL,
)
from ramenwatch.constants.values import DRPC_RESOURCE_KIND, RAMEN_NAMESPACES

# ============================================================================
# Refresh defaults
# ============================================================================

REFRESH_INTERVAL_DEFAULT: Final = TICK_INTERVAL

# ============================================================================
# Remote query defaults
# ============================================================================

NAMESPACE_ALLOWLIST_DEFAULT: Final = list(RAMEN_NAMESPACES)
RESOURCE_KIND_DEFAULT: Final = DRPC_RESOURCE_KIND
REQUEST_TIMEOUT_DEFAULT: Final = CLUSTER_REQUEST_TIMEOUT
COMMAND_TIMEOUT_DEFAULT: Final = KUBECTL_COMMAND_TIMEOUT
POLL_TIMEOUT_DEFAULT: Final = TARGET_POLL_TIMEOUT

# ============================================================================
# Logging defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "WARNING"
LOG_FORMAT_DEFAULT: Final = "%(asctime)s %(levelname)s %(name)s: %(message)s"

__all__ = [
    "COMMAND_TIMEOUT_DEFAULT",
    "LOG_FORMAT_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "NAMESPACE_ALLOWLIST_DEFAULT",
    "POLL_TIMEOUT_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "REQUEST_TIMEOUT_DEFAULT",
    "RESOURCE_KIND_DEFAULT",
]
