"""Constants module for RamenWatch TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, names with Final)
- timeouts.py: Timeout and interval values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in the ramenwatch.keyboard module.
"""

from ramenwatch.constants.defaults import (
    LOG_LEVEL_DEFAULT,
    NAMESPACE_ALLOWLIST_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    RESOURCE_KIND_DEFAULT,
)
from ramenwatch.constants.enums import (
    DashboardMode,
    Health,
    PollStep,
    TargetRole,
)
from ramenwatch.constants.limits import (
    ERROR_MESSAGE_MAX_LENGTH,
    FALLBACK_FRAME_WIDTH,
    REFRESH_INTERVAL_MIN,
)
from ramenwatch.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    TARGET_POLL_TIMEOUT,
    TICK_INTERVAL,
)
from ramenwatch.constants.values import (
    APP_TITLE,
    DR1_TARGET_NAME,
    DR2_TARGET_NAME,
    DRPC_RESOURCE_KIND,
    FOOTER_HINT,
    HUB_TARGET_NAME,
    RAMEN_NAMESPACES,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    "DR1_TARGET_NAME",
    "DR2_TARGET_NAME",
    "DRPC_RESOURCE_KIND",
    "ERROR_MESSAGE_MAX_LENGTH",
    "FALLBACK_FRAME_WIDTH",
    "FOOTER_HINT",
    "HUB_TARGET_NAME",
    "KUBECTL_COMMAND_TIMEOUT",
    "LOG_LEVEL_DEFAULT",
    "NAMESPACE_ALLOWLIST_DEFAULT",
    "RAMEN_NAMESPACES",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_MIN",
    "RESOURCE_KIND_DEFAULT",
    "TARGET_POLL_TIMEOUT",
    "TICK_INTERVAL",
    # Enums
    "DashboardMode",
    "Health",
    "PollStep",
    "TargetRole",
]
