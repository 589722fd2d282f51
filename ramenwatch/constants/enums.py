"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Target Enums
# =============================================================================

class TargetRole(Enum):
    """Role of a monitored cluster in the DR topology."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


class Health(Enum):
    """Health values shown for a monitored cluster."""

    UNKNOWN = "Unknown"
    HEALTHY = "Healthy"
    ERROR = "Error"


# =============================================================================
# Application State Enums
# =============================================================================

class DashboardMode(Enum):
    """Lifecycle mode of the dashboard state machine."""

    RUNNING = "running"
    TERMINATING = "terminating"


# =============================================================================
# Poll step Enums
# =============================================================================

class PollStep(Enum):
    """Ordered steps of a single target poll."""

    CONNECT = "connect"
    HEALTH_PROBE = "health_probe"
    NAMESPACES = "namespaces"
    RESOURCES = "resources"
