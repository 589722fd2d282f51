"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "RamenWatch"

# ============================================================================
# Target names (standard Ramen DR topology)
# ============================================================================

HUB_TARGET_NAME: Final = "Hub"
DR1_TARGET_NAME: Final = "DR1"
DR2_TARGET_NAME: Final = "DR2"

# ============================================================================
# Remote inventory
# ============================================================================

# Namespaces that indicate a Ramen / OpenShift DR installation.
RAMEN_NAMESPACES: Final = (
    "ramen-system",
    "ramen-ops",
    "openshift-operators",
    "openshift-dr-system",
    "openshift-dr-ops",
)

DRPC_RESOURCE_KIND: Final = "drplacementcontrols.ramendr.openshift.io"

# ============================================================================
# Frame text
# ============================================================================

FOOTER_HINT: Final = "Press q to quit."
NAVIGATION_HINT: Final = "↑/↓ select"
EMPTY_LIST_PLACEHOLDER: Final = "-"
CURSOR_MARKER: Final = "▶"

__all__ = [
    "APP_TITLE",
    "CURSOR_MARKER",
    "DR1_TARGET_NAME",
    "DR2_TARGET_NAME",
    "DRPC_RESOURCE_KIND",
    "EMPTY_LIST_PLACEHOLDER",
    "FOOTER_HINT",
    "HUB_TARGET_NAME",
    "NAVIGATION_HINT",
    "RAMEN_NAMESPACES",
]
