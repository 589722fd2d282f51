"""Dashboard screen configuration - widget IDs, labels and layout ratios."""

from __future__ import annotations

from ramenwatch.constants.enums import Health

# =============================================================================
# Widget IDs
# =============================================================================

FRAME_WIDGET_ID = "dashboard-frame"

# =============================================================================
# Region labels
# =============================================================================

LABEL_STATUS = "Status"
LABEL_NAMESPACES = "Namespaces"
LABEL_RESOURCES = "DRPCs"
LABEL_ERROR = "Error"
LIST_SEPARATOR = ","

# =============================================================================
# Layout
# =============================================================================

# Primary region takes this share of the terminal height.
PRIMARY_HEIGHT_DIVISOR = 3
# Secondary regions split the width and take this share of the height.
SECONDARY_HEIGHT_DIVISOR = 2

# =============================================================================
# Styles (ignored when rendering plain text)
# =============================================================================

HEALTH_STYLES: dict[Health, str] = {
    Health.UNKNOWN: "yellow",
    Health.HEALTHY: "green",
    Health.ERROR: "bold red",
}
SELECTED_BORDER_STYLE = "bold cyan"
DEFAULT_BORDER_STYLE = "dim"
