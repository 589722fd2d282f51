"""Dashboard presenter - pure frame construction from a dashboard snapshot.

Nothing in this module performs I/O or mutates its input. ``render`` prints
into an in-memory console with colour disabled so the same state always
yields the same text.
"""

from __future__ import annotations

import io

from rich import box
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ramenwatch.constants.limits import FALLBACK_FRAME_WIDTH
from ramenwatch.constants.values import (
    CURSOR_MARKER,
    EMPTY_LIST_PLACEHOLDER,
    FOOTER_HINT,
    NAVIGATION_HINT,
)
from ramenwatch.models.core.status import TargetStatus
from ramenwatch.models.core.target import Target
from ramenwatch.models.state.dashboard_state import DashboardState
from ramenwatch.screens.dashboard.config import (
    DEFAULT_BORDER_STYLE,
    HEALTH_STYLES,
    LABEL_ERROR,
    LABEL_NAMESPACES,
    LABEL_RESOURCES,
    LABEL_STATUS,
    LIST_SEPARATOR,
    PRIMARY_HEIGHT_DIVISOR,
    SECONDARY_HEIGHT_DIVISOR,
    SELECTED_BORDER_STYLE,
)


def format_names(names: tuple[str, ...]) -> str:
    """Join names for display; empty sequences render as a placeholder."""
    if not names:
        return EMPTY_LIST_PLACEHOLDER
    return LIST_SEPARATOR.join(names)


def region_lines(target: Target, status: TargetStatus, *, selected: bool = False) -> Text:
    """Text body of one target region."""
    heading = f"{CURSOR_MARKER} {target.name}" if selected else target.name
    body = Text()
    body.append(heading, style="bold")
    body.append("\n\n")
    body.append(f"{LABEL_STATUS}: ")
    body.append(status.health.value, style=HEALTH_STYLES[status.health])
    body.append(f"\n{LABEL_NAMESPACES}: {format_names(status.namespaces)}")
    if target.is_primary:
        body.append(f"\n{LABEL_RESOURCES}: {format_names(status.resources)}")
    if status.error:
        body.append(f"\n{LABEL_ERROR}: {status.error}", style="red")
    return body


def _region_height(body: Text, available: int, divisor: int) -> int | None:
    if available <= 0:
        return None
    # Border rows plus every content row must fit, or rich crops the body.
    needed = len(body.plain.splitlines()) + 2
    return max(available // divisor, needed)


def build_region(
    target: Target,
    status: TargetStatus,
    *,
    selected: bool,
    width: int | None,
    height: int | None,
) -> Panel:
    """Bordered panel for one target."""
    return Panel(
        region_lines(target, status, selected=selected),
        box=box.HEAVY if selected else box.SQUARE,
        border_style=SELECTED_BORDER_STYLE if selected else DEFAULT_BORDER_STYLE,
        width=width,
        height=height,
        expand=True,
    )


def frame_width(state: DashboardState) -> int:
    return state.width if state.width > 0 else FALLBACK_FRAME_WIDTH


def build_frame(state: DashboardState, *, width: int | None = None) -> RenderableType:
    """Primary region on top, secondaries side by side, then the footer."""
    width = width or frame_width(state)
    primary_rows: list[RenderableType] = []
    secondary_panels: list[Panel] = []

    for index, (target, status) in enumerate(state.pairs()):
        selected = index == state.cursor
        body = region_lines(target, status, selected=selected)
        if target.is_primary:
            primary_rows.append(
                build_region(
                    target,
                    status,
                    selected=selected,
                    width=width,
                    height=_region_height(body, state.height, PRIMARY_HEIGHT_DIVISOR),
                )
            )
        else:
            secondary_panels.append(
                build_region(
                    target,
                    status,
                    selected=selected,
                    width=None,
                    height=_region_height(body, state.height, SECONDARY_HEIGHT_DIVISOR),
                )
            )

    rows: list[RenderableType] = list(primary_rows)
    if secondary_panels:
        grid = Table.grid(expand=True)
        for _ in secondary_panels:
            grid.add_column(ratio=1)
        grid.add_row(*secondary_panels)
        rows.append(grid)

    rows.append(Text(""))
    rows.append(Text(f"{FOOTER_HINT}  {NAVIGATION_HINT}", style="dim"))
    return Group(*rows)


def render(state: DashboardState, *, width: int | None = None) -> str:
    """Render ``state`` to plain text."""
    console = Console(
        file=io.StringIO(),
        width=width or frame_width(state),
        color_system=None,
        force_terminal=False,
        no_color=True,
        legacy_windows=False,
        highlight=False,
    )
    console.print(build_frame(state, width=console.width))
    return console.file.getvalue()


__all__ = [
    "build_frame",
    "build_region",
    "format_names",
    "frame_width",
    "region_lines",
    "render",
]
