"""Header and footer views.

Both are rendered at the content width and centered in the terminal width.
Header: bordered table with `<site><path>` and a side hint (`p posts` at the
root, `b back` elsewhere). Footer: top rule plus centered key help.
"""

from __future__ import annotations

from rich import box
from rich.segment import Segment
from rich.table import Table
from rich.text import Text
from textual.strip import Strip

from termpress.core.frame import fit_block, place, truncate_label
from termpress.core.layout import LayoutPlan
from termpress.core.markdown import render_lines
from termpress.core.navigation import ListLocation, Location, RootLocation
from termpress.core.theme import ThemeColors
from termpress.settings import FOOTER_HEIGHT, HEADER_HEIGHT

SIDE_LABEL_WIDTH = 11
LINK_PADDING = 2
BORDER_CELLS = 2


def _hint(key: str, label: str, theme: ThemeColors) -> Text:
    return Text.assemble((key, theme.highlight_style), " ", (label, theme.subtle_style))


def header_budget(plan: LayoutPlan) -> int:
    """Columns available for the path label.

    At full width the side label takes SIDE_LABEL_WIDTH; at the narrow
    layout it is omitted.
    """
    main_width = plan.content_width if plan.narrow else plan.content_width - SIDE_LABEL_WIDTH
    return max(0, main_width - BORDER_CELLS - 2 * LINK_PADDING)


def header_label(site_name: str, location: Location, plan: LayoutPlan) -> str:
    return truncate_label(site_name + location.label, header_budget(plan))


def header_view(
    site_name: str,
    location: Location,
    plan: LayoutPlan,
    terminal_width: int,
    theme: ThemeColors,
) -> list[Strip]:
    label = Text(header_label(site_name, location, plan), style=theme.normal_style, no_wrap=True)

    table = Table(
        box=box.SQUARE,
        show_header=False,
        show_edge=True,
        border_style=theme.border_style,
        padding=(0, LINK_PADDING),
        width=plan.content_width,
        expand=True,
    )
    table.add_column(ratio=1, no_wrap=True, overflow="crop")
    cells = [label]
    if not plan.narrow:
        if isinstance(location, RootLocation):
            side = _hint("p", "posts", theme)
        else:
            side = _hint("b", "back", theme)
        table.add_column(width=SIDE_LABEL_WIDTH - 2 * LINK_PADDING, no_wrap=True, overflow="crop")
        cells.append(side)
    table.add_row(*cells)

    lines = render_lines(table, plan.content_width)
    return place(lines, terminal_width, HEADER_HEIGHT)


def footer_help(location: Location, theme: ThemeColors) -> Text:
    sep = Text("  •  ", style=theme.muted_style, justify="center")
    if isinstance(location, ListLocation):
        parts = [_hint("▲/▼", "select", theme), _hint("enter", "open", theme)]
    else:
        parts = [_hint("▲/▼", "scroll", theme)]
    parts.append(_hint("q", "quit", theme))
    return sep.join(parts)


def footer_view(
    location: Location,
    plan: LayoutPlan,
    terminal_width: int,
    theme: ThemeColors,
) -> list[Strip]:
    width = plan.content_width
    rule = Strip([Segment("─" * width, theme.border_style)], width)
    help_lines = place(render_lines(footer_help(location, theme), width), width)

    inner_height = FOOTER_HEIGHT - 1
    top_pad = max(0, (inner_height - len(help_lines)) // 2)
    body = [Strip.blank(width)] * top_pad + help_lines
    block = [rule] + fit_block(body, width, inner_height)
    return place(block, terminal_width, FOOTER_HEIGHT)
