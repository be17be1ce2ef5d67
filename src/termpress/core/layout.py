"""Layout engine: terminal dimensions -> content width, viewport height, column mode.

// [LAW:one-source-of-truth] LayoutPlan is the only place widths are derived.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from textual.strip import Strip

from termpress.core.frame import fit_line
from termpress.core.navigation import Location
from termpress.settings import (
    COLUMN_GAP,
    FOOTER_HEIGHT,
    HEADER_HEIGHT,
    MAX_WIDTH,
    NARROW_MARGIN,
)


class ColumnMode(Enum):
    SINGLE = "single"
    DUAL = "dual"


@dataclass(frozen=True)
class LayoutPlan:
    content_width: int
    viewport_height: int
    column_mode: ColumnMode

    @property
    def narrow(self) -> bool:
        """Below full width the header's side label is dropped."""
        return self.content_width < MAX_WIDTH


def fit_width(terminal_width: int) -> int:
    """Best-fit content width: capped at MAX_WIDTH, margin taken when narrower."""
    width = min(terminal_width, MAX_WIDTH)
    if width < MAX_WIDTH:
        width -= NARROW_MARGIN
    return max(1, width)


def column_mode_for(content_width: int) -> ColumnMode:
    return ColumnMode.SINGLE if content_width < MAX_WIDTH else ColumnMode.DUAL


def compute_layout(
    terminal_width: int, terminal_height: int, location: Location | None = None
) -> LayoutPlan:
    """Pure function of its inputs; location is accepted for per-view layouts.

    Every view currently shares one plan.
    """
    content_width = fit_width(terminal_width)
    viewport_height = max(0, terminal_height - HEADER_HEIGHT - FOOTER_HEIGHT)
    return LayoutPlan(
        content_width=content_width,
        viewport_height=viewport_height,
        column_mode=column_mode_for(content_width),
    )


def card_width(plan: LayoutPlan) -> int:
    """Wrap width for one fixed content block under this plan."""
    if plan.column_mode is ColumnMode.DUAL:
        return max(1, (plan.content_width - COLUMN_GAP) // 2)
    return plan.content_width


def arrange_blocks(blocks: Sequence[Sequence[Strip]], plan: LayoutPlan) -> list[Strip]:
    """Compose fixed-size blocks into one block of lines.

    DUAL pairs blocks into rows; a row is as tall as its taller member and
    the members sit COLUMN_GAP columns apart. SINGLE stacks them.
    """
    if plan.column_mode is ColumnMode.SINGLE:
        return [line for block in blocks for line in block]

    width = card_width(plan)
    gap = Strip.blank(COLUMN_GAP)
    lines: list[Strip] = []
    for i in range(0, len(blocks), 2):
        left = list(blocks[i])
        right = list(blocks[i + 1]) if i + 1 < len(blocks) else []
        row_height = max(len(left), len(right))
        for y in range(row_height):
            left_line = fit_line(left[y], width) if y < len(left) else Strip.blank(width)
            if not right:
                lines.append(left_line)
                continue
            right_line = fit_line(right[y], width) if y < len(right) else Strip.blank(width)
            lines.append(Strip.join([left_line, gap, right_line]))
    return lines
