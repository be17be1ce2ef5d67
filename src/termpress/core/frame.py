"""Frame composition: header + body + footer -> exact width x height rectangle.

Everything here is a pure function over Strips; a Frame is an immutable
tuple and is rebuilt on every relevant event rather than mutated.
"""

from __future__ import annotations

from typing import Sequence

from textual.strip import Strip

from termpress.settings import FOOTER_HEIGHT, HEADER_HEIGHT

Frame = tuple[Strip, ...]

ELLIPSIS = "..."


def fit_line(strip: Strip, width: int) -> Strip:
    """Crop or right-pad one line to exactly width cells."""
    return strip.crop(0, width).adjust_cell_length(width)


def fit_block(lines: Sequence[Strip], width: int, height: int) -> list[Strip]:
    """Exactly height lines of exactly width cells; pads with blank rows at the bottom."""
    height = max(0, height)
    fitted = [fit_line(line, width) for line in lines[:height]]
    fitted.extend(Strip.blank(width) for _ in range(height - len(fitted)))
    return fitted


def place(lines: Sequence[Strip], width: int, height: int | None = None) -> list[Strip]:
    """Center lines horizontally as one block within width.

    The block keeps its own left edge so prose stays aligned. With height,
    the result is also padded/cropped to that many rows (top aligned).
    """
    block_width = max((line.cell_length for line in lines), default=0)
    left = max(0, (width - block_width) // 2)
    indent = Strip.blank(left)
    placed = [fit_line(Strip.join([indent, line]) if left else line, width) for line in lines]
    if height is None:
        return placed
    return fit_block(placed, width, height)


def compose(
    header: Sequence[Strip],
    body: Sequence[Strip],
    footer: Sequence[Strip],
    width: int,
    height: int,
) -> Frame:
    """Build a width x height frame with the footer at a stable position.

    When height cannot hold header and footer, the stack is cropped from the
    top so the frame is still exactly height rows.
    """
    width = max(0, width)
    height = max(0, height)
    body_height = max(0, height - HEADER_HEIGHT - FOOTER_HEIGHT)
    rows = (
        fit_block(header, width, HEADER_HEIGHT)
        + fit_block(body, width, body_height)
        + fit_block(footer, width, FOOTER_HEIGHT)
    )
    return tuple(rows[:height])


def truncate_label(text: str, budget: int) -> str:
    """Shorten text to fit budget columns, marking the cut with an ellipsis."""
    if len(text) <= budget:
        return text
    return text[: max(0, budget - 4)] + ELLIPSIS
