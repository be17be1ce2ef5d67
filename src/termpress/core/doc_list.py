"""Selectable document list for the list view.

The list manages its own cursor and paging, so the viewport is collapsed
while it is on screen. Items carry metadata only.
"""

from __future__ import annotations

from typing import Sequence

from rich.text import Text
from textual.strip import Strip

from termpress.content.store import DocumentSummary
from termpress.core.frame import fit_line
from termpress.core.markdown import render_lines
from termpress.core.theme import ThemeColors

ITEM_HEIGHT = 3  # title, description, spacer
TITLE_ROWS = 2  # list title, spacer
PAGER_ROWS = 1


class DocumentList:
    def __init__(
        self,
        items: Sequence[DocumentSummary] = (),
        *,
        width: int = 0,
        height: int = 0,
        title: str = "Recent Posts",
        empty_message: str = "No posts found.",
    ) -> None:
        self.title = title
        self.empty_message = empty_message
        self.width = width
        self.height = height
        self._items: tuple[DocumentSummary, ...] = tuple(items)
        self.index = 0

    @property
    def items(self) -> tuple[DocumentSummary, ...]:
        return self._items

    def set_items(self, items: Sequence[DocumentSummary]) -> None:
        self._items = tuple(items)
        self.index = 0

    def set_size(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)

    @property
    def selected(self) -> DocumentSummary | None:
        if not self._items:
            return None
        return self._items[self.index]

    @property
    def per_page(self) -> int:
        return max(1, (self.height - TITLE_ROWS - PAGER_ROWS) // ITEM_HEIGHT)

    @property
    def page_count(self) -> int:
        return max(1, -(-len(self._items) // self.per_page))

    @property
    def page(self) -> int:
        return self.index // self.per_page

    def select(self, index: int) -> bool:
        if not self._items:
            return False
        before = self.index
        self.index = min(max(0, index), len(self._items) - 1)
        return self.index != before

    def handle_key(self, key: str) -> bool:
        """Move the cursor. Returns whether the selection changed."""
        if key in ("down", "j"):
            return self.select(self.index + 1)
        if key in ("up", "k"):
            return self.select(self.index - 1)
        if key in ("pagedown", "right", "l"):
            return self.select(self.index + self.per_page)
        if key in ("pageup", "left", "h"):
            return self.select(self.index - self.per_page)
        if key in ("home", "g"):
            return self.select(0)
        if key in ("end", "G"):
            return self.select(len(self._items) - 1)
        return False

    def _line(self, text: Text) -> Strip:
        text.no_wrap = True
        text.overflow = "ellipsis"
        return fit_line(render_lines(text, self.width)[0], self.width)

    def render(self, theme: ThemeColors) -> list[Strip]:
        """Lines for the current page; callers pad to the body height."""
        if self.width <= 0:
            return []
        lines = [
            self._line(Text(f" {self.title} ", style=theme.title_style)),
            Strip.blank(self.width),
        ]
        if not self._items:
            lines.append(self._line(Text("  " + self.empty_message, style=theme.subtle_style)))
            return lines

        start = self.page * self.per_page
        for offset, item in enumerate(self._items[start : start + self.per_page]):
            selected = start + offset == self.index
            bar = Text("│ " if selected else "  ", style=theme.highlight_style)
            title_style = theme.highlight_style if selected else theme.normal_style
            lines.append(self._line(Text.assemble(bar.copy(), (item.title, title_style))))
            lines.append(self._line(Text.assemble(bar.copy(), (item.description, theme.subtle_style))))
            lines.append(Strip.blank(self.width))

        if self.page_count > 1:
            dots = Text("  ")
            for page in range(self.page_count):
                style = theme.normal_style if page == self.page else theme.muted_style
                dots.append("•" if page == self.page else "○", style=style)
            lines.append(self._line(dots))
        return lines
