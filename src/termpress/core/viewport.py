"""Scrollable viewport and its sync protocol with the double-buffered renderer.

In high-performance mode the viewport's lines never pass through the normal
frame; the renderer holds them in a separate scroll area that only changes
when a SyncScrollArea arrives. Content is always set before the sync is
built, so the sync carries the new lines at the new geometry.

// [LAW:single-enforcer] Offsets are clamped only in _clamp().
"""

from __future__ import annotations

import logging
from typing import Sequence

from textual.strip import Strip

from termpress.core.events import SyncScrollArea

logger = logging.getLogger(__name__)


class Viewport:
    """Scroll state over a block of rendered lines."""

    def __init__(self, height: int = 0, *, high_performance: bool = True) -> None:
        self.height = max(0, height)
        self.high_performance = high_performance
        self.y_offset = 0
        # Screen row of the first viewport line; the header sits above it.
        self.y_position = 0
        self._lines: tuple[Strip, ...] = ()
        self.version = 0
        self.synced_version = 0

    # ─── Geometry ─────────────────────────────────────────────────────────

    @property
    def lines(self) -> tuple[Strip, ...]:
        return self._lines

    @property
    def content_height(self) -> int:
        return len(self._lines)

    @property
    def max_y_offset(self) -> int:
        return max(0, self.content_height - self.height)

    @property
    def at_bottom(self) -> bool:
        return self.y_offset >= self.max_y_offset

    @property
    def needs_sync(self) -> bool:
        return self.high_performance and self.synced_version != self.version

    def _clamp(self) -> None:
        self.y_offset = min(max(0, self.y_offset), self.max_y_offset)

    def _touch(self) -> None:
        self.version += 1

    def set_height(self, height: int) -> None:
        height = max(0, height)
        if height == self.height:
            return
        self.height = height
        self._clamp()
        self._touch()

    def set_content(self, lines: Sequence[Strip]) -> None:
        self._lines = tuple(lines)
        self._clamp()
        self._touch()

    def clear(self) -> None:
        """Collapse to an empty, zero-height region."""
        self._lines = ()
        self.height = 0
        self.y_offset = 0
        self._touch()

    # ─── Scrolling ────────────────────────────────────────────────────────

    def set_y_offset(self, offset: int) -> bool:
        """Move to offset (clamped). Returns whether the position changed."""
        before = self.y_offset
        self.y_offset = offset
        self._clamp()
        if self.y_offset == before:
            return False
        self._touch()
        return True

    def scroll(self, delta: int) -> bool:
        return self.set_y_offset(self.y_offset + delta)

    def goto_top(self) -> bool:
        return self.set_y_offset(0)

    def goto_bottom(self) -> bool:
        return self.set_y_offset(self.max_y_offset)

    def handle_key(self, key: str) -> bool:
        """Apply a scroll key. Returns whether the position changed."""
        half = max(1, self.height // 2)
        page = max(1, self.height)
        if key in ("down", "j"):
            return self.scroll(1)
        if key in ("up", "k"):
            return self.scroll(-1)
        if key in ("pagedown", "space", "f"):
            return self.scroll(page)
        if key in ("pageup",):
            return self.scroll(-page)
        if key in ("ctrl+d", "d"):
            return self.scroll(half)
        if key in ("ctrl+u", "u"):
            return self.scroll(-half)
        if key in ("home", "g"):
            return self.goto_top()
        if key in ("end", "G"):
            return self.goto_bottom()
        return False

    # ─── Output ───────────────────────────────────────────────────────────

    def visible_lines(self) -> tuple[Strip, ...]:
        return self._lines[self.y_offset : self.y_offset + self.height]

    def sync(self) -> SyncScrollArea:
        """Snapshot of the visible region for the renderer's scroll area."""
        command = SyncScrollArea(
            lines=self.visible_lines(),
            top=self.y_position,
            bottom=self.y_position + self.height,
            version=self.version,
        )
        logger.debug(
            "sync v%d rows %d-%d offset %d", self.version, command.top, command.bottom, self.y_offset
        )
        return command

    def acknowledge(self, version: int) -> None:
        self.synced_version = max(self.synced_version, version)
