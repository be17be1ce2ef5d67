"""Full-screen widget that shows session frames plus a separately synced scroll area.

Two buffers: the frame (header, body, footer) replaced on every WriteFrame,
and the scroll area, replaced only by SyncScrollArea. Rows inside the scroll
area show its lines instead of the frame's. An area that is never re-synced
keeps showing what it last received, which is why clearing it takes an
explicit empty sync.
"""

from __future__ import annotations

from textual import events
from textual.message import Message
from textual.strip import Strip
from textual.widget import Widget

from termpress.core.events import SyncScrollArea
from termpress.core.frame import Frame


class FrameView(Widget):
    """Line API renderer for frames."""

    DEFAULT_CSS = """
    FrameView {
        width: 100%;
        height: 100%;
    }
    """

    class Resized(Message):
        """The drawable area changed size."""

        def __init__(self, width: int, height: int) -> None:
            self.width = width
            self.height = height
            super().__init__()

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._frame: Frame = ()
        self._scroll_area: SyncScrollArea | None = None

    @property
    def frame(self) -> Frame:
        return self._frame

    @property
    def scroll_area(self) -> SyncScrollArea | None:
        return self._scroll_area

    def on_resize(self, event: events.Resize) -> None:
        self.post_message(self.Resized(event.size.width, event.size.height))

    def show_frame(self, frame: Frame) -> None:
        self._frame = frame
        self.refresh()

    def apply_scroll_area(self, command: SyncScrollArea) -> None:
        self._scroll_area = command if command.height > 0 else None
        self.refresh()

    def screen_lines(self) -> list[Strip]:
        """What is on screen right now, row by row."""
        return [self.render_line(y) for y in range(self.size.height)]

    def render_line(self, y: int) -> Strip:
        width = self.size.width
        area = self._scroll_area
        if area is not None and area.top <= y < area.bottom:
            index = y - area.top
            if index < len(area.lines):
                return area.lines[index].crop_extend(0, width, self.rich_style)
            return Strip.blank(width, self.rich_style)
        if y < len(self._frame):
            return self._frame[y].crop_extend(0, width, self.rich_style)
        return Strip.blank(width, self.rich_style)
