"""Tagged events into a session and commands out of it.

// [LAW:one-source-of-truth] The class IS the type; no event_type string field.

Events are what the session loop consumes (input, resize, renderer acks).
Commands are what dispatch returns for the terminal boundary to carry out,
in order.
"""

from __future__ import annotations

from dataclasses import dataclass

from textual.strip import Strip

# ─── Events ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Event:
    """Base class for session events."""


@dataclass(frozen=True)
class Resize(Event):
    width: int
    height: int


@dataclass(frozen=True)
class KeyPress(Event):
    key: str


@dataclass(frozen=True)
class SyncAck(Event):
    """The external renderer applied the scroll area with this version."""

    version: int


# ─── Commands ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Command:
    """Base class for terminal commands."""


@dataclass(frozen=True)
class ProgramOptions(Command):
    """Declared once per session before the first frame."""

    alt_screen: bool = True
    mouse: bool = False


@dataclass(frozen=True)
class WriteFrame(Command):
    frame: tuple[Strip, ...]


@dataclass(frozen=True)
class SyncScrollArea(Command):
    """Replace the renderer's scroll area: rows [top, bottom) show lines.

    top == bottom clears the area.
    """

    lines: tuple[Strip, ...]
    top: int
    bottom: int
    version: int = 0

    @property
    def height(self) -> int:
        return self.bottom - self.top


@dataclass(frozen=True)
class Quit(Command):
    reason: str = ""
