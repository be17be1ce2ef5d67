"""Single-threaded per-session event loop.

Events are queued FIFO and each one is dispatched to completion before the
next is taken. Commands are carried out against the Terminal in the order
dispatch returned them. Events posted while a dispatch is running (e.g. a
renderer acknowledging a sync) are queued behind it rather than re-entering.

// [LAW:single-enforcer] RenderError is turned into session shutdown here only.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Protocol

from termpress.core.errors import RenderError
from termpress.core.events import (
    Command,
    Event,
    ProgramOptions,
    Quit,
    SyncScrollArea,
    WriteFrame,
)
from termpress.core.frame import Frame
from termpress.core.session import BrowserSession

logger = logging.getLogger(__name__)


class Terminal(Protocol):
    """What the transport exposes to a session."""

    def declare_options(self, options: ProgramOptions) -> None: ...

    def write_frame(self, frame: Frame) -> None: ...

    def sync_scroll_area(self, command: SyncScrollArea) -> None: ...

    def end_session(self, reason: str) -> None: ...


class SessionLoop:
    def __init__(self, session: BrowserSession, terminal: Terminal, name: str = "session") -> None:
        self.session = session
        self.terminal = terminal
        self.name = name
        self._queue: deque[Event] = deque()
        self._pumping = False
        self.started = False
        self.closed = False
        self.close_reason = ""

    def start(self) -> None:
        if self.started:
            return
        self.started = True
        logger.info("%s started", self.name)
        self._execute(self.session.start())

    def post(self, event: Event) -> None:
        """Queue an event and process the queue unless already processing."""
        if self.closed:
            logger.debug("%s closed; dropping %r", self.name, event)
            return
        self._queue.append(event)
        if not self._pumping:
            self.pump()

    def pump(self) -> None:
        self._pumping = True
        try:
            while self._queue and not self.closed:
                event = self._queue.popleft()
                try:
                    commands = self.session.dispatch(event)
                except RenderError as exc:
                    # No partial frame: a corrupt screen is worse than a disconnect.
                    logger.error("%s render failed, closing session: %s", self.name, exc)
                    self._close(f"render error: {exc}")
                    return
                self._execute(commands)
        finally:
            self._pumping = False

    def _execute(self, commands: list[Command]) -> None:
        for command in commands:
            if self.closed:
                return
            if isinstance(command, WriteFrame):
                self.terminal.write_frame(command.frame)
            elif isinstance(command, SyncScrollArea):
                self.terminal.sync_scroll_area(command)
            elif isinstance(command, ProgramOptions):
                self.terminal.declare_options(command)
            elif isinstance(command, Quit):
                self._close(command.reason)
            else:
                raise TypeError(f"unsupported command: {command!r}")

    def _close(self, reason: str) -> None:
        if self.closed:
            return
        self.closed = True
        self.close_reason = reason
        self._queue.clear()
        logger.info("%s closed: %s", self.name, reason or "done")
        self.terminal.end_session(reason)
