"""Textual application hosting one browsing session.

// [LAW:locality-or-seam] Thin transport adapter: key and resize messages go
//   into the SessionLoop; the app implements the Terminal side of it.
"""

from __future__ import annotations

import logging

from textual import events
from textual.app import App, ComposeResult

from termpress.content.store import ContentStore
from termpress.core.events import KeyPress, ProgramOptions, Resize, SyncAck, SyncScrollArea
from termpress.core.frame import Frame
from termpress.core.loop import SessionLoop
from termpress.core.session import BrowserSession
from termpress.settings import RuntimeConfig
from termpress.tui.frame_view import FrameView

logger = logging.getLogger(__name__)


class TermpressApp(App):
    """TUI application for termpress."""

    CSS = """
    Screen {
        overflow: hidden;
    }
    """

    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        store: ContentStore,
        config: RuntimeConfig | None = None,
        *,
        session: BrowserSession | None = None,
        session_id: str | None = None,
    ) -> None:
        super().__init__()
        self._config = config or RuntimeConfig()
        self.session = session or BrowserSession(store, self._config)
        self.session_id = session_id or f"{id(self):x}"
        self.session_loop = SessionLoop(self.session, self, name=f"session-{self.session_id}")
        self.program_options: ProgramOptions | None = None
        self.title = self._config.site_name

    def compose(self) -> ComposeResult:
        yield FrameView(id="frame")

    @property
    def frame_view(self) -> FrameView:
        return self.query_one(FrameView)

    def on_mount(self) -> None:
        self.session_loop.start()

    # ─── Input ────────────────────────────────────────────────────────────

    def on_frame_view_resized(self, message: FrameView.Resized) -> None:
        self.session_loop.post(Resize(message.width, message.height))

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.session_loop.post(KeyPress(event.key))

    # ─── Terminal ─────────────────────────────────────────────────────────

    def declare_options(self, options: ProgramOptions) -> None:
        # Textual always runs full screen without mouse reporting for this app.
        self.program_options = options
        logger.debug("program options: %s", options)

    def write_frame(self, frame: Frame) -> None:
        self.frame_view.show_frame(frame)

    def sync_scroll_area(self, command: SyncScrollArea) -> None:
        self.frame_view.apply_scroll_area(command)
        self.session_loop.post(SyncAck(command.version))

    def end_session(self, reason: str) -> None:
        if reason.startswith("render error"):
            self.exit(return_code=1, message=reason)
        else:
            self.exit()
