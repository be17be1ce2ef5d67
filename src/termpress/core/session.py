"""Per-session browser state and its single dispatch function.

// [LAW:single-enforcer] dispatch() is the only place session state mutates.
// [LAW:one-source-of-truth] The render cache is owned here, one per session;
//   no renderer is shared between sessions.

Re-rendering (cache lookups at a wrap width) happens in exactly two cases:
  1. the session gets its first dimensions, or navigates (needs_new_file), or
  2. the fitted content width changes across a resize.
Any other resize only re-places already rendered lines.
"""

from __future__ import annotations

import logging
from functools import partial

from textual.strip import Strip

from termpress.content.store import ContentStore, Document
from termpress.core.chrome import footer_view, header_view
from termpress.core.doc_list import DocumentList
from termpress.core.errors import NotFoundError, TransientIOError
from termpress.core.events import (
    Command,
    Event,
    KeyPress,
    ProgramOptions,
    Quit,
    Resize,
    SyncAck,
    WriteFrame,
)
from termpress.core.frame import Frame, compose, place
from termpress.core.layout import LayoutPlan, arrange_blocks, card_width, compute_layout
from termpress.core.markdown import markdown_to_styled
from termpress.core.navigation import (
    ROOT,
    Action,
    DetailLocation,
    ListLocation,
    Location,
    RootLocation,
    action_for_key,
    transition,
)
from termpress.core.render_cache import RenderCache
from termpress.core.theme import theme_for
from termpress.core.viewport import Viewport
from termpress.settings import HEADER_HEIGHT, RuntimeConfig

logger = logging.getLogger(__name__)

ROOT_PLACEHOLDER = "# Welcome\n\nPress **p** to browse posts."
UNREADABLE_PLACEHOLDER = "*This document could not be read right now.*"


class BrowserSession:
    """Everything one remote session owns. Not shared, not thread-safe."""

    def __init__(
        self,
        store: ContentStore,
        config: RuntimeConfig | None = None,
        *,
        render_cache: RenderCache | None = None,
    ) -> None:
        config = config or RuntimeConfig()
        self.store = store
        self.site_name = config.site_name
        self.high_performance = config.high_performance
        self.theme = theme_for(config.dark)
        self.render_cache = render_cache or RenderCache(
            converter=partial(markdown_to_styled, code_theme=config.code_theme)
        )

        self.location: Location = ROOT
        self.width = 0
        self.height = 0
        self.fit_width = 0
        self.plan: LayoutPlan | None = None
        self.loaded = False
        self.closed = False

        self.viewport = Viewport(high_performance=self.high_performance)
        self.doc_list = DocumentList()
        self.document: Document | None = None
        self._cards: list[Document] = []

        # Rendered blocks for the active view at the current fit width.
        self._body_lines: tuple[Strip, ...] = ()
        self._chrome: dict[tuple, tuple[list[Strip], list[Strip]]] = {}

    # ─── Entry points ─────────────────────────────────────────────────────

    def start(self) -> list[Command]:
        return [ProgramOptions(alt_screen=True, mouse=False)]

    def dispatch(self, event: Event) -> list[Command]:
        """Process one event fully and return the commands it produced, in order.

        RenderError propagates: the caller ends this session.
        """
        if self.closed:
            return []
        if isinstance(event, Resize):
            commands = self._on_resize(event)
        elif isinstance(event, KeyPress):
            commands = self._on_key(event)
        elif isinstance(event, SyncAck):
            self.viewport.acknowledge(event.version)
            return []
        else:
            raise TypeError(f"unsupported event: {event!r}")

        if not self.closed and self.plan is not None:
            commands.append(WriteFrame(self.view()))
        return commands

    # ─── Resize ───────────────────────────────────────────────────────────

    def _on_resize(self, event: Resize) -> list[Command]:
        last_fit_width = self.fit_width
        self.width = max(0, event.width)
        self.height = max(0, event.height)
        self.plan = compute_layout(self.width, self.height, self.location)
        self.fit_width = self.plan.content_width
        self.doc_list.set_size(self.fit_width, self.plan.viewport_height)
        self._chrome.clear()

        if not isinstance(self.location, ListLocation):
            self.viewport.set_height(self.plan.viewport_height)

        if not self.loaded:
            self.loaded = True
            self._rerender(needs_new_file=True)
        elif last_fit_width != self.fit_width:
            self._rerender(needs_new_file=False)
        elif not isinstance(self.location, ListLocation):
            # Same wrap width: re-place the lines already rendered.
            self._place_body()

        commands: list[Command] = []
        if self.high_performance:
            # Header height is fixed but its screen row depends on the terminal.
            self.viewport.y_position = HEADER_HEIGHT
            commands.append(self.viewport.sync())
        return commands

    # ─── Keys ─────────────────────────────────────────────────────────────

    def _on_key(self, event: KeyPress) -> list[Command]:
        action = action_for_key(event.key)
        if action is Action.QUIT:
            self.closed = True
            logger.info("session quit at %s", self.location.label)
            return [Quit("user quit")]
        if self.plan is None:
            # No dimensions yet, nothing to draw into.
            return []

        if action is not None:
            selected = self.doc_list.selected if isinstance(self.location, ListLocation) else None
            target = transition(self.location, action, selected.path if selected else None)
            if target is None:
                return []
            return self.navigate(target)

        if isinstance(self.location, ListLocation):
            self.doc_list.handle_key(event.key)
            return []
        if self.viewport.handle_key(event.key) and self.high_performance:
            return [self.viewport.sync()]
        return []

    # ─── Navigation ───────────────────────────────────────────────────────

    def navigate(self, target: Location) -> list[Command]:
        """Move to target and rebuild the body. Returns the sync command, if any."""
        logger.debug("navigate %s -> %s", self.location.label, target.label)
        self.location = target
        if isinstance(target, ListLocation):
            self.document = None
            self._build_list()
            self._rerender(needs_new_file=False)
        else:
            if isinstance(target, RootLocation):
                self.document = None
            self._rerender(needs_new_file=True)
        return [self.viewport.sync()] if self.high_performance else []

    def _build_list(self) -> None:
        try:
            summaries = self.store.list()
        except TransientIOError as exc:
            logger.warning("document list unavailable: %s", exc)
            summaries = []
        self.doc_list.set_items(summaries)
        if self.plan is not None:
            self.doc_list.set_size(self.fit_width, self.plan.viewport_height)

    # ─── Rendering ────────────────────────────────────────────────────────

    def _rerender(self, needs_new_file: bool) -> None:
        if isinstance(self.location, ListLocation):
            # The list scrolls itself; collapse the viewport so the renderer's
            # scroll area is emptied on the next sync.
            self.viewport.clear()
            self._body_lines = ()
            return

        # Height is 0 after leaving the list.
        self.viewport.set_height(self.plan.viewport_height)

        if needs_new_file:
            self._load_for_location()
            self.viewport.set_y_offset(0)

        self._body_lines = self._render_body()
        self._place_body()

    def _load_for_location(self) -> None:
        if isinstance(self.location, DetailLocation):
            try:
                self.document = self.store.load(self.location.path)
                return
            except NotFoundError as exc:
                logger.warning("%s; returning to root", exc)
                self.location = ROOT
            except TransientIOError as exc:
                logger.warning("cannot load %s: %s", self.location.path, exc)
                self.document = None
                return

        try:
            self.document = self.store.load_root()
        except (NotFoundError, TransientIOError) as exc:
            logger.warning("landing document unavailable: %s", exc)
            self.document = None
        try:
            self._cards = self.store.list_cards()
        except TransientIOError as exc:
            logger.warning("cards unavailable: %s", exc)
            self._cards = []

    def _render_body(self) -> tuple[Strip, ...]:
        if isinstance(self.location, DetailLocation):
            text = self.document.body if self.document else UNREADABLE_PLACEHOLDER
            return self.render_cache.render(text, self.fit_width)

        text = self.document.body if self.document else ROOT_PLACEHOLDER
        lines = list(self.render_cache.render(text, self.fit_width))
        if self._cards:
            wrap = card_width(self.plan)
            blocks = [self.render_cache.render(card.body, wrap) for card in self._cards]
            lines.append(Strip.blank(self.fit_width))
            lines.extend(arrange_blocks(blocks, self.plan))
        return tuple(lines)

    def _place_body(self) -> None:
        self.viewport.set_content(place(self._body_lines, self.width))

    def _chrome_for(self) -> tuple[list[Strip], list[Strip]]:
        key = (self.location, self.plan, self.width)
        chrome = self._chrome.get(key)
        if chrome is None:
            chrome = (
                header_view(self.site_name, self.location, self.plan, self.width, self.theme),
                footer_view(self.location, self.plan, self.width, self.theme),
            )
            self._chrome[key] = chrome
        return chrome

    def view(self) -> Frame:
        """The full frame for the current state. Pure with respect to state."""
        if self.plan is None:
            return ()
        header, footer = self._chrome_for()
        if isinstance(self.location, ListLocation):
            body = place(self.doc_list.render(self.theme), self.width, self.plan.viewport_height)
        elif self.high_performance:
            # The renderer draws the viewport into its own scroll area.
            body = []
        else:
            body = list(self.viewport.visible_lines())
        return compose(header, body, footer, self.width, self.height)
