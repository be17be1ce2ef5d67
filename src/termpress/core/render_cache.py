"""Per-session memo of markdown conversions keyed by (text identity, wrap width).

Conversion is the most expensive step of the pipeline. Wrap width only
changes when a resize crosses the width threshold, so scrolling and
navigation back to an already rendered document cost a dict lookup.

// [LAW:single-enforcer] render() is the only caller of the converter.
"""

from __future__ import annotations

import hashlib
import logging
from collections import OrderedDict
from typing import Callable, Sequence

from textual.strip import Strip

from termpress.core.errors import RenderError
from termpress.core.markdown import markdown_to_styled

logger = logging.getLogger(__name__)

Converter = Callable[[str, int], Sequence[Strip]]
RenderedBlock = tuple[Strip, ...]

DEFAULT_MAX_ENTRIES = 256


def _is_blank(strip: Strip) -> bool:
    return not strip.text.strip()


def normalize(lines: Sequence[Strip]) -> RenderedBlock:
    """Drop a single leading and a single trailing blank line."""
    lines = list(lines)
    if lines and _is_blank(lines[0]):
        lines = lines[1:]
    if lines and _is_blank(lines[-1]):
        lines = lines[:-1]
    return tuple(lines)


def text_identity(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


class RenderCache:
    """Memoizes converter output. One instance per session."""

    def __init__(
        self,
        converter: Converter = markdown_to_styled,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ) -> None:
        self._converter = converter
        self._max_entries = max(1, int(max_entries))
        self._entries: OrderedDict[tuple[str, int], RenderedBlock] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: tuple[str, int]) -> bool:
        text, wrap_width = key
        return (text_identity(text), wrap_width) in self._entries

    def render(self, text: str, wrap_width: int) -> RenderedBlock:
        """Return styled lines for text at wrap_width.

        Raises RenderError when the converter fails; nothing is cached then.
        """
        key = (text_identity(text), wrap_width)
        cached = self._entries.get(key)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        try:
            block = normalize(self._converter(text, wrap_width))
        except Exception as exc:
            raise RenderError(f"markdown conversion failed at width {wrap_width}: {exc}") from exc

        self._entries[key] = block
        # Oldest-first eviction.
        while len(self._entries) > self._max_entries:
            self._entries.popitem(last=False)
        logger.debug("rendered %d lines at width %d", len(block), wrap_width)
        return block
