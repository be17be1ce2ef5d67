"""Pytest configuration and shared fixtures for termpress tests."""

from pathlib import Path

import pytest
from rich.segment import Segment
from textual.strip import Strip

from termpress.content.store import ContentStore
from termpress.core.render_cache import RenderCache
from termpress.core.session import BrowserSession
from termpress.settings import RuntimeConfig


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------

class CountingConverter:
    """Plain-text converter: one Strip per source line, cropped to width."""

    def __init__(self):
        self.calls: list[tuple[str, int]] = []

    def __call__(self, text: str, width: int) -> list[Strip]:
        self.calls.append((text, width))
        return [Strip([Segment(line[:width])]) for line in text.split("\n")]


class CountingStore(ContentStore):
    """ContentStore that records public load/list calls."""

    def __init__(self, root):
        super().__init__(root)
        self.loads: list[str] = []
        self.list_calls = 0

    def load(self, path):
        self.loads.append(path)
        return super().load(path)

    def list(self):
        self.list_calls += 1
        return super().list()


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------

POSTS = {
    "01-hello.md": "---\ntitle: Hello\nsubtitle: First post\n---\n\nHello body line.\n",
    "02-second.md": "---\ntitle: Second\nsubtitle: Another one\n---\n\nSecond body.\nMore text.\n",
    "03-third.md": "---\ntitle: Third\ndescription: Last\n---\n\nThird body.\n",
}

CARDS = {
    "a.md": "Card A\nline 2",
    "b.md": "Card B\nline 2\nline 3",
    "c.md": "Card C",
    "d.md": "Card D\nline 2",
}


def write_store(root: Path, *, posts=POSTS, cards=CARDS, root_doc="# Home\n\nWelcome home.\n") -> Path:
    (root / "posts").mkdir(parents=True, exist_ok=True)
    for name, text in posts.items():
        (root / "posts" / name).write_text(text, encoding="utf-8")
    if cards:
        (root / "cards").mkdir(exist_ok=True)
        for name, text in cards.items():
            (root / "cards" / name).write_text(text, encoding="utf-8")
    if root_doc is not None:
        (root / "root.md").write_text(root_doc, encoding="utf-8")
    return root


@pytest.fixture
def store_root(tmp_path):
    return write_store(tmp_path / "fs")


@pytest.fixture
def store(store_root):
    return CountingStore(store_root)


@pytest.fixture
def converter():
    return CountingConverter()


@pytest.fixture
def make_session(store, converter):
    """Factory for sessions wired to the counting store and converter."""

    def _make(*, high_performance=True, store_override=None, **config):
        cfg = RuntimeConfig(high_performance=high_performance, **config)
        return BrowserSession(
            store_override or store,
            cfg,
            render_cache=RenderCache(converter=converter),
        )

    return _make
