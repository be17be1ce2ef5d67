"""Read-only file store of markdown documents.

Layout under the store root:

    root.md        landing document
    posts/*.md     documents enumerated for the list view
    cards/*.md     fixed preview cards on the landing view

The store holds no mutable state after construction, so any number of
sessions may read from one instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from termpress.content.frontmatter import split_frontmatter
from termpress.core.errors import NotFoundError, ParseError, TransientIOError

logger = logging.getLogger(__name__)

ROOT_DOCUMENT = "root.md"
POSTS_DIR = "posts"
CARDS_DIR = "cards"


@dataclass(frozen=True)
class DocumentSummary:
    """Metadata-only view of a document, as shown in the list."""

    path: str
    title: str
    description: str


@dataclass(frozen=True)
class Document:
    path: str
    title: str
    description: str
    body: str
    metadata: dict[str, str] = field(default_factory=dict, compare=False)

    def summary(self) -> DocumentSummary:
        return DocumentSummary(path=self.path, title=self.title, description=self.description)


class ContentStore:
    """Documents under a root directory, addressed by root-relative paths."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def list(self) -> list[DocumentSummary]:
        """Summaries of every post, ordered by file name.

        Raises TransientIOError when the posts directory cannot be read.
        """
        return [doc.summary() for doc in self._read_dir(POSTS_DIR)]

    def list_cards(self) -> list[Document]:
        """Preview cards for the landing view. A missing cards dir means no cards."""
        if not (self._root / CARDS_DIR).is_dir():
            return []
        return self._read_dir(CARDS_DIR)

    def load(self, path: str) -> Document:
        """Load one document in full.

        Raises NotFoundError for a missing path or one outside the store root.
        Raises TransientIOError when the file cannot be read or decoded.
        """
        return self._read_document(path)

    def load_root(self) -> Document:
        return self.load(ROOT_DOCUMENT)

    def _read_document(self, path: str) -> Document:
        resolved = (self._root / path).resolve()
        if not resolved.is_relative_to(self._root) or not resolved.is_file():
            raise NotFoundError(path)
        try:
            raw = resolved.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise NotFoundError(path) from None
        except OSError as exc:
            raise TransientIOError(f"cannot read {path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise TransientIOError(f"{path} is not valid UTF-8: {exc}") from exc
        return _parse_document(path, raw)

    def _read_dir(self, name: str) -> list[Document]:
        directory = self._root / name
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise TransientIOError(f"cannot read {directory}: {exc}") from exc

        documents = []
        for entry in entries:
            if entry.is_dir():
                continue
            try:
                documents.append(self._read_document(f"{name}/{entry.name}"))
            except (NotFoundError, TransientIOError) as exc:
                # File vanished or became unreadable mid-scan; skip just this one.
                logger.warning("skipping %s: %s", entry, exc)
        return documents


def _parse_document(path: str, raw: str) -> Document:
    try:
        body, metadata = split_frontmatter(raw)
    except ParseError as exc:
        logger.warning("%s: %s; treating metadata as empty", path, exc)
        body, metadata = raw, {}

    title = metadata.get("title") or Path(path).stem
    description = metadata.get("subtitle") or metadata.get("description") or ""
    return Document(path=path, title=title, description=description, body=body, metadata=metadata)
