"""Error taxonomy for the browsing core.

Every error is one-shot: nothing here is retried. The session decides the
fallback per type.
"""


class TermpressError(Exception):
    """Base class for termpress errors."""


class TransientIOError(TermpressError):
    """The content store could not be read. Browsing continues degraded."""


class NotFoundError(TermpressError):
    """A document path does not exist in the content store."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"document not found: {path}")


class ParseError(TermpressError):
    """A stored metadata header is malformed."""


class RenderError(TermpressError):
    """Markdown conversion failed. Fatal to the current session only."""
