"""Rich renderables -> styled lines, and the default markdown converter.

Rich does the parsing and styling; the result is split into one Strip per
terminal row. Deterministic for a given (text, wrap_width, code_theme).
"""

from __future__ import annotations

import io

from rich.console import Console, RenderableType
from rich.markdown import Markdown
from rich.segment import Segment
from textual.strip import Strip

DEFAULT_CODE_THEME = "monokai"


def render_lines(renderable: RenderableType, width: int) -> list[Strip]:
    """Render any Rich renderable at width columns into Strips."""
    width = max(1, width)
    console = Console(
        file=io.StringIO(),
        width=width,
        color_system="truecolor",
        force_terminal=True,
        legacy_windows=False,
    )
    render_options = console.options.update_width(width)
    segments = console.render(renderable, render_options)
    return Strip.from_lines(list(Segment.split_lines(segments)))


def markdown_to_styled(
    text: str, wrap_width: int, *, code_theme: str = DEFAULT_CODE_THEME
) -> list[Strip]:
    """Render markdown text wrapped at wrap_width columns."""
    return render_lines(Markdown(text, code_theme=code_theme), wrap_width)
