"""Textual in-process test harness for termpress.

Re-exports all public API for convenient imports:
    from tests.harness import run_app, press_and_settle, screen_text, ...
"""

from tests.harness.app_runner import run_app
from tests.harness.interactions import (
    press_and_settle,
    press_sequence,
    resize_and_settle,
)
from tests.harness.assertions import (
    get_location,
    get_scroll_offset,
    is_scroll_area_visible,
    get_render_misses,
)
from tests.harness.content import (
    strips_to_text,
    screen_text,
    frame_text,
    line_texts,
)
from tests.harness.messages import MessageCapture

__all__ = [
    "run_app",
    "press_and_settle",
    "press_sequence",
    "resize_and_settle",
    "get_location",
    "get_scroll_offset",
    "is_scroll_area_visible",
    "get_render_misses",
    "strips_to_text",
    "screen_text",
    "frame_text",
    "line_texts",
    "MessageCapture",
]
