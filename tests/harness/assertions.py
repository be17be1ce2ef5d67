"""State query helpers for Textual in-process tests.

Pure functions that return values; tests compose with assert.
No internal assertions.
"""

from termpress.core.navigation import Location
from termpress.tui.app import TermpressApp


def get_location(app: TermpressApp) -> Location:
    return app.session.location


def get_scroll_offset(app: TermpressApp) -> int:
    return app.session.viewport.y_offset


def is_scroll_area_visible(app: TermpressApp) -> bool:
    return app.frame_view.scroll_area is not None


def get_render_misses(app: TermpressApp) -> int:
    return app.session.render_cache.misses
