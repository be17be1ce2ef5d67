"""Adaptive light/dark colors for the frame chrome.

// [LAW:one-source-of-truth] All chrome colors live in ThemeColors.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style


@dataclass(frozen=True)
class ThemeColors:
    """Colors the header, footer and list need."""

    normal: str
    subtle: str
    muted: str
    highlight: str
    border: str
    dark: bool

    @property
    def normal_style(self) -> Style:
        return Style(color=self.normal)

    @property
    def subtle_style(self) -> Style:
        return Style(color=self.subtle)

    @property
    def muted_style(self) -> Style:
        return Style(color=self.muted)

    @property
    def highlight_style(self) -> Style:
        return Style(color=self.highlight)

    @property
    def title_style(self) -> Style:
        return Style(color=self.highlight, bold=True)

    @property
    def border_style(self) -> Style:
        return Style(color=self.border)


DARK = ThemeColors(
    normal="#D7D7D7",
    subtle="#7C7C7C",
    muted="#3F3F3F",
    highlight="#F93EFD",
    border="#3F3F3F",
    dark=True,
)

LIGHT = ThemeColors(
    normal="#000000",
    subtle="#666666",
    muted="#666666",
    highlight="#000000",
    border="#CCCCCC",
    dark=False,
)


def theme_for(dark: bool) -> ThemeColors:
    return DARK if dark else LIGHT
