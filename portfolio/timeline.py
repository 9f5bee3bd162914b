"""The page's timeline sections and the layout of its side navigation."""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from portfolio.scroll import active_section_index

_DEFAULT_DOT_HEIGHT = 16.0
_ACTIVE_WIDTH = 40
_INACTIVE_WIDTH = 12


class Timeline(Enum):
    """Sections of the page, in scroll order."""

    INTRO = "Introduction"
    ABOUT = "About Me"
    SKILLS = "Skills"
    TWENTY_TWO = "2022"
    TWENTY_THREE = "2023"
    TWENTY_FOUR = "2024"
    TWENTY_FIVE = "2025"
    APPENDIX = "Appendix"

    @classmethod
    def default(cls) -> Timeline:
        return cls.INTRO

    def label(self) -> str:
        """Text shown next to this section's dot."""
        return self.value


def active_timestep(scroll_top: float, viewport_height: float) -> Timeline:
    """The section that is active at the given scroll offset."""
    sections = list(Timeline)
    return sections[active_section_index(scroll_top, viewport_height, len(sections))]


def dot_positions(
    window_height: float, dot_height: float = _DEFAULT_DOT_HEIGHT
) -> List[Tuple[Timeline, float]]:
    """Each section with its dot's top offset, in percent of the timeline bar.

    The bar is a third of the window tall; the last dot sits flush with its bottom.
    """
    if window_height <= 0:
        raise ValueError("window height must be positive")
    sections = list(Timeline)
    bar_height = window_height / 3.0
    last_top = (bar_height - dot_height) / bar_height * 100.0
    span = len(sections) - 1
    return [(section, i / span * last_top) for i, section in enumerate(sections)]


def navigator_widths(index: int, length: int) -> List[int]:
    """Pixel widths of the navigator's buttons; the active one is wider."""
    return [_ACTIVE_WIDTH if i == index else _INACTIVE_WIDTH for i in range(length)]