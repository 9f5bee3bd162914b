"""Scroll- and timer-driven state of the portfolio's content sections."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Sequence, Tuple

_STYLE_TEMPLATE = (
    "transform: translateX({}%) scale(1); opacity: {}; transition: all 0.4s ease-out;"
)

SKILLS: Tuple[Tuple[str, float, float, float], ...] = (
    ("React", 975.30, -856.42, 18.6),
    ("Next.js", -1004.83, -733.91, -12.3),
    ("TypeScript", 684.27, 1002.65, 30.0),
    ("Node.js", -896.04, 958.81, -25.9),
    ("Python", 744.56, -1050.14, 16.1),
    ("Rust", -943.80, -724.66, -29.7),
    ("Leptos", 872.90, 766.99, 9.8),
    ("Swift", -1033.17, 697.72, 13.3),
    ("Electron", 1001.47, -686.04, -7.0),
    ("Tauri", 816.21, 933.80, -23.6),
    ("Tailwind CSS", -765.14, -1021.58, 21.4),
    ("Bevy", 915.88, 829.34, -6.2),
)

METEORITE_PHOTOS: Tuple[str, ...] = tuple(f"Meteorite{i}.png" for i in range(1, 8))
REVEAL_PHOTOS: Tuple[str, ...] = tuple(f"Reveal{i}.png" for i in range(1, 8))
METEORITE_INTERVAL_MS = 12_000


def _format_number(value: float) -> str:
    """Shortest decimal form of a float, never in exponent notation."""
    if value == int(value):
        text = str(int(value))
        return "-0" if text == "0" and str(value).startswith("-") else text
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def about_styles(progress: float) -> Tuple[str, str]:
    """Inline styles for the left and right halves of the About section.

    Both halves slide in from their side and fade in as `progress` goes from 0 to 1.
    """
    remaining = 1.0 - progress
    opacity = _format_number(progress)
    left = _STYLE_TEMPLATE.format(_format_number(remaining * -100.0), opacity)
    right = _STYLE_TEMPLATE.format(_format_number(remaining * 100.0), opacity)
    return left, right


@dataclass(frozen=True)
class SkillTransform:
    """Offset and tilt of one skill label."""

    name: str
    x: float
    y: float
    rotation: float

    def style(self) -> str:
        """Inline CSS placing the label."""
        return (
            f"transform: translate({self.x:.2f}px, {self.y:.2f}px) "
            f"rotate({self.rotation:.2f}deg); transition: transform 0.3s ease-out;"
        )


def skill_transforms(progress: float) -> List[SkillTransform]:
    """Skill labels moved from their scattered start towards rest as `progress` nears 1."""
    remaining = 1.0 - progress
    return [
        SkillTransform(name, x * remaining, y * remaining, r * remaining)
        for name, x, y, r in SKILLS
    ]


@dataclass
class PhotoCarousel:
    """A cycle of photos with one shown at a time."""

    photos: Sequence[str]
    index: int = 0

    def __post_init__(self) -> None:
        if not self.photos:
            raise ValueError("a carousel needs at least one photo")
        self.select(self.index)

    def advance(self) -> int:
        """Show the next photo, wrapping after the last; returns the new index."""
        self.index = (self.index + 1) % len(self.photos)
        return self.index

    def select(self, index: int) -> None:
        """Show the photo at `index`."""
        if not 0 <= index < len(self.photos):
            raise IndexError(f"photo index {index} out of range")
        self.index = index

    def current(self) -> str:
        """Image path of the photo being shown."""
        return f"img/{self.photos[self.index]}"