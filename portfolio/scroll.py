"""Scroll-driven animation progress and active-section tracking."""

from __future__ import annotations


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def scroll_animation_progress(
    element_top: float,
    element_height: float,
    viewport_height: float,
    start_threshold: float,
    end_threshold: float,
) -> float:
    """Animation progress in [0, 1] for an element whose top is `element_top`
    pixels below the top of the viewport.

    Progress starts once `start_threshold` of the element has come into view
    and completes at `end_threshold`.
    """
    if element_height <= 0:
        raise ValueError("element height must be positive")
    if end_threshold == start_threshold:
        raise ValueError("start and end thresholds must differ")

    visible_ratio = _clamp((viewport_height - element_top) / element_height, 0.0, 1.0)
    return _clamp(
        (visible_ratio - start_threshold) / (end_threshold - start_threshold), 0.0, 1.0
    )


def active_section_index(scroll_top: float, viewport_height: float, section_count: int) -> int:
    """Index of the full-screen section considered active at `scroll_top`.

    A section becomes active once it is scrolled a third of the way in.
    """
    if section_count < 1:
        raise ValueError("there must be at least one section")
    if viewport_height <= 0:
        raise ValueError("viewport height must be positive")
    index = max(0, int((scroll_top + viewport_height / 3.0) / viewport_height))
    return min(index, section_count - 1)