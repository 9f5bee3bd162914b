"""Eased back-and-forth motion of an object along one axis."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TranslationState:
    """Current position, velocity and direction of a moving object.

    `moving_up` means moving in the negative direction.
    """

    position: float
    velocity: float
    moving_up: bool


@dataclass
class TranslationConfig:
    """How fast and how smoothly an object moves, and where it turns around."""

    target_speed: float
    easing_factor: float
    max_translation: float
    threshold: float


def translate_object(state: TranslationState, config: TranslationConfig) -> None:
    """Advance `state` by one tick, reversing direction near the limits."""
    target_velocity = -config.target_speed if state.moving_up else config.target_speed

    state.velocity += (target_velocity - state.velocity) * config.easing_factor
    state.position += state.velocity

    if state.moving_up and state.position <= -config.max_translation + config.threshold:
        state.position = -config.max_translation
        state.velocity = 0.0
        state.moving_up = False
    elif not state.moving_up and state.position >= config.max_translation - config.threshold:
        state.position = config.max_translation
        state.velocity = 0.0
        state.moving_up = True