"""Reentry physics, wave animation, scroll and timeline arithmetic, and a headless space shooter."""

__version__ = "0.1.0"