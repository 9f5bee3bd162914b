"""A radial sine wave rippling across a disc of evenly spread particles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List

from portfolio.transform import Vec3

TOTAL_POINTS = 5_000
DISTRIBUTION = 1
SCALE = 80.0


@dataclass(frozen=True)
class Waveform:
    """Wave settings: height, peak-to-peak distance and propagation speed."""

    amplitude: float = 2.0
    wavelength: float = 30.0
    omega: float = 0.5


@dataclass(frozen=True)
class WaveformModification:
    """A request to replace the wave settings."""

    amplitude: float
    wavelength: float
    omega: float


def apply_modifications(
    waveform: Waveform, modifications: Iterable[WaveformModification]
) -> Waveform:
    """Settings after applying each request in turn; the last one wins."""
    for modification in modifications:
        waveform = Waveform(
            amplitude=modification.amplitude,
            wavelength=modification.wavelength,
            omega=modification.omega,
        )
    return waveform


def unit_radius(index: int, total_points: int, boundary_points: int) -> float:
    """Radius in [0, 1] of point `index` of an even disc distribution.

    The last `boundary_points` points lie on the rim. Index 0 has no defined
    radius and yields NaN.
    """
    if boundary_points > total_points:
        raise ValueError("boundary points cannot exceed total points")
    if index > total_points - boundary_points:
        return 1.0
    if index - 0.5 < 0.0:
        return math.nan
    return math.sqrt(index - 0.5) / math.sqrt((total_points - boundary_points + 1.0) / 2.0)


def particle_positions(
    total_points: int = TOTAL_POINTS, distribution: int = DISTRIBUTION, scale: float = SCALE
) -> List[Vec3]:
    """Positions on a golden-angle spiral filling a disc of radius `scale` in the XY plane."""
    boundary_points = int(distribution * math.sqrt(total_points))
    phi = (math.sqrt(5.0) + 1.0) / 2.0
    golden_angle = math.tau * (1.0 - 1.0 / phi)
    positions = []
    for i in range(total_points):
        r = unit_radius(i, total_points, boundary_points) * scale
        theta = i * golden_angle
        positions.append(Vec3(r * math.cos(theta), r * math.sin(theta), 0.0))
    return positions


def wave_height(waveform: Waveform, x: float, y: float, t: float) -> float:
    """Height of the wave at (x, y) after `t` seconds."""
    if waveform.wavelength == 0:
        raise ValueError("wavelength must be non-zero")
    k = math.tau / waveform.wavelength
    r = math.hypot(x, y)
    return waveform.amplitude * math.sin(k * r + waveform.omega * t)


def animate(waveform: Waveform, particles: Iterable[Vec3], t: float) -> List[Vec3]:
    """Particle positions lifted to the wave surface at time `t`."""
    return [Vec3(p.x, p.y, wave_height(waveform, p.x, p.y, t)) for p in particles]