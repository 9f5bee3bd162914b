"""Physics of a capsule re-entering the atmosphere: density, drag, gravity and integration."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from portfolio.transform import Quat, Transform, Vec3

EARTH_DIAMETER = 12_756_274.0  # [m]
GRAVITATIONAL_CONSTANT = 6.6743e-11  # [N m^2 / kg^2]
EARTH_MASS = 5.97219e24  # [kg]

INITIAL_POSITION = Vec3(EARTH_DIAMETER / 2.0 + 190_000.0, 0.0, 0.0)
INITIAL_VELOCITY = Vec3(0.0, 7309.7222, 0.0)
CAPSULE_MASS = 77110.7  # [kg]
CAPSULE_RADIUS = 4.5  # [m]
CAPSULE_DRAG_COEFFICIENT = 2.16
GROUND_ALTITUDE = 50.0  # [m] below this the capsule is considered landed

CAMERA_DISTANCE = 600.0
EARTH_TILT = -45.0 * math.pi / 180.0  # rotation of the globe about Y

_SPEED_EPSILON = 1.1920929e-07


def atmospheric_density(altitude: float) -> float:
    """Air density in kg/m^3 at `altitude` metres above the surface."""
    if altitude > 100_000.0:
        temperature = 10.0 + 0.002 * (altitude - 100_000.0)
        pressure = 0.0
    elif altitude >= 25_000.0:
        temperature = -131.21 + 0.00299 * altitude
        pressure = 2.488 * ((temperature + 273.1) / 216.6) ** -11.388
    elif 11_000.0 < altitude < 25_000.0:
        temperature = -56.46
        pressure = 22.65 * math.exp(1.73 - 0.000157 * altitude)
    else:
        temperature = 15.04 - 0.00649 * altitude
        pressure = 101.29 * ((temperature + 273.1) / 288.08) ** 5.256
    return pressure / (0.2869 * (temperature + 273.1))


def altitude_of(position: Vec3) -> float:
    """Height above the Earth's surface of a point given from the Earth's centre."""
    return position.length() - EARTH_DIAMETER / 2.0


def drag_acceleration(
    velocity: Vec3,
    air_density: float,
    drag_coefficient: float,
    cross_sectional_area: float,
    mass: float,
) -> Vec3:
    """Drag per unit mass, pointing along the velocity (it is subtracted when integrating)."""
    speed = velocity.length()
    if abs(speed) < _SPEED_EPSILON:
        return Vec3.ZERO
    magnitude = (drag_coefficient * air_density * speed**2 * cross_sectional_area) / (2.0 * mass)
    return velocity.normalize() * magnitude


def gravitational_acceleration(position: Vec3) -> Vec3:
    """Gravity magnitude pointing away from the centre (it is subtracted when integrating)."""
    distance = position.length()
    if distance == 0.0:
        raise ValueError("position must not be the Earth's centre")
    toward_centre = -position / distance
    magnitude = GRAVITATIONAL_CONSTANT * EARTH_MASS / distance**2
    return -toward_centre * magnitude


def cumulative_acceleration(
    air_density: float,
    drag_coefficient: float,
    cross_sectional_area: float,
    mass: float,
    velocity: Vec3,
    position: Vec3,
) -> Vec3:
    """Sum of drag and gravitational accelerations."""
    return drag_acceleration(
        velocity, air_density, drag_coefficient, cross_sectional_area, mass
    ) + gravitational_acceleration(position)


@dataclass
class CapsuleState:
    """Telemetry reported after each simulation step."""

    altitude: float = 0.0
    velocity: float = 0.0


@dataclass
class Capsule:
    """The re-entry vehicle's position, velocity and orientation."""

    position: Vec3 = INITIAL_POSITION
    velocity: Vec3 = INITIAL_VELOCITY
    rotation: Quat = field(default_factory=lambda: Quat.IDENTITY)

    def step(self, delta_time: float) -> Optional[CapsuleState]:
        """Advance the capsule by `delta_time` seconds.

        Returns the altitude before the step and the new speed, or None when
        nothing moved (no time passed or the capsule is on the ground).
        """
        if delta_time == 0.0:
            return None

        altitude = altitude_of(self.position)
        if altitude <= GROUND_ALTITUDE:
            return None

        area = math.pi * CAPSULE_RADIUS**2
        acceleration = cumulative_acceleration(
            atmospheric_density(altitude),
            CAPSULE_DRAG_COEFFICIENT,
            area,
            CAPSULE_MASS,
            self.velocity,
            self.position,
        )

        velocity = self.velocity - acceleration * delta_time
        position = self.position + velocity * delta_time

        self.position = position
        self.velocity = velocity
        self.rotation = Quat.from_rotation_arc(Vec3.Y, velocity.normalize())
        return CapsuleState(altitude=altitude, velocity=velocity.length())


def camera_focus(capsule: Capsule) -> Transform:
    """Camera placed behind the capsule along its velocity, looking at it with the sky up."""
    behind = capsule.velocity.normalize() * -CAMERA_DISTANCE
    up = capsule.position.normalize()
    return Transform(translation=capsule.position + behind).looking_at(capsule.position, up)


def earth_transform() -> Transform:
    """Orientation at which the globe is placed."""
    return Transform(rotation=Quat.from_axis_angle(Vec3.Y, EARTH_TILT))


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate a capsule re-entering the atmosphere.")
    parser.add_argument("--dt", type=float, default=0.1, help="time step in seconds")
    parser.add_argument("--steps", type=int, default=None, help="stop after this many steps")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the simulation, printing altitude and speed at every step."""
    args = _parse_args(argv)
    if args.dt <= 0:
        raise SystemExit("--dt must be positive")
    capsule = Capsule()
    count = 0
    while args.steps is None or count < args.steps:
        state = capsule.step(args.dt)
        if state is None:
            break
        print(f"Altitude: {state.altitude:6.0f} - Velocity: {state.velocity:5.0f}")
        count += 1
    return 0