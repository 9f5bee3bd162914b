"""The space shooter's game loop: ship controls, asteroid spawning, despawning and states."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterable, List, Optional, Set

from portfolio.galaga.components import (
    Entity,
    EntityKind,
    apply_collision_damage,
    collision_events,
    detect_collisions,
    update_motion,
)
from portfolio.transform import Transform, Vec3

STARTING_TRANSLATION = Vec3(0.0, 0.0, -20.0)
SPACESHIP_ACCELERATION = 15.0
SPACESHIP_ROTATION_ACCELERATION = 0.00005
SPACESHIP_ROLL_ACCELERATION = 0.00005
SPACESHIP_HEALTH = 100.0
SPACESHIP_COLLISION_DAMAGE = 100.0
SPACESHIP_RADIUS = 5.0
MISSILE_SPEED = 25.0
MISSILE_FORWARD_SPAWN_SCALAR = 7.5
MISSILE_RADIUS = 1.0
MISSILE_HEALTH = 1.0
MISSILE_COLLISION_DAMAGE = 5.0

ASTEROID_VELOCITY_SCALAR = 5.0
ASTEROID_ACCELERATION_SCALAR = 1.0
ASTEROID_SPAWN_RANGE = (-25.0, 25.0)
ASTEROID_SPAWN_TIME_SECONDS = 0.75
ASTEROID_ROTATE_SPEED = 2.5
ASTEROID_RADIUS = 2.5
ASTEROID_HEALTH = 80.0
ASTEROID_COLLISION_DAMAGE = 35.0

DESPAWN_DISTANCE = 500.0


class GameState(Enum):
    """Whether the game is running, paused or has just ended."""

    IN_GAME = "in_game"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Key(Enum):
    """Keys the game responds to."""

    W = "w"
    A = "a"
    S = "s"
    D = "d"
    ARROW_UP = "arrow_up"
    ARROW_DOWN = "arrow_down"
    ARROW_LEFT = "arrow_left"
    ARROW_RIGHT = "arrow_right"
    SHIFT_LEFT = "shift_left"
    CONTROL_LEFT = "control_left"
    SPACE = "space"
    TAB = "tab"
    ESCAPE = "escape"


class Game:
    """The world of the shooter, advanced one frame at a time by `update`.

    A state change requested during a frame takes effect at the start of the next.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.entities: List[Entity] = []
        self.state = GameState.IN_GAME
        self.next_state: Optional[GameState] = None
        self.shielded: Set[int] = set()
        self._rng = rng if rng is not None else random.Random()
        self._spawn_elapsed = 0.0
        self.spawn_spaceship()

    def spaceship(self) -> Optional[Entity]:
        """The player's ship, or None unless there is exactly one."""
        ships = [e for e in self.entities if e.kind is EntityKind.SPACESHIP]
        return ships[0] if len(ships) == 1 else None

    def spawn_spaceship(self) -> Entity:
        """Place a fresh ship at the starting point."""
        ship = Entity(
            kind=EntityKind.SPACESHIP,
            transform=Transform(translation=STARTING_TRANSLATION),
            radius=SPACESHIP_RADIUS,
            health=SPACESHIP_HEALTH,
            collision_damage=SPACESHIP_COLLISION_DAMAGE,
        )
        self.entities.append(ship)
        return ship

    def spawn_asteroid(self) -> Entity:
        """Place an asteroid at a random point, drifting and accelerating randomly."""
        low, high = ASTEROID_SPAWN_RANGE
        translation = Vec3(
            self._rng.uniform(low, high),
            self._rng.uniform(low, high),
            self._rng.uniform(low, high),
        )
        velocity = self._random_unit_vector() * ASTEROID_VELOCITY_SCALAR
        acceleration = self._random_unit_vector() * ASTEROID_ACCELERATION_SCALAR
        asteroid = Entity(
            kind=EntityKind.ASTEROID,
            transform=Transform(translation=translation),
            velocity=velocity,
            acceleration=acceleration,
            radius=ASTEROID_RADIUS,
            health=ASTEROID_HEALTH,
            collision_damage=ASTEROID_COLLISION_DAMAGE,
        )
        self.entities.append(asteroid)
        return asteroid

    def update(
        self,
        delta_secs: float,
        pressed: Iterable[Key] = (),
        just_pressed: Iterable[Key] = (),
    ) -> None:
        """Advance the game by one frame of `delta_secs` seconds.

        `pressed` holds the keys held down; `just_pressed` those pressed this frame.
        """
        if delta_secs < 0:
            raise ValueError("frame time must not be negative")
        held = frozenset(pressed)
        fresh = frozenset(just_pressed)

        self._apply_transition()
        self._handle_state_input(fresh)

        if self.state is not GameState.IN_GAME:
            return

        self._despawn_entities()
        self._movement_controls(held)
        self._weapon_controls(held)
        self._shield_controls(held)
        self._entity_updates(delta_secs)
        detect_collisions(self.entities)

    def _random_unit_vector(self) -> Vec3:
        return Vec3(
            self._rng.uniform(-1.0, 1.0),
            self._rng.uniform(-1.0, 1.0),
            self._rng.uniform(-1.0, 1.0),
        ).normalize_or_zero()

    def _apply_transition(self) -> None:
        target, self.next_state = self.next_state, None
        if target is None or target is self.state:
            return
        self.state = target
        if target is GameState.GAME_OVER:
            self._on_enter_game_over()

    def _on_enter_game_over(self) -> None:
        self._remove(e for e in self.entities if e.health is not None)
        self.spawn_spaceship()

    def _handle_state_input(self, just_pressed: frozenset) -> None:
        if Key.ESCAPE in just_pressed:
            if self.state is GameState.IN_GAME:
                self.next_state = GameState.PAUSED
            elif self.state is GameState.PAUSED:
                self.next_state = GameState.IN_GAME
        if self.state is GameState.GAME_OVER:
            self.next_state = GameState.IN_GAME

    def _remove(self, doomed: Iterable[Entity]) -> None:
        doomed_ids = {e.id for e in doomed}
        if not doomed_ids:
            return
        self.entities = [e for e in self.entities if e.id not in doomed_ids]
        self.shielded -= doomed_ids

    def _despawn_entities(self) -> None:
        doomed: List[Entity] = []
        ship = self.spaceship()
        if ship is not None:
            origin = ship.transform.translation
            doomed.extend(
                e
                for e in self.entities
                if e.kind is not EntityKind.SPACESHIP
                and e.transform.translation.distance(origin) > DESPAWN_DISTANCE
            )
        doomed.extend(e for e in self.entities if e.health is not None and e.health <= 0.0)
        self._remove(doomed)

    def _movement_controls(self, pressed: frozenset) -> None:
        ship = self.spaceship()
        if ship is None:
            return
        rotation = 0.0
        roll = 0.0
        movement = 0.0

        if Key.D in pressed or Key.ARROW_RIGHT in pressed:
            roll = SPACESHIP_ROLL_ACCELERATION
        elif Key.A in pressed or Key.ARROW_LEFT in pressed:
            roll = -SPACESHIP_ROLL_ACCELERATION

        if Key.S in pressed or Key.ARROW_DOWN in pressed:
            rotation = -SPACESHIP_ROTATION_ACCELERATION
        elif Key.W in pressed or Key.ARROW_UP in pressed:
            rotation = SPACESHIP_ROTATION_ACCELERATION

        if Key.SHIFT_LEFT in pressed:
            movement = SPACESHIP_ACCELERATION
        elif Key.CONTROL_LEFT in pressed:
            movement = -SPACESHIP_ACCELERATION

        ship.pitch_acceleration += rotation
        ship.transform.rotate_local_x(ship.pitch_acceleration)
        ship.roll_acceleration += roll
        ship.transform.rotate_local_z(ship.roll_acceleration)
        ship.acceleration = -ship.transform.forward() * movement

    def _weapon_controls(self, pressed: frozenset) -> None:
        ship = self.spaceship()
        if ship is None or Key.SPACE not in pressed:
            return
        forward = ship.transform.forward()
        self.entities.append(
            Entity(
                kind=EntityKind.MISSILE,
                transform=Transform(
                    translation=ship.transform.translation
                    - forward * MISSILE_FORWARD_SPAWN_SCALAR
                ),
                velocity=-forward * MISSILE_SPEED,
                radius=MISSILE_RADIUS,
                health=MISSILE_HEALTH,
                collision_damage=MISSILE_COLLISION_DAMAGE,
            )
        )

    def _shield_controls(self, pressed: frozenset) -> None:
        ship = self.spaceship()
        if ship is not None and Key.TAB in pressed:
            self.shielded.add(ship.id)

    def _entity_updates(self, delta_secs: float) -> None:
        self._spawn_elapsed += delta_secs
        spawn_due = self._spawn_elapsed >= ASTEROID_SPAWN_TIME_SECONDS
        if spawn_due:
            self._spawn_elapsed %= ASTEROID_SPAWN_TIME_SECONDS

        for entity in self.entities:
            if entity.kind is EntityKind.ASTEROID:
                entity.transform.rotate_local_z(ASTEROID_ROTATE_SPEED * delta_secs)

        update_motion(self.entities, delta_secs)

        events = [
            event
            for kind in (EntityKind.ASTEROID, EntityKind.SPACESHIP, EntityKind.MISSILE)
            for event in collision_events(self.entities, kind)
        ]
        apply_collision_damage(self.entities, events)

        if self.spaceship() is None:
            self.next_state = GameState.GAME_OVER

        if spawn_due:
            self.spawn_asteroid()