"""Entities of the space shooter and the systems that move them and resolve collisions."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional

from portfolio.transform import Transform, Vec3

_entity_ids = itertools.count(1)


class EntityKind(Enum):
    """What an entity is; entities of the same kind never damage each other."""

    ASTEROID = "asteroid"
    SPACESHIP = "spaceship"
    MISSILE = "missile"


@dataclass(eq=False)
class Entity:
    """A moving object with a spherical collider and optional health and contact damage."""

    kind: EntityKind
    transform: Transform = field(default_factory=Transform)
    velocity: Vec3 = Vec3.ZERO
    acceleration: Vec3 = Vec3.ZERO
    radius: float = 0.0
    health: Optional[float] = None
    collision_damage: Optional[float] = None
    pitch_acceleration: float = 0.0
    roll_acceleration: float = 0.0
    colliding_entities: List[int] = field(default_factory=list)
    id: int = field(default_factory=lambda: next(_entity_ids))


@dataclass(frozen=True)
class CollisionEvent:
    """`entity` touched `collided_entity`, an entity of a different kind."""

    entity: int
    collided_entity: int


def update_motion(entities: Iterable[Entity], delta_secs: float) -> None:
    """Move every entity by its velocity, then change the velocity by its acceleration."""
    for entity in entities:
        entity.transform.translation = entity.transform.translation + entity.velocity * delta_secs
        entity.velocity = entity.velocity + entity.acceleration * delta_secs


def detect_collisions(entities: Iterable[Entity]) -> None:
    """Refill each entity's `colliding_entities` with the ids of overlapping entities."""
    entities = list(entities)
    found: Dict[int, List[int]] = {}
    for a in entities:
        for b in entities:
            if a.id == b.id:
                continue
            distance = a.transform.translation.distance(b.transform.translation)
            if distance < a.radius + b.radius:
                found.setdefault(a.id, []).append(b.id)

    for entity in entities:
        entity.colliding_entities = found.get(entity.id, [])


def collision_events(entities: Iterable[Entity], kind: EntityKind) -> List[CollisionEvent]:
    """Events for entities of `kind` touching entities of any other kind."""
    entities = list(entities)
    same_kind = {entity.id for entity in entities if entity.kind is kind}
    return [
        CollisionEvent(entity.id, other)
        for entity in entities
        if entity.kind is kind
        for other in entity.colliding_entities
        if other not in same_kind
    ]


def apply_collision_damage(
    entities: Iterable[Entity], events: Iterable[CollisionEvent]
) -> None:
    """Reduce the health of each hit entity by the contact damage of what hit it.

    Events whose entity has no health, or whose other entity deals no damage,
    are ignored.
    """
    by_id = {entity.id: entity for entity in entities}
    for event in events:
        target = by_id.get(event.entity)
        if target is None or target.health is None:
            continue
        source = by_id.get(event.collided_entity)
        if source is None or source.collision_damage is None:
            continue
        target.health -= source.collision_damage