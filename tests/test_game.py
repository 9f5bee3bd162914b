import random

import pytest

from portfolio.galaga.components import Entity, EntityKind
from portfolio.galaga.game import (
    ASTEROID_COLLISION_DAMAGE,
    ASTEROID_HEALTH,
    ASTEROID_SPAWN_TIME_SECONDS,
    ASTEROID_VELOCITY_SCALAR,
    MISSILE_FORWARD_SPAWN_SCALAR,
    MISSILE_SPEED,
    SPACESHIP_ACCELERATION,
    SPACESHIP_HEALTH,
    SPACESHIP_ROTATION_ACCELERATION,
    STARTING_TRANSLATION,
    Game,
    GameState,
    Key,
)
from portfolio.transform import Transform, Vec3


@pytest.fixture
def game():
    return Game(rng=random.Random(7))


def _kind_count(game, kind):
    return sum(1 for e in game.entities if e.kind is kind)


def test_new_game_has_one_ship_at_start(game):
    ship = game.spaceship()
    assert ship.transform.translation == STARTING_TRANSLATION
    assert ship.health == SPACESHIP_HEALTH
    assert game.state is GameState.IN_GAME
    assert len(game.entities) == 1


def test_spaceship_none_when_two_ships(game):
    game.spawn_spaceship()
    assert game.spaceship() is None


def test_negative_delta_rejected(game):
    with pytest.raises(ValueError):
        game.update(-0.1)


def test_asteroid_spawns_on_timer(game):
    game.update(ASTEROID_SPAWN_TIME_SECONDS / 2)
    assert _kind_count(game, EntityKind.ASTEROID) == 0
    game.update(ASTEROID_SPAWN_TIME_SECONDS / 2)
    assert _kind_count(game, EntityKind.ASTEROID) == 1


def test_spawned_asteroid_properties(game):
    asteroid = game.spawn_asteroid()
    assert asteroid.health == ASTEROID_HEALTH
    assert asteroid.velocity.length() == pytest.approx(ASTEROID_VELOCITY_SCALAR)
    assert all(-25.0 <= c <= 25.0 for c in asteroid.transform.translation)


def test_space_fires_missile_ahead(game):
    game.update(0.0, pressed={Key.SPACE})
    missiles = [e for e in game.entities if e.kind is EntityKind.MISSILE]
    assert len(missiles) == 1
    missile = missiles[0]
    assert missile.velocity.length() == pytest.approx(MISSILE_SPEED)
    assert missile.transform.translation.z == pytest.approx(
        STARTING_TRANSLATION.z + MISSILE_FORWARD_SPAWN_SCALAR
    )


def test_shift_accelerates_forward(game):
    game.update(0.0, pressed={Key.SHIFT_LEFT})
    acc = game.spaceship().acceleration
    assert acc.length() == pytest.approx(SPACESHIP_ACCELERATION)
    assert acc.z == pytest.approx(SPACESHIP_ACCELERATION)


def test_pitch_accumulates(game):
    game.update(0.0, pressed={Key.W})
    game.update(0.0, pressed={Key.ARROW_UP})
    assert game.spaceship().pitch_acceleration == pytest.approx(
        2 * SPACESHIP_ROTATION_ACCELERATION
    )


def test_tab_raises_shield(game):
    game.update(0.0, pressed={Key.TAB})
    assert game.spaceship().id in game.shielded


def test_escape_pauses_and_resumes(game):
    game.update(0.0, just_pressed={Key.ESCAPE})
    assert game.state is GameState.IN_GAME
    game.update(0.0)
    assert game.state is GameState.PAUSED

    drifter = Entity(EntityKind.ASTEROID, Transform(Vec3(0.0, 0.0, 10.0)), velocity=Vec3.X)
    game.entities.append(drifter)
    game.update(1.0)
    assert drifter.transform.translation == Vec3(0.0, 0.0, 10.0)
    assert _kind_count(game, EntityKind.ASTEROID) == 1

    game.update(0.0, just_pressed={Key.ESCAPE})
    game.update(0.0)
    assert game.state is GameState.IN_GAME


def test_far_entities_despawned(game):
    far = Entity(EntityKind.ASTEROID, Transform(Vec3(0.0, 0.0, 600.0)), health=1.0)
    near = Entity(EntityKind.ASTEROID, Transform(Vec3(0.0, 0.0, 400.0)), health=1.0)
    game.entities.extend([far, near])
    game.update(0.0)
    assert far not in game.entities
    assert near in game.entities


def test_collision_damages_both(game):
    ship = game.spaceship()
    rock = Entity(
        EntityKind.ASTEROID,
        Transform(ship.transform.translation),
        radius=2.5,
        health=ASTEROID_HEALTH,
        collision_damage=ASTEROID_COLLISION_DAMAGE,
    )
    game.entities.append(rock)
    game.update(0.0)
    game.update(0.0)
    assert ship.health == pytest.approx(SPACESHIP_HEALTH - ASTEROID_COLLISION_DAMAGE)
    assert rock.health <= 0.0
    game.update(0.0)
    assert rock not in game.entities
    assert game.spaceship() is ship


def test_destroyed_ship_restarts_game(game):
    old = game.spaceship()
    game.spawn_asteroid()
    old.health = 0.0
    game.update(0.0)
    assert game.spaceship() is None
    assert game.state is GameState.IN_GAME

    game.update(0.0)
    assert game.state is GameState.GAME_OVER
    new = game.spaceship()
    assert new is not old
    assert new.health == SPACESHIP_HEALTH
    assert game.entities == [new]

    game.update(0.0)
    assert game.state is GameState.IN_GAME
    assert game.spaceship() is new