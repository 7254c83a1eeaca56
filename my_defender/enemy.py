"""Enemies: spawning, moving towards the castle and dying under fire."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import Iterable

from .building import Building, attack_tower
from .constants import WD_HEIGHT, WD_WIDTH, Direction
from .sprite import IntRect, Sprite, Vector, check_hitbox, init_sprite

ENEMY_TEXTURE = "resources/game_sprite/enemie.png"
_ZONE_SEED = 488856565 * 4
_POSITION_SEED = 647654375497847


@dataclass
class EnemyStats:
    """Mutable state of one enemy."""

    texture: str = ENEMY_TEXTURE
    size: IntRect = IntRect(0, 0, 40, 33)
    health: int = 25
    price: int = 15
    damage: int = 25
    dead: bool = False


@dataclass
class Enemy:
    """An enemy with its sprite, spawn point and step vector."""

    stats: EnemyStats
    sprite: Sprite
    position: Vector
    direction: Vector = field(default_factory=Vector)


def random_zone(direction: Direction | int) -> IntRect:
    """Spawn zone beyond the given side of the window.

    The fields are read as (x_min, x_max, y_min, y_max).
    """
    zones = {
        Direction.UP: IntRect(1, WD_WIDTH, -500, 1),
        Direction.DOWN: IntRect(1, WD_WIDTH, WD_HEIGHT, WD_HEIGHT + 500),
        Direction.LEFT: IntRect(-500, 1, 1, WD_HEIGHT),
        Direction.RIGHT: IntRect(WD_WIDTH, WD_WIDTH + 500, -1, WD_HEIGHT),
    }
    return zones[Direction(direction)]


def _between(low: int, high: int, seed: int) -> int:
    return random.Random(_POSITION_SEED * seed).randrange(low, high)


def random_position(seed: int, zone: IntRect) -> Vector:
    """A position inside ``zone`` that depends only on ``seed``."""
    x = _between(zone.left, zone.top, seed)
    y = _between(zone.width, zone.height, seed * 3)
    return Vector(float(x), float(y))


def create_enemies(count: int) -> list[Enemy]:
    """Spawn ``count`` fresh enemies in one zone picked from a fixed seed."""
    zone = random_zone(random.Random(_ZONE_SEED).randrange(len(Direction)))
    template = EnemyStats()
    enemies = []
    for index in range(count):
        position = random_position(index, zone)
        stats = replace(template)
        sprite = init_sprite(position, stats.size, stats.texture)
        enemies.append(Enemy(stats=stats, sprite=sprite, position=position))
    return enemies


def _step_towards(start: Vector, target: Vector) -> Vector:
    delta = target - start
    norm = abs(delta.x) + abs(delta.y)
    if norm == 0:
        return Vector(0.0, 0.0)
    return Vector(delta.x / norm, delta.y / norm)


def init_move(enemies: Iterable[Enemy], castle_position: Vector | None) -> None:
    """Aim each enemy at the castle with a step of Manhattan length one."""
    if castle_position is None:
        return
    for enemy in enemies:
        enemy.direction = _step_towards(enemy.position, castle_position)


def move_enemies(enemies: Iterable[Enemy], castle_position: Vector) -> tuple[int, int]:
    """Move enemies one step; those reaching the castle hit it.

    Returns the number of enemies that reached the castle and the damage dealt.
    """
    arrived = 0
    damage = 0
    for enemy in enemies:
        if not check_hitbox(enemy.sprite, castle_position):
            enemy.sprite.move(enemy.direction)
            continue
        arrived += 1
        damage += enemy.stats.damage
        enemy.stats.damage = 0
        enemy.sprite.scale = Vector(0.0, 0.0)
    return arrived, damage


def attack_enemies(enemies: Iterable[Enemy], buildings: list[Building]) -> Enemy | None:
    """Let buildings fire on enemies; return the first one killed, if any.

    Enemies after the first killed one are not attacked on this call.
    """
    for enemy in enemies:
        attack_tower(enemy, buildings)
        if enemy.stats.health <= 0 and not enemy.stats.dead:
            enemy.stats.dead = True
            enemy.stats.damage = 0
            enemy.sprite.scale = Vector(0.0, 0.0)
            return enemy
    return None