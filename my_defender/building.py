"""Defensive buildings: their statistics, creation and attacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .constants import BuildingType
from .sprite import IntRect, Sprite, Vector, anim_sprite, init_sprite

MAIN_BUILDING_COLOR = (101, 147, 245, 255)
HIT_COLOR = (255, 105, 97, 244)
NORMAL_COLOR = (255, 255, 255, 244)
ATTACK_MARGIN = 50
AREA_OUTLINE_COLOR = (255, 105, 97, 255)
AREA_OUTLINE_THICKNESS = 2


@dataclass(frozen=True)
class BuildStats:
    """Fixed characteristics of one kind of building."""

    radius: float
    texture: str
    size: IntRect
    price: int
    damage: int


_STATS = {
    BuildingType.CASTLE: BuildStats(
        150, "resources/game_sprite/archer_spritesheet.png", IntRect(162, 0, 81, 116), 600, 7
    ),
    BuildingType.CATAPULTE: BuildStats(
        100, "resources/game_sprite/catapute_spritesheet.png", IntRect(0, 0, 80, 108), 150, 6
    ),
    BuildingType.WIZARD: BuildStats(
        200, "resources/game_sprite/wizard_spritesheet.png", IntRect(217, 0, 78, 71), 1000, 10
    ),
    BuildingType.SMALL_CASTLE: BuildStats(
        125, "resources/game_sprite/tower_spritesheet.png", IntRect(973, 0, 90, 100), 250, 6
    ),
}


@dataclass
class Building:
    """A placed building with its sprite and range circle."""

    stats: BuildStats
    sprite: Sprite
    position: Vector

    @property
    def area_radius(self) -> float:
        """Radius of the range circle drawn around the building."""
        return self.stats.radius


def select_build_type(build_type: BuildingType | int) -> BuildStats:
    """Statistics of the given building type; ValueError for unknown types."""
    return _STATS[BuildingType(build_type)]


def make_building(stats: BuildStats, position: Vector, is_main: bool) -> Building:
    """Create a building; the main one is tinted blue."""
    sprite = init_sprite(position, stats.size, stats.texture)
    if is_main:
        sprite.color = MAIN_BUILDING_COLOR
    return Building(stats=stats, sprite=sprite, position=position)


def distance(first: Vector, second: Vector) -> float:
    """Manhattan distance between two points."""
    return abs(second.x - first.x) + abs(second.y - first.y)


def _flash(sprite: Sprite) -> None:
    _, green, blue, _ = sprite.color
    sprite.color = NORMAL_COLOR if (green, blue) == HIT_COLOR[1:3] else HIT_COLOR


def attack_tower(enemy: Any, buildings: Iterable[Building]) -> None:
    """Let every building in range damage ``enemy`` and flash its sprite."""
    for building in buildings:
        reach = building.area_radius + ATTACK_MARGIN
        if distance(enemy.sprite.position, building.position) <= reach:
            enemy.stats.health -= building.stats.damage
            _flash(enemy.sprite)


def update_buildings(buildings: Iterable[Building]) -> None:
    """Advance each building's animation by one frame."""
    offset = IntRect(80, 108, 80, 108)
    last = IntRect(0, 0, 1828, 108)
    for building in buildings:
        anim_sprite(building.sprite, offset, last)