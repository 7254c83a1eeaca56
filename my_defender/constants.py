"""Window size and the enumerations shared across the game."""

from __future__ import annotations

from enum import IntEnum

WD_WIDTH = 1280
WD_HEIGHT = 640
VISUALISATION_STEP = 111


class SceneState(IntEnum):
    """Top-level scene of the application."""

    QUIT = -1
    GAME = 0
    MENU = 1
    PAUSE = 2
    MAP = 3
    TROPHEA = 4
    INFO = 5
    ASSAULT = 6
    BUILD = 7


class GameScene(IntEnum):
    """Phase of a running game."""

    ABANDONED = -1
    BUILDING_ROUND = 0
    ASSAULT_ROUND = 1
    PAUSE_ROUND = 2
    QUIT_GAME = 3


class BuildingType(IntEnum):
    """Kinds of building the player can place."""

    CASTLE = 0
    CATAPULTE = 1
    WIZARD = 2
    SMALL_CASTLE = 3

    def next(self) -> "BuildingType":
        """The following type, wrapping back to the castle."""
        members = list(BuildingType)
        return members[(members.index(self) + 1) % len(members)]

    def previous(self) -> "BuildingType":
        """The preceding type, wrapping round to the small castle."""
        members = list(BuildingType)
        return members[(members.index(self) - 1) % len(members)]


class Direction(IntEnum):
    """Side of the map that enemies come from."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3