"""Heads-up display of a running game: gold, health, messages and buttons."""

from __future__ import annotations

from dataclasses import dataclass, field

from .button import Action, Button
from .constants import WD_HEIGHT, WD_WIDTH
from .sprite import IntRect, Sprite, Vector, anim_sprite, init_sprite
from .strutil import nbr_to_str

FONT = "resources/FONT/GAMERIA.ttf"
GOLD_TEXT_RIGHT = Vector(WD_WIDTH - 50, 75)
GOLD_TEXT_SIZE = 40
GOLD_TEXT_COLOR = (255, 159, 0, 244)
LOOSE_TEXT = "YOU LOOSE"
LOOSE_TEXT_POSITION = Vector(WD_WIDTH / 2 - 187, WD_HEIGHT / 2 - 63)
LOOSE_TEXT_SIZE = 70
LOOSE_TEXT_COLOR = (194, 59, 34, 255)
INFO_TEXT_CENTER = Vector(WD_WIDTH / 2, WD_HEIGHT / 2)
INFO_TEXT_SIZE = 30
INFO_TEXT_COLOR = (133, 3, 3, 255)
HEALTH_BAR_FULL = 59

_COIN_FRAME = IntRect(16, 0)
_COIN_LAST = IntRect(16, 16, 80, 16)


def _c_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def health_bar_width(health: int) -> int:
    """Width in texture pixels of the health bar for ``health`` points."""
    return _c_div(_c_div(health, 10) * HEALTH_BAR_FULL, 100)


def _scaled(position: Vector, rect: IntRect, texture: str, scale: Vector) -> Sprite:
    sprite = init_sprite(position, rect, texture)
    sprite.scale = scale
    return sprite


def _coin() -> Sprite:
    return _scaled(Vector(WD_WIDTH - 30, 100), IntRect(0, 0, 16, 16),
                   "resources/hud/coin.png", Vector(2.0, 2.0))


def _health_bar() -> Sprite:
    return _scaled(Vector(WD_WIDTH - 143, 29), IntRect(35, 33, HEALTH_BAR_FULL, 7),
                   "resources/hud/health_bar.png", Vector(-2.0, 2.0))


def _health() -> Sprite:
    return _scaled(Vector(WD_WIDTH - 110, 35), IntRect(0, 0, 97, 32),
                   "resources/hud/health_bar.png", Vector(-2.0, 2.0))


def _visualisation() -> Sprite:
    return _scaled(Vector(WD_WIDTH / 2, WD_HEIGHT - 90), IntRect(0, 0, 111, 157),
                   "resources/hud/visualisation.png", Vector(1.0, 1.0))


def make_hud_buttons(
    on_pause: Action, on_assault: Action, on_next: Action, on_previous: Action
) -> list[Button]:
    """The pause, assault, next and previous buttons, in that order."""
    return [
        Button(Vector(50, 50), IntRect(16, 16, 16, 16), Vector(5, 5), on_pause),
        Button(Vector(WD_WIDTH / 2, 50), IntRect(0, 64, 16, 16), Vector(5, 5), on_assault),
        Button(Vector(WD_WIDTH / 2 + 100, WD_HEIGHT - 50), IntRect(32, 0, 16, 16),
               Vector(4, 4), on_next),
        Button(Vector(WD_WIDTH / 2 - 100, WD_HEIGHT - 50), IntRect(0, 16, 16, 16),
               Vector(4, 4), on_previous),
    ]


@dataclass
class Hud:
    """Everything drawn over the map during a game."""

    buttons: list[Button] = field(default_factory=list)
    coin: Sprite = field(default_factory=_coin)
    health_bar: Sprite = field(default_factory=_health_bar)
    health: Sprite = field(default_factory=_health)
    visualisation: Sprite = field(default_factory=_visualisation)
    gold_text: str = ""
    lost: bool = False
    loose_text: str = LOOSE_TEXT
    info_text: str = ""
    info_cooldown: int = 0

    def pop_up(self, message: str, duration: int) -> None:
        """Show ``message`` for the next ``duration`` frames."""
        self.info_text = message
        self.info_cooldown = duration

    def tick_message(self) -> bool:
        """Count one frame of the pop-up; True while it is still shown."""
        if self.info_cooldown > 0:
            self.info_cooldown -= 1
            return True
        return False

    def update(self, gold: int, health: int) -> None:
        """Refresh the gold counter, spin the coin and resize the health bar."""
        self.gold_text = nbr_to_str(gold)
        anim_sprite(self.coin, _COIN_FRAME, _COIN_LAST)
        self.health_bar.texture_rect = IntRect(35, 33, health_bar_width(health), 7)