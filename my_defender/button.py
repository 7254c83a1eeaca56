"""Clickable sprite buttons and helpers that act on lists of them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from .sprite import IntRect, Sprite, Vector, check_hitbox, init_sprite

BUTTON_TEXTURE = "resources/menu/button_stone.png"
HIDDEN_POSITION = Vector(-500.0, -500.0)
HIDDEN_RECT = IntRect(0, 48, 16, 16)

Action = Callable[[Any], None]


@dataclass
class Button:
    """A button sprite that runs ``action`` on the click target.

    The position, texture area and action it was created with are kept, so
    that a temporary remapping can be undone with :meth:`reset`.
    """

    position: Vector
    size: IntRect
    scale: Vector = field(default_factory=lambda: Vector(1.0, 1.0))
    action: Action | None = None
    texture: str = BUTTON_TEXTURE
    sprite: Sprite = field(init=False)
    default_action: Action | None = field(init=False)

    def __post_init__(self) -> None:
        self.sprite = init_sprite(self.position, self.size, self.texture)
        self.sprite.scale = self.scale
        self.default_action = self.action

    def reset(self) -> None:
        """Restore the original position, texture area and action."""
        self.sprite.position = self.position
        self.sprite.texture_rect = self.size
        self.action = self.default_action

    def change(self, position: Vector, rect: IntRect) -> None:
        """Show the button elsewhere with another texture area."""
        self.sprite.texture_rect = rect
        self.sprite.position = position

    def hide(self) -> None:
        """Move the button off screen."""
        self.change(HIDDEN_POSITION, HIDDEN_RECT)

    def hit(self, point: Vector) -> bool:
        """Whether ``point`` falls inside the button."""
        return check_hitbox(self.sprite, point)


def reset_buttons(buttons: Iterable[Button]) -> None:
    """Reset every button to its original state."""
    for button in buttons:
        button.reset()


def hide_buttons(buttons: Iterable[Button]) -> None:
    """Move every button off screen."""
    for button in buttons:
        button.hide()


def dispatch_click(buttons: Iterable[Button], point: Vector, target: Any) -> int:
    """Run the action of each button under ``point`` on ``target``.

    Every button is checked in order, even after one has fired.
    Returns how many actions ran.
    """
    fired = 0
    for button in buttons:
        if button.action is not None and button.hit(point):
            button.action(target)
            fired += 1
    return fired