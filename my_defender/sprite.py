"""Geometry values and a lightweight sprite model with hit testing."""

from __future__ import annotations

from dataclasses import dataclass, field

Color = tuple[int, int, int, int]
WHITE: Color = (255, 255, 255, 255)


@dataclass(frozen=True)
class Vector:
    """A 2D point or offset."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class IntRect:
    """An integer rectangle, as used for texture areas."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class FloatRect:
    """A floating-point rectangle, as used for bounds."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class Sprite:
    """A textured, positioned, scaled and tinted rectangle."""

    texture: str | None = None
    position: Vector = field(default_factory=Vector)
    origin: Vector = field(default_factory=Vector)
    scale: Vector = field(default_factory=lambda: Vector(1.0, 1.0))
    texture_rect: IntRect | None = None
    texture_size: tuple[int, int] = (0, 0)
    color: Color = WHITE

    @property
    def rect(self) -> IntRect:
        """The texture area in use; the whole texture when none is set."""
        if self.texture_rect is not None:
            return self.texture_rect
        return IntRect(0, 0, *self.texture_size)

    def global_bounds(self) -> FloatRect:
        """Bounds of the sprite on screen after origin, scale and position."""
        rect = self.rect
        width, height = abs(rect.width), abs(rect.height)
        xs = [self.position.x + (edge - self.origin.x) * self.scale.x for edge in (0, width)]
        ys = [self.position.y + (edge - self.origin.y) * self.scale.y for edge in (0, height)]
        return FloatRect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def move(self, offset: Vector) -> None:
        """Shift the sprite by ``offset``."""
        self.position = self.position + offset


def init_sprite(position: Vector, size: IntRect, texture: str | None) -> Sprite:
    """Create a sprite centred on its texture area.

    A ``size`` whose left is -1 leaves the whole texture in use.
    """
    sprite = Sprite(
        texture=texture,
        position=position,
        origin=Vector(float(int(size.width / 2)), float(int(size.height / 2))),
    )
    if size.left != -1:
        sprite.texture_rect = size
    return sprite


def check_hitbox(sprite: Sprite, point: Vector) -> bool:
    """Whether ``point`` lies strictly inside the sprite's bounds."""
    box = sprite.global_bounds()
    return (
        box.left < point.x < box.left + box.width
        and box.top < point.y < box.top + box.height
    )


def anim_sprite(sprite: Sprite, offset: IntRect, last: IntRect) -> None:
    """Advance the texture area by one frame, wrapping past ``last``.

    The new area moves right by ``offset.left`` and takes ``offset.top`` as its
    top; once it reaches ``last.width`` or ``last.height`` it returns to 0, 0.
    """
    rect = sprite.rect
    moved = IntRect(rect.left + offset.left, offset.top, rect.width, rect.height)
    if moved.left >= last.width or moved.top >= last.height:
        moved = IntRect(0, 0, rect.width, rect.height)
    sprite.texture_rect = moved