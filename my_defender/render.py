"""Drawing sprites, texts and shapes of the game onto a pygame surface."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

import pygame

from .building import AREA_OUTLINE_COLOR, AREA_OUTLINE_THICKNESS, Building
from .button import Button
from .constants import WD_HEIGHT, WD_WIDTH
from .enemy import Enemy
from .hud import (
    FONT,
    GOLD_TEXT_COLOR,
    GOLD_TEXT_RIGHT,
    GOLD_TEXT_SIZE,
    INFO_TEXT_CENTER,
    INFO_TEXT_COLOR,
    INFO_TEXT_SIZE,
    LOOSE_TEXT_COLOR,
    LOOSE_TEXT_POSITION,
    LOOSE_TEXT_SIZE,
    Hud,
)
from .sprite import WHITE, IntRect, Sprite, Vector
from .state import CURSOR_TEXTURE

WINDOW_TITLE = "My defender"
FRAMERATE = 60
MENU_CLEAR = (149, 125, 173, 60)
GAME_CLEAR = (121, 210, 230, 100)
TEXT_FONT = "resources/FONT/Roboto.ttf"
TEXT_COLOR = (255, 255, 255, 255)
OUTLINE_COLOR = (0, 0, 0, 255)
HUD_OUTLINE = 5
CURSOR_FILES = (
    "image/crosshairs/hand_cursor_1.png",
    "image/crosshairs/hand_cursor_2.png",
    "image/crosshairs/hand_cursor_3.png",
)
CURSOR_ORIGIN = Vector(25.0, 17.0)
CURSOR_RECT = IntRect(0, 0, 50, 50)
CURSOR_SPAWN = Vector(-500.0, -500.0)
_ANCHORS = frozenset({"topleft", "topright", "center"})


@dataclass
class Music:
    """A sound that can be played once or in a loop."""

    path: str
    loop: bool = False
    sound: pygame.mixer.Sound | None = field(default=None, repr=False)
    _channel: pygame.mixer.Channel | None = field(default=None, init=False, repr=False)

    def play(self) -> bool:
        """Start the sound from the beginning; False when nothing is loaded."""
        if self.sound is None:
            return False
        self.sound.stop()
        self._channel = self.sound.play(loops=-1 if self.loop else 0)
        return self._channel is not None

    def pause(self) -> None:
        """Pause the sound where it is."""
        if self._channel is not None:
            self._channel.pause()

    def stop(self) -> None:
        """Stop the sound."""
        if self.sound is not None:
            self.sound.stop()
        self._channel = None


def load_music(path: str, loop: bool) -> Music:
    """Load a sound file; a missing or unreadable file gives a silent track."""
    music = Music(path, loop)
    if not Path(path).is_file():
        return music
    try:
        if pygame.mixer.get_init() is None:
            pygame.mixer.init()
        music.sound = pygame.mixer.Sound(path)
    except pygame.error:
        music.sound = None
    return music


def cursor_sprite(path: str) -> Sprite:
    """The mouse cursor sprite, parked off screen until the mouse moves."""
    return Sprite(
        texture=path,
        position=CURSOR_SPAWN,
        origin=CURSOR_ORIGIN,
        scale=Vector(1.0, 1.0),
        texture_rect=CURSOR_RECT,
    )


def next_cursor_index(index: int, step: int) -> int:
    """Index of the cursor image after moving ``step`` places."""
    index += step
    if index > 3:
        index = 0
    if index < 0:
        index = len(CURSOR_FILES) - 1
    return index


@dataclass
class Renderer:
    """Draws the game onto ``surface`` and presents finished frames."""

    surface: pygame.Surface
    clock: pygame.time.Clock | None = None
    cursor: Sprite | None = None
    framerate: int = FRAMERATE
    is_open: bool = True
    _textures: dict[str, pygame.Surface | None] = field(
        default_factory=dict, init=False, repr=False
    )
    _fonts: dict[tuple[str, int], pygame.font.Font] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        pygame.font.init()

    def _texture(self, path: str) -> pygame.Surface | None:
        if path not in self._textures:
            try:
                self._textures[path] = pygame.image.load(path)
            except (pygame.error, FileNotFoundError, OSError):
                self._textures[path] = None
        return self._textures[path]

    def _font(self, path: str, size: int) -> pygame.font.Font:
        key = (path, size)
        if key not in self._fonts:
            try:
                self._fonts[key] = pygame.font.Font(path, size)
            except (FileNotFoundError, OSError, pygame.error):
                self._fonts[key] = pygame.font.Font(None, size)
        return self._fonts[key]

    def draw_sprite(self, sprite: Sprite) -> bool:
        """Draw ``sprite``; False when it has no visible texture."""
        if sprite.texture is None:
            return False
        texture = self._texture(sprite.texture)
        if texture is None:
            return False
        sprite.texture_size = texture.get_size()
        rect = sprite.rect
        area = pygame.Rect(
            min(rect.left, rect.left + rect.width),
            min(rect.top, rect.top + rect.height),
            abs(rect.width),
            abs(rect.height),
        ).clip(texture.get_rect())
        size = (round(area.width * abs(sprite.scale.x)), round(area.height * abs(sprite.scale.y)))
        if size[0] <= 0 or size[1] <= 0:
            return False
        image = pygame.transform.scale(texture.subsurface(area), size)
        flip_x = (sprite.scale.x < 0) != (rect.width < 0)
        flip_y = (sprite.scale.y < 0) != (rect.height < 0)
        if flip_x or flip_y:
            image = pygame.transform.flip(image, flip_x, flip_y)
        if sprite.color != WHITE:
            image.fill(sprite.color, special_flags=pygame.BLEND_RGBA_MULT)
        bounds = sprite.global_bounds()
        self.surface.blit(image, (round(bounds.left), round(bounds.top)))
        return True

    def draw_text(self, text: str | None, position: Vector, size: int) -> pygame.Rect:
        """Draw possibly multi-line ``text`` with its top left at ``position``.

        Returns the box it covers.
        """
        return self._draw_text(text, position, size)

    def _draw_text(
        self,
        text: str | None,
        position: Vector,
        size: int,
        *,
        color: tuple[int, ...] = TEXT_COLOR,
        font: str = TEXT_FONT,
        outline: int = 0,
        outline_color: tuple[int, ...] = OUTLINE_COLOR,
        anchor: str = "topleft",
    ) -> pygame.Rect:
        if anchor not in _ANCHORS:
            raise ValueError(f"unknown anchor: {anchor!r}")
        point = (round(position.x), round(position.y))
        if not text:
            return pygame.Rect(point, (0, 0))
        face = self._font(font, size)
        lines = text.replace("\0", "").replace("\r", "").split("\n")
        rendered = [self._render_line(face, line, color) for line in lines]
        outlines = (
            [self._render_line(face, line, outline_color) for line in lines] if outline > 0 else []
        )
        step = face.get_linesize()
        box = pygame.Rect(0, 0, max(image.get_width() for image in rendered), step * len(lines))
        setattr(box, anchor, point)
        offsets = [
            (dx, dy)
            for dx in (-outline, 0, outline)
            for dy in (-outline, 0, outline)
            if (dx, dy) != (0, 0)
        ]
        for row, image in enumerate(outlines):
            for dx, dy in offsets:
                self.surface.blit(image, (box.left + dx, box.top + row * step + dy))
        for row, image in enumerate(rendered):
            self.surface.blit(image, (box.left, box.top + row * step))
        return box

    @staticmethod
    def _render_line(face: pygame.font.Font, line: str, color: tuple[int, ...]) -> pygame.Surface:
        image = face.render(line, True, color[:3])
        if len(color) > 3:
            image.set_alpha(color[3])
        return image

    def draw_buttons(self, buttons: Iterable[Button]) -> int:
        """Draw every button; return how many were drawn."""
        return sum(self.draw_sprite(button.sprite) for button in buttons)

    def draw_hud(self, hud: Hud) -> None:
        """Draw the gold counter, messages, gauges and buttons of ``hud``."""
        self._draw_text(
            hud.gold_text, GOLD_TEXT_RIGHT, GOLD_TEXT_SIZE,
            color=GOLD_TEXT_COLOR, font=FONT, outline=HUD_OUTLINE, anchor="topright",
        )
        if hud.lost:
            self._draw_text(
                hud.loose_text, LOOSE_TEXT_POSITION, LOOSE_TEXT_SIZE,
                color=LOOSE_TEXT_COLOR, font=FONT, outline=HUD_OUTLINE,
            )
        if hud.tick_message():
            self._draw_text(
                hud.info_text, INFO_TEXT_CENTER, INFO_TEXT_SIZE,
                color=INFO_TEXT_COLOR, font=FONT, anchor="center",
            )
        for sprite in (hud.coin, hud.health_bar, hud.health):
            self.draw_sprite(sprite)
        self.draw_buttons(hud.buttons)

    def draw_buildings(self, buildings: Iterable[Building], show_area: bool) -> int:
        """Draw buildings, with their range circles when ``show_area`` is set.

        Returns how many building sprites were drawn.
        """
        drawn = 0
        for building in buildings:
            if show_area:
                pygame.draw.circle(
                    self.surface,
                    AREA_OUTLINE_COLOR[:3],
                    (round(building.position.x), round(building.position.y)),
                    round(building.area_radius),
                    AREA_OUTLINE_THICKNESS,
                )
            drawn += self.draw_sprite(building.sprite)
        return drawn

    def draw_enemies(self, enemies: Iterable[Enemy]) -> int:
        """Draw every enemy; return how many were visible."""
        return sum(self.draw_sprite(enemy.sprite) for enemy in enemies)

    def present(self, color: tuple[int, ...]) -> None:
        """Draw the cursor, show the frame, then clear to ``color``."""
        if self.cursor is not None:
            self.draw_sprite(self.cursor)
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()
        if self.clock is not None:
            self.clock.tick(self.framerate)
        self.surface.fill(color)


def open_window() -> Renderer:
    """Open the game window with a hidden system cursor and a frame limit."""
    pygame.init()
    surface = pygame.display.set_mode((WD_WIDTH, WD_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(WINDOW_TITLE)
    pygame.mouse.set_visible(False)
    return Renderer(surface, clock=pygame.time.Clock(), cursor=cursor_sprite(CURSOR_TEXTURE))