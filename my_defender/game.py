"""Rounds of a running game: building, assault and pause."""

from __future__ import annotations

import functools
import time

import pygame

from .button import Button, dispatch_click, hide_buttons, reset_buttons
from .constants import WD_WIDTH, GameScene, SceneState
from .render import GAME_CLEAR, Music, Renderer, load_music
from .sprite import IntRect, Sprite, Vector, init_sprite
from .state import AppState, GameState
from .strutil import put_str

TICK_SECONDS = 0.1
ASSAULT_HIDDEN_POSITION = Vector(-200.0, -200.0)
ASSAULT_HIDDEN_RECT = IntRect(0, 48, 16, 16)
_ACTIVE_SCENES = (GameScene.ASSAULT_ROUND, GameScene.BUILDING_ROUND)


class _Ticker:
    """Reports when a fixed period has elapsed, then starts over."""

    def __init__(self, period: float = TICK_SECONDS) -> None:
        self._period = period
        self._start = time.monotonic()

    def due(self) -> bool:
        now = time.monotonic()
        if now - self._start > self._period:
            self._start = now
            return True
        return False


@functools.lru_cache(maxsize=None)
def _click_sound(path: str) -> Music:
    return load_music(path, False)


def _background(game: GameState) -> Sprite:
    return init_sprite(Vector(0, 0), IntRect(-1), game.background)


def handle_global_event(app: AppState, event: pygame.event.Event) -> Vector | None:
    """Handle quitting, the space key and mouse moves.

    Returns the new cursor position when the mouse moved, otherwise None.
    """
    if event.type == pygame.QUIT or (
        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
    ):
        app.close_game()
        return None
    if event.type == pygame.MOUSEMOTION:
        return Vector(*event.pos)
    if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
        app.scene = SceneState.MENU
    return None


def _apply_global(app: AppState, window: Renderer, event: pygame.event.Event) -> None:
    position = handle_global_event(app, event)
    if position is not None and window.cursor is not None:
        window.cursor.position = position


def handle_game_event(app: AppState, game: GameState, event: pygame.event.Event) -> int:
    """Close on a window close; run HUD buttons under a fresh click.

    Returns how many button actions ran.
    """
    if event.type == pygame.QUIT:
        app.close_game()
        return 0
    if event.type != pygame.MOUSEBUTTONDOWN or app.click_state != 0:
        return 0
    fired = dispatch_click(game.hud.buttons, Vector(*event.pos), app)
    if fired:
        app.click_state = 1
        _click_sound(app.click_music).play()
    return fired


def handle_build_event(app: AppState, game: GameState, event: pygame.event.Event) -> bool:
    """Place the selected building where a fresh click lands.

    Returns whether a building was placed.
    """
    if event.type != pygame.MOUSEBUTTONDOWN or app.click_state != 0:
        return False
    app.click_state = 1
    return game.place_building(Vector(*event.pos))


def remap_pause_buttons(app: AppState, game: GameState) -> None:
    """Turn the first three HUD buttons into resume, menu and quit."""
    buttons = game.hud.buttons
    hide_buttons(buttons)
    layout = [
        (200, IntRect(32, 0, 16, 16), lambda _target: game.toggle_pause()),
        (300, IntRect(32, 16, 16, 16), lambda _target: app.go_to_menu()),
        (400, IntRect(0, 0, 16, 16), lambda _target: app.close_game()),
    ]
    for button, (y, rect, action) in zip(buttons, layout):
        button.change(Vector(WD_WIDTH / 2, y), rect)
        button.action = action


def remap_assault_buttons(buttons: list[Button]) -> None:
    """Move every HUD button but the pause one off screen."""
    for button in buttons[1:4]:
        button.change(ASSAULT_HIDDEN_POSITION, ASSAULT_HIDDEN_RECT)


def _display_game(window: Renderer, game: GameState, background: Sprite) -> None:
    window.draw_sprite(background)
    window.draw_buildings(game.buildings, True)
    if game.scene == GameScene.ASSAULT_ROUND:
        window.draw_enemies(game.enemies)
    window.draw_hud(game.hud)
    window.present(GAME_CLEAR)


def pause_round(app: AppState, window: Renderer, game: GameState) -> None:
    """Show the pause buttons until the game resumes or is left."""
    reset_buttons(game.hud.buttons)
    remap_pause_buttons(app, game)
    background = _background(game)
    while game.pause and game.scene in _ACTIVE_SCENES:
        for event in pygame.event.get():
            handle_game_event(app, game, event)
            _apply_global(app, window, event)
            app.click_state = 0
        _display_game(window, game, background)


def catch_pause(app: AppState, window: Renderer, game: GameState) -> bool:
    """Run the pause screen if the game is paused; True when it was."""
    if game.pause:
        pause_round(app, window, game)
        return True
    return False


def building_round(app: AppState, window: Renderer, game: GameState) -> None:
    """Let the player place buildings until the assault is launched."""
    reset_buttons(game.hud.buttons)
    game.hud.lost = False
    background = _background(game)
    ticker = _Ticker()
    while game.scene == GameScene.BUILDING_ROUND:
        for event in pygame.event.get():
            _apply_global(app, window, event)
            handle_game_event(app, game, event)
            handle_build_event(app, game, event)
            app.click_state = 0
        if ticker.due():
            game.hud.update(game.gold, game.health)
        if catch_pause(app, window, game):
            reset_buttons(game.hud.buttons)
        window.draw_sprite(background)
        window.draw_buildings(game.buildings, True)
        window.draw_hud(game.hud)
        window.draw_sprite(game.hud.visualisation)
        window.present(GAME_CLEAR)


def assault_round(app: AppState, window: Renderer, game: GameState) -> None:
    """Send a wave at the castle and run it until it is over."""
    game.start_assault()
    remap_assault_buttons(game.hud.buttons)
    background = _background(game)
    ticker = _Ticker()
    while game.scene == GameScene.ASSAULT_ROUND:
        for event in pygame.event.get():
            handle_game_event(app, game, event)
            _apply_global(app, window, event)
        if game.check_end():
            game.scene = GameScene.BUILDING_ROUND
        elif ticker.due():
            game.assault_tick()
        game.move_enemies()
        if catch_pause(app, window, game):
            reset_buttons(game.hud.buttons)
            remap_assault_buttons(game.hud.buttons)
        window.draw_sprite(background)
        window.draw_buildings(game.buildings, False)
        window.draw_enemies(game.enemies)
        window.draw_hud(game.hud)
        window.present(GAME_CLEAR)
    game.finish_assault()


def game_loop(app: AppState, window: Renderer) -> GameState:
    """Play a new game while the application stays in the game scene."""
    game = GameState()
    music = load_music(game.music, True)
    music.play()
    put_str("game_loaded\n")
    app.game = game
    rounds = {
        GameScene.BUILDING_ROUND: building_round,
        GameScene.ASSAULT_ROUND: assault_round,
    }
    while app.scene == SceneState.GAME:
        run = rounds.get(game.scene)
        if run is None:
            break
        run(app, window, game)
    music.stop()
    app.game = None
    put_str("free_game\n")
    return game