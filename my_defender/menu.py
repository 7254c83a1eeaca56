"""The main menu and its information, map and trophy screens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import pygame

from .button import Button, dispatch_click, hide_buttons, reset_buttons
from .constants import WD_HEIGHT, WD_WIDTH, SceneState
from .hud import FONT
from .render import MENU_CLEAR, Music, Renderer, load_music
from .sprite import IntRect, Sprite, Vector, init_sprite
from .state import AppState
from .strutil import put_str

TITLE = "my defender"
TITLE_SIZE = 150
TITLE_POSITION = Vector(WD_WIDTH / 2, 30)
TITLE_COLOR = (11, 11, 69, 244)
TITLE_OUTLINE = 5
TITLE_OUTLINE_COLOR = (255, 255, 255, 244)
BACKGROUND_TEXTURE = "resources/menu/background.png"
INFO_FILE = "resources/menu/info.txt"
TEXT_LIMIT = 1500
TEXT_POSITION = Vector(100, 100)
TEXT_SIZE = 20
BACK_POSITION = Vector(50, 50)
BACK_RECT = IntRect(0, 48, 16, 16)
BUTTON_SCALE = Vector(5, 5)


def make_menu_buttons(app: AppState) -> list[Button]:
    """Play, quit, map, trophy and info buttons, in that order."""
    return [
        Button(Vector(WD_WIDTH / 2, 200), IntRect(64, 16, 16, 16), BUTTON_SCALE,
               lambda _target: app.launch_game()),
        Button(Vector(50, 50), IntRect(0, 0, 16, 16), BUTTON_SCALE,
               lambda _target: app.close_game()),
        Button(Vector(WD_WIDTH / 2, 300), IntRect(48, 32, 16, 16), BUTTON_SCALE,
               lambda _target: app.map_selector()),
        Button(Vector(WD_WIDTH / 2, 400), IntRect(32, 48, 16, 16), BUTTON_SCALE,
               lambda _target: app.go_to_trophea()),
        Button(Vector(WD_WIDTH / 2, 500), IntRect(64, 80, 16, 16), BUTTON_SCALE,
               lambda _target: app.go_to_info()),
    ]


def read_text_file(path: str, limit: int) -> str | None:
    """At most ``limit`` bytes of the file as text, or None if it cannot be read."""
    try:
        with open(path, "rb") as handle:
            data = handle.read(limit)
    except OSError:
        return None
    return data.decode("utf-8", errors="replace")


def remap_back_button(buttons: list[Button], app: AppState) -> None:
    """Hide all buttons but the first, which becomes a back button."""
    hide_buttons(buttons)
    buttons[0].change(BACK_POSITION, BACK_RECT)
    buttons[0].action = lambda _target: app.go_back()


def remap_map_buttons(buttons: list[Button], app: AppState) -> None:
    """Show a back button and the two map arrows, all leading back."""
    remap_back_button(buttons, app)
    buttons[1].change(Vector(WD_WIDTH / 2 - 200, WD_HEIGHT / 2), IntRect(0, 16, 16, 16))
    buttons[1].action = lambda _target: app.go_back()
    buttons[2].change(Vector(WD_WIDTH / 2 + 200, WD_HEIGHT / 2), IntRect(32, 0, 16, 16))
    buttons[2].action = lambda _target: app.go_back()


def _background() -> Sprite:
    return init_sprite(Vector(0, 0), IntRect(-1), BACKGROUND_TEXTURE)


@dataclass
class Menu:
    """The main menu: title, background and buttons."""

    app: AppState
    click: Music | None = None
    title: str = TITLE
    background: Sprite = field(default_factory=_background)
    buttons: list[Button] = field(init=False)

    def __post_init__(self) -> None:
        self.buttons = make_menu_buttons(self.app)

    def handle_event(self, event: pygame.event.Event) -> int:
        """Run the buttons under a mouse click; return how many fired."""
        if event.type != pygame.MOUSEBUTTONDOWN:
            return 0
        fired = dispatch_click(self.buttons, Vector(*event.pos), self.app)
        if fired:
            self.app.click_state = 1
            if self.click is not None:
                self.click.play()
        return fired


def _handle_common(app: AppState, window: Renderer, event: pygame.event.Event) -> None:
    if event.type == pygame.QUIT or (
        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
    ):
        app.close_game()
        return
    if event.type == pygame.MOUSEMOTION:
        if window.cursor is not None:
            window.cursor.position = Vector(*event.pos)
    elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
        app.scene = SceneState.MENU


def _display_menu(window: Renderer, menu: Menu) -> None:
    window.draw_sprite(menu.background)
    window.draw_buttons(menu.buttons)
    window.draw_text(
        menu.title, TITLE_POSITION, TITLE_SIZE,
        color=TITLE_COLOR, font=FONT, outline=TITLE_OUTLINE,
        outline_color=TITLE_OUTLINE_COLOR, anchor="center",
    )
    window.present(MENU_CLEAR)


def _run_screen(
    app: AppState,
    window: Renderer,
    menu: Menu,
    scene: SceneState,
    draws: list[Callable[[], object]],
) -> None:
    while app.scene == scene:
        for event in pygame.event.get():
            menu.handle_event(event)
            _handle_common(app, window, event)
        for draw in draws:
            draw()
        window.present(MENU_CLEAR)
    reset_buttons(menu.buttons)


def info_screen(app: AppState, window: Renderer, menu: Menu) -> None:
    """Show the information text until the player goes back."""
    text = read_text_file(INFO_FILE, TEXT_LIMIT)
    remap_back_button(menu.buttons, app)
    _run_screen(app, window, menu, SceneState.INFO, [
        lambda: window.draw_text(text, TEXT_POSITION, TEXT_SIZE),
        lambda: window.draw_buttons(menu.buttons),
    ])


def map_screen(app: AppState, window: Renderer, menu: Menu) -> None:
    """Show the map selector until the player leaves it."""
    remap_map_buttons(menu.buttons, app)
    _run_screen(app, window, menu, SceneState.MAP, [
        lambda: window.draw_buttons(menu.buttons),
    ])


def trophy_screen(app: AppState, window: Renderer, menu: Menu) -> None:
    """Show the trophy text until the player goes back."""
    text = read_text_file(INFO_FILE, TEXT_LIMIT)
    remap_back_button(menu.buttons, app)
    _run_screen(app, window, menu, SceneState.TROPHEA, [
        lambda: window.draw_buttons(menu.buttons),
        lambda: window.draw_text(text, TEXT_POSITION, TEXT_SIZE),
    ])


_SCREENS = {
    SceneState.MAP: map_screen,
    SceneState.TROPHEA: trophy_screen,
    SceneState.INFO: info_screen,
}


def menu_loop(app: AppState, window: Renderer) -> None:
    """Run the main menu until a scene other than a menu screen is chosen."""
    menu = Menu(app, click=load_music(app.click_music, False))
    put_str("load_menu\n")
    while app.scene == SceneState.MENU:
        for event in pygame.event.get():
            _handle_common(app, window, event)
            menu.handle_event(event)
            app.click_state = 0
        screen = _SCREENS.get(app.scene)
        if screen is not None:
            screen(app, window, menu)
        _display_menu(window, menu)
    put_str("free_menu\n")