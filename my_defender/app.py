"""Command-line entry point: argument checks, help and the main loop."""

from __future__ import annotations

import os
import sys
from typing import Mapping, Sequence

import pygame

from .constants import SceneState
from .game import game_loop
from .menu import TEXT_LIMIT, menu_loop, read_text_file
from .render import load_music, open_window
from .state import AppState
from .strutil import put_str

RULES_FILE = "resources/rules_game/rules.txt"
MIN_ENVIRONMENT = 51
EXIT_FAILURE = 84


class UsageError(Exception):
    """The command line cannot be accepted."""


class MissingEnvironmentError(UsageError):
    """The process environment is too small to start the game."""


def verify(argv: Sequence[str], environ: Mapping[str, str]) -> None:
    """Check the arguments (program name excluded) and the environment."""
    if len(environ) < MIN_ENVIRONMENT:
        raise MissingEnvironmentError("environment is incomplete")
    if len(argv) > 1:
        raise UsageError("retry with -h")


def get_help(path: str = RULES_FILE) -> str | None:
    """The game rules from ``path``, or None when they cannot be read."""
    return read_text_file(path, TEXT_LIMIT)


def launch_game() -> int:
    """Open the window and run the menu and games until the player quits."""
    window = open_window()
    app = AppState()
    music = load_music(app.music, False)
    music.play()
    put_str("\n|INFO :\n|Base game loaded\n")
    try:
        while window.is_open:
            if app.scene == SceneState.MENU:
                menu_loop(app, window)
            elif app.scene == SceneState.GAME:
                music.pause()
                game_loop(app, window)
            else:
                window.is_open = False
    finally:
        music.stop()
        put_str("\n|INFO :\n|Base game destroyed\n")
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game, or show the rules with -h."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        verify(args, os.environ)
    except MissingEnvironmentError:
        return EXIT_FAILURE
    except UsageError as exc:
        put_str(f" {exc}\n")
        return EXIT_FAILURE
    if args and args[0] == "-h":
        rules = get_help()
        if rules is not None:
            put_str(rules)
    else:
        launch_game()
    return 0


if __name__ == "__main__":
    sys.exit(main())