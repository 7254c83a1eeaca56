"""State of the application and of a running game, with their actions."""

from __future__ import annotations

from dataclasses import dataclass, field

from .building import Building, make_building, select_build_type
from .button import reset_buttons
from .constants import VISUALISATION_STEP, BuildingType, GameScene, SceneState
from .enemy import Enemy, attack_enemies, create_enemies, init_move, move_enemies
from .hud import Hud, make_hud_buttons
from .sprite import IntRect, Vector
from .strutil import nbr_to_str

GAME_MUSIC = "resources/MUSIC/game.ogg"
MENU_MUSIC = "resources/MUSIC/menu.ogg"
CLICK_MUSIC = "resources/MUSIC/click.ogg"
CURSOR_TEXTURE = "resources/cursor/hand_cursor_2.png"
MAP_TEXTURE = "resources/map/map_1.png"
CANT_AFFORD = "cant t  afford\n"
PLACE_MAIN_TOWER = "please place your main tower\n"
MESSAGE_TIME = 50
ROUND_MESSAGE_TIME = 100


def _pause(app: "AppState") -> None:
    app.game.toggle_pause()


def _assault(app: "AppState") -> None:
    app.game.launch_assault()


def _next(app: "AppState") -> None:
    app.game.next_visualisation()


def _previous(app: "AppState") -> None:
    app.game.previous_visualisation()


def _game_hud() -> Hud:
    return Hud(buttons=make_hud_buttons(_pause, _assault, _next, _previous))


@dataclass
class GameState:
    """Everything belonging to one game, from the first build to defeat."""

    scene: GameScene = GameScene.BUILDING_ROUND
    gold: int = 800
    rounds: int = 1
    nbr_enemy: int = 15
    dead_enemies: int = 0
    health: int = 1000
    selected_build: BuildingType = BuildingType.CASTLE
    pause: bool = False
    background: str = MAP_TEXTURE
    music: str = GAME_MUSIC
    hud: Hud = field(default_factory=_game_hud)
    buildings: list[Building] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)

    @property
    def castle_position(self) -> Vector | None:
        """Position of the main building, once one is placed."""
        return self.buildings[0].position if self.buildings else None

    def place_building(self, position: Vector) -> bool:
        """Buy and place the selected building; False when gold is short."""
        stats = select_build_type(self.selected_build)
        if self.gold < stats.price:
            self.hud.pop_up(CANT_AFFORD, MESSAGE_TIME)
            return False
        self.gold -= stats.price
        self.buildings.append(make_building(stats, position, not self.buildings))
        return True

    def toggle_pause(self) -> None:
        """Pause or resume the game."""
        self.pause = not self.pause

    def _show_selection(self, left: int) -> None:
        sprite = self.hud.visualisation
        rect = sprite.rect
        sprite.texture_rect = IntRect(left, rect.top, rect.width, rect.height)

    def next_visualisation(self) -> None:
        """Select the next building type and show its preview."""
        left = self.hud.visualisation.rect.left + VISUALISATION_STEP
        self.selected_build = self.selected_build.next()
        if self.selected_build is BuildingType.CASTLE:
            left = 0
        self._show_selection(left)

    def previous_visualisation(self) -> None:
        """Select the previous building type and show its preview."""
        left = self.hud.visualisation.rect.left - VISUALISATION_STEP
        self.selected_build = self.selected_build.previous()
        if self.selected_build is BuildingType.SMALL_CASTLE:
            left = VISUALISATION_STEP * BuildingType.SMALL_CASTLE
        self._show_selection(left)

    def launch_assault(self) -> None:
        """Start the assault phase, once the main tower stands."""
        if self.buildings:
            self.scene = GameScene.ASSAULT_ROUND
        else:
            self.hud.pop_up(PLACE_MAIN_TOWER, MESSAGE_TIME)

    def start_assault(self) -> None:
        """Announce the round and spawn its wave, aimed at the castle."""
        self.hud.pop_up(nbr_to_str(self.rounds), ROUND_MESSAGE_TIME)
        self.nbr_enemy *= self.rounds
        self.enemies = create_enemies(self.nbr_enemy)
        if self.buildings:
            init_move(self.enemies, self.buildings[0].sprite.position)

    def check_end(self) -> bool:
        """True when the wave is over; on defeat, flag the loss and pause."""
        if self.dead_enemies >= self.nbr_enemy:
            return True
        if self.health <= 0:
            self.hud.lost = True
            self.pause = True
        return False

    def assault_tick(self) -> None:
        """Timed step of an assault: refresh the HUD and let towers fire."""
        self.hud.update(self.gold, self.health)
        killed = attack_enemies(self.enemies, self.buildings)
        if killed is not None:
            self.gold += killed.stats.price
            self.dead_enemies += 1

    def move_enemies(self) -> None:
        """Move the wave one step; those reaching the castle damage it."""
        castle = self.castle_position
        if castle is None:
            return
        arrived, damage = move_enemies(self.enemies, castle)
        self.dead_enemies += arrived
        self.health -= damage

    def finish_assault(self) -> None:
        """Close the round: count it, clear the wave and restore buttons."""
        self.rounds += 1
        self.dead_enemies = 0
        self.enemies = []
        reset_buttons(self.hud.buttons)


@dataclass
class AppState:
    """Application-wide state shared by the menu and the game."""

    scene: SceneState = SceneState.MENU
    game: GameState | None = None
    music: str = MENU_MUSIC
    click_music: str = CLICK_MUSIC
    cursor: str = CURSOR_TEXTURE
    cursor_index: int = 0
    click_state: int = 0

    def close_game(self) -> None:
        """Quit the application, ending any game in progress."""
        self.scene = SceneState.QUIT
        if self.game is not None:
            self.game.scene = GameScene.QUIT_GAME

    def go_to_menu(self) -> None:
        """Leave the running game for the main menu."""
        self.scene = SceneState.MENU
        if self.game is not None:
            self.game.scene = GameScene.ABANDONED

    def launch_game(self) -> None:
        """Start a game."""
        self.scene = SceneState.GAME

    def go_back(self) -> None:
        """Return to the main menu."""
        self.scene = SceneState.MENU

    def go_to_info(self) -> None:
        """Open the information screen."""
        self.scene = SceneState.INFO

    def map_selector(self) -> None:
        """Open the map selection screen."""
        self.scene = SceneState.MAP

    def go_to_trophea(self) -> None:
        """Open the trophy screen."""
        self.scene = SceneState.TROPHEA