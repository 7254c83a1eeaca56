import pytest

from my_defender.building import MAIN_BUILDING_COLOR, select_build_type
from my_defender.button import dispatch_click
from my_defender.constants import BuildingType, GameScene, SceneState
from my_defender.sprite import Vector
from my_defender.state import CANT_AFFORD, PLACE_MAIN_TOWER, AppState, GameState


def test_new_game_defaults():
    game = GameState()
    assert (game.gold, game.health, game.rounds, game.nbr_enemy) == (800, 1000, 1, 15)
    assert game.scene is GameScene.BUILDING_ROUND
    assert game.selected_build is BuildingType.CASTLE
    assert game.buildings == [] and game.enemies == []


def test_place_building_spends_gold_and_marks_main():
    game = GameState(gold=5000)
    price = select_build_type(BuildingType.CASTLE).price
    assert game.place_building(Vector(300.0, 300.0))
    assert game.gold == 5000 - price
    assert game.place_building(Vector(500.0, 300.0))
    assert game.buildings[0].sprite.color == MAIN_BUILDING_COLOR
    assert game.buildings[1].sprite.color != MAIN_BUILDING_COLOR
    assert game.castle_position == Vector(300.0, 300.0)


def test_place_building_without_gold():
    game = GameState(gold=10)
    assert not game.place_building(Vector(300.0, 300.0))
    assert game.gold == 10
    assert game.buildings == []
    assert game.hud.info_text == CANT_AFFORD


def test_toggle_pause_round_trip():
    game = GameState()
    game.toggle_pause()
    assert game.pause is True
    game.toggle_pause()
    assert game.pause is False


def test_next_visualisation_cycles():
    game = GameState()
    seen = []
    for _ in range(4):
        game.next_visualisation()
        seen.append((game.selected_build, game.hud.visualisation.rect.left))
    assert seen[-1] == (BuildingType.CASTLE, 0)
    assert [s[0] for s in seen[:3]] == [
        BuildingType.CATAPULTE, BuildingType.WIZARD, BuildingType.SMALL_CASTLE]
    assert seen[0][1] == 111


def test_previous_visualisation_wraps_and_undoes_next():
    game = GameState()
    game.previous_visualisation()
    assert game.selected_build is BuildingType.SMALL_CASTLE
    assert game.hud.visualisation.rect.left == 333
    game.next_visualisation()
    game.next_visualisation()
    game.previous_visualisation()
    assert game.selected_build is BuildingType.CASTLE
    assert game.hud.visualisation.rect.left == 0


def test_launch_assault_needs_main_tower():
    game = GameState()
    game.launch_assault()
    assert game.scene is GameScene.BUILDING_ROUND
    assert game.hud.info_text == PLACE_MAIN_TOWER
    game.place_building(Vector(600.0, 300.0))
    game.launch_assault()
    assert game.scene is GameScene.ASSAULT_ROUND


def test_start_assault_spawns_wave():
    game = GameState()
    game.place_building(Vector(600.0, 300.0))
    game.start_assault()
    assert len(game.enemies) == game.nbr_enemy == 15
    assert game.hud.info_text == "1"
    for enemy in game.enemies:
        step = abs(enemy.direction.x) + abs(enemy.direction.y)
        assert step == pytest.approx(1.0)


def test_check_end():
    game = GameState(dead_enemies=15)
    assert game.check_end() is True
    lost = GameState(health=0)
    assert lost.check_end() is False
    assert lost.hud.lost is True and lost.pause is True


def test_assault_tick_rewards_kills():
    game = GameState()
    game.place_building(Vector(600.0, 300.0))
    game.start_assault()
    game.buildings[0].position = game.enemies[0].sprite.position
    for _ in range(20):
        game.assault_tick()
    assert game.enemies[0].stats.dead is True
    assert game.dead_enemies >= 1
    assert game.gold == 800 - 600 + 15 * game.dead_enemies


def test_move_enemies_damages_castle():
    game = GameState()
    game.place_building(Vector(600.0, 300.0))
    game.start_assault()
    game.buildings[0].position = game.enemies[0].sprite.position
    game.move_enemies()
    assert game.dead_enemies >= 1
    assert game.health == 1000 - 25 * game.dead_enemies


def test_finish_assault():
    game = GameState()
    game.place_building(Vector(600.0, 300.0))
    game.start_assault()
    game.dead_enemies = 4
    game.hud.buttons[1].hide()
    game.finish_assault()
    assert (game.rounds, game.dead_enemies, game.enemies) == (2, 0, [])
    assert game.hud.buttons[1].sprite.position == game.hud.buttons[1].position


def test_app_navigation():
    app = AppState()
    assert app.scene is SceneState.MENU
    app.launch_game()
    assert app.scene is SceneState.GAME
    app.go_to_info()
    assert app.scene is SceneState.INFO
    app.map_selector()
    assert app.scene is SceneState.MAP
    app.go_to_trophea()
    assert app.scene is SceneState.TROPHEA
    app.go_back()
    assert app.scene is SceneState.MENU


def test_close_game_and_go_to_menu_end_game():
    app = AppState(scene=SceneState.GAME, game=GameState())
    app.go_to_menu()
    assert app.scene is SceneState.MENU
    assert app.game.scene is GameScene.ABANDONED
    app.close_game()
    assert app.scene is SceneState.QUIT
    assert app.game.scene is GameScene.QUIT_GAME


def test_close_game_without_game():
    app = AppState()
    app.close_game()
    assert app.scene is SceneState.QUIT and app.game is None


def test_hud_pause_button_toggles_pause():
    app = AppState(scene=SceneState.GAME, game=GameState())
    pause_button = app.game.hud.buttons[0]
    assert dispatch_click(app.game.hud.buttons, pause_button.position, app) == 1
    assert app.game.pause is True


def test_hud_assault_button_without_tower():
    app = AppState(scene=SceneState.GAME, game=GameState())
    assault_button = app.game.hud.buttons[1]
    dispatch_click(app.game.hud.buttons, assault_button.position, app)
    assert app.game.scene is GameScene.BUILDING_ROUND
    assert app.game.hud.info_text == PLACE_MAIN_TOWER