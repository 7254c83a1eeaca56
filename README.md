# my_defender

`my_defender` is a small tower defense game built on pygame. You defend a
1280×640 map against waves of enemies that all march on your main castle.

## Installing

```
pip install .
```

This installs `pygame`, which the game needs.

## Playing

Start the game from the directory that holds the `resources/` folder. This
folder holds the sprites, fonts, music and text files:

```
my_defender
```

The same entry point is `my_defender.app:main`.

- `my_defender -h` prints the rules from `resources/rules_game/rules.txt`, at
  most 1500 bytes. If the file cannot be read, it prints nothing.
- If you pass more than one argument, the command prints `retry with -h` and
  exits with status 84.
- If the process environment has fewer than 51 variables, the command exits
  with status 84 and prints nothing.

If an image, font or sound file is missing, the game does not fail. That
sprite is simply not drawn, text falls back to pygame's default font, and
that sound stays silent.

### The menu

The main menu has five buttons:

- play
- quit
- map selection
- trophies
- information

The information and trophy screens show the text of
`resources/menu/info.txt`. Every sub-screen has a back button that returns
to the menu.

### Building round

You start with 800 gold and 1000 health. Use the two arrow buttons at the
bottom to cycle through the building types. A preview of the selected type
is shown. Click on the map to buy and place the selected building. If you
lack the gold, the game shows a message.

The first building you place is your main castle. It is tinted blue, and
enemies head for it.

| Building     | Price | Range | Damage |
|--------------|------:|------:|-------:|
| Castle       |   600 |   150 |      7 |
| Catapult     |   150 |   100 |      6 |
| Wizard       |  1000 |   200 |     10 |
| Small castle |   250 |   125 |      6 |

### Assault round

Press the assault button to start a wave. The game refuses until a main
tower is placed.

- **Wave size**: the first wave has 15 enemies. Each round, the wave size is
  multiplied by the round number.
- **Spawning**: all enemies of a wave come from one side, off screen.
- **Tower fire**: every tenth of a second, each building damages an enemy
  that is within its range plus 50 pixels. Distance is measured as the
  Manhattan distance.
- **Kills**: each enemy you kill gives you 15 gold.
- **Arrivals**: an enemy that reaches the main castle costs you 25 health.
- **End of the round**: the round ends when every enemy is dead or has
  arrived.
- **Defeat**: when your health falls to zero, "YOU LOOSE" is shown and the
  game pauses.

### Pause

The pause button opens three buttons: resume, back to the menu, and quit.

Press Escape or close the window at any time to quit.

## What it does not do

- **Maps**: there is only one map. The arrows on the map selection screen
  lead back to the menu.
- **Scores**: scores and trophies are neither kept nor saved. The trophy
  screen shows the same text as the information screen.
- **Saved games**: there is no way to save a game in progress.

## Package layout

| Module                 | Contents |
|------------------------|----------|
| `my_defender.app`      | `main`, `verify`, `get_help`, `launch_game` |
| `my_defender.menu`     | the menu and its screens |
| `my_defender.game`     | building, assault and pause rounds |
| `my_defender.state`    | `AppState` and `GameState` |
| `my_defender.building` | buildings and their stats |
| `my_defender.enemy`    | enemies |
| `my_defender.hud`      | the HUD |
| `my_defender.button`   | buttons |
| `my_defender.sprite`   | sprite geometry and hit tests |
| `my_defender.render`   | pygame drawing and sound |
| `my_defender.strutil`  | string helpers |

## Running the tests

```
pip install .[test]
pytest
```