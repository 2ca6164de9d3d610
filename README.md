# lostgame

`lostgame` is a small side-scrolling platform game built on pygame. You walk through a
level of tiles and jump. You stomp on enemies to get rid of them. Touching an enemy any
other way costs health. You lose when your health runs out or you fall off the bottom
of the screen. You win by reaching the finish tile.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
lostgame [MAP] [--assets DIR]
```

- `MAP` is the map file to play. The default is `map.map`.
- `--assets DIR` is the directory that holds the images and the font. The default is the current directory.

The game reads these files from the asset directory:

- `blocks.bmp`: the block tiles, each 75 pixels wide, placed side by side (required)
- `BG.bmp`: the scrolling background, which wraps around every 2000 pixels (required)
- `enemy.bmp`: the enemy sprite sheet, two 40×40 frames (required)
- `hero.bmp`: the hero sprite sheet, four 50×50 frames (required)
- `icone.bmp`: the window icon (used if present)
- `fonds.ttf`: the font for the menu and messages (if it is missing, pygame's default font is used)

Controls:

| Key        | Action        |
|------------|---------------|
| Left/Right | walk          |
| Space      | jump          |
| Escape     | open the menu |

The hero starts with 10 health. When the hero touches an enemy and the hero's bottom
edge is at least 20 pixels below the enemy's top, the enemy is removed. Any other
touch costs one point of health for each frame the hero and the enemy overlap.

The menu dims the screen and offers two choices. "Jouer" resumes the game and "Exit"
quits. Pressing Escape again closes the menu and resumes. When the game ends, the window
shows "game over" or "You Win" for one second and then closes. The game runs at about
30 frames per second.

## Map format

A map is plain text. The first two numbers are its width and height, in cells of
50 pixels. After them come `width × height` integers, separated by whitespace and read
row by row:

- `0`: empty space
- `1`, `3`: solid blocks
- `2`: the finish tile, which is also solid
- `-1`: an enemy starts here, and the cell itself is empty
- any other integer: empty space

```
4 2
0 -1 0 2
1  1 1 1
```

## Using it from Python

```python
from lostgame.game import Game, MapFormatError, load_map, parse_map

level = parse_map("4 2\n0 -1 0 2\n1 1 1 1\n")
level.tiles          # [[0, 0, 0, 2], [1, 1, 1, 1]]
level.enemy_spawns   # [(50, 0)]
level.finish         # Rect(x=150, y=0, w=50, h=50)

game = Game("path/to/assets")
game.run("path/to/assets/map.map")
```

`parse_map` and `load_map` raise `MapFormatError` when the map ends too early, contains
something that is not an integer, or gives a width or height that is not positive.
`load_map` reads the file as UTF-8 and raises the usual `OSError` if the file cannot be
opened.

Other modules:

- `lostgame.base`: `Rect` (with `collides` and `moved`) and `visible_columns`
- `lostgame.player`: `Player` and `Direction`
- `lostgame.enemy`: `Enemy`

## What it does not do

Each run plays a single map. The game has no sound, no score, no saved progress and no
way to restart except launching it again.