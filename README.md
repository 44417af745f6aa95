# cubcaster

cubcaster is a small first-person raycasting engine. It reads a scene
from a `.cub` file and draws it as textured walls with a flat ceiling
and floor colour, in a window opened with pygame. A minimap of the
scene sits in the top-left corner of the view.

## Installation

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install .[test]
pytest
```

## Running

```
cubcaster path/to/scene.cub
```

The program takes exactly one argument. Its name must end in `.cub`
and have at least one character before the extension. When something
is wrong, it prints `Error` on standard error, then a line that
describes the problem (followed by `: reason` when the system or the
image loader gave one), and exits with status 1. On a normal close it
exits with status 0.

### Controls

| Key          | Action                  |
|--------------|-------------------------|
| W / S        | move forward / backward |
| A / D        | strafe left / right     |
| Left / Right | turn                    |
| mouse        | turn                    |
| Escape       | quit                    |

Closing the window also quits. The mouse pointer is hidden and put
back at a fixed spot every frame; turning follows how far it moved
sideways from there.

The player cannot walk into walls. When a move is blocked, the player
keeps only its vertical part if that is free, or else only its
horizontal part, and so slides along the wall.

## The `.cub` format

A `.cub` file has two parts. The first part sets six elements. Each
element is on its own line, in any order, and blank lines may appear
between them. Blanks around a line are ignored.

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` give the wall textures: a path to an image
  that pygame can load (such as a PNG). Each texture must be exactly
  256×256 pixels.
- `F` sets the floor colour and `C` sets the ceiling colour. Each is
  written as `R,G,B` with no spaces inside: three numbers from 0 to 255,
  each with one to three digits.
- Each element may be set only once, and any other line before the map
  is an error.

The map comes right after the six elements:

```
        1111111111111
        1000000000001
        1011000001111
111111111011000001000001
100000000011000001011111
11110111111111011100001
11110111111111011101001
11000000110101011100001
10000000000000001100001
10000000000000001101001
11000001110101011111011
11110111 1110101 101111
11111111 1111111 111111
```

- `1` is a wall and `0` is floor. A space is empty. No other characters
  are allowed.
- Exactly one cell must hold `N`, `S`, `E` or `W`. That cell is where the
  player starts, and the letter is the direction the player faces. The
  cell is then treated as floor.
- Everything the player can reach, moving in any of eight directions
  through cells that are not walls, must be closed in by walls: it may
  not run off the rows of the map, and no floor cell in it may lie on
  the map's edge.
- Blank lines may appear before the map, but no blank line and nothing
  else may follow it.

## Using it as a library

The engine can be used without opening a window:

```python
from cubcaster.loader import load_cub
from cubcaster.colors import Image
from cubcaster.raycast import render
from cubcaster.minimap import draw_minimap

scene = load_cub("maps/level.cub")
image = Image(1024, 680)
render(image, scene.player, scene.grid, scene.assets)
draw_minimap(image, scene.grid, scene.player)
```

`Image.pixels` then holds the frame as 32-bit `0xRRGGBBAA` values, row
by row.

The main pieces:

- `cubcaster.loader.load_cub(path, loader)` reads a scene file and
  returns a `Scene` with `grid` (a list of row strings), `player` and
  `assets`. The optional `loader` turns a texture path into a
  `cubcaster.assets.Texture`; it defaults to
  `cubcaster.assets.load_texture`, which uses pygame.
- `cubcaster.assets.parse_assets` and `cubcaster.mapparse.parse_map`
  parse the two parts of a scene from lines of text;
  `cubcaster.mapparse.map_check_closed` runs the closed-map check.
- `cubcaster.movement` moves and turns a `Player`
  (`update_position`, `rotate_player`).
- `cubcaster.raycast` casts rays (`init_ray`, `cast`, `wall_slice`) and
  draws columns (`draw_column`, `render`).
- `cubcaster.app.Game` holds a scene and a frame; `Game.tick(keys,
  mouse_x, dt)` advances and redraws one frame, and `Game.run()` opens
  the window.

Problems with the arguments, the scene file or the window are raised
as `cubcaster.errors.CubError`; `CubError.report()` prints it in the
form described above and returns the exit status.