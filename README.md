# cubcaster

cubcaster is the core of a first-person raycasting engine on a tile grid. It
casts rays through a map of wall and floor tiles to find the nearest wall for
each screen column. It also moves and turns a player with collision against
walls. Alongside these it has a few small helpers for text, numbers, line
reading and linked lists.

It needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Maps

A grid is a sequence of equal-length strings, one per row. The character `1` is
a wall. Each tile is `cubcaster.geometry.TILE` (64) world units wide, so a
player standing in the middle of row 1, column 1 is at `x = 96, y = 96`. Angles
are in radians. An angle of 0 points towards increasing `x`, and `PI / 2` points
towards increasing `y`.

## Casting rays

```python
from cubcaster.raycast import cast_view, cast_ray, choose_side

grid = [
    "111111",
    "100001",
    "100001",
    "111111",
]

hits = cast_view(grid, 96.0, 96.0, 0.0)    # 240 RayHit values, left to right
for hit in hits[:3]:
    print(hit.x, hit.y, hit.distance, hit.horizontal, choose_side(hit))
```

- `cast_view(grid, px, py, player_angle)` casts 240 rays. They start 30 degrees
  to the left of `player_angle` and are a quarter of a degree apart.
- `cast_ray(grid, px, py, player_angle, ray_angle)` casts one ray. It keeps the
  nearer of the crossings with vertical and horizontal grid lines. The distance
  is corrected for fisheye against `player_angle`.
- `cast_vertical` and `cast_horizontal` each return `(x, y, distance)` for one
  family of grid lines. The distance is `NO_HIT` (10,000,000) when no wall was
  met.
- `RayHit` is a frozen dataclass. Its fields are `x`, `y`, `distance`, `angle`
  and `horizontal`.
- `choose_side(hit)` returns a `Side`, which is `NORTH`, `SOUTH`, `WEST` or
  `EAST`. This is the wall face to texture. It returns `None` when the angle
  falls exactly on a boundary.

`cubcaster.geometry` holds the shared constants (`TILE`, `WIDTH`, `HEIGHT`,
`PI`, `DR`, `SPEED`, ...). It also holds `calculate_distance`,
`normalize_angle` and `fix_fisheye`.

## Moving the player

```python
from cubcaster.player import PlayerState

player = PlayerState.from_spawn(96.0, 96.0, "E")   # N, S, E or W
player.rotate("R")                 # turn right by 0.1 rad; "L" turns left
moved = player.move(grid, "U")     # U forward, D back, L / R strafe
```

`move` takes a step of `SPEED` units. It returns `False` and leaves the player
where it was when a wall lies within a third of a tile of the new position.
Tiles outside the grid count as walls. An unknown direction raises `ValueError`.

## Helpers

- `cubcaster.linereader`: `LineReader(stream, buffer_size=1)` returns lines one
  at a time through a fixed-size read buffer, each with its newline if it had
  one. It works on text or binary streams. `read_lines(path)` yields the lines
  of a text file.
- `cubcaster.strings`: string functions with C-library behaviour. They return
  indices instead of pointers: `split`, `strchr`, `strrchr`, `strncmp`,
  `strnstr`, `substr`, `strtrim`, `strjoin`, `strlcpy`, `strlcat`, `strmapi`,
  `striteri`.
- `cubcaster.chars`: ASCII tests and case conversion (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`). Each takes a
  character or a character code.
- `cubcaster.numbers`: `atoi` (leading white space, an optional sign, digits)
  and `itoa`.
- `cubcaster.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to
  any text stream.
- `cubcaster.linked`: `LinkedList` of `Node`s. It provides `push_front`,
  `push_back`, `last`, `clear`, `for_each`, `map`, `reverse`, `len()` and
  iteration.

## What it does not do

cubcaster has no command and opens no window. It does not read `.cub` scene
files or check that a map is enclosed by walls. It does not parse floor or
ceiling colours, load wall textures or draw anything. It gives you the wall
hits and the player state; drawing them and handling keys is up to your own
code.