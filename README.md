# cubed

A first-person maze explorer rendered with raycasting, using pygame for the
window and input. A scene is described in a `.cub` file: four wall textures,
a floor and a ceiling colour, and a map of walls and open floor with one
starting position.

## Installing

    pip install .

## Running

    cubed path/to/scene.cub

This opens a 1280×720 window titled "Cub3D".

Controls:

- `W` / `S`: walk forward / backward
- `A` / `D`: step sideways
- Left / Right arrows: turn
- `Escape` or closing the window: quit

Movement stops at walls: the player may only enter cells that are floor.

### Errors and exit status

When the command line has no scene file or more than one, or the scene file
cannot be used (wrong extension, not found, a directory, permission denied,
or malformed), `cubed` writes `Error` and the reason to standard error and
exits with status 1. A map without a starting position is reported the same
way (`No player found.`) but exits with status 0.

If the wall textures cannot be loaded as images once the window is open, the
program prints `Error` and `Textures must be .xpm format.` to standard output
and returns without playing.

## Scene file format

    NO ./textures/north.xpm
    SO ./textures/south.xpm
    WE ./textures/west.xpm
    EA ./textures/east.xpm

    F 220,100,0
    C 225,30,0

    111111
    100101
    101001
    1100N1
    111111

- `NO`, `SO`, `WE`, `EA` name the wall textures. Each path must end in
  `.xpm` and name an existing file that can be opened for reading and
  writing; relative paths are taken from the current directory. Each
  identifier may appear only once.
- `F` and `C` give floor and ceiling colours as three comma-separated values
  from 0 to 255. Blanks around the values are allowed, and an empty value
  counts as 0.
- Settings may come in any order, with blank lines between them, but all six
  must appear before the map. The first line that is not a setting starts
  the map.
- The map may use `0` (floor), `1` (wall), spaces, and exactly one of `N`,
  `S`, `E`, `W` marking the start and the initial facing. Shorter rows are
  padded with empty space and trailing blank lines are ignored.
- Every floor cell, the start cell included, must be enclosed: it may not lie
  on the edge of the map or next to empty space.

Wall textures are sampled as 32×32 images.

## Using it as a library

    from cubed.scene import parse_scene, SceneError
    from cubed.raycast import cast_ray, wall_height

    scene = parse_scene("maze.cub")
    hit = cast_ray(scene.grid, scene.player, 640)
    print(hit.side.name, hit.distance, wall_height(hit.distance))

- `cubed.scene`: `parse_scene(path)` and `parse_scene_lines(lines)` return a
  `Scene` (grid, textures, floor and ceiling `Color`, `Player`) or raise
  `SceneError` with a readable message. Lower-level helpers such as
  `parse_color`, `parse_texture`, `build_grid` and `check_closed` are
  available too.
- `cubed.raycast`: `ray_direction`, `cast_ray` (returns a `Hit`),
  `wall_height`, `draw_start`, `draw_end`, `texture_x` and `texture_rows`.
- `cubed.controls`: the `Keys` state and the `walk`, `slide`, `rotate` and
  `update` movement functions.
- `cubed.game`: the `Game` class and the `main` entry point.

The package also holds small general helpers used alongside the game:
`cubed.chars` (character tests and integer parsing), `cubed.strings` and
`cubed.words` (string searching, copying, splitting and trimming),
`cubed.memory` (operations on `bytearray` buffers), `cubed.linked` (a singly
linked `LinkedList`), `cubed.output` (writing to a text stream) and
`cubed.linereader` (`LineReader`, reading a stream one line at a time).

## Tests

    pip install .[test]
    pytest