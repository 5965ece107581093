"""Loading and validating a scene description (.cub) file.

A scene file holds four wall texture paths (NO, SO, WE, EA), a floor (F) and
a ceiling (C) colour, and then a map made of walls, floor and one spawn
point. Settings may come in any order, each on its own line, but all of them
must appear before the map.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from itertools import chain

from cubed.linereader import LineReader

COLLISIONS = "0NSEW"

WIN_W = 1280
WIN_H = 720

FOV = 0.9

MOVE_SPEED = 0.05
ROTATE_SPEED = 0.05
SLIDE_SPEED = 0.05

_BLANKS = re.compile(r"[ \t]*")
_COMPONENT = re.compile(r"[ \t]*\+?([0-9]*)")
_NAME = re.compile(r"[^ \t\n]*")

_MISCONFIGURED = "misconfiguration in map file"
_DUPLICATE = "too many identifier in map file"


class SceneError(Exception):
    """Raised when a scene file is missing, unreadable or malformed."""


class Side(IntEnum):
    """The face of a wall a ray can hit, and the texture drawn on it."""

    NO = 0
    SO = 1
    EA = 2
    WE = 3


@dataclass(frozen=True)
class Color:
    """An RGB colour with components from 0 to 255."""

    r: int
    g: int
    b: int

    def packed(self) -> int:
        """Return the colour as a 0xRRGGBB integer with a zero alpha byte."""
        return (self.r << 16) | (self.g << 8) | self.b


@dataclass
class Player:
    """Position, viewing direction and camera plane of the player."""

    x: float
    y: float
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0


@dataclass
class Scene:
    """A fully parsed and validated scene."""

    grid: list[str]
    textures: dict[Side, str]
    floor: Color
    ceiling: Color
    player: Player
    spawn: str = field(default="")

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)


def _check_path(path: str | os.PathLike[str], extension: str, noun: str) -> None:
    name = os.fspath(path)
    dot = name.rfind(".")
    if dot <= 0 or name[dot:] != extension:
        raise SceneError(f"{noun} file is not a {extension}")
    try:
        fd = os.open(name, os.O_RDWR)
    except PermissionError as exc:
        raise SceneError(f"permission to {noun} file denied") from exc
    except IsADirectoryError as exc:
        raise SceneError(f"{noun} file is a directory") from exc
    except OSError as exc:
        raise SceneError(f"{noun} file not found") from exc
    os.close(fd)


def check_scene_path(path: str | os.PathLike[str]) -> None:
    """Require a readable and writable file whose name ends in ``.cub``."""
    _check_path(path, ".cub", "map")


def check_texture_path(path: str | os.PathLike[str]) -> None:
    """Require a readable and writable file whose name ends in ``.xpm``."""
    _check_path(path, ".xpm", "texture")


def _check_rest(text: str, pos: int) -> None:
    pos = _BLANKS.match(text, pos).end()
    if pos < len(text) and text[pos] != "\n":
        raise SceneError(_MISCONFIGURED)


def _component(text: str, pos: int) -> tuple[int, int]:
    match = _COMPONENT.match(text, pos)
    digits = match.group(1)
    value = int(digits) if digits else 0
    if len(digits) > 4 or value > 255:
        raise SceneError("RGB value needed between 0 and 255")
    return value, match.end()


def parse_color(text: str) -> Color:
    """Parse ``r,g,b`` as it follows an ``F`` or ``C`` identifier.

    Blanks may surround each component; an empty component counts as zero.
    """
    values = []
    pos = 0
    for index in range(3):
        if index:
            pos = _BLANKS.match(text, pos).end()
            if text[pos:pos + 1] != ",":
                raise SceneError(_MISCONFIGURED)
            pos += 1
        value, pos = _component(text, pos)
        values.append(value)
    _check_rest(text, pos)
    return Color(*values)


def parse_texture(text: str) -> str:
    """Parse the texture path following a wall identifier and check the file."""
    start = _BLANKS.match(text).end()
    if start >= len(text) or text[start] == "\n":
        raise SceneError("texture file name not found")
    end = _NAME.match(text, start).end()
    name = text[start:end]
    check_texture_path(name)
    _check_rest(text, end)
    return name


def spawn_player(x: int, y: int, direction: str) -> Player:
    """Place the player in the middle of cell (x, y) facing ``direction``."""
    player = Player(x + 0.49, y + 0.49)
    if direction == "N":
        player.dir_y = -1.0
        player.plane_x = FOV
    elif direction == "S":
        player.dir_y = 1.0
        player.plane_x = -FOV
    elif direction == "W":
        player.dir_x = 1.0
        player.plane_y = FOV
    else:
        player.dir_x = -1.0
        player.plane_y = -FOV
    return player


def char_to_cell(c: str) -> str:
    """Map a scene-file map character to a grid cell.

    '1' is a wall, '0' walkable floor, '2' empty space outside the map and
    '3' anything unknown. Spawn letters become floor.
    """
    if c in " \n":
        return "2"
    if c in "01":
        return c
    if c in "NSEW":
        return "0"
    return "3"


def _is_blank(line: str) -> bool:
    return all(ch in " \t\n" for ch in line)


def build_grid(lines: Iterable[str]) -> tuple[list[str], Player | None]:
    """Turn the map lines into a rectangular grid and find the spawn point.

    Trailing blank lines are dropped; shorter rows are padded with '2'.
    Returns the grid and the player, or None when the map has no spawn.
    """
    rows = list(lines)
    height = max((j + 1 for j, row in enumerate(rows) if not _is_blank(row)),
                 default=0)
    widest = 0
    player: Player | None = None
    for y, row in enumerate(rows[:height]):
        for x, ch in enumerate(row.split("\n", 1)[0]):
            if ch not in " 10NSEW":
                raise SceneError("wrong character in the map")
            if ch != " ":
                widest = max(widest, x)
            if ch in "NSEW":
                if player is not None:
                    raise SceneError("too many start position")
                player = spawn_player(x, y, ch)
    width = widest + 1
    grid = [
        "".join(char_to_cell(ch) for ch in row[:width]).ljust(width, "2")
        for row in rows[:height]
    ]
    return grid, player


def check_closed(grid: list[str]) -> None:
    """Require every floor cell to be enclosed by walls."""
    height = len(grid)
    for y, row in enumerate(grid):
        width = len(row)
        for x, cell in enumerate(row):
            if cell != "0":
                continue
            if x == 0 or y == 0 or x == width - 1 or y == height - 1:
                raise SceneError("map not close")
            neighbours = (row[x + 1], row[x - 1], grid[y + 1][x], grid[y - 1][x])
            if "2" in neighbours:
                raise SceneError("map not close")


def _identifier(body: str) -> Side | str | None:
    for side in Side:
        if body[:3] in (f"{side.name} ", f"{side.name}\t"):
            return side
    for key in ("C", "F"):
        if body[:2] in (f"{key} ", f"{key}\t"):
            return key
    return None


def _require_settings(textures: dict[Side, str], colors: dict[str, Color]) -> None:
    if "C" not in colors:
        raise SceneError("missing celling color in map file")
    if "F" not in colors:
        raise SceneError("missing floor color in map file")
    if len(textures) < len(Side):
        raise SceneError("missing texture in map file")


def parse_scene_lines(lines: Iterable[str]) -> Scene:
    """Parse the lines of a scene file into a validated Scene."""
    it: Iterator[str] = iter(lines)
    first = next(it, None)
    if first is None:
        raise SceneError("map file empty")
    textures: dict[Side, str] = {}
    colors: dict[str, Color] = {}
    grid: list[str] | None = None
    player: Player | None = None
    spawn = ""
    for line in chain((first,), it):
        body = line.lstrip(" \t")
        if not body or body[0] == "\n":
            continue
        key = _identifier(body)
        if key is None:
            _require_settings(textures, colors)
            grid, player = build_grid(chain((line,), it))
            check_closed(grid)
            break
        if isinstance(key, Side):
            if key in textures:
                raise SceneError(_DUPLICATE)
            textures[key] = parse_texture(body[2:])
        else:
            if key in colors:
                raise SceneError(_DUPLICATE)
            colors[key] = parse_color(body[1:])
    _require_settings(textures, colors)
    if grid is None:
        raise SceneError("missing map in map file")
    if player is None:
        raise SceneError("No player found.")
    for row in grid:
        pass
    if player.dir_y < 0:
        spawn = "N"
    elif player.dir_y > 0:
        spawn = "S"
    elif player.dir_x > 0:
        spawn = "W"
    else:
        spawn = "E"
    return Scene(grid, textures, colors["F"], colors["C"], player, spawn)


def parse_scene(path: str | os.PathLike[str]) -> Scene:
    """Check, read and parse the scene file at ``path``."""
    check_scene_path(path)
    try:
        handle = open(path, encoding="utf-8", errors="surrogateescape",
                      newline="\n")
    except OSError as exc:
        raise SceneError(f"open: {exc.strerror}") from exc
    with handle:
        return parse_scene_lines(LineReader(handle))