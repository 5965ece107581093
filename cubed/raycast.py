"""Casting rays through the scene grid and mapping wall hits to screen columns."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from cubed.scene import WIN_H, WIN_W, Player, Side

# Stand-in for an infinite distance when a ray runs parallel to an axis.
_FAR = 3.4028234663852886e38


@dataclass(frozen=True)
class Hit:
    """Where a ray met a wall: the perpendicular distance and the face hit."""

    distance: float
    side: Side
    map_x: int
    map_y: int
    ray_x: float
    ray_y: float


def ray_direction(player: Player, column: int, width: int = WIN_W) -> tuple[float, float]:
    """Return the direction of the ray cast through screen ``column``."""
    camera_x = 2 * column / float(width) - 1.0
    return (player.dir_x + player.plane_x * camera_x,
            player.dir_y + player.plane_y * camera_x)


def _delta(component: float) -> float:
    return abs(1 / component) if component != 0.0 else _FAR


def cast_ray(grid: Sequence[str], player: Player, column: int) -> Hit:
    """Step a ray through the grid cell by cell until it meets a wall."""
    ray_x, ray_y = ray_direction(player, column)
    map_x, map_y = int(player.x), int(player.y)
    delta_x, delta_y = _delta(ray_x), _delta(ray_y)
    if ray_x < 0:
        step_x = -1
        side_x = (player.x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - player.x) * delta_x
    if ray_y < 0:
        step_y = -1
        side_y = (player.y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - player.y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = Side.EA if ray_x > 0 else Side.WE
        else:
            side_y += delta_y
            map_y += step_y
            side = Side.SO if ray_y < 0 else Side.NO
        if not (0 <= map_y < len(grid) and 0 <= map_x < len(grid[map_y])):
            raise ValueError("ray left the map without meeting a wall")
        if grid[map_y][map_x] == "1":
            break

    if side > 1:
        distance = side_x - delta_x
    else:
        distance = side_y - delta_y
    return Hit(distance, side, map_x, map_y, ray_x, ray_y)


def wall_height(distance: float) -> int:
    """Return the on-screen height of a wall slice seen at ``distance``."""
    return int(WIN_H / distance)


def draw_start(height: int) -> int:
    """First screen row of a wall slice of the given height."""
    return max((-height >> 1) + (WIN_H >> 1), 0)


def draw_end(height: int) -> int:
    """Screen row just past the end of a wall slice of the given height."""
    return min((height >> 1) + (WIN_H >> 1), WIN_H)


def texture_x(player: Player, hit: Hit, texture_width: int) -> int:
    """Return the texture column to sample for a wall hit."""
    if hit.side > 1:
        wall_x = player.y + hit.distance * hit.ray_y
    else:
        wall_x = player.x + hit.distance * hit.ray_x
    wall_x -= math.floor(wall_x)
    column = int(wall_x * texture_width)
    if hit.side in (Side.NO, Side.WE):
        column = texture_width - column - 1
    return column


def texture_rows(height: int, texture_height: int) -> list[tuple[int, int]]:
    """Pair each screen row of a wall slice with the texture row drawn there.

    ``texture_height`` is expected to be a power of two.
    """
    step = texture_height / height
    start, end = draw_start(height), draw_end(height)
    position = (start - (WIN_H >> 1) + (height >> 1)) * step
    rows = []
    for y in range(start, end):
        rows.append((y, int(position) & (texture_height - 1)))
        position += step
    return rows