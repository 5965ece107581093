"""Keyboard state and the player movement it drives."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from cubed.chars import in_charset
from cubed.scene import COLLISIONS, MOVE_SPEED, ROTATE_SPEED, SLIDE_SPEED, Player

_KEY_FIELDS = {
    "w": "w",
    "a": "a",
    "s": "s",
    "d": "d",
    "left": "left",
    "right": "right",
    "escape": "esc",
}


@dataclass
class Keys:
    """Which of the game's keys are currently held down."""

    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    right: bool = False
    left: bool = False
    esc: bool = False

    def press(self, key: str) -> None:
        """Mark ``key`` (w, a, s, d, left, right or escape) as held."""
        name = _KEY_FIELDS.get(key)
        if name is not None:
            setattr(self, name, True)

    def release(self, key: str) -> None:
        """Mark ``key`` as no longer held."""
        name = _KEY_FIELDS.get(key)
        if name is not None:
            setattr(self, name, False)


def _move(grid: Sequence[str], player: Player, dx: float, dy: float) -> None:
    new_x = player.x + dx
    new_y = player.y + dy
    if in_charset(grid[int(new_y)][int(player.x)], COLLISIONS):
        player.y = new_y
    if in_charset(grid[int(player.y)][int(new_x)], COLLISIONS):
        player.x = new_x


def walk(grid: Sequence[str], player: Player, backward: bool = False) -> None:
    """Move the player along the view direction, stopping at walls."""
    sign = -1 if backward else 1
    _move(grid, player, sign * player.dir_x * MOVE_SPEED,
          sign * player.dir_y * MOVE_SPEED)


def slide(grid: Sequence[str], player: Player, left: bool = False) -> None:
    """Move the player sideways along the camera plane, stopping at walls."""
    sign = -1 if left else 1
    _move(grid, player, sign * player.plane_x * SLIDE_SPEED,
          sign * player.plane_y * SLIDE_SPEED)


def rotate(player: Player, left: bool = False) -> None:
    """Turn the view direction and camera plane by one rotation step."""
    angle = (-1 if left else 1) * ROTATE_SPEED
    cos, sin = math.cos(angle), math.sin(angle)
    player.dir_x, player.dir_y = (player.dir_x * cos - player.dir_y * sin,
                                  player.dir_x * sin + player.dir_y * cos)
    player.plane_x, player.plane_y = (player.plane_x * cos - player.plane_y * sin,
                                      player.plane_x * sin + player.plane_y * cos)


def update(grid: Sequence[str], player: Player, keys: Keys) -> bool:
    """Apply one frame of movement; return False when the game should stop."""
    if keys.esc:
        return False
    if keys.w or keys.s:
        walk(grid, player, backward=keys.s)
    if keys.a or keys.d:
        slide(grid, player, left=keys.a)
    if keys.left or keys.right:
        rotate(player, left=keys.left)
    return True