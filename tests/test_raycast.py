import pytest

from cubed.raycast import (
    Hit,
    cast_ray,
    draw_end,
    draw_start,
    ray_direction,
    texture_rows,
    texture_x,
    wall_height,
)
from cubed.scene import WIN_H, WIN_W, Player, Side, spawn_player

GRID = [
    "11111",
    "10001",
    "10001",
    "10001",
    "11111",
]


def test_ray_direction_centre_column_is_view_direction():
    player = spawn_player(2, 2, "N")
    assert ray_direction(player, WIN_W // 2) == pytest.approx((player.dir_x, player.dir_y))


def test_ray_direction_first_column_subtracts_plane():
    player = spawn_player(2, 2, "N")
    rx, ry = ray_direction(player, 0)
    assert rx == pytest.approx(player.dir_x - player.plane_x)
    assert ry == pytest.approx(player.dir_y - player.plane_y)


def test_cast_ray_north_hits_top_wall():
    player = spawn_player(2, 2, "N")
    hit = cast_ray(GRID, player, WIN_W // 2)
    assert hit.side == Side.SO
    assert (hit.map_x, hit.map_y) == (2, 0)
    assert hit.distance == pytest.approx(player.y - 1)


def test_cast_ray_positive_x_hits_east_face():
    player = spawn_player(2, 2, "W")
    hit = cast_ray(GRID, player, WIN_W // 2)
    assert hit.side == Side.EA
    assert hit.map_x == 4
    assert hit.distance == pytest.approx(4 - player.x)


def test_every_column_hits_a_wall_cell():
    player = spawn_player(2, 2, "S")
    for column in range(0, WIN_W, 97):
        hit = cast_ray(GRID, player, column)
        assert GRID[hit.map_y][hit.map_x] == "1"
        assert hit.distance > 0


def test_cast_ray_open_map_raises():
    player = Player(1.5, 0.5, dir_y=-1.0, plane_x=0.9)
    with pytest.raises(ValueError):
        cast_ray(["000"], player, WIN_W // 2)


def test_wall_height_unit_distance_fills_screen():
    assert wall_height(1.0) == WIN_H


def test_draw_bounds_are_clamped():
    assert draw_start(WIN_H * 4) == 0
    assert draw_end(WIN_H * 4) == WIN_H


def test_draw_bounds_zero_height_meet_in_middle():
    assert draw_start(0) == WIN_H // 2
    assert draw_end(0) == WIN_H // 2


def test_draw_bounds_centered():
    assert draw_start(100) == WIN_H // 2 - 50
    assert draw_end(100) == WIN_H // 2 + 50


def test_texture_x_flips_for_north_face():
    south = Hit(1.0, Side.SO, 2, 0, 0.0, -1.0)
    north = Hit(1.0, Side.NO, 2, 0, 0.0, -1.0)
    player = Player(2.3, 2.0)
    a = texture_x(player, south, 32)
    b = texture_x(player, north, 32)
    assert a + b == 31
    assert 0 <= a < 32


def test_texture_x_in_range_for_cast_rays():
    player = spawn_player(2, 2, "E")
    for column in range(0, WIN_W, 131):
        hit = cast_ray(GRID, player, column)
        assert 0 <= texture_x(player, hit, 64) < 64


def test_texture_rows_cover_slice():
    rows = texture_rows(64, 64)
    assert [y for y, _ in rows] == list(range(draw_start(64), draw_end(64)))
    assert [t for _, t in rows] == list(range(64))


def test_texture_rows_tall_slice_stays_in_texture():
    rows = texture_rows(WIN_H * 3, 32)
    assert len(rows) == WIN_H
    assert all(0 <= t < 32 for _, t in rows)