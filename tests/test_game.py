import pygame
import pytest

from cubed.game import Game, main
from cubed.scene import WIN_H, WIN_W, Color, Scene, SceneError, Side, spawn_player

ROOM = ["1111111"] + ["1000001"] * 5 + ["1111111"]
WALL_RGB = (10, 200, 30)


def make_scene(textures=None):
    textures = textures or {side: f"{side.name.lower()}.xpm" for side in Side}
    return Scene(
        grid=list(ROOM),
        textures=textures,
        floor=Color(220, 100, 0),
        ceiling=Color(0, 50, 120),
        player=spawn_player(3, 3, "N"),
        spawn="N",
    )


def solid_texture(rgb):
    surface = pygame.Surface((32, 32))
    surface.fill(rgb)
    return surface


def textured_game():
    game = Game(make_scene())
    game.textures = {side: solid_texture(WALL_RGB) for side in Side}
    return game


def test_colors_come_from_scene():
    game = Game(make_scene())
    assert game.floor_color == (220, 100, 0)
    assert game.ceiling_color == (0, 50, 120)


def test_player_is_copied_from_scene():
    scene = make_scene()
    game = Game(scene)
    game.player.x += 1.0
    assert scene.player.x == pytest.approx(3.49)


def test_key_press_and_release():
    game = Game(make_scene())
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
    assert game.keys.w is True
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
    assert game.keys.left is True
    game.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_w))
    assert game.keys.w is False
    assert game.keys.left is True


def test_quit_event_stops_game():
    game = Game(make_scene())
    assert game.handle_event(pygame.event.Event(pygame.QUIT)) is False
    assert game.running is False


def test_render_draws_ceiling_wall_and_floor():
    game = textured_game()
    surface = pygame.Surface((WIN_W, WIN_H))
    game.render(surface)
    middle = WIN_W // 2
    assert tuple(surface.get_at((middle, 0)))[:3] == game.ceiling_color
    assert tuple(surface.get_at((middle, WIN_H - 1)))[:3] == game.floor_color
    assert tuple(surface.get_at((middle, WIN_H // 2)))[:3] == WALL_RGB


def test_render_moves_player_when_key_held():
    game = textured_game()
    start_y = game.player.y
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
    game.render(pygame.Surface((WIN_W, WIN_H)))
    assert game.player.y < start_y


def test_escape_stops_game_on_render():
    game = textured_game()
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    game.render(pygame.Surface((WIN_W, WIN_H)))
    assert game.running is False


def test_render_without_textures_raises():
    game = Game(make_scene())
    with pytest.raises(RuntimeError):
        game.render(pygame.Surface((WIN_W, WIN_H)))


def test_load_textures_reads_images(tmp_path):
    paths = {}
    for side in Side:
        path = tmp_path / f"{side.name}.bmp"
        pygame.image.save(solid_texture(WALL_RGB), str(path))
        paths[side] = str(path)
    game = Game(make_scene(paths))
    game.load_textures()
    assert set(game.textures) == set(Side)
    assert game.textures[Side.NO].get_size() == (32, 32)


def test_load_textures_rejects_garbage(tmp_path):
    paths = {}
    for side in Side:
        path = tmp_path / f"{side.name}.xpm"
        path.write_bytes(b"not an image at all")
        paths[side] = str(path)
    game = Game(make_scene(paths))
    with pytest.raises(SceneError):
        game.load_textures()


def test_main_needs_a_map(capsys):
    assert main([]) == 1
    assert "a map file is needed" in capsys.readouterr().err


def test_main_rejects_extra_arguments(capsys):
    assert main(["a.cub", "b.cub"]) == 1
    assert "too many arguments" in capsys.readouterr().err


def test_main_rejects_wrong_extension(tmp_path, capsys):
    path = tmp_path / "scene.txt"
    path.write_text("x")
    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error\n")
    assert "map file is not a .cub" in err


def test_main_without_player_reports_and_returns_zero(tmp_path, capsys):
    lines = []
    for side in Side:
        texture = tmp_path / f"{side.name}.xpm"
        texture.write_text("")
        lines.append(f"{side.name} {texture}")
    lines += ["F 1,2,3", "C 4,5,6", "", "111", "101", "111"]
    scene_file = tmp_path / "room.cub"
    scene_file.write_text("\n".join(lines) + "\n")
    assert main([str(scene_file)]) == 0
    assert "No player found." in capsys.readouterr().err