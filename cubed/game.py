"""The playable game: window, textures, input handling and frame rendering."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import replace
from itertools import groupby

import pygame

from cubed.controls import Keys, update
from cubed.raycast import (
    cast_ray,
    draw_end,
    draw_start,
    texture_rows,
    texture_x,
    wall_height,
)
from cubed.scene import WIN_H, WIN_W, Color, Scene, SceneError, Side, parse_scene

TEXTURE_SIZE = 32
FRAME_RATE = 60

_MIN_DISTANCE = 1e-6

_KEY_NAMES = {
    pygame.K_w: "w",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_d: "d",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_ESCAPE: "escape",
}


def _rgb(color: Color) -> tuple[int, int, int]:
    return (color.r, color.g, color.b)


class Game:
    """A running session over one parsed scene."""

    def __init__(self, scene: Scene) -> None:
        self.scene = scene
        self.player = replace(scene.player)
        self.keys = Keys()
        self.textures: dict[Side, pygame.Surface] = {}
        self.floor_color = _rgb(scene.floor)
        self.ceiling_color = _rgb(scene.ceiling)
        self.running = True

    def load_textures(self) -> None:
        """Load the four wall textures named by the scene.

        Raises SceneError when an image cannot be loaded.
        """
        loaded: dict[Side, pygame.Surface] = {}
        for side in Side:
            path = self.scene.textures[side]
            try:
                loaded[side] = pygame.image.load(path)
            except (pygame.error, OSError) as exc:
                raise SceneError("Textures must be .xpm format.") from exc
        self.textures = loaded

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Update key state from one event; return whether the game goes on."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            name = _KEY_NAMES.get(event.key)
            if name is not None:
                self.keys.press(name)
        elif event.type == pygame.KEYUP:
            name = _KEY_NAMES.get(event.key)
            if name is not None:
                self.keys.release(name)
        return self.running

    def _texel(self, side: Side, column: int, row: int) -> pygame.Color:
        texture = self.textures[side]
        width, height = texture.get_size()
        return texture.get_at((column % width, row % height))

    def render(self, surface: pygame.Surface) -> None:
        """Apply one frame of movement and draw the view onto ``surface``."""
        missing = [side.name for side in Side if side not in self.textures]
        if missing:
            raise RuntimeError(f"textures not loaded: {', '.join(missing)}")
        if not update(self.scene.grid, self.player, self.keys):
            self.running = False
        grid: Sequence[str] = self.scene.grid
        for column in range(WIN_W):
            hit = cast_ray(grid, self.player, column)
            height = wall_height(max(hit.distance, _MIN_DISTANCE))
            start, end = draw_start(height), draw_end(height)
            if start > 0:
                surface.fill(self.ceiling_color, pygame.Rect(column, 0, 1, start))
            tex_x = texture_x(self.player, hit, TEXTURE_SIZE)
            for tex_y, run in groupby(texture_rows(height, TEXTURE_SIZE),
                                      key=lambda pair: pair[1]):
                ys = [y for y, _ in run]
                surface.fill(self._texel(hit.side, tex_x, tex_y),
                             pygame.Rect(column, ys[0], 1, ys[-1] - ys[0] + 1))
            if end < WIN_H:
                surface.fill(self.floor_color,
                             pygame.Rect(column, end, 1, WIN_H - end))

    def run(self) -> int:
        """Open the window and play until the window closes or escape is hit."""
        pygame.init()
        try:
            try:
                screen = pygame.display.set_mode((WIN_W, WIN_H))
            except pygame.error:
                print("Window's init failed.")
                return 1
            pygame.display.set_caption("Cub3D")
            try:
                self.load_textures()
            except SceneError:
                print("Error\nTextures must be .xpm format.")
                return 0
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.render(screen)
                pygame.display.flip()
                clock.tick(FRAME_RATE)
            return 0
        finally:
            pygame.quit()


def _error(message: str) -> None:
    sys.stderr.write(f"Error\n{message}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 1:
        _error("a map file is needed")
        return 1
    if len(args) > 1:
        _error("too many arguments")
        return 1
    try:
        scene = parse_scene(args[0])
    except SceneError as exc:
        _error(str(exc))
        return 0 if str(exc) == "No player found." else 1
    Game(scene).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())