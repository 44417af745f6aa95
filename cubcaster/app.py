"""The game window, the per-frame update and the command-line entry point."""

from __future__ import annotations

import os
import struct
import sys
from collections.abc import Collection, Sequence

from cubcaster.colors import Image
from cubcaster.errors import MSG_ARG_EXTENSION, MSG_ARGS, MSG_WINDOW_INIT, CubError
from cubcaster.loader import Scene, load_cub
from cubcaster.minimap import draw_minimap
from cubcaster.movement import (
    MOUSE_CENTER_X,
    MOUSE_CENTER_Y,
    ROTATION_SPEED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Key,
    mouse_rotation_angle,
    rotate_player,
    update_position,
)
from cubcaster.raycast import render

WINDOW_TITLE = "cubcaster"
EXIT_SUCCESS = 0

# Controls other than the movement keys that a frame can receive.
ROTATE_LEFT = "left"
ROTATE_RIGHT = "right"
ESCAPE = "escape"

_MOVEMENT_ORDER = (Key.W, Key.S, Key.A, Key.D)


def check_args(argv: Sequence[str]) -> str:
    """Return the scene path from the command-line arguments.

    Exactly one argument is accepted, and it must name a ``.cub`` file
    (at least one character before the extension).
    """
    if len(argv) != 1:
        raise CubError(MSG_ARGS)
    path = argv[0]
    if len(path) < 5 or not path.endswith(".cub"):
        raise CubError(MSG_ARG_EXTENSION)
    return path


class Game:
    """A loaded scene together with the frame it is drawn into."""

    def __init__(self, scene: Scene, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        self.scene = scene
        self.image = Image(width, height)
        self.running = True

    def tick(self, keys: Collection[object], mouse_x: int, dt: float) -> bool:
        """Advance one frame and redraw it; return whether the game goes on.

        ``keys`` holds the movement :class:`Key` members and the controls
        ``ROTATE_LEFT``, ``ROTATE_RIGHT`` and ``ESCAPE`` that are held down.
        ``mouse_x`` is the pointer column before it is re-centred and ``dt``
        the seconds elapsed since the previous frame.
        """
        scene = self.scene
        player = scene.player
        if ESCAPE in keys:
            self.running = False
        for key in _MOVEMENT_ORDER:
            if key in keys:
                update_position(player, scene.grid, key, dt)
        if ROTATE_LEFT in keys:
            rotate_player(player, ROTATION_SPEED, dt)
        if ROTATE_RIGHT in keys:
            rotate_player(player, -ROTATION_SPEED, dt)
        rotate_player(player, mouse_rotation_angle(mouse_x), dt)
        render(self.image, player, scene.grid, scene.assets)
        draw_minimap(self.image, scene.grid, player)
        return self.running

    def _frame_bytes(self) -> bytes:
        return struct.pack(f">{len(self.image.pixels)}I", *self.image.pixels)

    def run(self) -> None:
        """Open the window and play until it is closed or Escape is pressed."""
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        import pygame

        try:
            pygame.init()
            screen = pygame.display.set_mode((self.image.width, self.image.height))
        except pygame.error as exc:
            pygame.quit()
            raise CubError(MSG_WINDOW_INIT, str(exc)) from exc
        try:
            pygame.display.set_caption(WINDOW_TITLE)
            pygame.mouse.set_visible(False)
            pygame.mouse.set_pos((MOUSE_CENTER_X, MOUSE_CENTER_Y))
            clock = pygame.time.Clock()
            bindings = {
                pygame.K_w: Key.W,
                pygame.K_s: Key.S,
                pygame.K_a: Key.A,
                pygame.K_d: Key.D,
                pygame.K_LEFT: ROTATE_LEFT,
                pygame.K_RIGHT: ROTATE_RIGHT,
                pygame.K_ESCAPE: ESCAPE,
            }
            while self.running:
                dt = clock.tick() / 1000.0
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                if not self.running:
                    break
                pressed = pygame.key.get_pressed()
                keys = {action for code, action in bindings.items() if pressed[code]}
                mouse_x = pygame.mouse.get_pos()[0]
                self.tick(keys, mouse_x, dt)
                pygame.mouse.set_pos((MOUSE_CENTER_X, MOUSE_CENTER_Y))
                surface = pygame.image.frombuffer(
                    self._frame_bytes(), (self.image.width, self.image.height), "RGBA"
                )
                screen.blit(surface, (0, 0))
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the scene named on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_args(args)
        scene = load_cub(path)
        Game(scene).run()
    except CubError as exc:
        return exc.report()
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())