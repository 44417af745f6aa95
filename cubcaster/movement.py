"""Player translation with wall collisions, and rotation."""

from __future__ import annotations

import enum
import math

from cubcaster.geometry import FLOOR, Player, Vec2

PLAYER_SPEED = 4.0
ROTATION_SPEED = 2.0
MOUSE_ROT_SPEED = 0.2

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 680
# The pointer is re-centred to this column every frame.
MOUSE_CENTER_X = SCREEN_HEIGHT // 2
MOUSE_CENTER_Y = SCREEN_WIDTH // 2


class Key(enum.Enum):
    """Movement keys: forward, backward, strafe left, strafe right."""

    W = enum.auto()
    S = enum.auto()
    A = enum.auto()
    D = enum.auto()


def move_target(player: Player, key: Key, dt: float) -> Vec2:
    """Return where ``key`` would take the player after ``dt`` seconds."""
    pos, d = player.pos, player.dir
    step = PLAYER_SPEED * dt
    if key is Key.W:
        return Vec2(pos.x + d.x * step, pos.y + d.y * step)
    if key is Key.S:
        return Vec2(pos.x - d.x * step, pos.y - d.y * step)
    if key is Key.A:
        return Vec2(pos.x + d.y * step, pos.y - d.x * step)
    if key is Key.D:
        return Vec2(pos.x - d.y * step, pos.y + d.x * step)
    raise ValueError(f"not a movement key: {key!r}")


def _is_floor(grid: list[str], x: float, y: float) -> bool:
    col, row = int(x), int(y)
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return False
    return grid[row][col] == FLOOR


def update_position(player: Player, grid: list[str], key: Key, dt: float) -> Vec2:
    """Move the player for ``key``, sliding along walls, and return the new position.

    The full move is taken if it lands on floor; otherwise only the vertical
    part, and failing that only the horizontal part, when that lands on floor.
    """
    target = move_target(player, key, dt)
    pos = player.pos
    if _is_floor(grid, target.x, target.y):
        player.pos = target
    elif _is_floor(grid, pos.x, target.y):
        player.pos = Vec2(pos.x, target.y)
    elif _is_floor(grid, target.x, pos.y):
        player.pos = Vec2(target.x, pos.y)
    return player.pos


def rotate_player(player: Player, angle: float, dt: float) -> None:
    """Turn the player's direction and camera plane by ``angle * dt`` radians."""
    turn = dt * angle
    cos_a, sin_a = math.cos(turn), math.sin(turn)
    player.dir = player.dir.rotated(cos_a, sin_a)
    player.plane = player.plane.rotated(cos_a, sin_a)


def mouse_rotation_angle(mouse_x: int) -> float:
    """Return the rotation speed caused by the pointer being at column ``mouse_x``."""
    return -(mouse_x - MOUSE_CENTER_X) * MOUSE_ROT_SPEED