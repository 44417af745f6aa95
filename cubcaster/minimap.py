"""A top-down overview of the map drawn in the corner of the frame."""

from __future__ import annotations

from cubcaster.colors import Image
from cubcaster.geometry import FLOOR, WALL, Player

MAP_PLAYER_COLOR = 0x00FF00FF
MAP_F_COLOR = 0x000000FF
MAP_W_COLOR = 0xFFFFFFFF
MAP_PXL_SIZE = 6


def draw_block(image: Image, x: int, y: int, color: int) -> None:
    """Fill a MAP_PXL_SIZE square whose top-left corner is (x, y).

    Rows stop at the first one outside ``0..image.width`` and columns at the
    first one outside ``0..image.height``; pixels off the image are skipped.
    """
    for row in range(y, y + MAP_PXL_SIZE):
        if not 0 <= row < image.width:
            break
        for col in range(x, x + MAP_PXL_SIZE):
            if not 0 <= col < image.height:
                break
            if col < image.width and row < image.height:
                image.put_pixel(col, row, color)


def draw_minimap(image: Image, grid: list[str], player: Player) -> None:
    """Draw walls and floors of ``grid``, then the player's marker on top."""
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == WALL:
                draw_block(image, x * MAP_PXL_SIZE, y * MAP_PXL_SIZE, MAP_W_COLOR)
            elif tile == FLOOR:
                draw_block(image, x * MAP_PXL_SIZE, y * MAP_PXL_SIZE, MAP_F_COLOR)
    half = MAP_PXL_SIZE // 2
    px = int(player.pos.x * MAP_PXL_SIZE - half)
    py = int(player.pos.y * MAP_PXL_SIZE - half)
    draw_block(image, px, py, MAP_PLAYER_COLOR)