"""Parsing of the map section of a scene and the closed-map check."""

from __future__ import annotations

from collections.abc import Iterable

from cubcaster.errors import (
    MSG_AFTER_MAP,
    MSG_MAP_BAD,
    MSG_MAP_CHAR,
    MSG_MULTIPLAYER,
    MSG_NO_PLAYER,
    CubError,
)
from cubcaster.geometry import FLOOR, WALL, Player, Vec2

MAP_CHARS = " 10NSWE"
PLAYER_CHARS = "NSWE"

_HEADINGS = {
    "N": (Vec2(0.0, -1.0), Vec2(0.66, 0.0)),
    "S": (Vec2(0.0, 1.0), Vec2(-0.66, 0.0)),
    "E": (Vec2(1.0, 0.0), Vec2(0.0, 0.66)),
    "W": (Vec2(-1.0, 0.0), Vec2(0.0, -0.66)),
}

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1), (-1, -1), (-1, 1), (1, -1), (1, 1))


def spawn_player(x: int, y: int, heading: str) -> Player:
    """Return a player centred in cell (x, y) facing ``heading`` (N, S, E or W)."""
    try:
        direction, plane = _HEADINGS[heading]
    except KeyError:
        raise ValueError(f"unknown heading {heading!r}") from None
    return Player(pos=Vec2(x + 0.5, y + 0.5), dir=direction, plane=plane)


def _check_tile(grid: list[list[str]], x: int, y: int) -> None:
    if x < 0 or y < 0 or y >= len(grid) or x >= len(grid[y]):
        raise CubError(MSG_MAP_BAD)
    if grid[y][x] == FLOOR and (
        y == 0 or y == len(grid) - 1 or x == 0 or x == len(grid[y]) - 1
    ):
        raise CubError(MSG_MAP_BAD)


def map_check_closed(grid: list[str], pos: Vec2) -> None:
    """Raise :class:`CubError` unless the area reachable from ``pos`` is walled in.

    The fill spreads in eight directions through every non-wall cell; reaching
    a cell outside the rows, or a floor on the edge of the map, is an error.
    The grid itself is left untouched.
    """
    cells = [list(row) for row in grid]
    stack = [(int(pos.x), int(pos.y))]
    while stack:
        x, y = stack.pop()
        _check_tile(cells, x, y)
        if cells[y][x] == WALL:
            continue
        cells[y][x] = WALL
        stack.extend((x + dx, y + dy) for dx, dy in reversed(_NEIGHBOURS))


def parse_map(lines: Iterable[str]) -> tuple[list[str], Player]:
    """Parse the map lines of a scene and return the grid and the player.

    Leading blank lines are skipped; a blank line after the map has started is
    an error. The player's start letter is replaced by a floor tile, and the
    finished map must be closed around the player.
    """
    grid: list[str] = []
    player: Player | None = None
    for line in lines:
        row = line.strip("\n")
        if not row:
            if grid:
                raise CubError(MSG_AFTER_MAP)
            continue
        cells = []
        for x, char in enumerate(row):
            if char not in MAP_CHARS:
                raise CubError(MSG_MAP_CHAR)
            if char in PLAYER_CHARS:
                if player is not None:
                    raise CubError(MSG_MULTIPLAYER)
                player = spawn_player(x, len(grid), char)
                char = FLOOR
            cells.append(char)
        grid.append("".join(cells))
    if player is None:
        raise CubError(MSG_NO_PLAYER)
    map_check_closed(grid, player.pos)
    return grid, player