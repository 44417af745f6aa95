"""Vectors, compass directions, map tiles and the player's pose."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

WALL = "1"
FLOOR = "0"
VOID = " "


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vec2":
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def rotated(self, cos_a: float, sin_a: float) -> "Vec2":
        """Apply the rotation matrix [[cos, sin], [-sin, cos]] to this vector."""
        return Vec2(
            self.x * cos_a + self.y * sin_a,
            -self.x * sin_a + self.y * cos_a,
        )


class Direction(enum.Enum):
    """The four compass directions used for wall textures."""

    NORTH = enum.auto()
    SOUTH = enum.auto()
    WEST = enum.auto()
    EAST = enum.auto()


@dataclass
class Player:
    """Position, facing direction and camera plane of the player."""

    pos: Vec2 = field(default_factory=Vec2)
    dir: Vec2 = field(default_factory=Vec2)
    plane: Vec2 = field(default_factory=Vec2)

    def cell(self) -> tuple[int, int]:
        """Return the (column, row) of the map cell the player stands in."""
        return int(self.pos.x), int(self.pos.y)