"""Wall textures and floor/ceiling colours read from the scene header."""

from __future__ import annotations

import enum
import os
import re
import struct
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from cubcaster.colors import Color
from cubcaster.errors import MSG_MAP_BAD, MSG_MULTIDEFINE, MSG_PNG_SIZE, CubError
from cubcaster.geometry import Direction
from cubcaster.text import BLANK_CHARS, atoi, trim

TEXTURE_WIDTH = 256
TEXTURE_HEIGHT = 256
ASSET_COUNT = 6

_COLOR_SYNTAX = re.compile(r"[0-9]{1,3},[0-9]{1,3},[0-9]{1,3}")

_TEXTURE_PREFIXES = {
    "NO ": Direction.NORTH,
    "SO ": Direction.SOUTH,
    "WE ": Direction.WEST,
    "EA ": Direction.EAST,
}


@dataclass(frozen=True)
class Texture:
    """A decoded image whose pixels are RGBA bytes read as little-endian words."""

    width: int
    height: int
    pixels: tuple[int, ...] = field(repr=False)

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match texture dimensions")

    def pixel(self, x: int, y: int) -> int:
        """Return the raw word stored at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texel ({x}, {y}) outside {self.width}x{self.height} texture")
        return self.pixels[y * self.width + x]


TextureLoader = Callable[[str], Texture]


def load_texture(path: str) -> Texture:
    """Load an image file into a :class:`Texture`.

    Raises :class:`CubError` naming the path when the image cannot be read.
    """
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    try:
        surface = pygame.image.load(path)
        width, height = surface.get_size()
        data = pygame.image.tobytes(surface, "RGBA")
    except (pygame.error, OSError) as exc:
        raise CubError(path, str(exc)) from exc
    pixels = struct.unpack(f"<{width * height}I", data)
    return Texture(width, height, pixels)


class ColorKind(enum.Enum):
    """Which surface a colour line sets."""

    CEILING = enum.auto()
    FLOOR = enum.auto()


@dataclass(frozen=True)
class Assets:
    """The four wall textures and the packed ceiling and floor colours."""

    north: Texture
    south: Texture
    east: Texture
    west: Texture
    ceiling: int
    floor: int


def parse_color_value(text: str) -> int:
    """Return the leading number of ``text`` as a colour channel (0-255)."""
    value = atoi(text)
    if not 0 <= value <= 255:
        raise CubError(MSG_MAP_BAD)
    return value


class AssetParser:
    """Collects the six header elements of a scene, each defined exactly once."""

    def __init__(self, loader: TextureLoader = load_texture) -> None:
        self._loader = loader
        self._textures: dict[Direction, Texture] = {}
        self._colors: dict[ColorKind, int] = {}

    def parse_line(self, line: str) -> bool:
        """Apply one header line; return False if it is blank.

        Raises :class:`CubError` when the line is not a known element.
        """
        stripped = trim(line, BLANK_CHARS)
        if not stripped:
            return False
        for prefix, direction in _TEXTURE_PREFIXES.items():
            if stripped.startswith(prefix):
                self.parse_texture(stripped[len(prefix):], direction)
                return True
        if stripped.startswith("F "):
            self.parse_color(stripped[2:], ColorKind.FLOOR)
        elif stripped.startswith("C "):
            self.parse_color(stripped[2:], ColorKind.CEILING)
        else:
            raise CubError(MSG_MAP_BAD)
        return True

    def parse_color(self, text: str, kind: ColorKind) -> None:
        """Parse ``R,G,B`` and set the colour of ``kind``."""
        color_text = trim(text, BLANK_CHARS)
        if not _COLOR_SYNTAX.fullmatch(color_text):
            raise CubError(MSG_MAP_BAD)
        red, green, blue = (parse_color_value(part) for part in color_text.split(","))
        if kind in self._colors:
            raise CubError(MSG_MULTIDEFINE)
        self._colors[kind] = Color(red, green, blue, 255).pack()

    def parse_texture(self, text: str, direction: Direction) -> None:
        """Load the texture at the path in ``text`` for ``direction``."""
        path = trim(text, BLANK_CHARS)
        texture = self._loader(path)
        if texture.height != TEXTURE_HEIGHT or texture.width != TEXTURE_WIDTH:
            raise CubError(MSG_PNG_SIZE)
        if direction in self._textures:
            raise CubError(MSG_MULTIDEFINE)
        self._textures[direction] = texture

    def build(self) -> Assets:
        """Return the collected assets; all six elements must be present."""
        try:
            return Assets(
                north=self._textures[Direction.NORTH],
                south=self._textures[Direction.SOUTH],
                east=self._textures[Direction.EAST],
                west=self._textures[Direction.WEST],
                ceiling=self._colors[ColorKind.CEILING],
                floor=self._colors[ColorKind.FLOOR],
            )
        except KeyError:
            raise CubError(MSG_MAP_BAD) from None


def parse_assets(lines: Iterable[str], loader: TextureLoader = load_texture) -> Assets:
    """Read header lines until six elements are set and return them.

    Only the lines needed are consumed, so the rest of an iterator is left
    for the map. Running out of lines first raises :class:`CubError`.
    """
    parser = AssetParser(loader)
    remaining = iter(lines)
    found = 0
    while found < ASSET_COUNT:
        line = next(remaining, None)
        if line is None:
            raise CubError(MSG_MAP_BAD)
        if parser.parse_line(line):
            found += 1
    return parser.build()