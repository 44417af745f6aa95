"""RGBA colours and a simple pixel buffer."""

from __future__ import annotations

from dataclasses import dataclass, field

_MASK32 = 0xFFFFFFFF


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour component {name}={value} out of range 0..255")

    def pack(self) -> int:
        """Return the colour as a 32-bit 0xRRGGBBAA value."""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    @classmethod
    def unpack(cls, rgba: int) -> "Color":
        """Build a colour from a 32-bit 0xRRGGBBAA value."""
        rgba &= _MASK32
        return cls((rgba >> 24) & 0xFF, (rgba >> 16) & 0xFF, (rgba >> 8) & 0xFF, rgba & 0xFF)


@dataclass
class Image:
    """A width x height grid of 32-bit RGBA pixels, initially all zero."""

    width: int
    height: int
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        self.pixels = [0] * (self.width * self.height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (taken as 32 bits) at column ``x``, row ``y``."""
        self.pixels[self._index(x, y)] = color & _MASK32

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 32-bit colour at column ``x``, row ``y``."""
        return self.pixels[self._index(x, y)]


def color_tweak(color: int) -> int:
    """Turn a texel read as a little-endian word into a 0xRRGGBBAA colour.

    The red, green and blue bytes are moved into place and alpha is forced
    to fully opaque.
    """
    r = color & 0xFF
    g = (color >> 8) & 0xFF
    b = (color >> 16) & 0xFF
    return (r << 24) | (g << 16) | (b << 8) | 0xFF