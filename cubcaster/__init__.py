"""A small first-person raycasting engine that plays .cub scene files."""

__version__ = "0.1.0"
__all__ = ["__version__"]