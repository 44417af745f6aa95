"""Loading a whole ``.cub`` scene file from disk."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass

from cubcaster.assets import Assets, TextureLoader, load_texture, parse_assets
from cubcaster.errors import MSG_DIRECTORY, MSG_MAP_OPEN, CubError
from cubcaster.geometry import Player
from cubcaster.mapparse import parse_map


@dataclass
class Scene:
    """Everything a scene file describes: the map, the player and the assets."""

    grid: list[str]
    player: Player
    assets: Assets


def _split_lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text``, each keeping its trailing line feed.

    Only ``\\n`` ends a line; any other control character stays in the line.
    A final line without a line feed is yielded as is, if not empty.
    """
    *complete, last = text.split("\n")
    for line in complete:
        yield line + "\n"
    if last:
        yield last


def _read_scene_text(path: str) -> str:
    if os.path.isdir(path):
        raise CubError(MSG_DIRECTORY)
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise CubError.from_os_error(MSG_MAP_OPEN, exc) from exc


def load_cub(path: str | os.PathLike[str], loader: TextureLoader = load_texture) -> Scene:
    """Read and validate the scene file at ``path``.

    The header's six elements come first, then the map. Any problem with
    the file raises :class:`CubError`.
    """
    text = _read_scene_text(os.fspath(path))
    lines = _split_lines(text)
    assets = parse_assets(lines, loader)
    grid, player = parse_map(lines)
    return Scene(grid=grid, player=player, assets=assets)