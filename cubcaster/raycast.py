"""Ray casting through the map grid and drawing of textured wall columns."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cubcaster.assets import TEXTURE_HEIGHT, TEXTURE_WIDTH, Assets, Texture
from cubcaster.colors import Image, color_tweak
from cubcaster.geometry import WALL, Player, Vec2

# Stand-in for an infinite distance when a ray runs parallel to an axis.
FAR = 1e30
# Upper bound for a wall slice's height when the wall is (almost) touched.
_MAX_LINE_HEIGHT = 2**31 - 1


@dataclass
class Ray:
    """State of one ray walking the grid, and the wall slice it produced."""

    raydir: Vec2
    map_x: int
    map_y: int
    step_x: int
    step_y: int
    side_dist_x: float
    side_dist_y: float
    delta_x: float
    delta_y: float
    side: int = 0
    wall_dist: float = 0.0
    line_height: int = 0
    line_start: int = 0
    line_end: int = 0


@dataclass(frozen=True)
class TextureSampling:
    """Where a wall slice reads its texture: column, start row and row step."""

    wall_x: float
    step: float
    tex_x: int
    tex_pos: float


def init_ray(player: Player, cam: float) -> Ray:
    """Return a ray leaving the player at camera offset ``cam`` (-1 to 1)."""
    raydir = Vec2(
        player.dir.x + player.plane.x * cam,
        player.dir.y + player.plane.y * cam,
    )
    map_x, map_y = player.cell()
    delta_x = FAR if raydir.x == 0.0 else abs(1 / raydir.x)
    delta_y = FAR if raydir.y == 0.0 else abs(1 / raydir.y)
    step_x = -1 if raydir.x < 0.0 else 1
    step_y = -1 if raydir.y < 0.0 else 1
    if raydir.x < 0.0:
        side_dist_x = (player.pos.x - map_x) * delta_x
    else:
        side_dist_x = (map_x + 1.0 - player.pos.x) * delta_x
    if raydir.y < 0.0:
        side_dist_y = (player.pos.y - map_y) * delta_y
    else:
        side_dist_y = (map_y + 1.0 - player.pos.y) * delta_y
    return Ray(
        raydir=raydir,
        map_x=map_x,
        map_y=map_y,
        step_x=step_x,
        step_y=step_y,
        side_dist_x=side_dist_x,
        side_dist_y=side_dist_y,
        delta_x=delta_x,
        delta_y=delta_y,
    )


def cast(ray: Ray, grid: list[str]) -> Ray:
    """Step the ray cell by cell until it enters a wall; set side and distance.

    ``side`` is 0 when an x-facing wall face was crossed and 1 for a y-facing
    one; ``wall_dist`` is the distance perpendicular to the camera plane.
    Raises :class:`ValueError` if the ray leaves the grid.
    """
    while True:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_dist_y += ray.delta_y
            ray.map_y += ray.step_y
            ray.side = 1
        if not (0 <= ray.map_y < len(grid) and 0 <= ray.map_x < len(grid[ray.map_y])):
            raise ValueError("ray left the map without hitting a wall")
        if grid[ray.map_y][ray.map_x] == WALL:
            break
    if ray.side == 0:
        ray.wall_dist = ray.side_dist_x - ray.delta_x
    else:
        ray.wall_dist = ray.side_dist_y - ray.delta_y
    return ray


def wall_slice(ray: Ray, height: int) -> Ray:
    """Compute the height and the clipped vertical span of the wall slice."""
    if ray.wall_dist <= 0:
        line_height = _MAX_LINE_HEIGHT
    else:
        line_height = min(int(height / ray.wall_dist), _MAX_LINE_HEIGHT)
    half_screen = height // 2
    ray.line_height = line_height
    ray.line_start = max(-(line_height // 2) + half_screen, 0)
    ray.line_end = min(line_height // 2 + half_screen, height - 1)
    return ray


def texture_sampling(ray: Ray, player: Player, image_height: int) -> TextureSampling:
    """Return the texture column and row stepping for the ray's wall slice."""
    if ray.side == 0:
        wall_x = player.pos.y + ray.wall_dist * ray.raydir.y
    else:
        wall_x = player.pos.x + ray.wall_dist * ray.raydir.x
    wall_x -= math.floor(wall_x)

    height = ray.line_height
    step = TEXTURE_HEIGHT / height if height else math.inf
    offset = ray.line_start - image_height / 2.0 + height / 2.0
    tex_pos = offset * step if offset else 0.0

    tex_x = int(wall_x * TEXTURE_WIDTH)
    if ray.side == 1 and ray.raydir.y > 0:
        tex_x = TEXTURE_WIDTH - tex_x - 1
    if ray.side == 0 and ray.raydir.x < 0:
        tex_x = TEXTURE_WIDTH - tex_x - 1
    return TextureSampling(wall_x=wall_x, step=step, tex_x=tex_x, tex_pos=tex_pos)


def pick_texture(ray: Ray, assets: Assets) -> Texture:
    """Return the wall texture for the face the ray hit."""
    if ray.side == 1:
        return assets.north if ray.step_y > 0 else assets.south
    if ray.side == 0:
        return assets.east if ray.step_x < 0 else assets.west
    raise ValueError(f"invalid ray side: {ray.side}")


def draw_column(image: Image, x: int, ray: Ray, player: Player, assets: Assets) -> None:
    """Draw ceiling, textured wall and floor into column ``x`` of ``image``."""
    if ray.line_start >= image.height or ray.line_end < 0:
        return
    for y in range(ray.line_start):
        image.put_pixel(x, y, assets.ceiling)

    sampling = texture_sampling(ray, player, image.height)
    texture = pick_texture(ray, assets)
    tex_pos = sampling.tex_pos
    for y in range(ray.line_start, ray.line_end):
        tex_y = int(tex_pos) & (TEXTURE_HEIGHT - 1)
        tex_pos += sampling.step
        image.put_pixel(x, y, color_tweak(texture.pixel(sampling.tex_x, tex_y)))

    for y in range(ray.line_end, image.height):
        image.put_pixel(x, y, assets.floor)


def render(image: Image, player: Player, grid: list[str], assets: Assets) -> None:
    """Cast one ray per image column and draw the whole 3D view."""
    for x in range(image.width):
        cam = 2.0 * x / image.width - 1.0
        ray = init_ray(player, cam)
        cast(ray, grid)
        wall_slice(ray, image.height)
        draw_column(image, x, ray, player, assets)