"""Casting rays through a tile grid to find the nearest wall."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from .geometry import DR, P2, P3, PI, TILE, fix_fisheye, normalize_angle

Grid = Sequence[str]

NO_HIT = 10000000.0
RAY_COUNT = 240
RAY_STEP = 0.25 * DR
HALF_FOV = 30 * DR
_EDGE_NUDGE = 0.0001
_WALL = "1"


class Side(enum.Enum):
    """Which wall texture a ray hit shows."""

    NORTH = "north"
    SOUTH = "south"
    WEST = "west"
    EAST = "east"


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall and how far away it is after fisheye correction."""

    x: float
    y: float
    distance: float
    angle: float
    horizontal: bool


def _tile_index(coordinate: float) -> int:
    # Truncate to an integer first, then divide rounding towards zero.
    return int(int(coordinate) / TILE)


def _march(
    grid: Grid,
    x: float,
    y: float,
    step_x: float,
    step_y: float,
    limit: int,
    px: float,
    py: float,
) -> tuple[float, float, float]:
    rows = len(grid)
    columns = len(grid[0]) if grid else 0
    for _ in range(limit):
        tx, ty = _tile_index(x), _tile_index(y)
        if 0 <= tx < columns and 0 <= ty < rows and grid[ty][tx] == _WALL:
            return x, y, math.hypot(x - px, y - py)
        x += step_x
        y += step_y
        if tx < 0 or tx > columns or ty < 0 or ty > rows:
            break
    return x, y, NO_HIT


def cast_vertical(
    grid: Grid, px: float, py: float, angle: float
) -> tuple[float, float, float]:
    """Follow a ray across vertical grid lines.

    Returns the last point reached and its distance, or ``NO_HIT`` as
    distance when no wall was met.
    """
    slope = -math.tan(angle)
    cell = int(int(px) / TILE) * TILE
    if P2 < angle < P3:
        x, step_x = cell - _EDGE_NUDGE, -TILE
    elif angle < P2 or angle > P3:
        x, step_x = cell + TILE, TILE
    else:
        return px, py, NO_HIT
    y = (px - x) * slope + py
    columns = len(grid[0]) if grid else 0
    return _march(grid, x, y, step_x, -step_x * slope, columns, px, py)


def cast_horizontal(
    grid: Grid, px: float, py: float, angle: float
) -> tuple[float, float, float]:
    """Follow a ray across horizontal grid lines.

    Returns the last point reached and its distance, or ``NO_HIT`` as
    distance when no wall was met.
    """
    tangent = math.tan(angle)
    if tangent == 0:
        return px, py, NO_HIT
    slope = -1 / tangent
    cell = int(int(py) / TILE) * TILE
    if angle > PI:
        y, step_y = cell - _EDGE_NUDGE, -TILE
    elif angle < PI:
        y, step_y = cell + TILE, TILE
    else:
        return px, py, NO_HIT
    x = (py - y) * slope + px
    return _march(grid, x, y, -step_y * slope, step_y, len(grid), px, py)


def cast_ray(
    grid: Grid, px: float, py: float, player_angle: float, ray_angle: float
) -> RayHit:
    """Cast one ray and keep the nearer of its vertical and horizontal hits."""
    vx, vy, v_dist = cast_vertical(grid, px, py, ray_angle)
    hx, hy, h_dist = cast_horizontal(grid, px, py, ray_angle)
    if h_dist < v_dist:
        return RayHit(hx, hy, fix_fisheye(player_angle, ray_angle, h_dist), ray_angle, True)
    return RayHit(vx, vy, fix_fisheye(player_angle, ray_angle, v_dist), ray_angle, False)


def cast_view(grid: Grid, px: float, py: float, player_angle: float) -> list[RayHit]:
    """Cast the fan of rays covering the field of view, left to right."""
    hits = []
    angle = normalize_angle(player_angle - HALF_FOV)
    for _ in range(RAY_COUNT):
        hits.append(cast_ray(grid, px, py, player_angle, angle))
        angle = normalize_angle(angle + RAY_STEP)
    return hits


def choose_side(hit: RayHit) -> Optional[Side]:
    """Return the texture side for a hit, or None when no rule applies."""
    angle = hit.angle
    side = None
    if hit.horizontal and 0 < angle < PI:
        side = Side.NORTH
    if hit.horizontal and PI < angle < 2 * PI:
        side = Side.SOUTH
    if not hit.horizontal and (angle < 0.5 * PI or angle > 1.5 * PI):
        side = Side.WEST
    if not hit.horizontal and 0.5 * PI < angle < 1.5 * PI:
        side = Side.EAST
    return side