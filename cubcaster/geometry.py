"""Constants and angle/distance helpers used by the ray caster."""

from __future__ import annotations

import math

TILE = 64
WIDTH = 1920
HEIGHT = 1080
PI = 3.14159265359
P2 = 1.57079632679
P3 = 4.71238898038
DR = 0.0174533
SPEED = 5

TWO_PI = 2 * PI


def calculate_distance(ax: float, ay: float, bx: float, by: float) -> float:
    """Return the Euclidean distance between two points."""
    return math.sqrt((bx - ax) * (bx - ax) + (by - ay) * (by - ay))


def normalize_angle(angle: float) -> float:
    """Bring an angle less than one turn out of range back into ``[0, 2*PI]``."""
    if angle < 0:
        angle += TWO_PI
    if angle > TWO_PI:
        angle -= TWO_PI
    return angle


def fix_fisheye(player_angle: float, ray_angle: float, dist: float) -> float:
    """Project a ray length onto the viewing direction."""
    return dist * math.cos(normalize_angle(player_angle - ray_angle))