"""The player's position and heading, and how keys move them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .geometry import PI, SPEED, TILE

Grid = Sequence[str]

ROTATION_STEP = 0.1
_MARGIN = TILE // 3
_SPAWN_ANGLES = {"E": 0.0, "S": 0.5 * PI, "W": PI, "N": 1.5 * PI}
# (row offset, column offset) pairs, expressed with the signed margins yo and xo.
_PROBES = (
    ("0", "xo"), ("yo", "0"), ("-yo", "-xo"), ("0", "-xo"),
    ("-yo", "0"), ("-xo", "yo"), ("0", "yo"), ("-xo", "0"),
    ("xo", "-yo"), ("0", "-yo"), ("xo", "0"),
)


def _blocked(grid: Grid, x: float, y: float) -> bool:
    row, column = int(y / TILE), int(x / TILE)
    if row < 0 or column < 0 or row >= len(grid) or column >= len(grid[row]):
        return True
    return grid[row][column] == "1"


def _offset(name: str, xo: int, yo: int) -> int:
    sign = -1 if name.startswith("-") else 1
    base = name.lstrip("-")
    return sign * {"0": 0, "xo": xo, "yo": yo}[base]


@dataclass
class PlayerState:
    """Position in world units, heading angle and the step vector for it."""

    x: float
    y: float
    angle: float = 0.0
    dx: float = float(SPEED)
    dy: float = 0.0

    @classmethod
    def from_spawn(cls, x: float, y: float, direction: str) -> "PlayerState":
        """Create a player facing one of N, S, E or W."""
        try:
            angle = _SPAWN_ANGLES[direction]
        except KeyError:
            raise ValueError(f"unknown spawn direction {direction!r}") from None
        return cls(x, y, angle, math.cos(angle) * SPEED, math.sin(angle) * SPEED)

    def _clear_around(self, grid: Grid, x: float, y: float, xo: int, yo: int) -> bool:
        ix, iy = int(x), int(y)
        return all(
            not _blocked(grid, ix + _offset(col, xo, yo), iy + _offset(row, xo, yo))
            for row, col in _PROBES
        )

    def move(self, grid: Grid, direction: str) -> bool:
        """Step forward (U), back (D), left (L) or right (R).

        The step is taken only when no wall lies within a third of a tile
        around the new position; returns whether the player moved.
        """
        if direction == "U":
            x, y = self.x + self.dx, self.y + self.dy
        elif direction == "D":
            x, y = self.x - self.dx, self.y - self.dy
        elif direction == "L":
            x, y = self.x + self.dy, self.y - self.dx
        elif direction == "R":
            x, y = self.x - self.dy, self.y + self.dx
        else:
            raise ValueError(f"unknown move direction {direction!r}")
        xo = -_MARGIN if self.dx < 0 else _MARGIN
        yo = -_MARGIN if self.dy < 0 else _MARGIN
        if not _blocked(grid, x + xo, y + yo) and self._clear_around(grid, x, y, xo, yo):
            self.x, self.y = x, y
            return True
        return False

    def rotate(self, direction: str) -> None:
        """Turn left (L) or right (R) by a fixed step."""
        if direction == "L":
            self.angle -= ROTATION_STEP
            if self.angle < 0:
                self.angle += 2 * PI
        elif direction == "R":
            self.angle += ROTATION_STEP
            if self.angle > 2 * PI:
                self.angle -= 2 * PI
        else:
            raise ValueError(f"unknown rotation direction {direction!r}")
        self.dx = math.cos(self.angle) * SPEED
        self.dy = math.sin(self.angle) * SPEED