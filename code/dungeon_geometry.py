"""Geometry helpers for heading-relative digging on the tile grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True, order=True)
class Vector:
    """Integer pair used both as a tile coordinate and as a displacement.

    Headings are unit vectors; ``left`` and ``right`` rotate them by 90 degrees
    in screen coordinates (y grows downward), so ``(0, -1).left()`` is ``(-1, 0)``.
    """

    x: int
    y: int

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def left(self) -> Vector:
        return Vector(self.y, -self.x)

    def right(self) -> Vector:
        return Vector(-self.y, self.x)

    def step(self, heading: Vector, count: int = 1) -> Vector:
        """Return the point ``count`` steps away along ``heading``."""
        return Vector(self.x + heading.x * count, self.y + heading.y * count)

    def to_tuple(self) -> Tuple[int, int]:
        return self.x, self.y


class Direction(Enum):
    """Cardinal headings with unit vectors on the tile grid."""

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def vector(self) -> Vector:
        return Vector(*self.value)
