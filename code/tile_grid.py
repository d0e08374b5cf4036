"""Fixed-size tile store the generator digs into."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from dungeon_geometry import Vector
from dungeon_models import Tile


class DungeonLogicError(RuntimeError):
    """Raised when a placement skips a validity check and breaks a grid invariant."""


class TileGrid:
    """``width x height`` array of tiles, all starting as ``Tile.UNKNOWN``.

    Mutators refuse transitions the digging rules never make (for example
    filling a Floor tile with Wall); hitting one means a fit check was skipped.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("TileGrid width and height must be positive")
        self.width = width
        self.height = height
        self.tiles: List[List[Tile]] = [[Tile.UNKNOWN for _ in range(width)] for _ in range(height)]

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------
    def in_bounds_interior(self, pos: Vector) -> bool:
        """True inside the grid excluding the outer border ring."""
        return 1 <= pos.x <= self.width - 2 and 1 <= pos.y <= self.height - 2

    def in_bounds_or_border(self, pos: Vector) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_border(self, pos: Vector) -> bool:
        return self.in_bounds_or_border(pos) and not self.in_bounds_interior(pos)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def __getitem__(self, pos: Vector) -> Tile:
        self._check_access(pos)
        return self.tiles[pos.y][pos.x]

    def is_wall(self, pos: Vector) -> bool:
        return self[pos].is_wall

    def is_permawall(self, pos: Vector) -> bool:
        return self[pos] is Tile.PERMAWALL

    def iter_tiles(self) -> Iterator[Tuple[Vector, Tile]]:
        for y, row in enumerate(self.tiles):
            for x, tile in enumerate(row):
                yield Vector(x, y), tile

    def count(self, tile: Tile) -> int:
        return sum(row.count(tile) for row in self.tiles)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def carve_floor(self, pos: Vector) -> None:
        self._replace(pos, Tile.FLOOR, forbidden=(Tile.FLOOR, Tile.DOOR, Tile.PERMAWALL))

    def carve_door(self, pos: Vector) -> None:
        self._replace(pos, Tile.DOOR, forbidden=(Tile.PERMAWALL,))

    def fill_wall(self, pos: Vector) -> None:
        self._replace(pos, Tile.WALL, forbidden=(Tile.FLOOR, Tile.DOOR, Tile.PERMAWALL))

    def mark_permawall(self, pos: Vector) -> None:
        self._replace(pos, Tile.PERMAWALL, forbidden=(Tile.FLOOR, Tile.DOOR))

    def _replace(self, pos: Vector, tile: Tile, forbidden: Tuple[Tile, ...]) -> None:
        current = self[pos]
        if current in forbidden:
            raise DungeonLogicError(
                f"Cannot turn {current.name} at {pos.to_tuple()} into {tile.name}"
            )
        self.tiles[pos.y][pos.x] = tile

    def _check_access(self, pos: Vector) -> None:
        if not self.in_bounds_or_border(pos):
            raise DungeonLogicError(
                f"Tile {pos.to_tuple()} is outside the {self.width}x{self.height} grid"
            )
