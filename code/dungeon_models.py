"""Core dataclasses used by the dungeon generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

from dungeon_geometry import Vector


class Tile(Enum):
    """State of a single grid cell."""
    UNKNOWN = 0 # Never visited by any placement.
    FLOOR = 1 # Walkable.
    WALL = 2 # Rock next to something dug.
    PERMAWALL = 3 # Room corner; never dug or turned into a door.
    DOOR = 4 # Connects two regions.

    @property
    def is_wall(self) -> bool:
        """Unknown, Wall and Permawall are all "not yet floor" for fit checks."""
        return self in (Tile.UNKNOWN, Tile.WALL, Tile.PERMAWALL)

    @property
    def is_walkable(self) -> bool:
        return self in (Tile.FLOOR, Tile.DOOR)


@dataclass(frozen=True)
class DoorwayCandidate:
    """An unresolved opening waiting for something to be dug beyond it.

    ``resolves_to_door`` is False only for sealed corridor dead ends.
    """

    location: Vector
    heading: Vector
    resolves_to_door: bool = True


@dataclass(frozen=True)
class RoomPlan:
    """Validated geometry for a room entered at ``entrance`` along ``heading``.

    Local frame: rows advance along ``heading`` away from the entrance wall and
    columns advance along ``heading.right()`` starting at ``corner``::

        ########
        #......#  ^
        #......#  | depth
        #......#  v
        C####+##
         <---->
          width
    """

    entrance: Vector
    heading: Vector
    width: int
    depth: int
    entrance_offset: int

    @property
    def corner(self) -> Vector:
        return self.entrance.step(self.heading.left(), self.entrance_offset)

    @property
    def across(self) -> Vector:
        return self.heading.right()

    def local_to_world(self, column: int, row: int) -> Vector:
        return self.corner.step(self.across, column).step(self.heading, row)

    def footprint(self) -> Iterator[Vector]:
        """Every cell of the room including its one-tile wall margin."""
        for row in range(self.depth + 2):
            for column in range(self.width + 2):
                yield self.local_to_world(column, row)

    def interior(self) -> Iterator[Vector]:
        for row in range(1, self.depth + 1):
            for column in range(1, self.width + 1):
                yield self.local_to_world(column, row)

    def corners(self) -> Tuple[Vector, Vector, Vector, Vector]:
        far_column = self.width + 1
        far_row = self.depth + 1
        return (
            self.local_to_world(0, 0),
            self.local_to_world(far_column, 0),
            self.local_to_world(0, far_row),
            self.local_to_world(far_column, far_row),
        )

    def left_wall_cell(self, offset: int) -> Vector:
        return self.local_to_world(0, offset)

    def opposite_wall_cell(self, offset: int) -> Vector:
        return self.local_to_world(offset, self.depth + 1)

    def right_wall_cell(self, offset: int) -> Vector:
        return self.local_to_world(self.width + 1, offset)


@dataclass(frozen=True)
class CorridorPlan:
    """Validated geometry for a straight corridor.

    ``length`` is already truncated to stop just short of any existing floor
    the corridor runs into; ``intersects`` records whether that happened.
    """

    entrance: Vector
    heading: Vector
    length: int
    intersects: bool

    def tiles(self) -> Iterator[Vector]:
        for step in range(1, self.length + 1):
            yield self.entrance.step(self.heading, step)

    def flanks(self) -> Iterator[Tuple[Vector, Vector]]:
        left = self.heading.left()
        right = self.heading.right()
        for tile in self.tiles():
            yield tile + left, tile + right

    @property
    def end(self) -> Vector:
        return self.entrance.step(self.heading, self.length)

    @property
    def beyond_end(self) -> Vector:
        return self.entrance.step(self.heading, self.length + 1)
