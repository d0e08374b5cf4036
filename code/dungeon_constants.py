"""Shared constants for the digging dungeon generator."""

from __future__ import annotations

from dungeon_geometry import Direction

RANDOM_SEED = None  # Set to a number for reproducible behavior (for debugging); set to None to produce a different dungeon on every run.

MAX_TRIES = 5  # Room-or-corridor attempts made for one doorway before it is given up.

ROOM_WIDTH_RANGE = (3, 6)
ROOM_DEPTH_RANGE = (3, 6)
CORRIDOR_LENGTH_RANGE = (2, 6)

# The first doorway sits on the bottom row and digs upward.
ENTRANCE_HEADING = Direction.NORTH

ROOM_GROWER = "room"
CORRIDOR_GROWER = "corridor"
