"""Configuration container for the digging dungeon generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from dungeon_constants import (
    CORRIDOR_LENGTH_RANGE,
    MAX_TRIES,
    RANDOM_SEED,
    ROOM_DEPTH_RANGE,
    ROOM_WIDTH_RANGE,
)


def _validate_range(name: str, value: Tuple[int, int]) -> Tuple[int, int]:
    try:
        minimum, maximum = (int(bound) for bound in value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"DungeonConfig {name} must be a (min, max) pair") from exc
    if minimum <= 0:
        raise ValueError(f"DungeonConfig {name} minimum must be positive")
    if maximum < minimum:
        raise ValueError(f"DungeonConfig {name} maximum must be >= minimum")
    return minimum, maximum


@dataclass
class DungeonConfig:
    """Aggregates all tunable parameters for dungeon generation."""

    width: int
    height: int

    # Room-or-corridor attempts per doorway before the doorway is abandoned.
    max_tries: int = MAX_TRIES
    # Inclusive ranges for the random room interior and corridor length draws.
    room_width_range: Tuple[int, int] = ROOM_WIDTH_RANGE
    room_depth_range: Tuple[int, int] = ROOM_DEPTH_RANGE
    corridor_length_range: Tuple[int, int] = CORRIDOR_LENGTH_RANGE
    # Reject corridors that don't run into existing floor. When off, dead ends are sealed and queued.
    prune_dead_ends: bool = True
    random_seed: Optional[int] = RANDOM_SEED
    collect_metrics: bool = False
    # Stop resolving doorways after this many; None digs until the worklist is empty.
    max_iterations: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("DungeonConfig width and height must be positive")
        if self.max_tries <= 0:
            raise ValueError("DungeonConfig max_tries must be positive")
        if self.max_iterations is not None and self.max_iterations < 0:
            raise ValueError("DungeonConfig max_iterations must be non-negative or None")

        self.room_width_range = _validate_range("room_width_range", self.room_width_range)
        self.room_depth_range = _validate_range("room_depth_range", self.room_depth_range)
        self.corridor_length_range = _validate_range(
            "corridor_length_range", self.corridor_length_range
        )

    @property
    def cell_count(self) -> int:
        return self.width * self.height
