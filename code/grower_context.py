"""Context object providing shared state and helper utilities for dungeon grower implementations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from dungeon_config import DungeonConfig
from dungeon_geometry import Vector
from dungeon_models import CorridorPlan, DoorwayCandidate, RoomPlan
from doorway_worklist import DoorwayWorklist
from random_source import RandomSource
from tile_grid import TileGrid


@dataclass
class GrowerContext:
    """Encapsulates the state owned by one generation run."""

    config: DungeonConfig
    grid: TileGrid
    rng: RandomSource
    worklist: DoorwayWorklist = field(default_factory=DoorwayWorklist)
    placed_rooms: List[RoomPlan] = field(default_factory=list)
    corridors: List[CorridorPlan] = field(default_factory=list)

    @classmethod
    def create(cls, config: DungeonConfig, rng: RandomSource) -> GrowerContext:
        return cls(config=config, grid=TileGrid(config.width, config.height), rng=rng)

    def rand_range(self, minimum: int, maximum: int) -> int:
        return self.rng.rand_range(minimum, maximum)

    def emit_candidate(
        self,
        location: Vector,
        heading: Vector,
        resolves_to_door: bool = True,
    ) -> DoorwayCandidate:
        candidate = DoorwayCandidate(location, heading, resolves_to_door)
        self.worklist.add(candidate)
        return candidate

    @property
    def entrance(self) -> Vector:
        """Where the first doorway is stamped: bottom row, horizontal center."""
        return Vector(self.grid.width // 2, self.grid.height - 1)
