"""DungeonGenerator digs a connected dungeon outward from a single entrance."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import List, Optional

from dungeon_config import DungeonConfig
from dungeon_constants import ENTRANCE_HEADING
from dungeon_geometry import Direction, Vector
from dungeon_models import DoorwayCandidate, Tile
from grower_context import GrowerContext
from growers import DungeonGrower, build_corridor_grower, build_room_grower
from metrics import GenerationMetrics
from random_source import RandomSource, SeededRandomSource
from tile_grid import TileGrid

logger = logging.getLogger(__name__)


class DungeonGenerator:
    """Manages the overall process of digging a dungeon floor layout.

    Starting from a door on the bottom row, doorway candidates are drawn at
    random from a worklist; each one gets up to ``config.max_tries`` attempts
    at a room or a corridor, and every successful room queues three more.
    Digging stops when the worklist is empty.
    """

    def __init__(self, config: DungeonConfig, rng: Optional[RandomSource] = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else SeededRandomSource(config.random_seed)
        self.context = GrowerContext.create(config, self.rng)
        self.metrics = GenerationMetrics() if config.collect_metrics else None
        # Position matches the dispatcher's draw: 0 digs a room, 1 a corridor.
        self.growers: List[DungeonGrower] = [build_room_grower(), build_corridor_grower()]
        self.iterations = 0
        self.truncated = False
        self._generated = False

    @property
    def grid(self) -> TileGrid:
        return self.context.grid

    @property
    def entrance(self) -> Vector:
        return self.context.entrance

    def _run_grower(self, grower: DungeonGrower, pos: Vector, heading: Vector) -> bool:
        if self.metrics is None:
            return grower.grow(self.context, pos, heading)

        rooms_before = len(self.context.placed_rooms)
        corridors_before = len(self.context.corridors)
        start = perf_counter()
        success = False
        try:
            success = grower.grow(self.context, pos, heading)
            return success
        finally:
            duration = perf_counter() - start
            self.metrics.record_grower_run(
                grower.name,
                duration,
                success,
                len(self.context.placed_rooms) - rooms_before,
                len(self.context.corridors) - corridors_before,
            )

    def dig_random(self, pos: Vector, heading: Vector) -> bool:
        """Dig a room or a corridor at ``pos``, re-rolling the choice on every try."""
        for _ in range(self.config.max_tries):
            grower = self.growers[self.context.rand_range(0, len(self.growers) - 1)]
            if self._run_grower(grower, pos, heading):
                return True
        return False

    def seed_entrance(self) -> DoorwayCandidate:
        """Stamp the entrance door, seal its sides, and queue the first doorway."""
        grid = self.grid
        entrance = self.entrance
        grid.carve_door(entrance)
        for side in (Direction.EAST.vector, Direction.WEST.vector):
            neighbour = entrance + side
            if grid.in_bounds_or_border(neighbour):
                grid.fill_wall(neighbour)
        return self.context.emit_candidate(entrance, ENTRANCE_HEADING.vector)

    def _can_reopen(self, pos: Vector) -> bool:
        return self.grid.in_bounds_interior(pos) and self.grid[pos] in (Tile.UNKNOWN, Tile.WALL)

    def resolve_candidate(self, candidate: DoorwayCandidate) -> bool:
        """Try to dig beyond ``candidate`` and finalize its tile."""
        grid = self.grid
        location = candidate.location
        success = self.dig_random(location, candidate.heading)
        reopened = False
        if success:
            if candidate.resolves_to_door:
                grid.carve_door(location)
            elif self._can_reopen(location):
                grid.carve_floor(location)
        elif not candidate.resolves_to_door and self._can_reopen(location):
            # Open the sealed dead end back up rather than leaving an unreachable pocket.
            grid.carve_floor(location)
            reopened = True

        if self.metrics is not None:
            self.metrics.candidates_resolved += 1
            if success and candidate.resolves_to_door:
                self.metrics.doors_stamped += 1
            if not success:
                self.metrics.candidates_failed += 1
            if reopened:
                self.metrics.seals_reopened += 1
        logger.debug(
            "Resolved doorway at %s heading %s: %s",
            location.to_tuple(),
            candidate.heading.to_tuple(),
            "dug" if success else ("reopened" if reopened else "abandoned"),
        )
        return success

    def dig_loop(self) -> None:
        """Drain the doorway worklist, one randomly chosen candidate at a time."""
        self.seed_entrance()
        worklist = self.context.worklist
        limit = self.config.max_iterations
        while worklist:
            if limit is not None and self.iterations >= limit:
                self.truncated = True
                logger.warning(
                    "Stopped digging after %d doorways with %d still pending",
                    self.iterations,
                    len(worklist),
                )
                break
            candidate = worklist.pop_random(self.rng)
            self.iterations += 1
            self.resolve_candidate(candidate)

        if self.metrics is not None:
            self.metrics.peak_worklist_size = worklist.peak_size
            self.metrics.iterations = self.iterations

    def generate(self) -> TileGrid:
        """Generates the dungeon and returns the finished grid."""
        if self._generated:
            raise RuntimeError("DungeonGenerator.generate() may only be called once per generator")
        self._generated = True

        self.dig_loop()
        logger.info(
            "Dug %d rooms and %d corridors on a %dx%d grid in %d iterations",
            len(self.context.placed_rooms),
            len(self.context.corridors),
            self.grid.width,
            self.grid.height,
            self.iterations,
        )
        return self.grid


def generate_dungeon(
    width: int,
    height: int,
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
    **config_kwargs,
) -> TileGrid:
    """Convenience wrapper: configure, generate, and return the finished grid."""
    config = DungeonConfig(width=width, height=height, random_seed=seed, **config_kwargs)
    return DungeonGenerator(config, rng=rng).generate()
