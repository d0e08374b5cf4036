from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Optional

from dungeon_constants import CORRIDOR_GROWER
from dungeon_geometry import Vector
from dungeon_models import CorridorPlan

from growers.base import DungeonGrower, GeometryPlanner, GrowerApplier

if TYPE_CHECKING:
    from grower_context import GrowerContext


class CorridorGeometryPlanner(GeometryPlanner[CorridorPlan]):
    """Walks a randomly long straight corridor one step at a time.

    Running into existing floor or a door truncates the corridor there and
    counts as a fit. Leaving the interior, running alongside floor, or hitting
    a permawall is a no-fit.
    """

    def plan(self, context: GrowerContext, entrance: Vector, heading: Vector) -> Optional[CorridorPlan]:
        grid = context.grid
        length = context.rand_range(*context.config.corridor_length_range)
        if not grid.in_bounds_or_border(entrance) or grid.is_permawall(entrance):
            return None

        left = heading.left()
        right = heading.right()
        intersects = False
        pos = entrance
        for step in range(length):
            pos = pos + heading
            if not grid.in_bounds_interior(pos):
                return None
            if not grid.is_wall(pos):
                intersects = True
                length = step
                break
            if not grid.is_wall(pos + left) or not grid.is_wall(pos + right) or grid.is_permawall(pos):
                return None

        # A one-tile corridor would put two doors next to each other.
        if length <= 1:
            return None
        if not intersects and context.config.prune_dead_ends:
            return None
        return CorridorPlan(entrance, heading, length, intersects)


class CorridorApplier(GrowerApplier[CorridorPlan]):
    def apply(self, context: GrowerContext, plan: CorridorPlan) -> None:
        grid = context.grid
        carved = 0
        for tile, flanks in zip(plan.tiles(), plan.flanks()):
            grid.carve_floor(tile)
            for flank in flanks:
                if not grid.is_permawall(flank):
                    grid.fill_wall(flank)
            carved += 1
            ahead = tile + plan.heading
            if not grid.in_bounds_interior(ahead) or not grid.is_wall(ahead):
                break

        if carved != plan.length:
            plan = replace(plan, length=carved)
        context.corridors.append(plan)

        beyond = plan.beyond_end
        if not grid.in_bounds_interior(beyond) or not grid.is_wall(beyond):
            grid.carve_door(plan.end)
            return
        # Dead end: seal it; the doorway opens up if something is dug beyond later.
        if not grid.is_permawall(beyond):
            grid.fill_wall(beyond)
        context.emit_candidate(beyond, plan.heading, resolves_to_door=False)


def build_corridor_grower() -> DungeonGrower[CorridorPlan]:
    return DungeonGrower(
        name=CORRIDOR_GROWER,
        geometry_planner=CorridorGeometryPlanner(),
        applier=CorridorApplier(),
    )
