from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from dungeon_constants import ROOM_GROWER
from dungeon_geometry import Vector
from dungeon_models import RoomPlan

from growers.base import DungeonGrower, GeometryPlanner, GrowerApplier

if TYPE_CHECKING:
    from grower_context import GrowerContext


class RoomGeometryPlanner(GeometryPlanner[RoomPlan]):
    """Draws a random room size and entrance offset and checks the footprint is free."""

    def plan(self, context: GrowerContext, entrance: Vector, heading: Vector) -> Optional[RoomPlan]:
        config = context.config
        width = context.rand_range(*config.room_width_range)
        depth = context.rand_range(*config.room_depth_range)
        entrance_offset = context.rand_range(1, width)
        plan = RoomPlan(entrance, heading, width, depth, entrance_offset)

        grid = context.grid
        if not grid.in_bounds_or_border(entrance) or grid.is_permawall(entrance):
            return None
        # The room may touch existing structure only through its entrance.
        for pos in plan.footprint():
            if not grid.in_bounds_or_border(pos):
                return None
            if not grid.is_wall(pos) and pos != entrance:
                return None
        if any(grid.is_permawall(pos) for pos in plan.interior()):
            return None
        return plan


class RoomApplier(GrowerApplier[RoomPlan]):
    def apply(self, context: GrowerContext, plan: RoomPlan) -> None:
        grid = context.grid
        for pos in plan.footprint():
            if pos == plan.entrance or grid.is_permawall(pos):
                continue
            grid.fill_wall(pos)
        for pos in plan.corners():
            grid.mark_permawall(pos)
        for pos in plan.interior():
            grid.carve_floor(pos)
        grid.carve_door(plan.entrance)
        context.placed_rooms.append(plan)

        heading = plan.heading
        context.emit_candidate(
            plan.left_wall_cell(context.rand_range(1, plan.depth)), heading.left()
        )
        context.emit_candidate(
            plan.opposite_wall_cell(context.rand_range(1, plan.width)), heading
        )
        context.emit_candidate(
            plan.right_wall_cell(context.rand_range(1, plan.depth)), heading.right()
        )


def build_room_grower() -> DungeonGrower[RoomPlan]:
    return DungeonGrower(
        name=ROOM_GROWER,
        geometry_planner=RoomGeometryPlanner(),
        applier=RoomApplier(),
    )
