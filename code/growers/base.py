from __future__ import annotations

from typing import Generic, Optional, TypeVar

from typing import TYPE_CHECKING

from dungeon_geometry import Vector

if TYPE_CHECKING:
    from grower_context import GrowerContext


P = TypeVar("P")


class GeometryPlanner(Generic[P]):
    """Validate a placement without touching the grid and compute its geometry.

    Returning ``None`` means the placement doesn't fit; that's an ordinary outcome.
    """

    def plan(self, context: GrowerContext, entrance: Vector, heading: Vector) -> Optional[P]:
        raise NotImplementedError


class GrowerApplier(Generic[P]):
    """Commit a planned geometry change to the grid."""

    def apply(self, context: GrowerContext, plan: P) -> None:
        raise NotImplementedError


class DungeonGrower(Generic[P]):
    """Coordinates planner and applier for one kind of placement."""

    def __init__(
        self,
        name: str,
        geometry_planner: GeometryPlanner[P],
        applier: GrowerApplier[P],
    ) -> None:
        self.name = name
        self.geometry_planner = geometry_planner
        self.applier = applier

    def grow(self, context: GrowerContext, entrance: Vector, heading: Vector) -> bool:
        """Try one placement at ``entrance``; mutate the grid only when it fits."""
        plan = self.geometry_planner.plan(context, entrance, heading)
        if plan is None:
            return False
        self.applier.apply(context, plan)
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
