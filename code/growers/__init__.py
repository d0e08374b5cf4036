from .base import DungeonGrower, GeometryPlanner, GrowerApplier
from .room_grower import build_room_grower
from .corridor_grower import build_corridor_grower

__all__ = [
    "DungeonGrower",
    "GeometryPlanner",
    "GrowerApplier",
    "build_room_grower",
    "build_corridor_grower",
]
