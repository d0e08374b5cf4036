import pytest

from dungeon_geometry import Vector
from dungeon_models import CorridorPlan, DoorwayCandidate, Tile
from growers import build_corridor_grower
from growers.corridor_grower import CorridorGeometryPlanner

NORTH = Vector(0, -1)
ENTRANCE = Vector(10, 19)


def _snapshot(grid):
    return [list(row) for row in grid.tiles]


def test_corridor_truncates_at_existing_floor(make_context):
    context = make_context(6)
    grid = context.grid
    grid.carve_floor(Vector(10, 15))

    assert build_corridor_grower().grow(context, ENTRANCE, NORTH) is True

    assert context.corridors == [CorridorPlan(ENTRANCE, NORTH, 3, True)]
    assert grid[Vector(10, 18)] is Tile.FLOOR
    assert grid[Vector(10, 17)] is Tile.FLOOR
    # The last dug tile becomes the door into the existing floor.
    assert grid[Vector(10, 16)] is Tile.DOOR
    # The would-be fourth tile is left alone.
    assert grid[Vector(10, 15)] is Tile.FLOOR
    for y in (16, 17, 18):
        assert grid[Vector(9, y)] is Tile.WALL
        assert grid[Vector(11, y)] is Tile.WALL
    assert grid.count(Tile.WALL) == 6
    assert grid[ENTRANCE] is Tile.UNKNOWN
    assert len(context.worklist) == 0


def test_corridor_connects_to_existing_door(make_context):
    context = make_context(5)
    context.grid.carve_door(Vector(10, 16))

    assert build_corridor_grower().grow(context, ENTRANCE, NORTH) is True
    assert context.grid[Vector(10, 17)] is Tile.DOOR
    assert context.grid[Vector(10, 16)] is Tile.DOOR


def test_corridor_leaving_interior_does_not_fit(make_context):
    context = make_context(6)
    before = _snapshot(context.grid)

    assert build_corridor_grower().grow(context, Vector(10, 3), NORTH) is False
    assert _snapshot(context.grid) == before
    assert context.corridors == []


def test_dead_end_corridor_is_pruned(make_context):
    context = make_context(3)
    before = _snapshot(context.grid)

    assert build_corridor_grower().grow(context, ENTRANCE, NORTH) is False
    assert _snapshot(context.grid) == before


def test_unpruned_dead_end_is_sealed_and_queued(make_context):
    context = make_context(3, prune_dead_ends=False)
    grid = context.grid

    assert build_corridor_grower().grow(context, ENTRANCE, NORTH) is True

    assert context.corridors == [CorridorPlan(ENTRANCE, NORTH, 3, False)]
    assert [grid[Vector(10, y)] for y in (18, 17, 16)] == [Tile.FLOOR] * 3
    assert grid[Vector(10, 15)] is Tile.WALL
    assert list(context.worklist) == [DoorwayCandidate(Vector(10, 15), NORTH, False)]


def test_unpruned_corridor_reaching_interior_edge_ends_in_door(make_context):
    context = make_context(4, prune_dead_ends=False)
    grid = context.grid

    assert build_corridor_grower().grow(context, Vector(10, 5), NORTH) is True

    assert context.corridors == [CorridorPlan(Vector(10, 5), NORTH, 4, False)]
    assert [grid[Vector(10, y)] for y in (4, 3, 2)] == [Tile.FLOOR] * 3
    assert grid[Vector(10, 1)] is Tile.DOOR
    assert grid[Vector(10, 0)] is Tile.UNKNOWN
    assert len(context.worklist) == 0


def test_unpruned_dead_end_against_permawall_keeps_it(make_context):
    context = make_context(3, prune_dead_ends=False)
    grid = context.grid
    grid.mark_permawall(Vector(10, 15))

    assert build_corridor_grower().grow(context, ENTRANCE, NORTH) is True

    assert grid[Vector(10, 16)] is Tile.FLOOR
    assert grid[Vector(10, 15)] is Tile.PERMAWALL
    assert list(context.worklist) == [DoorwayCandidate(Vector(10, 15), NORTH, False)]


@pytest.mark.parametrize("floor_y", [18, 17])
def test_corridor_of_length_one_or_less_is_rejected(make_context, floor_y):
    context = make_context(6)
    context.grid.carve_floor(Vector(10, floor_y))
    before = _snapshot(context.grid)

    assert build_corridor_grower().grow(context, ENTRANCE, NORTH) is False
    assert _snapshot(context.grid) == before


def test_corridor_alongside_floor_does_not_fit(make_context):
    context = make_context(6)
    grid = context.grid
    grid.carve_floor(Vector(11, 17))
    grid.carve_floor(Vector(10, 14))
    before = _snapshot(grid)

    assert build_corridor_grower().grow(context, ENTRANCE, NORTH) is False
    assert _snapshot(grid) == before


def test_corridor_through_permawall_does_not_fit(make_context):
    context = make_context(6)
    grid = context.grid
    grid.mark_permawall(Vector(10, 17))
    grid.carve_floor(Vector(10, 14))

    assert CorridorGeometryPlanner().plan(context, ENTRANCE, NORTH) is None


def test_permawall_flank_is_preserved(make_context):
    context = make_context(6)
    grid = context.grid
    grid.mark_permawall(Vector(9, 17))
    grid.carve_floor(Vector(10, 15))

    assert build_corridor_grower().grow(context, ENTRANCE, NORTH) is True
    assert grid[Vector(9, 17)] is Tile.PERMAWALL
    assert grid[Vector(9, 18)] is Tile.WALL
    assert grid[Vector(9, 16)] is Tile.WALL


def test_corridor_plan_geometry():
    plan = CorridorPlan(ENTRANCE, NORTH, 2, True)

    assert list(plan.tiles()) == [Vector(10, 18), Vector(10, 17)]
    assert list(plan.flanks()) == [
        (Vector(9, 18), Vector(11, 18)),
        (Vector(9, 17), Vector(11, 17)),
    ]
    assert plan.end == Vector(10, 17)
    assert plan.beyond_end == Vector(10, 16)
