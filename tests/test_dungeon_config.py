import pytest

from dungeon_config import DungeonConfig
from dungeon_constants import CORRIDOR_LENGTH_RANGE, MAX_TRIES, ROOM_DEPTH_RANGE, ROOM_WIDTH_RANGE


def test_defaults_match_reference_constants():
    config = DungeonConfig(width=20, height=10)

    assert config.max_tries == MAX_TRIES == 5
    assert config.room_width_range == ROOM_WIDTH_RANGE == (3, 6)
    assert config.room_depth_range == ROOM_DEPTH_RANGE == (3, 6)
    assert config.corridor_length_range == CORRIDOR_LENGTH_RANGE == (2, 6)
    assert config.prune_dead_ends is True
    assert config.max_iterations is None
    assert config.cell_count == 200


def test_ranges_are_normalized_to_int_tuples():
    config = DungeonConfig(width=20, height=10, room_width_range=[4, 8])

    assert config.room_width_range == (4, 8)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"height": -3},
        {"max_tries": 0},
        {"max_iterations": -1},
        {"room_width_range": (0, 4)},
        {"room_depth_range": (5, 4)},
        {"corridor_length_range": (2,)},
        {"corridor_length_range": "ab"},
    ],
)
def test_invalid_values_raise(kwargs):
    params = {"width": 20, "height": 10}
    params.update(kwargs)

    with pytest.raises(ValueError):
        DungeonConfig(**params)
