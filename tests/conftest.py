import sys
from pathlib import Path
from typing import Callable, Iterable, List

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
CODE_DIR = ROOT_DIR / "code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

from dungeon_config import DungeonConfig
from grower_context import GrowerContext


class ScriptedRandomSource:
    """Replays a fixed list of draws, checking each lies inside the requested range."""

    def __init__(self, draws: Iterable[int]) -> None:
        self.draws: List[int] = list(draws)
        self.calls: List[tuple[int, int]] = []

    def rand_range(self, minimum: int, maximum: int) -> int:
        self.calls.append((minimum, maximum))
        if not self.draws:
            raise AssertionError(f"Ran out of scripted draws (asked for [{minimum}, {maximum}])")
        value = self.draws.pop(0)
        assert minimum <= value <= maximum, f"Scripted draw {value} outside [{minimum}, {maximum}]"
        return value


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandomSource]:
    def _scripted(*draws: int) -> ScriptedRandomSource:
        return ScriptedRandomSource(draws)

    return _scripted


@pytest.fixture
def make_context() -> Callable[..., GrowerContext]:
    def _make_context(
        *draws: int,
        width: int = 20,
        height: int = 20,
        **config_kwargs,
    ) -> GrowerContext:
        config = DungeonConfig(width=width, height=height, **config_kwargs)
        return GrowerContext.create(config, ScriptedRandomSource(draws))

    return _make_context
