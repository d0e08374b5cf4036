"""Pending doorway candidates awaiting resolution."""

from __future__ import annotations

from typing import Iterator, List

from dungeon_models import DoorwayCandidate
from random_source import RandomSource


class DoorwayWorklist:
    """Unordered multiset of candidates; every pop picks one uniformly at random."""

    def __init__(self) -> None:
        self._pending: List[DoorwayCandidate] = []
        self.peak_size = 0

    def add(self, candidate: DoorwayCandidate) -> None:
        self._pending.append(candidate)
        self.peak_size = max(self.peak_size, len(self._pending))

    def pop_random(self, rng: RandomSource) -> DoorwayCandidate:
        if not self._pending:
            raise IndexError("pop from an empty doorway worklist")
        which = rng.rand_range(0, len(self._pending) - 1)
        return self._pending.pop(which)

    def __len__(self) -> int:
        return len(self._pending)

    def __bool__(self) -> bool:
        return bool(self._pending)

    def __iter__(self) -> Iterator[DoorwayCandidate]:
        return iter(list(self._pending))
