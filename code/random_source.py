"""Random number source consumed by the generator."""

from __future__ import annotations

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything that can draw a uniform integer from an inclusive range."""

    def rand_range(self, minimum: int, maximum: int) -> int:
        ...


class SeededRandomSource:
    """``RandomSource`` backed by a private ``random.Random`` instance."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def rand_range(self, minimum: int, maximum: int) -> int:
        if maximum < minimum:
            raise ValueError(f"Empty range [{minimum}, {maximum}]")
        return self._rng.randint(minimum, maximum)
