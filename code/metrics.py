"""Counters gathered while digging, enabled with ``DungeonConfig.collect_metrics``."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict


@dataclass
class GrowerMetrics:
    """Tally of one grower's attempts at placing geometry."""

    name: str
    attempts: int = 0
    successes: int = 0
    seconds: float = 0.0
    rooms_added: int = 0
    corridors_added: int = 0

    @property
    def success_rate(self) -> float:
        return self.successes / self.attempts if self.attempts else 0.0

    def record(self, seconds: float, success: bool, rooms_added: int, corridors_added: int) -> None:
        self.attempts += 1
        self.successes += int(success)
        self.seconds += seconds
        self.rooms_added += rooms_added
        self.corridors_added += corridors_added

    def to_dict(self) -> Dict[str, float | int]:
        data = asdict(self)
        del data["name"]
        data["success_rate"] = self.success_rate
        return data


@dataclass
class GenerationMetrics:
    """Per-grower tallies plus counts of how each popped doorway was resolved."""

    growers: Dict[str, GrowerMetrics] = field(default_factory=dict)
    candidates_resolved: int = 0
    candidates_failed: int = 0
    doors_stamped: int = 0
    seals_reopened: int = 0
    peak_worklist_size: int = 0
    iterations: int = 0

    def record_grower_run(
        self,
        name: str,
        seconds: float,
        success: bool,
        rooms_added: int,
        corridors_added: int,
    ) -> None:
        self.growers.setdefault(name, GrowerMetrics(name)).record(seconds, success, rooms_added, corridors_added)

    def snapshot(self) -> Dict[str, object]:
        data = asdict(self)
        data["growers"] = {name: grower.to_dict() for name, grower in self.growers.items()}
        return data
