#!/usr/bin/env python3

# Digs many dungeons with reproducible seeds and reports how long each took and
# how much of the map it opened up, so changes to the growers can be compared.

from __future__ import annotations

import argparse
from dataclasses import asdict, dataclass, field
import json
import math
import random
import statistics
import time
from typing import Any, Callable, Dict, List, Optional

from connectivity import largest_component_fraction, unreachable_tiles
from dungeon_config import DungeonConfig
from dungeon_generator import DungeonGenerator
from dungeon_models import Tile

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 50
DEFAULT_FLOOR_COVERAGE_THRESHOLD = 0.25

# Deciles reported alongside the basic summary.
REPORTED_DECILES = (1, 5, 9)


@dataclass
class GenerationRunResult:
    seed: int
    duration: float
    rooms: int
    corridors: int
    iterations: int
    floor_coverage: float
    largest_component_fraction: float
    unreachable_count: int
    grower_metrics: Dict[str, Dict[str, float | int]] = field(default_factory=dict)


@dataclass
class SeriesReport:
    """One measured quantity across every run, plus how to print it."""

    key: str
    label: str
    values: List[float]
    render: Callable[[float], str] = lambda value: f"{value:.3f}"
    pass_at: float | None = None

    def summary(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"count": len(self.values)}
        if not self.values:
            return data
        data["mean"] = statistics.fmean(self.values)
        data["min"] = min(self.values)
        data["max"] = max(self.values)
        data["stdev"] = statistics.stdev(self.values) if len(self.values) > 1 else None
        for decile in REPORTED_DECILES:
            data[f"p{decile * 10}"] = decile_of(self.values, decile)
        if self.pass_at is not None:
            data["pass_rate"] = sum(value >= self.pass_at for value in self.values) / len(self.values)
        return data

    def lines(self) -> List[str]:
        summary = self.summary()
        if summary["count"] == 0:
            return [f"{self.label}: no runs"]
        parts = [f"{name} {self.render(summary[name])}" for name in ("mean", "min", "max")]
        parts += [f"p{decile * 10} {self.render(summary[f'p{decile * 10}'])}" for decile in REPORTED_DECILES]
        lines = [f"{self.label}: " + ", ".join(parts)]
        if "pass_rate" in summary:
            lines.append(f"  {summary['pass_rate']:.0%} of runs reached {self.render(self.pass_at)}")
        return lines


def decile_of(values: List[float], decile: int) -> float:
    """Return the ``decile``-th tenth of ``values`` (1..9), interpolating between samples."""
    if len(values) == 1:
        return float(values[0])
    return statistics.quantiles(values, n=10, method="inclusive")[decile - 1]


def run_single_generation(seed: int, width: int, height: int, prune_dead_ends: bool = True) -> GenerationRunResult:
    """Dig one dungeon for ``seed`` and measure it."""
    config = DungeonConfig(
        width=width,
        height=height,
        prune_dead_ends=prune_dead_ends,
        random_seed=seed,
        collect_metrics=True,
    )
    generator = DungeonGenerator(config)

    started = time.perf_counter()
    grid = generator.generate()
    duration = time.perf_counter() - started

    dug = grid.count(Tile.FLOOR) + grid.count(Tile.DOOR)
    return GenerationRunResult(
        seed=seed,
        duration=duration,
        rooms=len(generator.context.placed_rooms),
        corridors=len(generator.context.corridors),
        iterations=generator.iterations,
        floor_coverage=dug / config.cell_count,
        largest_component_fraction=largest_component_fraction(grid),
        unreachable_count=len(unreachable_tiles(grid, generator.entrance)),
        grower_metrics=generator.metrics.snapshot()["growers"],
    )


def run_benchmark(
    num_runs: int,
    seed: int | None,
    width: int,
    height: int,
    prune_dead_ends: bool = True,
) -> List[GenerationRunResult]:
    seeds = random.Random(seed)
    return [
        run_single_generation(seeds.randint(0, 1_000_000), width, height, prune_dead_ends)
        for _ in range(num_runs)
    ]


def format_seconds(value: float) -> str:
    return f"{value:.3f}s" if value >= 1.0 else f"{value * 1000:.1f}ms"


def _json_number(value: Any) -> Any:
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    return value


def build_reports(results: List[GenerationRunResult], coverage_threshold: float) -> List[SeriesReport]:
    def whole(value: float) -> str:
        return f"{value:.0f}"

    def percent(value: float) -> str:
        return f"{value:.1%}"

    return [
        SeriesReport("generation_time", "Generation time", [r.duration for r in results], format_seconds),
        SeriesReport("rooms", "Rooms placed", [float(r.rooms) for r in results], whole),
        SeriesReport("corridors", "Corridors placed", [float(r.corridors) for r in results], whole),
        SeriesReport("iterations", "Doorways resolved", [float(r.iterations) for r in results], whole),
        SeriesReport(
            "floor_coverage",
            "Floor coverage",
            [r.floor_coverage for r in results],
            percent,
            pass_at=coverage_threshold,
        ),
        SeriesReport(
            "largest_component_fraction",
            "Largest component",
            [r.largest_component_fraction for r in results],
            percent,
            pass_at=1.0,
        ),
    ]


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Time repeated dungeon digs and summarize the layouts they produce.")
    parser.add_argument("-n", "--runs", type=int, default=20, help="How many dungeons to dig (default: 20)")
    parser.add_argument("--seed", type=int, default=None, help="Seed used to pick each run's seed")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--keep-dead-ends", action="store_true", help="Dig with dead-end pruning turned off")
    parser.add_argument(
        "--floor-coverage-threshold",
        type=float,
        default=DEFAULT_FLOOR_COVERAGE_THRESHOLD,
        help="Fraction of the map a run must dig out to count as a pass",
    )
    parser.add_argument("--json", dest="json_path", default=None, help="Also write the results to this JSON file")
    args = parser.parse_args(argv)

    if args.runs <= 0:
        parser.error("--runs must be a positive integer")
    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive integers")
    if not 0.0 <= args.floor_coverage_threshold <= 1.0:
        parser.error("--floor-coverage-threshold must be within [0, 1]")

    prune = not args.keep_dead_ends
    results = run_benchmark(args.runs, args.seed, args.width, args.height, prune)

    for index, result in enumerate(results, start=1):
        print(
            f"Run {index:02d} seed {result.seed}: {format_seconds(result.duration)},"
            f" {result.rooms} rooms, {result.corridors} corridors,"
            f" {result.floor_coverage:.1%} dug, {result.unreachable_count} unreachable"
        )

    slowest = max(results, key=lambda result: result.duration)
    print()
    print(f"{args.runs} runs on a {args.width}x{args.height} grid, slowest {format_seconds(slowest.duration)} (seed {slowest.seed})")
    reports = build_reports(results, args.floor_coverage_threshold)
    for report in reports:
        for line in report.lines():
            print(line)

    if args.json_path:
        payload = {
            "parameters": {
                "runs": args.runs,
                "seed": args.seed,
                "width": args.width,
                "height": args.height,
                "prune_dead_ends": prune,
            },
            "aggregated_results": {
                report.key: {name: _json_number(value) for name, value in report.summary().items()}
                for report in reports
            },
            "results": [asdict(result) for result in results],
        }
        with open(args.json_path, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, sort_keys=True)
            handle.write("\n")
        print(f"Saved benchmark results to {args.json_path}")


if __name__ == "__main__":
    main()
