#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from connectivity import unreachable_tiles
from dungeon_config import DungeonConfig
from dungeon_generator import DungeonGenerator
from grid_renderer import print_grid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Dig a random connected dungeon and print it as ASCII."
    )
    parser.add_argument("width", type=int, help="Grid width in tiles")
    parser.add_argument("height", type=int, help="Grid height in tiles")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random source; a random seed is chosen and printed when omitted",
    )
    parser.add_argument(
        "--keep-dead-ends",
        action="store_true",
        help="Keep corridors that don't run into existing floor, sealing their far end",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=None,
        help="Stop after resolving this many doorways (default: dig until none remain)",
    )
    parser.add_argument("--metrics", action="store_true", help="Print generation metrics")
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check every floor and door tile is reachable from the entrance",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each resolved doorway")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = DungeonConfig(
            width=args.width,
            height=args.height,
            prune_dead_ends=not args.keep_dead_ends,
            random_seed=args.seed,
            collect_metrics=args.metrics,
            max_iterations=args.max_iterations,
        )
    except ValueError as exc:
        parser.error(str(exc))

    seed = config.random_seed
    if seed is None:
        # Pick a random seed randomly and print it, so we can reproduce a dungeon by passing --seed.
        seed = random.randint(0, 1000000)
        config.random_seed = seed
    print(f"Using random seed {seed}")

    generator = DungeonGenerator(config)
    grid = generator.generate()
    print_grid(grid)

    if generator.truncated:
        print(f"Stopped early after {generator.iterations} doorways.")

    if generator.metrics is not None:
        snapshot = generator.metrics.snapshot()
        print(
            f"Rooms: {len(generator.context.placed_rooms)}, corridors: {len(generator.context.corridors)},"
            f" doorways resolved: {snapshot['candidates_resolved']}"
            f" ({snapshot['doors_stamped']} doors, {snapshot['candidates_failed']} abandoned,"
            f" {snapshot['seals_reopened']} reopened), peak worklist: {snapshot['peak_worklist_size']}"
        )
        for name, grower in snapshot["growers"].items():
            print(
                f"  {name}: {grower['successes']}/{grower['attempts']} attempts succeeded,"
                f" {grower['seconds'] * 1000:.1f}ms total"
            )

    if args.verify:
        missing = unreachable_tiles(grid, generator.entrance)
        if missing:
            print(f"Unreachable tiles: {len(missing)}")
            return 1
        print("All floor and door tiles are reachable from the entrance.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
