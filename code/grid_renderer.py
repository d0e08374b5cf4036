"""Render the dungeon grid to ASCII."""

from __future__ import annotations

from typing import Dict

from dungeon_models import Tile
from tile_grid import TileGrid

TILE_GLYPHS: Dict[Tile, str] = {
    Tile.UNKNOWN: " ",
    Tile.FLOOR: ".",
    Tile.WALL: "#",
    Tile.PERMAWALL: "#",
    Tile.DOOR: "+",
}


def render_rows(grid: TileGrid) -> list[str]:
    return ["".join(TILE_GLYPHS[tile] for tile in row) for row in grid.tiles]


def render_ascii(grid: TileGrid) -> str:
    """One line per grid row, each terminated by a newline."""
    return "".join(row + "\n" for row in render_rows(grid))


def print_grid(grid: TileGrid) -> None:
    """Prints the ASCII grid to the console."""
    for row in render_rows(grid):
        print(row)
