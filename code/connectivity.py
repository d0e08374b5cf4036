"""Reachability analysis of a finished grid using networkx."""

from __future__ import annotations

from typing import Set

import networkx as nx

from dungeon_geometry import Direction, Vector
from tile_grid import TileGrid


def build_walkable_graph(grid: TileGrid) -> nx.Graph:
    """Graph of Floor/Door cells with edges between orthogonal neighbours."""
    graph = nx.Graph()
    steps = (Direction.EAST.vector, Direction.SOUTH.vector)
    for pos, tile in grid.iter_tiles():
        if not tile.is_walkable:
            continue
        graph.add_node(pos)
        for step in steps:
            neighbour = pos + step
            if grid.in_bounds_or_border(neighbour) and grid[neighbour].is_walkable:
                graph.add_edge(pos, neighbour)
    return graph


def reachable_tiles(grid: TileGrid, start: Vector) -> Set[Vector]:
    graph = build_walkable_graph(grid)
    if start not in graph:
        return set()
    return set(nx.node_connected_component(graph, start))


def unreachable_tiles(grid: TileGrid, start: Vector) -> Set[Vector]:
    """Walkable cells with no Floor/Door path back to ``start``."""
    graph = build_walkable_graph(grid)
    if start not in graph:
        return set(graph.nodes)
    return set(graph.nodes) - set(nx.node_connected_component(graph, start))


def is_fully_connected(grid: TileGrid, start: Vector) -> bool:
    return not unreachable_tiles(grid, start)


def largest_component_fraction(grid: TileGrid) -> float:
    graph = build_walkable_graph(grid)
    if graph.number_of_nodes() == 0:
        return 0.0
    largest = max(len(component) for component in nx.connected_components(graph))
    return largest / graph.number_of_nodes()
