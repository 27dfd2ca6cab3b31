"""Range and targeting queries."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_tactics.coords import cube_distance
from tick_tactics.types import Terrain
from tick_tactics.vec import distance
from tick_tactics.visibility import is_visible

if TYPE_CHECKING:
    from tick_tactics.graph import HexGraph
    from tick_tactics.types import Vec3


def cells_in_range(
    graph: HexGraph, source: int, min_range: int, max_range: int
) -> set[int]:
    """Cells whose hex distance from ``source`` lies in [min_range, max_range].

    Degenerate bands (min > max, negative max) and unknown sources give an
    empty set.
    """
    origin = graph.get(source)
    if origin is None or origin.cube is None:
        return set()
    if max_range < 0 or min_range > max_range:
        return set()
    return {
        cell.id
        for cell in graph
        if cell.cube is not None
        and min_range <= cube_distance(origin.cube, cell.cube) <= max_range
    }


def attackable_cells(
    graph: HexGraph, source: int, min_range: int, max_range: int
) -> set[int]:
    """Cells in range that are not impassable and are visible from ``source``."""
    return {
        cell_id
        for cell_id in cells_in_range(graph, source, min_range, max_range)
        if graph.cell(cell_id).terrain is not Terrain.IMPASSABLE
        and is_visible(graph, source, cell_id)
    }


def nearest_cell(
    graph: HexGraph, point: Vec3, passable_only: bool = True
) -> int | None:
    """Id of the cell nearest to a world point, or None on an empty graph.

    Impassable cells are skipped when ``passable_only``.
    """
    best: int | None = None
    best_distance = float("inf")
    for cell in graph:
        if passable_only and cell.terrain is Terrain.IMPASSABLE:
            continue
        d = distance(point, cell.position)
        if d < best_distance:
            best, best_distance = cell.id, d
    return best
