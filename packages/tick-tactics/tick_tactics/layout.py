"""Rectangular odd-q grid generation."""
from __future__ import annotations

from typing import Iterable

from tick_tactics.config import GridConfig
from tick_tactics.coords import offset_position
from tick_tactics.graph import HexGraph
from tick_tactics.types import Offset, Terrain, Vec3


def rectangle(width: int, height: int, config: GridConfig | None = None) -> list[Vec3]:
    """World positions of a width x height grid in row-major order.

    Adding them to a graph in order gives ``id == row * width + column``,
    and building from id 0 recovers the same (column, row).
    """
    if width < 0 or height < 0:
        raise ValueError(f"grid size must be non-negative, got {width}x{height}")
    cfg = config if config is not None else GridConfig()
    return [
        offset_position(Offset(column, row), cfg.column_spacing, cfg.row_spacing)
        for row in range(height)
        for column in range(width)
    ]


def hex_graph(
    width: int,
    height: int,
    config: GridConfig | None = None,
    terrain: dict[tuple[int, int], Terrain] | None = None,
    blockers: Iterable[tuple[int, int]] = (),
) -> HexGraph:
    """Build a ready-to-query rectangular graph.

    ``terrain`` and ``blockers`` are keyed by (column, row).
    """
    graph = HexGraph(config)
    terrain = terrain or {}
    blocking = set(blockers)
    for index, position in enumerate(rectangle(width, height, graph.config)):
        key = (index % width, index // width)
        graph.add_cell(
            position,
            terrain=terrain.get(key, Terrain.OPEN),
            blocks_sight=key in blocking,
        )
    graph.build()
    return graph
