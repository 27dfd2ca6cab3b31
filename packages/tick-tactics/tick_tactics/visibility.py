"""Line-of-sight testing between hex cells.

Sight is traced by sampling points along the straight segment between the
two cell positions and resolving each point to its nearest cell. The
nearest-cell search favors sight-blocking cells: one within
``GridConfig.sight_bias`` (1.1 by default) of the best distance so far
replaces the current pick even when a non-blocking cell is strictly nearer.
This catches obstructions straddling cell boundaries and is part of the
observable behavior.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from tick_tactics.types import Vec3
from tick_tactics.vec import distance, lerp

if TYPE_CHECKING:
    from tick_tactics.graph import HexGraph
    from tick_tactics.types import Cell

logger = logging.getLogger(__name__)


def nearest_sight_cell(graph: HexGraph, point: Vec3) -> Cell | None:
    """Nearest cell to ``point`` with the sight-blocking bias applied."""
    bias = graph.config.sight_bias
    nearest: Cell | None = None
    nearest_distance = math.inf
    for cell in graph:
        d = distance(point, cell.position)
        if cell.blocks_sight and d < nearest_distance * bias:
            nearest, nearest_distance = cell, d
        elif d < nearest_distance:
            nearest, nearest_distance = cell, d
    return nearest


def sample_points(source: Vec3, target: Vec3, steps: int) -> list[Vec3]:
    """Points at fractions k/steps for 0 < k < steps along source -> target."""
    return [lerp(source, target, k / steps) for k in range(1, steps)]


def is_visible(graph: HexGraph, source: int, target: int) -> bool:
    """Whether ``target`` can be seen from ``source``.

    A sight-blocking target is never visible. Direct neighbors always see
    each other. Unknown or unbuilt cells are not visible.
    """
    src, dst = graph.get(source), graph.get(target)
    if src is None or dst is None or src.cube is None or dst.cube is None:
        return False
    if dst.blocks_sight:
        return False

    steps = graph.distance(source, target)
    if steps <= 1:
        return True

    for point in sample_points(src.position, dst.position, steps):
        nearest = nearest_sight_cell(graph, point)
        if nearest is not None and nearest.blocks_sight:
            logger.debug("sight %d -> %d blocked by %d", source, target, nearest.id)
            return False
    return True
