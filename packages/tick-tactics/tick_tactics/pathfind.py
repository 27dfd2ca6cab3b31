"""Shortest-path and bounded reachability search over a HexGraph."""
from __future__ import annotations

import heapq
import logging
import math
from typing import TYPE_CHECKING, Iterable

from tick_tactics.types import UNREACHABLE, Path

if TYPE_CHECKING:
    from tick_tactics.graph import HexGraph

logger = logging.getLogger(__name__)


def movement_path(graph: HexGraph, source: int, target: int) -> Path:
    """Cheapest path from ``source`` to ``target`` (Dijkstra).

    Each step costs the entry cost of the cell stepped into; the source's
    own cost is never paid. Equal distances are settled in cell id order.
    Returns UNREACHABLE for unknown cells or when no finite path exists.
    """
    if source not in graph or target not in graph:
        return UNREACHABLE
    if source == target:
        return Path(cells=(source,), cost=0.0)

    dist: dict[int, float] = {source: 0.0}
    prev: dict[int, int] = {}
    visited: set[int] = set()
    frontier: list[tuple[float, int]] = [(0.0, source)]

    while frontier:
        current_dist, current = heapq.heappop(frontier)
        if current in visited:
            continue
        if current == target:
            break
        visited.add(current)

        for neighbor in graph.neighbors(current):
            if neighbor in visited:
                continue
            step = graph.entry_cost(neighbor)
            if step == math.inf:
                continue
            candidate = current_dist + step
            if candidate < dist.get(neighbor, math.inf):
                dist[neighbor] = candidate
                prev[neighbor] = current
                heapq.heappush(frontier, (candidate, neighbor))

    cost = dist.get(target, math.inf)
    if cost == math.inf:
        logger.debug("no path from %d to %d", source, target)
        return UNREACHABLE

    cells = [target]
    while cells[-1] != source:
        cells.append(prev[cells[-1]])
    cells.reverse()
    logger.debug("path %d -> %d: %d cells, cost %s", source, target, len(cells), cost)
    return Path(cells=tuple(cells), cost=cost)


def accessible_cells(graph: HexGraph, source: int, budget: float) -> dict[int, float]:
    """Every cell reachable from ``source`` within ``budget``, with its cost.

    Frontier expansion: each pass relaxes the neighbors of the cells recorded
    or improved by the previous pass, so a later pass may lower a cost found
    earlier. Stops when a pass records nothing. The source is included at
    cost 0. A negative budget or unknown source yields an empty mapping.
    """
    if source not in graph or budget < 0:
        return {}

    accessible: dict[int, float] = {source: 0.0}
    frontier = [source]
    while frontier:
        next_frontier: list[int] = []
        for cell_id in frontier:
            base = accessible[cell_id]
            for neighbor in graph.neighbors(cell_id):
                candidate = base + graph.entry_cost(neighbor)
                if candidate == math.inf or candidate > budget:
                    continue
                known = accessible.get(neighbor)
                if known is None or candidate < known:
                    accessible[neighbor] = candidate
                    next_frontier.append(neighbor)
        frontier = next_frontier

    logger.debug(
        "%d cells accessible from %d within %s", len(accessible), source, budget
    )
    return accessible


def most_accessible_cell(
    graph: HexGraph, source: int, candidates: Iterable[int]
) -> tuple[int | None, float]:
    """The candidate cheapest to reach from ``source``, and its path cost.

    Candidates that cannot be entered are skipped. Ties keep the earlier
    candidate. Returns ``(None, inf)`` when nothing is reachable.
    """
    best: int | None = None
    best_cost = math.inf
    for cell_id in candidates:
        if cell_id not in graph or graph.entry_cost(cell_id) == math.inf:
            continue
        cost = movement_path(graph, source, cell_id).cost
        if cost < best_cost:
            best, best_cost = cell_id, cost
    return best, best_cost
