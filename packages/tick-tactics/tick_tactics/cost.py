"""Entry cost of a cell as a function of terrain and occupancy."""
from __future__ import annotations

import math

from tick_tactics.config import GridConfig
from tick_tactics.types import Cell, Terrain

INFINITE = math.inf


def entry_cost(cell: Cell, config: GridConfig) -> float:
    """Cost to move into ``cell``. Infinite when occupied or impassable.

    Reads the cell only; never mutates it.
    """
    if cell.occupant is not None or cell.terrain is Terrain.IMPASSABLE:
        return INFINITE
    return config.terrain_costs[cell.terrain]


def passable(cell: Cell, config: GridConfig) -> bool:
    return entry_cost(cell, config) != INFINITE
