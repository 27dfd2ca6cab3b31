"""Grid configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from tick_tactics.types import Terrain

_COST_ORDER = (Terrain.OPEN, Terrain.MEDIUM, Terrain.HARD)


def _default_costs() -> dict[Terrain, float]:
    return {Terrain.OPEN: 1.0, Terrain.MEDIUM: 2.0, Terrain.HARD: 3.0}


@dataclass(frozen=True)
class GridConfig:
    """Immutable configuration for a hex graph.

    Attributes:
        column_spacing: World-X distance between two adjacent columns.
        row_spacing: World-Z distance between two adjacent rows.
        sight_bias: Sight-blocking cells win the nearest-cell test when within
            this factor of the best distance found so far.
        terrain_costs: Entry cost per passable terrain tier. Impassable is
            always infinite and is not read from this table.
    """

    column_spacing: float = -1.55
    row_spacing: float = 1.8
    sight_bias: float = 1.1
    terrain_costs: dict[Terrain, float] = field(default_factory=_default_costs)

    def __post_init__(self) -> None:
        if self.column_spacing == 0 or self.row_spacing == 0:
            raise ValueError("column_spacing and row_spacing must be non-zero")
        if self.sight_bias < 1.0:
            raise ValueError(f"sight_bias must be >= 1.0, got {self.sight_bias}")
        previous = 0.0
        for terrain in _COST_ORDER:
            if terrain not in self.terrain_costs:
                raise ValueError(f"terrain_costs is missing {terrain.name}")
            cost = self.terrain_costs[terrain]
            if not math.isfinite(cost) or cost <= 0:
                raise ValueError(
                    f"cost for {terrain.name} must be finite and > 0, got {cost}"
                )
            if cost <= previous:
                raise ValueError(
                    f"terrain costs must increase by tier, {terrain.name}={cost}"
                )
            previous = cost
