"""tick-tactics - Hex grid movement and targeting for turn-based entities."""
from __future__ import annotations

from tick_tactics.config import GridConfig
from tick_tactics.coords import cube_distance, derive_offset, offset_position, to_cube
from tick_tactics.cost import INFINITE, entry_cost
from tick_tactics.events import EventQueue
from tick_tactics.graph import HexGraph
from tick_tactics.layout import hex_graph, rectangle
from tick_tactics.movement import MovementSession, plan_waypoints, warp
from tick_tactics.pathfind import accessible_cells, most_accessible_cell, movement_path
from tick_tactics.targeting import attackable_cells, cells_in_range, nearest_cell
from tick_tactics.types import UNREACHABLE, Cell, Cube, Offset, Path, Terrain, Vec3
from tick_tactics.visibility import is_visible

__all__ = [
    "Cell",
    "Cube",
    "EventQueue",
    "GridConfig",
    "HexGraph",
    "INFINITE",
    "MovementSession",
    "Offset",
    "Path",
    "Terrain",
    "UNREACHABLE",
    "Vec3",
    "accessible_cells",
    "attackable_cells",
    "cells_in_range",
    "cube_distance",
    "derive_offset",
    "entry_cost",
    "hex_graph",
    "is_visible",
    "most_accessible_cell",
    "movement_path",
    "nearest_cell",
    "offset_position",
    "plan_waypoints",
    "rectangle",
    "to_cube",
    "warp",
]
