"""HexGraph - cell table, derived coordinates, and hex adjacency."""
from __future__ import annotations

import logging
from typing import Any, Iterator

from tick_tactics.config import GridConfig
from tick_tactics.coords import cube_distance, derive_offset, to_cube
from tick_tactics.cost import entry_cost
from tick_tactics.types import Cell, Offset, Terrain, Vec3

logger = logging.getLogger(__name__)

# (d_column, d_row) deltas adjacent from any column, then per column parity.
_ALWAYS = ((0, 1), (0, -1), (1, 0), (-1, 0))
_UNSHIFTED = ((-1, -1), (1, -1))
_SHIFTED = ((-1, 1), (1, 1))

_TERRAIN_BY_NAME = {t.value: t for t in Terrain}


class HexGraph:
    """Owns every cell and the neighbor relation between them.

    Cells live in a contiguous table addressed by integer id. Neighbor lists
    store ids and are rebuilt as a whole by ``build()`` whenever topology
    changes. Occupancy and terrain are the only state edited between
    queries, through the methods below.
    """

    def __init__(self, config: GridConfig | None = None) -> None:
        self._config = config if config is not None else GridConfig()
        self._cells: list[Cell] = []
        self._entities: dict[int, int] = {}
        self._origin: int | None = None

    # --- Properties ---

    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def origin(self) -> int | None:
        """Id of the cell coordinates were derived from, once built."""
        return self._origin

    @property
    def built(self) -> bool:
        return self._origin is not None and all(
            c.cube is not None for c in self._cells
        )

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell_id: object) -> bool:
        return isinstance(cell_id, int) and 0 <= cell_id < len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    # --- Lookup ---

    def cell(self, cell_id: int) -> Cell:
        if cell_id not in self:
            raise KeyError(f"Cell {cell_id} is not in the graph")
        return self._cells[cell_id]

    def get(self, cell_id: int) -> Cell | None:
        if cell_id not in self:
            return None
        return self._cells[cell_id]

    def cells(self) -> list[Cell]:
        return list(self._cells)

    def neighbors(self, cell_id: int) -> tuple[int, ...]:
        cell = self.get(cell_id)
        return cell.neighbors if cell is not None else ()

    def at_offset(self, column: int, row: int) -> Cell | None:
        for cell in self._cells:
            if cell.offset == Offset(column, row):
                return cell
        return None

    # --- Construction ---

    def add_cell(
        self,
        position: Vec3,
        terrain: Terrain = Terrain.OPEN,
        blocks_sight: bool = False,
    ) -> int:
        """Append a cell and return its id. Call ``build()`` once the batch is in."""
        cell_id = len(self._cells)
        self._cells.append(
            Cell(
                id=cell_id,
                position=tuple(float(v) for v in position),
                terrain=terrain,
                blocks_sight=blocks_sight,
            )
        )
        return cell_id

    def build(self, origin: int | None = None) -> None:
        """Derive coordinates relative to ``origin`` and rebuild adjacency.

        ``origin`` defaults to the previously used origin, else cell 0.
        """
        if not self._cells:
            self._origin = None
            return
        if origin is None:
            origin = self._origin if self._origin in self else 0
        origin_pos = self.cell(origin).position
        self._origin = origin
        for cell in self._cells:
            cell.offset = derive_offset(
                cell.position,
                origin_pos,
                self._config.column_spacing,
                self._config.row_spacing,
            )
            cell.cube = to_cube(cell.offset.column, cell.offset.row)
        self.rebuild_neighbors()

    def rebuild_neighbors(self) -> None:
        """Full rebuild of every neighbor list from offset coordinates."""
        by_offset: dict[Offset, list[int]] = {}
        for cell in self._cells:
            if cell.offset is not None:
                by_offset.setdefault(cell.offset, []).append(cell.id)

        for offset, ids in by_offset.items():
            if len(ids) > 1:
                logger.warning(
                    "cells %s share offset (%d, %d)", ids, offset.column, offset.row
                )

        edges = 0
        for cell in self._cells:
            if cell.offset is None:
                cell.neighbors = ()
                continue
            deltas = _ALWAYS + (_SHIFTED if cell.offset.shifted else _UNSHIFTED)
            found: list[int] = []
            for dc, dr in deltas:
                key = Offset(cell.offset.column + dc, cell.offset.row + dr)
                found.extend(i for i in by_offset.get(key, ()) if i != cell.id)
            cell.neighbors = tuple(sorted(found))
            edges += len(found)
        logger.debug(
            "rebuilt adjacency: %d cells, %d edges", len(self._cells), edges // 2
        )

    def move_cell(self, cell_id: int, position: Vec3) -> None:
        """Relocate a cell. Coordinates and adjacency are re-derived."""
        cell = self.cell(cell_id)
        cell.position = tuple(float(v) for v in position)
        if self._origin is not None:
            self.build(self._origin)

    def clear(self) -> None:
        self._cells.clear()
        self._entities.clear()
        self._origin = None

    # --- Measures ---

    def distance(self, a: int, b: int) -> int:
        """Hex distance between two built cells.

        A direct lookup: raises KeyError for unknown ids and ValueError when
        either cell has no coordinates yet. Queries skip such cells instead.
        """
        ca, cb = self.cell(a).cube, self.cell(b).cube
        if ca is None or cb is None:
            raise ValueError(f"cells {a} and {b} have no coordinates; call build()")
        return cube_distance(ca, cb)

    def entry_cost(self, cell_id: int) -> float:
        return entry_cost(self.cell(cell_id), self._config)

    # --- Cell parameters ---

    def set_terrain(self, cell_id: int, terrain: Terrain) -> None:
        self.cell(cell_id).terrain = terrain

    def set_blocks_sight(self, cell_id: int, blocks_sight: bool) -> None:
        self.cell(cell_id).blocks_sight = blocks_sight

    # --- Occupancy ---

    def occupy(self, eid: int, cell_id: int) -> None:
        """Place ``eid`` on a cell, releasing any cell it held before."""
        cell = self.cell(cell_id)
        if cell.occupant is not None and cell.occupant != eid:
            raise ValueError(
                f"Cell {cell_id} is already occupied by entity {cell.occupant}"
            )
        self.release(eid)
        cell.occupant = eid
        self._entities[eid] = cell_id

    def free(self, cell_id: int) -> None:
        cell = self.cell(cell_id)
        if cell.occupant is not None:
            self._entities.pop(cell.occupant, None)
            cell.occupant = None

    def release(self, eid: int) -> None:
        cell_id = self._entities.pop(eid, None)
        if cell_id is not None:
            self._cells[cell_id].occupant = None

    def occupant_of(self, cell_id: int) -> int | None:
        return self.cell(cell_id).occupant

    def cell_of(self, eid: int) -> int | None:
        return self._entities.get(eid)

    def alter(self, eid: int, cell_id: int) -> None:
        """Mark ``eid`` as an entity altering the cell (an aura or hazard)."""
        self.cell(cell_id).altering.add(eid)

    def unalter(self, eid: int, cell_id: int) -> None:
        self.cell(cell_id).altering.discard(eid)

    # --- Snapshot / Restore ---

    def snapshot(self) -> dict[str, Any]:
        """Serialize the graph to a JSON-safe dict.

        Derived coordinates and adjacency are not stored; ``restore`` rebuilds
        them from positions and the origin.
        """
        return {
            "origin": self._origin,
            "cells": [
                {
                    "id": c.id,
                    "position": list(c.position),
                    "terrain": c.terrain.value,
                    "blocks_sight": c.blocks_sight,
                    "occupant": c.occupant,
                    "altering": sorted(c.altering),
                }
                for c in self._cells
            ],
        }

    def restore(self, data: dict[str, Any]) -> None:
        """Replace all state with snapshot data.

        Raises KeyError for unknown terrain names and ValueError when cell
        ids are not contiguous from 0. The graph is left untouched when the
        snapshot is rejected.
        """
        records = sorted(data.get("cells", []), key=lambda r: r["id"])
        for index, record in enumerate(records):
            if record["id"] != index:
                raise ValueError(
                    f"snapshot cell ids must be contiguous, got {record['id']}"
                )
            name = record.get("terrain", Terrain.OPEN.value)
            if name not in _TERRAIN_BY_NAME:
                raise KeyError(f"Unknown terrain: '{name}'")

        staged = HexGraph(self._config)
        for record in records:
            cell_id = staged.add_cell(
                tuple(record["position"]),
                terrain=_TERRAIN_BY_NAME[record.get("terrain", Terrain.OPEN.value)],
                blocks_sight=bool(record.get("blocks_sight", False)),
            )
            for eid in record.get("altering", []):
                staged.alter(eid, cell_id)
            if record.get("occupant") is not None:
                staged.occupy(record["occupant"], cell_id)

        if staged._cells:
            origin = data.get("origin")
            if origin is not None and origin not in staged:
                logger.warning("snapshot origin %s is not a cell, using 0", origin)
                origin = None
            staged.build(origin)

        self._cells = staged._cells
        self._entities = staged._entities
        self._origin = staged._origin
