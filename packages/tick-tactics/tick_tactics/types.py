"""Core data types for tick-tactics."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

Vec3 = tuple[float, float, float]


class Terrain(Enum):
    """Terrain tier of a cell. Higher tiers cost more to enter."""

    OPEN = "open"
    MEDIUM = "medium"
    HARD = "hard"
    IMPASSABLE = "impassable"


@dataclass(frozen=True)
class Offset:
    """Offset (odd-q) placement of a cell: column and row."""

    column: int
    row: int

    @property
    def shifted(self) -> bool:
        """Odd columns sit half a row further along the row axis."""
        return self.column % 2 != 0


@dataclass(frozen=True)
class Cube:
    """Cube coordinates. Raises ValueError unless x + y + z == 0."""

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise ValueError(
                f"cube coordinates must sum to 0, got ({self.x}, {self.y}, {self.z})"
            )


@dataclass
class Cell:
    """A single hex tile. Owned by a HexGraph and addressed by ``id``.

    Attributes:
        id: Stable index into the owning graph's cell table.
        position: World position (x, y, z). Columns follow x, rows follow z.
        terrain: Terrain tier, read by the cost model.
        blocks_sight: Whether the cell obstructs line of sight.
        offset: Derived (column, row); None until the graph is built.
        cube: Derived cube coordinates; None until the graph is built.
        neighbors: Ids of adjacent cells, rebuilt as a whole by the graph.
        occupant: Entity id standing on the cell, if any.
        altering: Entities whose effects trigger when others enter the cell.
    """

    id: int
    position: Vec3
    terrain: Terrain = Terrain.OPEN
    blocks_sight: bool = False
    offset: Offset | None = None
    cube: Cube | None = None
    neighbors: tuple[int, ...] = ()
    occupant: int | None = None
    altering: set[int] = field(default_factory=set)

    @property
    def occupied(self) -> bool:
        return self.occupant is not None


@dataclass(frozen=True)
class Path:
    """Result of a shortest-path query.

    ``cells`` runs from source to target inclusive. An unreachable target is
    an empty sequence with infinite cost, never an exception.
    """

    cells: tuple[int, ...]
    cost: float

    @property
    def reachable(self) -> bool:
        return bool(self.cells)

    def __len__(self) -> int:
        return len(self.cells)


UNREACHABLE = Path(cells=(), cost=float("inf"))
