"""Offset (odd-q) and cube coordinate derivation for hex cells."""
from __future__ import annotations

from tick_tactics.types import Cube, Offset, Vec3


def derive_offset(
    position: Vec3,
    origin: Vec3,
    column_spacing: float,
    row_spacing: float,
) -> Offset:
    """Convert a world position into (column, row) relative to ``origin``.

    Columns are measured along X and rows along Z. Odd columns are shifted
    by half a row, so that half is removed before rounding the row.
    Rounding is half-to-even.
    """
    column = round((position[0] - origin[0]) / column_spacing)
    dz = position[2] - origin[2]
    if column % 2 != 0:
        dz -= row_spacing / 2
    row = round(dz / row_spacing)
    return Offset(column, row)


def to_cube(column: int, row: int) -> Cube:
    # column & 1 is the parity for negative columns too: -1 is odd.
    x = column
    z = row - (column - (column & 1)) // 2
    return Cube(x, -x - z, z)


def cube_distance(a: Cube, b: Cube) -> int:
    return (abs(a.x - b.x) + abs(a.y - b.y) + abs(a.z - b.z)) // 2


def offset_position(
    offset: Offset,
    column_spacing: float,
    row_spacing: float,
    origin: Vec3 = (0.0, 0.0, 0.0),
) -> Vec3:
    """Inverse of derive_offset: the world position of a (column, row)."""
    z = offset.row * row_spacing
    if offset.shifted:
        z += row_spacing / 2
    return (
        origin[0] + offset.column * column_spacing,
        origin[1],
        origin[2] + z,
    )
