"""3D point helpers operating on Vec3 tuples."""
from __future__ import annotations

import math

from tick_tactics.types import Vec3


def lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    return (
        a[0] + (b[0] - a[0]) * t,
        a[1] + (b[1] - a[1]) * t,
        a[2] + (b[2] - a[2]) * t,
    )


def distance_sq(a: Vec3, b: Vec3) -> float:
    return sum((ai - bi) * (ai - bi) for ai, bi in zip(a, b, strict=True))


def distance(a: Vec3, b: Vec3) -> float:
    return math.sqrt(distance_sq(a, b))
