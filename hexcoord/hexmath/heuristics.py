from __future__ import annotations

from .conversions import axial_to_cube
from .coords import Axial, Cube


def distance(a: Cube[int], b: Cube[int]) -> int:
    """Minimum number of single steps between two cubes.

    ``dq + dr + ds`` is always zero for valid cubes, so the sum of absolute
    deltas is even and the halving is exact.
    """
    diff = a - b
    return (abs(diff.q) + abs(diff.r) + abs(diff.s)) // 2


def hex_distance_axial(a: Axial[int], b: Axial[int]) -> int:
    return distance(axial_to_cube(a), axial_to_cube(b))
