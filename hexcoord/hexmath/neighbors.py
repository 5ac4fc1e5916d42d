from __future__ import annotations

from typing import Iterable

from .conversions import axial_to_cube, cube_to_axial
from .coords import Axial, Cube
from .heuristics import distance

_CUBE_DIRS = (
    Cube(+1, 0, -1),
    Cube(+1, -1, 0),
    Cube(0, -1, +1),
    Cube(-1, 0, +1),
    Cube(-1, +1, 0),
    Cube(0, +1, -1),
)


def direction_vectors() -> tuple[Cube[int], ...]:
    """The six unit steps in a fixed order starting at ``(+1, 0, -1)``."""
    return _CUBE_DIRS


def cube_direction(direction: int) -> Cube[int]:
    return _CUBE_DIRS[direction % 6]


def cube_neighbor(c: Cube[int], direction: int) -> Cube[int]:
    return c + cube_direction(direction)


def neighbors_cube(c: Cube[int]) -> Iterable[Cube[int]]:
    for d in _CUBE_DIRS:
        yield c + d


def neighbors_axial(a: Axial[int]) -> Iterable[Axial[int]]:
    for n in neighbors_cube(axial_to_cube(a)):
        yield cube_to_axial(n)


def cubes_within_range(src: Cube[int], n: int) -> Iterable[Cube[int]]:
    """Every cube at distance ``<= n`` from ``src``: ``3n^2 + 3n + 1`` cells.

    Each column's ``r`` span is clipped so only in-range cells are visited.
    """
    for q in range(-n, n + 1):
        for r in range(max(-n, -q - n), min(n, -q + n) + 1):
            s = -q - r
            yield src + Cube(q, r, s)


def nth_nearest_cubes(src: Cube[int], n: int) -> Iterable[Cube[int]]:
    """The ring of cubes at exactly distance ``n``; just ``src`` when ``n == 0``."""
    for c in cubes_within_range(src, n):
        if distance(src, c) == n:
            yield c
