"""Disc and ring queries on a bounded ``width`` x ``height`` offset map."""

from __future__ import annotations

from types import ModuleType
from typing import Iterable

from .hexmath.conversions import axial_to_cube, cube_to_axial
from .hexmath.coords import Cube, Offset, Orientation
from .hexmath.neighbors import cubes_within_range, nth_nearest_cubes
from .orientation import for_orientation


def _bounded_offsets(
    module: ModuleType, cubes: Iterable[Cube[int]], width: int, height: int
) -> Iterable[Offset[int]]:
    for c in cubes:
        o = module.axial_to_offset(cube_to_axial(c))
        if 0 <= o.q < width and 0 <= o.r < height:
            yield o


def offsets_within_range(
    orientation: Orientation | str, src: Offset[int], n: int, width: int, height: int
) -> Iterable[Offset[int]]:
    """Every on-map offset at distance ``<= n`` from ``src``."""
    module = for_orientation(orientation)
    center = axial_to_cube(module.offset_to_axial(src))
    return _bounded_offsets(module, cubes_within_range(center, n), width, height)


def nth_nearest_offsets(
    orientation: Orientation | str, src: Offset[int], n: int, width: int, height: int
) -> Iterable[Offset[int]]:
    module = for_orientation(orientation)
    center = axial_to_cube(module.offset_to_axial(src))
    return _bounded_offsets(module, nth_nearest_cubes(center, n), width, height)


__all__ = ["offsets_within_range", "nth_nearest_offsets"]
