"""Pointy-top hexes.

Rows are staggered: every odd row is shifted half a tile right (odd-r with
the y axis pointing down). The transpose of :mod:`hexcoord.orientation.flat`.
"""

from __future__ import annotations

from ..hexmath.coords import Axial, Offset
from ..hexmath.rounding import axial_round

Point = tuple[float, float]


def point_to_offset(size: Point, point: Point) -> Offset[int]:
    return axial_to_offset(point_to_axial(size, point))


def offset_to_point(size: Point, offset: Offset[int]) -> Point:
    return axial_to_point(size, offset_to_axial(offset))


def point_to_axial(size: Point, point: Point) -> Axial[int]:
    q = point[0] / size[0]
    r = point[1] / size[1]
    q = q - r / 2  # every row pushes x right by half a column
    return axial_round(Axial(q, r))


def axial_to_point(size: Point, axial: Axial[int]) -> Point:
    r = axial.r
    q = axial.q * 2 + r
    return q / 2 * size[0], r * size[1]


def axial_to_offset(axial: Axial[int]) -> Offset[int]:
    q = axial.q + (axial.r - (axial.r & 1)) // 2
    r = axial.r
    return Offset(q, r)


def offset_to_axial(offset: Offset[int]) -> Axial[int]:
    q = offset.q - (offset.r - (offset.r & 1)) // 2
    r = offset.r
    return Axial(q, r)
