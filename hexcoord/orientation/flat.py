"""Flat-top hexes.

Columns are staggered: every odd column sits half a tile lower than its
neighbours (odd-q with the y axis pointing down). ``size`` is the pixel
``(width, height)`` spacing between tile centres; offset ``(0, 0)`` is
centred on the pixel origin.
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
    r = r - q / 2  # every column pushes y down by half a row
    return axial_round(Axial(q, r))


def axial_to_point(size: Point, axial: Axial[int]) -> Point:
    q = axial.q
    r = axial.r * 2 + q
    return q * size[0], r / 2 * size[1]


def axial_to_offset(axial: Axial[int]) -> Offset[int]:
    q = axial.q
    r = axial.r + (axial.q - (axial.q & 1)) // 2
    return Offset(q, r)


def offset_to_axial(offset: Offset[int]) -> Axial[int]:
    q = offset.q
    r = offset.r - (offset.q - (offset.q & 1)) // 2
    return Axial(q, r)
