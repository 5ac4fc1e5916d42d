from __future__ import annotations

import math

from .conversions import axial_to_cube, cube_to_axial
from .coords import Axial, Cube


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    The builtin ``round`` rounds halves to even, which would move cells on
    exact tile boundaries.
    """
    whole = math.trunc(value)
    # value - whole is exact, so values just under a half stay put
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return whole


def cube_round(frac: Cube[float]) -> Cube[int]:
    """Snap a fractional cube to the nearest valid integer cube.

    The axis with the largest rounding error is rebuilt from the other two.
    On ties ``s`` is rebuilt first, then ``r``, then ``q``.
    """
    q = round_half_away(frac.q)
    r = round_half_away(frac.r)
    s = round_half_away(frac.s)

    q_diff = abs(q - frac.q)
    r_diff = abs(r - frac.r)
    s_diff = abs(s - frac.s)

    if q_diff > r_diff and q_diff > s_diff:
        q = -r - s
    elif r_diff > s_diff:
        r = -q - s
    else:
        s = -q - r
    return Cube(q, r, s)


def axial_round(frac: Axial[float]) -> Axial[int]:
    return cube_to_axial(cube_round(axial_to_cube(frac)))
