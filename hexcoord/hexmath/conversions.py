from __future__ import annotations

from .coords import Axial, Cube, T


def axial_to_cube(a: Axial[T]) -> Cube[T]:
    q = a.q
    r = a.r
    s = -q - r
    return Cube(q, r, s)


def cube_to_axial(c: Cube[T]) -> Axial[T]:
    return Axial(c.q, c.r)


def cube_add(a: Cube[T], b: Cube[T]) -> Cube[T]:
    return a + b


def cube_sub(a: Cube[T], b: Cube[T]) -> Cube[T]:
    return a - b
