from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T", int, float)


@dataclass(frozen=True, slots=True)
class Cube(Generic[T]):
    """Three-axis hex address. Valid values satisfy ``q + r + s == 0``.

    The invariant is not enforced here: fractional cubes produced while
    mapping pixels, and sums of invalid cubes, still need to be representable.
    """

    q: T
    r: T
    s: T

    @property
    def is_valid(self) -> bool:
        return self.q + self.r + self.s == 0

    def __add__(self, other: Cube[T]) -> Cube[T]:
        return Cube(self.q + other.q, self.r + other.r, self.s + other.s)

    def __sub__(self, other: Cube[T]) -> Cube[T]:
        return Cube(self.q - other.q, self.r - other.r, self.s - other.s)


@dataclass(frozen=True, slots=True)
class Axial(Generic[T]):
    q: T
    r: T

    @property
    def s(self) -> T:
        return -self.q - self.r


@dataclass(frozen=True, slots=True)
class Offset(Generic[T]):
    q: T  # column
    r: T  # row


class Orientation(Enum):
    POINTY = "pointy"
    FLAT = "flat"
