import pytest

from hexcoord.hexmath import Axial, Cube
from hexcoord.hexmath import axial_to_cube, cube_add, cube_sub, cube_to_axial


def test_cube_invariant():
    c = Cube(1, -2, 1)
    assert c.q + c.r + c.s == 0
    assert c.is_valid
    assert not Cube(1, 1, 1).is_valid


def test_axial_cube_roundtrip():
    a = Axial(3, -2)
    c = axial_to_cube(a)
    a2 = cube_to_axial(c)
    assert a == a2


@pytest.mark.parametrize("q, r", [(0, 0), (3, -2), (-7, 4), (-5, -5), (12, 9)])
def test_axial_to_cube_is_zero_sum(q, r):
    c = axial_to_cube(Axial(q, r))
    assert c.q + c.r + c.s == 0
    assert c.s == Axial(q, r).s


def test_cube_add_and_sub_are_componentwise():
    a = Cube(1, -2, 1)
    b = Cube(-3, 1, 2)
    assert cube_add(a, b) == Cube(-2, -1, 3)
    assert cube_sub(a, b) == Cube(4, -3, -1)
    assert a + b == cube_add(a, b)
    assert cube_add(a, b).is_valid


def test_coordinates_are_hashable_values():
    assert {Cube(0, 1, -1), Cube(0, 1, -1)} == {Cube(0, 1, -1)}
    assert Axial(1, 2) == Axial(1, 2)
    with pytest.raises(AttributeError):
        Axial(1, 2).q = 5
