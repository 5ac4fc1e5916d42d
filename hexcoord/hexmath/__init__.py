from .coords import Axial, Cube, Offset, Orientation
from .conversions import axial_to_cube, cube_to_axial, cube_add, cube_sub
from .heuristics import distance, hex_distance_axial
from .neighbors import (
    direction_vectors,
    cube_direction,
    cube_neighbor,
    neighbors_cube,
    neighbors_axial,
    cubes_within_range,
    nth_nearest_cubes,
)
from .rounding import axial_round, cube_round, round_half_away

__all__ = [
    "Axial",
    "Cube",
    "Offset",
    "Orientation",
    "axial_to_cube",
    "cube_to_axial",
    "cube_add",
    "cube_sub",
    "distance",
    "hex_distance_axial",
    "direction_vectors",
    "cube_direction",
    "cube_neighbor",
    "neighbors_cube",
    "neighbors_axial",
    "cubes_within_range",
    "nth_nearest_cubes",
    "axial_round",
    "cube_round",
    "round_half_away",
]
