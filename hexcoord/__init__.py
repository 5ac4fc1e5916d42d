"""Hex grid coordinate conversions and proximity queries."""

from .config import GridConfig, load_grid_config
from .hexmath import (
    Axial,
    Cube,
    Offset,
    Orientation,
    axial_round,
    axial_to_cube,
    cube_round,
    cube_to_axial,
    cubes_within_range,
    direction_vectors,
    distance,
    nth_nearest_cubes,
)
from .orientation import flat, for_orientation, pointy
from .ranges import nth_nearest_offsets, offsets_within_range

__version__ = "0.1.0"

__all__ = [
    "Axial",
    "Cube",
    "Offset",
    "Orientation",
    "GridConfig",
    "load_grid_config",
    "axial_round",
    "axial_to_cube",
    "cube_round",
    "cube_to_axial",
    "cubes_within_range",
    "direction_vectors",
    "distance",
    "nth_nearest_cubes",
    "flat",
    "pointy",
    "for_orientation",
    "offsets_within_range",
    "nth_nearest_offsets",
    "__version__",
]
