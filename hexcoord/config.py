"""Validated grid configuration.

A :class:`GridConfig` bundles the values that must stay consistent across
every conversion for one grid: the orientation, the tile size in pixels and,
optionally, the map bounds used for clipped range queries.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from types import ModuleType
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .hexmath.coords import Axial, Offset, Orientation
from .orientation import for_orientation
from .ranges import nth_nearest_offsets, offsets_within_range

logger = logging.getLogger(__name__)

Point = tuple[float, float]


class GridConfig(BaseModel):
    """Orientation, tile size and optional bounds of a hex grid."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    orientation: Orientation = Field(default=Orientation.POINTY)
    tile_width: float = Field(default=42.0, gt=0.0)
    tile_height: float = Field(default=30.0, gt=0.0)
    width: int | None = Field(default=None, ge=1)
    height: int | None = Field(default=None, ge=1)

    @field_validator("orientation", mode="before")
    @classmethod
    def _normalise_orientation(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def tile_size(self) -> Point:
        return (self.tile_width, self.tile_height)

    @property
    def module(self) -> ModuleType:
        """The orientation module used for every conversion on this grid."""

        return for_orientation(self.orientation)

    @property
    def bounded(self) -> bool:
        return self.width is not None and self.height is not None

    def point_to_axial(self, point: Point) -> Axial[int]:
        return self.module.point_to_axial(self.tile_size, point)

    def axial_to_point(self, axial: Axial[int]) -> Point:
        return self.module.axial_to_point(self.tile_size, axial)

    def point_to_offset(self, point: Point) -> Offset[int]:
        return self.module.point_to_offset(self.tile_size, point)

    def offset_to_point(self, offset: Offset[int]) -> Point:
        return self.module.offset_to_point(self.tile_size, offset)

    def contains(self, offset: Offset[int]) -> bool:
        """Whether ``offset`` lies on the map. Unbounded axes accept anything."""

        if self.width is not None and not 0 <= offset.q < self.width:
            return False
        if self.height is not None and not 0 <= offset.r < self.height:
            return False
        return True

    def offsets_within_range(self, center: Offset[int], n: int) -> Iterable[Offset[int]]:
        width, height = self._require_bounds()
        return offsets_within_range(self.orientation, center, n, width, height)

    def nth_nearest_offsets(self, center: Offset[int], n: int) -> Iterable[Offset[int]]:
        width, height = self._require_bounds()
        return nth_nearest_offsets(self.orientation, center, n, width, height)

    def _require_bounds(self) -> tuple[int, int]:
        if self.width is None or self.height is None:
            raise ValueError("bounded queries need both width and height")
        return self.width, self.height


def _read_payload(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix == ".json":
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    raise ValueError(f"Unsupported config format: {path.suffix or '<none>'}")


def load_grid_config(path: str | Path) -> GridConfig:
    """Load and validate a :class:`GridConfig` from a JSON or TOML file."""

    path = Path(path)
    config = GridConfig.model_validate(_read_payload(path))
    logger.debug(
        "Loaded grid config from %s (%s, tile %sx%s)",
        path,
        config.orientation.value,
        config.tile_width,
        config.tile_height,
    )
    return config


__all__ = ["GridConfig", "load_grid_config"]
