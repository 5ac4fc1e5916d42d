from __future__ import annotations

from types import ModuleType

from ..hexmath.coords import Orientation
from . import flat, pointy

_MODULES = {
    Orientation.FLAT: flat,
    Orientation.POINTY: pointy,
}


def for_orientation(orientation: Orientation | str) -> ModuleType:
    """Return the conversion module (``flat`` or ``pointy``) for ``orientation``."""
    if isinstance(orientation, str):
        try:
            orientation = Orientation(orientation.lower())
        except ValueError:
            raise ValueError("Unknown orientation") from None
    try:
        return _MODULES[orientation]
    except KeyError:
        raise ValueError("Unknown orientation") from None


__all__ = ["flat", "pointy", "for_orientation"]
