from __future__ import annotations

import inspect
import re
from pathlib import Path

import pytest

from hexcoord.orientation import flat, pointy

ROOT = Path(__file__).resolve().parents[1]

CONVERSIONS = (
    "point_to_axial",
    "axial_to_point",
    "axial_to_offset",
    "offset_to_axial",
    "point_to_offset",
    "offset_to_point",
)

OPTIONAL_PATTERNS = (
    re.compile(r"\bOptional\["),
    re.compile(r"\bUnion\[[^\]]*\bNone\b"),
)


def _public_functions(module) -> dict[str, inspect.Signature]:
    return {
        name: inspect.signature(obj)
        for name, obj in vars(module).items()
        if inspect.isfunction(obj) and obj.__module__ == module.__name__ and not name.startswith("_")
    }


def test_orientations_share_one_contract() -> None:
    flat_api = _public_functions(flat)
    pointy_api = _public_functions(pointy)
    assert set(flat_api) == set(CONVERSIONS)
    assert set(pointy_api) == set(CONVERSIONS)
    for name in CONVERSIONS:
        assert str(flat_api[name]) == str(pointy_api[name]), name


@pytest.mark.parametrize("module", [flat, pointy])
def test_orientation_signatures_use_pep604(module) -> None:
    for name, sig in _public_functions(module).items():
        for pattern in OPTIONAL_PATTERNS:
            assert not pattern.search(str(sig)), f"{module.__name__}.{name}{sig}"


def test_package_sources_use_pep604() -> None:
    offending: dict[str, list[str]] = {}
    for path in (ROOT / "hexcoord").rglob("*.py"):
        text = path.read_text(encoding="utf-8")
        matches = [p.pattern for p in OPTIONAL_PATTERNS if p.search(text)]
        if matches:
            offending[str(path.relative_to(ROOT))] = matches
    assert not offending, f"PEP 604 violations detected: {offending}"
