"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import hexcoord

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def _load_pyproject() -> dict:
    with PYPROJECT.open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    poetry = pyproject["tool"]["poetry"]

    assert poetry["name"] == "hexcoord"
    assert poetry["version"] == hexcoord.__version__

    dependencies = poetry["dependencies"]
    assert "pydantic" in dependencies, "missing dependency declaration for pydantic"
    assert "pytest" in poetry["extras"]["test"]
