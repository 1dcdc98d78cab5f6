"""Shared fixtures and import path setup for the test suite."""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


_ensure_project_root_on_path()

from phrasebreak.types import FEATURE_NAMES, Model  # noqa: E402


def make_model(**tables) -> Model:
    """Builds a model where every table not given is empty."""
    return Model(**{name: tables.get(name, {}) for name in FEATURE_NAMES})


@pytest.fixture
def toy_model() -> Model:
    # total weight 18, so the base score is -9.0
    return make_model(UW3={"は": 3}, UW4={"天": 10}, BW2={"は天": 5})


@pytest.fixture
def toy_model_path(tmp_path: Path, toy_model: Model) -> Path:
    path = tmp_path / "toy.json"
    path.write_text(json.dumps(toy_model.to_dict(), ensure_ascii=False), encoding="utf-8")
    return path
