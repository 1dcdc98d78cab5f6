"""Provides utility functions for loading and saving segmentation models.

A model is stored as a JSON document whose root object holds the 13 feature
tables (`UW1`..`UW6`, `BW1`..`BW3`, `TW1`..`TW4`), each mapping a short
n-gram key to an integer weight. The loaders in this module are the only
place where model I/O happens: every failure, whether the file cannot be
read or its content has the wrong shape, is reported as a `ModelLoadError`
so callers have a single error type to handle before any parser exists.

The default models are the ones bundled with the `budoux` distribution.
"""
from __future__ import annotations
import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from .types import FEATURE_NAMES, Model

__all__ = [
    "DEFAULT_LANGUAGES",
    "ModelLoadError",
    "load_default_model",
    "load_model",
    "model_from_dict",
    "save_model",
]

DEFAULT_LANGUAGES = ("ja", "zh-hans", "zh-hant", "th")

PathLike = Union[str, Path]


class ModelLoadError(Exception):
    """Raised when a model source cannot be read or does not look like a model."""

    def __init__(self, message: str):
        super().__init__(f"Failed to load model: {message}")
        self.reason = message


def _validate_table(name: str, table: Any) -> Dict[str, int]:
    if not isinstance(table, Mapping):
        raise ModelLoadError(f"table '{name}' must be an object, got {type(table).__name__}")
    out = {}
    for key, value in table.items():
        if not isinstance(key, str):
            raise ModelLoadError(f"table '{name}' has a non-string key {key!r}")
        # bool is a subclass of int but never a valid weight
        if isinstance(value, bool) or not isinstance(value, int):
            raise ModelLoadError(
                f"table '{name}' key {key!r} has non-integer weight {value!r}"
            )
        out[key] = value
    return out


def model_from_dict(data: Any) -> Model:
    """
    Builds a `Model` from already-decoded JSON data.

    Validates structural well-formedness only: the root must be a mapping,
    all 13 feature tables must be present, and every table must map string
    keys to integers. Unknown top-level keys are ignored.

    Args:
        data: The decoded document, usually the result of `json.load`.

    Returns:
        An immutable `Model`.

    Raises:
        ModelLoadError: If the data does not have the expected shape.
    """
    if not isinstance(data, Mapping):
        raise ModelLoadError(f"expected a JSON object at the root, got {type(data).__name__}")

    missing = [name for name in FEATURE_NAMES if name not in data]
    if missing:
        raise ModelLoadError(f"missing feature tables: {', '.join(missing)}")

    return Model(**{name: _validate_table(name, data[name]) for name in FEATURE_NAMES})


def _decode(text: str, source: str) -> Model:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ModelLoadError(f"error decoding JSON from {source}: {e}") from e
    return model_from_dict(data)


def load_model(path: PathLike) -> Model:
    """
    Loads a model from a JSON file.

    Args:
        path: The path to the model JSON file.

    Returns:
        The loaded `Model`.

    Raises:
        ModelLoadError: If the file cannot be read, is not valid JSON, or
            does not contain the 13 expected integer tables.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ModelLoadError(f"could not read {path}: {e}") from e
    return _decode(text, str(path))


@lru_cache(maxsize=None)
def load_default_model(language: str = "ja") -> Model:
    """
    Loads one of the models bundled with `budoux`.

    The result is cached, so each language is decoded at most once per
    process and the same immutable instance is handed to every caller.

    Args:
        language: One of `DEFAULT_LANGUAGES`.

    Raises:
        ModelLoadError: If the language is unknown or the asset is missing.
    """
    if language not in DEFAULT_LANGUAGES:
        raise ModelLoadError(
            f"no bundled model for language '{language}' "
            f"(available: {', '.join(DEFAULT_LANGUAGES)})"
        )
    source = f"budoux/models/{language}.json"
    try:
        asset = resources.files("budoux") / "models" / f"{language}.json"
        text = asset.read_text(encoding="utf-8")
    except (ModuleNotFoundError, OSError) as e:
        raise ModelLoadError(f"could not read bundled asset {source}: {e}") from e
    return _decode(text, source)


def save_model(path: PathLike, model: Model) -> None:
    """
    Saves a model to a JSON file.

    The tables are written in canonical order with indentation, keeping
    non-ASCII keys readable.

    Args:
        path: The destination path for the model JSON file.
        model: The `Model` to save.
    """
    with open(path, "w", encoding="utf-8") as f:
        json.dump(model.to_dict(), f, ensure_ascii=False, indent=2)
