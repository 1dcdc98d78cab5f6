"""Manages the loading and validation of application configuration.

This module defines the `Config` dataclass, a small typed container for the
settings the command-line front end needs: which model to segment with and
how to print the result. `load_config` reads them from a YAML file; a model
path given there is resolved relative to the file itself so a config can
travel together with its model.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import yaml

@dataclass
class Config:
    """
    A typed configuration object for the segmentation front end.

    Attributes:
        language: The bundled model to use when no `model_path` is set.
        model_path: Optional path to an external model JSON file. Takes
                    precedence over `language`.
        output_format: `"text"` (one chunk per line) or `"json"`. Unknown
                       values fall back to the text form.
        encoding: The encoding used to read batch input files.
    """
    language: str = "ja"
    model_path: Optional[str] = None
    output_format: str = "text"
    encoding: str = "utf-8"

def load_config(path: Optional[str] = None) -> Config:
    """
    Loads a YAML configuration file into a `Config` object.

    Keys that are absent fall back to the dataclass defaults, and calling
    without a path returns the defaults outright.

    Args:
        path: The path to the YAML file, or None.

    Returns:
        A populated `Config` object.

    Raises:
        FileNotFoundError: If the specified file cannot be found.
        ValueError: If there is an error parsing the YAML file.
        TypeError: If the root of the YAML file is not a dictionary.
    """
    if path is None:
        return Config()

    try:
        with open(path, "r", encoding="utf-8") as f:
            y = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML file at {path}: {e}")

    # An empty file loads as None
    if y is None:
        y = {}
    if not isinstance(y, dict):
        raise TypeError(f"Configuration file {path} must be a dictionary.")

    model_path = y.get("model_path")
    if model_path:
        p = Path(model_path)
        if not p.is_absolute():
            p = Path(path).parent / p
        model_path = str(p)

    defaults = Config()
    return Config(
        language=str(y.get("language", defaults.language)),
        model_path=model_path or None,
        output_format=str(y.get("output_format", defaults.output_format)),
        encoding=str(y.get("encoding", defaults.encoding)),
    )
