"""Defines the immutable weight table consumed by the scorer.

A `Model` holds the 13 feature tables of a trained segmentation model. Each
table maps a short n-gram key (one to three codepoints) to an integer weight.
Tables that were not supplied are empty, and keys missing from a table
contribute nothing when scoring.
"""
from __future__ import annotations
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Mapping, Tuple

__all__ = ["FEATURE_NAMES", "Feature", "Model"]

# Canonical order of the 13 feature tables.
FEATURE_NAMES: Tuple[str, ...] = (
    "UW1", "UW2", "UW3", "UW4", "UW5", "UW6",
    "BW1", "BW2", "BW3",
    "TW1", "TW2", "TW3", "TW4",
)

Feature = Mapping[str, int]


@dataclass(frozen=True)
class Model:
    """
    The trained weight table: 13 read-only mappings from n-gram keys to weights.

    A model is built once (see `phrasebreak.io_utils`) and then shared by
    reference between any number of parsers. Tables are wrapped in
    `MappingProxyType` so nothing can write through them after construction.

    Attributes:
        UW1..UW6: Unigram tables for the codepoints at offsets -3..+2 from the
            candidate boundary.
        BW1..BW3: Bigram tables for the codepoint pairs at offsets -2..+1.
        TW1..TW4: Trigram tables for the codepoint triples at offsets -3..+2.
    """
    UW1: Feature = field(default_factory=dict)
    UW2: Feature = field(default_factory=dict)
    UW3: Feature = field(default_factory=dict)
    UW4: Feature = field(default_factory=dict)
    UW5: Feature = field(default_factory=dict)
    UW6: Feature = field(default_factory=dict)
    BW1: Feature = field(default_factory=dict)
    BW2: Feature = field(default_factory=dict)
    BW3: Feature = field(default_factory=dict)
    TW1: Feature = field(default_factory=dict)
    TW2: Feature = field(default_factory=dict)
    TW3: Feature = field(default_factory=dict)
    TW4: Feature = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's mapping never reach the model
        for f in fields(self):
            object.__setattr__(self, f.name, MappingProxyType(dict(getattr(self, f.name))))

    @classmethod
    def empty(cls) -> "Model":
        """Returns a model whose 13 tables are all empty."""
        return cls()

    def table(self, name: str) -> Feature:
        """Returns the table registered under one of `FEATURE_NAMES`."""
        if name not in FEATURE_NAMES:
            raise KeyError(f"Unknown feature table: {name}")
        return getattr(self, name)

    def total_weight(self) -> int:
        """Sum of every weight across all 13 tables."""
        return sum(sum(self.table(name).values()) for name in FEATURE_NAMES)

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {name: dict(self.table(name)) for name in FEATURE_NAMES}
