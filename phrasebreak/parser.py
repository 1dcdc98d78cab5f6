"""The segmentation loop and the `Parser` front door.

`segment` walks the text one codepoint at a time. The first codepoint always
opens the first chunk; every later codepoint either opens a new chunk (when
the boundary score in front of it is strictly positive) or is appended to the
chunk currently being built. A score of exactly zero merges, so a model with
no evidence at all returns the whole text as a single chunk.

The default models are decoded once by `load_default_model` and the same
immutable instance is passed to every parser built from it.
"""
from __future__ import annotations
from typing import List

from .io_utils import PathLike, load_default_model, load_model
from .scorer import Scorer
from .types import Model

__all__ = [
    "Parser",
    "load_default_japanese_parser",
    "load_default_parser",
    "load_parser_from_file",
    "segment",
]


def segment(text: str, scorer: Scorer) -> List[str]:
    """
    Splits `text` into chunks at every strictly positive boundary score.

    Args:
        text: The input text. May be empty.
        scorer: The `Scorer` wrapping the model to use.

    Returns:
        The chunks in order. Joining them gives back `text` exactly and none
        of them is empty. Empty input yields an empty list.
    """
    if not text:
        return []

    chunks = []
    start = 0
    for i in range(1, len(text)):
        if scorer.score(text, i) > 0:
            chunks.append(text[start:i])
            start = i
    chunks.append(text[start:])
    return chunks


class Parser:
    """
    Segments text into line-break friendly chunks with a fixed model.

    A parser keeps no state between calls, so one instance can be shared
    across threads.
    """
    def __init__(self, model: Model):
        self.model = model
        self.scorer = Scorer(model)

    def parse(self, sentence: str) -> List[str]:
        """Parses `sentence` and returns its list of chunks."""
        return segment(sentence, self.scorer)

    def parse_boundaries(self, sentence: str) -> List[int]:
        """
        Returns the codepoint offsets at which a new chunk starts.

        Offset 0 is never included since the first chunk has no boundary in
        front of it.
        """
        return [i for i in range(1, len(sentence)) if self.scorer.score(sentence, i) > 0]


def load_default_parser(language: str = "ja") -> Parser:
    """Builds a parser over one of the bundled models."""
    return Parser(load_default_model(language))


def load_default_japanese_parser() -> Parser:
    """Builds a parser over the bundled Japanese model."""
    return load_default_parser("ja")


def load_parser_from_file(path: PathLike) -> Parser:
    """
    Builds a parser over a model JSON file.

    Raises:
        ModelLoadError: If the file cannot be read or is not a valid model.
    """
    return Parser(load_model(path))
