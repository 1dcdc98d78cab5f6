from __future__ import annotations
from typing import Dict, Sequence

from .features import extract_features
from .types import Model

class Scorer:
    """
    Calculates boundary scores from a trained n-gram weight table.

    A score is a plain linear sum: a constant bias derived from the model plus
    the weight of every feature key extracted around the candidate boundary.
    Keys that the model has never seen contribute nothing. A positive score
    means "start a new chunk here".

    Attributes:
        model: The immutable weight table being scored against.
        base_score: The bias term, `-0.5 * model.total_weight()`. It depends
                    only on the model and is computed once.
    """
    def __init__(self, model: Model):
        self.model = model
        self.base_score = -0.5 * float(model.total_weight())

    def _get_weight(self, table: str, key: str) -> float:
        """Returns the weight of `key` in `table`, or 0.0 when it is absent."""
        return float(self.model.table(table).get(key, 0))

    def score(self, chars: Sequence[str], i: int) -> float:
        """
        Scores the boundary before codepoint `i`.

        Args:
            chars: The text as a sequence of codepoints.
            i: An interior index, `1 <= i < len(chars)`.

        Returns:
            The boundary score. Strictly positive scores open a new chunk.
        """
        score = self.base_score
        for table, key in extract_features(chars, i):
            score += self._get_weight(table, key)
        return score

    def feature_scores(self, chars: Sequence[str], i: int) -> Dict[str, float]:
        """
        Breaks the score at `i` down into the contribution of each table.

        Only windows inside the text appear in the result; tables whose key is
        absent from the model show up with 0.0.
        """
        return {table: self._get_weight(table, key) for table, key in extract_features(chars, i)}
