"""Feature extraction over the codepoint window around a candidate boundary.

For a boundary before codepoint `i`, the model looks at up to three
codepoints on the left and three on the right (counting `i` itself):

    i-3  i-2  i-1 | i  i+1  i+2

Each feature table reads a fixed slice of that window:

    UW1..UW6  single codepoints at i-3, i-2, i-1, i, i+1, i+2
    BW1..BW3  pairs (i-2, i-1), (i-1, i), (i, i+1)
    TW1..TW4  triples (i-3..i-1), (i-2..i), (i-1..i+1), (i..i+2)

Slices that fall outside the text are left out entirely. There is no padding
and no wraparound, so text edges never produce artificial keys.
"""
from __future__ import annotations
from typing import List, Sequence, Tuple

__all__ = ["FEATURE_WINDOWS", "extract_features"]

# (table name, offset of the first codepoint relative to i, width)
FEATURE_WINDOWS: Tuple[Tuple[str, int, int], ...] = (
    ("UW1", -3, 1),
    ("UW2", -2, 1),
    ("UW3", -1, 1),
    ("UW4", 0, 1),
    ("UW5", 1, 1),
    ("UW6", 2, 1),
    ("BW1", -2, 2),
    ("BW2", -1, 2),
    ("BW3", 0, 2),
    ("TW1", -3, 3),
    ("TW2", -2, 3),
    ("TW3", -1, 3),
    ("TW4", 0, 3),
)


def extract_features(chars: Sequence[str], i: int) -> List[Tuple[str, str]]:
    """
    Builds the feature keys for the boundary before codepoint `i`.

    Args:
        chars: The text as a sequence of single codepoints. A `str` works
            directly since indexing a Python string yields codepoints.
        i: Index of the codepoint that would open a new chunk. Must satisfy
            `1 <= i < len(chars)`.

    Returns:
        A list of `(table_name, key)` pairs, in `FEATURE_WINDOWS` order, for
        every window that lies fully inside the text.

    Raises:
        IndexError: If `i` is not an interior position.
    """
    n = len(chars)
    if not 1 <= i < n:
        raise IndexError(f"boundary index {i} out of range for text of length {n}")

    feats = []
    for name, offset, width in FEATURE_WINDOWS:
        start = i + offset
        end = start + width
        if start < 0 or end > n:
            continue
        feats.append((name, "".join(chars[start:end])))
    return feats
