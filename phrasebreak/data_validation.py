from __future__ import annotations
from typing import Any, Dict, Iterator, List, Tuple

def chunk_offsets(chunks: List[str]) -> Iterator[Tuple[int, int]]:
    """
    Yields the codepoint span covered by each chunk.

    Args:
        chunks: A segmentation as returned by `Parser.parse`.

    Yields:
        A tuple `(start_idx, end_idx)` per chunk, with `end_idx` exclusive.
    """
    start_idx = 0
    for chunk in chunks:
        end_idx = start_idx + len(chunk)
        yield (start_idx, end_idx)
        start_idx = end_idx

def validate(text: str, chunks: List[str]) -> Dict[str, Any]:
    """
    Checks a segmentation against the invariants every parser output obeys.

    The checks are:
    -   Every chunk is a non-empty string.
    -   Concatenating the chunks in order reproduces `text` exactly.

    Args:
        text: The original input text.
        chunks: The chunks produced for `text`.

    Returns:
        A dictionary with the total `issue_count` and a list of `issues`,
        where each issue is a dictionary describing the problem.
    """
    issues = []

    for i, chunk in enumerate(chunks):
        if not isinstance(chunk, str):
            issues.append({
                "type": "non_string_chunk_error",
                "idx": i,
                "message": f"Chunk {i} is a {type(chunk).__name__}, not a string."
            })
        elif not chunk:
            issues.append({
                "type": "empty_chunk_error",
                "idx": i,
                "message": f"Chunk {i} is empty."
            })

    joined = "".join(c for c in chunks if isinstance(c, str))
    if joined != text:
        mismatch = next(
            (i for i, (a, b) in enumerate(zip(joined, text)) if a != b),
            min(len(joined), len(text)),
        )
        issues.append({
            "type": "reconstruction_error",
            "offset": mismatch,
            "message": f"Chunks do not reproduce the input; first difference at codepoint {mismatch}."
        })

    return {"issue_count": len(issues), "issues": issues}
