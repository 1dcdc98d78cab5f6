from __future__ import annotations
import json
from typing import List, Sequence

OUTPUT_FORMATS = ("text", "json")

def chunks_to_text(chunks: Sequence[str]) -> str:
    """Renders one chunk per line."""
    return "\n".join(chunks)

def chunks_to_json(chunks: Sequence) -> str:
    """
    Renders the chunks as a pretty-printed JSON array.

    Non-ASCII text is written as-is rather than as escape sequences. Nested
    lists (one list of chunks per sentence) are rendered the same way.
    """
    return json.dumps(list(chunks), ensure_ascii=False, indent=2)

def format_chunks(chunks: Sequence[str], fmt: str = "text") -> str:
    """
    Formats a single segmentation for output.

    Args:
        chunks: The chunks returned by `Parser.parse`.
        fmt: `"json"` for a JSON array. Any other value, including `"text"`,
             gives one chunk per line.

    Returns:
        The formatted string, without a trailing newline.
    """
    if fmt == "json":
        return chunks_to_json(chunks)
    return chunks_to_text(chunks)

def format_batch(batch: Sequence[List[str]], fmt: str = "text") -> str:
    """
    Formats several segmentations, one per input sentence.

    The JSON form is an array of arrays. The text form prints each sentence's
    chunks one per line and separates sentences with a blank line.
    """
    if fmt == "json":
        return chunks_to_json(batch)
    return "\n\n".join(chunks_to_text(chunks) for chunks in batch)
