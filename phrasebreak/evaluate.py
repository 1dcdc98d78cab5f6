"""Metrics for comparing a model's chunk boundaries with a reference.

Boundaries are codepoint offsets where a chunk starts, excluding offset 0.
Two segmentations of the same sentence agree on a boundary when both place a
chunk start at that offset.
"""
from __future__ import annotations
from typing import Any, Dict, List, Sequence, Set

from .data_validation import chunk_offsets
from .parser import Parser

def boundaries_from_chunks(chunks: Sequence[str]) -> Set[int]:
    """Returns the set of chunk start offsets, excluding the first chunk."""
    return {start for start, _ in chunk_offsets(list(chunks)) if start > 0}

def _prf(tp: int, fp: int, fn: int) -> Dict[str, float]:
    precision = tp / (tp + fp) if tp + fp else 0.0
    recall = tp / (tp + fn) if tp + fn else 0.0
    f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0
    return {"precision": precision, "recall": recall, "f1": f1}

def compare_boundaries(
    generated: Sequence[Sequence[str]],
    reference: Sequence[Sequence[str]],
) -> Dict[str, Any]:
    """
    Scores generated segmentations against reference segmentations.

    Args:
        generated: One list of chunks per sentence, as produced by a parser.
        reference: The gold chunks for the same sentences, in the same order.

    Returns:
        A dictionary with `scores` (boundary precision, recall and F1, plus
        exact-match sentence accuracy) and `disagreements`, one row per
        boundary the two sides disagree on.

    Raises:
        ValueError: If the inputs differ in length or a pair of segmentations
                    does not cover the same text.
    """
    if len(generated) != len(reference):
        raise ValueError(
            f"Generated and reference sentence counts differ: {len(generated)} vs {len(reference)}"
        )

    tp = fp = fn = exact = 0
    disagreements: List[Dict[str, Any]] = []
    for idx, (gen, ref) in enumerate(zip(generated, reference)):
        text = "".join(ref)
        if "".join(gen) != text:
            raise ValueError(f"Sentence {idx} text differs between generated and reference chunks.")

        gen_b = boundaries_from_chunks(gen)
        ref_b = boundaries_from_chunks(ref)
        tp += len(gen_b & ref_b)
        fp += len(gen_b - ref_b)
        fn += len(ref_b - gen_b)
        if gen_b == ref_b:
            exact += 1

        for offset in sorted(gen_b ^ ref_b):
            disagreements.append({
                "sentence": idx,
                "offset": offset,
                "context": f"{text[max(0, offset - 3):offset]}|{text[offset:offset + 3]}",
                "generated": offset in gen_b,
                "reference": offset in ref_b,
            })

    scores = _prf(tp, fp, fn)
    scores["sentence_accuracy"] = exact / len(reference) if reference else 0.0
    return {"scores": scores, "disagreements": disagreements}

def evaluate_parser(parser: Parser, reference: Sequence[Sequence[str]]) -> Dict[str, Any]:
    """Segments each reference sentence with `parser` and compares the result."""
    generated = [parser.parse("".join(ref)) for ref in reference]
    return compare_boundaries(generated, reference)
