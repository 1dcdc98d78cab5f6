"""Command-line script for evaluating a segmentation model against a reference.

The reference is a file of hand-segmented sentences. Each sentence is
re-segmented from its raw text by the model under test and the resulting
chunk boundaries are compared with the reference boundaries.

Two reference formats are accepted:
-   **Delimited text**: one sentence per line, chunks separated by a
    delimiter (`|` by default), e.g. `今日は|天気です。`.
-   **JSON**: a list of chunk lists, e.g. `[["今日は", "天気です。"]]`.

The report contains boundary precision, recall and F1, the share of
sentences segmented exactly like the reference, and optionally a CSV of
every boundary the two sides disagree on.
"""
import argparse
import csv
import json
import sys
from pathlib import Path
from typing import List

# Add project root to path to allow for package imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from phrasebreak.evaluate import evaluate_parser
from phrasebreak.io_utils import DEFAULT_LANGUAGES, ModelLoadError
from phrasebreak.parser import load_default_parser, load_parser_from_file


def load_reference(path: str, delimiter: str = "|") -> List[List[str]]:
    """
    Loads reference segmentations from a delimited text or JSON file.

    Blank lines in delimited files are skipped.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If a JSON file is malformed.
        TypeError: If a JSON file is not a list of string lists.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"Reference file not found at: {path}")

    if p.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error decoding JSON from {path}: {e}")
        if not isinstance(data, list) or not all(
            isinstance(s, list) and all(isinstance(c, str) for c in s) for s in data
        ):
            raise TypeError(f"Expected a list of chunk lists in {path}")
        return data

    return [
        [chunk for chunk in line.split(delimiter) if chunk]
        for line in text.splitlines()
        if line.strip()
    ]


def main():
    """
    Main entry point for the command-line model evaluation script.

    Loads the model (external file or bundled language), loads the reference
    segmentations, segments each reference sentence and prints the
    comparison metrics as JSON. With `--disagreements-out`, every boundary
    where the model and the reference differ is written to a CSV file.
    """
    parser = argparse.ArgumentParser(
        description="Evaluate chunk segmentation against a hand-segmented reference.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--reference", required=True, help="Path to the reference file (delimited text or .json).")
    parser.add_argument("--model", help="Path to a model JSON file. Defaults to a bundled model.")
    parser.add_argument("--language", choices=DEFAULT_LANGUAGES, default="ja", help="Bundled model to use when --model is not given.")
    parser.add_argument("--delimiter", default="|", help="Chunk delimiter used in delimited reference files.")
    parser.add_argument("--disagreements-out", help="Optional: Path to write a detailed disagreements CSV file.")
    args = parser.parse_args()

    try:
        print("Loading model...")
        if args.model:
            seg_parser = load_parser_from_file(args.model)
        else:
            seg_parser = load_default_parser(args.language)

        print(f"Loading reference from {args.reference}...")
        reference = load_reference(args.reference, args.delimiter)

        print("\n--- Boundary Metrics (vs. Reference) ---")
        report = evaluate_parser(seg_parser, reference)
        print(json.dumps(report["scores"], indent=2))

        if args.disagreements_out and report["disagreements"]:
            Path(args.disagreements_out).parent.mkdir(parents=True, exist_ok=True)
            print(f"\nWriting {len(report['disagreements'])} disagreements to {args.disagreements_out}...")
            with open(args.disagreements_out, "w", newline="", encoding="utf-8") as f:
                writer = csv.DictWriter(f, fieldnames=["sentence", "offset", "context", "generated", "reference"])
                writer.writeheader()
                writer.writerows(report["disagreements"])

    except (ModelLoadError, FileNotFoundError, ValueError, TypeError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
