import argparse
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

# Add project root to path for robust execution
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from phrasebreak.config import load_config
from phrasebreak.io_utils import DEFAULT_LANGUAGES, ModelLoadError
from phrasebreak.output import format_batch, format_chunks
from phrasebreak.parser import Parser, load_default_parser, load_parser_from_file

def _status(message: str, verbose: bool) -> None:
    if verbose:
        print(message, file=sys.stderr)

def _explain(parser: Parser, text: str) -> None:
    """Prints the score of every candidate boundary in `text` to stderr."""
    scorer = parser.scorer
    print(f"base score: {scorer.base_score:.1f}", file=sys.stderr)
    for i in range(1, len(text)):
        score = scorer.score(text, i)
        mark = "BREAK" if score > 0 else "-"
        print(f"{i:4d} {text[max(0, i - 3):i]}|{text[i:i + 3]} {score:10.1f} {mark}", file=sys.stderr)

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phrasebreak",
        description="Split text into line-break friendly chunks with an n-gram model.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to segment. Required unless --input-file is given."
    )
    parser.add_argument(
        "-f", "--format",
        default=None,
        help="Output format: 'text' (one chunk per line) or 'json'. Other values print text."
    )
    parser.add_argument(
        "--input-file",
        help="Segment every line of this file instead of a single text argument."
    )
    parser.add_argument(
        "--model",
        help="Path to a model JSON file. Overrides --language."
    )
    parser.add_argument(
        "--language",
        choices=DEFAULT_LANGUAGES,
        default=None,
        help="Bundled model to use when no --model is given (default: ja)."
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Optional YAML configuration file."
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the score of every candidate boundary to stderr."
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress messages to stderr."
    )
    return parser

def main(argv: Optional[List[str]] = None) -> None:
    """
    Main command-line interface for the phrasebreak segmenter.

    The script performs the following steps:
    1.  Loads the optional YAML configuration and applies command-line
        overrides on top of it.
    2.  Loads the model, either from an external JSON file or from the models
        bundled with `budoux`. A model that fails to load ends the run with an
        error; nothing is segmented.
    3.  Segments the text argument, or every line of `--input-file`. The two
        cannot be combined.
    4.  Prints the chunks as plain text or JSON.
    """
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    if args.text is None and args.input_file is None:
        arg_parser.error("a text argument or --input-file is required")
    if args.text is not None and args.input_file is not None:
        arg_parser.error("give either a text argument or --input-file, not both")

    try:
        # 1. Load configuration
        if args.config:
            _status(f"Loading configuration from {args.config}...", args.verbose)
        cfg = load_config(args.config)
        if args.model:
            cfg.model_path = args.model
        if args.language:
            cfg.language = args.language
        if args.format:
            cfg.output_format = args.format

        # 2. Load the model
        if cfg.model_path:
            _status(f"Loading model from {cfg.model_path}...", args.verbose)
            parser = load_parser_from_file(cfg.model_path)
        else:
            _status(f"Loading bundled '{cfg.language}' model...", args.verbose)
            parser = load_default_parser(cfg.language)

        # 3. Segment
        if args.input_file:
            _status(f"Reading sentences from {args.input_file}...", args.verbose)
            try:
                lines = Path(args.input_file).read_text(encoding=cfg.encoding).splitlines()
            except FileNotFoundError:
                raise FileNotFoundError(f"Input file not found at: {args.input_file}")
            batch = []
            for line in tqdm(lines, desc="Segmenting", disable=not args.verbose, file=sys.stderr):
                if args.explain:
                    _explain(parser, line)
                batch.append(parser.parse(line))
            output = format_batch(batch, cfg.output_format)
        else:
            if args.explain:
                _explain(parser, args.text)
            output = format_chunks(parser.parse(args.text), cfg.output_format)

        # 4. Print
        if output:
            print(output)

    except (ModelLoadError, FileNotFoundError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
