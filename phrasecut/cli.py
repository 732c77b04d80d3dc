import argparse
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .config import Config, load_config
from .data_validation import validate_chunks
from .model_io import SUPPORTED_LANGUAGES, load_model
from .segmenter import Segmenter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phrasecut",
        description="Split unsegmented text into line-breakable chunks.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to segment. Omit when using --input."
    )
    parser.add_argument(
        "-l", "--lang",
        choices=SUPPORTED_LANGUAGES,
        default=None,
        help="Language model to use. Defaults to the configured language."
    )
    parser.add_argument(
        "-m", "--model",
        default=None,
        help="Path to a model JSON file. Overrides --lang."
    )
    parser.add_argument(
        "-c", "--config",
        default="phrasecut.yaml",
        help="Path to the configuration YAML file."
    )
    parser.add_argument(
        "-i", "--input",
        default=None,
        help="Segment every line of this UTF-8 text file."
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write results to this file instead of stdout."
    )
    parser.add_argument(
        "-d", "--delimiter",
        default=None,
        help="Separator printed between chunks. Defaults to a newline."
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check that every result reconstructs its input."
    )
    return parser


def _segment_lines(segmenter: Segmenter, lines: List[str], validate: bool) -> List[List[str]]:
    texts = [line.strip() for line in lines]
    results = segmenter.segment_many(
        tqdm(texts, desc="Segmenting", disable=len(texts) < 2, file=sys.stderr)
    )
    if validate:
        for text, chunks in zip(texts, results):
            report = validate_chunks(text, chunks)
            if report["issue_count"]:
                raise ValueError(f"Segmentation of {text!r} failed validation: {report['issues']}")
    return results


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command-line interface for the chunk segmenter.

    Steps:
    1.  Loads the configuration (a missing default config file is fine).
    2.  Loads the model from --model, or the language artifact.
    3.  Segments the positional text, or every line of --input.
    4.  Prints each result with chunks joined by the delimiter.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.text is None and args.input is None:
        parser.error("either a text argument or --input is required")

    try:
        explicit_config = args.config != parser.get_default("config")
        cfg: Config = load_config(args.config, required=explicit_config)
        delimiter = args.delimiter if args.delimiter is not None else cfg.delimiter

        if args.model:
            model = load_model(args.model, bias_mode=cfg.bias_mode)
        else:
            model = cfg.load_model(args.lang)
        segmenter = Segmenter(model)

        if args.input:
            input_path = Path(args.input)
            if not input_path.exists():
                raise FileNotFoundError(f"Input file not found at: {input_path}")
            lines = input_path.read_text(encoding="utf-8").splitlines()
        else:
            lines = [args.text]

        results = _segment_lines(segmenter, lines, args.validate)
        output = "\n".join(delimiter.join(chunks) for chunks in results)

        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(output + "\n", encoding="utf-8")
            print(f"Wrote {len(results)} segmented line(s) to {output_path}")
        else:
            print(output)

    except (FileNotFoundError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
