from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .extraction import PdfParseError, extract_raw_text
from .frequency import compute_statistics, rank_frequencies
from .pipeline import PipelineConfig, env_int, env_path, run_directory
from .tokenizer import TokenizerOptions, tokenize

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract words and word frequencies from PDF documents")
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract_parser = subparsers.add_parser(
        "extract", help="Write TXT and JSON word reports for every PDF in a directory"
    )
    extract_parser.add_argument(
        "--input-dir",
        type=Path,
        default=env_path("PDF_INPUT_DIR", "."),
        help="Directory containing PDF files (default: %(default)s or PDF_INPUT_DIR)",
    )
    extract_parser.add_argument(
        "--output-dir",
        type=Path,
        default=env_path("PDF_OUTPUT_DIR", "output"),
        help="Directory to write word reports (default: %(default)s or PDF_OUTPUT_DIR)",
    )
    extract_parser.add_argument(
        "--min-token-length",
        type=int,
        default=env_int("MIN_TOKEN_LENGTH", 2),
        help="Minimum word length to keep (default: %(default)s or MIN_TOKEN_LENGTH)",
    )
    extract_parser.add_argument(
        "--recursive",
        action="store_true",
        help="Also scan subdirectories of the input directory",
    )
    extract_parser.add_argument(
        "--csv",
        action="store_true",
        dest="write_csv",
        help="Also write a {name}_frequency.csv ranking per document",
    )
    extract_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    top_parser = subparsers.add_parser("top", help="Print the most frequent words of a single PDF")
    top_parser.add_argument("pdf", type=Path, help="PDF file to analyse")
    top_parser.add_argument(
        "--top",
        type=int,
        default=20,
        help="Number of words to print (default: %(default)s)",
    )
    top_parser.add_argument(
        "--min-token-length",
        type=int,
        default=env_int("MIN_TOKEN_LENGTH", 2),
        help="Minimum word length to keep (default: %(default)s or MIN_TOKEN_LENGTH)",
    )

    return parser


def _run_extract(args: argparse.Namespace) -> int:
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = PipelineConfig(
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        tokenizer=TokenizerOptions(min_token_length=args.min_token_length),
        recursive=args.recursive,
        write_csv=args.write_csv,
    )
    try:
        batch = run_directory(config)
    except (FileNotFoundError, NotADirectoryError) as exc:
        LOGGER.error("%s", exc)
        return 1

    if batch.failed:
        LOGGER.error(
            "Failed documents: %s", ", ".join(document.source.name for document in batch.failed)
        )
        return 1
    return 0


def _run_top(args: argparse.Namespace) -> int:
    try:
        text = extract_raw_text(args.pdf)
    except PdfParseError as exc:
        LOGGER.error("%s", exc)
        return 1

    tokens = tokenize(text, TokenizerOptions(min_token_length=args.min_token_length))
    statistics = compute_statistics(tokens)
    for token, count in rank_frequencies(statistics, top_n=args.top):
        print(f"{token}\t{count}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.min_token_length < 1:
        parser.error("--min-token-length must be at least 1")

    if args.command == "extract":
        return _run_extract(args)
    elif args.command == "top":
        if args.top < 0:
            parser.error("--top must not be negative")
        return _run_top(args)
    else:
        parser.error("No command provided")


def extract_cli() -> None:
    argv = sys.argv[1:]
    sys.exit(main(["extract", *argv]))


if __name__ == "__main__":
    sys.exit(main())
