"""Command line entry point: ``playcount <input_file_path> [target_date]``."""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import settings
from .dates import SUPPORTED_TARGET_FORMATS, parse_target_date
from .errors import InputFileNotFound, InvalidDateFormat, PlayCountError, UsageError
from .output import render_console, results_path, write_results
from .pipeline import AnalysisPipeline

EXAMPLES = """Examples:
  playcount data.csv
  playcount data.csv 15/08/2016
  playcount data.csv "08/15/2016"
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playcount",
        description="Count how many clients played exactly N distinct songs on a given date.",
        epilog=(
            f"{EXAMPLES}\n"
            f"Default target date: {settings.default_target_date} (dd/MM/yyyy)\n"
            f"Supported date formats: {SUPPORTED_TARGET_FORMATS}"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input_file", nargs="?", help="comma or tab delimited play log")
    parser.add_argument(
        "target_date",
        nargs="?",
        default=settings.default_target_date,
        help="date to analyze (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level.upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="diagnostic verbosity (default: %(default)s)",
    )
    return parser


def run(args: argparse.Namespace) -> None:
    if not args.input_file:
        raise UsageError("no input file given")

    # Both checks happen before any parsing.
    input_path = Path(args.input_file)
    if not input_path.is_file():
        raise InputFileNotFound(input_path)
    target_date = parse_target_date(args.target_date)

    result = AnalysisPipeline().analyze_file(input_path, target_date)
    print(render_console(result))
    output_path = write_results(result, results_path(input_path, target_date))
    print(f"\nResults also saved to: {output_path}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=settings.log_format)
    logging.getLogger("playcount").setLevel(args.log_level)

    try:
        run(args)
    except UsageError:
        parser.print_help()
        return 0
    except InvalidDateFormat:
        print(f"Error: Invalid target date format '{args.target_date}'.", file=sys.stderr)
        print(f"Supported formats: {SUPPORTED_TARGET_FORMATS}", file=sys.stderr)
        print("Examples: 10/08/2016, 08/10/2016, 2016-08-10", file=sys.stderr)
        return 1
    except PlayCountError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
