import sys
import argparse
import logging
from typing import List, Optional

from .config import Settings, load_settings
from .exceptions import ConfigurationError, EmptyIndexError, FreqChartError, InputFileError
from .index import FrequencyIndex
from .report import render_report
from .utils import TokenMode

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def positive_int(value: str) -> int:
    """argparse type for -l: a strictly positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid length: {value!r} is not an integer")
    if number < 1:
        raise argparse.ArgumentTypeError(f"invalid length: {number} is not a positive integer")
    return number


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="freqchart",
        description="Chart the most frequent words or characters of one or more text files.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Input text files, read in the order given."
    )
    parser.add_argument(
        "-l",
        dest="length",
        type=positive_int,
        default=settings.length,
        help=f"Number of tokens to show (default: {settings.length})."
    )
    # -w and -c share a destination so the last one on the command line wins
    parser.add_argument(
        "-w",
        dest="mode",
        action="store_const",
        const=TokenMode.WORD,
        default=TokenMode.WORD,
        help="Count whole words (default)."
    )
    parser.add_argument(
        "-c",
        dest="mode",
        action="store_const",
        const=TokenMode.CHARACTER,
        help="Count single characters."
    )
    parser.add_argument(
        "--scaled",
        action="store_true",
        default=False,
        help="Scale bars to the most frequent token instead of the total token count."
    )
    return parser


def run(files: List[str], length: int, mode: TokenMode, scaled: bool, settings: Settings) -> int:
    """Ingests `files`, prints the chart and returns the process exit status."""
    index = FrequencyIndex()
    try:
        index.ingest_files(files, mode, settings.encoding, show_progress=settings.show_progress)
        result = index.extract_top_k(length)
    except InputFileError as e:
        logger.error(f"Aborting: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except EmptyIndexError:
        logger.error("No tokens found in the given input.")
        print("No data: the given files contain no countable tokens.", file=sys.stderr)
        return EXIT_FAILURE

    print(render_report(result, scaled=scaled, bar_width=settings.bar_width, axis_width=settings.axis_width), end="")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command-line entry point.

    Returns 0 on success, 1 for input-file errors or empty input, 2 for
    configuration and usage errors. argparse exits with 2 by itself on bad
    options.
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(level=settings.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    parser = build_parser(settings)
    args = parser.parse_intermixed_args(argv)
    if not args.files:
        parser.error("No input files were given")

    logger.info(f"Counting top {args.length} token(s) in {len(args.files)} file(s), {args.mode.value} mode")
    try:
        return run(args.files, args.length, args.mode, args.scaled, settings)
    except FreqChartError as e:
        logger.error(f"Unexpected freqchart error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
