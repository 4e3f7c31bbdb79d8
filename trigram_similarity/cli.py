"""
Command-line entry point.

    trigram-similarity STRING1 STRING2               print the similarity score
    trigram-similarity --find NEEDLE [HAYSTACK]      print fuzzy word matches
    trigram-similarity --benchmark                   time the core operations
"""
import argparse
import logging
import sys

from trigram_similarity import config
from trigram_similarity.core.similarity import similarity
from trigram_similarity.search.scanner import find_words
from trigram_similarity.utils.benchmark import run_benchmarks

logger = logging.getLogger(__name__)

USAGE = "usage: similarity string1 string2"


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that reports bad invocations with exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="trigram-similarity",
        description="Trigram similarity of strings, in the manner of pg_trgm",
    )
    parser.add_argument(
        "strings",
        nargs="*",
        help="Two strings to compare, or NEEDLE [HAYSTACK] with --find"
    )
    parser.add_argument(
        "--find",
        action="store_true",
        help="Print the words of HAYSTACK that fuzzily match NEEDLE"
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Minimum similarity (exclusive) for --find (default: scanner.threshold)"
    )
    parser.add_argument(
        "--benchmark",
        action="store_true",
        help="Run the benchmark harness"
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Timed calls per benchmark (default: benchmark.iterations)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def _configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else config.cfg.logging.level
    logging.basicConfig(
        level=level,
        format=config.cfg.logging.format,
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.debug)

    if args.benchmark and args.find:
        parser.error("--benchmark and --find are mutually exclusive")
    if args.threshold is not None and not args.find:
        parser.error("--threshold only applies to --find")
    if args.iterations is not None and not args.benchmark:
        parser.error("--iterations only applies to --benchmark")

    if args.benchmark:
        if args.strings:
            parser.error("--benchmark takes no positional arguments")
        if args.iterations is not None and args.iterations <= 0:
            parser.error("--iterations must be positive")
        for report in run_benchmarks(iterations=args.iterations):
            print(report)
        return 0

    if args.find:
        if len(args.strings) not in (1, 2):
            parser.error("--find takes NEEDLE and an optional HAYSTACK")
        needle = args.strings[0]
        if len(args.strings) == 2:
            haystack = args.strings[1]
        else:
            haystack = config.cfg.demo.haystack
        for match in find_words(needle, haystack, args.threshold):
            print(match)
        return 0

    if len(args.strings) != 2:
        print(USAGE, file=sys.stderr)
        return 1
    a, b = args.strings
    logger.debug(f"Comparing {a!r} with {b!r}")
    print(similarity(a, b))
    return 0


if __name__ == "__main__":
    sys.exit(main())
