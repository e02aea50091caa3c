#!/usr/bin/env python3
"""
metacompare - Find pairs of works whose metadata is nearly the same.

Compares every pair of lines of a metadata file (author<TAB>title<TAB>
identifier) and writes a tab-separated report.  Intended as a cheap
pre-filter before comparing full texts.

Usage:
    metacompare raw    metadata.tsv distances.tsv
    metacompare decide metadata.tsv plan.tsv
    metacompare decide metadata.tsv plan.tsv 1 3
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .comparers import DistancesComparer, ThresholdComparer, compare_all_pairs
from .logging_config import setup_logging
from .output import DistancesOutput, IndexPairOutput, write_identifiers
from .records import MetadataFormatError, load_metadata

logger = logging.getLogger("metacompare")

DEFAULT_AUTHOR_THRESHOLD = 2
DEFAULT_TITLE_THRESHOLD = 2


def _threshold(value: str) -> int:
    """argparse type for a non-negative integer threshold."""
    try:
        result = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"threshold is not a valid number: {value!r}")
    if result < 0:
        raise argparse.ArgumentTypeError(
            f"{value} is not a valid threshold. Thresholds must be >= 0.")
    return result


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog='metacompare',
        description='Compare author and title of all pairs of works',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  raw     - one line per pair: first, second, author distance, title distance
  decide  - the identifiers (one per line), an empty line, then the pairs
            whose author and title distances are within the thresholds

Author distance is the edit distance between the names.  Title distance is
the word-level substring edit distance, in whichever direction is smaller.
"""
    )

    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument(
        'mode',
        choices=['raw', 'decide'],
        help='Output raw distances or decide which pairs to compare'
    )
    parser.add_argument(
        'metadata_file',
        help='Metadata input file (UTF-8, author<TAB>title<TAB>identifier)'
    )
    parser.add_argument(
        'output_file',
        help='Output file (created or truncated)'
    )
    parser.add_argument(
        'author_threshold',
        nargs='?',
        type=_threshold,
        help=f'Author threshold, inclusive (default: {DEFAULT_AUTHOR_THRESHOLD}; '
             'ignored in raw mode)'
    )
    parser.add_argument(
        'title_threshold',
        nargs='?',
        type=_threshold,
        help=f'Title threshold, inclusive (default: {DEFAULT_TITLE_THRESHOLD}; '
             'ignored in raw mode)'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Only log warnings and errors'
    )
    parser.add_argument(
        '--debug', '-d',
        action='store_true',
        help='Enable debug output'
    )

    return parser


def run_raw(records, file) -> int:
    """Write the distances of all pairs."""
    output = DistancesOutput(file)
    return compare_all_pairs(records, DistancesComparer(output), output)


def run_decide(records, file, author_threshold: int, title_threshold: int) -> int:
    """Write the identifiers, then the pairs within both thresholds."""
    write_identifiers(records, file)
    output = IndexPairOutput(file)
    comparer = ThresholdComparer(author_threshold, title_threshold, output)
    return compare_all_pairs(records, comparer, output)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if (args.author_threshold is None) != (args.title_threshold is None):
        parser.error('give both thresholds or neither')
    author_threshold = (DEFAULT_AUTHOR_THRESHOLD if args.author_threshold is None
                        else args.author_threshold)
    title_threshold = (DEFAULT_TITLE_THRESHOLD if args.title_threshold is None
                       else args.title_threshold)

    if args.debug:
        setup_logging(logging.DEBUG)
    elif args.quiet:
        setup_logging(logging.WARNING)
    else:
        setup_logging()

    try:
        records = load_metadata(args.metadata_file)
        with open(args.output_file, 'w', encoding='utf-8', newline='') as file:
            if args.mode == 'raw':
                pairs = run_raw(records, file)
            else:
                logger.info("Thresholds: author %d, title %d",
                            author_threshold, title_threshold)
                pairs = run_decide(records, file, author_threshold, title_threshold)
    except (OSError, MetadataFormatError) as e:
        logger.error("%s", e, exc_info=args.debug)
        return 1

    logger.info("Compared %d pairs, report written to %s", pairs, args.output_file)
    return 0


if __name__ == '__main__':
    sys.exit(main())
