"""
metacompare — Near-duplicate detection on author/title metadata
===============================================================

A cheap pre-filter before comparing full texts: which works in a corpus
have (almost) the same author and (almost) the same title?

    edit_distance("Jane Doe", "Jane Do")                       → 1
    edit_distance("\\U0001F600", "a")                            → 1  (code points)
    title_word_distance(["Great"], ["The", "Great", "Novel"])  → 0  (contained)

Two distances do the work:
  • Classical edit distance, over code points, for author names.
  • Substring edit distance, over words with pluggable costs, for titles:
    the cheapest way to turn one word sequence into a window of the other.
"""

from metacompare.core import (
    code_point_count,
    edit_distance,
    substring_edit_distance,
    symmetric_substring_edit_distance,
    title_word_distance,
)
from metacompare.records import (
    MetadataLine, MetadataFormatError, parse_line, load_metadata, split_title,
)
from metacompare.comparers import (
    author_distance, title_distance,
    MetadataComparer, DistancesComparer, ThresholdComparer, compare_all_pairs,
)
from metacompare.output import DistancesOutput, IndexPairOutput, write_identifiers

__version__ = "0.1.0"
__all__ = [
    "code_point_count", "edit_distance",
    "substring_edit_distance", "symmetric_substring_edit_distance",
    "title_word_distance",
    "MetadataLine", "MetadataFormatError", "parse_line", "load_metadata",
    "split_title",
    "author_distance", "title_distance",
    "MetadataComparer", "DistancesComparer", "ThresholdComparer",
    "compare_all_pairs",
    "DistancesOutput", "IndexPairOutput", "write_identifiers",
]
