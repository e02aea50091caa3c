"""
metacompare.comparers — Pairwise comparison of metadata lines.

An all-pairs comparison loads one line and compares it with every line
before it:

    for j in 1 .. n-1:
        load(records[j])
        for i in 0 .. j-1:
            compare_with(records[i])

so the loaded title is split into words once per j, not once per pair.
"""

import logging
from typing import Callable, Optional, Sequence

from .core import edit_distance, title_word_distance
from .output import DistancesOutput, IndexedOutput, IndexPairOutput
from .records import MetadataLine, split_title

logger = logging.getLogger(__name__)

TitleSplitter = Callable[[str], Sequence[str]]


# ═══════════════════════════════════════════════════════════════════
#  FIELD DISTANCES
# ═══════════════════════════════════════════════════════════════════

def author_distance(author: str, loaded_author: str) -> int:
    """Edit distance between two author names (0 without work if equal)."""
    if author == loaded_author:
        return 0
    return edit_distance(author, loaded_author)


def title_distance(title: str, words: Sequence[str],
                   loaded_title: str, loaded_words: Sequence[str]) -> int:
    """
    Symmetric word-level substring edit distance between two titles.

    Either title may be the one contained in the other, so both
    directions are computed and the smaller one wins.
    """
    if title == loaded_title:
        return 0
    return min(
        title_word_distance(words, loaded_words),
        title_word_distance(loaded_words, words),
    )


# ═══════════════════════════════════════════════════════════════════
#  COMPARERS
# ═══════════════════════════════════════════════════════════════════

class MetadataComparer:
    """
    Compares many metadata lines with one loaded line.

    Subclasses implement compare_with().
    """

    def __init__(self, splitter: TitleSplitter = split_title):
        self.splitter = splitter
        self._author: Optional[str] = None
        self._title: Optional[str] = None
        self._words: Sequence[str] = ()

    def load(self, record: MetadataLine) -> None:
        """Load the line that subsequent compare_with() calls compare against."""
        self._author = record.author
        self._title = record.title
        self._words = self.splitter(record.title)

    def compare_with(self, record: MetadataLine) -> None:
        raise NotImplementedError


class DistancesComparer(MetadataComparer):
    """Computes both distances of every pair and writes them out."""

    def __init__(self, output: DistancesOutput,
                 splitter: TitleSplitter = split_title):
        super().__init__(splitter)
        self.output = output

    def compare_with(self, record: MetadataLine) -> None:
        if record.title == self._title:
            title = 0
        else:
            title = title_distance(record.title, self.splitter(record.title),
                                   self._title, self._words)
        self.output.write_distances(
            author_distance(record.author, self._author), title)


class ThresholdComparer(MetadataComparer):
    """
    Writes the pairs whose author AND title distance are within the
    thresholds.

    Thresholds are inclusive: with author threshold 2 and title
    threshold 3, a pair with distances (2, 3) is written.

    A pair whose author distance is already too large is rejected
    without computing its title distance, and the second title direction
    is only computed if the first one is too large.
    """

    def __init__(self, author_threshold: int, title_threshold: int,
                 output: IndexPairOutput,
                 splitter: TitleSplitter = split_title):
        super().__init__(splitter)
        if author_threshold < 0:
            raise ValueError(
                f"Author threshold ({author_threshold}) has to be at least 0.")
        if title_threshold < 0:
            raise ValueError(
                f"Title threshold ({title_threshold}) has to be at least 0.")
        self.author_threshold = author_threshold
        self.title_threshold = title_threshold
        self.output = output

    def compare_with(self, record: MetadataLine) -> None:
        if self._author_ok(record) and self._title_ok(record):
            self.output.write_index_pair()

    def _author_ok(self, record: MetadataLine) -> bool:
        return author_distance(record.author, self._author) <= self.author_threshold

    def _title_ok(self, record: MetadataLine) -> bool:
        if record.title == self._title:
            return True
        words = self.splitter(record.title)
        return (title_word_distance(words, self._words) <= self.title_threshold
                or title_word_distance(self._words, words) <= self.title_threshold)


# ═══════════════════════════════════════════════════════════════════
#  ALL PAIRS
# ═══════════════════════════════════════════════════════════════════

def compare_all_pairs(records: Sequence[MetadataLine],
                      comparer: MetadataComparer,
                      output: IndexedOutput) -> int:
    """
    Compare every pair (i, j) with i < j, in the order
    (0,1), (0,2), (1,2), (0,3), ...

    Returns the number of pairs compared.
    """
    n = len(records)
    pairs = 0
    for j in range(1, n):
        output.set_second_index(j)
        comparer.load(records[j])
        for i in range(j):
            output.set_first_index(i)
            comparer.compare_with(records[i])
        pairs += j
        logger.debug("Compared line %d with %d earlier lines", j, j)
    return pairs
