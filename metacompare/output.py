"""
metacompare.output — Line-oriented reports.

Every line is tab-separated and terminated by "\\n".  The index pair a
line refers to is loaded beforehand with set_first_index/set_second_index;
each index stays loaded until it is set again.

    raw report       first<TAB>second<TAB>author_distance<TAB>title_distance
    decide report    identifier lines, an empty line, then first<TAB>second
"""

from typing import Iterable, TextIO

from .records import MetadataLine


class IndexedOutput:
    """Holds the currently loaded index pair."""

    def __init__(self, file: TextIO):
        self.file = file
        self._first = ""
        self._second = ""

    def set_first_index(self, index: int) -> None:
        self._first = str(index)

    def set_second_index(self, index: int) -> None:
        self._second = str(index)


class DistancesOutput(IndexedOutput):
    """Writes the author and title distance of the loaded pair."""

    def write_distances(self, author_distance: int, title_distance: int) -> None:
        self.file.write(
            f"{self._first}\t{self._second}\t{author_distance}\t{title_distance}\n"
        )


class IndexPairOutput(IndexedOutput):
    """Writes the loaded pair, i.e. a pair whose full texts should be compared."""

    def write_index_pair(self) -> None:
        self.file.write(f"{self._first}\t{self._second}\n")


def write_identifiers(records: Iterable[MetadataLine], file: TextIO) -> None:
    """Header of a decide report: one identifier per line, then an empty line."""
    for record in records:
        file.write(record.identifier)
        file.write("\n")
    file.write("\n")
