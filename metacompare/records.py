"""
metacompare.records — Metadata lines and title words.

Input format: one work per line, UTF-8,

    author<TAB>title<TAB>identifier

where the identifier is the file name of the work's full text.  The
position of a line in the file (0-based) is the index used in reports.
"""

import io
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MetadataLine:
    """Author, title and full-text identifier of a single work."""
    author: str
    title: str
    identifier: str


class MetadataFormatError(ValueError):
    """A metadata line is not valid UTF-8 or does not have exactly three
    tab-separated fields."""

    def __init__(self, line: str, line_number: Optional[int] = None,
                 reason: str = "has wrong format"):
        self.line = line
        self.line_number = line_number
        self.reason = reason
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"{where} {reason}: {line!r}")


# ═══════════════════════════════════════════════════════════════════
#  PARSING
# ═══════════════════════════════════════════════════════════════════

_LINE_END = re.compile(rb"\r\n|\r|\n")


def parse_line(line: str, line_number: Optional[int] = None) -> MetadataLine:
    """
    Parse one `author<TAB>title<TAB>identifier` line.

    One trailing line terminator is ignored.  Fields may be empty, but
    there must be exactly two tabs.
    """
    fields = line.removesuffix("\n").removesuffix("\r").split("\t")
    if len(fields) != 3:
        raise MetadataFormatError(line, line_number)
    return MetadataLine(*fields)


def _decode(data: bytes) -> str:
    """Decode a whole file, reporting the first undecodable line."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        ends = list(_LINE_END.finditer(data, 0, e.start))
        start = ends[-1].end() if ends else 0
        following = _LINE_END.search(data, e.start)
        end = following.start() if following else len(data)
        line = data[start:end].decode("utf-8", "backslashreplace")
        raise MetadataFormatError(line, len(ends) + 1,
                                  reason="is not valid UTF-8") from e


def load_metadata(path: Union[str, Path]) -> list[MetadataLine]:
    """Read all metadata lines of a UTF-8 file, in file order."""
    path = Path(path)
    text = _decode(path.read_bytes())
    # Universal newlines, as when reading the file in text mode
    lines = io.StringIO(text, newline=None)
    records = [parse_line(line, line_number)
               for line_number, line in enumerate(lines, 1)]
    logger.info("Loaded %d metadata lines from %s", len(records), path)
    return records


# ═══════════════════════════════════════════════════════════════════
#  TITLE WORDS
# ═══════════════════════════════════════════════════════════════════

# Unicode general category Z: space (Zs), line (Zl) and paragraph (Zp)
# separators, as of Unicode 15.1 (unchanged since 6.3).
_SEPARATORS = re.compile(
    "[\u0020\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def split_title(title: str) -> list[str]:
    """
    Split a title into words at runs of Unicode separator characters.

        split_title("The  Great Novel") → ["The", "Great", "Novel"]

    Empty words (from leading or trailing separators) are dropped; they
    would cost nothing to insert or delete anyway.
    """
    return [word for word in _SEPARATORS.split(title) if word]
