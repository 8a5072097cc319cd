from dataclasses import dataclass
from typing import Iterator, TextIO

# isspace() in the C locale
WHITESPACE = " \t\n\v\f\r"


@dataclass(frozen=True)
class LineRecord:
    number: int
    raw: str
    trimmed: str


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


def iter_lines(handle: TextIO) -> Iterator[LineRecord]:
    """Yield each line of ``handle`` with its 1-based number until end of stream."""
    number = 0
    for raw in handle:
        number += 1
        yield LineRecord(number=number, raw=raw, trimmed=trim(raw))
