from dataclasses import dataclass
from enum import Enum


class LintKind(str, Enum):
    SPELLING = "Spelling"
    CAPITALIZATION = "Capitalization"
    REPETITION = "Repetition"
    FORMATTING = "Formatting"
    WORD_CHOICE = "WordChoice"


@dataclass
class Lint:
    """A single problem found in a document, as a half-open span"""

    start: int
    end: int
    message: str
    rule_id: str
    kind: LintKind
    released: bool = False

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)
