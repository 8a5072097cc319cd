"""
Tokenized representation of one piece of text handed to the engine.
"""

import re
from dataclasses import dataclass, field
from enum import Enum


class TokenKind(str, Enum):
    WORD = "word"
    NUMBER = "number"
    PUNCTUATION = "punctuation"
    SPACE = "space"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    start: int
    end: int
    text: str

    @property
    def is_word(self) -> bool:
        return self.kind == TokenKind.WORD


_TOKEN_PATTERN = re.compile(
    r"(?P<word>[^\W\d_]+(?:'[^\W\d_]+)*)"
    r"|(?P<number>\d+(?:[.,]\d+)*)"
    r"|(?P<space>\s+)"
    r"|(?P<punctuation>.)",
    re.DOTALL,
)


@dataclass
class Document:
    """Text plus its token stream; offsets index into ``text``"""

    text: str
    tokens: list[Token] = field(default_factory=list)
    released: bool = False

    @classmethod
    def parse(cls, text: str) -> "Document":
        """Tokenize ``text``. Raises ValueError for text the engine cannot accept.

        Text after an embedded NUL is dropped, as a C string would end there.
        """
        text = text.split("\x00", 1)[0]
        # Lone surrogates (undecodable input bytes) are not valid UTF-8
        text.encode("utf-8")

        tokens = []
        for match in _TOKEN_PATTERN.finditer(text):
            tokens.append(
                Token(
                    kind=TokenKind(match.lastgroup),
                    start=match.start(),
                    end=match.end(),
                    text=match.group(),
                )
            )
        return cls(text=text, tokens=tokens)

    def words(self) -> list[Token]:
        return [t for t in self.tokens if t.is_word]

    def previous_word(self, index: int) -> Token | None:
        """Nearest word before ``tokens[index]``, skipping whitespace only."""
        for token in reversed(self.tokens[:index]):
            if token.is_word:
                return token
            if token.kind != TokenKind.SPACE:
                return None
        return None

    def byte_offset(self, index: int) -> int:
        """UTF-8 byte offset of the character at ``index``."""
        return len(self.text[:index].encode("utf-8"))
