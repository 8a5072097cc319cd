from ..document import Document, TokenKind
from ..models import Lint, LintKind
from .base import BaseRule

SENTENCE_TERMINATORS = ".!?"
ABBREVIATIONS = {"etc", "vs", "mr", "mrs", "ms", "dr", "st", "cf", "approx"}


class RepeatedWordRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "R001"

    @property
    def name(self) -> str:
        return "repeated-word"

    @property
    def kind(self) -> LintKind:
        return LintKind.REPETITION

    @property
    def description(self) -> str:
        return "Flags a word immediately repeated, e.g. 'the the'."

    def check(self, document: Document) -> list[Lint]:
        lints = []
        for index, token in enumerate(document.tokens):
            if not token.is_word:
                continue
            previous = document.previous_word(index)
            if previous and previous.text.lower() == token.text.lower():
                lints.append(
                    self._create_lint(
                        token.start,
                        token.end,
                        f'The word "{token.text}" is repeated.',
                    )
                )
        return lints


class RepeatedSpaceRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "F001"

    @property
    def name(self) -> str:
        return "repeated-space"

    @property
    def kind(self) -> LintKind:
        return LintKind.FORMATTING

    def check(self, document: Document) -> list[Lint]:
        lints = []
        tokens = document.tokens
        for index, token in enumerate(tokens):
            if token.kind != TokenKind.SPACE or len(token.text) < 2:
                continue
            if set(token.text) != {" "}:
                continue
            # Only between two other tokens; edges belong to the caller's trimming
            if 0 < index < len(tokens) - 1:
                lints.append(
                    self._create_lint(
                        token.start, token.end, "Use a single space between words."
                    )
                )
        return lints


class SentenceCapitalizationRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "C001"

    @property
    def name(self) -> str:
        return "sentence-capitalization"

    @property
    def kind(self) -> LintKind:
        return LintKind.CAPITALIZATION

    @property
    def description(self) -> str:
        return (
            "Flags a lowercase word opening a sentence inside a line. The first "
            "word of a line is not checked, since lines often continue a paragraph."
        )

    def check(self, document: Document) -> list[Lint]:
        lints = []
        tokens = document.tokens
        for index in range(len(tokens) - 2):
            terminator, space, word = tokens[index : index + 3]
            if terminator.kind != TokenKind.PUNCTUATION:
                continue
            if terminator.text not in SENTENCE_TERMINATORS:
                continue
            if space.kind != TokenKind.SPACE or not word.is_word:
                continue
            if not word.text[0].islower():
                continue

            before = document.previous_word(index)
            if before and (len(before.text) == 1 or before.text.lower() in ABBREVIATIONS):
                continue

            capitalized = word.text[0].upper() + word.text[1:]
            lints.append(
                self._create_lint(
                    word.start,
                    word.end,
                    f'Sentences should start with a capital letter: "{capitalized}".',
                )
            )
        return lints
