from ..document import Document
from ..models import Lint, LintKind
from .base import BaseRule

COMMON_MISSPELLINGS = {
    "acommodate": "accommodate",
    "alot": "a lot",
    "definately": "definitely",
    "occured": "occurred",
    "recieve": "receive",
    "seperate": "separate",
    "teh": "the",
    "thier": "their",
    "untill": "until",
    "wich": "which",
}

# Contractions commonly typed without their apostrophe
MISSING_APOSTROPHES = {
    "arent": "aren't",
    "cant": "can't",
    "couldnt": "couldn't",
    "didnt": "didn't",
    "doesnt": "doesn't",
    "dont": "don't",
    "hasnt": "hasn't",
    "havent": "haven't",
    "isnt": "isn't",
    "shouldnt": "shouldn't",
    "wasnt": "wasn't",
    "werent": "weren't",
    "wont": "won't",
    "wouldnt": "wouldn't",
}


def _match_case(replacement: str, original: str) -> str:
    if original.isupper() and len(original) > 1:
        return replacement.upper()
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


class CommonMisspellingRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "S001"

    @property
    def name(self) -> str:
        return "common-misspelling"

    @property
    def kind(self) -> LintKind:
        return LintKind.SPELLING

    @property
    def description(self) -> str:
        return "Flags frequently misspelled English words."

    def check(self, document: Document) -> list[Lint]:
        lints = []
        for word in document.words():
            correct = COMMON_MISSPELLINGS.get(word.text.lower())
            if correct:
                lints.append(
                    self._create_lint(
                        word.start,
                        word.end,
                        f'Did you mean "{_match_case(correct, word.text)}"?',
                    )
                )
        return lints


class MissingApostropheRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "S002"

    @property
    def name(self) -> str:
        return "missing-apostrophe"

    @property
    def kind(self) -> LintKind:
        return LintKind.SPELLING

    def check(self, document: Document) -> list[Lint]:
        lints = []
        for word in document.words():
            contraction = MISSING_APOSTROPHES.get(word.text.lower())
            if contraction:
                lints.append(
                    self._create_lint(
                        word.start,
                        word.end,
                        f'Missing apostrophe; did you mean "{_match_case(contraction, word.text)}"?',
                    )
                )
        return lints
