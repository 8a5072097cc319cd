from ..document import Document, TokenKind
from ..models import Lint, LintKind
from .base import BaseRule

VOWELS = "aeiou"

# Prefixes whose pronunciation disagrees with their first letter
VOWEL_SOUND_PREFIXES = ("hour", "honest", "honor", "honour", "heir")
CONSONANT_SOUND_PREFIXES = ("uni", "use", "usu", "uti", "ur", "eu", "one", "once")


def starts_with_vowel_sound(word: str) -> bool:
    lowered = word.lower()
    if lowered.startswith(VOWEL_SOUND_PREFIXES):
        return True
    if lowered.startswith(CONSONANT_SOUND_PREFIXES):
        return False
    return lowered[:1] in VOWELS


class ArticleAgreementRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "W001"

    @property
    def name(self) -> str:
        return "article-agreement"

    @property
    def kind(self) -> LintKind:
        return LintKind.WORD_CHOICE

    @property
    def description(self) -> str:
        return "Checks 'a' versus 'an' against the sound of the following word."

    def check(self, document: Document) -> list[Lint]:
        lints = []
        tokens = document.tokens
        for index in range(len(tokens) - 2):
            article, space, word = tokens[index : index + 3]
            if not article.is_word or article.text.lower() not in ("a", "an"):
                continue
            if space.kind != TokenKind.SPACE or not word.is_word:
                continue
            # Acronyms are read letter by letter; skip them
            if word.text.isupper() and len(word.text) > 1:
                continue

            expected = "an" if starts_with_vowel_sound(word.text) else "a"
            if article.text.lower() == expected:
                continue
            if article.text[0].isupper():
                expected = expected.capitalize()
            lints.append(
                self._create_lint(
                    article.start,
                    article.end,
                    f'Use "{expected}" instead of "{article.text}" before "{word.text}".',
                )
            )
        return lints
