from collections.abc import Iterable

from .rules.base import BaseRule


class RuleRegistry:
    """Registry for managing and loading grammar rules"""

    def __init__(self):
        self._rules: list[BaseRule] = []
        self._load_builtin_rules()

    def register(self, rule: BaseRule):
        self._rules.append(rule)

    def get_all_rules(self) -> list[BaseRule]:
        return self._rules

    def get_enabled_rules(
        self, select: Iterable[str] | None = None, ignore: Iterable[str] | None = None
    ) -> list[BaseRule]:
        """Filter rules by rule-id prefix or exact rule name.

        An empty or missing ``select`` enables every rule; ``ignore`` always wins.
        """
        select = list(select or [])
        ignore = list(ignore or [])
        return [
            rule
            for rule in self._rules
            if (not select or _matches(rule, select)) and not _matches(rule, ignore)
        ]

    def _load_builtin_rules(self):
        from .rules.article_rules import ArticleAgreementRule
        from .rules.spelling_rules import CommonMisspellingRule, MissingApostropheRule
        from .rules.style_rules import (
            RepeatedSpaceRule,
            RepeatedWordRule,
            SentenceCapitalizationRule,
        )

        self.register(CommonMisspellingRule())
        self.register(MissingApostropheRule())
        self.register(RepeatedWordRule())
        self.register(RepeatedSpaceRule())
        self.register(SentenceCapitalizationRule())
        self.register(ArticleAgreementRule())


def _matches(rule: BaseRule, patterns: list[str]) -> bool:
    return any(rule.rule_id.startswith(p) or rule.name == p for p in patterns)


registry = RuleRegistry()
