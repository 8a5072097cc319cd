from .article_rules import ArticleAgreementRule
from .base import BaseRule
from .spelling_rules import CommonMisspellingRule, MissingApostropheRule
from .style_rules import RepeatedSpaceRule, RepeatedWordRule, SentenceCapitalizationRule

__all__ = [
    "ArticleAgreementRule",
    "BaseRule",
    "CommonMisspellingRule",
    "MissingApostropheRule",
    "RepeatedSpaceRule",
    "RepeatedWordRule",
    "SentenceCapitalizationRule",
]
