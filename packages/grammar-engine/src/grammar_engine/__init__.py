"""
Rule-based grammar and style checking for short pieces of English text.
"""

from .document import Document, Token, TokenKind
from .engine import CORE_VERSION, LIB_VERSION, GrammarEngine, LintGroup, ReleasedHandleError
from .models import Lint, LintKind
from .registry import RuleRegistry, registry

__version__ = LIB_VERSION

__all__ = [
    "CORE_VERSION",
    "Document",
    "GrammarEngine",
    "LIB_VERSION",
    "Lint",
    "LintGroup",
    "LintKind",
    "ReleasedHandleError",
    "RuleRegistry",
    "Token",
    "TokenKind",
    "registry",
]
