"""
Handle-based entry points of the grammar engine.

Callers create a document and a lint group, ask for lints, read each lint's
message and span, and then release every handle they were given. A released
handle must not be used again; doing so raises ``ReleasedHandleError``.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .document import Document
from .models import Lint
from .rules.base import BaseRule

LIB_VERSION = "0.3.0"
CORE_VERSION = "0.3.0"

logger = logging.getLogger(__name__)


class ReleasedHandleError(RuntimeError):
    """Raised when a document, lint group or lint is used after release"""


@dataclass
class LintGroup:
    """A rule-evaluation session; holds its own rule instances"""

    rules: list[BaseRule] = field(default_factory=list)
    released: bool = False


def _ensure_live(handle, what: str):
    if handle.released:
        raise ReleasedHandleError(f"{what} used after release")


class GrammarEngine:
    """Core engine for grammar linting"""

    def __init__(self, rules: Sequence[BaseRule] | None = None):
        if rules is None:
            from .registry import registry

            rules = registry.get_all_rules()
        self._rule_types = [type(rule) for rule in rules]
        logger.debug("Enabled rules: %s", ", ".join(self.rule_ids) or "none")

    @property
    def rule_ids(self) -> list[str]:
        return [rule_type().rule_id for rule_type in self._rule_types]

    def create_document(self, text: str) -> Document | None:
        try:
            return Document.parse(text)
        except ValueError as exc:
            logger.debug("Rejected document text: %s", exc)
            return None

    def create_lint_group(self) -> LintGroup | None:
        # Fresh rule instances so nothing carries over between groups
        return LintGroup(rules=[rule_type() for rule_type in self._rule_types])

    def get_lints(self, document: Document, group: LintGroup) -> list[Lint] | None:
        """Run every rule of ``group`` over ``document``.

        Spans are reported as UTF-8 byte offsets into the document text.
        Returns None when the document has nothing to check.
        """
        _ensure_live(document, "document")
        _ensure_live(group, "lint group")
        if not document.tokens:
            return None

        lints = []
        for rule in group.rules:
            lints.extend(rule.check(document))
        for lint in lints:
            lint.start = document.byte_offset(lint.start)
            lint.end = document.byte_offset(lint.end)
        return sorted(lints, key=lambda x: (x.start, x.end))

    def get_lint_message(self, lint: Lint) -> str | None:
        _ensure_live(lint, "lint")
        return lint.message or None

    def get_lint_start(self, lint: Lint) -> int:
        _ensure_live(lint, "lint")
        return lint.start

    def get_lint_end(self, lint: Lint) -> int:
        _ensure_live(lint, "lint")
        return lint.end

    def free_lints(self, lints: list[Lint]):
        for lint in lints:
            lint.released = True

    def free_lint_group(self, group: LintGroup):
        group.released = True
        group.rules = []

    def free_document(self, document: Document):
        document.released = True

    def lib_version(self) -> str:
        return LIB_VERSION

    def core_version(self) -> str:
        return CORE_VERSION
