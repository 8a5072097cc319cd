from abc import ABC, abstractmethod

from ..document import Document
from ..models import Lint, LintKind


class BaseRule(ABC):
    """Abstract base class for all grammar rules."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'S001', 'R001', 'W001')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule name (e.g., 'repeated-word')."""
        pass

    @property
    @abstractmethod
    def kind(self) -> LintKind:
        """Category reported with every lint of this rule."""
        pass

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return ""

    @abstractmethod
    def check(self, document: Document) -> list[Lint]:
        """Run the check and return found lints."""
        pass

    # Helper method for consistent lint creation
    def _create_lint(self, start: int, end: int, message: str) -> Lint:
        """Helper to create a lint with rule defaults."""
        return Lint(
            start=start,
            end=end,
            message=message,
            rule_id=self.rule_id,
            kind=self.kind,
        )
