"""
Per-line linting against the engine boundary.

Every engine handle is acquired through a context manager so that it is
released on all exit paths, including the fatal ones. Each call gets its own
document and lint group; nothing is shared between lines.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator

from .backend import LintBackend
from .errors import DocumentCreationError, LintGroupCreationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Finding:
    """One reported issue; UTF-8 byte offsets into the trimmed line"""

    start: int
    end: int
    message: str


@contextmanager
def document_scope(backend: LintBackend, text: str) -> Iterator[Any]:
    document = backend.create_document(text)
    if document is None:
        raise DocumentCreationError()
    try:
        yield document
    finally:
        backend.free_document(document)


@contextmanager
def lint_group_scope(backend: LintBackend) -> Iterator[Any]:
    group = backend.create_lint_group()
    if group is None:
        raise LintGroupCreationError()
    try:
        yield group
    finally:
        backend.free_lint_group(group)


@contextmanager
def lints_scope(backend: LintBackend, document: Any, group: Any) -> Iterator[list[Any]]:
    lints = backend.get_lints(document, group)
    if lints is None:
        yield []
        return
    try:
        yield lints
    finally:
        backend.free_lints(lints)


class LintPipeline:
    """Turns one trimmed line into an ordered list of findings"""

    def __init__(self, backend: LintBackend):
        self.backend = backend

    def lint(self, trimmed: str) -> list[Finding]:
        findings = []
        with document_scope(self.backend, trimmed) as document:
            with lint_group_scope(self.backend) as group:
                with lints_scope(self.backend, document, group) as lints:
                    for lint in lints:
                        finding = self._to_finding(lint)
                        if finding is not None:
                            findings.append(finding)
        return findings

    def _to_finding(self, lint: Any) -> Finding | None:
        message = self.backend.get_lint_message(lint)
        if not message:
            logger.debug("Skipping lint without a message")
            return None
        return Finding(
            start=self.backend.get_lint_start(lint),
            end=self.backend.get_lint_end(lint),
            message=message,
        )
