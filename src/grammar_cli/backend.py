from typing import Any, Protocol


class LintBackend(Protocol):
    """Protocol for the grammar engine consumed by the lint pipeline.

    Handles are opaque to the caller; every handle returned must be passed
    back to the matching ``free_*`` method.
    """

    def create_document(self, text: str) -> Any | None: ...

    def create_lint_group(self) -> Any | None: ...

    def get_lints(self, document: Any, group: Any) -> list[Any] | None: ...

    def get_lint_message(self, lint: Any) -> str | None: ...

    def get_lint_start(self, lint: Any) -> int: ...

    def get_lint_end(self, lint: Any) -> int: ...

    def free_lints(self, lints: list[Any]) -> None: ...

    def free_lint_group(self, group: Any) -> None: ...

    def free_document(self, document: Any) -> None: ...

    def lib_version(self) -> str: ...

    def core_version(self) -> str: ...
