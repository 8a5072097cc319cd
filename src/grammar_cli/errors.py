EXIT_OK = 0
EXIT_MISTAKES = 1
EXIT_USAGE = 1
EXIT_FATAL = 127


class GrammarLintError(Exception):
    """Base class for errors that end a run with a specific exit code"""

    exit_code = EXIT_FATAL


class UsageError(GrammarLintError):
    """Malformed invocation, e.g. more than one input file"""

    exit_code = EXIT_USAGE


class ExtraOperandError(UsageError):
    def __init__(self, operand: str):
        self.operand = operand
        super().__init__(f"{operand}: Extra operand")


class FatalError(GrammarLintError):
    """Resource or engine failure; the run stops immediately"""

    exit_code = EXIT_FATAL


class OpenError(FatalError):
    """A stream endpoint could not be opened"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class InputNotFoundError(OpenError):
    pass


class DirectoryPathError(OpenError):
    def __init__(self, path: str):
        super().__init__(path, "Is a directory")


class NotRegularFileError(OpenError):
    def __init__(self, path: str):
        super().__init__(path, "Not a regular file")


class DocumentCreationError(FatalError):
    def __init__(self):
        super().__init__("Failed to create document")


class LintGroupCreationError(FatalError):
    def __init__(self):
        super().__init__("Failed to create lint group")
