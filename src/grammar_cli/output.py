from typing import TextIO

from .config import RunConfig
from .lines import LineRecord
from .pipeline import Finding


def format_suggestion(record: LineRecord, finding: Finding, config: RunConfig) -> str:
    """Render one suggestion line, e.g. ``3:5 'dont': message``.

    Finding offsets are UTF-8 byte offsets into the trimmed line, so the
    column is the byte offset plus one.
    """
    encoded = record.trimmed.encode("utf-8", "surrogateescape")
    matched = encoded[finding.start : finding.end].decode("utf-8", "replace")
    if config.number_lines:
        return (
            f"{config.delimiter}{record.number}:{finding.start + 1} "
            f"'{matched}': {finding.message}\n"
        )
    return f"{config.delimiter}'{matched}': {finding.message}\n"


class OutputMultiplexer:
    """Routes each line to the document stream and its findings to the suggestion stream"""

    def __init__(self, config: RunConfig, document_stream: TextIO, suggestion_stream: TextIO):
        self.config = config
        self.document_stream = document_stream
        self.suggestion_stream = suggestion_stream

    def emit(self, record: LineRecord, findings: list[Finding]) -> int:
        """Write what the verbosity allows and return the mistakes counted for this line."""
        if self.config.echoes_document:
            self.document_stream.write(record.raw)
            self.document_stream.flush()

        if self.config.prints_suggestions and findings:
            for finding in findings:
                self.suggestion_stream.write(format_suggestion(record, finding, self.config))
            self.suggestion_stream.flush()

        # Counted whatever the verbosity
        return len(findings)
