import logging

from .backend import LintBackend
from .config import RunConfig
from .lines import iter_lines
from .output import OutputMultiplexer
from .pipeline import LintPipeline
from .status import RunStatus
from .streams import open_streams

logger = logging.getLogger(__name__)


def run(config: RunConfig, backend: LintBackend) -> RunStatus:
    """Lint the input line by line and write both output streams.

    Raises FatalError subclasses on stream or engine failure; output already
    written for earlier lines is left in place.
    """
    status = RunStatus()
    with open_streams(config) as streams:
        pipeline = LintPipeline(backend)
        output = OutputMultiplexer(config, streams.document, streams.suggestions)

        for record in iter_lines(streams.input):
            findings = pipeline.lint(record.trimmed)
            logger.debug("Line %d: %d finding(s)", record.number, len(findings))
            status.record(output.emit(record, findings))

    logger.debug("Checked %d line(s), %d mistake(s)", status.lines, status.mistakes)
    return status
