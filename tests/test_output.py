import io

import pytest

from grammar_cli.config import RunConfig, Verbosity
from grammar_cli.lines import LineRecord
from grammar_cli.output import OutputMultiplexer, format_suggestion
from grammar_cli.pipeline import Finding

RECORD = LineRecord(3, "  She dont like apples\n", "She dont like apples")
FINDING = Finding(4, 8, "subject-verb agreement")


def _emit(config, findings):
    doc, sug = io.StringIO(), io.StringIO()
    mistakes = OutputMultiplexer(config, doc, sug).emit(RECORD, findings)
    return doc.getvalue(), sug.getvalue(), mistakes


def test_plain_suggestion():
    assert format_suggestion(RECORD, FINDING, RunConfig()) == "'dont': subject-verb agreement\n"


def test_numbered_suggestion_uses_trimmed_offsets():
    config = RunConfig(number_lines=True)
    assert format_suggestion(RECORD, FINDING, config) == "3:5 'dont': subject-verb agreement\n"


def test_delimiter_prefix():
    config = RunConfig(delimiter=">> ")
    assert format_suggestion(RECORD, FINDING, config) == ">> 'dont': subject-verb agreement\n"


def test_empty_span():
    finding = Finding(3, 3, "missing word")
    assert format_suggestion(RECORD, finding, RunConfig()) == "'': missing word\n"


@pytest.mark.parametrize(
    "verbosity, expected_doc, expected_sug",
    [
        (Verbosity.NORMAL, RECORD.raw, "'dont': subject-verb agreement\n"),
        (Verbosity.QUIET, RECORD.raw, ""),
        (Verbosity.SILENT, "", ""),
    ],
)
def test_verbosity_gates_streams(verbosity, expected_doc, expected_sug):
    doc, sug, mistakes = _emit(RunConfig(verbosity=verbosity), [FINDING])

    assert doc == expected_doc
    assert sug == expected_sug
    assert mistakes == 1


def test_clean_line_only_echoes():
    doc, sug, mistakes = _emit(RunConfig(), [])

    assert doc == RECORD.raw
    assert sug == ""
    assert mistakes == 0


def test_shared_stream_keeps_line_order():
    shared = io.StringIO()
    output = OutputMultiplexer(RunConfig(), shared, shared)

    output.emit(RECORD, [FINDING])

    assert shared.getvalue() == RECORD.raw + "'dont': subject-verb agreement\n"


def test_numbered_column_counts_bytes():
    record = LineRecord(1, "café dont\n", "café dont")
    finding = Finding(6, 10, "subject-verb agreement")

    line = format_suggestion(record, finding, RunConfig(number_lines=True))

    assert line == "1:7 'dont': subject-verb agreement\n"


def test_matched_text_can_be_multibyte():
    record = LineRecord(1, "naïve\n", "naïve")
    finding = Finding(0, 6, "spelling")

    assert format_suggestion(record, finding, RunConfig()) == "'naïve': spelling\n"
