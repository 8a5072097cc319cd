import pytest

from grammar_cli.config import RunConfig, Verbosity
from grammar_cli.errors import DocumentCreationError
from grammar_cli.runner import run

TEXT = "Hello world\nShe dont like apples\n\nShe dont like apples"


@pytest.fixture
def paths(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text(TEXT)
    return source, tmp_path / "doc.txt", tmp_path / "sug.txt"


def _config(paths, **kwargs):
    source, doc, sug = paths
    return RunConfig(input_path=str(source), output_path=str(doc), suggestion_path=str(sug), **kwargs)


def test_echo_is_verbatim(paths, make_backend):
    status = run(_config(paths), make_backend())

    assert paths[1].read_text() == TEXT
    assert paths[2].read_text() == ""
    assert status.exit_code == 0
    assert status.lines == 4


@pytest.mark.parametrize("verbosity", list(Verbosity))
def test_mistakes_independent_of_verbosity(paths, dont_backend, verbosity):
    status = run(_config(paths, verbosity=verbosity), dont_backend)

    assert status.mistakes == 2
    assert status.exit_code == 1
    assert dont_backend.all_released


def test_numbered_suggestions_across_lines(paths, dont_backend):
    run(_config(paths, number_lines=True), dont_backend)

    assert paths[2].read_text() == (
        "2:5 'dont': subject-verb agreement\n"
        "4:5 'dont': subject-verb agreement\n"
    )


def test_fatal_error_keeps_earlier_output(paths, make_backend):
    backend = make_backend(fail_document_at=3)

    with pytest.raises(DocumentCreationError):
        run(_config(paths), backend)

    assert paths[1].read_text() == "Hello world\nShe dont like apples\n"
    assert backend.documents_created == 3
    assert backend.all_released


def test_lone_carriage_return_keeps_line_numbers(tmp_path, dont_backend):
    source = tmp_path / "in.txt"
    source.write_bytes(b"ok\rfine\nShe dont like apples\n")
    doc, sug = tmp_path / "doc.txt", tmp_path / "sug.txt"

    status = run(
        RunConfig(input_path=str(source), output_path=str(doc), suggestion_path=str(sug), number_lines=True),
        dont_backend,
    )

    assert status.lines == 2
    assert sug.read_text() == "2:5 'dont': subject-verb agreement\n"
    assert doc.read_bytes() == b"ok\rfine\nShe dont like apples\n"
