"""
Opening of the three endpoints of a run: input, document output and
suggestion output. The path ``-`` stands for stdin or stdout.
"""

import logging
import os
import stat
import sys
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import Iterator, Literal, TextIO

from .config import RunConfig
from .errors import DirectoryPathError, InputNotFoundError, NotRegularFileError, OpenError

STDIO_PATH = "-"

Mode = Literal["r", "w"]

logger = logging.getLogger(__name__)


@dataclass
class Streams:
    input: TextIO
    document: TextIO
    suggestions: TextIO


def resolve_stream(path: str, mode: Mode) -> TextIO:
    """Open ``path`` for reading or writing, or return the matching std stream."""
    reading = mode == "r"
    if path == STDIO_PATH:
        return sys.stdin if reading else sys.stdout

    try:
        st = os.stat(path)
    except FileNotFoundError as exc:
        if reading:
            raise InputNotFoundError(path, exc.strerror) from exc
        st = None
    except OSError as exc:
        raise OpenError(path, exc.strerror) from exc

    if st is not None:
        if stat.S_ISDIR(st.st_mode):
            raise DirectoryPathError(path)
        if reading and not stat.S_ISREG(st.st_mode):
            raise NotRegularFileError(path)

    # Lines end at "\n" only; a lone "\r" stays inside its line. Nothing is
    # translated either way, and surrogateescape keeps the echo byte-exact.
    newline = "\n" if reading else ""
    try:
        return open(path, mode, encoding="utf-8", errors="surrogateescape", newline=newline)
    except OSError as exc:
        raise OpenError(path, exc.strerror) from exc


@contextmanager
def open_streams(config: RunConfig) -> Iterator[Streams]:
    """Resolve input, document output and suggestion output in that order.

    Only handles opened here are closed on exit; stdin and stdout stay open.
    """
    with ExitStack() as stack:
        handles = []
        for path, mode in (
            (config.input_path, "r"),
            (config.output_path, "w"),
            (config.suggestion_path, "w"),
        ):
            handle = resolve_stream(path, mode)
            if path != STDIO_PATH:
                stack.callback(handle.close)
            logger.debug("Opened %s for %s", path, "reading" if mode == "r" else "writing")
            handles.append(handle)

        yield Streams(*handles)
