from __future__ import annotations

import io
import os
import sys
import typing as t
from contextlib import contextmanager

from wordlist.errors import OutputError
from wordlist.utils import get_logger

logger = get_logger(__name__)


@contextmanager
def open_output(path: t.Optional[str] = None) -> t.Iterator[t.TextIO]:
    """Open the destination for writing.

    No path means stdout, written as UTF-8 and left open on exit. For a file
    path the parent directory is created first; any failure raises
    `OutputError` before a single line is written.
    """
    if not path:
        # Words go out as UTF-8 with bare "\n" whatever the console locale is
        sys.stdout.flush()
        out = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", newline="\n")
        try:
            yield out
        finally:
            out.flush()
            out.detach()
        return

    parent = os.path.dirname(path)
    try:
        if parent:
            os.makedirs(parent, exist_ok=True)
        f = open(path, "w", encoding="utf-8", newline="\n")
    except OSError as e:
        raise OutputError(f"Cannot open output {path}: {e}") from e

    logger.info("output opened path=%s", path)
    with f:
        yield f


def write_lines(lines: t.Iterable[str], stream: t.TextIO) -> int:
    n = 0
    for line in lines:
        stream.write(line)
        n += 1
    return n


def write_words(words: t.Iterable[str], stream: t.TextIO) -> int:
    """Write one word per line, each followed by a newline."""
    return write_lines((w + "\n" for w in words), stream)
