from __future__ import annotations

import os
from typing import Iterator

from wordlist.errors import SourceError
from wordlist.utils import get_logger

logger = get_logger(__name__)


def _iter_lines(path: str) -> Iterator[str]:
    n = 0
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            n += 1
            yield line
    logger.info("line_reader: words=%d path=%s", n, path)


def read_lines(path: str) -> Iterator[str]:
    """Lazily yield the trimmed, non-empty lines of a UTF-8 word-list file."""
    if not os.path.isfile(path):
        raise SourceError(f"Word list not found: {path}")
    return _iter_lines(path)
