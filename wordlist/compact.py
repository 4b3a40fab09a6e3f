"""Prefix-sharing compaction of a sorted word list.

Each output line describes one word relative to the previous one: a run of
``<`` (one per character dropped from the end of the previous word) followed
by the characters to append. For sorted input this is a depth-first walk of
the word trie, so shared prefixes are written once::

    apple      apple
    apply      <y
    apt        <<<t
    banana     <<<banana

A literal ``<`` or ``\\`` in the appended part is written with a ``\\``
in front of it.
"""
from __future__ import annotations

import re
import typing as t

from wordlist.utils import get_logger

logger = get_logger(__name__)

BACKSPACE = "<"
ESCAPE = "\\"

_ESCAPED_RE = re.compile(r"\\(.)", re.DOTALL)


def _common_prefix_len(a: str, b: str) -> int:
    n = min(len(a), len(b))
    i = 0
    while i < n and a[i] == b[i]:
        i += 1
    return i


def _escape(text: str) -> str:
    return text.replace(ESCAPE, ESCAPE + ESCAPE).replace(BACKSPACE, ESCAPE + BACKSPACE)


def _unescape(text: str) -> str:
    return _ESCAPED_RE.sub(r"\1", text)


def trie_compact_sorted_word_list(words: t.Iterable[str]) -> t.Iterator[str]:
    # Input must already be sorted; this is not checked.
    prev = ""
    total = 0
    emitted = 0
    for w in words:
        total += 1
        if w == prev:
            continue
        k = _common_prefix_len(prev, w)
        yield BACKSPACE * (len(prev) - k) + _escape(w[k:])
        emitted += 1
        prev = w
    logger.info("compact: lines=%d from=%d", emitted, total)


def expand_compact(lines: t.Iterable[str]) -> t.Iterator[str]:
    word = ""
    for line in lines:
        # escaped text never starts with a bare "<", so the leading run is all backspaces
        drop = len(line) - len(line.lstrip(BACKSPACE))
        if drop:
            word = word[:-drop]
        word += _unescape(line[drop:])
        yield word
