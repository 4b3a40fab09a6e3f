from __future__ import annotations

from typing import Callable, Iterable, Iterator, List

from wordlist.utils import get_logger

logger = get_logger(__name__)


def sort_key(ignore_case: bool) -> Callable[[str], str]:
    return str.lower if ignore_case else str


def buffer_words(words: Iterable[str]) -> List[str]:
    """Read the whole input into memory.

    This is the only point where the pipeline stops streaming: nothing
    downstream sees a word until the source is exhausted.
    """
    buf = list(words)
    logger.info("sort: buffered=%d", len(buf))
    return buf


def sort_words(words: Iterable[str], ignore_case: bool = False) -> Iterator[str]:
    # Words equal under ignore_case keep their input order (list.sort is stable);
    # no secondary key is applied.
    buf = buffer_words(words)
    buf.sort(key=sort_key(ignore_case))
    yield from buf
