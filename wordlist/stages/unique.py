from __future__ import annotations

from typing import Iterable, Iterator, Set

from wordlist.stages.normalize import normalized_key
from wordlist.utils import get_logger

logger = get_logger(__name__)


def make_unique(words: Iterable[str], ignore_case: bool = False) -> Iterator[str]:
    """Yield the first occurrence of each distinct word, in input order.

    With ``ignore_case`` two words are the same when their lower-cased forms
    match; the first spelling seen is the one kept. The seen set lives only as
    long as this generator and grows with the number of distinct words.
    """
    seen: Set[str] = set()
    total = 0
    for w in words:
        total += 1
        key = normalized_key(w, ignore_case)
        if key in seen:
            continue
        seen.add(key)
        yield w
    logger.info("unique: kept=%d from=%d (ignore_case=%s)", len(seen), total, ignore_case)
