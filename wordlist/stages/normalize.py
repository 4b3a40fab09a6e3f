from __future__ import annotations

from typing import Iterable, Iterator


def normalized_key(word: str, ignore_case: bool) -> str:
    return word.lower() if ignore_case else word


def normalize_word(word: str, lower_case: bool) -> str:
    return word.lower() if lower_case else word


def lower_case_words(words: Iterable[str]) -> Iterator[str]:
    for w in words:
        yield normalize_word(w, True)
