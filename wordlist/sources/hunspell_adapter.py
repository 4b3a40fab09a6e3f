from __future__ import annotations

import os
import re
from typing import Iterable, Iterator, List, Tuple

from spylls.hunspell.dictionary import Dictionary

from wordlist.errors import SourceError
from wordlist.utils import get_logger

logger = get_logger(__name__)


def dictionary_paths(filename: str) -> Tuple[str, str]:
    """Return ``(aff, dic)`` paths for a dictionary given with or without ``.dic``."""
    base = re.sub(r"(\.dic)?$", "", filename, count=1)
    return base + ".aff", base + ".dic"


def _strip_suffix(stem: str, strip: str) -> str:
    return stem[: -len(strip)] if strip else stem


def _strip_prefix(stem: str, strip: str) -> str:
    return stem[len(strip):]


def expand_word(word, aff) -> List[str]:
    """Expand one dictionary entry into its word forms.

    Covers the bare stem, single suffixes and prefixes, and prefix+suffix
    cross-products. Compounding is not generated.
    """
    if aff.FORBIDDENWORD and aff.FORBIDDENWORD in word.flags:
        return []

    needaffix = aff.NEEDAFFIX
    forms: List[str] = []
    if not (needaffix and needaffix in word.flags):
        forms.append(word.stem)

    suffixes = [
        sfx
        for flag in word.flags
        for sfx in aff.SFX.get(flag, [])
        if sfx.cond_regexp.search(word.stem)
    ]
    prefixes = [
        pfx
        for flag in word.flags
        for pfx in aff.PFX.get(flag, [])
        if pfx.cond_regexp.search(word.stem)
    ]

    for sfx in suffixes:
        suffixed = _strip_suffix(word.stem, sfx.strip) + sfx.add
        if not (needaffix and needaffix in sfx.flags):
            forms.append(suffixed)
        if not sfx.crossproduct:
            continue
        for pfx in prefixes:
            if pfx.crossproduct and pfx.cond_regexp.search(suffixed):
                forms.append(pfx.add + _strip_prefix(suffixed, pfx.strip))

    for pfx in prefixes:
        prefixed = pfx.add + _strip_prefix(word.stem, pfx.strip)
        if not (needaffix and needaffix in pfx.flags):
            forms.append(prefixed)

    return list(dict.fromkeys(forms))


def _clean(forms: Iterable[str]) -> Iterator[str]:
    for f in forms:
        f = f.strip()
        if f:
            yield f


def _iter_forms(dictionary, dic_path: str) -> Iterator[str]:
    stems = 0
    for word in dictionary.dic.words:
        stems += 1
        yield from _clean(expand_word(word, dictionary.aff))
    logger.info("hunspell: stems=%d dic=%s", stems, dic_path)


def read_words(filename: str) -> Iterator[str]:
    """Load a Hunspell ``.aff``/``.dic`` pair and return a lazy stream of its word forms.

    The files are checked and parsed up front, so a missing or unreadable
    dictionary raises `SourceError` here rather than on first iteration.
    """
    aff_path, dic_path = dictionary_paths(filename)
    for p in (aff_path, dic_path):
        if not os.path.isfile(p):
            raise SourceError(f"Dictionary file not found: {p}")

    try:
        dictionary = Dictionary.from_files(aff_path[: -len(".aff")])
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Cannot read dictionary {dic_path}: {e}") from e

    return _iter_forms(dictionary, dic_path)
