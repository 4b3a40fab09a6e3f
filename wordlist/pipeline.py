from __future__ import annotations

import functools
import typing as t
from dataclasses import dataclass

from wordlist.sink import write_lines
from wordlist.stages.normalize import lower_case_words
from wordlist.stages.ordering import sort_words
from wordlist.stages.unique import make_unique
from wordlist.utils import get_logger

logger = get_logger(__name__)

Stage = t.Callable[[t.Iterable[str]], t.Iterable[str]]


@dataclass(frozen=True)
class PipelineConfig:
    unique: bool = False
    sort: bool = False
    ignore_case: bool = False
    lower_case: bool = False


def build_stages(config: PipelineConfig) -> t.List[Stage]:
    """Return the enabled stages in their fixed order: unique, sort, lower-case.

    Dedup and sort compare on the original spelling (folded only under
    ``ignore_case``); lower-casing is applied to output after both, so it
    never merges words the earlier stages kept apart.
    """
    stages: t.List[Stage] = []
    if config.unique:
        stages.append(functools.partial(make_unique, ignore_case=config.ignore_case))
    if config.sort:
        stages.append(functools.partial(sort_words, ignore_case=config.ignore_case))
    if config.lower_case:
        stages.append(lower_case_words)
    return stages


def compose(words: t.Iterable[str], stages: t.Sequence[Stage]) -> t.Iterable[str]:
    return functools.reduce(lambda acc, stage: stage(acc), stages, words)


def terminate_lines(words: t.Iterable[str]) -> t.Iterator[str]:
    for w in words:
        yield w + "\n"


def run_pipeline(words: t.Iterable[str], config: PipelineConfig) -> t.Iterable[str]:
    return compose(words, build_stages(config))


def stream_words(words: t.Iterable[str], config: PipelineConfig, stream: t.TextIO) -> int:
    n = write_lines(terminate_lines(run_pipeline(words, config)), stream)
    logger.info("pipeline: written=%d (unique=%s sort=%s ignore_case=%s lower_case=%s)",
                n, config.unique, config.sort, config.ignore_case, config.lower_case)
    return n
