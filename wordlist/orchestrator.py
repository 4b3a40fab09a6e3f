
import time
import uuid
from typing import Dict, Any, Optional

from wordlist.compact import trie_compact_sorted_word_list
from wordlist.pipeline import PipelineConfig, stream_words
from wordlist.sink import open_output, write_words
from wordlist.sources import hunspell_adapter, line_reader
from wordlist.utils import get_logger, load_config, yes_no

logger = get_logger(__name__)

_WORD_FLAGS = ("sort", "unique", "ignore_case", "lower_case")


def _apply_overrides(cfg: Dict[str, Any], overrides: Optional[Dict[str, Any]]) -> None:
    """Merge command-line values into the config; ``None`` means "not given"."""
    if not overrides:
        return

    words = cfg.setdefault("words", {})
    for key in _WORD_FLAGS:
        if overrides.get(key) is not None:
            words[key] = bool(overrides[key])

    if overrides.get("output") is not None:
        cfg.setdefault("output", {})["path"] = overrides["output"]


def _pipeline_config(cfg: Dict[str, Any]) -> PipelineConfig:
    words = cfg.get("words") or {}
    return PipelineConfig(
        unique=bool(words.get("unique", False)),
        sort=bool(words.get("sort", False)),
        ignore_case=bool(words.get("ignore_case", False)),
        lower_case=bool(words.get("lower_case", False)),
    )


def _output_path(cfg: Dict[str, Any]) -> Optional[str]:
    return (cfg.get("output") or {}).get("path") or None


def _execute_words(cfg: Dict[str, Any], dic_filename: str) -> int:
    config = _pipeline_config(cfg)
    output_path = _output_path(cfg)

    logger.info("Write words")
    logger.info("Sort: %s", yes_no(config.sort))
    logger.info("Unique: %s", yes_no(config.unique))
    logger.info("Ignore Case: %s", yes_no(config.ignore_case))
    logger.info("Lower Case: %s", yes_no(config.lower_case))

    aff_file, dic_file = hunspell_adapter.dictionary_paths(dic_filename)
    logger.info("Dic file: %s", dic_file)
    logger.info("Aff file: %s", aff_file)

    # Source first: a bad dictionary path must not truncate an existing output file.
    t0 = time.monotonic()
    words = hunspell_adapter.read_words(dic_filename)
    with open_output(output_path) as stream:
        logger.info("Generating Words")
        n = stream_words(words, config, stream)
        logger.info("words written=%d output=%s took_ms=%d", n, output_path or "<stdout>",
                    int((time.monotonic() - t0) * 1000))
    return n


def _execute_compact(cfg: Dict[str, Any], sorted_filename: str) -> int:
    output_path = _output_path(cfg)
    t0 = time.monotonic()
    lines = line_reader.read_lines(sorted_filename)
    with open_output(output_path) as stream:
        n = write_words(trie_compact_sorted_word_list(lines), stream)
        logger.info("compact written=%d output=%s took_ms=%d", n, output_path or "<stdout>",
                    int((time.monotonic() - t0) * 1000))
    return n


def run_words(
    dic_filename: str,
    *,
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> int:
    """Write every word of a Hunspell dictionary, returning the number of lines written."""
    run_id = uuid.uuid4().hex[:8]
    logger.info("=== run start id=%s command=words ===", run_id)

    try:
        cfg = load_config(config_path)
        _apply_overrides(cfg, overrides)
        return _execute_words(cfg, dic_filename)

    except Exception as e:
        logger.error("Pipeline execution failed: %s", e)
        raise
    finally:
        logger.info("=== run end id=%s ===", run_id)


def run_compact(
    sorted_filename: str,
    *,
    config_path: Optional[str] = None,
    output: Optional[str] = None,
) -> int:
    """Compact a sorted word-list file, returning the number of lines written."""
    run_id = uuid.uuid4().hex[:8]
    logger.info("=== run start id=%s command=compact ===", run_id)

    try:
        cfg = load_config(config_path)
        _apply_overrides(cfg, {"output": output})
        return _execute_compact(cfg, sorted_filename)

    except Exception as e:
        logger.error("Compaction failed: %s", e)
        raise
    finally:
        logger.info("=== run end id=%s ===", run_id)
