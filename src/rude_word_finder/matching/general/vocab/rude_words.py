"""
rude_words
==========

Does: Load the bundled rude-word vocabulary and finder settings from the
      data directory, normalizing each word once at load time.
Returns: load_rude_words() -> tuple[str, ...] (file order preserved),
         load_finder_settings() -> validated settings dict.
Used By: RudeWordFinder, the demo CLI, tests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from rude_word_finder.matching.general.token import normalize_vocab_word
from rude_word_finder.matching.general.utils.load_config import load_config

__all__ = [
    "VocabularyError",
    "DEFAULT_VOCABULARY_FILE",
    "DEFAULT_SETTINGS_FILE",
    "validate_separator",
    "normalize_vocabulary",
    "load_finder_settings",
    "load_rude_words",
]

log = logging.getLogger(__name__)

DEFAULT_VOCABULARY_FILE = "rude_word_list"
DEFAULT_SETTINGS_FILE = "finder_settings"


class VocabularyError(ValueError):
    """Raise when a vocabulary entry cannot be used as a flagged word."""


def validate_separator(separator: str) -> str:
    """Does: Require exactly one non-whitespace character; return it unchanged."""
    if not isinstance(separator, str) or len(separator) != 1 or separator.isspace():
        raise ValueError(
            f"separator must be a single non-whitespace character, got {separator!r}"
        )
    return separator


def _validate_settings(data: dict[str, Any]) -> dict[str, Any]:
    out = dict(data)
    out["separator"] = validate_separator(out.get("separator", "|"))
    vocab_file = out.get("vocabulary_file", DEFAULT_VOCABULARY_FILE)
    if not isinstance(vocab_file, str) or not vocab_file.strip():
        raise ValueError("vocabulary_file must be a non-empty string")
    out["vocabulary_file"] = vocab_file.strip()
    return out


def normalize_vocabulary(entries: Iterable[str], *, separator: str = "|") -> tuple[str, ...]:
    """
    Does: Normalize each entry once and drop blanks. Order and repeated
          entries are kept; a repeated word is reported once per entry.
    Raises: VocabularyError if a word contains `separator`.
    """
    words: list[str] = []
    for entry in entries:
        word = normalize_vocab_word(entry)
        if not word:
            continue
        if separator in word:
            raise VocabularyError(
                f"vocabulary entry {entry!r} contains the separator {separator!r}"
            )
        words.append(word)
    return tuple(words)


def load_finder_settings(
    file: str = DEFAULT_SETTINGS_FILE, *, base_dir: Path | None = None
) -> dict[str, Any]:
    """Does: Load and validate finder settings (separator, vocabulary_file)."""
    return load_config(
        file, mode="validated_dict", base_dir=base_dir, validator=_validate_settings
    )


def load_rude_words(
    file: str = DEFAULT_VOCABULARY_FILE,
    *,
    base_dir: Path | None = None,
    separator: str = "|",
) -> tuple[str, ...]:
    """
    Does: Load <data>/<file>.json (ordered list) and normalize each entry.
          Blank entries are dropped; order and repeats are kept.
    Returns: tuple[str, ...] of flagged words in file order.
    Raises: VocabularyError if a word contains `separator`.
    """
    words = normalize_vocabulary(
        load_config(file, mode="list", base_dir=base_dir), separator=separator
    )
    log.debug("loaded %d rude words from %s", len(words), file)
    return words
