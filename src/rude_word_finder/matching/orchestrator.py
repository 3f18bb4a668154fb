# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Drive the rude-word search: normalize raw input tokens, try every
      flagged word against its own fresh FragmentPool, and rank the
      successful decompositions.
Returns:
  - find_matches(vocabulary, input_tokens) -> ["foot|fetish", "an|al", ...]
  - RudeWordFinder(...).find(input_words) -> same, against a loaded vocabulary
Used by: The demo CLI and library callers.
"""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from rude_word_finder.matching.general.split import (
    DEFAULT_SEPARATOR,
    FragmentPool,
    decompose_pieces,
    longest_piece_length,
)
from rude_word_finder.matching.general.token import normalize_input_tokens
from rude_word_finder.matching.general.utils.log import debug
from rude_word_finder.matching.general.vocab import (
    load_finder_settings,
    load_rude_words,
    normalize_vocabulary,
    validate_separator,
)

__all__ = ["find_matches", "RudeWordFinder"]

logger = logging.getLogger(__name__)


def find_matches(
    vocabulary: Iterable[str],
    input_tokens: Iterable[str],
    *,
    separator: str = DEFAULT_SEPARATOR,
) -> list[str]:
    """
    Does: For each (already normalized) vocabulary word, seed a fresh pool
          from the normalized input tokens and try to decompose the word.
    Returns: Joined decompositions, longest single piece first; ties keep
             vocabulary order.
    """
    validate_separator(separator)
    tokens = normalize_input_tokens(input_tokens)
    debug(f"input tokens → {tokens}")

    found: list[str] = []
    for word in vocabulary:
        if not word:
            continue
        # each word gets its own pool; consumption never leaks across words
        pieces = decompose_pieces(word, FragmentPool(tokens))
        if pieces is None:
            continue
        debug(f"{word!r} → {pieces}")
        found.append(separator.join(pieces))

    found.sort(key=lambda result: longest_piece_length(result, separator), reverse=True)
    logger.debug("matched %d words from %d tokens", len(found), len(tokens))
    return found


class RudeWordFinder:
    """
    Holds an immutable, normalized rude-word vocabulary and searches raw
    input words against it.

    With no explicit vocabulary, the bundled list named in
    ``finder_settings.json`` is loaded once at construction.
    """

    def __init__(
        self,
        vocabulary: Iterable[str] | None = None,
        *,
        separator: str | None = None,
        base_dir: Path | None = None,
    ):
        if vocabulary is None or separator is None:
            settings = load_finder_settings(base_dir=base_dir)
        else:
            settings = {}

        self._separator = validate_separator(
            separator if separator is not None else settings["separator"]
        )

        if vocabulary is None:
            self._rude_words = load_rude_words(
                settings["vocabulary_file"],
                base_dir=base_dir,
                separator=self._separator,
            )
        else:
            self._rude_words = normalize_vocabulary(vocabulary, separator=self._separator)

    @property
    def rude_words(self) -> tuple[str, ...]:
        return self._rude_words

    @property
    def separator(self) -> str:
        return self._separator

    def find(self, input_words: Sequence[str]) -> list[str]:
        return find_matches(self._rude_words, input_words, separator=self._separator)
