# matching/general/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Shared utilities for vocabulary / input normalization
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Deterministic normalization of vocabulary words (lowercase, all
      whitespace removed) and raw input tokens (lowercase, split on
      whitespace, flattened), with light Unicode hygiene.
Returns: normalize_vocab_word(), normalize_input_tokens().
Used by: Vocabulary loading and the matching driver.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable

__all__ = [
    "normalize_vocab_word",
    "normalize_input_tokens",
]

_WS_RE = re.compile(r"\s+")


# ──────────────────────────────────────────────────────────────
# 0) Light Unicode hygiene
# ──────────────────────────────────────────────────────────────


def _unicode_hygiene(s: str) -> str:
    """
    Does: NFKC fold (non-breaking and full-width spaces become plain spaces,
          full-width letters become ASCII).
    Returns: Folded string ('' for non-str input).
    """
    if not isinstance(s, str):
        return ""
    return unicodedata.normalize("NFKC", s)


# ──────────────────────────────────────────────────────────────
# 1) VOCABULARY WORDS
# ──────────────────────────────────────────────────────────────


def normalize_vocab_word(word: str) -> str:
    """
    Does: Normalize one vocabulary entry: hygiene, lowercase, and drop every
          whitespace run ("Foot Fetish" → "footfetish").
    Returns: Normalized word ('' for blank/non-str input).
    """
    if not isinstance(word, str):
        return ""
    return _WS_RE.sub("", _unicode_hygiene(word).lower())


# ──────────────────────────────────────────────────────────────
# 2) INPUT TOKENS
# ──────────────────────────────────────────────────────────────


def normalize_input_tokens(tokens: Iterable[str]) -> list[str]:
    """
    Does: Lowercase each raw token and split it on whitespace, flattening
          the pieces in order. Blank pieces and non-str items are dropped.
    Returns: list[str] ready to seed a FragmentPool.
    """
    out: list[str] = []
    for tok in tokens or ():
        if not isinstance(tok, str):
            continue
        out.extend(_unicode_hygiene(tok).lower().split())
    return out
