# matching/general/token/__init__.py
"""
token.
=====

Does: Provide normalization for vocabulary words and raw input tokens.
Exports: normalize_vocab_word, normalize_input_tokens
Used by: Vocabulary loading and the matching driver.
"""

from __future__ import annotations

from .normalize import (
    normalize_input_tokens,
    normalize_vocab_word,
)

__all__ = [
    "normalize_vocab_word",
    "normalize_input_tokens",
]
