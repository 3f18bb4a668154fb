"""
vocab.
=====

Does: Vocabulary and settings loaders for the bundled rude-word list.
"""

from .rude_words import (
    DEFAULT_SETTINGS_FILE,
    DEFAULT_VOCABULARY_FILE,
    VocabularyError,
    load_finder_settings,
    load_rude_words,
    normalize_vocabulary,
    validate_separator,
)

__all__ = [
    "VocabularyError",
    "DEFAULT_VOCABULARY_FILE",
    "DEFAULT_SETTINGS_FILE",
    "validate_separator",
    "normalize_vocabulary",
    "load_finder_settings",
    "load_rude_words",
]
