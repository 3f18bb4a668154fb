# matching/general/split/__init__.py
"""
split.
=====

Does: Fragment pool and the recursive decomposition search built on it.
Exports: FragmentPool, decompose, decompose_pieces, longest_piece_length,
         DEFAULT_SEPARATOR
"""

from __future__ import annotations

from .decompose_core import (
    DEFAULT_SEPARATOR,
    decompose,
    decompose_pieces,
    longest_piece_length,
)
from .pool import FragmentPool

__all__ = [
    "FragmentPool",
    "DEFAULT_SEPARATOR",
    "decompose",
    "decompose_pieces",
    "longest_piece_length",
]
