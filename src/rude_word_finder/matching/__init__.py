# rude_word_finder/matching/__init__.py

"""
matching.
========

Does: Public entry points for finding flagged words that can be stitched
      together from pieces of the given input words.
Exports: find_matches, RudeWordFinder
"""
from __future__ import annotations

from .orchestrator import RudeWordFinder, find_matches

__all__ = ["find_matches", "RudeWordFinder"]
