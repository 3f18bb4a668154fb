"""
rude_word_finder
================

Does: Root package initializer for the rude word finder project.
Returns: Exposes the matching API (`find_matches`, `RudeWordFinder`) at the top level.
Used by: Library callers and the `rwf-demo` CLI.
"""

from .matching import RudeWordFinder, find_matches

__all__: list[str] = ["find_matches", "RudeWordFinder"]
__docformat__ = "google"
