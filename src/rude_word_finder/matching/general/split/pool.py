# matching/general/split/pool.py

"""
pool.py.

Does: Hold the ordered, mutable pool of input fragments a single
      decomposition attempt draws from, answering containment queries and
      consuming matched substrings (returning unused prefix/suffix).
Returns: FragmentPool.
Used by: decompose_core (one fresh pool per flagged word).
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

__all__ = ["FragmentPool"]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


class FragmentPool:
    """
    Ordered multiset of fragments available to one decomposition attempt.

    Iteration order is insertion order; remainders produced by a consume are
    appended at the end (prefix first, then suffix).
    """

    def __init__(self, fragments: Iterable[str] = ()):
        self._fragments: list[str] = [f for f in fragments if f]

    def __repr__(self) -> str:
        return f"FragmentPool({self._fragments!r})"

    def __len__(self) -> int:
        return len(self._fragments)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._fragments))

    def __contains__(self, needle: object) -> bool:
        if not isinstance(needle, str) or not needle:
            return False
        return any(needle in frag for frag in self._fragments)

    @property
    def fragments(self) -> tuple[str, ...]:
        """Does: Snapshot of the current fragments, in pool order."""
        return tuple(self._fragments)

    def total_chars(self) -> int:
        """Does: Count characters still available across all fragments."""
        return sum(len(f) for f in self._fragments)

    def find_and_consume(self, needle: str) -> bool:
        """
        Does: Find the first fragment containing `needle`, remove it, and
              append its non-empty prefix/suffix around the match.
        Returns: True when consumed; False (pool unchanged) when no fragment
                 contains `needle`.
        """
        if not needle:
            raise ValueError("needle must be a non-empty string")

        for i, frag in enumerate(self._fragments):
            start = frag.find(needle)
            if start == -1:
                continue
            del self._fragments[i]
            end = start + len(needle)
            if start > 0:
                self._fragments.append(frag[:start])
            if end < len(frag):
                self._fragments.append(frag[end:])
            log.debug("consumed %r from %r -> %r", needle, frag, self._fragments)
            return True

        return False
