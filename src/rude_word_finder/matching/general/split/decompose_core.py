# matching/general/split/decompose_core.py

"""
decompose_core.py.

Does: Recursive, longest-window-first search that rebuilds a target word
      from substrings of a FragmentPool, consuming each matched piece.
      A consumed piece is never handed back when a later sub-search fails;
      the next window simply runs against the already-reduced pool.
Returns: Ordered pieces (tuple[str, ...]) / joined string, or None when the
         word cannot be built.
Used by: The driver in matching.orchestrator.
"""
from __future__ import annotations

import logging

from .pool import FragmentPool

__all__ = [
    "DEFAULT_SEPARATOR",
    "decompose",
    "decompose_pieces",
    "longest_piece_length",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "|"


def decompose_pieces(target: str, pool: FragmentPool) -> tuple[str, ...] | None:
    """
    Does: Partition `target` into pieces each drawn from `pool`, trying
          window lengths from len(target) down to 1 and, per length, start
          positions left to right. The first window whose prefix and suffix
          both decompose wins.
    Returns: Pieces in left-to-right order ('' target -> ()), or None.
    Used by: decompose(); the driver's ranking step.
    """
    n = len(target)
    if n == 0:
        return ()

    for length in range(n, 0, -1):
        for start in range(0, n - length + 1):
            piece = target[start : start + length]
            if not pool.find_and_consume(piece):
                continue

            end = start + length
            head: tuple[str, ...] = ()
            tail: tuple[str, ...] = ()

            if start > 0:
                sub = decompose_pieces(target[:start], pool)
                if sub is None:
                    log.debug("prefix %r failed after taking %r", target[:start], piece)
                    continue
                head = sub

            if end < n:
                sub = decompose_pieces(target[end:], pool)
                if sub is None:
                    log.debug("suffix %r failed after taking %r", target[end:], piece)
                    continue
                tail = sub

            return head + (piece,) + tail

    return None


def decompose(
    target: str,
    pool: FragmentPool,
    *,
    separator: str = DEFAULT_SEPARATOR,
) -> str | None:
    """
    Does: Run decompose_pieces() and join the pieces with `separator`.
    Returns: e.g. "an|al", the bare word when one fragment covers it, or None.
    """
    pieces = decompose_pieces(target, pool)
    if pieces is None:
        return None
    return separator.join(pieces)


def longest_piece_length(result: str, separator: str = DEFAULT_SEPARATOR) -> int:
    """Does: Length of the longest piece in a joined decomposition."""
    return max((len(p) for p in result.split(separator)), default=0)
