# tests/test_general_decompose.py
from __future__ import annotations

from collections import Counter

import pytest

from rude_word_finder.matching.general.split import (
    FragmentPool,
    decompose,
    decompose_pieces,
    longest_piece_length,
)

# ─────────────────────────────────────────────────────────────────────────────
# Successful decompositions
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "target,tokens,expected",
    [
        ("sex", ["sex"], "sex"),
        ("sex", ["sussex"], "sex"),                    # substring of one token
        ("anal", ["an", "al"], "an|al"),
        ("anal", ["sultan", "all"], "an|al"),          # pieces cut out of larger tokens
        ("footfetish", ["foot", "fetish"], "foot|fetish"),
        ("fingering", ["finger", "ring"], "finger|ing"),
        ("ginger", ["finger", "ring"], "g|inger"),
        ("na", ["an"], "n|a"),                         # one token split into two pieces
    ],
)
def test_decompose_finds_expected_split(target, tokens, expected):
    assert decompose(target, FragmentPool(tokens)) == expected


def test_decompose_joins_with_custom_separator():
    assert decompose("anal", FragmentPool(["an", "al"]), separator="+") == "an+al"


def test_decompose_pieces_returns_ordered_tuple():
    assert decompose_pieces("footfetish", FragmentPool(["fetish", "foot"])) == ("foot", "fetish")


def test_empty_target_is_trivial_success():
    pool = FragmentPool(["mars"])
    assert decompose("", pool) == ""
    assert decompose_pieces("", pool) == ()
    assert pool.fragments == ("mars",)


# ─────────────────────────────────────────────────────────────────────────────
# Failures and the no-rollback commit
# ─────────────────────────────────────────────────────────────────────────────


def test_decompose_not_found_returns_none():
    assert decompose("anal", FragmentPool(["mars"])) is None


def test_input_letters_are_not_used_twice():
    # "ginger" needs two g's; "finger" only has one.
    assert decompose("ginger", FragmentPool(["finger", "sit"])) is None


def test_failed_windows_keep_their_consumption():
    pool = FragmentPool(["finger", "sit"])
    assert decompose("ginger", pool) is None
    # "inger" (from finger) and "i" (from sit) were taken and never handed back
    assert pool.fragments == ("f", "s", "t")


def test_successful_decomposition_consumes_exactly_the_target():
    pool = FragmentPool(["sultan", "all"])
    before = pool.total_chars()
    assert decompose("anal", pool) == "an|al"
    assert pool.total_chars() == before - len("anal")
    assert pool.fragments == ("sult", "l")


# ─────────────────────────────────────────────────────────────────────────────
# Properties
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "target,tokens",
    [
        ("bollocks", ["bowl", "locks"]),
        ("knockers", ["knock", "lockers"]),
        ("penis", ["pen", "is"]),
        ("twat", ["tw", "eat", "bat"]),
    ],
)
def test_pieces_rebuild_target_within_input_letters(target, tokens):
    pieces = decompose_pieces(target, FragmentPool(tokens))
    assert pieces is not None
    assert "".join(pieces) == target
    used = Counter("".join(pieces))
    available = Counter("".join(tokens))
    assert not used - available


@pytest.mark.parametrize(
    "result,expected",
    [
        ("sex", 3),
        ("foot|fetish", 6),
        ("n|i|g|ger", 3),
        ("", 0),
    ],
)
def test_longest_piece_length(result, expected):
    assert longest_piece_length(result) == expected


def test_longest_piece_length_custom_separator():
    assert longest_piece_length("an+al", separator="+") == 2
