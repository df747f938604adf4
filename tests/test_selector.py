"""Tests for src/selector.py — hash, selection and rounding."""

import pytest

from src.selector import clamp_score, hash_string, pick_from, round_half_up, round_one_decimal


def test_hash_empty_string_is_zero():
    assert hash_string("") == 0


def test_hash_small_strings():
    assert hash_string("a") == 97
    assert hash_string("ab") == 97 * 31 + 98


def test_hash_matches_int32_string_hash():
    assert hash_string("hello") == 99162322
    assert hash_string("hello world") == 1794106052


def test_hash_negative_result_is_made_positive():
    # -862545276 as a signed 32-bit value
    assert hash_string("Hello World") == 862545276


def test_hash_int32_min_keeps_full_magnitude():
    assert hash_string("polygenelubricants") == 2147483648


def test_hash_known_collision():
    assert hash_string("Aa") == hash_string("BB") == 2112


def test_hash_astral_character_uses_surrogate_pair():
    # U+1F600 -> 0xD83D 0xDE00
    assert hash_string("\U0001F600") == 0xD83D * 31 + 0xDE00


def test_hash_is_stateless():
    first = hash_string("gpt-4o-text-x-no-image")
    hash_string("something else")
    assert hash_string("gpt-4o-text-x-no-image") == first


def test_pick_from_indexes_by_hash():
    assert pick_from(["x", "y", "z"], "a") == "y"  # 97 % 3 == 1


def test_pick_from_empty_returns_none():
    assert pick_from([], "anything") is None


def test_pick_from_single_option():
    assert pick_from(("only",), "polygenelubricants") == "only"


@pytest.mark.parametrize(
    "value, expected",
    [(2.5, 3), (3.5, 4), (2.4999, 2), (-0.5, 0), (72.0, 72)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_round_one_decimal():
    assert round_one_decimal(77.25) == 77.3
    assert round_one_decimal(70.0 + 2 / 3) == 70.7
    assert round_one_decimal(64.5) == 64.5


@pytest.mark.parametrize(
    "score, expected",
    [(39.4, 40), (12, 40), (100.6, 100), (140, 100), (72.5, 73), (72.4, 72)],
)
def test_clamp_score(score, expected):
    result = clamp_score(score)
    assert result == expected
    assert isinstance(result, int)
