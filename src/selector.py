"""Deterministic hash-based selection and the rounding helpers shared by every stage.

Nothing here keeps state between calls: the same seed string always maps to
the same index, regardless of call order.
"""

import math
from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")

_UINT32 = 0xFFFFFFFF
_INT32_SIGN = 0x80000000

SCORE_FLOOR = 40
SCORE_CEILING = 100


def _utf16_units(source: str) -> Iterator[int]:
    """Yield UTF-16 code units, splitting astral characters into surrogate pairs."""
    for char in source:
        code = ord(char)
        if code > 0xFFFF:
            code -= 0x10000
            yield 0xD800 + (code >> 10)
            yield 0xDC00 + (code & 0x3FF)
        else:
            yield code


def hash_string(source: str) -> int:
    """Return abs() of the 32-bit signed ``h*31 + unit`` hash of source.

    The accumulator wraps to 32 bits after every code unit.
    """
    value = 0
    for unit in _utf16_units(source):
        value = (value * 31 + unit) & _UINT32
    if value & _INT32_SIGN:
        value -= _UINT32 + 1
    return abs(value)


def pick_from(options: Sequence[T], seed: str) -> T | None:
    """Select one option by hashing seed. Returns None for an empty sequence."""
    if not options:
        return None
    return options[hash_string(seed) % len(options)]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def round_one_decimal(value: float) -> float:
    return round_half_up(value * 10) / 10


def clamp_score(score: float) -> int:
    """Clamp to [40, 100] and round to an integer."""
    return round_half_up(min(SCORE_CEILING, max(SCORE_FLOOR, score)))
