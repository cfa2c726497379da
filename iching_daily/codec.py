"""
codec.py — Line patterns to King Wen numbers and back.

Binary value = lower trigram + upper trigram * 8, with line 1 (bottom) as
the least significant bit and yang = 1.
Trigram values: 坤=0, 震=1, 坎=2, 兌=3, 艮=4, 離=5, 巽=6, 乾=7
"""

from __future__ import annotations
from typing import Iterable, List, Sequence, Union

from .casting import Line, LINES_PER_HEXAGRAM
from .hexagrams import HEXAGRAMS

HEXAGRAM_COUNT = 64

# King Wen number for each 6-bit pattern. Historical ordering, not derivable.
BINARY_TO_KING_WEN: Sequence[int] = (
    2, 24, 7, 19, 15, 36, 46, 11, 16, 51, 40, 54, 62, 55, 32, 34, 8, 3, 29, 60,
    39, 63, 48, 5, 45, 17, 47, 58, 31, 49, 28, 43, 23, 27, 4, 41, 52, 22, 18, 26,
    35, 21, 64, 38, 56, 30, 50, 14, 20, 42, 59, 61, 53, 37, 57, 9, 12, 25, 6, 10,
    33, 13, 44, 1,
)

KING_WEN_TO_BINARY: Sequence[int] = tuple(
    BINARY_TO_KING_WEN.index(number) for number in range(1, HEXAGRAM_COUNT + 1)
)


def _bit(item: Union[Line, int]) -> int:
    if isinstance(item, Line):
        return 1 if item.is_yang else 0
    if item in (0, 1) and not isinstance(item, bool):
        return item
    raise ValueError(f"Expected a Line or a 0/1 bit, got {item!r}")


def encode(lines: Sequence[Union[Line, int]]) -> int:
    """Encode six lines (bottom first) as a 6-bit integer."""
    if len(lines) != LINES_PER_HEXAGRAM:
        raise ValueError(f"A hexagram needs {LINES_PER_HEXAGRAM} lines, got {len(lines)}")
    binary = 0
    for i, item in enumerate(lines):
        binary |= _bit(item) << i
    return binary


def decode(binary: int) -> List[int]:
    """Bits of a 6-bit pattern, bottom line first."""
    _check_binary(binary)
    return [(binary >> i) & 1 for i in range(LINES_PER_HEXAGRAM)]


def to_canonical(binary: int) -> int:
    _check_binary(binary)
    return BINARY_TO_KING_WEN[binary]


def to_binary(number: int) -> int:
    if not 1 <= number <= HEXAGRAM_COUNT:
        raise ValueError(f"King Wen number out of range: {number!r}")
    return KING_WEN_TO_BINARY[number - 1]


def _check_binary(binary: int) -> None:
    if not isinstance(binary, int) or not 0 <= binary < HEXAGRAM_COUNT:
        raise ValueError(f"Binary pattern out of range: {binary!r}")


def pattern_index(lines: Iterable[int]) -> int:
    """Index of a text-table line pattern, built trigram by trigram."""
    bits = list(lines)
    lower = bits[0] + bits[1] * 2 + bits[2] * 4
    upper = bits[3] + bits[4] * 2 + bits[5] * 4
    return lower + upper * 8


def verify_table() -> List[str]:
    """
    Check the King Wen table against itself and the text table.

    Returns a list of error descriptions; an empty list means the table is
    a bijection of 0..63 onto 1..64 and agrees with every entry's own
    line pattern.
    """
    errors: List[str] = []
    if len(BINARY_TO_KING_WEN) != HEXAGRAM_COUNT:
        errors.append(f"Table has {len(BINARY_TO_KING_WEN)} entries, expected {HEXAGRAM_COUNT}")
    missing = set(range(1, HEXAGRAM_COUNT + 1)) - set(BINARY_TO_KING_WEN)
    if missing:
        errors.append(f"Numbers never produced: {sorted(missing)}")
    if len(HEXAGRAMS) != HEXAGRAM_COUNT:
        errors.append(f"Text table has {len(HEXAGRAMS)} entries, expected {HEXAGRAM_COUNT}")

    for hexagram in HEXAGRAMS:
        number = hexagram["number"]
        index = pattern_index(hexagram["lines"])
        found = BINARY_TO_KING_WEN[index] if index < len(BINARY_TO_KING_WEN) else None
        if found != number:
            errors.append(f"#{number} {hexagram['name']}: index {index} -> {found} (expected {number})")
    return errors
