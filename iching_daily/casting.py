"""
casting.py — Three-coin line casting.

Each line is three fair coins: heads count 3, tails count 2. The sum lands
on 6, 7, 8 or 9 with probabilities 1/8, 3/8, 3/8, 1/8.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from .entropy import EntropySource

HEADS = 3
TAILS = 2
COINS_PER_LINE = 3
LINES_PER_HEXAGRAM = 6


class LineValue(IntEnum):
    """Three-coin method line values."""
    OLD_YIN = 6      # ⚋ changing to yang
    YOUNG_YANG = 7   # ⚊ stable
    YOUNG_YIN = 8    # ⚋ stable
    OLD_YANG = 9     # ⚊ changing to yin


@dataclass(frozen=True)
class Line:
    """A single cast line. Immutable once cast."""
    value: LineValue

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Invalid line value: {self.value!r}")
        try:
            object.__setattr__(self, "value", LineValue(self.value))
        except ValueError:
            raise ValueError(f"Invalid line value: {self.value!r}") from None

    @property
    def is_yang(self) -> bool:
        return self.value in (LineValue.YOUNG_YANG, LineValue.OLD_YANG)

    @property
    def is_changing(self) -> bool:
        return self.value in (LineValue.OLD_YIN, LineValue.OLD_YANG)


def coins_to_value(bits: int) -> LineValue:
    """Sum three coins taken from the low bits of ``bits``."""
    total = sum(HEADS if (bits >> i) & 1 else TAILS for i in range(COINS_PER_LINE))
    return LineValue(total)


class LineCaster:
    """Casts lines and hexagrams from an entropy source."""

    def __init__(self, entropy: Optional[EntropySource] = None):
        self.entropy = entropy or EntropySource()

    def cast_line(self) -> Line:
        return Line(coins_to_value(self.entropy.byte()))

    def cast_hexagram(self) -> Tuple[Line, ...]:
        """Cast six lines, bottom (position 1) to top (position 6)."""
        return tuple(self.cast_line() for _ in range(LINES_PER_HEXAGRAM))
