"""
derivation.py — Derived hexagrams of a cast.

    nuclear  (互卦)  hidden within: lines 2-3-4 below, 3-4-5 above
    shadow   (錯卦)  the rejected path: every line inverted
    mirror   (綜卦)  opposite vantage: line order reversed
    diagonal         shadow and mirror together
    becoming (之卦)  where it is heading: changing lines flipped
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .casting import Line, LINES_PER_HEXAGRAM
from .codec import encode, to_canonical


@dataclass(frozen=True)
class Cast:
    """A full cast: six lines plus every hexagram derived from them."""
    lines: Tuple[Line, ...]
    primary: int
    nuclear: int
    shadow: int
    mirror: int
    diagonal: int
    becoming: Optional[int] = None
    changing_positions: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def is_self_mirroring(self) -> bool:
        return self.mirror == self.primary

    @property
    def is_locked_pair(self) -> bool:
        return self.mirror == self.shadow

    @property
    def has_changing(self) -> bool:
        return bool(self.changing_positions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lines": [int(line.value) for line in self.lines],
            "primary": self.primary,
            "becoming": self.becoming,
            "changing_positions": list(self.changing_positions),
            "nuclear": self.nuclear,
            "shadow": self.shadow,
            "mirror": self.mirror,
            "diagonal": self.diagonal,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Cast":
        """
        Rebuild a cast from its stored line values.

        Derived numbers are recomputed; a stored primary that disagrees
        with the stored lines means the record is corrupt.
        """
        lines = [Line(value) for value in data["lines"]]
        cast = DerivationEngine().derive(lines)
        if "primary" in data and data["primary"] != cast.primary:
            raise ValueError(f"Stored primary {data['primary']!r} does not match lines ({cast.primary})")
        return cast


def _validated(lines: Sequence[Line]) -> List[Line]:
    if len(lines) != LINES_PER_HEXAGRAM:
        raise ValueError(f"A cast needs {LINES_PER_HEXAGRAM} lines, got {len(lines)}")
    for line in lines:
        if not isinstance(line, Line):
            raise ValueError(f"Expected Line, got {line!r}")
    return list(lines)


class DerivationEngine:
    """Computes derived King Wen numbers from six cast lines."""

    def primary(self, lines: Sequence[Line]) -> int:
        return to_canonical(encode(_validated(lines)))

    def nuclear(self, lines: Sequence[Line]) -> int:
        lines = _validated(lines)
        inner = [lines[1], lines[2], lines[3], lines[2], lines[3], lines[4]]
        return to_canonical(encode(inner))

    def shadow(self, lines: Sequence[Line]) -> int:
        bits = [0 if line.is_yang else 1 for line in _validated(lines)]
        return to_canonical(encode(bits))

    def mirror(self, lines: Sequence[Line]) -> int:
        return to_canonical(encode(_validated(lines)[::-1]))

    def diagonal(self, lines: Sequence[Line]) -> int:
        bits = [0 if line.is_yang else 1 for line in _validated(lines)]
        return to_canonical(encode(bits[::-1]))

    def becoming(self, lines: Sequence[Line]) -> Optional[int]:
        """Flip only the changing lines; None when nothing changes."""
        lines = _validated(lines)
        if not any(line.is_changing for line in lines):
            return None
        bits = [int(line.is_yang != line.is_changing) for line in lines]
        return to_canonical(encode(bits))

    def changing_positions(self, lines: Sequence[Line]) -> Tuple[int, ...]:
        return tuple(i + 1 for i, line in enumerate(_validated(lines)) if line.is_changing)

    def is_self_mirroring(self, lines: Sequence[Line]) -> bool:
        return self.mirror(lines) == self.primary(lines)

    def is_locked_pair(self, lines: Sequence[Line]) -> bool:
        return self.mirror(lines) == self.shadow(lines)

    def derive(self, lines: Sequence[Line]) -> Cast:
        lines = _validated(lines)
        return Cast(
            lines=tuple(lines),
            primary=self.primary(lines),
            nuclear=self.nuclear(lines),
            shadow=self.shadow(lines),
            mirror=self.mirror(lines),
            diagonal=self.diagonal(lines),
            becoming=self.becoming(lines),
            changing_positions=self.changing_positions(lines),
        )
