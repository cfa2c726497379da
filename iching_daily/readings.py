"""
readings.py — One-line reading text assembled from the static table.

Nothing here composes prose: every string is a table lookup joined with
hexagram symbols, names and changing-line positions.
"""

from __future__ import annotations
from enum import Enum
from typing import List, Optional, Sequence

from .config import LOCKED_PAIR_LABEL, SELF_MIRROR_TAGS
from .derivation import Cast
from .entropy import EntropySource
from .hexagrams import STYLE_KEYS, get_hexagram


class Style(str, Enum):
    """Commentary styles, valued by their key in the text table."""
    IMAGE_ZH = "image_zh"          # 大象傳
    JUDGEMENT_ZH = "judgement_zh"  # 彖傳
    IMAGE = "image"
    JUDGEMENT = "judgement"
    WILHELM = "wilhelm"


STYLES: Sequence[Style] = tuple(Style(key) for key in STYLE_KEYS)


class DerivedType(str, Enum):
    NUCLEAR = "nuclear"
    SHADOW = "shadow"
    MIRROR = "mirror"
    BECOMING = "becoming"


DERIVED_LABELS = {
    DerivedType.NUCLEAR: "互卦 (hidden within)",
    DerivedType.SHADOW: "錯卦 (shadow)",
    DerivedType.MIRROR: "綜卦 (mirror)",
    DerivedType.BECOMING: "之卦 (becoming)",
}


def random_style(entropy: EntropySource) -> Style:
    return STYLES[entropy.choice_index(len(STYLES))]


def hexagram_heading(number: int) -> str:
    """Symbol, Chinese name and pinyin, e.g. ``䷀ 乾 (Qián)``."""
    g = get_hexagram(number)
    return f"{g['symbol']} {g['name']} ({g['pinyin']})"


def commentary(number: int, style: Style) -> str:
    return get_hexagram(number)[Style(style).value]


def format_reading(cast: Cast, style: Style) -> str:
    """Primary reading, with the becoming hexagram appended when lines change."""
    out = f"{hexagram_heading(cast.primary)} — {commentary(cast.primary, style)}"
    if cast.becoming is not None:
        t = get_hexagram(cast.becoming)
        positions = ",".join(str(p) for p in cast.changing_positions)
        out += f" → {t['symbol']} {t['name']} [{positions}]"
    return out


def format_derived(cast: Cast, kind: DerivedType, entropy: EntropySource) -> Optional[str]:
    """
    Reading for one derived hexagram in a randomly chosen style.

    Returns None for a becoming reading when no line changes. A mirror of a
    self-mirroring hexagram is labelled as such and shows the primary's own
    text; on a locked pair, shadow and mirror share one unified label.
    """
    kind = DerivedType(kind)

    if kind is DerivedType.MIRROR and cast.is_self_mirroring:
        tag = SELF_MIRROR_TAGS[0] if entropy.byte() < 128 else SELF_MIRROR_TAGS[1]
        number = cast.primary
        return f"綜卦 ({tag}) {hexagram_heading(number)} — {commentary(number, random_style(entropy))}"

    if kind is DerivedType.BECOMING:
        number = cast.becoming
    else:
        number = getattr(cast, kind.value)
    if number is None:
        return None

    label = DERIVED_LABELS[kind]
    if kind in (DerivedType.SHADOW, DerivedType.MIRROR) and cast.is_locked_pair:
        label = LOCKED_PAIR_LABEL
    return f"{label} {hexagram_heading(number)} — {commentary(number, random_style(entropy))}"


def format_lines(lines: Sequence[int], changing: Optional[Sequence[int]] = None) -> List[str]:
    """Draw hexagram lines top to bottom; ``changing`` holds 1-based positions."""
    drawn = []
    for i in range(len(lines) - 1, -1, -1):
        line = "━━━━━━━" if lines[i] else "━━   ━━"
        if changing and (i + 1) in changing:
            line += " ✦"
        drawn.append(line)
    return drawn
