from iching_daily.config import LOCKED_PAIR_LABEL
from iching_daily.derivation import DerivationEngine
from iching_daily.hexagrams import get_hexagram
from iching_daily.readings import (
    DERIVED_LABELS,
    DerivedType,
    Style,
    format_derived,
    format_lines,
    format_reading,
    hexagram_heading,
)

from conftest import ScriptedEntropy, lines_of, stable_lines

engine = DerivationEngine()


def test_primary_reading_without_changing_lines():
    cast = engine.derive(lines_of([7, 8, 8, 8, 7, 8]))
    assert format_reading(cast, Style.IMAGE_ZH) == "䷂ 屯 (Zhūn) — 雲雷屯，君子以經綸"


def test_primary_reading_names_becoming_and_positions():
    cast = engine.derive(lines_of([9, 7, 7, 7, 7, 9]))
    text = format_reading(cast, Style.IMAGE)
    becoming = get_hexagram(cast.becoming)
    assert text.startswith("䷀ 乾 (Qián) — Heaven moves with vigor")
    assert text.endswith(f" → {becoming['symbol']} {becoming['name']} [1,6]")


def test_derived_reading_uses_label_and_random_style():
    cast = engine.derive(lines_of([7, 8, 8, 8, 7, 8]))
    entropy = ScriptedEntropy(data=bytes([3]))
    text = format_derived(cast, DerivedType.NUCLEAR, entropy)
    assert text == f"互卦 (hidden within) {hexagram_heading(23)} — {get_hexagram(23)['judgement']}"


def test_becoming_reading_absent_without_changing_lines():
    cast = engine.derive(stable_lines(3))
    assert format_derived(cast, DerivedType.BECOMING, ScriptedEntropy()) is None


def test_becoming_reading_when_lines_change():
    cast = engine.derive(lines_of([9, 7, 7, 7, 7, 7]))
    text = format_derived(cast, DerivedType.BECOMING, ScriptedEntropy(data=bytes([0])))
    assert text.startswith(f"{DERIVED_LABELS[DerivedType.BECOMING]} {hexagram_heading(44)} — ")


def test_self_mirroring_mirror_shows_primary_text():
    cast = engine.derive(stable_lines(1))
    text = format_derived(cast, DerivedType.MIRROR, ScriptedEntropy(data=bytes([0, 2])))
    assert text == "綜卦 (自綜) ䷀ 乾 (Qián) — Heaven moves with vigor; the noble one strives ceaselessly"

    text = format_derived(cast, DerivedType.MIRROR, ScriptedEntropy(data=bytes([200, 0])))
    assert text.startswith("綜卦 (self-mirroring) ䷀ 乾 (Qián) — ")


def test_locked_pair_uses_unified_label_for_shadow_and_mirror():
    cast = engine.derive(stable_lines(11))
    for kind in (DerivedType.SHADOW, DerivedType.MIRROR):
        text = format_derived(cast, kind, ScriptedEntropy(data=bytes([0])))
        assert text == f"{LOCKED_PAIR_LABEL} {hexagram_heading(12)} — {get_hexagram(12)['image_zh']}"


def test_generic_mirror_label():
    cast = engine.derive(stable_lines(3))
    text = format_derived(cast, DerivedType.MIRROR, ScriptedEntropy(data=bytes([1])))
    assert text == f"綜卦 (mirror) {hexagram_heading(4)} — {get_hexagram(4)['judgement_zh']}"


def test_format_lines_top_to_bottom_with_markers():
    drawn = format_lines([1, 0, 0, 0, 0, 0], changing=[1])
    assert drawn[0] == "━━   ━━"
    assert drawn[-1] == "━━━━━━━ ✦"
    assert len(drawn) == 6
