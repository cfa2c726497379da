import datetime as dt

import pytest

from iching_daily.derivation import DerivationEngine
from iching_daily.readings import DerivedType, Style, format_reading
from iching_daily.reveal import RevealAction, RevealScheduler, build_reveal_table
from iching_daily.store import DailyRecord, RevealState

from conftest import ScriptedEntropy, cast_bytes, lines_of, stable_lines

TODAY = dt.date(2026, 10, 16)
engine = DerivationEngine()


def revealed_record(lines, date="2026-10-16"):
    return DailyRecord(date=date, cast=engine.derive(lines), revealed=True)


def test_default_table_bands():
    table = build_reveal_table()
    assert len(table) == 9
    assert table[4][0] == pytest.approx(0.20)
    assert table[-1][0] == pytest.approx(0.30)
    assert [action.style for _, action in table[:5]] == list(Style)
    assert [action.derived for _, action in table[5:]] == list(DerivedType)


@pytest.mark.parametrize("draw, expected", [
    (0.0, RevealAction(style=Style.IMAGE_ZH)),
    (0.039, RevealAction(style=Style.IMAGE_ZH)),
    (0.05, RevealAction(style=Style.JUDGEMENT_ZH)),
    (0.19, RevealAction(style=Style.WILHELM)),
    (0.21, RevealAction(derived=DerivedType.NUCLEAR)),
    (0.24, RevealAction(derived=DerivedType.SHADOW)),
    (0.26, RevealAction(derived=DerivedType.MIRROR)),
    (0.29, RevealAction(derived=DerivedType.BECOMING)),
    (0.31, None),
    (0.999, None),
])
def test_select_walks_cumulative_thresholds(draw, expected):
    assert RevealScheduler(ScriptedEntropy()).select(draw) == expected


def test_bands_are_retunable():
    table = build_reveal_table(style_band=0.1, derived_band=0.1)
    scheduler = RevealScheduler(ScriptedEntropy(), table=table)
    assert scheduler.select(0.85) == RevealAction(derived=DerivedType.BECOMING)
    assert scheduler.select(0.95) is None


@pytest.mark.parametrize("style_band, derived_band", [(0.0, 0.1), (0.1, -0.1), (0.15, 0.1)])
def test_invalid_bands_are_rejected(style_band, derived_band):
    with pytest.raises(ValueError):
        build_reveal_table(style_band, derived_band)


def test_unordered_table_is_rejected():
    table = [(0.2, RevealAction(style=Style.IMAGE)), (0.1, RevealAction(style=Style.WILHELM))]
    with pytest.raises(ValueError):
        RevealScheduler(ScriptedEntropy(), table=table)


def test_reveal_action_needs_exactly_one_target():
    with pytest.raises(ValueError):
        RevealAction()
    with pytest.raises(ValueError):
        RevealAction(style=Style.IMAGE, derived=DerivedType.NUCLEAR)


def test_first_invocation_casts_and_reveals_primary():
    entropy = ScriptedEntropy(data=cast_bytes([7, 8, 8, 8, 7, 8]))
    result = RevealScheduler(entropy).advance(None, TODAY)
    assert result.archived is None
    assert result.record.date == "2026-10-16"
    assert result.record.state is RevealState.REVEALED
    assert result.record.cast.primary == 3
    assert result.output == "䷂ 屯 (Zhūn) — 雲雷屯，君子以經綸"


def test_fresh_record_reveals_without_drawing():
    record = DailyRecord(date="2026-10-16", cast=engine.derive(stable_lines(1)))
    assert record.state is RevealState.FRESH
    result = RevealScheduler(ScriptedEntropy()).advance(record, TODAY)
    assert result.record.revealed is True
    assert result.output == format_reading(record.cast, Style.IMAGE_ZH)


def test_day_rollover_archives_and_recasts():
    yesterday = revealed_record(stable_lines(29), date="2026-10-15")
    entropy = ScriptedEntropy(data=cast_bytes([9, 7, 7, 7, 7, 7]))
    result = RevealScheduler(entropy).advance(yesterday, TODAY)

    assert result.archived.date == "2026-10-15"
    assert result.archived.cast == yesterday.cast
    assert result.record.date == "2026-10-16"
    assert result.record.cast.primary == 1
    assert result.record.revealed is True
    assert result.output == format_reading(result.record.cast, Style.IMAGE_ZH)
    assert not entropy.data


def test_same_day_revealed_record_is_silent_above_bands():
    record = revealed_record(stable_lines(1))
    entropy = ScriptedEntropy(draws=[0.5, 0.95, 0.3001])
    scheduler = RevealScheduler(entropy)
    for _ in range(3):
        result = scheduler.advance(record, TODAY)
        assert result.output is None
        assert result.archived is None
        assert result.record == record


def test_same_day_never_repeats_first_reading_guarantee():
    record = revealed_record(stable_lines(3))
    entropy = ScriptedEntropy(draws=[0.6])
    result = RevealScheduler(entropy).advance(record, "2026-10-16")
    assert result.output is None


def test_same_day_commentary_band():
    record = revealed_record(stable_lines(3))
    entropy = ScriptedEntropy(draws=[0.13])
    result = RevealScheduler(entropy).advance(record, TODAY)
    assert result.output == format_reading(record.cast, Style.JUDGEMENT)


def test_becoming_band_without_becoming_is_silent():
    record = revealed_record(stable_lines(3))
    result = RevealScheduler(ScriptedEntropy(draws=[0.29])).advance(record, TODAY)
    assert result.output is None


def test_becoming_band_with_changing_lines():
    record = revealed_record(lines_of([9, 7, 7, 7, 7, 7]))
    entropy = ScriptedEntropy(data=bytes([0]), draws=[0.29])
    result = RevealScheduler(entropy).advance(record, TODAY)
    assert result.output.startswith("之卦 (becoming) ䷫")


def test_mirror_band_on_self_mirroring_cast():
    record = revealed_record(stable_lines(1))
    entropy = ScriptedEntropy(data=bytes([5, 2]), draws=[0.26])
    result = RevealScheduler(entropy).advance(record, TODAY)
    assert result.output == "綜卦 (自綜) ䷀ 乾 (Qián) — Heaven moves with vigor; the noble one strives ceaselessly"
