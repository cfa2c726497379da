from collections import Counter

import pytest

from iching_daily.casting import Line, LineCaster, LineValue, coins_to_value

from conftest import ScriptedEntropy, cast_bytes


def test_coin_patterns_follow_binomial_counts():
    counts = Counter(coins_to_value(bits) for bits in range(8))
    assert counts == {6: 1, 7: 3, 8: 3, 9: 1}


def test_only_low_three_bits_are_coins():
    assert coins_to_value(0b11111000) == LineValue.OLD_YIN
    assert coins_to_value(0b00000111) == LineValue.OLD_YANG


@pytest.mark.parametrize("value, is_yang, is_changing", [
    (6, False, True),
    (7, True, False),
    (8, False, False),
    (9, True, True),
])
def test_line_flags(value, is_yang, is_changing):
    line = Line(value)
    assert line.is_yang is is_yang
    assert line.is_changing is is_changing
    assert line.value == LineValue(value)


@pytest.mark.parametrize("value", [0, 5, 10, "7", None, 7.0, True])
def test_invalid_line_values_are_rejected(value):
    with pytest.raises(ValueError):
        Line(value)


def test_cast_hexagram_is_bottom_to_top():
    caster = LineCaster(ScriptedEntropy(data=cast_bytes([6, 7, 8, 9, 7, 8])))
    lines = caster.cast_hexagram()
    assert [line.value for line in lines] == [6, 7, 8, 9, 7, 8]


def test_cast_line_distribution():
    caster = LineCaster()
    trials = 40_000
    counts = Counter(caster.cast_line().value for _ in range(trials))
    expected = {6: 1 / 8, 7: 3 / 8, 8: 3 / 8, 9: 1 / 8}
    for value, p in expected.items():
        assert abs(counts[value] / trials - p) < 0.01
