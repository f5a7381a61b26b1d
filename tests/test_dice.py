"""
Tests for the random sources.
"""

import pytest
from itadaki.dice import RandomSource, ScriptedRandomSource, SeededRandomSource
from itadaki.exceptions import RandomSourceExhausted


def test_sources_satisfy_protocol():
    assert isinstance(SeededRandomSource(1), RandomSource)
    assert isinstance(ScriptedRandomSource(), RandomSource)


def test_seeded_source_is_reproducible():
    a, b = SeededRandomSource(11), SeededRandomSource(11)

    assert [a.roll_die(6) for _ in range(20)] == [b.roll_die(6) for _ in range(20)]
    assert [a.draw_chance_delta(-150, 200) for _ in range(20)] == [
        b.draw_chance_delta(-150, 200) for _ in range(20)
    ]


def test_seeded_source_ranges_are_inclusive():
    source = SeededRandomSource(0)

    rolls = {source.roll_die(6) for _ in range(500)}
    deltas = {source.draw_chance_delta(-1, 1) for _ in range(200)}

    assert rolls == {1, 2, 3, 4, 5, 6}
    assert deltas == {-1, 0, 1}


def test_scripted_source_replays_in_order():
    source = ScriptedRandomSource(rolls=[3, 1, 500], chance_deltas=[-150, 200])

    assert [source.roll_die(6) for _ in range(3)] == [3, 1, 500]
    assert source.draw_chance_delta(-150, 200) == -150
    assert source.draw_chance_delta(-150, 200) == 200


def test_scripted_source_exhaustion():
    source = ScriptedRandomSource(rolls=[1])
    source.roll_die(6)

    with pytest.raises(RandomSourceExhausted):
        source.roll_die(6)
    with pytest.raises(RandomSourceExhausted):
        source.draw_chance_delta(-150, 200)
