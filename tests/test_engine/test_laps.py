"""Tests for the lap position resolver."""

import pytest

from polyspiral.engine.laps import lap_count_table, lap_counts


@pytest.mark.parametrize(
    "side, expected",
    [
        (1, (0, 0)),
        (3, (0, 0)),
        (4, (1, 0)),
        (5, (1, 2)),
        (6, (2, 2)),
        (8, (3, 2)),
        (9, (3, 4)),
        (10, (4, 4)),
    ],
)
def test_lap_counts_square(side, expected):
    assert lap_counts(side, 4) == expected


def test_first_lap_is_uncontracted():
    for side in range(1, 6):
        assert lap_counts(side, 6) == (0, 0)


def test_counts_grow_by_two_each_lap():
    for side in range(2, 40):
        insets, outsets = lap_counts(side, 5)
        next_insets, next_outsets = lap_counts(side + 5, 5)
        assert next_insets == insets + 2
        assert next_outsets == outsets + 2


def test_table_matches_scalar():
    insets, outsets = lap_count_table(30, 5)
    assert len(insets) == 30
    for i in range(30):
        assert (int(insets[i]), int(outsets[i])) == lap_counts(i + 1, 5)


def test_rejects_bad_input():
    with pytest.raises(ValueError):
        lap_counts(0, 4)
    with pytest.raises(ValueError):
        lap_counts(1, 2)
    with pytest.raises(ValueError):
        lap_count_table(10, 2)


def test_second_lap_start_skips_trailing_inset():
    # Side 1 has no predecessor, so only the leading counter ticks at side 1 + sides
    assert lap_counts(7, 6) == (1, 2)
