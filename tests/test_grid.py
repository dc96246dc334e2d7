import pytest

from arkanoid.config import DARK, LIGHT, ConfigError
from arkanoid.model import Grid


def test_initial_split_is_left_light_right_dark():
    grid = Grid(15, 20)
    for row in range(15):
        for col in range(20):
            expected = LIGHT if col < 10 else DARK
            assert grid.faction_at(row, col) == expected


def test_default_grid_counts_are_even():
    assert Grid(15, 20).count_by_faction() == {LIGHT: 150, DARK: 150}


def test_odd_column_count_gives_light_the_middle_column():
    grid = Grid(2, 5)
    assert [grid.faction_at(0, c) for c in range(5)] == [LIGHT, LIGHT, LIGHT, DARK, DARK]
    assert grid.count_by_faction() == {LIGHT: 6, DARK: 4}


def test_convert_changes_one_cell():
    grid = Grid(15, 20)
    assert grid.convert(3, 15, LIGHT) is True
    assert grid.faction_at(3, 15) == LIGHT
    assert grid.faction_at(3, 14) == DARK
    assert grid.count_by_faction() == {LIGHT: 151, DARK: 149}


def test_convert_to_same_faction_reports_no_change():
    grid = Grid(15, 20)
    assert grid.convert(0, 0, LIGHT) is False
    assert grid.count_by_faction() == {LIGHT: 150, DARK: 150}


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (15, 0), (0, 20)])
def test_convert_out_of_range_raises(row, col):
    grid = Grid(15, 20)
    with pytest.raises(IndexError):
        grid.convert(row, col, LIGHT)
    assert grid.count_by_faction() == {LIGHT: 150, DARK: 150}


def test_convert_unknown_faction_raises():
    with pytest.raises(ValueError):
        Grid(15, 20).convert(0, 0, "grey")


def test_initialize_restores_split():
    grid = Grid(4, 4)
    for r in range(4):
        for c in range(4):
            grid.convert(r, c, DARK)
    grid.initialize()
    assert grid.count_by_faction() == {LIGHT: 8, DARK: 8}


def test_rows_snapshot_is_a_copy():
    grid = Grid(2, 2)
    snap = grid.rows_snapshot()
    grid.convert(0, 0, DARK)
    assert snap == ((LIGHT, DARK), (LIGHT, DARK))


@pytest.mark.parametrize("rows, cols", [(0, 20), (15, 0), (-1, 3)])
def test_non_positive_dimensions_rejected(rows, cols):
    with pytest.raises(ConfigError):
        Grid(rows, cols)
