import pytest

from toascii.engine import CharGrid


def test_chars_can_be_added_to_an_empty_row():
    grid = CharGrid(8, 8)
    for col in range(4):
        grid.write(4, col, "$")
    assert grid.text == ["", "", "", "", "$$$$", "", "", ""]


def test_space_can_be_overwritten():
    grid = CharGrid(8, 8)
    grid.write(4, 0, " ")
    grid.write(4, 0, "!")
    assert grid.text == ["", "", "", "", "!", "", "", ""]


def test_glyph_cannot_be_overwritten():
    grid = CharGrid(8, 8)
    grid.write(4, 0, "$")
    grid.write(4, 0, "!")
    assert grid.text == ["", "", "", "", "$", "", "", ""]


def test_glyph_cannot_be_blanked_by_space():
    grid = CharGrid(2, 1)
    grid.write(0, 0, "$")
    grid.write(0, 0, " ")
    assert grid.cell(0, 0) == "$"


def test_same_glyph_twice_is_idempotent():
    once = CharGrid(3, 2)
    once.write(1, 1, "|")
    twice = CharGrid(3, 2)
    twice.write(1, 1, "|")
    twice.write(1, 1, "|")
    assert once.rows() == twice.rows()


def test_rows_pad_unset_cells_with_spaces():
    grid = CharGrid(8, 8)
    for col in range(4):
        grid.write(4, col, "$")
    rows = grid.rows()
    assert len(rows) == 8
    assert all(len(row) == 8 for row in rows)
    assert rows[4] == "$$$$    "
    assert all(row == " " * 8 for i, row in enumerate(rows) if i != 4)


def test_write_outside_grid_raises():
    grid = CharGrid(4, 2)
    with pytest.raises(IndexError):
        grid.write(2, 0, "#")
    with pytest.raises(IndexError):
        grid.write(0, -1, "#")
