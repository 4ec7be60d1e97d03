from __future__ import annotations

import numpy as np
import pytest

from cup_tetris.game import HEIGHT, WIDTH, Board, Point, TileKind


def test_new_board_is_empty():
    board = Board()
    assert board.cells.shape == (HEIGHT, WIDTH)
    assert np.all(board.cells == TileKind.EMPTY)
    assert not board.top_row_has_filled_cell()
    assert board.max_height() == 0


@pytest.mark.parametrize(
    "point, inside",
    [
        (Point(0, 0), True),
        (Point(WIDTH - 1, HEIGHT - 1), True),
        (Point(-1, 0), False),
        (Point(0, -1), False),
        (Point(WIDTH, 0), False),
        (Point(0, HEIGHT), False),
    ],
)
def test_is_inside(point, inside):
    assert Board().is_inside(point) is inside


def test_cell_at_out_of_bounds_raises():
    board = Board()
    with pytest.raises(IndexError):
        board.cell_at(Point(-1, 3))


def test_set_and_read_cell():
    board = Board()
    board.set_cell(Point(3, 7), TileKind.Z)
    assert board.cell_at(Point(3, 7)) == TileKind.Z
    assert board.cell_at(Point(4, 7)) == TileKind.EMPTY


def test_row_is_full_ignores_shadow():
    board = Board()
    board.cells[19, :] = TileKind.L
    assert board.row_is_full(19)
    board.cells[19, 4] = TileKind.SHADOW
    assert not board.row_is_full(19)
    board.cells[19, 4] = TileKind.EMPTY
    assert not board.row_is_full(19)


def test_clear_row_compacts_and_preserves_order():
    board = Board()
    kinds = [TileKind.SQUARE, TileKind.STICK, TileKind.S, TileKind.Z, TileKind.L, TileKind.J, TileKind.T]
    for y in range(HEIGHT):
        board.cells[y, 0] = kinds[y % len(kinds)]
        board.cells[y, 1] = TileKind.EMPTY if y % 2 else TileKind.T
    before = board.clone_state()

    board.clear_row(8)

    assert np.all(board.cells[0] == TileKind.EMPTY)
    np.testing.assert_array_equal(board.cells[1:9], before[0:8])
    np.testing.assert_array_equal(board.cells[9:], before[9:])
    assert board.cells.shape == (HEIGHT, WIDTH)


def test_clear_full_rows_counts_and_compacts():
    board = Board()
    board.cells[17, :] = TileKind.T
    board.cells[19, :] = TileKind.J
    board.cells[18, 2] = TileKind.S
    board.cells[16, 5] = TileKind.Z

    assert board.clear_full_rows() == 2
    assert board.cell_at(Point(2, 19)) == TileKind.S
    assert board.cell_at(Point(5, 18)) == TileKind.Z
    assert board.max_height() == 2


def test_top_row_detection_ignores_shadow():
    board = Board()
    board.cells[0, 3] = TileKind.SHADOW
    assert not board.top_row_has_filled_cell()
    board.cells[0, 3] = TileKind.STICK
    assert board.top_row_has_filled_cell()


def test_count_holes():
    board = Board()
    board.cells[15, 0] = TileKind.T
    board.cells[17, 0] = TileKind.T
    assert board.count_holes() == 3


def test_copy_is_independent():
    board = Board()
    other = board.copy()
    other.set_cell(Point(0, 0), TileKind.J)
    assert board.cell_at(Point(0, 0)) == TileKind.EMPTY
