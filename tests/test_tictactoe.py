import random

import pytest

from drillbook.tictactoe import COMPUTER, DRAW, EMPTY, PLAYER, Board, computer_move


def test_new_board_is_empty():
    board = Board()
    assert len(board.empty_cells()) == 25
    assert not board.is_full()
    assert board.winner() is None


def test_row_wins():
    board = Board()
    for col in range(5):
        board.place(2, col, PLAYER)
    assert board.winner() == PLAYER


def test_column_wins():
    board = Board()
    for row in range(5):
        board.place(row, 3, COMPUTER)
    assert board.winner() == COMPUTER


def test_diagonals_win():
    main_diag = Board()
    anti_diag = Board()
    for i in range(5):
        main_diag.place(i, i, PLAYER)
        anti_diag.place(i, 4 - i, COMPUTER)
    assert main_diag.winner() == PLAYER
    assert anti_diag.winner() == COMPUTER


def test_four_in_a_row_is_not_a_win():
    board = Board()
    for col in range(4):
        board.place(0, col, PLAYER)
    assert board.winner() is None


def test_full_board_without_line_is_draw():
    board = Board()
    for row in range(5):
        for col in range(5):
            board.place(row, col, PLAYER if (2 * row + col) % 5 < 2 else COMPUTER)
    assert board.is_full()
    assert board.empty_cells() == []
    assert board.winner() == DRAW


def test_place_on_taken_cell_raises():
    board = Board()
    board.place(1, 1, PLAYER)
    with pytest.raises(ValueError):
        board.place(1, 1, COMPUTER)
    assert board[1, 1] == PLAYER


@pytest.mark.parametrize("row, col", [(-1, 0), (5, 0), (0, 5), (0, -1)])
def test_place_off_board_raises(row, col):
    with pytest.raises(IndexError):
        Board().place(row, col, PLAYER)


def test_unknown_mark_raises():
    with pytest.raises(ValueError):
        Board().place(0, 0, "z")


def test_computer_move_takes_an_empty_cell():
    board = Board()
    board.place(0, 0, PLAYER)
    row, col = computer_move(board, random.Random(1))
    assert board[row, col] == COMPUTER
    assert board[0, 0] == PLAYER
    assert len(board.empty_cells()) == 23


def test_computer_move_finds_last_cell():
    board = Board()
    for row, col in board.empty_cells():
        if (row, col) != (3, 3):
            board.place(row, col, PLAYER if (row + col) % 2 else COMPUTER)
    assert computer_move(board, random.Random(7)) == (3, 3)
    assert board[3, 3] == COMPUTER


def test_computer_move_on_full_board_raises():
    board = Board()
    for row in range(5):
        for col in range(5):
            board.place(row, col, PLAYER if (2 * row + col) % 5 < 2 else COMPUTER)
    with pytest.raises(ValueError):
        computer_move(board, random.Random(0))


def test_format_shows_marks():
    board = Board()
    board.place(1, 2, PLAYER)
    text = board.format()
    assert text.splitlines()[0] == "*" * 36
    assert "|   x  |" in text
    assert f"|   {EMPTY}  |" in text