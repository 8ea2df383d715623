import itertools

import pytest

from classics.tictactoe import Board, play


def test_empty_board_has_no_winner_and_scores_zero():
    board = Board()
    assert board.winner() is None
    assert board.evaluate() == 0
    assert not board.is_full()


def test_row_win_for_x_scores_ten():
    board = Board(["XXX", "OO ", "   "])
    assert board.winner() == "X"
    assert board.evaluate() == 10


def test_column_win_for_o_scores_minus_ten():
    board = Board(["OX ", "OX ", "O  "])
    assert board.winner() == "O"
    assert board.evaluate() == -10


@pytest.mark.parametrize(
    "rows, mark",
    [(["X O", " XO", "  X"], "X"), (["X O", " O ", "OX "], "O")],
)
def test_diagonal_wins(rows, mark):
    assert Board(rows).winner() == mark


def test_full_board():
    board = Board(["XOX", "XOO", "OXX"])
    assert board.is_full()
    assert board.winner() is None
    assert board.best_move() is None


def test_is_valid_move_bounds_and_occupancy():
    board = Board(["X  ", "   ", "   "])
    assert not board.is_valid_move(0, 0)
    assert not board.is_valid_move(3, 0)
    assert not board.is_valid_move(0, -1)
    assert board.is_valid_move(2, 2)


def test_place_sets_cell_and_rejects_occupied():
    board = Board()
    board.place(1, 1, "O")
    assert board[1, 1] == "O"
    with pytest.raises(ValueError):
        board.place(1, 1, "X")


def test_place_rejects_unknown_player():
    with pytest.raises(ValueError):
        Board().place(0, 0, "Z")


def test_bad_board_shape_rejected():
    with pytest.raises(ValueError):
        Board(["XX", "   ", "   "])


def test_best_move_takes_the_win():
    board = Board(["XX ", "OO ", "   "])
    move = board.best_move()
    board.place(*move, "X")
    assert board.winner() == "X"


def test_best_move_blocks_a_loss():
    board = Board(["O  ", "O X", "   "])
    assert board.best_move() == (2, 0)


def test_minimax_of_won_board_is_terminal():
    board = Board(["XXX", "OO ", "   "])
    assert board.minimax(0, False) == board.evaluate()


def test_best_move_does_not_change_board():
    board = Board(["X O", "   ", "   "])
    before = board.render()
    board.best_move()
    assert board.render() == before


def _feeder(values):
    it = iter(values)
    return lambda: next(it)


def test_two_player_game_o_wins():
    out = []
    moves = ["0", "0", "1", "0", "0", "1", "1", "1", "0", "2"]
    assert play(1, _feeder(moves), out.append) == "O"
    assert "Player O wins!" in "".join(out)


def test_invalid_move_is_reported_and_retried():
    out = []
    moves = ["5", "5", "x", "1", "0", "0", "1", "0", "0", "1", "1", "1", "0", "2"]
    assert play(1, _feeder(moves), out.append) == "O"
    assert "Invalid move! Try again." in "".join(out)


def test_computer_never_loses():
    cells = [str(v) for pair in itertools.product(range(3), repeat=2) for v in pair]
    out = []
    result = play(2, _feeder(itertools.cycle(cells)), out.append)
    assert result in ("X", None)


def test_play_rejects_unknown_mode():
    with pytest.raises(ValueError):
        play(3, _feeder([]), lambda s: None)