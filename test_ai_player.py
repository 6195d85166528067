"""
Tests for the rule-based AI player.

Run with:
    pytest test_ai_player.py
"""

import itertools

import pytest

from logic.board import Board, Player
from logic.win_checker import WinChecker
from logic.ai_player import AIPlayer


X, O, _ = "X", "O", " "


def select(cells, ai_player=Player.O):
    ai = AIPlayer(ai_player)
    return ai.select_move(Board.from_cells(cells))


def test_empty_board_takes_center():
    assert select([_] * 9) == 4


def test_takes_center_when_no_threats():
    assert select([X, _, _,
                   _, _, _,
                   _, _, _]) == 4


def test_takes_winning_cell():
    assert select([O, O, _,
                   X, X, _,
                   X, _, _]) == 2


def test_win_beats_block():
    # X threatens 2, but O completes the middle row at 5 first
    assert select([X, X, _,
                   O, O, _,
                   _, _, _]) == 5


def test_blocks_opponent():
    assert select([X, X, _,
                   _, O, _,
                   _, _, _]) == 2


def test_blocks_column_threat():
    assert select([X, _, _,
                   _, O, _,
                   X, _, _]) == 3


def test_fork_blocks_lowest_index():
    # X threatens both 2 (top row) and 3 (left column)
    assert select([X, X, _,
                   _, O, _,
                   X, _, _]) == 2


def test_takes_first_corner_when_center_taken():
    assert select([_, _, _,
                   _, X, _,
                   _, _, _]) == 0


def test_takes_next_free_corner():
    assert select([O, _, _,
                   _, X, _,
                   _, _, X]) == 2


def test_takes_lowest_edge_when_corners_and_center_taken():
    assert select([X, _, O,
                   O, X, X,
                   X, _, O]) == 1


def test_full_board_returns_none():
    assert select([X, O, X,
                   O, X, O,
                   O, X, O]) is None


def test_plays_either_side():
    # AI as X wins down the middle column instead of blocking O at 8
    board = [_, X, O,
             _, X, O,
             _, _, _]
    assert select(board, ai_player=Player.X) == 7


def test_explicit_sides_override_default():
    ai = AIPlayer(Player.O)
    board = Board.from_cells([X, X, _,
                              O, O, _,
                              _, _, _])
    assert ai.select_move(board, Player.X, Player.O) == 2


def test_select_move_does_not_change_board():
    ai = AIPlayer(Player.O)
    board = Board.from_cells([X, X, _,
                              O, O, _,
                              _, _, _])
    before = board.copy()

    ai.select_move(board)
    assert board == before


def _reachable_boards():
    """Every board with a legal mark count and X moving first."""
    for cells in itertools.product((X, O, _), repeat=9):
        x_count, o_count = cells.count(X), cells.count(O)
        if x_count in (o_count, o_count + 1):
            yield cells, (Player.X if x_count == o_count else Player.O)


def test_moves_are_always_legal_and_board_untouched():
    checker = WinChecker()

    for cells, to_move in _reachable_boards():
        board = Board.from_cells(cells)
        if checker.has_winning_line(board):
            continue

        before = board.copy()
        move = AIPlayer(to_move).select_move(board)
        assert board == before

        if board.is_full():
            assert move is None
        else:
            assert move in board.get_empty_cells()


@pytest.mark.parametrize("to_move", [Player.X, Player.O])
def test_always_takes_an_available_win(to_move):
    checker = WinChecker()

    for cells, side in _reachable_boards():
        if side != to_move:
            continue
        board = Board.from_cells(cells)
        if checker.has_winning_line(board):
            continue

        move = AIPlayer(to_move).select_move(board)
        can_win = False
        for index in board.get_empty_cells():
            with board.trial_move(index, to_move):
                can_win = can_win or checker.has_winning_line(board)

        if can_win:
            with board.trial_move(move, to_move):
                assert checker.has_winning_line(board)
