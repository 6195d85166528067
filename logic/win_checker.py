"""
Win checker for console TicTacToe.
Checks if a player has won or if the round is a draw.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .board import Board, Player, EMPTY


@dataclass(frozen=True)
class RoundOutcome:
    """
    Result of evaluating a board.

    Ongoing: no winner and not a draw.
    """
    winner: Optional[Player] = None
    is_draw: bool = False

    @classmethod
    def win(cls, player: Player) -> "RoundOutcome":
        return cls(winner=player)

    @property
    def is_decided(self) -> bool:
        """True once the round has a winner or is a draw."""
        return self.winner is not None or self.is_draw


ONGOING = RoundOutcome()
DRAW = RoundOutcome(is_draw=True)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells held by the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as cell index triples)
    WINNING_LINES = np.array([
        # Rows
        [0, 1, 2],
        [3, 4, 5],
        [6, 7, 8],
        # Columns
        [0, 3, 6],
        [1, 4, 7],
        [2, 5, 8],
        # Diagonals
        [0, 4, 8],
        [2, 4, 6],
    ], dtype=np.intp)

    def _completed_lines(self, board: Board) -> np.ndarray:
        """Get the row numbers in WINNING_LINES held entirely by one player."""
        lines = board.cells[self.WINNING_LINES]
        complete = (
            (lines[:, 0] != EMPTY)
            & (lines[:, 0] == lines[:, 1])
            & (lines[:, 1] == lines[:, 2])
        )
        return np.flatnonzero(complete)

    def has_winning_line(self, board: Board) -> bool:
        """
        Check if any line is held entirely by one player.

        This does not say who won. Only the player who just moved
        can have completed a line.
        """
        return self._completed_lines(board).size > 0

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the first completed line if there is one.

        Returns:
            The winning line as a tuple of cell indices, or None.
        """
        completed = self._completed_lines(board)
        if completed.size == 0:
            return None
        return tuple(int(i) for i in self.WINNING_LINES[completed[0]])

    def check_winner(self, board: Board) -> Optional[Player]:
        """Get the player holding the first completed line, or None."""
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board.value_at(line[0])

    def is_full(self, board: Board) -> bool:
        """Check if every cell is occupied."""
        return board.is_full()

    def evaluate(self, board: Board, last_mover: Player) -> RoundOutcome:
        """
        Evaluate the board right after a move.

        A winning line is checked before a full board, so a move that
        both wins and fills the board is a win.

        Args:
            board: The board after the move.
            last_mover: The player who just moved.

        Returns:
            Win for last_mover, DRAW, or ONGOING.
        """
        if self.has_winning_line(board):
            return RoundOutcome.win(last_mover)
        if self.is_full(board):
            return DRAW
        return ONGOING


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    board = Board.from_cells(["X", "X", "X", "O", "O", " ", " ", " ", " "])
    print(f"Row win: {checker.evaluate(board, Player.X)}")
    assert checker.evaluate(board, Player.X) == RoundOutcome.win(Player.X)

    board = Board.from_cells(["X", "O", "X", "O", "X", "O", "O", "X", "O"])
    print(f"Full board: {checker.evaluate(board, Player.O)}")
    assert checker.evaluate(board, Player.O) == DRAW

    print("\nWinChecker test done!")
