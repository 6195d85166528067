"""
Board for console TicTacToe.
Holds the 9 cells and the players that can occupy them.

Cells are indexed 0-8, left to right and top to bottom:

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8
"""

from contextlib import contextmanager
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Union

import numpy as np


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def code(self) -> int:
        """Cell code stored in the board array."""
        return 1 if self == Player.X else 2

    @staticmethod
    def from_code(code: int) -> Optional["Player"]:
        """Get the player for a cell code (None for an empty cell)."""
        if code == EMPTY:
            return None
        return Player.X if code == 1 else Player.O


# Cell code for an empty cell
EMPTY = 0

CellValue = Union[Player, str, None]


class Board:
    """
    The 3x3 TicTacToe board stored as a flat numpy array.

    A cell is either empty or held by one player. Once set, a cell is
    only ever cleared by reset() or when a trial move is undone.
    """

    SIZE = 9

    def __init__(self):
        self.cells = np.full(self.SIZE, EMPTY, dtype=np.int8)

    @classmethod
    def from_cells(cls, values: Sequence[CellValue]) -> "Board":
        """
        Build a board from 9 cell values.

        Args:
            values: Player, "X", "O", or None / " " / "_" for empty.

        Returns:
            A new Board.
        """
        if len(values) != cls.SIZE:
            raise ValueError(f"Expected {cls.SIZE} cells, got {len(values)}")

        board = cls()
        for index, value in enumerate(values):
            if isinstance(value, str):
                value = None if value in (" ", "_", "") else Player(value.upper())
            if value is not None:
                board.set_cell(index, value)
        return board

    def reset(self):
        """Empty every cell."""
        self.cells.fill(EMPTY)

    def _check_index(self, index: int):
        if not 0 <= index < self.SIZE:
            raise IndexError(f"Cell index {index} out of range 0-{self.SIZE - 1}")

    def is_occupied(self, index: int) -> bool:
        """Check if a cell holds a player."""
        self._check_index(index)
        return bool(self.cells[index] != EMPTY)

    def set_cell(self, index: int, player: Player):
        """
        Place a player's mark on an empty cell.

        Args:
            index: Cell index (0-8).
            player: Player taking the cell.

        Raises:
            IndexError: If the index is outside the board.
            ValueError: If the cell is already occupied.
        """
        if self.is_occupied(index):
            raise ValueError(
                f"Cell {index} is already occupied by {self.value_at(index).value}"
            )
        self.cells[index] = player.code

    def value_at(self, index: int) -> Optional[Player]:
        """Get the player in a cell, or None if it is empty."""
        self._check_index(index)
        return Player.from_code(int(self.cells[index]))

    def get_empty_cells(self) -> List[int]:
        """Get all empty cell indices in ascending order."""
        return [int(i) for i in np.flatnonzero(self.cells == EMPTY)]

    def is_full(self) -> bool:
        """Check if no empty cell remains."""
        return bool(np.all(self.cells != EMPTY))

    @contextmanager
    def trial_move(self, index: int, player: Player) -> Iterator["Board"]:
        """
        Temporarily place a player's mark, undoing it on exit.

        The cell is emptied again even if the body raises.

        Usage:
            with board.trial_move(4, Player.O):
                won = checker.has_winning_line(board)
        """
        self.set_cell(index, player)
        try:
            yield self
        finally:
            self.cells[index] = EMPTY

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        new_board.cells = self.cells.copy()
        return new_board

    def to_list(self) -> List[Optional[Player]]:
        """Get the cells as a list of Player / None."""
        return [Player.from_code(int(code)) for code in self.cells]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        marks = "".join(p.value if p else "_" for p in self.to_list())
        return f"Board({marks[0:3]}/{marks[3:6]}/{marks[6:9]})"


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    board.set_cell(4, Player.X)
    board.set_cell(0, Player.O)
    print(board)

    with board.trial_move(8, Player.X):
        print(f"During trial: {board}")
    print(f"After trial:  {board}")
    assert not board.is_occupied(8)

    print(f"Empty cells: {board.get_empty_cells()}")
    print("\nBoard test done!")
