"""
Move validator for console TicTacToe.
Checks human choices and AI picks before they reach the board.
"""

from dataclasses import dataclass
from typing import Optional

from .board import Board, Player


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    index: Optional[int] = None          # Cell index (0-8) when valid
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Humans choose positions 1-9, the board uses indices 0-8.
    Rules:
    1. Choice must be a number
    2. Number must be 1-9
    3. Can only place on empty cells
    """

    NOT_A_NUMBER = "Invalid input. Please enter a number."
    OUT_OF_RANGE = "Invalid number. Please enter a number between 1 and 9."
    SPOT_TAKEN = "Spot already taken. Try again."

    def parse_choice(self, board: Board, text: str) -> ValidationResult:
        """
        Validate a move typed by the human.

        Args:
            board: Current board.
            text: Raw input line.

        Returns:
            ValidationResult with the cell index when valid.
        """
        try:
            position = int(text.strip())
        except ValueError:
            return ValidationResult(is_valid=False, error_message=self.NOT_A_NUMBER)

        return self.validate_position(board, position)

    def validate_position(self, board: Board, position: int) -> ValidationResult:
        """
        Validate a 1-9 board position.

        Args:
            board: Current board.
            position: Position as shown on screen (1-9).

        Returns:
            ValidationResult with the cell index when valid.
        """
        if not 1 <= position <= Board.SIZE:
            return ValidationResult(is_valid=False, error_message=self.OUT_OF_RANGE)

        index = position - 1
        if board.is_occupied(index):
            return ValidationResult(is_valid=False, error_message=self.SPOT_TAKEN)

        return ValidationResult(is_valid=True, index=index)

    def validate_index(self, board: Board, index: Optional[int]) -> ValidationResult:
        """
        Validate a 0-8 cell index picked by the AI.

        Args:
            board: Current board.
            index: Cell index, or None if the AI found no move.

        Returns:
            ValidationResult.
        """
        if index is None:
            return ValidationResult(is_valid=False, error_message="No move available")

        if not 0 <= index < Board.SIZE:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell index {index}. Must be 0-{Board.SIZE - 1}."
            )

        if board.is_occupied(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board.value_at(index).value}"
            )

        return ValidationResult(is_valid=True, index=index)


# Quick test
if __name__ == "__main__":
    print("Testing MoveValidator...")

    board = Board()
    validator = MoveValidator()

    result = validator.parse_choice(board, "5")
    print(f"Move '5': valid={result.is_valid}, index={result.index}")

    board.set_cell(4, Player.X)

    for text in ("5", "abc", "12"):
        result = validator.parse_choice(board, text)
        print(f"Move '{text}': valid={result.is_valid}, error={result.error_message}")

    print("\nMoveValidator test done!")
