"""
AI player for console TicTacToe.
Picks a move with a fixed set of rules instead of a game-tree search.
"""

from typing import Optional

from .board import Board, Player
from .win_checker import WinChecker


class AIPlayer:
    """
    A rule-based TicTacToe opponent.

    In order, the AI will:
    1. Take a winning cell
    2. Block the opponent's winning cell
    3. Take the center
    4. Take a corner
    5. Take an edge

    It only looks one move ahead, so a careful human can beat it.
    """

    CENTER = 4
    CORNERS = (0, 2, 6, 8)
    EDGES = (1, 3, 5, 7)

    def __init__(self, player: Player = Player.O):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
        """
        self.player = player
        self.win_checker = WinChecker()

    def select_move(
        self,
        board: Board,
        ai_player: Optional[Player] = None,
        opponent: Optional[Player] = None
    ) -> Optional[int]:
        """
        Choose a cell for the AI.

        The board is left exactly as it was given.

        Args:
            board: Current board.
            ai_player: Player to move (default: self.player).
            opponent: The other player (default: ai_player's opposite).

        Returns:
            Cell index (0-8), or None if the board is full.
        """
        if ai_player is None:
            ai_player = self.player
        if opponent is None:
            opponent = ai_player.opposite()

        move = self._find_winning_cell(board, ai_player)
        if move is not None:
            return move

        move = self._find_winning_cell(board, opponent)
        if move is not None:
            return move

        if not board.is_occupied(self.CENTER):
            return self.CENTER

        for index in self.CORNERS + self.EDGES:
            if not board.is_occupied(index):
                return index

        return None

    def _find_winning_cell(self, board: Board, player: Player) -> Optional[int]:
        """Get the lowest empty cell that would complete a line for player."""
        for index in board.get_empty_cells():
            with board.trial_move(index, player):
                if self.win_checker.has_winning_line(board):
                    return index
        return None


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(Player.O)

    # Test 1: AI should block a winning move
    board = Board.from_cells(["X", "X", " ", " ", "O", " ", " ", " ", " "])
    print(f"\n{board}  X is about to win with 2!")
    move = ai.select_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = Board.from_cells(["O", "O", " ", "X", "X", " ", "X", " ", " "])
    print(f"\n{board}  AI can win with 2!")
    move = ai.select_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
