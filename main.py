"""
Main orchestration script for console TicTacToe.

This script ties together:
- Logic (board, win checking, move validation, AI, statistics)
- Console (prompts, input, text output)

Run this script to play TicTacToe against the AI!
"""

import time
from enum import Enum
from typing import Optional

# Logic imports
from logic.board import Board, Player
from logic.win_checker import WinChecker, RoundOutcome, ONGOING
from logic.move_validator import MoveValidator
from logic.game_stats import GameStats
from logic.ai_player import AIPlayer

# Console imports
from console.config import ConsoleConfig
from console.display import ConsoleDisplay
from console.input_reader import ConsoleInput


class RoundPhase(Enum):
    """Where the current round is."""
    SETUP = "setup"
    IN_PROGRESS = "in_progress"
    DECIDED = "decided"


class TicTacToeGame:
    """
    Main controller for a console TicTacToe session.

    Round flow:
    1. Board is cleared, X moves first
    2. Human (X) types a move, AI (O) picks one
    3. After every move the board is checked for a win or draw
    4. The result is counted and the statistics are shown
    5. The human decides whether to play another round
    """

    def __init__(
        self,
        input_reader: Optional[ConsoleInput] = None,
        display: Optional[ConsoleDisplay] = None,
        config: Optional[ConsoleConfig] = None,
        stats: Optional[GameStats] = None
    ):
        """
        Initialize the game.

        Args:
            input_reader: Source of human moves and play-again answers.
            display: Where board and messages are written.
            config: Console configuration.
            stats: Statistics to add to (default: a fresh GameStats).
        """
        self.config = config or ConsoleConfig()
        self.input_reader = input_reader or ConsoleInput(self.config)
        self.display = display or ConsoleDisplay(self.config)
        self.stats = stats or GameStats()

        self.human_player = self.config.HUMAN_PLAYER
        self.ai_player = self.config.AI_PLAYER

        self.board = Board()
        self.win_checker = WinChecker()
        self.validator = MoveValidator()
        self.ai = AIPlayer(self.ai_player)

        self.current_player = Player.X
        self.phase = RoundPhase.SETUP

    def run(self):
        """Play rounds until the human declines another one."""
        self.display.show_welcome()

        play_again = True
        while play_again:
            self.play_round()
            play_again = self.input_reader.read_play_again()

        self.display.show_farewell()

    def play_round(self) -> RoundOutcome:
        """
        Play one round from an empty board to a win or draw.

        Returns:
            The decided outcome.
        """
        self._setup_round()
        self.display.show_round_start(self.stats.rounds_played + 1)

        outcome = ONGOING
        while self.phase == RoundPhase.IN_PROGRESS:
            self.display.show_board(self.board)
            outcome = self._play_turn()

        self.display.show_board(self.board)
        self.display.show_outcome(outcome, self.win_checker.get_winning_line(self.board))
        self.display.show_stats(self.stats)

        return outcome

    def _setup_round(self):
        """Reset the board for a new round."""
        self.board.reset()
        self.current_player = Player.X
        self.phase = RoundPhase.IN_PROGRESS

    def _play_turn(self) -> RoundOutcome:
        """
        Let the current player move and evaluate the board.

        Returns:
            Outcome after the move.
        """
        if self.current_player == self.human_player:
            self._human_move()
        else:
            self._ai_move()

        outcome = self.win_checker.evaluate(self.board, self.current_player)

        if outcome.is_decided:
            self.stats.record(outcome)
            self.phase = RoundPhase.DECIDED
        else:
            self.current_player = self.current_player.opposite()

        return outcome

    def _human_move(self):
        """Ask the human for a move and apply it."""
        index = self.input_reader.read_move(self.board, self.current_player)
        self.board.set_cell(index, self.current_player)

    def _ai_move(self) -> Optional[int]:
        """
        Apply the AI's move.

        Returns:
            Cell index played, or None if no move was applied.
        """
        index = self.ai.select_move(self.board, self.current_player, self.current_player.opposite())

        result = self.validator.validate_index(self.board, index)
        if not result.is_valid:
            print(f"ERROR: AI could not find a move! ({result.error_message})")
            return None

        self.display.show_ai_thinking(self.current_player)
        if self.config.AI_THINK_DELAY > 0:
            time.sleep(self.config.AI_THINK_DELAY)

        self.display.show_ai_move(self.current_player, result.index)
        self.board.set_cell(result.index, self.current_player)
        return result.index


def main():
    """Main entry point."""
    game = TicTacToeGame()

    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
        game.display.show_stats(game.stats)
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
