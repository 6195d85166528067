"""
Running statistics for a TicTacToe session.
Counts are kept in memory only and start from zero every run.
"""

from dataclasses import dataclass

from .board import Player
from .win_checker import RoundOutcome


@dataclass
class GameStats:
    """Wins, draws and rounds played since the program started."""
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0
    rounds_played: int = 0

    def record(self, outcome: RoundOutcome):
        """
        Count one finished round.

        Raises:
            ValueError: If the outcome is still ongoing.
        """
        if not outcome.is_decided:
            raise ValueError("Cannot record a round that is still in progress")

        if outcome.winner == Player.X:
            self.x_wins += 1
        elif outcome.winner == Player.O:
            self.o_wins += 1
        else:
            self.draws += 1

        self.rounds_played += 1

    def wins_for(self, player: Player) -> int:
        return self.x_wins if player == Player.X else self.o_wins
