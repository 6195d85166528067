"""
Console display for TicTacToe.
Renders the board, round messages, and the statistics block.
"""

from typing import Callable, Optional, Tuple

from logic.board import Board, Player
from logic.game_stats import GameStats
from logic.win_checker import RoundOutcome
from .config import ConsoleConfig


class ConsoleDisplay:
    """
    Writes everything the player sees.

    Empty cells show their 1-9 label, taken cells show the player's mark.
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        output: Callable[[str], None] = print
    ):
        """
        Initialize the display.

        Args:
            config: Console configuration.
            output: Function that writes one block of text (default: print).
        """
        self.config = config or ConsoleConfig()
        self.output = output

    # ==================== FORMATTING ====================

    @staticmethod
    def cell_label(board: Board, index: int) -> str:
        """Get the text shown for one cell."""
        player = board.value_at(index)
        return player.value if player else str(index + 1)

    def format_board(self, board: Board) -> str:
        """Format the board as a 3x3 grid."""
        labels = [self.cell_label(board, i) for i in range(Board.SIZE)]
        rows = []
        for start in (0, 3, 6):
            a, b, c = labels[start:start + 3]
            rows.append(f"\t   |   |   \n\t {a} | {b} | {c} \n")
        spacer = "\t___|___|___\n"
        return "\n" + spacer.join(rows) + "\t   |   |   \n"

    def format_stats(self, stats: GameStats) -> str:
        """Format the cumulative statistics block."""
        heavy = "=" * self.config.STATS_WIDTH
        light = "-" * self.config.STATS_WIDTH
        lines = [
            "",
            heavy,
            f"        GAME STATISTICS ({stats.rounds_played} Rounds)",
            light,
            f"Player X (You) Wins: {stats.x_wins}",
            f"Player O (AI) Wins:  {stats.o_wins}",
            f"Draws:               {stats.draws}",
            heavy,
            "",
        ]
        return "\n".join(lines)

    def format_outcome(
        self,
        outcome: RoundOutcome,
        winning_line: Optional[Tuple[int, ...]] = None
    ) -> str:
        """Format the end-of-round announcement."""
        if outcome.winner is None:
            return "\n*** It's a DRAW! ***"

        name = self.config.PLAYER_NAMES[outcome.winner]
        text = f"\n*** Player {outcome.winner.value} WINS! ({name}) ***"
        if winning_line:
            positions = "-".join(str(i + 1) for i in winning_line)
            text += f"\nWinning line: {positions}"
        return text

    # ==================== OUTPUT ====================

    def show_welcome(self):
        self.output(self.config.TITLE)
        self.output(self.config.SUBTITLE)

    def show_round_start(self, round_number: int):
        self.output(f"\n================ ROUND {round_number} START =============")

    def show_board(self, board: Board):
        self.output(self.format_board(board))

    def show_ai_thinking(self, player: Player):
        self.output(f"\nPlayer {player.value} (AI) is calculating...")

    def show_ai_move(self, player: Player, index: int):
        self.output(f"Player {player.value} chooses position {index + 1}.")

    def show_outcome(
        self,
        outcome: RoundOutcome,
        winning_line: Optional[Tuple[int, ...]] = None
    ):
        self.output(self.format_outcome(outcome, winning_line))

    def show_stats(self, stats: GameStats):
        self.output(self.format_stats(stats))

    def show_farewell(self):
        self.output(f"\n{self.config.FAREWELL}")
