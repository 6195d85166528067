"""
Console input for TicTacToe.
Reads the human's moves and the play-again answer.
"""

from typing import Callable, Optional

from logic.board import Board, Player
from logic.move_validator import MoveValidator
from .config import ConsoleConfig


class ConsoleInput:
    """
    Prompts the human until a usable answer is typed.

    Bad moves never reach the board: each one gets its own message
    and the prompt is shown again.
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        validator: Optional[MoveValidator] = None,
        read_line: Callable[[str], str] = input,
        output: Callable[[str], None] = print
    ):
        """
        Initialize the input reader.

        Args:
            config: Console configuration.
            validator: Move validator.
            read_line: Function that shows a prompt and returns a line (default: input).
            output: Function used for error messages (default: print).
        """
        self.config = config or ConsoleConfig()
        self.validator = validator or MoveValidator()
        self.read_line = read_line
        self.output = output

    def read_move(self, board: Board, player: Player) -> int:
        """
        Ask for a move until an empty cell is chosen.

        Args:
            board: Current board (not modified).
            player: Player being asked.

        Returns:
            Cell index (0-8).
        """
        prompt = self.config.MOVE_PROMPT.format(player=player.value)

        while True:
            result = self.validator.parse_choice(board, self.read_line(prompt))
            if result.is_valid:
                return result.index
            self.output(result.error_message)

    def read_play_again(self) -> bool:
        """
        Ask whether to play another round.

        Only the first typed character counts. End of input means no.
        """
        try:
            answer = self.read_line(self.config.PLAY_AGAIN_PROMPT)
        except EOFError:
            return False

        answer = answer.strip()
        return answer[:1].lower() == self.config.PLAY_AGAIN_KEY
