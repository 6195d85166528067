"""
Console configuration for TicTacToe.
All the settings for prompts, players, and timing.
"""

from logic.board import Player


class ConsoleConfig:
    """
    Configuration class for the console game.
    Change these values to adjust the text and pacing!
    """

    # ==================== PLAYERS ====================
    HUMAN_PLAYER = Player.X
    AI_PLAYER = Player.O

    # Names used in win announcements
    PLAYER_NAMES = {
        Player.X: "You",
        Player.O: "The AI",
    }

    # ==================== TIMING ====================
    # Pause (seconds) while the AI "calculates", purely for effect
    AI_THINK_DELAY = 0.6

    # ==================== TEXT ====================
    TITLE = "--- Python Console Tic-Tac-Toe (vs AI) ---"
    SUBTITLE = "Player X (You) vs Player O (AI)"

    MOVE_PROMPT = "Player {player}, enter a number (1-9): "
    PLAY_AGAIN_PROMPT = "Do you want to play another round? (y/n): "
    PLAY_AGAIN_KEY = "y"

    FAREWELL = "Thank you for playing! Final statistics recorded."

    # Width of the statistics block
    STATS_WIDTH = 40
