"""
Logic module for console TicTacToe.
Handles the board, rules, statistics, and AI opponent.
"""

__version__ = "1.0.0"

from .board import Board, Player, EMPTY
from .win_checker import WinChecker, RoundOutcome, ONGOING, DRAW
from .move_validator import MoveValidator, ValidationResult
from .game_stats import GameStats
from .ai_player import AIPlayer
