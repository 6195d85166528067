"""
Console module for TicTacToe.
Handles prompts, input, and text output.
"""

from .config import ConsoleConfig
from .display import ConsoleDisplay
from .input_reader import ConsoleInput
