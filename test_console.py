"""
Tests for console input and display.

Run with:
    pytest test_console.py
"""

import pytest

from logic.board import Board, Player
from logic.game_stats import GameStats
from logic.move_validator import MoveValidator
from logic.win_checker import RoundOutcome, DRAW
from console.config import ConsoleConfig
from console.display import ConsoleDisplay
from console.input_reader import ConsoleInput


def scripted_input(answers, output):
    """Console input that replays answers and records messages."""
    replies = iter(answers)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        return next(replies)

    reader = ConsoleInput(read_line=read_line, output=output.append)
    return reader, prompts


# ==================== INPUT ====================

def test_read_move_returns_index():
    output = []
    reader, prompts = scripted_input(["5"], output)

    assert reader.read_move(Board(), Player.X) == 4
    assert prompts == ["Player X, enter a number (1-9): "]
    assert output == []


def test_read_move_reprompts_until_valid():
    output = []
    reader, prompts = scripted_input(["abc", "12", "5", "1"], output)
    board = Board.from_cells([" ", " ", " ", " ", "X", " ", " ", " ", " "])

    assert reader.read_move(board, Player.X) == 0
    assert len(prompts) == 4
    assert output == [
        MoveValidator.NOT_A_NUMBER,
        MoveValidator.OUT_OF_RANGE,
        MoveValidator.SPOT_TAKEN,
    ]
    # Rejected attempts never touch the board
    assert board.get_empty_cells() == [0, 1, 2, 3, 5, 6, 7, 8]


@pytest.mark.parametrize("answer,expected", [
    ("y", True),
    ("Y", True),
    ("  y  ", True),
    ("yes", True),
    ("n", False),
    ("N", False),
    ("", False),
    ("x", False),
    ("ny", False),
])
def test_read_play_again(answer, expected):
    reader, _ = scripted_input([answer], [])
    assert reader.read_play_again() is expected


def test_play_again_end_of_input_means_no():
    def read_line(prompt):
        raise EOFError

    reader = ConsoleInput(read_line=read_line)
    assert reader.read_play_again() is False


# ==================== DISPLAY ====================

def test_empty_board_shows_position_labels():
    display = ConsoleDisplay()
    text = display.format_board(Board())

    assert "\t 1 | 2 | 3 \n" in text
    assert "\t 4 | 5 | 6 \n" in text
    assert "\t 7 | 8 | 9 \n" in text
    assert text.count("___|___|___") == 2


def test_taken_cells_show_marks():
    display = ConsoleDisplay()
    board = Board.from_cells(["X", " ", " ", " ", "O", " ", " ", " ", "X"])
    text = display.format_board(board)

    assert "\t X | 2 | 3 \n" in text
    assert "\t 4 | O | 6 \n" in text
    assert "\t 7 | 8 | X \n" in text


def test_stats_block_layout():
    display = ConsoleDisplay()
    stats = GameStats(x_wins=2, o_wins=1, draws=3, rounds_played=6)

    assert display.format_stats(stats).splitlines() == [
        "",
        "=" * 40,
        "        GAME STATISTICS (6 Rounds)",
        "-" * 40,
        "Player X (You) Wins: 2",
        "Player O (AI) Wins:  1",
        "Draws:               3",
        "=" * 40,
    ]


def test_outcome_messages():
    display = ConsoleDisplay()

    assert display.format_outcome(DRAW) == "\n*** It's a DRAW! ***"

    text = display.format_outcome(RoundOutcome.win(Player.O), (0, 4, 8))
    assert "*** Player O WINS! (The AI) ***" in text
    assert "Winning line: 1-5-9" in text

    text = display.format_outcome(RoundOutcome.win(Player.X))
    assert "*** Player X WINS! (You) ***" in text


def test_display_uses_config_text():
    class QuietConfig(ConsoleConfig):
        FAREWELL = "Bye."

    output = []
    display = ConsoleDisplay(QuietConfig(), output=output.append)
    display.show_farewell()
    display.show_ai_move(Player.O, 4)

    assert output == ["\nBye.", "Player O chooses position 5."]
