"""
Blocking console prompts for TicTacToe.
Each prompt keeps asking until it gets an answer it can use.
"""

from typing import Callable, Optional

from logic.game_state import GameState, Mark
from logic.move_validator import MoveValidator

from .config import ConsoleConfig


InputFunc = Callable[[], str]
OutputFunc = Callable[[str], None]


def ask_mark(
    input_func: InputFunc = input,
    output_func: OutputFunc = print
) -> Mark:
    """
    Ask which mark the human wants to play.

    Returns:
        Mark.CROSS or Mark.NOUGHT.
    """
    while True:
        mark = Mark.from_choice(input_func())
        if mark is not None:
            return mark
        output_func(ConsoleConfig.MARK_RETRY)


def ask_move(
    game_state: GameState,
    validator: Optional[MoveValidator] = None,
    input_func: InputFunc = input,
    output_func: OutputFunc = print
) -> int:
    """
    Ask the human for their next move.

    Args:
        game_state: Current game; the answer must be a free cell on its board.
        validator: Validator to use (a fresh one by default).

    Returns:
        1-based cell number of a free cell.
    """
    validator = validator or MoveValidator()

    output_func(ConsoleConfig.MOVE_PROMPT)
    while True:
        result = validator.validate_input(game_state, input_func())
        if result.is_valid:
            return result.cell

        output_func(result.error_message)
        output_func(ConsoleConfig.MOVE_REMINDER)


def ask_play_again(
    input_func: InputFunc = input,
    output_func: OutputFunc = print
) -> bool:
    """
    Ask whether to play another game.

    Returns:
        True for yes, False for no.
    """
    while True:
        choice = input_func().strip().lower()
        if choice in ConsoleConfig.PLAY_AGAIN_YES:
            return True
        if choice in ConsoleConfig.PLAY_AGAIN_NO:
            return False
        output_func(ConsoleConfig.PLAY_AGAIN_RETRY)
