"""
Move validator for TicTacToe.
Validates that a human's move follows the rules.
"""

from typing import Optional
from dataclasses import dataclass

from .config import LogicConfig
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    cell: Optional[int] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves typed by a human.

    Rules:
    1. The input must be a whole number
    2. The number must be a cell, 1 to 9
    3. The cell must be empty
    4. Game must not be over
    """

    def parse_cell(self, text: str) -> Optional[int]:
        """Turn typed text into a cell number, or None if it isn't a number."""
        try:
            return int(text.strip())
        except ValueError:
            return None

    def validate_move(self, game_state: GameState, cell: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            cell: 1-based cell number.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                cell=cell,
                error_message="Game is already over!"
            )

        if not (1 <= cell <= LogicConfig.CELL_COUNT):
            return ValidationResult(
                is_valid=False,
                cell=cell,
                error_message=f"{cell} is not on the board."
            )

        if not game_state.board.is_free(cell):
            return ValidationResult(
                is_valid=False,
                cell=cell,
                error_message=f"{cell} is already occupied."
            )

        return ValidationResult(is_valid=True, cell=cell)

    def validate_input(self, game_state: GameState, text: str) -> ValidationResult:
        """
        Validate a move as typed at the prompt.

        Args:
            game_state: Current game state.
            text: The raw line the player entered.

        Returns:
            ValidationResult; ``cell`` is set whenever the text was a number.
        """
        cell = self.parse_cell(text)
        if cell is None:
            return ValidationResult(
                is_valid=False,
                error_message=f"{text.strip()!r} is not a number."
            )
        return self.validate_move(game_state, cell)
