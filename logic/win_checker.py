"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple

from .config import LogicConfig
from .game_state import Board, GameState, Mark


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, as 0-based cell indices.
    # Each row is followed by the column with the same index.
    WINNING_LINES = (
        (0, 1, 2), (0, 3, 6),
        (3, 4, 5), (1, 4, 7),
        (6, 7, 8), (2, 5, 8),
        # Diagonals
        (LogicConfig.TOP_LEFT, LogicConfig.CENTER, LogicConfig.BOTTOM_RIGHT),
        (LogicConfig.TOP_RIGHT, LogicConfig.CENTER, LogicConfig.BOTTOM_LEFT),
    )

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to look at.

        Returns:
            The winning Mark, or None if no line is complete.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The line as three 0-based indices, or None.
        """
        cells = board.cells
        for a, b, c in self.WINNING_LINES:
            if cells[a] != Mark.EMPTY and cells[a] == cells[b] == cells[c]:
                return (a, b, c)
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw: board full and nobody has a line.
        """
        if self.check_winner(board) is not None:
            return False
        return board.is_complete()

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        winner = self.check_winner(game_state.board)

        if winner is not None:
            game_state.winner = winner
            game_state.is_game_over = True
        elif self.check_draw(game_state.board):
            game_state.is_draw = True
            game_state.is_game_over = True

        return game_state
