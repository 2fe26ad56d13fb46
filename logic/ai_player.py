"""
AI player for TicTacToe.
Chooses moves at five strength levels, from pure chance up to
perfect play with the Minimax algorithm.
"""

import random
from enum import IntEnum
from typing import Dict, Optional
from dataclasses import dataclass, field

from .config import LogicConfig
from .game_state import Board, Mark
from .win_checker import WinChecker


# Returned by match_move when no single placement completes a line
NO_MOVE = 0

# (corner, corner diagonally across from it), as 0-based indices
_CORNER_PAIRS = (
    (LogicConfig.TOP_LEFT, LogicConfig.BOTTOM_RIGHT),
    (LogicConfig.TOP_RIGHT, LogicConfig.BOTTOM_LEFT),
    (LogicConfig.BOTTOM_LEFT, LogicConfig.TOP_RIGHT),
    (LogicConfig.BOTTOM_RIGHT, LogicConfig.TOP_LEFT),
)


class Difficulty(IntEnum):
    """AI difficulty levels."""
    RANDOM = 0      # Random moves
    ATTACK = 1      # Wins when it can
    DEFENSIVE = 2   # Wins or blocks when it can
    FOLLOW_UP = 3   # Perfect, except for a random opening
    PERFECT = 4     # Full minimax

    @classmethod
    def from_level(cls, level: int) -> "Difficulty":
        """
        Map a difficulty level to a behaviour.

        Levels keep growing as the human wins; anything from
        LogicConfig.PERFECT_LEVEL upwards plays perfectly.
        """
        if level < 0:
            raise ValueError(f"Difficulty level must be 0 or more, got {level}")
        return cls(min(level, LogicConfig.PERFECT_LEVEL))


@dataclass(frozen=True)
class AIConfig:
    """
    Who the AI plays as and how hard it tries.
    Built once per game and never changed during it.
    """
    mark: Mark
    level: int = 0
    opponent: Mark = field(init=False)

    def __post_init__(self):
        if self.mark == Mark.EMPTY:
            raise ValueError("The AI must play X or O")
        if self.level < 0:
            raise ValueError(f"Difficulty level must be 0 or more, got {self.level}")
        object.__setattr__(self, "opponent", self.mark.opposite())

    @classmethod
    def against(cls, human_mark: Mark, level: int) -> "AIConfig":
        """Config for an AI facing a human who plays ``human_mark``."""
        return cls(mark=human_mark.opposite(), level=level)

    @property
    def difficulty(self) -> Difficulty:
        return Difficulty.from_level(self.level)


class AIPlayer:
    """
    An AI that plays TicTacToe.

    At PERFECT difficulty the AI will win if possible, block the opponent
    if needed, and otherwise pick the Minimax-best cell, so it never loses.
    Lower difficulties drop parts of that recipe in favour of random moves.
    """

    def __init__(
        self,
        config: AIConfig,
        rng: Optional[random.Random] = None,
        verbose: Optional[bool] = None
    ):
        """
        Initialize the AI player.

        Args:
            config: Which mark the AI plays and at what level.
            rng: Random generator for the random parts (seed it for repeatable games).
            verbose: Print search statistics for every perfect move
                (LogicConfig.DEBUG_MODE when None).
        """
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.verbose = LogicConfig.DEBUG_MODE if verbose is None else verbose
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    @property
    def mark(self) -> Mark:
        return self.config.mark

    @property
    def opponent(self) -> Mark:
        return self.config.opponent

    @property
    def difficulty(self) -> Difficulty:
        return self.config.difficulty

    def next_move(self, board: Board) -> int:
        """
        Get the AI's move for the current position.

        Args:
            board: Current board. Not modified.

        Returns:
            1-based cell number.

        Raises:
            ValueError: If the board is already full.
        """
        if board.is_complete():
            raise ValueError("No moves available on a full board")

        difficulty = self.difficulty
        if difficulty == Difficulty.RANDOM:
            return self._random_move(board)
        if difficulty == Difficulty.ATTACK:
            return self._attack_move(board)
        if difficulty == Difficulty.DEFENSIVE:
            return self._defensive_move(board)
        if difficulty == Difficulty.FOLLOW_UP:
            return self._follow_up_move(board)
        return self._perfect_move(board)

    def _random_move(self, board: Board) -> int:
        """Any free cell, picked uniformly."""
        return self.rng.choice(board.available_cells())

    def _attack_move(self, board: Board) -> int:
        """Complete a line if possible, otherwise play randomly."""
        move = self.match_move(board, self.mark)
        if move != NO_MOVE:
            return move
        return self._random_move(board)

    def _defensive_move(self, board: Board) -> int:
        """Complete a line, else block the opponent's line, else play randomly."""
        move = self.match_move(board, self.mark)
        if move != NO_MOVE:
            return move
        move = self.match_move(board, self.opponent)
        if move != NO_MOVE:
            return move
        return self._random_move(board)

    def _follow_up_move(self, board: Board) -> int:
        """
        Perfect play, except that the opening move is random
        (and never the cell perfect play would open with).
        """
        best_move = self._perfect_move(board)
        if board.is_empty():
            other_cells = [
                cell for cell in range(1, LogicConfig.CELL_COUNT + 1)
                if cell != best_move
            ]
            return self.rng.choice(other_cells)
        return best_move

    def _perfect_move(self, board: Board) -> int:
        """Win, else block, else the best Minimax cell (lowest cell on ties)."""
        move = self.match_move(board, self.mark)
        if move != NO_MOVE:
            return move
        move = self.match_move(board, self.opponent)
        if move != NO_MOVE:
            return move

        scores = self.score_moves(board)

        best_move = NO_MOVE
        best_score = float('-inf')
        for cell, score in scores.items():
            if score > best_score:
                best_score = score
                best_move = cell

        if self.verbose:
            print(f"AI evaluated {self.moves_evaluated} positions. Best move: {best_move} (score: {best_score})")

        return best_move

    def score_moves(self, board: Board) -> Dict[int, int]:
        """
        Score every free cell with Minimax, from the AI's point of view.

        Args:
            board: Current board. Not modified.

        Returns:
            {cell: score} in ascending cell order.
        """
        self.moves_evaluated = 0
        scores = {}
        for cell in board.available_cells():
            scores[cell] = self.minimax(board.with_move(cell, self.mark), 0, False)
        return scores

    def minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> int:
        """
        Minimax algorithm with alpha-beta pruning.

        Called with the default window the result is the exact Minimax
        value of the position.

        Args:
            board: Position to evaluate.
            depth: Plies played since the root move.
            is_maximizing: True if it's the AI's turn.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position (faster wins and slower losses score higher).
        """
        self.moves_evaluated += 1

        winner = self.win_checker.check_winner(board)

        if winner == self.mark:
            return LogicConfig.WIN_SCORE - depth
        elif winner == self.opponent:
            return -LogicConfig.WIN_SCORE + depth
        elif board.is_complete():
            return 0

        if is_maximizing:
            max_score = float('-inf')
            for cell in board.available_cells():
                score = self.minimax(board.with_move(cell, self.mark), depth + 1, False, alpha, beta)
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for cell in board.available_cells():
                score = self.minimax(board.with_move(cell, self.opponent), depth + 1, True, alpha, beta)
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score

    @staticmethod
    def match_move(board: Board, mark: Mark) -> int:
        """
        Find a cell that completes a line for ``mark``, without searching.

        Args:
            board: Current board.
            mark: Whose line to complete.

        Returns:
            1-based cell number, or NO_MOVE (0) if there is none.
        """
        cells = board.cells
        center = LogicConfig.CENTER

        # Both corners of a diagonal taken, center free
        if cells[center] == Mark.EMPTY:
            if cells[LogicConfig.TOP_LEFT] == mark and cells[LogicConfig.BOTTOM_RIGHT] == mark:
                return center + 1
            if cells[LogicConfig.TOP_RIGHT] == mark and cells[LogicConfig.BOTTOM_LEFT] == mark:
                return center + 1

        # Center and one corner taken, far corner free
        if cells[center] == mark:
            for corner, opposite in _CORNER_PAIRS:
                if cells[corner] == mark and cells[opposite] == Mark.EMPTY:
                    return opposite + 1

        # Rows and columns, row first at each index
        size = LogicConfig.BOARD_SIZE
        for i in range(size):
            row = [i * size + j for j in range(size)]
            column = [i + j * size for j in range(size)]
            for line in (row, column):
                if sum(1 for j in line if cells[j] == mark) == 2:
                    for j in line:
                        if cells[j] == Mark.EMPTY:
                            return j + 1

        return NO_MOVE


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(AIConfig(mark=Mark.NOUGHT, level=Difficulty.PERFECT))

    # Test 1: AI should block a winning move
    board = Board.from_string("XX  O   O")
    print(board.render())
    print("\nAI is O. X is about to win with cell 3!")

    move = ai.next_move(board)
    print(f"AI's move: {move}")
    assert move == 3, f"Expected 3, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = Board.from_string("OO XX    ")
    print(board.render())
    print("\nAI is O. Can win with cell 3!")

    move = ai.next_move(board)
    print(f"AI's move: {move}")
    assert move == 3, f"Expected 3, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
