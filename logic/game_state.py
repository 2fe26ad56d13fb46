"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and the move history.
"""

from enum import Enum
from typing import Callable, Optional, List
from dataclasses import dataclass, field

from .config import LogicConfig


class Mark(Enum):
    """What can sit in a cell."""
    EMPTY = " "
    CROSS = "X"
    NOUGHT = "O"

    @property
    def glyph(self) -> str:
        """Character used when drawing the board."""
        return self.value

    def opposite(self) -> "Mark":
        """Get the opposing mark."""
        if self == Mark.CROSS:
            return Mark.NOUGHT
        if self == Mark.NOUGHT:
            return Mark.CROSS
        raise ValueError("An empty cell has no opposite mark")

    @classmethod
    def from_choice(cls, text: str) -> Optional["Mark"]:
        """
        Parse a player's choice of mark.

        Args:
            text: Raw text such as "x", "O" or " x ".

        Returns:
            CROSS or NOUGHT, or None if the text is neither.
        """
        choice = text.strip().lower()
        if choice == "x":
            return cls.CROSS
        if choice == "o":
            return cls.NOUGHT
        return None


class GameOutcome(Enum):
    """How a finished game ended, seen from the human's side."""
    HUMAN_WIN = "human_win"
    AI_WIN = "ai_win"
    DRAW = "draw"


# Cells are substituted by index, so one cell can never overwrite another
BOARD_TEMPLATE = (
    "{6} | {7} | {8}\n"
    "---------\n"
    "{3} | {4} | {5}\n"
    "---------\n"
    "{0} | {1} | {2}"
)

# Characters accepted by Board.from_string for an empty cell
_EMPTY_CHARS = (" ", ".", "_", "-")


@dataclass
class Board:
    """
    The 9 cells of a TicTacToe board.

    Cells are addressed by 1-based cell numbers (1-9) everywhere outside
    this class; ``cells`` itself is indexed 0-8. During a search the board
    is treated as a value: use ``with_move`` to get a new board. Only the
    live game board is changed in place, through ``place``.
    """

    cells: List[Mark] = field(
        default_factory=lambda: [Mark.EMPTY] * LogicConfig.CELL_COUNT
    )

    def __post_init__(self):
        if len(self.cells) != LogicConfig.CELL_COUNT:
            raise ValueError(
                f"A board has {LogicConfig.CELL_COUNT} cells, got {len(self.cells)}"
            )

    @classmethod
    def empty(cls) -> "Board":
        """Create a board with no marks on it."""
        return cls()

    @classmethod
    def from_string(cls, layout: str) -> "Board":
        """
        Build a board from 9 characters in index order (0 to 8).

        "X" and "O" (any case) are marks; space, ".", "_" and "-" are empty.
        For example ``"XX OO    "`` has X on cells 1 and 2, O on 4 and 5.
        """
        if len(layout) != LogicConfig.CELL_COUNT:
            raise ValueError(f"Expected 9 characters, got {len(layout)}")

        cells = []
        for char in layout:
            if char in _EMPTY_CHARS:
                cells.append(Mark.EMPTY)
                continue
            mark = Mark.from_choice(char)
            if mark is None:
                raise ValueError(f"Unknown cell character {char!r}")
            cells.append(mark)
        return cls(cells)

    def __getitem__(self, index: int) -> Mark:
        return self.cells[index]

    def available_cells(self) -> List[int]:
        """
        Get all empty cells.

        Returns:
            1-based cell numbers in ascending order.
        """
        return [i + 1 for i, mark in enumerate(self.cells) if mark == Mark.EMPTY]

    def is_free(self, cell: int) -> bool:
        """Check that a 1-based cell exists and is empty."""
        return 1 <= cell <= LogicConfig.CELL_COUNT and self.cells[cell - 1] == Mark.EMPTY

    def is_complete(self) -> bool:
        """True when no empty cells remain."""
        return Mark.EMPTY not in self.cells

    def is_empty(self) -> bool:
        """True when nobody has played yet."""
        return all(mark == Mark.EMPTY for mark in self.cells)

    def count(self, mark: Mark) -> int:
        return self.cells.count(mark)

    def copy(self) -> "Board":
        return Board(list(self.cells))

    def with_move(self, cell: int, mark: Mark) -> "Board":
        """
        Get a new board with one more mark on it.

        Args:
            cell: 1-based cell number.
            mark: Mark to place.

        Returns:
            A copy of this board; this board is left untouched.
        """
        new_board = self.copy()
        new_board.cells[cell - 1] = mark
        return new_board

    def place(self, cell: int, mark: Mark):
        """
        Put a mark on this board in place.

        Raises:
            ValueError: If the cell does not exist or is already taken.
        """
        if not self.is_free(cell):
            raise ValueError(f"Cell {cell} is not free")
        self.cells[cell - 1] = mark

    def render(self) -> str:
        """Draw the board as three text rows, top row first."""
        return BOARD_TEMPLATE.format(*(mark.glyph for mark in self.cells))

    def __str__(self) -> str:
        return self.render()


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    cell: int               # 1-based cell number
    move_number: int        # 0 for the first move of the game


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The live board
    - Which mark the human plays (the AI has the other one)
    - Whose turn it is (the AI always opens)
    - Move history
    - Game status (ongoing, won, draw)
    """

    human_mark: Mark = Mark.NOUGHT

    board: Board = field(default_factory=Board)

    # Mark to play next; defaults to the AI's mark
    current_mark: Optional[Mark] = None

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Mark] = None
    is_draw: bool = False
    is_game_over: bool = False

    def __post_init__(self):
        if self.human_mark == Mark.EMPTY:
            raise ValueError("The human must play X or O")
        if self.current_mark is None:
            self.current_mark = self.ai_mark

    @property
    def ai_mark(self) -> Mark:
        return self.human_mark.opposite()

    def is_human_turn(self) -> bool:
        return self.current_mark == self.human_mark

    def make_move(self, cell: int) -> bool:
        """
        Place the current player's mark.

        Args:
            cell: 1-based cell number.

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            print("Game is already over!")
            return False

        if not self.board.is_free(cell):
            print(f"Cell {cell} is not available!")
            return False

        self.board.place(cell, self.current_mark)
        self.moves.append(Move(
            mark=self.current_mark,
            cell=cell,
            move_number=len(self.moves),
        ))

        # Winner detection is done by WinChecker; just switch turns here
        self.current_mark = self.current_mark.opposite()

        return True

    def outcome(self) -> Optional[GameOutcome]:
        """
        Get the result of a finished game.

        Returns:
            The outcome, or None while the game is still going.
        """
        if not self.is_game_over:
            return None
        if self.winner == self.human_mark:
            return GameOutcome.HUMAN_WIN
        if self.winner == self.ai_mark:
            return GameOutcome.AI_WIN
        return GameOutcome.DRAW

    def print_board(self, output_func: Callable[[str], None] = print):
        """Print the board to console."""
        output_func(self.board.render())


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState(human_mark=Mark.NOUGHT)

    for cell in (5, 1, 9, 3, 2):
        print(f"\n{game.current_mark.glyph} plays cell {cell}")
        game.make_move(cell)
        game.print_board()

    print("\nGame state test done!")
