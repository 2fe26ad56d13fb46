"""
Logic configuration for TicTacToe.
Board geometry and AI scoring values.
"""


class LogicConfig:
    """
    Configuration for the board and the AI.

    Board indices are laid out like a phone keypad turned upside down:

        6 7 8
        3 4 5
        0 1 2
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9

    # Named cells (0-based indices)
    CENTER = 4
    TOP_LEFT = 6
    TOP_RIGHT = 8
    BOTTOM_LEFT = 0
    BOTTOM_RIGHT = 2

    # ==================== AI SETTINGS ====================
    # Score of a won position before the depth penalty
    WIN_SCORE = 10

    # Levels at or above this play perfectly
    PERFECT_LEVEL = 4

    # ==================== DEBUG SETTINGS ====================
    # Print how many positions the AI looked at for each move
    DEBUG_MODE = False
