"""
Console configuration for TicTacToe.
Every fixed piece of text the player sees.
"""


class ConsoleConfig:
    """
    Configuration class for the console game.
    """

    # ==================== SESSION ====================
    WELCOME = "Welcome to Tic-Tac-Toe!"
    MARK_PROMPT = "Do you want to be X or O?"
    MARK_RETRY = "Please enter 'X' or 'O'.\n"
    COMPUTER_FIRST = "The computer will go first."

    PLAY_AGAIN_PROMPT = "Do you want to play again? (yes or no)"
    PLAY_AGAIN_RETRY = "Please enter 'yes' or 'no' if you want to play again.\n"
    PLAY_AGAIN_YES = ("y", "yes")
    PLAY_AGAIN_NO = ("n", "no")

    DIFFICULTY_GOING_UP = "Let's make it harder..."

    # Level of the first game; goes up by one every time the human wins
    STARTING_DIFFICULTY = 0

    # ==================== TURNS ====================
    MOVE_PROMPT = "What is your next move? (1-9)"

    # Shown after a rejected move: cell numbers as they sit on the board
    MOVE_REMINDER = (
        "7 8 9\n"
        "4 5 6\n"
        "1 2 3\n"
        "Please enter a number between 1 and 9."
    )

    # ==================== RESULTS ====================
    HUMAN_WIN = "You beat the computer!"
    AI_WIN = "The computer has beaten you! You lose."
    DRAW = "The board was filled in. It's a draw."
