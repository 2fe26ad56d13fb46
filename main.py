"""
Main entry point for console TicTacToe.

This script ties together:
- Logic (board, win checking, AI opponent)
- Console (prompts and the per-game loop)

The computer always goes first. Every time you beat it, the next
game is played one difficulty level higher.

Run this script to play TicTacToe against the computer!
"""

import random
from typing import Optional

from logic.ai_player import Difficulty
from logic.game_state import GameOutcome, Mark

from console.config import ConsoleConfig
from console.game import ConsoleGame
from console.prompts import InputFunc, OutputFunc, ask_mark, ask_play_again


class TicTacToeSession:
    """
    A run of games against the computer.

    Session flow:
    1. Human picks X or O (kept for the whole session)
    2. A game is played; the AI gets the other mark
    3. If the human won, difficulty goes up by one
    4. Human is asked whether to play again
    """

    def __init__(
        self,
        human_mark: Optional[Mark] = None,
        difficulty: int = ConsoleConfig.STARTING_DIFFICULTY,
        seed: Optional[int] = None,
        verbose: Optional[bool] = None,
        input_func: Optional[InputFunc] = None,
        output_func: Optional[OutputFunc] = None
    ):
        """
        Initialize the session.

        Args:
            human_mark: Mark for the human; asked for at start when None.
            difficulty: Level of the first game.
            seed: Seed for the AI's random choices.
            verbose: Print AI search statistics.
            input_func: Reads one line typed by the human.
            output_func: Shows one message to the human.
        """
        if difficulty < 0:
            raise ValueError(f"Difficulty level must be 0 or more, got {difficulty}")

        self.human_mark = human_mark
        self.difficulty = difficulty
        self.rng = random.Random(seed)
        self.verbose = verbose
        self.input = input_func or input
        self.output = output_func or print

        # Stats
        self.games_played = 0
        self.human_wins = 0

    def create_game(self) -> ConsoleGame:
        """Set up the next game at the current difficulty."""
        return ConsoleGame(
            human_mark=self.human_mark,
            difficulty=self.difficulty,
            rng=self.rng,
            verbose=self.verbose,
            input_func=self.input,
            output_func=self.output
        )

    def record_outcome(self, outcome: GameOutcome) -> bool:
        """
        Count a finished game.

        Returns:
            True if the difficulty went up.
        """
        self.games_played += 1

        if outcome != GameOutcome.HUMAN_WIN:
            return False

        self.human_wins += 1
        self.difficulty += 1

        if self.verbose:
            self.output(f"Difficulty is now {self.difficulty} ({Difficulty.from_level(self.difficulty).name})")

        return True

    def run(self):
        """Play games until the human says no."""
        self.output(ConsoleConfig.WELCOME)

        if self.human_mark is None:
            self.output(ConsoleConfig.MARK_PROMPT)
            self.human_mark = ask_mark(self.input, self.output)

        self.output(ConsoleConfig.COMPUTER_FIRST)

        playing = True
        while playing:
            outcome = self.create_game().run()
            difficulty_went_up = self.record_outcome(outcome)

            self.output(ConsoleConfig.PLAY_AGAIN_PROMPT)
            playing = ask_play_again(self.input, self.output)

            if playing and difficulty_went_up:
                self.output(ConsoleConfig.DIFFICULTY_GOING_UP)


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--mark",
        type=str.lower,
        choices=["x", "o"],
        help="Play as X or O (asked at start if omitted)"
    )
    parser.add_argument(
        "--difficulty",
        type=int,
        default=ConsoleConfig.STARTING_DIFFICULTY,
        help="Starting difficulty: 0 random, 1 attack, 2 defensive, 3 follow-up, 4+ perfect"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the computer's random moves"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print AI search statistics"
    )

    args = parser.parse_args(argv)

    if args.difficulty < 0:
        parser.error("--difficulty must be 0 or more")

    human_mark = Mark.from_choice(args.mark) if args.mark else None

    session = TicTacToeSession(
        human_mark=human_mark,
        difficulty=args.difficulty,
        seed=args.seed,
        verbose=args.debug
    )

    try:
        session.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
