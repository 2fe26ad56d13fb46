"""
Console game loop for TicTacToe.
Plays one game between the human and the AI.
"""

import random
from typing import Optional

from logic.ai_player import AIConfig, AIPlayer
from logic.game_state import GameOutcome, GameState, Mark
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker

from .config import ConsoleConfig
from .prompts import InputFunc, OutputFunc, ask_move


class ConsoleGame:
    """
    One game of TicTacToe on the console.

    Game flow:
    1. AI places its mark (the AI always opens)
    2. Board is printed
    3. Human types a cell number
    4. Board is printed
    5. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        human_mark: Mark,
        difficulty: int = ConsoleConfig.STARTING_DIFFICULTY,
        rng: Optional[random.Random] = None,
        ai_player: Optional[AIPlayer] = None,
        verbose: Optional[bool] = None,
        input_func: Optional[InputFunc] = None,
        output_func: Optional[OutputFunc] = None
    ):
        """
        Set up a new game.

        Args:
            human_mark: Which mark the human plays.
            difficulty: AI level for this game.
            rng: Random generator handed to the AI.
            ai_player: Use this AI instead of building one from the difficulty.
            verbose: Let the AI print search statistics.
            input_func: Reads one line typed by the human.
            output_func: Shows one message to the human.
        """
        self.input = input_func or input
        self.output = output_func or print

        self.game_state = GameState(human_mark=human_mark)
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        if ai_player is None:
            ai_player = AIPlayer(
                AIConfig.against(human_mark, difficulty),
                rng=rng,
                verbose=verbose
            )
        self.ai = ai_player

    def run(self) -> GameOutcome:
        """
        Play the game to the end.

        Returns:
            How the game ended.
        """
        while not self.game_state.is_game_over:
            if self.game_state.is_human_turn():
                self._human_move()
            else:
                self._ai_move()

            self.win_checker.update_game_state(self.game_state)
            self.game_state.print_board(self.output)

        return self._show_game_result()

    def _ai_move(self):
        """Ask the AI for a cell and play it."""
        cell = self.ai.next_move(self.game_state.board)

        # A correct AI never picks a taken cell; there is no way to recover
        if not self.game_state.board.is_free(cell):
            raise RuntimeError(f"Slot {cell} is already filled in")

        self.game_state.make_move(cell)

    def _human_move(self):
        """Prompt until the human names a free cell, then play it."""
        cell = ask_move(
            self.game_state,
            validator=self.validator,
            input_func=self.input,
            output_func=self.output
        )
        self.game_state.make_move(cell)

    def _show_game_result(self) -> GameOutcome:
        """Print the final message and return the outcome."""
        outcome = self.game_state.outcome()

        if outcome == GameOutcome.HUMAN_WIN:
            self.output(ConsoleConfig.HUMAN_WIN)
        elif outcome == GameOutcome.AI_WIN:
            self.output(ConsoleConfig.AI_WIN)
        else:
            self.output(ConsoleConfig.DRAW)

        return outcome
