"""
Logic module for TicTacToe.
Handles the board, rules, and the AI opponent.
"""

__version__ = "1.0.0"

from .config import LogicConfig
from .game_state import Board, GameOutcome, GameState, Mark, Move
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .ai_player import AIConfig, AIPlayer, Difficulty
