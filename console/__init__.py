"""
Console module for TicTacToe.
Handles prompts, the game loop and everything the player reads.
"""

from .config import ConsoleConfig
from .game import ConsoleGame
from .prompts import ask_mark, ask_move, ask_play_again
