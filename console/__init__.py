"""
Console module for TicTacToe.
Handles keyboard input, board rendering, and the game loop.
"""

from .config import ConsoleConfig
from .renderer import BoardRenderer
from .token_reader import TokenReader
from .game_console import TicTacToeConsole, TurnStep
