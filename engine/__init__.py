"""
Engine module for console TicTacToe.
Handles game state, rules, and the replay decision.
"""

from .config import GameConfig
from .game_state import GameState, Board, Cell, Move, Outcome, Player
from .move_validator import MoveValidator, MoveStatus, ValidationResult
from .win_checker import WinChecker
from .game_engine import GameEngine
from .replay import ReplayController

__version__ = "1.0.0"
