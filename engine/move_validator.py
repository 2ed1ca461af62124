"""
Move validator for console TicTacToe.
Validates that moves follow the rules.
"""

import numbers
import re
from enum import Enum
from typing import Optional, Tuple, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState


class MoveStatus(Enum):
    """Why a move was accepted or rejected."""
    SUCCESS = "success"
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_OCCUPIED = "cell_occupied"
    INVALID_FORMAT = "invalid_format"
    GAME_OVER = "game_over"


@dataclass
class ValidationResult:
    """Result of move validation."""
    status: MoveStatus
    error_message: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.status == MoveStatus.SUCCESS


# Plain ASCII digits with an optional sign, nothing else
_INT_TOKEN = re.compile(r"[+-]?[0-9]+", re.ASCII)

# Tokens outside a 32-bit int are rejected as malformed, not out of bounds
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


def _is_int(value) -> bool:
    # bool is an int subclass but never a coordinate
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Game must not be over
    2. Row and column must be integers
    3. Row and column must be on the board (0-2)
    4. Can only place on empty cells
    """

    def validate_move(
        self,
        game_state: GameState,
        row,
        col
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with status and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                status=MoveStatus.GAME_OVER,
                error_message="Game is already over!"
            )

        if not (_is_int(row) and _is_int(col)):
            return ValidationResult(
                status=MoveStatus.INVALID_FORMAT,
                error_message=f"Invalid position ({row!r}, {col!r}). Must be numbers."
            )

        if not game_state.board.in_bounds(row, col):
            return ValidationResult(
                status=MoveStatus.OUT_OF_BOUNDS,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{GameConfig.BOARD_SIZE - 1}."
            )

        if not game_state.board.is_empty(row, col):
            return ValidationResult(
                status=MoveStatus.CELL_OCCUPIED,
                error_message=f"Cell ({row}, {col}) is already occupied by {game_state.board.symbol_at(row, col)}"
            )

        return ValidationResult(status=MoveStatus.SUCCESS)

    def parse_coordinate(self, token: str) -> Tuple[Optional[int], ValidationResult]:
        """
        Parse one row or column token typed by a player.

        Only ASCII digits with an optional sign that fit a 32-bit int
        are accepted. Bounds are checked by validate_move once both
        coordinates are known.

        Args:
            token: Raw input token, e.g. "2".

        Returns:
            (value, result) - value is None when the token is not an integer.
        """
        text = token.strip() if isinstance(token, str) else ""
        value = int(text) if _INT_TOKEN.fullmatch(text) else None

        if value is None or not INT_MIN <= value <= INT_MAX:
            return None, ValidationResult(
                status=MoveStatus.INVALID_FORMAT,
                error_message=f"Not a number: {token!r}"
            )
        return value, ValidationResult(status=MoveStatus.SUCCESS)

    def get_valid_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of (row, col) valid move positions.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
