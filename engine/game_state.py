"""
Game state management for console TicTacToe.
Tracks the board, current player, move count and outcome.
"""

from enum import Enum, IntEnum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig


class Cell(IntEnum):
    """Contents of a single board cell (stored as int8 in the grid)."""
    EMPTY = 0
    X = 1
    O = 2


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def cell(self) -> Cell:
        """The cell value this player's mark is stored as."""
        return Cell[self.name]


class Outcome(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass
class Move:
    """
    An accepted move in the game.
    """
    player: Player          # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is (1-9)


class Board:
    """
    The 3x3 grid of cells.

    Backed by a fixed-shape numpy array. The shape is set at creation
    and never changes.
    """

    def __init__(self, size: int = GameConfig.BOARD_SIZE):
        self.size = size
        self.grid = np.zeros((size, size), dtype=np.int8)

    def in_bounds(self, row: int, col: int) -> bool:
        """True if (row, col) is on the board."""
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col)."""
        return Cell(int(self.grid[row, col]))

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == Cell.EMPTY

    def place(self, row: int, col: int, player: Player):
        """Put a player's mark into a cell. Callers validate first."""
        self.grid[row, col] = player.cell

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board, in row-major order.

        Returns:
            List of (row, col) tuples.
        """
        rows, cols = np.nonzero(self.grid == Cell.EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def is_full(self) -> bool:
        return not np.any(self.grid == Cell.EMPTY)

    def symbol_at(self, row: int, col: int) -> str:
        """The character shown for a cell (' ' when empty)."""
        cell = self.get(row, col)
        if cell == Cell.EMPTY:
            return GameConfig.EMPTY_SYMBOL
        return cell.name

    def copy(self) -> "Board":
        new_board = Board(self.size)
        new_board.grid = self.grid.copy()
        return new_board


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 3x3 board
    - Current player
    - How many moves have been made
    - Move history
    - Game outcome (in progress, win, draw)
    """

    # The 3x3 board - all cells start EMPTY
    board: Board = field(default_factory=Board)

    # Current player's turn (X always starts)
    current_player: Player = Player(GameConfig.FIRST_PLAYER)

    # How many moves have been accepted (0-9)
    move_count: int = 0

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    outcome: Outcome = Outcome.IN_PROGRESS
    winner: Optional[Player] = None
    winning_line: Optional[List[Tuple[int, int]]] = None

    @property
    def is_game_over(self) -> bool:
        """True once the game reached a WIN or DRAW."""
        return self.outcome != Outcome.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.outcome == Outcome.DRAW

    def record_move(self, row: int, col: int) -> Move:
        """
        Place the current player's mark and record the move.

        Does no validation and does not evaluate the outcome - that is
        the engine's job.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The recorded Move.
        """
        self.board.place(row, col, self.current_player)
        self.move_count += 1

        move = Move(
            player=self.current_player,
            row=row,
            col=col,
            move_number=self.move_count
        )
        self.moves.append(move)
        return move

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get all empty cells on the board."""
        return self.board.empty_cells()

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        new_state = GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            move_count=self.move_count,
            moves=list(self.moves),
            outcome=self.outcome,
            winner=self.winner,
            winning_line=list(self.winning_line) if self.winning_line else None
        )
        return new_state


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    for row, col in [(1, 1), (0, 0), (0, 2)]:
        print(f"{game.current_player.value} moves to ({row}, {col})")
        game.record_move(row, col)
        game.current_player = game.current_player.opposite()

    print(game.board.grid)
    print(f"Empty cells: {game.get_empty_cells()}")
    print(f"Move count: {game.move_count}")

    print("\nGame state test done!")
