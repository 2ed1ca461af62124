"""
Win checker for console TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Tuple

import numpy as np

from .config import GameConfig
from .game_state import Board, Cell, GameState, Player


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def __init__(self):
        # Index arrays so each line is one fancy-indexing lookup
        self._line_index = [
            (np.array([r for r, _ in line]), np.array([c for _, c in line]))
            for line in self.WINNING_LINES
        ]

    def find_line(self, board: Board, player: Player) -> Optional[List[Tuple[int, int]]]:
        """
        Find a completed line for one player.

        Args:
            board: The game board.
            player: Whose marks to look for.

        Returns:
            The line as list of (row, col), or None.
        """
        for line, (rows, cols) in zip(self.WINNING_LINES, self._line_index):
            if np.all(board.grid[rows, cols] == player.cell):
                return line
        return None

    def has_won(self, board: Board, player: Player) -> bool:
        return self.find_line(board, player) is not None

    def check_winner(self, game_state: GameState) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in Player:
            if self.has_won(game_state.board, player):
                return player
        return None

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all 9 moves were made AND nobody has a line.
        """
        if self.check_winner(game_state) is not None:
            return False

        return game_state.move_count == GameConfig.TOTAL_CELLS


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    game1 = GameState()
    game1.board.grid[0, :] = Cell.X
    winner = checker.check_winner(game1)
    print(f"Test 1 (horizontal): winner = {winner}")
    assert winner == Player.X

    # Test 2: Diagonal win
    game2 = GameState()
    game2.board.grid[[0, 1, 2], [2, 1, 0]] = Cell.O
    winner = checker.check_winner(game2)
    print(f"Test 2 (anti-diagonal): winner = {winner}")
    assert winner == Player.O

    print("\nWinChecker test done!")
