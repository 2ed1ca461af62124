"""
Rules engine for console TicTacToe.
Owns the active game state and drives one game from start to a
terminal outcome.
"""

from typing import Callable, List, Optional, Tuple

from .game_state import GameState, Outcome, Player
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker


class GameEngine:
    """
    Enforces the TicTacToe rules on a single GameState.

    Game flow:
    1. new_game() - empty board, X to move
    2. apply_move() - validate, place the mark, evaluate the outcome
    3. Repeat until WIN or DRAW; then new_game() to play again

    The engine is the only thing that mutates its GameState. Rejected
    moves leave the state untouched.
    """

    def __init__(self, log: Optional[Callable[[str], None]] = None):
        """
        Initialize the engine with a fresh game.

        Args:
            log: Optional callable for debug lines. The engine prints
                nothing when it is not given.
        """
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self._log = log
        self.state = GameState()

    def _debug(self, message: str):
        if self._log is not None:
            self._log(f"[engine] {message}")

    def new_game(self) -> GameState:
        """Start over with an empty board and X to move."""
        self.state = GameState()
        self._debug("New game started")
        return self.state

    def apply_move(self, row, col) -> ValidationResult:
        """
        Try to place the current player's mark at (row, col).

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            ValidationResult. On anything but SUCCESS the state is unchanged
            and the same player has to try again.
        """
        result = self.validator.validate_move(self.state, row, col)
        if not result.is_valid:
            self._debug(f"Rejected ({row}, {col}): {result.status.value}")
            return result

        row, col = int(row), int(col)
        move = self.state.record_move(row, col)
        self._debug(f"{move.player.value} -> ({row}, {col}), move {move.move_number}")

        self.evaluate_outcome()
        return result

    def evaluate_outcome(self) -> Outcome:
        """
        Work out the outcome after the current player's move.

        The win check runs before the draw check, so a winning 9th move
        is a WIN. The turn only passes to the other player while the game
        is still in progress.

        Only the latest move is evaluated: once the turn has passed, or
        the game is over, calling this again changes nothing.

        Returns:
            The (possibly updated) outcome.
        """
        state = self.state
        if state.is_game_over or not state.moves:
            return state.outcome
        if state.moves[-1].player != state.current_player:
            return state.outcome

        line = self.win_checker.find_line(state.board, state.current_player)
        if line is not None:
            state.outcome = Outcome.WIN
            state.winner = state.current_player
            state.winning_line = line
            self._debug(f"{state.winner.value} wins on {line}")
        elif self.win_checker.check_draw(state):
            state.outcome = Outcome.DRAW
            self._debug("Board full, draw")
        else:
            self.switch_player()

        return state.outcome

    def switch_player(self) -> Player:
        """Hand the turn to the other player (only while in progress)."""
        if not self.state.is_game_over:
            self.state.current_player = self.state.current_player.opposite()
        return self.state.current_player

    # ---------------- Convenience accessors ----------------

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    def get_valid_moves(self) -> List[Tuple[int, int]]:
        return self.validator.get_valid_moves(self.state)
