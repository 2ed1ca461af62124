"""
Console front end for TicTacToe.

This ties together:
- Input (token reader over stdin)
- Logic (game engine, move validation, replay decision)
- Output (board renderer and messages)
"""

from enum import Enum
from typing import Callable, Optional, Tuple

from engine.game_engine import GameEngine
from engine.game_state import GameState, Outcome
from engine.move_validator import MoveStatus, ValidationResult
from engine.replay import ReplayController
from .config import ConsoleConfig
from .renderer import BoardRenderer
from .token_reader import TokenReader


class TurnStep(Enum):
    """Steps of one turn. Every rejection goes back to PROMPT_ROW."""
    PROMPT_ROW = 1
    PROMPT_COL = 2
    APPLY = 3
    COMPLETE = 4


class TicTacToeConsole:
    """
    Input/output adapter that plays TicTacToe on a text console.

    Game flow:
    1. Show the board
    2. Ask the current player for a row, then a column
    3. On bad input print why and ask the same player again
    4. Repeat until someone wins or it's a draw
    5. Ask whether to play again
    """

    # Message and emoji kind printed for each rejection
    _REJECTIONS = {
        MoveStatus.OUT_OF_BOUNDS: ("error", "OUT_OF_BOUNDS_MSG"),
        MoveStatus.CELL_OCCUPIED: ("warning", "CELL_OCCUPIED_MSG"),
        MoveStatus.INVALID_FORMAT: ("error", "INVALID_FORMAT_MSG"),
        MoveStatus.GAME_OVER: ("error", "GAME_OVER_MSG"),
    }

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        input_fn: Callable[[], str] = input,
        output: Callable[..., None] = print
    ):
        """
        Initialize the console game.

        Args:
            config: Console configuration. Uses defaults if not provided.
            input_fn: Returns one line of player input.
            output: print-compatible function used for all output.
        """
        self.config = config or ConsoleConfig()
        self._print = output

        self.renderer = BoardRenderer(self.config)
        self.reader = TokenReader(input_fn, write=lambda text: output(text, end=""))

        log = output if self.config.DEBUG_MODE else None
        self.engine = GameEngine(log=log)
        self.replay = ReplayController(self.engine)

    # ---------------- OUTPUT ----------------

    def show_intro(self):
        """Print the banner and, if enabled, the instructions."""
        self._print(self.renderer.banner())
        if self.config.SHOW_INSTRUCTIONS:
            self._print(self.renderer.instructions())

    def show_board(self):
        self._print(self.renderer.render_board(self.engine.state.board))

    def announce_result(self):
        """Print who won, or that it's a draw."""
        state = self.engine.state
        if state.outcome == Outcome.WIN:
            text = self.config.WIN_MSG.format(player=state.winner.value)
            self._print(self.renderer.decorate("win", text))
        elif state.outcome == Outcome.DRAW:
            self._print(self.renderer.decorate("draw", self.config.DRAW_MSG))

    def say_goodbye(self):
        self._print(self.renderer.decorate("goodbye", self.config.GOODBYE_MSG))

    def _report(self, result: ValidationResult):
        kind, message_name = self._REJECTIONS[result.status]
        self._print(self.renderer.decorate(kind, getattr(self.config, message_name)))

    # ---------------- TURN ----------------

    def _prompt(self, template: str) -> str:
        text = template.format(player=self.engine.current_player.value)
        return self.renderer.decorate("prompt", text)

    def _read_coordinate(self, template: str, next_step: TurnStep) -> Tuple[Optional[int], TurnStep]:
        """
        Ask for one coordinate.

        Returns:
            (value, step) - on a non-integer token the rest of the line is
            dropped and the turn goes back to PROMPT_ROW.
        """
        token = self.reader.next_token(self._prompt(template))
        value, result = self.engine.validator.parse_coordinate(token)

        if not result.is_valid:
            self._report(result)
            self.reader.discard_line()
            return None, TurnStep.PROMPT_ROW

        return value, next_step

    def play_turn(self) -> ValidationResult:
        """
        Run one turn until the current player's move is accepted.

        Returns:
            The successful ValidationResult.
        """
        step = TurnStep.PROMPT_ROW
        row = col = None
        result = None

        while step is not TurnStep.COMPLETE:
            if step is TurnStep.PROMPT_ROW:
                row, step = self._read_coordinate(self.config.ROW_PROMPT, TurnStep.PROMPT_COL)
            elif step is TurnStep.PROMPT_COL:
                col, step = self._read_coordinate(self.config.COL_PROMPT, TurnStep.APPLY)
            elif step is TurnStep.APPLY:
                result = self.engine.apply_move(row, col)
                if result.is_valid:
                    step = TurnStep.COMPLETE
                else:
                    self._report(result)
                    step = TurnStep.PROMPT_ROW

        return result

    # ---------------- GAME FLOW ----------------

    def play_game(self) -> GameState:
        """
        Play the active game to a WIN or DRAW.

        Returns:
            The finished game state.
        """
        while not self.engine.is_game_over:
            self.show_board()
            self.play_turn()

        self.show_board()
        self.announce_result()
        return self.engine.state

    def ask_play_again(self) -> bool:
        """
        Ask whether to play again; starts a new game on yes.

        Returns:
            True if a new game was started.
        """
        answer = self.reader.next_token(self.renderer.decorate("replay", self.config.REPLAY_PROMPT))
        self.reader.discard_line()
        return self.replay.handle_answer(answer)

    def run(self):
        """Play games until the players decline a rematch."""
        self.show_intro()
        self.engine.new_game()

        while True:
            self.play_game()
            if not self.ask_play_again():
                break
