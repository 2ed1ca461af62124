"""
Board rendering for console TicTacToe.
Turns the board and game messages into printable text.
"""

from typing import List, Optional

from engine.game_state import Board
from .config import ConsoleConfig


class BoardRenderer:
    """
    Builds the text shown on the console.

    Board layout:

           0   1   2
        0  X | O |
          ---+---+---
        1    | X |
          ---+---+---
        2    |   | O
    """

    def __init__(self, config: Optional[ConsoleConfig] = None):
        self.config = config or ConsoleConfig()

    def render_board(self, board: Board) -> str:
        """
        Render the board with row/column headers and separators.

        Args:
            board: The board to draw.

        Returns:
            Multi-line string, starting and ending with a blank line.
        """
        size = board.size
        lines: List[str] = ["", "   " + "   ".join(str(c) for c in range(size))]

        for row in range(size):
            cells = "|".join(f" {board.symbol_at(row, col)} " for col in range(size))
            lines.append(f"{row} {cells}")
            if row < size - 1:
                lines.append("  " + "+".join("---" for _ in range(size)))

        lines.append("")
        return "\n".join(lines)

    def decorate(self, kind: str, text: str) -> str:
        """Prefix text with the emoji for its kind, if emoji are on."""
        if not self.config.USE_EMOJI:
            return text
        emoji = self.config.EMOJI.get(kind)
        return f"{emoji} {text}" if emoji else text

    def banner(self) -> str:
        rule = "=" * self.config.BANNER_WIDTH
        title = self.config.TITLE
        if self.config.USE_EMOJI:
            icon = self.config.EMOJI["title"]
            title = f"{icon} {title} {icon}"
        return "\n".join([rule, title.center(self.config.BANNER_WIDTH).rstrip(), rule])

    def instructions(self) -> str:
        return "\n".join(self.config.INSTRUCTIONS) + "\n"
