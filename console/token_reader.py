"""
Token input for console TicTacToe.
Reads whitespace-separated tokens from line-based input.
"""

from collections import deque
from typing import Callable, Deque, Optional


class TokenReader:
    """
    Scanner-style reader over line input.

    One line can answer several prompts ("1 2" gives a row and a
    column). Blank lines are skipped. EOFError from the input source is
    passed on to the caller.
    """

    def __init__(
        self,
        input_fn: Callable[[], str],
        write: Callable[[str], None]
    ):
        """
        Args:
            input_fn: Returns the next line of input, raises EOFError at the end.
            write: Writes a prompt without a trailing newline.
        """
        self._input = input_fn
        self._write = write
        self._pending: Deque[str] = deque()

    def next_token(self, prompt: Optional[str] = None) -> str:
        """
        Show the prompt (if any) and return the next token.

        Args:
            prompt: Text printed before waiting for input.

        Returns:
            The next non-blank token.
        """
        if prompt:
            self._write(prompt)

        while not self._pending:
            self._pending.extend(self._input().split())

        return self._pending.popleft()

    def discard_line(self):
        """Drop whatever is left of the current input line."""
        self._pending.clear()

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)
