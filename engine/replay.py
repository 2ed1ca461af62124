"""
Replay controller for console TicTacToe.
Decides whether another game is played once one has finished.
"""

from typing import Optional

from .game_engine import GameEngine


class ReplayController:
    """
    Thin wrapper around the play-again decision.

    Only the first character of the answer counts: "y", "Y", "yes",
    "yeah" all mean yes; anything else (including nothing) means no.
    """

    AFFIRMATIVE = "y"

    def __init__(self, engine: GameEngine):
        self.engine = engine

    def wants_replay(self, answer: Optional[str]) -> bool:
        if not answer:
            return False
        answer = answer.strip()
        return answer[:1].lower() == self.AFFIRMATIVE

    def handle_answer(self, answer: Optional[str]) -> bool:
        """
        Apply the player's answer to the end-of-game prompt.

        Args:
            answer: The token the player typed.

        Returns:
            True if a new game was started, False if the session should end.
        """
        if not self.wants_replay(answer):
            return False

        self.engine.new_game()
        return True
