"""
Console configuration for TicTacToe.
All the text the players see, plus display switches.
"""


class ConsoleConfig:
    """
    Configuration class for console settings.
    Change these values to adjust how the game looks!
    """

    # ==================== DISPLAY SETTINGS ====================
    USE_EMOJI = True            # Decorate messages with emoji (--plain turns off)
    SHOW_INSTRUCTIONS = True    # Print "How to Play" at startup

    # ==================== BANNER ====================
    BANNER_WIDTH = 38
    TITLE = "TIC TAC TOE"

    INSTRUCTIONS = [
        "How to Play:",
        "• The board is a 3x3 grid (0 to 2)",
        "• Player X goes first",
        "• Enter row and column numbers",
        "• Invalid or occupied cells will retry",
    ]

    # ==================== PROMPTS ====================
    ROW_PROMPT = "Player {player}, enter ROW (0-2): "
    COL_PROMPT = "Player {player}, enter COLUMN (0-2): "
    REPLAY_PROMPT = "Do you want to play again? (y/n): "

    # ==================== MESSAGES ====================
    OUT_OF_BOUNDS_MSG = "Out of bounds! Please enter values between 0 and 2."
    CELL_OCCUPIED_MSG = "Cell already occupied! Choose another cell."
    INVALID_FORMAT_MSG = "Invalid input! Please enter numbers only."
    GAME_OVER_MSG = "Game is already over!"
    WIN_MSG = "Player {player} WINS!"
    DRAW_MSG = "Game Draw! No more moves."
    GOODBYE_MSG = "Thanks for playing! Goodbye."
    INTERRUPTED_MSG = "Game interrupted."

    # Emoji prefix for each message kind (only used when USE_EMOJI is on)
    EMOJI = {
        "title": "🎮",
        "prompt": "👉",
        "error": "❌",
        "warning": "⚠",
        "win": "🏆",
        "draw": "🤝",
        "replay": "🔁",
        "goodbye": "👋",
    }

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
