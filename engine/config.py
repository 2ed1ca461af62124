"""
Game configuration for console TicTacToe.
Board size and symbols are fixed constants, not runtime settings.
"""


class GameConfig:
    """
    Configuration class for the rules engine.
    These values are part of the game itself - do not change them!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Total number of cells (a full board means 9 moves were made)
    TOTAL_CELLS = BOARD_SIZE * BOARD_SIZE

    # ==================== PLAYER SETTINGS ====================
    # Symbol printed for an empty cell
    EMPTY_SYMBOL = " "

    # X always moves first
    FIRST_PLAYER = "X"
