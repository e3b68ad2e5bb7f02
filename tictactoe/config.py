"""
Game configuration for console TicTacToe.
Board size limits, default player names, and console settings.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Command line flags in main.py override these per run.
    """

    # ==================== BOARD SETTINGS ====================
    # Board is an n x n grid, n is asked for at startup
    DEFAULT_BOARD_SIZE = 3

    # Range accepted when the board size is validated (inclusive)
    MIN_BOARD_SIZE = 3
    MAX_BOARD_SIZE = 15

    # ==================== PLAYER SETTINGS ====================
    # Used when a name is left blank
    DEFAULT_PLAYER_NAMES = ("Player 1", "Player 2")

    # ==================== INPUT SETTINGS ====================
    # Typing any of these at the move prompt ends the game
    QUIT_COMMANDS = ("q", "quit", "exit")

    # ==================== DEBUG SETTINGS ====================
    # Print line counters after every accepted move
    DEBUG_MODE = False

    @classmethod
    def is_valid_board_size(cls, size: int) -> bool:
        """Check a board size against the validated range."""
        return cls.MIN_BOARD_SIZE <= size <= cls.MAX_BOARD_SIZE
