"""
Console input for TicTacToe.
Reads board size, player names and moves from the keyboard.
"""

import re
from typing import Callable, Optional, Tuple

from .config import GameConfig
from .game_state import Player, Symbol


class InvalidInputError(ValueError):
    """Text typed at a prompt could not be understood."""


class BoardSizeError(ValueError):
    """Board size is outside the accepted range."""


_MOVE_SEPARATOR = re.compile(r"[\s,]+")


def parse_move(text: str) -> Tuple[int, int]:
    """
    Parse a "row col" pair.

    Accepts two integers separated by spaces and/or a comma,
    e.g. "1 2", "1,2" or "1, 2".

    Raises:
        InvalidInputError: if the text is not exactly two integers.
    """
    parts = [p for p in _MOVE_SEPARATOR.split(text.strip()) if p]
    if len(parts) != 2:
        raise InvalidInputError("Please enter a row and a column, e.g. '1 2'.")

    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidInputError(f"'{text.strip()}' is not a pair of whole numbers.")


def check_board_size(size: int, validate: bool = True) -> int:
    """
    Check a board size.

    Args:
        size: Requested size.
        validate: Enforce the configured range. When False any
            positive size is allowed.

    Returns:
        The size, unchanged.

    Raises:
        BoardSizeError: if the size is rejected.
    """
    if validate and not GameConfig.is_valid_board_size(size):
        raise BoardSizeError(
            f"Board size must be between {GameConfig.MIN_BOARD_SIZE} "
            f"and {GameConfig.MAX_BOARD_SIZE}, got {size}."
        )
    if size < 1:
        raise BoardSizeError(f"Board size must be a positive number, got {size}.")
    return size


class ConsoleInput:
    """
    Prompts the players on the console.

    Malformed input never reaches the game: it is reported and the
    same prompt is shown again.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print
    ):
        """
        Args:
            input_fn: Function that shows a prompt and returns a line.
            output: Function used for messages.
        """
        self.input_fn = input_fn
        self.output = output

    def read_move(self, player: Player) -> Optional[Tuple[int, int]]:
        """
        Ask a player for their move.

        Returns:
            (row, col), or None if the player quit (or input ended).
        """
        prompt = f"{player.name}'s turn ({player.symbol.value}). Enter row and column: "

        while True:
            try:
                text = self.input_fn(prompt)
            except EOFError:
                return None

            if text.strip().lower() in GameConfig.QUIT_COMMANDS:
                return None

            try:
                return parse_move(text)
            except InvalidInputError as e:
                self.output(f"{e} Try again.")

    def read_board_size(self, validate: bool = True) -> int:
        """
        Ask for the board size.

        Non-numeric input is asked again; a number outside the accepted
        range raises BoardSizeError.
        """
        while True:
            try:
                text = self.input_fn("Enter board size (e.g., 3 for 3x3): ")
            except EOFError:
                raise BoardSizeError("No board size given.")

            try:
                size = int(text.strip())
            except ValueError:
                self.output(f"'{text.strip()}' is not a whole number. Try again.")
                continue

            return check_board_size(size, validate)

    def read_player_name(self, symbol: Symbol) -> str:
        """Ask for one player's name. A blank name uses the default."""
        default = GameConfig.DEFAULT_PLAYER_NAMES[0 if symbol == Symbol.X else 1]
        try:
            text = self.input_fn(f"Enter name for player {symbol.value} [{default}]: ")
        except EOFError:
            text = ""
        return text.strip() or default

    def read_player_names(self) -> Tuple[str, str]:
        """Ask for both player names, X first."""
        return self.read_player_name(Symbol.X), self.read_player_name(Symbol.O)
