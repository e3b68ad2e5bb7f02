"""
Game state types for console TicTacToe.
Symbols, players, per-move outcomes and the game loop status.
"""

from enum import Enum
from dataclasses import dataclass


class Symbol(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    @property
    def sign(self) -> int:
        """Signed value added to line counters: +1 for X, -1 for O."""
        return 1 if self == Symbol.X else -1

    @classmethod
    def from_sign(cls, sign: int) -> "Symbol":
        """Get the symbol for a counter sign (+1 or -1)."""
        if sign > 0:
            return cls.X
        if sign < 0:
            return cls.O
        raise ValueError("Sign 0 has no symbol (empty cell)")

    def opposite(self) -> "Symbol":
        """Get the opposite symbol."""
        return Symbol.O if self == Symbol.X else Symbol.X


class MoveOutcome(Enum):
    """Result of placing a single move on the board."""
    INVALID = "invalid"
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"


class GameStatus(Enum):
    """States of the game loop. Everything except AWAITING_MOVE is terminal."""
    AWAITING_MOVE = "awaiting_move"
    WON = "won"
    DRAWN = "drawn"
    QUIT = "quit"


@dataclass(frozen=True)
class Player:
    """
    A player in the game.
    Immutable once created.
    """
    name: str
    symbol: Symbol

    @property
    def value(self) -> int:
        """+1 for X, -1 for O."""
        return self.symbol.sign

    def __str__(self) -> str:
        return f"{self.name} ({self.symbol.value})"


@dataclass
class Move:
    """
    An accepted move in the game.
    """
    player: Player          # Who made the move
    row: int                # Row (0 to n-1)
    col: int                # Column (0 to n-1)
    move_number: int        # 1 for the first move of the game
