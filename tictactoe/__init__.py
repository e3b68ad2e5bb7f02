"""
Console TicTacToe
=================
Two players take turns placing X and O on an n x n board.
Wins and draws are detected from per-line counters in O(1) per move.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import Symbol, Player, MoveOutcome, GameStatus, Move
from .board import Board
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, WinningLine
from .console import ConsoleInput, InvalidInputError, BoardSizeError, parse_move
from .game import GameLoop
