"""
Win checker for console TicTacToe.
Rescans the board for a completed line or a draw.
"""

from typing import Optional, List, Tuple
from dataclasses import dataclass

from .board import Board
from .game_state import Symbol


@dataclass
class WinningLine:
    """A line owned entirely by one symbol."""
    kind: str                       # "row", "column", "diagonal" or "anti-diagonal"
    index: int                      # Row/column number, 0 for diagonals
    cells: List[Tuple[int, int]]
    symbol: Symbol

    def describe(self) -> str:
        """Short human readable name, e.g. 'row 0'."""
        if self.kind in ("row", "column"):
            return f"{self.kind} {self.index}"
        return self.kind


class WinChecker:
    """
    Checks for win conditions in TicTacToe by looking at every line.

    Win condition: n marks of the same symbol in a row
    (horizontally, vertically, or diagonally)

    The board already reports wins from its counters; this class is
    used to find which line won and to cross-check the counters.
    """

    @staticmethod
    def get_lines(size: int) -> List[Tuple[str, int, List[Tuple[int, int]]]]:
        """
        All lines of an n x n board as (kind, index, cells).
        """
        lines = []
        for r in range(size):
            lines.append(("row", r, [(r, c) for c in range(size)]))
        for c in range(size):
            lines.append(("column", c, [(r, c) for r in range(size)]))
        lines.append(("diagonal", 0, [(i, i) for i in range(size)]))
        lines.append(("anti-diagonal", 0, [(i, size - 1 - i) for i in range(size)]))
        return lines

    def get_winning_line(self, board: Board) -> Optional[WinningLine]:
        """
        Get the winning line if there is one.

        Args:
            board: The board.

        Returns:
            The first completed line found, or None.
        """
        for kind, index, cells in self.get_lines(board.size):
            symbol = self._check_line(board, cells)
            if symbol is not None:
                return WinningLine(kind=kind, index=index, cells=cells, symbol=symbol)
        return None

    def check_winner(self, board: Board) -> Optional[Symbol]:
        """
        Check if there's a winner.

        Returns:
            The winning Symbol, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        return line.symbol if line else None

    def check_win(self, board: Board, symbol: Symbol) -> bool:
        """True if the given symbol owns a complete line."""
        for _, _, cells in self.get_lines(board.size):
            if self._check_line(board, cells) == symbol:
                return True
        return False

    def check_draw(self, board: Board) -> bool:
        """
        A draw occurs when all cells are filled and nobody has a line.
        """
        if self.check_winner(board) is not None:
            return False
        return len(board.get_empty_cells()) == 0

    def _check_line(self, board: Board, cells: List[Tuple[int, int]]) -> Optional[Symbol]:
        """
        Check if a single line has a winner.

        Returns:
            The owning Symbol if every cell holds it, None otherwise.
        """
        first = board.get_cell(*cells[0])
        if first is None:
            return None  # Empty cell, no winner on this line

        for row, col in cells[1:]:
            if board.get_cell(row, col) != first:
                return None
        return first
