"""
Board for console TicTacToe.
Holds the n x n grid and detects wins and draws with line counters.
"""

from typing import Optional, List, Tuple, Dict
import numpy as np

from .game_state import Symbol, Player, MoveOutcome


class Board:
    """
    An n x n TicTacToe board.

    Every cell holds 0 (empty), +1 (X) or -1 (O). Alongside the grid the
    board keeps a signed counter per row, per column and for both
    diagonals. A counter reaches +n or -n only when one symbol owns every
    cell of that line, so a move can be judged by looking at the (at most
    four) counters it touched instead of rescanning the grid.
    """

    def __init__(self, size: int):
        """
        Create an empty board.

        Args:
            size: Number of rows (and columns). Must be at least 1.
        """
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")

        self.size = size
        self.grid = np.zeros((size, size), dtype=np.int8)

        # Signed sums of the values placed in each line
        self.row_sums = np.zeros(size, dtype=np.int32)
        self.col_sums = np.zeros(size, dtype=np.int32)
        self.diag_sum = 0
        self.anti_diag_sum = 0

        self.moves_placed = 0

    def is_in_bounds(self, row: int, col: int) -> bool:
        """True if (row, col) lies on the board."""
        return 0 <= row < self.size and 0 <= col < self.size

    def is_cell_empty(self, row: int, col: int) -> bool:
        """True if coords are on the board and the cell is blank."""
        if not self.is_in_bounds(row, col):
            return False
        return bool(self.grid[row, col] == 0)

    def is_valid_move(self, row: int, col: int) -> bool:
        """A move is valid on any empty in-bounds cell."""
        return self.is_cell_empty(row, col)

    def get_cell(self, row: int, col: int) -> Optional[Symbol]:
        """
        Get the symbol at a cell.

        Returns:
            The Symbol, or None if the cell is empty or off the board.
        """
        if not self.is_in_bounds(row, col):
            return None
        value = int(self.grid[row, col])
        if value == 0:
            return None
        return Symbol.from_sign(value)

    def place_move(self, row: int, col: int, player: Player) -> MoveOutcome:
        """
        Place a player's mark and classify the result.

        Args:
            row: Row index (0 to size-1).
            col: Column index (0 to size-1).
            player: The player making the move.

        Returns:
            INVALID if the cell is off the board or taken (nothing changes),
            WIN if the move completed a line, DRAW if it filled the board,
            CONTINUE otherwise.
        """
        if not self.is_valid_move(row, col):
            return MoveOutcome.INVALID

        value = player.value
        n = self.size

        self.grid[row, col] = value
        self.row_sums[row] += value
        self.col_sums[col] += value
        touched = [int(self.row_sums[row]), int(self.col_sums[col])]

        if row == col:
            self.diag_sum += value
            touched.append(self.diag_sum)
        if row + col == n - 1:
            self.anti_diag_sum += value
            touched.append(self.anti_diag_sum)

        self.moves_placed += 1

        if any(abs(total) == n for total in touched):
            return MoveOutcome.WIN
        if self.moves_placed == n * n:
            return MoveOutcome.DRAW
        return MoveOutcome.CONTINUE

    def is_full(self) -> bool:
        """True once every cell holds a mark."""
        return self.moves_placed == self.size * self.size

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        rows, cols = np.nonzero(self.grid == 0)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def line_counters(self) -> Dict[str, object]:
        """Snapshot of every line counter (for debug output)."""
        return {
            "rows": [int(v) for v in self.row_sums],
            "cols": [int(v) for v in self.col_sums],
            "diag": self.diag_sum,
            "anti_diag": self.anti_diag_sum,
            "moves_placed": self.moves_placed,
        }

    def render(self) -> str:
        """
        Render the board as a fixed-width text grid with row and column
        indices. Label and cell widths grow with the number of digits in
        the largest index, so any board size stays aligned.
        """
        n = self.size
        digits = len(str(n - 1))
        label_width = max(3, digits + 1)        # row label plus gap
        cell_width = max(1, digits - 2)         # " | " adds 3 more per cell
        step = cell_width + 3

        header = "".join(f"{c:<{step}}" for c in range(n)).rstrip()
        lines = [" " * label_width + header]
        separator = " " * (label_width - 1) + "+".join(["-" * (cell_width + 2)] * n)

        for r in range(n):
            marks = []
            for c in range(n):
                symbol = self.get_cell(r, c)
                marks.append(f"{symbol.value if symbol else ' ':<{cell_width}}")
            lines.append(f"{r:<{label_width}}" + " | ".join(marks))

            if r + 1 < n:
                lines.append(separator)

        return "\n".join(lines)

    def display(self):
        """Print the board to console."""
        print()
        print(self.render())
        print()


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board(3)
    x = Player("Player 1", Symbol.X)
    o = Player("Player 2", Symbol.O)

    moves = [
        (0, 0, x),
        (1, 1, o),
        (0, 1, x),
        (1, 0, o),
        (0, 2, x),  # completes row 0
    ]

    for row, col, player in moves:
        outcome = board.place_move(row, col, player)
        print(f"{player} -> ({row}, {col}): {outcome.value}")

    board.display()
    print(board.line_counters())

    print("\nBoard test done!")
