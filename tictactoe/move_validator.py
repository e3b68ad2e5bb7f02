"""
Move validator for console TicTacToe.
Explains why a move is rejected.
"""

from typing import Optional
from dataclasses import dataclass

from .board import Board


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be on the board
    2. Can only place on empty cells
    """

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark.
            col: Column to place the mark.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        last = board.size - 1

        if not board.is_in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{last}."
            )

        occupant = board.get_cell(row, col)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)
