"""
Move enumeration and validation for the TicTacToe engine.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .board import Board, Cell


def available_moves(board: Board) -> List[Tuple[int, int]]:
    """
    Get every empty cell on the board.

    Args:
        board: The board to look at.

    Returns:
        List of (row, col) tuples in row-major order.
    """
    return [(int(r), int(c)) for r, c in np.argwhere(board.grid == Cell.EMPTY)]


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Checks a player move before it is submitted.

    Rules:
    1. A game must be running
    2. It must be the player's turn
    3. The cell must be on the board and empty

    Nothing is changed; GameSession.submit_player_move() enforces the same
    rules by raising.
    """

    def validate_move(self, session, row: int, col: int) -> ValidationResult:
        """
        Validate a player move.

        Args:
            session: The GameSession the move is meant for.
            row: Row to place the mark.
            col: Column to place the mark.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if session.board is None:
            return ValidationResult(
                is_valid=False,
                error_message="No game has been started!"
            )

        if session.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not session.is_player_turn:
            return ValidationResult(
                is_valid=False,
                error_message="Wait for the opponent to move!"
            )

        board = session.board
        if not (0 <= row < board.size and 0 <= col < board.size):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{board.size - 1}."
            )

        occupant = board.at(row, col)
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.name}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, session) -> List[Tuple[int, int]]:
        """
        Get all moves the player may submit right now.

        Returns:
            List of (row, col), empty when the game is over or not the
            player's turn.
        """
        if session.board is None or session.is_game_over or not session.is_player_turn:
            return []
        return available_moves(session.board)
