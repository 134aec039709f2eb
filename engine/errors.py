"""
Errors raised by the TicTacToe engine.
"""


class GameError(Exception):
    """Base class for errors the caller can correct and retry."""


class OutOfBounds(GameError):
    """A coordinate lies outside the board."""

    def __init__(self, row: int, col: int, size: int):
        self.row = row
        self.col = col
        self.size = size
        super().__init__(
            f"Invalid position ({row}, {col}). Must be 0-{size - 1}."
        )


class CellOccupied(GameError):
    """Tried to place a mark on a cell that already holds one."""

    def __init__(self, row: int, col: int, occupant):
        self.row = row
        self.col = col
        self.occupant = occupant
        super().__init__(
            f"Cell ({row}, {col}) is already occupied by {occupant.name}"
        )


class InvalidTurn(GameError):
    """A move was submitted out of turn or after the game ended."""


class NoLegalMoves(RuntimeError):
    """
    The opponent was asked to move on a full board.

    Callers must check Board.is_full() first, so this is a bug in the
    caller rather than something to recover from.
    """
