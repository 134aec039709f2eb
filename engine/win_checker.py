"""
Win checker for the TicTacToe engine.
Checks if a mark has completed a line or if the game is a draw.
"""

from typing import List, Optional, Tuple

import numpy as np

from .board import Board, Cell


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: a full row, a full column, or either main diagonal
    made of the same mark. An N x N board has 2N + 2 such lines.
    """

    @staticmethod
    def winning_lines(size: int) -> List[List[Tuple[int, int]]]:
        """
        All lines that win on a board of this size.

        Returns:
            Rows, then columns, then the main diagonal and the anti-diagonal,
            each as a list of (row, col).
        """
        lines = [[(r, c) for c in range(size)] for r in range(size)]
        lines += [[(r, c) for r in range(size)] for c in range(size)]
        lines.append([(i, i) for i in range(size)])
        lines.append([(i, size - 1 - i) for i in range(size)])
        return lines

    def has_win(self, board: Board, mark: Cell) -> bool:
        """
        Check if a mark fills any complete line.

        Args:
            board: The board to look at.
            mark: CROSS or CIRCLE.

        Returns:
            True if some row, column or main diagonal is all `mark`.
        """
        if mark == Cell.EMPTY:
            return False

        owned = board.grid == mark

        if owned.all(axis=1).any():    # rows
            return True
        if owned.all(axis=0).any():    # columns
            return True
        if np.diagonal(owned).all():
            return True
        return bool(np.diagonal(np.fliplr(owned)).all())

    def winning_line(self, board: Board, mark: Cell) -> Optional[List[Tuple[int, int]]]:
        """
        Get the first completed line for a mark.

        Returns:
            The line as a list of (row, col), or None.
        """
        if mark == Cell.EMPTY:
            return None

        for line in self.winning_lines(board.size):
            if all(board.at(r, c) == mark for r, c in line):
                return line
        return None

    def check_draw(self, board: Board) -> bool:
        """True if the board is full and neither mark has won."""
        if not board.is_full():
            return False
        return not (self.has_win(board, Cell.CROSS) or self.has_win(board, Cell.CIRCLE))
