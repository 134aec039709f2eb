"""
Board for the TicTacToe engine.
Holds the N x N grid of cells and the single placement operation.
"""

from enum import IntEnum
from typing import List, Sequence

import numpy as np

from .errors import CellOccupied, OutOfBounds


class Cell(IntEnum):
    """What a single square holds."""
    EMPTY = 0
    CROSS = 1
    CIRCLE = 2

    def opposite(self) -> "Cell":
        """Get the other player's mark."""
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Cell.CIRCLE if self == Cell.CROSS else Cell.CROSS

    @property
    def symbol(self) -> str:
        """Single character used when printing the board."""
        return {Cell.EMPTY: " ", Cell.CROSS: "X", Cell.CIRCLE: "O"}[self]


class Board:
    """
    An N x N TicTacToe board.

    The grid is a numpy array of Cell values. It starts all EMPTY and the
    only way to change it is place(), which refuses occupied cells and
    coordinates outside the board.
    """

    def __init__(self, size: int = 3):
        """
        Create an empty board.

        Args:
            size: Number of rows (and columns). Fixed for the board's life.
        """
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")
        self._size = size
        self._grid = np.full((size, size), Cell.EMPTY, dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Board":
        """
        Build a board from a nested list of cells.

        Args:
            rows: Square nested sequence, rows[row][col].

        Returns:
            A new Board holding those cells.
        """
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Board rows must form a square grid")

        board = cls(size)
        for r, row in enumerate(rows):
            for c, cell in enumerate(row):
                board._grid[r, c] = Cell(cell)
        return board

    @property
    def size(self) -> int:
        return self._size

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the underlying array."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def _check_bounds(self, row: int, col: int):
        if not (0 <= row < self._size and 0 <= col < self._size):
            raise OutOfBounds(row, col, self._size)

    def at(self, row: int, col: int) -> Cell:
        """
        Get the cell at a position.

        Raises:
            OutOfBounds: If row or col is outside the board.
        """
        self._check_bounds(row, col)
        return Cell(int(self._grid[row, col]))

    def place(self, row: int, col: int, mark: Cell):
        """
        Put a mark on an empty cell.

        Args:
            row: Row index (0 to size-1).
            col: Column index (0 to size-1).
            mark: CROSS or CIRCLE.

        Raises:
            ValueError: If mark is EMPTY or not a Cell value.
            OutOfBounds: If row or col is outside the board.
            CellOccupied: If the cell already holds a mark.
        """
        mark = Cell(mark)
        if mark == Cell.EMPTY:
            raise ValueError("Cannot place an EMPTY mark")

        self._check_bounds(row, col)

        occupant = self.at(row, col)
        if occupant != Cell.EMPTY:
            raise CellOccupied(row, col, occupant)

        self._grid[row, col] = mark

    def is_full(self) -> bool:
        """True if no EMPTY cell remains."""
        return not np.any(self._grid == Cell.EMPTY)

    def count(self, mark: Cell) -> int:
        """Number of cells holding this value."""
        return int(np.count_nonzero(self._grid == mark))

    def filled_count(self) -> int:
        """Number of cells holding any mark."""
        return int(np.count_nonzero(self._grid != Cell.EMPTY))

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board(self._size)
        new_board._grid = self._grid.copy()
        return new_board

    def rows(self) -> List[List[Cell]]:
        """Snapshot of the board as nested lists of Cell."""
        return [[Cell(int(v)) for v in row] for row in self._grid]

    def render(self) -> str:
        """Draw the board with box characters."""
        n = self._size
        lines = ["    " + "   ".join(str(c) for c in range(n))]
        lines.append("  ┌" + "┬".join(["───"] * n) + "┐")

        for r, row in enumerate(self.rows()):
            cells = "│".join(f" {cell.symbol} " for cell in row)
            lines.append(f"{r} │{cells}│")
            if r < n - 1:
                lines.append("  ├" + "┼".join(["───"] * n) + "┤")

        lines.append("  └" + "┴".join(["───"] * n) + "┘")
        return "\n".join(lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and np.array_equal(self._grid, other._grid)

    def __repr__(self) -> str:
        marks = "/".join(
            "".join(cell.symbol if cell else "." for cell in row)
            for row in self.rows()
        )
        return f"Board({self._size}, {marks!r})"
