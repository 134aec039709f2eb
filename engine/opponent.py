"""
Computer opponent for the TicTacToe engine.
Picks moves at random or with a one-move lookahead (win, else block).
"""

from enum import Enum
from typing import Optional, Tuple

from .board import Board, Cell
from .errors import NoLegalMoves
from .moves import available_moves
from .win_checker import WinChecker


class Difficulty(Enum):
    """Opponent difficulty levels."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Coin flip between random and win/block

    @classmethod
    def from_level(cls, level: int) -> "Difficulty":
        """Map an integer AI level (0 = easy, anything else = medium)."""
        return cls.EASY if level == 0 else cls.MEDIUM


class OpponentPlayer:
    """
    The computer side of the game.

    EASY picks uniformly among the empty cells. MEDIUM draws a number in
    [0, 1); below `random_chance` it plays like EASY, otherwise it takes
    a winning move if there is one, else blocks the player's winning move,
    else plays randomly. Ties go to the first cell in row-major order.

    The random source is always passed in, never the module-level one.
    """

    def __init__(self, difficulty: Difficulty = Difficulty.MEDIUM, random_chance: float = 0.5):
        """
        Initialize the opponent.

        Args:
            difficulty: EASY or MEDIUM.
            random_chance: Probability threshold for MEDIUM; a draw below
                it means a random move.
        """
        if not 0.0 <= random_chance <= 1.0:
            raise ValueError(f"random_chance must be in [0, 1], got {random_chance}")

        self.difficulty = difficulty
        self.random_chance = random_chance
        self.win_checker = WinChecker()

    def choose_move(
        self,
        board: Board,
        opponent_mark: Cell,
        player_mark: Cell,
        rng
    ) -> Tuple[int, int]:
        """
        Choose where the opponent plays next.

        Args:
            board: Current board. It is not modified.
            opponent_mark: The mark this opponent places.
            player_mark: The human player's mark.
            rng: Random source with random() and choice(), e.g. random.Random.

        Returns:
            (row, col) of an empty cell.

        Raises:
            NoLegalMoves: If the board is full.
        """
        moves = available_moves(board)
        if not moves:
            raise NoLegalMoves("Opponent asked to move on a full board")

        if self.difficulty == Difficulty.EASY:
            return rng.choice(moves)

        if rng.random() < self.random_chance:
            return rng.choice(moves)

        return self.strategic_move(board, opponent_mark, player_mark, rng)

    def strategic_move(
        self,
        board: Board,
        opponent_mark: Cell,
        player_mark: Cell,
        rng
    ) -> Tuple[int, int]:
        """
        Win if possible, otherwise block, otherwise play randomly.

        Returns:
            (row, col) of an empty cell.
        """
        moves = available_moves(board)
        if not moves:
            raise NoLegalMoves("Opponent asked to move on a full board")

        move = self.find_winning_move(board, opponent_mark)
        if move is not None:
            return move

        # Cell where the player would win next turn
        move = self.find_winning_move(board, player_mark)
        if move is not None:
            return move

        return rng.choice(moves)

    def find_winning_move(self, board: Board, mark: Cell) -> Optional[Tuple[int, int]]:
        """
        Find the first empty cell that completes a line for `mark`.

        Each candidate is tried on a copy of the board.

        Returns:
            (row, col), or None if no single move wins.
        """
        for row, col in available_moves(board):
            trial = board.copy()
            trial.place(row, col, mark)
            if self.win_checker.has_win(trial, mark):
                return (row, col)
        return None
