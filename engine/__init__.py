"""
TicTacToe Engine
================
Game core for N x N TicTacToe against a computer opponent.
Handles the board, win detection, the opponent's move choice and the
turn state machine. Drawing the board and reading input belong to the host.
"""

from .errors import GameError, OutOfBounds, CellOccupied, InvalidTurn, NoLegalMoves
from .board import Board, Cell
from .win_checker import WinChecker
from .moves import available_moves, MoveValidator, ValidationResult
from .opponent import Difficulty, OpponentPlayer
from .config import GameConfig
from .session import GameSession, SessionListener, Move, Outcome, Turn

__version__ = "1.0.0"
