"""
Game session for the TicTacToe engine.
Runs the turn state machine between the player and the computer opponent.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board, Cell
from .config import GameConfig
from .errors import InvalidTurn
from .opponent import OpponentPlayer
from .win_checker import WinChecker


class Turn(Enum):
    """Whose move it is."""
    PLAYER = "player"
    OPPONENT = "opponent"

    def opposite(self) -> "Turn":
        """Get the other side."""
        return Turn.OPPONENT if self == Turn.PLAYER else Turn.PLAYER


class Outcome(Enum):
    """Result of a session. Everything but IN_PROGRESS is final."""
    IN_PROGRESS = "in_progress"
    PLAYER_WIN = "player_win"
    OPPONENT_WIN = "opponent_win"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.IN_PROGRESS

    @property
    def event_code(self) -> Optional[int]:
        """Winner code for hosts wired to integers: 0 player, 1 opponent, -1 draw."""
        return {
            Outcome.PLAYER_WIN: 0,
            Outcome.OPPONENT_WIN: 1,
            Outcome.DRAW: -1,
        }.get(self)


@dataclass
class Move:
    """
    A move in the game.
    """
    side: Turn              # Who made the move
    row: int
    col: int
    mark: Cell              # What was placed
    move_number: int        # 0-based index in the session


class SessionListener:
    """
    Receives session events. Override the hooks you need.

    Events carry no board data; read session.board when needed.
    """

    def on_session_started(self, session: "GameSession"):
        pass

    def on_opponent_move_chosen(self, row: int, col: int):
        pass

    def on_outcome(self, outcome: Outcome):
        pass


class GameSession:
    """
    One game between the player and the computer opponent.

    Game flow:
    1. start_session() clears the board; if the opponent starts it moves now
    2. The player calls submit_player_move()
    3. The session checks for a win or a draw
    4. The opponent chooses a move and on_opponent_move_chosen fires
    5. The move is applied right away, or later by apply_opponent_move()
       when AUTO_APPLY_OPPONENT is off
    6. Repeat until someone wins or the board is full

    Not thread-safe: hosts must serialize calls into one session.
    """

    def __init__(
        self,
        listener: Optional[SessionListener] = None,
        rng: Optional[random.Random] = None,
        config: Optional[GameConfig] = None,
        opponent: Optional[OpponentPlayer] = None
    ):
        """
        Initialize the session. No game runs until start_session().

        Args:
            listener: Receives session events.
            rng: Random source for the opponent (default: seeded from config).
            config: Game configuration.
            opponent: Opponent to use (default: built from config).
        """
        self.config = config or GameConfig()
        self.listener = listener or SessionListener()
        self.rng = rng or random.Random(self.config.RANDOM_SEED)
        self.opponent = opponent or OpponentPlayer(
            self.config.DIFFICULTY, self.config.RANDOM_CHANCE
        )
        self.win_checker = WinChecker()

        self.board: Optional[Board] = None
        self.turn: Optional[Turn] = None
        self.outcome = Outcome.IN_PROGRESS
        self.player_mark = self.config.PLAYER_MARK
        self.opponent_mark = self.player_mark.opposite()
        self.moves: List[Move] = []
        self.pending_opponent_move: Optional[Tuple[int, int]] = None

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def is_player_turn(self) -> bool:
        return self.turn == Turn.PLAYER and not self.is_game_over

    def start_session(
        self,
        board_size: Optional[int] = None,
        starting_turn: Optional[Turn] = None,
        player_mark: Optional[Cell] = None
    ):
        """
        Start a new game, discarding any previous one.

        Args:
            board_size: Board size (default: config.BOARD_SIZE).
            starting_turn: Side to move first (default from config.PLAYER_STARTS).
            player_mark: CROSS or CIRCLE (default: config.PLAYER_MARK).
        """
        if board_size is None:
            board_size = self.config.BOARD_SIZE
        if starting_turn is None:
            starting_turn = Turn.PLAYER if self.config.PLAYER_STARTS else Turn.OPPONENT
        if player_mark is None:
            player_mark = self.config.PLAYER_MARK
        if player_mark == Cell.EMPTY:
            raise ValueError("Player mark must be CROSS or CIRCLE")

        self.board = Board(board_size)
        self.turn = starting_turn
        self.outcome = Outcome.IN_PROGRESS
        self.player_mark = player_mark
        self.opponent_mark = player_mark.opposite()
        self.moves = []
        self.pending_opponent_move = None

        self._debug(
            f"New {board_size}x{board_size} game. Player is {player_mark.symbol}, "
            f"{starting_turn.value} moves first."
        )
        self.listener.on_session_started(self)

        if self.turn == Turn.OPPONENT:
            self._trigger_opponent_move()

    def submit_player_move(self, row: int, col: int):
        """
        Place the player's mark and let the opponent answer.

        Args:
            row: Row index.
            col: Column index.

        Raises:
            InvalidTurn: If no game is running, it is over, or it is not
                the player's turn.
            OutOfBounds: If the cell is off the board.
            CellOccupied: If the cell is taken.
        """
        if self.board is None:
            raise InvalidTurn("No game has been started")
        if self.is_game_over:
            raise InvalidTurn(f"Game is already over ({self.outcome.value})")
        if self.turn != Turn.PLAYER:
            raise InvalidTurn("It is not the player's turn")

        self.board.place(row, col, self.player_mark)
        self._record(Turn.PLAYER, row, col, self.player_mark)

        if self.win_checker.has_win(self.board, self.player_mark):
            self._finish(Outcome.PLAYER_WIN)
        elif self.board.is_full():
            self._finish(Outcome.DRAW)
        else:
            self.turn = Turn.OPPONENT
            self._trigger_opponent_move()

    def apply_opponent_move(self):
        """
        Apply the opponent move chosen earlier.

        Needed when config.AUTO_APPLY_OPPONENT is False, or to retry after
        a listener raised from on_opponent_move_chosen.

        Raises:
            InvalidTurn: If no opponent move is waiting.
        """
        if self.pending_opponent_move is None:
            raise InvalidTurn("No opponent move is waiting to be applied")

        row, col = self.pending_opponent_move
        self.pending_opponent_move = None
        self._apply_opponent_move(row, col)

    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        """The completed line of the winner, or None."""
        if self.outcome == Outcome.PLAYER_WIN:
            return self.win_checker.winning_line(self.board, self.player_mark)
        if self.outcome == Outcome.OPPONENT_WIN:
            return self.win_checker.winning_line(self.board, self.opponent_mark)
        return None

    def _trigger_opponent_move(self):
        row, col = self.opponent.choose_move(
            self.board, self.opponent_mark, self.player_mark, self.rng
        )
        self._debug(f"Opponent chose ({row}, {col})")

        # Stored first so a failing listener leaves the move applicable
        self.pending_opponent_move = (row, col)
        self.listener.on_opponent_move_chosen(row, col)

        if self.config.AUTO_APPLY_OPPONENT:
            self.apply_opponent_move()

    def _apply_opponent_move(self, row: int, col: int):
        self.board.place(row, col, self.opponent_mark)
        self._record(Turn.OPPONENT, row, col, self.opponent_mark)

        if self.win_checker.has_win(self.board, self.opponent_mark):
            self._finish(Outcome.OPPONENT_WIN)
        elif self.board.is_full():
            self._finish(Outcome.DRAW)
        else:
            self.turn = Turn.PLAYER

    def _record(self, side: Turn, row: int, col: int, mark: Cell):
        self.moves.append(Move(
            side=side,
            row=row,
            col=col,
            mark=mark,
            move_number=len(self.moves)
        ))
        if self.config.DEBUG_MODE:
            print(f"{side.value} placed {mark.symbol} at ({row}, {col})")
            print(self.board.render())

    def _finish(self, outcome: Outcome):
        self.outcome = outcome
        self._debug(f"Game over: {outcome.value}")
        self.listener.on_outcome(outcome)

    def _debug(self, message: str):
        if self.config.DEBUG_MODE:
            print(message)
