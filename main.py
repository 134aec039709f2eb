"""
Console host for the TicTacToe engine.

Plays a game in the terminal:
- Draws the board and reads "row col" from the keyboard
- Waits a moment before showing the opponent's move
- Offers a new game when one ends

Run this script to play TicTacToe against the computer!
"""

import random
import time
from typing import Optional, Tuple

from engine import (
    Cell,
    Difficulty,
    GameConfig,
    GameError,
    GameSession,
    Outcome,
    SessionListener,
    Turn,
)


class ConsoleListener(SessionListener):
    """Prints session events to the console."""

    def on_session_started(self, session: GameSession):
        size = session.board.size
        print("\n" + "=" * 60)
        print(f"   New {size}x{size} game")
        print(f"   You play: {session.player_mark.symbol}")
        print(f"   Opponent plays: {session.opponent_mark.symbol}")
        print("=" * 60)

    def on_opponent_move_chosen(self, row: int, col: int):
        print("\nOpponent is thinking...")

    def on_outcome(self, outcome: Outcome):
        print("\n" + "=" * 60)
        print("   GAME OVER!")
        print("=" * 60)

        if outcome == Outcome.PLAYER_WIN:
            print("\n🎉 Congratulations! You won!")
        elif outcome == Outcome.OPPONENT_WIN:
            print("\n🤖 Opponent wins! Better luck next time!")
        else:
            print("\n🤝 It's a draw! Good game!")


class ConsoleGame:
    """
    Runs games in the terminal.

    The session is created with AUTO_APPLY_OPPONENT off, so every opponent
    move goes through the two steps: chosen, then applied after the delay.
    """

    def __init__(self, config: GameConfig, starting_turn: Turn, player_mark: Cell):
        self.config = config
        self.starting_turn = starting_turn
        self.player_mark = player_mark
        self.session = GameSession(
            listener=ConsoleListener(),
            rng=random.Random(config.RANDOM_SEED),
            config=config
        )

    def play(self):
        """Play games until the user declines another one."""
        while True:
            self.session.start_session(
                self.config.BOARD_SIZE, self.starting_turn, self.player_mark
            )
            self._game_loop()

            print("\n" + self.session.board.render())
            line = self.session.winning_line()
            if line:
                print(f"Winning line: {line}")

            if not self._ask_yes_no("\nPlay again? [y/N] "):
                break

    def _game_loop(self):
        while not self.session.is_game_over:
            if self.session.pending_opponent_move is not None:
                time.sleep(self.config.OPPONENT_DELAY_S)
                row, col = self.session.pending_opponent_move
                print(f"Opponent plays ({row}, {col})")
                self.session.apply_opponent_move()
                continue

            print("\n" + self.session.board.render())
            move = self._read_move()
            if move is None:
                continue

            try:
                self.session.submit_player_move(*move)
            except GameError as e:
                print(f"ERROR: {e}")

    def _read_move(self) -> Optional[Tuple[int, int]]:
        text = input("Your move (row col): ").strip()
        parts = text.replace(",", " ").split()
        try:
            row, col = (int(p) for p in parts)
        except ValueError:
            print("Please enter two numbers, e.g. '1 2'")
            return None
        return row, col

    def _ask_yes_no(self, prompt: str) -> bool:
        return input(prompt).strip().lower() in ("y", "yes")


def parse_args(argv=None):
    """Parse command line options."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--size",
        type=int,
        default=GameConfig.BOARD_SIZE,
        help="Board size N for an N x N board"
    )
    parser.add_argument(
        "--opponent-first",
        action="store_true",
        help="Let the opponent make the first move"
    )
    parser.add_argument(
        "--cross",
        action="store_true",
        help="Play X instead of O"
    )
    parser.add_argument(
        "--difficulty",
        choices=["easy", "medium"],
        default=GameConfig.DIFFICULTY.name.lower(),
        help="easy: random moves, medium: sometimes wins or blocks"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a repeatable opponent"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.OPPONENT_DELAY_S,
        help="Seconds to wait before showing the opponent's move"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print engine debug output"
    )

    args = parser.parse_args(argv)
    if args.size < 1:
        parser.error(f"--size must be at least 1, got {args.size}")
    return args


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    config = GameConfig(
        BOARD_SIZE=args.size,
        DIFFICULTY=Difficulty[args.difficulty.upper()],
        RANDOM_SEED=args.seed,
        OPPONENT_DELAY_S=args.delay,
        AUTO_APPLY_OPPONENT=False,
        DEBUG_MODE=args.debug
    )

    game = ConsoleGame(
        config,
        starting_turn=Turn.OPPONENT if args.opponent_first else Turn.PLAYER,
        player_mark=Cell.CROSS if args.cross else Cell.CIRCLE
    )

    try:
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
