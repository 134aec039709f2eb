"""
Tests for OpponentPlayer.
"""

import random

import pytest

from engine import (
    Board,
    Difficulty,
    GameConfig,
    GameSession,
    NoLegalMoves,
    OpponentPlayer,
    available_moves,
)
from conftest import X, O, _, ScriptedRng, make_board


def test_difficulty_from_level():
    assert Difficulty.from_level(0) == Difficulty.EASY
    assert Difficulty.from_level(1) == Difficulty.MEDIUM


def test_random_chance_range():
    with pytest.raises(ValueError):
        OpponentPlayer(random_chance=1.5)


def test_full_board_is_a_contract_violation():
    board = make_board(
        [X, O, X],
        [X, O, O],
        [O, X, X],
    )
    for difficulty in Difficulty:
        with pytest.raises(NoLegalMoves):
            OpponentPlayer(difficulty).choose_move(board, X, O, random.Random(0))


def test_easy_picks_legal_moves_only(rng):
    board = make_board(
        [X, _, O],
        [_, X, _],
        [O, _, _],
    )
    legal = set(available_moves(board))
    opponent = OpponentPlayer(Difficulty.EASY)
    picks = {opponent.choose_move(board, X, O, rng) for _ in range(200)}
    assert picks == legal


def test_easy_never_consults_the_gate():
    scripted = ScriptedRng(value=0.99)
    board = make_board(
        [X, X, _],
        [O, O, _],
        [_, _, _],
    )
    move = OpponentPlayer(Difficulty.EASY).choose_move(board, X, O, scripted)
    assert move == (0, 2)    # first legal cell, from choice()
    assert scripted.random_calls == 0


def test_choose_move_does_not_touch_board(rng):
    board = make_board(
        [X, X, _],
        [O, O, _],
        [_, _, _],
    )
    before = board.copy()
    OpponentPlayer(Difficulty.MEDIUM).choose_move(board, X, O, rng)
    assert board == before


def test_last_cell_wins_with_any_rng():
    board = make_board(
        [X, X, _],
        [O, O, X],
        [O, X, O],
    )
    opponent = OpponentPlayer(Difficulty.MEDIUM)
    for seed in range(20):
        assert opponent.choose_move(board, X, O, random.Random(seed)) == (0, 2)


def test_strategic_takes_win():
    board = make_board(
        [X, X, _],
        [_, _, _],
        [O, _, O],
    )
    move = OpponentPlayer().choose_move(board, X, O, ScriptedRng(value=0.5))
    assert move == (0, 2)


def test_win_beats_block():
    # Blocking (0,2) comes first in row-major order, winning (1,2) still takes priority
    board = make_board(
        [O, O, _],
        [X, X, _],
        [_, _, _],
    )
    move = OpponentPlayer().strategic_move(board, X, O, ScriptedRng())
    assert move == (1, 2)


def test_strategic_blocks():
    board = make_board(
        [X, _, _],
        [O, O, _],
        [_, _, X],
    )
    scripted = ScriptedRng(value=0.5)
    move = OpponentPlayer().choose_move(board, X, O, scripted)
    assert move == (1, 2)
    assert scripted.choice_calls == 0


def test_block_tie_break_is_row_major():
    # Player threatens both (0,2) and (2,0)
    board = make_board(
        [O, O, _],
        [O, X, _],
        [_, X, _],
    )
    move = OpponentPlayer().strategic_move(board, X, O, ScriptedRng())
    assert move == (0, 2)


def test_strategic_falls_back_to_random():
    board = make_board(
        [X, _, _],
        [_, O, _],
        [_, _, _],
    )
    scripted = ScriptedRng(value=0.5)
    move = OpponentPlayer().choose_move(board, X, O, scripted)
    assert move == (0, 1)
    assert scripted.choice_calls == 1


def test_gate_below_chance_plays_random():
    # (1,2) would win, but a low draw means a random move
    board = make_board(
        [_, _, _],
        [X, X, _],
        [O, _, O],
    )
    scripted = ScriptedRng(value=0.49)
    move = OpponentPlayer(Difficulty.MEDIUM).choose_move(board, X, O, scripted)
    assert move == (0, 0)
    assert scripted.random_calls == 1


def test_find_winning_move_on_larger_board():
    board = Board(4)
    for row in range(3):
        board.place(row, 3, O)
    opponent = OpponentPlayer()
    assert opponent.find_winning_move(board, O) == (3, 3)
    assert opponent.find_winning_move(board, X) is None


def test_medium_never_misses_a_win_when_strategic(rng):
    # Whenever the strategic branch runs and a win exists, it is taken
    opponent = OpponentPlayer(Difficulty.MEDIUM, random_chance=0.0)
    for _trial in range(200):
        board = Board(3)
        marks = [X, O]
        for i in range(rng.randint(0, 8)):
            board.place(*rng.choice(available_moves(board)), marks[i % 2])
        if board.is_full():
            continue
        winning = opponent.find_winning_move(board, X)
        move = opponent.choose_move(board, X, O, rng)
        if winning is not None:
            assert move == winning


def _win_not_first_board():
    # (1,2) wins for X; (0,0) is the first legal cell
    return make_board(
        [_, _, _],
        [X, X, _],
        [O, _, O],
    )


def test_random_chance_zero_always_strategic():
    opponent = OpponentPlayer(Difficulty.MEDIUM, random_chance=0.0)
    for value in (0.0, 0.3, 0.99):
        move = opponent.choose_move(_win_not_first_board(), X, O, ScriptedRng(value))
        assert move == (1, 2)


def test_random_chance_one_always_random():
    opponent = OpponentPlayer(Difficulty.MEDIUM, random_chance=1.0)
    for value in (0.0, 0.3, 0.99):
        move = opponent.choose_move(_win_not_first_board(), X, O, ScriptedRng(value))
        assert move == (0, 0)


def test_config_random_chance_reaches_opponent():
    session = GameSession(config=GameConfig(RANDOM_CHANCE=0.0))
    assert session.opponent.random_chance == 0.0
