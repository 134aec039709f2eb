"""
Shared fixtures for the engine tests.
"""

import random

import pytest

from engine import Board, Cell


X = Cell.CROSS
O = Cell.CIRCLE
_ = Cell.EMPTY


class ScriptedRng:
    """
    Random source with fixed answers.

    random() returns `value`; choice() returns the first item, so a
    fallback to random play is easy to recognise.
    """

    def __init__(self, value: float = 0.9):
        self.value = value
        self.random_calls = 0
        self.choice_calls = 0

    def random(self) -> float:
        self.random_calls += 1
        return self.value

    def choice(self, seq):
        self.choice_calls += 1
        return seq[0]


@pytest.fixture
def rng():
    return random.Random(1234)



def make_board(*rows):
    """Board from rows of X, O and _."""
    return Board.from_rows([list(row) for row in rows])
