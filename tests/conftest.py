import os
import sys
import random
import pytest

# Add project root to sys.path (so tests can import core.*)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(PROJECT_ROOT)

from core.game import Game
from utils.keys import field_key


def mask_snapshot(mask, read_only=(), active=()):
    """Build a snapshot ``fields`` section from rows of 0/1 solution flags."""
    fields = {}
    for row, line in enumerate(mask):
        for column, solution in enumerate(line):
            data = {"status": 1 if (row, column) in active else 0}
            if solution:
                data["solution"] = True
            if (row, column) in read_only:
                data["readOnly"] = True
            fields[field_key(row, column)] = data
    return fields


@pytest.fixture
def make_game():
    """Returns a function that builds a Game from a solution mask."""
    def _make(mask, read_only=(), active=()):
        return Game.from_json({"fields": mask_snapshot(mask, read_only, active)})
    return _make


@pytest.fixture
def diagonal_game(make_game):
    """2x2 game whose solution is (0,0) and (1,1): targets [1, 2] both ways."""
    return make_game([[1, 0], [0, 1]])


@pytest.fixture
def rng():
    return random.Random(1234)
