"""
Constraint targets:
- 1-based weights
- Targets derived from the solution mask only
- Live sums follow active fields
"""

from core.board import Board
from core.constraints import ConstraintCache, get_weight, line_sum
from conftest import mask_snapshot


def test_weight_is_one_based():
    assert get_weight(0) == 1
    assert get_weight(4) == 5


def test_diagonal_targets():
    board = Board.from_json(mask_snapshot([[1, 0], [0, 1]]))
    cache = ConstraintCache(board)
    assert cache.row_targets() == [1, 2]
    assert cache.column_targets() == [1, 2]


def test_targets_use_orthogonal_weights():
    # Row 0: columns 1 and 2 -> 2 + 3; column 2: rows 0 and 2 -> 1 + 3
    board = Board.from_json(mask_snapshot([
        [0, 1, 1],
        [0, 0, 0],
        [1, 0, 1],
    ]))
    cache = ConstraintCache(board)
    assert cache.row_targets() == [5, 0, 4]
    assert cache.column_targets() == [3, 1, 4]
    assert cache.highest() == 5
    assert cache.highest_for(False) == 4


def test_targets_ignore_player_status():
    board = Board.from_json(mask_snapshot([[1, 0], [0, 0]], active={(1, 1)}))
    cache = ConstraintCache(board)
    assert cache.row_targets() == [1, 0]
    assert line_sum(board, True, 1) == 2


def test_rebuild_is_idempotent():
    board = Board.from_json(mask_snapshot([[0, 1], [1, 1]]))
    cache = ConstraintCache(board)
    before = (cache.row_targets(), cache.column_targets())
    cache.rebuild(board)
    cache.rebuild(board)
    assert (cache.row_targets(), cache.column_targets()) == before


def test_empty_board_has_no_highest_constraint():
    cache = ConstraintCache(Board({}))
    assert cache.highest() is None
    assert cache.all_satisfied(Board({}), True)


def test_columns_are_checked_against_column_targets():
    """Row 0 target is 3 and column 0 target is 1; a mixed-up check would fail here."""
    board = Board.from_json(mask_snapshot([[1, 1], [0, 0]], active={(0, 0), (0, 1)}))
    cache = ConstraintCache(board)
    assert cache.all_satisfied(board, True)
    assert cache.all_satisfied(board, False)
