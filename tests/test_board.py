"""
Field and board index:
- Status predicates are exclusive
- Reset leaves read-only fields alone
- Grid extents derive from the key set
- Out-of-range access fails fast
"""

import pytest

from core.board import Board
from core.field import Field
from core.types import FieldStatus
from conftest import mask_snapshot


@pytest.mark.parametrize("status", list(FieldStatus))
def test_status_predicates_are_exclusive(status):
    field = Field(status)
    flags = [field.is_clear(), field.is_active(), field.is_flagged()]
    assert flags.count(True) == 1
    assert field.get_status() is status


def test_reset_skips_read_only_field():
    editable = Field(FieldStatus.ACTIVE)
    given = Field(FieldStatus.FLAGGED, read_only=True)

    editable.reset()
    given.reset()

    assert editable.is_clear()
    assert given.is_flagged(), "read-only field must keep its status"


def test_field_json_only_writes_set_flags():
    assert Field().to_json() == {"status": 0}
    data = Field(FieldStatus.ACTIVE, read_only=True, solution=True).to_json()
    assert data == {"status": 1, "readOnly": True, "solution": True}

    field = Field.from_json(data)
    assert field.is_active() and field.is_read_only() and field.is_solution()


def test_field_rejects_unknown_status_code():
    with pytest.raises(ValueError):
        Field.from_json({"status": 7})


def test_extents_from_keys():
    board = Board.from_json(mask_snapshot([[0, 0, 0], [0, 0, 0]]))
    assert board.amount_rows() == 2
    assert board.amount_columns() == 3


def test_key_order_is_row_then_column():
    """A tall board must not come out transposed."""
    board = Board.from_json(mask_snapshot([[1], [0], [0], [0]]))
    assert (board.amount_rows(), board.amount_columns()) == (4, 1)
    assert board.get(0, 0).is_solution()
    assert not board.get(3, 0).is_solution()


def test_empty_board_has_no_extent():
    board = Board({})
    assert board.amount_rows() == 0
    assert board.amount_columns() == 0


def test_fields_in_row_and_column_are_ordered():
    board = Board.from_json(mask_snapshot([[1, 0], [0, 1]]))
    assert [f.is_solution() for f in board.fields_in_row(0)] == [True, False]
    assert [f.is_solution() for f in board.fields_in_column(1)] == [False, True]

    placed = board.placed_in_line(False, 1)
    assert [(p.row, p.column) for p in placed] == [(0, 1), (1, 1)]


def test_out_of_range_access_asserts():
    board = Board.empty(2, 2)
    with pytest.raises(AssertionError):
        board.get(2, 0)
    with pytest.raises(AssertionError):
        board.get(0, -1)


def test_incomplete_grid_is_rejected():
    fields = mask_snapshot([[0, 0], [0, 0]])
    del fields["1-1"]
    with pytest.raises(ValueError):
        Board.from_json(fields)


def test_malformed_key_is_rejected():
    with pytest.raises(ValueError):
        Board.from_json({"0_0": {"status": 0}})


def test_empty_board_requires_positive_dimensions():
    with pytest.raises(ValueError):
        Board.empty(0, 3)


@pytest.mark.parametrize("code", [1.5, True, "1", None, 3, -1])
def test_field_rejects_non_integer_status_codes(code):
    with pytest.raises(ValueError):
        Field.from_json({"status": code})


@pytest.mark.parametrize("entry", [1, None, "clear", [0]])
def test_non_dict_field_entry_is_rejected(entry):
    with pytest.raises(ValueError):
        Board.from_json({"0-0": entry})


@pytest.mark.parametrize("name", ["readOnly", "solution"])
@pytest.mark.parametrize("value", ["false", 1, 0, None])
def test_field_flags_must_be_booleans(name, value):
    with pytest.raises(ValueError):
        Field.from_json({"status": 0, name: value})
