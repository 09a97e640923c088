"""
Row and column constraints for Kakurasu.

Targets are derived once from the hidden solution mask when a board is
loaded; live sums are recomputed from the current field statuses on demand.
"""
from typing import Dict, List, Optional

from core.board import Board, PlacedField


def get_weight(index: int) -> int:
    """1-based positional weight of a row/column index."""
    return index + 1


def weight_in_line(for_row: bool, placed: PlacedField) -> int:
    """Weight a field contributes to its row (its column index) or column (its row index)."""
    return get_weight(placed.column if for_row else placed.row)


def line_sum(board: Board, for_row: bool, index: int) -> int:
    """Live weighted sum of active fields in a row/column."""
    return sum(weight_in_line(for_row, p) for p in board.placed_in_line(for_row, index)
               if p.field.is_active())


def solution_sum(board: Board, for_row: bool, index: int) -> int:
    """Weighted sum of solution fields in a row/column."""
    return sum(weight_in_line(for_row, p) for p in board.placed_in_line(for_row, index)
               if p.field.is_solution())


class ConstraintCache:
    """
    Target sums per row and column.

    Built from a board's solution mask; gameplay never invalidates it since
    the mask is fixed after generation.
    """

    def __init__(self, board: Board):
        self.rows: Dict[int, int] = {}
        self.columns: Dict[int, int] = {}
        self.rebuild(board)

    def rebuild(self, board: Board) -> None:
        """Recompute all targets. Idempotent for an unchanged solution mask."""
        self.rows = {r: solution_sum(board, True, r) for r in range(board.amount_rows())}
        self.columns = {c: solution_sum(board, False, c) for c in range(board.amount_columns())}

    def _targets(self, for_row: bool) -> Dict[int, int]:
        return self.rows if for_row else self.columns

    def get_value(self, for_row: bool, index: int) -> int:
        targets = self._targets(for_row)
        assert index in targets, f"{'row' if for_row else 'column'} {index} has no constraint"
        return targets[index]

    def row_targets(self) -> List[int]:
        return [self.rows[r] for r in sorted(self.rows)]

    def column_targets(self) -> List[int]:
        return [self.columns[c] for c in sorted(self.columns)]

    def highest_for(self, for_row: bool) -> Optional[int]:
        """Highest target of all rows or all columns, None if there are none."""
        targets = self._targets(for_row)
        return max(targets.values()) if targets else None

    def highest(self) -> Optional[int]:
        """Highest target over rows and columns, used for display padding."""
        values = [v for v in (self.highest_for(True), self.highest_for(False)) if v is not None]
        return max(values) if values else None

    def is_satisfied(self, board: Board, for_row: bool, index: int) -> bool:
        return self.get_value(for_row, index) == line_sum(board, for_row, index)

    def all_satisfied(self, board: Board, for_row: bool) -> bool:
        """Check every row (for_row=True) or every column against its own target."""
        length = board.amount_rows() if for_row else board.amount_columns()
        return all(self.is_satisfied(board, for_row, i) for i in range(length))
