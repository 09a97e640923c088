"""
Board - coordinate index of Kakurasu fields.

Maps (row, column) to a Field and derives the grid extents once from the
set of populated coordinates.
"""
import logging
from typing import Dict, Iterator, List, NamedTuple, Tuple

from core.field import Field
from utils.keys import field_key, parse_field_key

logger = logging.getLogger(__name__)


class PlacedField(NamedTuple):
    """A field together with the coordinate it was fetched under."""
    row: int
    column: int
    field: Field


class Board:
    """
    Coordinate index of fields.

    Attributes:
        fields: Mapping of (row, column) to Field
        rows: Number of rows, max(row)+1 over all keys (0 for an empty board)
        columns: Number of columns, max(column)+1 over all keys
    """

    def __init__(self, fields: Dict[Tuple[int, int], Field]):
        self.fields: Dict[Tuple[int, int], Field] = dict(fields)
        self.rows: int = 0
        self.columns: int = 0
        self._load_extents()

    def _load_extents(self) -> None:
        """Derive rows/columns from the key set and check the grid is complete."""
        if self.fields:
            self.rows = max(row for row, _ in self.fields) + 1
            self.columns = max(column for _, column in self.fields) + 1
        else:
            self.rows = 0
            self.columns = 0

        missing = self.rows * self.columns - len(self.fields)
        if missing:
            raise ValueError(
                f"Board is missing {missing} field(s) for a {self.rows}x{self.columns} grid"
            )

    @classmethod
    def empty(cls, rows: int, columns: int) -> 'Board':
        """All-clear, non-solution grid of rows x columns fields."""
        if rows <= 0 or columns <= 0:
            raise ValueError(f"Grid dimensions must be positive: {rows}x{columns}")
        return cls({(row, column): Field() for row in range(rows) for column in range(columns)})

    # =============================================================================
    # QUERIES
    # =============================================================================

    def amount_rows(self) -> int:
        return self.rows

    def amount_columns(self) -> int:
        return self.columns

    def contains(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def get(self, row: int, column: int) -> Field:
        """
        Get the field at a coordinate.

        Raises:
            AssertionError: If the coordinate is outside the loaded grid
        """
        assert 0 <= row < self.rows, f"row {row} out of range [0, {self.rows})"
        assert 0 <= column < self.columns, f"column {column} out of range [0, {self.columns})"
        return self.fields[(row, column)]

    def placed_in_line(self, for_row: bool, index: int) -> List[PlacedField]:
        """Fields of one row (for_row=True) or column, ordered by the varying index."""
        length = self.columns if for_row else self.rows
        placed = []
        for i in range(length):
            row, column = (index, i) if for_row else (i, index)
            placed.append(PlacedField(row, column, self.get(row, column)))
        return placed

    def fields_in_row(self, row: int) -> List[Field]:
        return [p.field for p in self.placed_in_line(True, row)]

    def fields_in_column(self, column: int) -> List[Field]:
        return [p.field for p in self.placed_in_line(False, column)]

    def __iter__(self) -> Iterator[PlacedField]:
        """Iterate all fields in row-major order."""
        for row in range(self.rows):
            for column in range(self.columns):
                yield PlacedField(row, column, self.fields[(row, column)])

    # =============================================================================
    # SNAPSHOT
    # =============================================================================

    def to_json(self) -> Dict[str, Dict]:
        return {field_key(p.row, p.column): p.field.to_json() for p in self}

    @classmethod
    def from_json(cls, data: Dict[str, Dict]) -> 'Board':
        fields: Dict[Tuple[int, int], Field] = {}
        for key, field_data in data.items():
            coordinate = parse_field_key(key)
            if coordinate in fields:
                raise ValueError(f"Duplicate field for coordinate {coordinate} (key {key!r})")
            fields[coordinate] = Field.from_json(field_data)
        board = cls(fields)
        logger.debug("Loaded board %dx%d", board.rows, board.columns)
        return board
