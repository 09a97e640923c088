"""
Level generator for Kakurasu.

Produces a hidden solution mask for a rows x columns grid. Each row gets a
random number of solution cells drawn from the column bounds and each
column gets a random number drawn from the row bounds; the mask is the union
of both passes, so achieved counts can exceed either bound.
"""
import logging
import random
from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from core.board import Board

logger = logging.getLogger(__name__)

DEFAULT_ROWS = 5
DEFAULT_MINIMUM = 1


def _clamp(value: int, upper: int) -> int:
    return max(0, min(value, upper))


@dataclass(frozen=True)
class LevelConfig:
    """
    Generator configuration. Unset values are resolved by ``resolved()``.

    Attributes:
        rows: Number of rows (default 5, also used for 0 or less)
        columns: Number of columns (default: rows, also used for 0 or less)
        amount_minimum_in_row: Fewest solution cells per column pass, in [0, rows] (default 1)
        amount_maximum_in_row: Most solution cells per column pass, in [0, rows] (default rows // 2)
        amount_minimum_in_column: Fewest solution cells per row pass, in [0, columns] (default 1)
        amount_maximum_in_column: Most solution cells per row pass, in [0, columns] (default columns // 2)
    """
    rows: Optional[int] = None
    columns: Optional[int] = None
    amount_minimum_in_row: Optional[int] = None
    amount_maximum_in_row: Optional[int] = None
    amount_minimum_in_column: Optional[int] = None
    amount_maximum_in_column: Optional[int] = None

    def resolved(self) -> 'LevelConfig':
        """
        Fill in defaults and clamp bounds into the grid.

        A maximum below its minimum is raised to the minimum. Rows or columns
        that are unset or not positive fall back to their defaults.
        """
        rows = self.rows if self.rows and self.rows > 0 else DEFAULT_ROWS
        columns = self.columns if self.columns and self.columns > 0 else rows

        min_row, max_row = self._bounds(self.amount_minimum_in_row, self.amount_maximum_in_row, rows)
        min_column, max_column = self._bounds(
            self.amount_minimum_in_column, self.amount_maximum_in_column, columns
        )
        return replace(
            self,
            rows=rows,
            columns=columns,
            amount_minimum_in_row=min_row,
            amount_maximum_in_row=max_row,
            amount_minimum_in_column=min_column,
            amount_maximum_in_column=max_column,
        )

    @staticmethod
    def _bounds(minimum: Optional[int], maximum: Optional[int], length: int):
        minimum = _clamp(DEFAULT_MINIMUM if minimum is None else minimum, length)
        maximum = _clamp(length // 2 if maximum is None else maximum, length)
        return minimum, max(maximum, minimum)


class LevelGenerator:
    """Random solution-mask generator."""

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source; defaults to the module-level ``random``
        """
        self.rng = rng if rng is not None else random

    def generate_board(self, config: Optional[LevelConfig] = None) -> Board:
        """Generate a board whose fields carry a fresh solution mask."""
        config = (config or LevelConfig()).resolved()
        board = Board.empty(config.rows, config.columns)

        self._mark_solution_fields(board, True, config)
        self._mark_solution_fields(board, False, config)

        logger.debug(
            "Generated %dx%d level with %d solution field(s)",
            config.rows, config.columns, sum(1 for p in board if p.field.is_solution()),
        )
        return board

    def generate_level(self, config: Optional[LevelConfig] = None) -> Dict[str, Dict]:
        """Generate a level as the ``fields`` section of a game snapshot."""
        return self.generate_board(config).to_json()

    def _mark_solution_fields(self, board: Board, for_row: bool, config: LevelConfig) -> None:
        """One pass over rows (for_row=True) or columns, marking solution cells across it."""
        outer_length = config.rows if for_row else config.columns
        for outer_index in range(outer_length):
            if for_row:
                indexes = self.select_random_indexes(
                    config.columns, config.amount_minimum_in_column, config.amount_maximum_in_column
                )
            else:
                indexes = self.select_random_indexes(
                    config.rows, config.amount_minimum_in_row, config.amount_maximum_in_row
                )
            for index in indexes:
                row, column = (outer_index, index) if for_row else (index, outer_index)
                board.get(row, column).set_is_solution(True)

    def select_random_indexes(self, length: int, minimum: int, maximum: int) -> List[int]:
        """Pick a uniform count in [minimum, maximum] and that many distinct indexes of range(length)."""
        amount = self.rng.randint(minimum, maximum)
        indexes = list(range(length))
        self.rng.shuffle(indexes)
        return indexes[:amount]


def generate_level(config: Optional[LevelConfig] = None,
                   rng: Optional[random.Random] = None) -> Dict[str, Dict]:
    """Shortcut for ``LevelGenerator(rng).generate_level(config)``."""
    return LevelGenerator(rng).generate_level(config)
