"""
Game - Kakurasu game controller.

Every active field adds its 1-based column index to its row sum and its
1-based row index to its column sum. The game is won when every row and
column sum equals the target derived from the hidden solution mask.

Player moves are the only way gameplay changes field status; each move goes
through the move history so it can be undone and redone.
"""
import copy
import logging
import random
from typing import Any, Dict, List, Optional

from core.board import Board
from core.commands import MoveHistory
from core.constraints import ConstraintCache, get_weight, line_sum
from core.field import Field
from core.generator import LevelConfig, LevelGenerator
from core.types import FieldStatus, Move

logger = logging.getLogger(__name__)


class Game:
    """
    A loaded Kakurasu game.

    Attributes:
        board: Coordinate index of fields
        history: Undo/redo move history
        constraints: Row/column targets, built once at construction
    """

    def __init__(self, board: Board, history: Optional[MoveHistory] = None):
        self.board: Board = board
        self.history: MoveHistory = history if history is not None else MoveHistory()
        for move in self.history.moves:
            if not board.contains(move.row, move.column):
                raise ValueError(f"Move outside the grid: ({move.row}, {move.column})")
        self.constraints: ConstraintCache = ConstraintCache(board)

    @classmethod
    def new_level(cls, config: Optional[LevelConfig] = None,
                  rng: Optional[random.Random] = None) -> 'Game':
        """Start a game on a freshly generated level."""
        return cls(LevelGenerator(rng).generate_board(config))

    # =============================================================================
    # SNAPSHOT
    # =============================================================================

    @classmethod
    def from_json(cls, state: Optional[Dict[str, Any]] = None,
                  rng: Optional[random.Random] = None) -> 'Game':
        """
        Load a game from a snapshot as produced by ``to_json``.

        If the snapshot has no fields, a default level is generated.

        Raises:
            ValueError: If the snapshot is malformed
        """
        state = state or {}
        fields = state.get("fields")
        if fields:
            board = Board.from_json(fields)
        else:
            logger.debug("Snapshot has no fields, generating default level")
            board = LevelGenerator(rng).generate_board()
        return cls(board, MoveHistory.from_json(state))

    def to_json(self) -> Dict[str, Any]:
        """Export the game as a snapshot usable with ``from_json``."""
        state = self.history.to_json()
        state["fields"] = self.board.to_json()
        return copy.deepcopy(state)

    # =============================================================================
    # MOVES
    # =============================================================================

    def set_field_active(self, row: int, column: int) -> bool:
        return self._set_field_status(row, column, FieldStatus.ACTIVE)

    def set_field_flagged(self, row: int, column: int) -> bool:
        return self._set_field_status(row, column, FieldStatus.FLAGGED)

    def set_field_clear(self, row: int, column: int) -> bool:
        return self._set_field_status(row, column, FieldStatus.CLEAR)

    def change_active_status(self, row: int, column: int) -> bool:
        """Toggle a field between clear and active; a flagged field is cleared."""
        if self.get_field(row, column).is_clear():
            return self.set_field_active(row, column)
        return self.set_field_clear(row, column)

    def change_flag_status(self, row: int, column: int) -> bool:
        """Toggle a field between clear and flagged; an active field is cleared."""
        if self.get_field(row, column).is_clear():
            return self.set_field_flagged(row, column)
        return self.set_field_clear(row, column)

    def _set_field_status(self, row: int, column: int, status: FieldStatus) -> bool:
        field = self.get_field(row, column)
        move = Move(row, column, field.get_status(), status)
        return self.history.execute_move(move, self.board)

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    def undo_move(self) -> bool:
        return self.history.undo(self.board)

    def redo_move(self) -> bool:
        return self.history.redo(self.board)

    def amount_moves(self) -> int:
        """Number of recorded moves, including undone ones that can still be redone."""
        return len(self.history)

    def get_move(self, index: int) -> Optional[Move]:
        return self.history.get_move(index)

    def get_field_of_current_move(self) -> Optional[Field]:
        move = self.history.current_move()
        if move is None:
            return None
        return self.get_field(move.row, move.column)

    def reset_game(self) -> None:
        """Clear every non-read-only field and drop the move history."""
        for placed in self.board:
            placed.field.reset()
        self.history.clear_history()
        logger.debug("Game reset")

    # =============================================================================
    # FIELDS
    # =============================================================================

    def get_field(self, row: int, column: int) -> Field:
        return self.board.get(row, column)

    def get_fields_in_row(self, row: int) -> List[Field]:
        return self.board.fields_in_row(row)

    def get_fields_in_column(self, column: int) -> List[Field]:
        return self.board.fields_in_column(column)

    def amount_rows(self) -> int:
        return self.board.amount_rows()

    def amount_columns(self) -> int:
        return self.board.amount_columns()

    # =============================================================================
    # CONSTRAINTS
    # =============================================================================

    @staticmethod
    def get_weight(index: int) -> int:
        return get_weight(index)

    def get_constraint_value_for_row(self, row: int) -> int:
        return self.constraints.get_value(True, row)

    def get_constraint_value_for_column(self, column: int) -> int:
        return self.constraints.get_value(False, column)

    def get_highest_constraint_value(self) -> Optional[int]:
        return self.constraints.highest()

    def get_highest_constraint_for_row_column(self, for_row: bool) -> Optional[int]:
        return self.constraints.highest_for(for_row)

    def get_row_sum(self, row: int) -> int:
        """Live weighted sum of active fields in a row."""
        return line_sum(self.board, True, row)

    def get_column_sum(self, column: int) -> int:
        return line_sum(self.board, False, column)

    def is_row_constraint_satisfied(self, row: int) -> bool:
        return self.constraints.is_satisfied(self.board, True, row)

    def is_column_constraint_satisfied(self, column: int) -> bool:
        return self.constraints.is_satisfied(self.board, False, column)

    def is_game_won(self) -> bool:
        """True when every row and every column matches its own target."""
        if not self.constraints.all_satisfied(self.board, True):
            return False
        return self.constraints.all_satisfied(self.board, False)
