"""
Move history for undo/redo in the Kakurasu rules engine.

The cursor points at the last move considered applied, or is None when no
move is committed (empty history, or everything undone). Index 0 is a valid
committed position, so the cursor is always compared against None and never
tested for truthiness.
"""
import logging
from typing import Any, Dict, List, Optional

from core.board import Board
from core.types import Move, parse_index

logger = logging.getLogger(__name__)


def apply_move(board: Board, move: Move) -> bool:
    """Set the move's target field to its next status. Returns False if the field is read-only."""
    field = board.get(move.row, move.column)
    if field.is_read_only():
        return False
    field.set_status(move.next_status)
    return True


class MoveHistory:
    """Manages recorded moves and the cursor for undo/redo operations."""

    def __init__(self, moves: Optional[List[Move]] = None, current_index: Optional[int] = None):
        self.moves: List[Move] = list(moves or [])
        self.current_index: Optional[int] = current_index
        if current_index is not None and not 0 <= current_index < len(self.moves):
            raise ValueError(
                f"Move index {current_index} out of range for history of {len(self.moves)} move(s)"
            )

    # =============================================================================
    # CURSOR ARITHMETIC
    # =============================================================================

    def _next_index(self, diff: int) -> Optional[int]:
        """Cursor position after moving by diff; None when it drops below 0."""
        if self.current_index is None:
            # Entering from the empty position: +1 lands on index 0
            return diff - 1 if diff > 0 else None
        index = self.current_index + diff
        return index if index >= 0 else None

    def get_move(self, index: Optional[int]) -> Optional[Move]:
        """Move at a history index, or None for None/negative/past-the-end indices."""
        if index is None or not 0 <= index < len(self.moves):
            return None
        return self.moves[index]

    def current_move(self) -> Optional[Move]:
        return self.get_move(self.current_index)

    # =============================================================================
    # TRANSITIONS
    # =============================================================================

    def execute_move(self, move: Move, board: Board) -> bool:
        """Apply a move and record it, discarding any redoable moves."""
        success = apply_move(board, move)

        if success:
            # Keep everything up to and including the cursor
            keep = 0 if self.current_index is None else self.current_index + 1
            if keep < len(self.moves):
                logger.debug("Discarding %d redoable move(s)", len(self.moves) - keep)
                del self.moves[keep:]

            self.moves.append(move)
            self.current_index = self._next_index(1)

        return success

    def can_undo(self) -> bool:
        """Check if undo is possible."""
        return self.current_move() is not None

    def can_redo(self) -> bool:
        """Check if redo is possible."""
        return self.get_move(self._next_index(1)) is not None

    def undo(self, board: Board) -> bool:
        """Step back over the current move and apply its inverse."""
        if not self.can_undo():
            return False

        move = self.current_move().inverted()
        self.current_index = self._next_index(-1)
        return apply_move(board, move)

    def redo(self, board: Board) -> bool:
        """
        Step forward and re-apply the next move.

        The cursor advances even if the field has become read-only in the
        meantime; the return value reports whether the status was applied.
        """
        if not self.can_redo():
            return False

        self.current_index = self._next_index(1)
        return apply_move(board, self.current_move())

    def clear_history(self) -> None:
        """Clear all moves and return to the empty position."""
        self.moves = []
        self.current_index = None

    # =============================================================================
    # STATUS
    # =============================================================================

    def __len__(self) -> int:
        return len(self.moves)

    def get_undo_description(self) -> Optional[str]:
        """Get description of the move that would be undone."""
        if not self.can_undo():
            return None
        return self.current_move().describe()

    def get_redo_description(self) -> Optional[str]:
        """Get description of the move that would be redone."""
        if not self.can_redo():
            return None
        return self.get_move(self._next_index(1)).describe()

    def get_history_info(self) -> Dict[str, Any]:
        """Get information about current history state."""
        return {
            "total_moves": len(self.moves),
            "current_index": self.current_index,
            "can_undo": self.can_undo(),
            "can_redo": self.can_redo(),
            "undo_description": self.get_undo_description(),
            "redo_description": self.get_redo_description(),
        }

    # =============================================================================
    # SNAPSHOT
    # =============================================================================

    def to_json(self) -> Dict[str, Any]:
        return {
            "moveHistory": [move.to_json() for move in self.moves],
            "currentMoveIndex": self.current_index,
        }

    @classmethod
    def from_json(cls, state: Dict[str, Any]) -> 'MoveHistory':
        """
        Load history from a snapshot.

        An explicit null index is the empty position. When the key is absent
        and moves exist, the history resumes at the last move.
        """
        moves = [Move.from_json(m) for m in state.get("moveHistory") or []]
        if "currentMoveIndex" in state:
            raw_index = state["currentMoveIndex"]
        else:
            raw_index = len(moves) - 1 if moves else None

        current_index = None
        if raw_index is not None:
            current_index = parse_index(raw_index, "currentMoveIndex")
        return cls(moves, current_index)
