"""
Field - a single grid cell with player status, read-only flag and hidden solution flag.
"""
from typing import Any, Dict

from core.types import FieldStatus


def _parse_flag(data: Dict[str, Any], name: str) -> bool:
    value = data.get(name, False)
    if not isinstance(value, bool):
        raise ValueError(f"Malformed {name} flag: {value!r}")
    return value


class Field:
    """
    One cell of a Kakurasu grid.

    The field knows nothing about its coordinates; the board supplies them
    alongside the field when needed (see ``core.board.PlacedField``).

    Attributes:
        status: Current player status (clear, active or flagged)
        read_only: Given cell whose status cannot be changed by moves
        solution: Part of the hidden solution mask
    """

    def __init__(self, status: FieldStatus = FieldStatus.CLEAR,
                 read_only: bool = False, solution: bool = False):
        self.status: FieldStatus = FieldStatus(status)
        self.read_only: bool = bool(read_only)
        self.solution: bool = bool(solution)

    # =============================================================================
    # STATUS
    # =============================================================================

    def set_status(self, status: FieldStatus) -> None:
        """Set the status unconditionally. Callers check ``is_read_only`` first."""
        self.status = FieldStatus(status)

    def get_status(self) -> FieldStatus:
        return self.status

    def is_clear(self) -> bool:
        return self.status == FieldStatus.CLEAR

    def is_active(self) -> bool:
        return self.status == FieldStatus.ACTIVE

    def is_flagged(self) -> bool:
        return self.status == FieldStatus.FLAGGED

    def reset(self) -> None:
        """Clear the field unless it is read-only."""
        if not self.read_only:
            self.status = FieldStatus.CLEAR

    # =============================================================================
    # FLAGS
    # =============================================================================

    def set_read_only(self, read_only: bool) -> None:
        self.read_only = bool(read_only)

    def is_read_only(self) -> bool:
        return self.read_only

    def set_is_solution(self, solution: bool) -> None:
        self.solution = bool(solution)

    def is_solution(self) -> bool:
        return self.solution

    # =============================================================================
    # SNAPSHOT
    # =============================================================================

    def to_json(self) -> Dict[str, Any]:
        """Export as snapshot entry; optional flags are only written when set."""
        data: Dict[str, Any] = {"status": int(self.status)}
        if self.read_only:
            data["readOnly"] = True
        if self.solution:
            data["solution"] = True
        return data

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Field':
        if not isinstance(data, dict):
            raise ValueError(f"Malformed field entry: {data!r}")
        return cls(
            status=FieldStatus.from_code(data.get("status", FieldStatus.CLEAR)),
            read_only=_parse_flag(data, "readOnly"),
            solution=_parse_flag(data, "solution"),
        )

    def __repr__(self) -> str:
        flags = "".join([
            "R" if self.read_only else "",
            "S" if self.solution else "",
        ])
        return f"Field({self.status.name}{', ' + flags if flags else ''})"
