"""
Shared types for the Kakurasu rules engine.
Separated to avoid circular imports between modules.
"""
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any, Dict


def parse_index(value: Any, name: str) -> int:
    """Read a snapshot integer; floats, strings and booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Malformed {name}: {value!r}")
    return value


class FieldStatus(IntEnum):
    """Player-visible states of a field. Values are the snapshot status codes."""
    CLEAR = 0
    ACTIVE = 1
    FLAGGED = 2

    @classmethod
    def from_code(cls, code: Any) -> 'FieldStatus':
        """Parse a snapshot status code, raising ValueError for unknown codes."""
        if isinstance(code, bool) or not isinstance(code, int):
            raise ValueError(f"Unknown field status code: {code!r}")
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unknown field status code: {code!r}") from None


@dataclass(frozen=True)
class Move:
    """A recorded, reversible status change of one field."""
    row: int
    column: int
    previous_status: FieldStatus
    next_status: FieldStatus

    def inverted(self) -> 'Move':
        """Move that reverts this one (previous/next swapped)."""
        return replace(self, previous_status=self.next_status, next_status=self.previous_status)

    def describe(self) -> str:
        return (f"Set field ({self.row}, {self.column}) "
                f"{self.previous_status.name.lower()} → {self.next_status.name.lower()}")

    def to_json(self) -> Dict[str, int]:
        return {
            "row": self.row,
            "column": self.column,
            "previousStatus": int(self.previous_status),
            "nextStatus": int(self.next_status),
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Move':
        if not isinstance(data, dict):
            raise ValueError(f"Malformed move entry: {data!r}")
        row = parse_index(data.get("row"), "move row")
        column = parse_index(data.get("column"), "move column")
        return cls(
            row=row,
            column=column,
            previous_status=FieldStatus.from_code(data.get("previousStatus")),
            next_status=FieldStatus.from_code(data.get("nextStatus")),
        )
