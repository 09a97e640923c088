"""
Field key helpers for the snapshot format ("<row>-<column>").
"""
from typing import Tuple

FIELD_KEY_SEPARATOR = "-"


def field_key(row: int, column: int) -> str:
    """Convert a coordinate to the string key used in JSON snapshots."""
    return f"{row}{FIELD_KEY_SEPARATOR}{column}"


def parse_field_key(key: str) -> Tuple[int, int]:
    """Convert a snapshot key back to (row, column), row first as written."""
    parts = key.split(FIELD_KEY_SEPARATOR)
    if len(parts) != 2:
        raise ValueError(f"Malformed field key: {key!r}")
    try:
        row, column = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Malformed field key: {key!r}") from None
    return row, column
