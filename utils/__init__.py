"""
Kakurasu Rules Engine - Utilities Package
Snapshot field-key helpers and JSON storage (``utils.storage``).
"""
from .keys import FIELD_KEY_SEPARATOR, field_key, parse_field_key

__all__ = ['FIELD_KEY_SEPARATOR', 'field_key', 'parse_field_key']
