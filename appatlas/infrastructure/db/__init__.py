from .connection import DatabaseError, apply_pragmas, get_connection
from .schema import ensure_schema

__all__ = [
    "DatabaseError",
    "apply_pragmas",
    "ensure_schema",
    "get_connection",
]
