from .manager import ensure_schema

__all__ = ["ensure_schema"]
