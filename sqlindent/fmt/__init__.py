from __future__ import annotations

from .formatter import ENGINES, format_sql, format_tokens

__all__ = ["ENGINES", "format_sql", "format_tokens"]
