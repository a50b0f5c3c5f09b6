from __future__ import annotations

from .config import FormatOptions, FormatStyle
from .fmt import format_sql


def format_sql_text(text: str, uppercase: bool = True, style: str = "basic") -> str:
    """Flat entry point for embedding hosts: plain arguments in, text out.

    Unknown style names fall back to the default style instead of raising.
    """
    options = FormatOptions(uppercase=uppercase, style=FormatStyle.from_name(style))
    return format_sql(text, options)
