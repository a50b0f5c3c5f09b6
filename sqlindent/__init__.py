from __future__ import annotations

__version__ = "0.1.0"

from .config import DEFAULT_STYLE, FormatOptions, FormatStyle, load_options
from .errors import ConfigError, InputError, SqlIndentError
from .fmt import format_sql
from .lexer import Lexer, tokenize

__all__ = [
    "__version__",
    "DEFAULT_STYLE",
    "ConfigError",
    "FormatOptions",
    "FormatStyle",
    "InputError",
    "Lexer",
    "SqlIndentError",
    "format_sql",
    "load_options",
    "tokenize",
]
