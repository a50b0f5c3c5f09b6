from __future__ import annotations

from typing import Optional


class SqlIndentError(Exception):
    """Base class for errors raised at the sqlindent boundary (options, CLI input)."""
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{super().__str__()} [{self.path}]"
        return super().__str__()


class ConfigError(SqlIndentError):
    """Formatting options that do not validate, e.g. an unknown style name."""
    pass


class InputError(SqlIndentError):
    """Input the command line cannot format: blank text or an unreadable path."""
    pass
