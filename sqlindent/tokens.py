from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from .keywords import KeywordKind


class TokenKind(Enum):
    KEYWORD = auto()
    IDENTIFIER = auto()
    QUOTED_IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()
    OPERATOR = auto()
    COMMA = auto()
    SEMICOLON = auto()
    DOT = auto()
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()
    WHITESPACE = auto()
    TEMPLATE_VARIABLE = auto()


VALUE_KINDS = frozenset(
    {
        TokenKind.IDENTIFIER,
        TokenKind.QUOTED_IDENTIFIER,
        TokenKind.STRING,
        TokenKind.NUMBER,
        TokenKind.OPERATOR,
        TokenKind.TEMPLATE_VARIABLE,
    }
)

# Operators that bind tightly to both neighbours (casts and JSON access).
TIGHT_OPERATORS = frozenset({"::", "->", "->>"})


@dataclass(frozen=True)
class Token:
    """A lexeme as offsets into the shared source text.

    ``start``/``end`` cover the full span including delimiters, so joining the
    spans of every token reproduces the input. ``content_start``/``content_end``
    cover the payload without delimiters (comment markers, quotes, braces).
    """

    kind: TokenKind
    source: str = field(repr=False, compare=False)
    start: int
    end: int
    content_start: int
    content_end: int
    keyword: Optional[KeywordKind] = None

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    @property
    def value(self) -> str:
        return self.source[self.content_start:self.content_end]

    def is_operator(self, *symbols: str) -> bool:
        return self.kind is TokenKind.OPERATOR and self.text in symbols

    def is_keyword(self, *kinds: KeywordKind) -> bool:
        if self.kind is not TokenKind.KEYWORD:
            return False
        return not kinds or self.keyword in kinds
