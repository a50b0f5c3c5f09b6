from __future__ import annotations

from typing import Iterable, Optional

from ..config import FormatOptions, StylePolicy
from ..keywords import KeywordKind
from ..tokens import TIGHT_OPERATORS, VALUE_KINDS, Token, TokenKind
from .state import FormatterState, Pending
from .stream import TokenStream


def needs_space_before(token: Token, prev: Optional[Token]) -> bool:
    """Generic inter-token spacing when no layout rule applies."""
    if prev is None:
        return False
    if token.is_operator(*TIGHT_OPERATORS) or prev.is_operator(*TIGHT_OPERATORS):
        return False
    if prev.kind in (TokenKind.OPEN_PAREN, TokenKind.DOT):
        return False
    if token.kind in (TokenKind.CLOSE_PAREN, TokenKind.DOT, TokenKind.COMMA, TokenKind.SEMICOLON):
        return False
    return True


def opens_subquery(next_token: Optional[Token]) -> bool:
    return (
        next_token is not None
        and next_token.kind is TokenKind.KEYWORD
        and next_token.keyword is not None
        and next_token.keyword.is_clause_starter()
    )


class LayoutEngine:
    """Shared single-pass driver; subclasses decide where lines break.

    One engine formats one document: build it, call :meth:`run` once.
    """

    def __init__(self, policy: StylePolicy, options: FormatOptions) -> None:
        self.policy = policy
        self.state = FormatterState(uppercase=options.uppercase)
        self.pending = Pending.NONE

    def run(self, tokens: Iterable[Token]) -> str:
        stream = TokenStream(tokens)
        prev: Optional[Token] = None
        for token in stream:
            kind = token.kind
            if kind is TokenKind.KEYWORD:
                if prev is not None and prev.kind is TokenKind.DOT:
                    self.format_value(token.keyword.value.lower(), token, prev)
                else:
                    self.format_keyword(token.keyword, token, prev)
            elif kind is TokenKind.COMMA:
                self.format_comma()
            elif kind is TokenKind.OPEN_PAREN:
                self.format_open_paren(token, stream.peek(), prev)
            elif kind is TokenKind.CLOSE_PAREN:
                self.format_close_paren()
            elif kind is TokenKind.SEMICOLON:
                self.format_semicolon()
            elif kind is TokenKind.LINE_COMMENT:
                self._write_comment(token, prev)
                self.state.comment_open = True
            elif kind is TokenKind.BLOCK_COMMENT:
                self._write_comment(token, prev)
            elif kind is TokenKind.DOT:
                self.emit(".")
                self.on_dot()
            elif kind in VALUE_KINDS:
                self.format_value(token.text, token, prev)
            prev = token
        return self.finalize()

    def _write_comment(self, token: Token, prev: Optional[Token]) -> None:
        state = self.state
        space = not state.first_token and state.out.last_char() not in (" ", "\n")
        if token.kind is TokenKind.BLOCK_COMMENT:
            space = space and needs_space_before(token, prev)
        self.emit(token.text, space=space)
        self.on_comment()

    # -- output primitives ------------------------------------------------

    def emit(self, text: str, space: bool = False) -> None:
        state = self.state
        if state.comment_open:
            self.break_line(self.continuation_width())
            space = False
        state.out.write(" " + text if space else text)
        state.first_token = False

    def break_line(self, width: int) -> None:
        self.state.comment_open = False
        self.state.out.newline(width)

    def emit_spaced(self, text: str, token: Token, prev: Optional[Token]) -> None:
        self.emit(text, space=needs_space_before(token, prev))

    def finalize(self) -> str:
        return self.state.out.getvalue()

    # -- layout hooks -----------------------------------------------------

    def continuation_width(self) -> int:
        """Column where a token lands when forced off a commented line."""
        return 0

    def on_comment(self) -> None:
        self.pending = Pending.NONE

    def on_dot(self) -> None:
        self.pending = Pending.NONE

    def format_keyword(self, keyword: KeywordKind, token: Token, prev: Optional[Token]) -> None:
        raise NotImplementedError

    def format_comma(self) -> None:
        raise NotImplementedError

    def format_open_paren(self, token: Token, next_token: Optional[Token], prev: Optional[Token]) -> None:
        raise NotImplementedError

    def format_close_paren(self) -> None:
        raise NotImplementedError

    def format_semicolon(self) -> None:
        raise NotImplementedError

    def format_value(self, text: str, token: Token, prev: Optional[Token]) -> None:
        raise NotImplementedError
