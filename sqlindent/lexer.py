from __future__ import annotations

import string
from typing import Iterator, Optional

from .keywords import KEYWORD_CONTINUATIONS, KeywordKind, lookup_keyword
from .tokens import Token, TokenKind


_WHITESPACE = frozenset(" \t\n\r\f")
_DIGITS = frozenset(string.digits)
_WORD_START = frozenset(string.ascii_letters + "_")
_WORD_CHARS = _WORD_START | _DIGITS
_PUNCTUATION = {
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    ".": TokenKind.DOT,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
}
_OPERATOR_START = frozenset("<>!=|+-*/%&^~:")
# Longest first.
_MULTI_CHAR_OPERATORS = ("->>", "<>", "!=", "<=", ">=", "||", "::", "->")


# Non-ASCII letters and digits belong to words; keywords stay ASCII.
def _is_word_start(ch: str) -> bool:
    return ch in _WORD_START or (not ch.isascii() and ch.isalnum())


def _is_word_char(ch: str) -> bool:
    return ch in _WORD_CHARS or (not ch.isascii() and ch.isalnum())


class Lexer:
    """Single forward scan over SQL text.

    Never fails: anything unrecognized becomes a one-character OPERATOR and
    unterminated literals or comments run to the end of the input.
    """

    def __init__(self, sql: str) -> None:
        self._sql = sql
        self._pos = 0

    def __iter__(self) -> Iterator[Token]:
        while self._pos < len(self._sql):
            yield self._next_token()

    def tokenize(self) -> list[Token]:
        return list(self)

    def _peek(self, offset: int = 1) -> str:
        idx = self._pos + offset
        if idx < len(self._sql):
            return self._sql[idx]
        return ""

    def _token(
        self,
        kind: TokenKind,
        start: int,
        content_start: Optional[int] = None,
        content_end: Optional[int] = None,
        keyword: Optional[KeywordKind] = None,
    ) -> Token:
        return Token(
            kind=kind,
            source=self._sql,
            start=start,
            end=self._pos,
            content_start=start if content_start is None else content_start,
            content_end=self._pos if content_end is None else content_end,
            keyword=keyword,
        )

    def _next_token(self) -> Token:
        ch = self._sql[self._pos]
        nxt = self._peek()
        if ch in _WHITESPACE:
            return self._read_whitespace()
        if ch == "-" and nxt == "-":
            return self._read_line_comment()
        if ch == "/" and nxt == "*":
            return self._read_block_comment()
        if ch == "'":
            return self._read_string()
        if ch == '"':
            return self._read_quoted_identifier()
        if ch in _DIGITS or (ch == "." and nxt in _DIGITS):
            return self._read_number()
        if ch in _PUNCTUATION:
            return self._read_single(_PUNCTUATION[ch])
        if ch == "{" and nxt == "{":
            return self._read_template_variable()
        if ch in _OPERATOR_START:
            return self._read_operator()
        if _is_word_start(ch):
            return self._read_word()
        return self._read_single(TokenKind.OPERATOR)

    def _read_single(self, kind: TokenKind) -> Token:
        start = self._pos
        self._pos += 1
        return self._token(kind, start)

    def _read_whitespace(self) -> Token:
        start = self._pos
        while self._pos < len(self._sql) and self._sql[self._pos] in _WHITESPACE:
            self._pos += 1
        return self._token(TokenKind.WHITESPACE, start)

    def _read_line_comment(self) -> Token:
        start = self._pos
        end = self._sql.find("\n", start)
        self._pos = len(self._sql) if end == -1 else end
        return self._token(TokenKind.LINE_COMMENT, start, content_start=start + 2)

    def _read_block_comment(self) -> Token:
        start = self._pos
        close = self._sql.find("*/", start + 2)
        if close == -1:
            self._pos = len(self._sql)
            return self._token(TokenKind.BLOCK_COMMENT, start, content_start=start + 2)
        self._pos = close + 2
        return self._token(TokenKind.BLOCK_COMMENT, start, content_start=start + 2, content_end=close)

    def _read_string(self) -> Token:
        start = self._pos
        self._pos += 1
        while self._pos < len(self._sql):
            if self._sql[self._pos] == "'":
                if self._peek() == "'":
                    self._pos += 2
                    continue
                self._pos += 1
                return self._token(TokenKind.STRING, start, content_start=start + 1, content_end=self._pos - 1)
            self._pos += 1
        return self._token(TokenKind.STRING, start, content_start=start + 1)

    def _read_quoted_identifier(self) -> Token:
        start = self._pos
        close = self._sql.find('"', start + 1)
        if close == -1:
            self._pos = len(self._sql)
            return self._token(TokenKind.QUOTED_IDENTIFIER, start, content_start=start + 1)
        self._pos = close + 1
        return self._token(TokenKind.QUOTED_IDENTIFIER, start, content_start=start + 1, content_end=close)

    def _read_number(self) -> Token:
        start = self._pos
        while self._pos < len(self._sql) and self._sql[self._pos] in _DIGITS:
            self._pos += 1
        if self._pos < len(self._sql) and self._sql[self._pos] == "." and self._peek() in _DIGITS:
            self._pos += 1
            while self._pos < len(self._sql) and self._sql[self._pos] in _DIGITS:
                self._pos += 1
        return self._token(TokenKind.NUMBER, start)

    def _read_template_variable(self) -> Token:
        start = self._pos
        close = self._sql.find("}}", start + 2)
        if close == -1:
            # Only the first brace is consumed; the rest is rescanned.
            return self._read_single(TokenKind.OPERATOR)
        self._pos = close + 2
        return self._token(TokenKind.TEMPLATE_VARIABLE, start, content_start=start + 2, content_end=close)

    def _read_operator(self) -> Token:
        start = self._pos
        for op in _MULTI_CHAR_OPERATORS:
            if self._sql.startswith(op, start):
                self._pos += len(op)
                return self._token(TokenKind.OPERATOR, start)
        return self._read_single(TokenKind.OPERATOR)

    def _scan_word(self, pos: int) -> int:
        while pos < len(self._sql) and _is_word_char(self._sql[pos]):
            pos += 1
        return pos

    def _read_word(self) -> Token:
        start = self._pos
        self._pos = self._scan_word(start)
        kind = lookup_keyword(self._sql[start:self._pos])
        if kind is None:
            return self._token(TokenKind.IDENTIFIER, start)
        kind = self._combine(kind)
        return self._token(TokenKind.KEYWORD, start, keyword=kind)

    def _peek_word(self, pos: int) -> Optional[tuple[str, int]]:
        while pos < len(self._sql) and self._sql[pos] in _WHITESPACE:
            pos += 1
        if pos >= len(self._sql) or not _is_word_start(self._sql[pos]):
            return None
        end = self._scan_word(pos)
        return self._sql[pos:end], end

    def _combine(self, kind: KeywordKind) -> KeywordKind:
        for words, combined in KEYWORD_CONTINUATIONS.get(kind, ()):
            pos = self._pos
            for expected in words:
                found = self._peek_word(pos)
                if found is None or found[0].upper() != expected:
                    break
                pos = found[1]
            else:
                self._pos = pos
                return combined
        return kind


def tokenize(sql: str) -> list[Token]:
    return Lexer(sql).tokenize()
