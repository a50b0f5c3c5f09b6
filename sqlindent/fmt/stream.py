from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Optional

from ..tokens import Token, TokenKind


class TokenStream:
    """Forward-only iterator over significant tokens with bounded lookahead."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: Iterator[Token] = (t for t in tokens if t.kind is not TokenKind.WHITESPACE)
        self._lookahead: deque[Token] = deque()

    def __iter__(self) -> TokenStream:
        return self

    def __next__(self) -> Token:
        if self._lookahead:
            return self._lookahead.popleft()
        return next(self._tokens)

    def peek(self, offset: int = 0) -> Optional[Token]:
        while len(self._lookahead) <= offset:
            try:
                self._lookahead.append(next(self._tokens))
            except StopIteration:
                return None
        return self._lookahead[offset]
