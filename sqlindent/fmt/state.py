from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from ..keywords import KeywordKind


class ClauseContext(Enum):
    NONE = auto()
    SELECT = auto()
    FROM = auto()
    WHERE = auto()
    SET = auto()
    VALUES = auto()
    HAVING = auto()
    GROUP_BY = auto()
    ORDER_BY = auto()
    JOIN = auto()
    DDL = auto()
    CTE = auto()
    OTHER = auto()


# Clauses whose commas separate one item per line.
LIST_CLAUSES = frozenset(
    {
        ClauseContext.SELECT,
        ClauseContext.GROUP_BY,
        ClauseContext.ORDER_BY,
        ClauseContext.SET,
        ClauseContext.DDL,
    }
)

_KEYWORD_CLAUSES = {
    KeywordKind.SELECT: ClauseContext.SELECT,
    KeywordKind.FROM: ClauseContext.FROM,
    KeywordKind.WHERE: ClauseContext.WHERE,
    KeywordKind.SET: ClauseContext.SET,
    KeywordKind.VALUES: ClauseContext.VALUES,
    KeywordKind.HAVING: ClauseContext.HAVING,
    KeywordKind.GROUP_BY: ClauseContext.GROUP_BY,
    KeywordKind.ORDER_BY: ClauseContext.ORDER_BY,
}


def clause_context_for(keyword: KeywordKind) -> ClauseContext:
    return _KEYWORD_CLAUSES.get(keyword, ClauseContext.OTHER)


class Pending(Enum):
    """What the next content token has to do before it is written."""

    NONE = auto()
    NEW_INDENTED_LINE = auto()
    SAME_LINE = auto()
    AFTER_COMMA_BREAK = auto()
    AWAIT_DDL_NAME = auto()


@dataclass(frozen=True)
class ParenFrame:
    subquery: bool
    clause: ClauseContext
    # Indent depth (block layouts) or base column (aligned layout) outside the paren.
    baseline: int


class OutputBuffer:
    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str) -> None:
        if text:
            self._parts.append(text)

    def newline(self, width: int = 0) -> None:
        """Start a new line indented by ``width`` spaces, dropping trailing spaces first."""
        self._trim_line_end()
        self._parts.append("\n" + " " * width)

    def last_char(self) -> str:
        return self._parts[-1][-1] if self._parts else ""

    def getvalue(self) -> str:
        return "".join(self._parts).rstrip()

    def _trim_line_end(self) -> None:
        while self._parts and not self._parts[-1].strip(" "):
            self._parts.pop()
        if self._parts:
            self._parts[-1] = self._parts[-1].rstrip(" ")


@dataclass
class FormatterState:
    """Layout state shared by every engine for one document."""

    uppercase: bool = True
    parens: list[ParenFrame] = field(default_factory=list)
    inline_depth: int = 0
    clause: ClauseContext = ClauseContext.NONE
    first_token: bool = True
    # A ``--`` comment ends the current output line; nothing may follow it there.
    comment_open: bool = False
    out: OutputBuffer = field(default_factory=OutputBuffer)

    @property
    def paren_depth(self) -> int:
        return len(self.parens)

    @property
    def inline(self) -> bool:
        return self.inline_depth > 0

    @property
    def subquery_depth(self) -> int:
        return sum(1 for frame in self.parens if frame.subquery)

    def keyword_text(self, keyword: KeywordKind) -> str:
        return keyword.value if self.uppercase else keyword.value.lower()

    def push_paren(self, subquery: bool, baseline: int) -> ParenFrame:
        frame = ParenFrame(subquery=subquery, clause=self.clause, baseline=baseline)
        self.parens.append(frame)
        return frame

    def pop_paren(self) -> Optional[ParenFrame]:
        if not self.parens:
            return None
        frame = self.parens.pop()
        if frame.subquery:
            self.clause = frame.clause
        return frame

    def reset_statement(self) -> None:
        self.clause = ClauseContext.NONE
        self.first_token = True
        self.comment_open = False
