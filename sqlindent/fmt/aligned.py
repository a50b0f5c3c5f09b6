from __future__ import annotations

from typing import Optional

from ..config import FormatOptions, StylePolicy
from ..keywords import KeywordKind
from ..tokens import Token, TokenKind
from .engine import LayoutEngine, needs_space_before, opens_subquery
from .state import LIST_CLAUSES, ClauseContext, Pending, clause_context_for

# Column (relative to the base) where list items start, right after "SELECT ".
LIST_COLUMN = 7
JOIN_WIDTH = 11
KEYWORD_WIDTH = 6


class AlignedLayout(LayoutEngine):
    """Column-aligned ("river") layout.

    Clause keywords are right-aligned against a shared gutter so their content
    starts in one column; list items continue on new lines behind a leading
    ``, `` placed under the first item. Subqueries shift the gutter right by two.
    """

    def __init__(self, policy: StylePolicy, options: FormatOptions) -> None:
        super().__init__(policy, options)
        self.base_col = 0
        self.between_depth = 0

    def continuation_width(self) -> int:
        return self.base_col + LIST_COLUMN

    def keyword_padding(self, keyword: KeywordKind) -> int:
        width = len(keyword.value)
        if keyword.is_join():
            return max(self.base_col + JOIN_WIDTH - width, 0)
        if width > KEYWORD_WIDTH:
            return self.base_col + 1
        return max(self.base_col + KEYWORD_WIDTH - width, 0)

    def _keyword_on_new_line(self, keyword: KeywordKind) -> None:
        self.pending = Pending.NONE
        padding = self.keyword_padding(keyword)
        text = self.state.keyword_text(keyword)
        if self.state.first_token:
            self.emit(" " * padding + text)
        else:
            self.break_line(padding)
            self.emit(text)

    def _emit_content(self, text: str, token: Token, prev: Optional[Token]) -> None:
        pending, self.pending = self.pending, Pending.NONE
        if pending is Pending.AWAIT_DDL_NAME:
            self.emit(text, space=True)
        elif pending is Pending.AFTER_COMMA_BREAK:
            self.emit(text)
        else:
            self.emit_spaced(text, token, prev)

    def format_keyword(self, keyword: KeywordKind, token: Token, prev: Optional[Token]) -> None:
        state = self.state
        text = state.keyword_text(keyword)

        if state.inline:
            self.pending = Pending.NONE
            self.emit_spaced(text, token, prev)
            return

        if keyword.is_ddl_starter():
            self._keyword_on_new_line(keyword)
            state.clause = ClauseContext.DDL
            self.pending = Pending.AWAIT_DDL_NAME
        elif keyword is KeywordKind.WITH:
            self.pending = Pending.NONE
            if not state.first_token:
                self.break_line(0)
            self.emit(text)
            state.clause = ClauseContext.CTE
        elif keyword.is_clause_starter():
            set_operation = keyword in (KeywordKind.UNION, KeywordKind.UNION_ALL)
            if set_operation and not state.first_token:
                self.break_line(0)
            self._keyword_on_new_line(keyword)
            if set_operation:
                self.break_line(0)
            state.clause = clause_context_for(keyword)
        elif keyword.is_join():
            self._keyword_on_new_line(keyword)
            state.clause = ClauseContext.JOIN
        elif keyword.is_order_modifier():
            self._keyword_on_new_line(keyword)
            state.clause = clause_context_for(keyword)
        elif keyword.is_sub_clause():
            if keyword is KeywordKind.AND and self.between_depth > 0:
                self.between_depth -= 1
                self.pending = Pending.NONE
                self.emit_spaced(text, token, prev)
            else:
                self._keyword_on_new_line(keyword)
        else:
            if keyword is KeywordKind.BETWEEN:
                self.between_depth += 1
            self._emit_content(text, token, prev)

    def format_value(self, text: str, token: Token, prev: Optional[Token]) -> None:
        self._emit_content(text, token, prev)

    def format_comma(self) -> None:
        state = self.state
        self.pending = Pending.NONE
        if state.inline:
            self.emit(",")
        elif state.clause in LIST_CLAUSES:
            self.break_line(self.base_col + LIST_COLUMN)
            self.emit(", ")
            self.pending = Pending.AFTER_COMMA_BREAK
        elif state.clause is ClauseContext.CTE:
            self.break_line(self.base_col)
            self.emit(", ")
            self.pending = Pending.AFTER_COMMA_BREAK
        else:
            self.emit(",")

    def format_open_paren(self, token: Token, next_token: Optional[Token], prev: Optional[Token]) -> None:
        state = self.state
        space = self.pending is not Pending.AFTER_COMMA_BREAK and needs_space_before(token, prev)
        self.pending = Pending.NONE
        if opens_subquery(next_token) and not state.inline:
            state.push_paren(subquery=True, baseline=self.base_col)
            self.base_col += 2
        else:
            state.push_paren(subquery=False, baseline=self.base_col)
            state.inline_depth += 1
            if prev is not None and prev.kind is TokenKind.IDENTIFIER:
                space = False
        self.emit("(", space=space)

    def format_close_paren(self) -> None:
        state = self.state
        self.pending = Pending.NONE
        if state.paren_depth == 0:
            self.emit(")")
            return
        frame = state.pop_paren()
        if frame.subquery:
            if frame.clause in (ClauseContext.CTE, ClauseContext.FROM):
                self.break_line(frame.baseline)
            else:
                self.break_line(frame.baseline + 2)
            self.emit(")")
            self.base_col = frame.baseline
        else:
            if state.inline:
                state.inline_depth -= 1
            self.emit(")")

    def format_semicolon(self) -> None:
        self.pending = Pending.NONE
        self.emit(";")
        self.break_line(0)
        self.break_line(0)
        self.base_col = 0
        self.between_depth = 0
        self.state.reset_statement()
