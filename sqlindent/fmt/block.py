from __future__ import annotations

from typing import Optional

from ..config import FormatOptions, StylePolicy
from ..keywords import KeywordKind
from ..tokens import Token, TokenKind
from .engine import LayoutEngine, needs_space_before, opens_subquery
from .state import LIST_CLAUSES, ClauseContext, Pending, clause_context_for


class BlockLayout(LayoutEngine):
    """Block-indented layout: every clause keyword starts a line, its content is
    indented one unit below it, subqueries nest one more unit per level.

    Indent width and comma placement come from the style policy.
    """

    def __init__(self, policy: StylePolicy, options: FormatOptions) -> None:
        super().__init__(policy, options)
        self.indent_depth = 0

    def continuation_width(self) -> int:
        return self.indent_depth * self.policy.indent_width

    def _base(self) -> int:
        return self.state.subquery_depth

    def _newline_at(self, depth: int) -> None:
        self.break_line(depth * self.policy.indent_width)

    def _start_clause_line(self, text: str) -> None:
        base = self._base()
        if not self.state.first_token:
            self._newline_at(base)
        self.emit(text)
        self.indent_depth = base + 1

    def _emit_inline(self, text: str, token: Token, prev: Optional[Token]) -> bool:
        if not self.state.inline:
            return False
        self.pending = Pending.NONE
        self.emit_spaced(text, token, prev)
        return True

    def _emit_content(self, text: str, token: Token, prev: Optional[Token]) -> None:
        pending, self.pending = self.pending, Pending.NONE
        if pending is Pending.NEW_INDENTED_LINE:
            self._newline_at(self.indent_depth)
            self.emit(text)
        elif pending in (Pending.SAME_LINE, Pending.AWAIT_DDL_NAME):
            self.emit(text, space=True)
        elif pending is Pending.AFTER_COMMA_BREAK:
            self.emit(text)
        else:
            self.emit_spaced(text, token, prev)

    def format_keyword(self, keyword: KeywordKind, token: Token, prev: Optional[Token]) -> None:
        state = self.state
        text = state.keyword_text(keyword)

        if keyword.is_ddl_starter():
            self.pending = Pending.NONE
            self._start_clause_line(text)
            state.clause = ClauseContext.DDL
            self.pending = Pending.AWAIT_DDL_NAME
            return

        if self._emit_inline(text, token, prev):
            return

        if keyword.is_clause_starter():
            self.pending = Pending.NONE
            self._start_clause_line(text)
            state.clause = clause_context_for(keyword)
            if keyword.is_single_value_clause():
                self.pending = Pending.SAME_LINE
            else:
                self.pending = Pending.NEW_INDENTED_LINE
        elif keyword.is_join():
            self.pending = Pending.NONE
            self._start_clause_line(text)
            state.clause = ClauseContext.JOIN
            self.pending = Pending.SAME_LINE
        elif keyword.is_order_modifier():
            self.pending = Pending.NONE
            self._start_clause_line(text)
            state.clause = clause_context_for(keyword)
            self.pending = Pending.NEW_INDENTED_LINE
        elif keyword.is_sub_clause():
            self.pending = Pending.NONE
            base = self._base()
            if not state.first_token:
                self._newline_at(base + 1)
            self.emit(text)
            self.indent_depth = base + 1
        else:
            self._emit_content(text, token, prev)

    def format_value(self, text: str, token: Token, prev: Optional[Token]) -> None:
        if self._emit_inline(text, token, prev):
            return
        self._emit_content(text, token, prev)

    def format_comma(self) -> None:
        state = self.state
        self.pending = Pending.NONE
        if state.inline or state.clause not in LIST_CLAUSES:
            self.emit(",")
            return
        if self.policy.leading_comma:
            self._newline_at(self.indent_depth)
            self.emit(", ")
        else:
            self.emit(",")
            self._newline_at(self.indent_depth)
        self.pending = Pending.AFTER_COMMA_BREAK

    def format_open_paren(self, token: Token, next_token: Optional[Token], prev: Optional[Token]) -> None:
        state = self.state
        if self.pending is Pending.NEW_INDENTED_LINE:
            self._newline_at(self.indent_depth)
        space = self.pending is not Pending.AFTER_COMMA_BREAK and needs_space_before(token, prev)
        self.pending = Pending.NONE

        if opens_subquery(next_token) and not state.inline:
            state.push_paren(subquery=True, baseline=self.indent_depth)
            self.indent_depth = self._base()
            self.emit("(", space=space)
        elif state.clause is ClauseContext.DDL and state.paren_depth == self._base():
            # column list of CREATE TABLE t ( ... ) and the like
            state.push_paren(subquery=False, baseline=self.indent_depth)
            self.emit_spaced("(", token, prev)
            self._newline_at(self.indent_depth)
        else:
            state.push_paren(subquery=False, baseline=self.indent_depth)
            state.inline_depth += 1
            call = prev is not None and prev.kind is TokenKind.IDENTIFIER
            self.emit("(", space=space and not call)

    def format_close_paren(self) -> None:
        state = self.state
        self.pending = Pending.NONE
        if state.paren_depth == 0:
            self.emit(")")
            return
        subquery_base = self._base()
        frame = state.pop_paren()
        if frame.subquery:
            self.indent_depth = frame.baseline
            self._newline_at(subquery_base)
            self.emit(")")
        elif state.inline:
            state.inline_depth -= 1
            self.emit(")")
        else:
            base = self._base()
            self._newline_at(base)
            self.emit(")")
            self.indent_depth = base

    def format_semicolon(self) -> None:
        self.pending = Pending.NONE
        self.emit(";")
        self.break_line(0)
        self.break_line(0)
        self.indent_depth = 0
        self.state.reset_statement()
