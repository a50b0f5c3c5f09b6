from __future__ import annotations

from enum import Enum
from typing import Optional


class KeywordKind(Enum):
    """Recognized SQL keywords. The value is the canonical (uppercase) spelling."""

    SELECT = "SELECT"
    FROM = "FROM"
    WHERE = "WHERE"
    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    IN = "IN"
    BETWEEN = "BETWEEN"
    LIKE = "LIKE"
    IS = "IS"
    NULL = "NULL"
    AS = "AS"
    ON = "ON"
    JOIN = "JOIN"
    HAVING = "HAVING"
    LIMIT = "LIMIT"
    OFFSET = "OFFSET"
    UNION = "UNION"
    INTERSECT = "INTERSECT"
    EXCEPT = "EXCEPT"
    INSERT = "INSERT"
    INTO = "INTO"
    VALUES = "VALUES"
    UPDATE = "UPDATE"
    SET = "SET"
    DELETE = "DELETE"
    DISTINCT = "DISTINCT"
    ALL = "ALL"
    ASC = "ASC"
    DESC = "DESC"
    CASE = "CASE"
    WHEN = "WHEN"
    THEN = "THEN"
    ELSE = "ELSE"
    END = "END"
    EXISTS = "EXISTS"
    ANY = "ANY"
    WITH = "WITH"
    RECURSIVE = "RECURSIVE"
    RETURNING = "RETURNING"
    USING = "USING"
    NATURAL = "NATURAL"
    FETCH = "FETCH"
    FOR = "FOR"
    WINDOW = "WINDOW"
    OVER = "OVER"
    PARTITION = "PARTITION"
    ROWS = "ROWS"
    RANGE = "RANGE"
    UNBOUNDED = "UNBOUNDED"
    PRECEDING = "PRECEDING"
    FOLLOWING = "FOLLOWING"
    CURRENT = "CURRENT"
    ROW = "ROW"

    # first halves of multi-word keywords, also valid on their own
    ORDER = "ORDER"
    GROUP = "GROUP"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    INNER = "INNER"
    OUTER = "OUTER"
    FULL = "FULL"
    CROSS = "CROSS"

    CREATE = "CREATE"
    ALTER = "ALTER"
    DROP = "DROP"
    TABLE = "TABLE"
    INDEX = "INDEX"
    VIEW = "VIEW"
    COLUMN = "COLUMN"
    ADD = "ADD"
    PRIMARY = "PRIMARY"
    KEY = "KEY"
    FOREIGN = "FOREIGN"
    REFERENCES = "REFERENCES"
    UNIQUE = "UNIQUE"
    DEFAULT = "DEFAULT"
    CHECK = "CHECK"
    CONSTRAINT = "CONSTRAINT"
    CASCADE = "CASCADE"
    RESTRICT = "RESTRICT"
    IF = "IF"
    TEMPORARY = "TEMPORARY"
    TEMP = "TEMP"
    SCHEMA = "SCHEMA"
    DATABASE = "DATABASE"
    SEQUENCE = "SEQUENCE"
    TRIGGER = "TRIGGER"
    FUNCTION = "FUNCTION"
    PROCEDURE = "PROCEDURE"
    TYPE = "TYPE"
    ENUM = "ENUM"
    GRANT = "GRANT"
    REVOKE = "REVOKE"
    TRUNCATE = "TRUNCATE"
    RENAME = "RENAME"
    REPLACE = "REPLACE"
    COMMENT = "COMMENT"

    TRUE = "TRUE"
    FALSE = "FALSE"
    BEGIN = "BEGIN"
    COMMIT = "COMMIT"
    ROLLBACK = "ROLLBACK"
    SAVEPOINT = "SAVEPOINT"
    TRANSACTION = "TRANSACTION"
    LOCK = "LOCK"
    UNLOCK = "UNLOCK"

    # produced only by the lexer's multi-word combination
    ORDER_BY = "ORDER BY"
    GROUP_BY = "GROUP BY"
    LEFT_JOIN = "LEFT JOIN"
    RIGHT_JOIN = "RIGHT JOIN"
    INNER_JOIN = "INNER JOIN"
    OUTER_JOIN = "OUTER JOIN"
    FULL_JOIN = "FULL JOIN"
    CROSS_JOIN = "CROSS JOIN"
    UNION_ALL = "UNION ALL"
    PRIMARY_KEY = "PRIMARY KEY"
    FOREIGN_KEY = "FOREIGN KEY"
    IF_EXISTS = "IF EXISTS"
    IF_NOT_EXISTS = "IF NOT EXISTS"
    ROWS_BETWEEN = "ROWS BETWEEN"
    RANGE_BETWEEN = "RANGE BETWEEN"

    def __str__(self) -> str:
        return self.value

    @property
    def is_multi_word(self) -> bool:
        return " " in self.value

    def is_clause_starter(self) -> bool:
        return self in CLAUSE_STARTERS

    def is_join(self) -> bool:
        return self in JOIN_KEYWORDS

    def is_order_modifier(self) -> bool:
        return self in ORDER_MODIFIERS

    def is_ddl_starter(self) -> bool:
        return self in DDL_STARTERS

    def is_sub_clause(self) -> bool:
        return self in SUB_CLAUSES

    def is_single_value_clause(self) -> bool:
        return self in SINGLE_VALUE_CLAUSES


CLAUSE_STARTERS = frozenset(
    {
        KeywordKind.SELECT,
        KeywordKind.FROM,
        KeywordKind.WHERE,
        KeywordKind.SET,
        KeywordKind.VALUES,
        KeywordKind.INTO,
        KeywordKind.HAVING,
        KeywordKind.LIMIT,
        KeywordKind.OFFSET,
        KeywordKind.UNION,
        KeywordKind.UNION_ALL,
        KeywordKind.INTERSECT,
        KeywordKind.EXCEPT,
        KeywordKind.RETURNING,
        KeywordKind.INSERT,
        KeywordKind.UPDATE,
        KeywordKind.DELETE,
        KeywordKind.WITH,
        KeywordKind.FETCH,
    }
)
JOIN_KEYWORDS = frozenset(
    {
        KeywordKind.JOIN,
        KeywordKind.LEFT_JOIN,
        KeywordKind.RIGHT_JOIN,
        KeywordKind.INNER_JOIN,
        KeywordKind.OUTER_JOIN,
        KeywordKind.FULL_JOIN,
        KeywordKind.CROSS_JOIN,
        KeywordKind.NATURAL,
    }
)
ORDER_MODIFIERS = frozenset({KeywordKind.ORDER_BY, KeywordKind.GROUP_BY})
DDL_STARTERS = frozenset(
    {
        KeywordKind.CREATE,
        KeywordKind.ALTER,
        KeywordKind.DROP,
        KeywordKind.TRUNCATE,
        KeywordKind.GRANT,
        KeywordKind.REVOKE,
    }
)
SUB_CLAUSES = frozenset({KeywordKind.ON, KeywordKind.AND, KeywordKind.OR})
SINGLE_VALUE_CLAUSES = frozenset({KeywordKind.LIMIT, KeywordKind.OFFSET})

# Follow-up words that fold a keyword into a multi-word kind, shortest first.
KEYWORD_CONTINUATIONS: dict[KeywordKind, tuple[tuple[tuple[str, ...], KeywordKind], ...]] = {
    KeywordKind.ORDER: ((("BY",), KeywordKind.ORDER_BY),),
    KeywordKind.GROUP: ((("BY",), KeywordKind.GROUP_BY),),
    KeywordKind.LEFT: ((("JOIN",), KeywordKind.LEFT_JOIN),),
    KeywordKind.RIGHT: ((("JOIN",), KeywordKind.RIGHT_JOIN),),
    KeywordKind.INNER: ((("JOIN",), KeywordKind.INNER_JOIN),),
    KeywordKind.OUTER: ((("JOIN",), KeywordKind.OUTER_JOIN),),
    KeywordKind.CROSS: ((("JOIN",), KeywordKind.CROSS_JOIN),),
    KeywordKind.UNION: ((("ALL",), KeywordKind.UNION_ALL),),
    KeywordKind.PRIMARY: ((("KEY",), KeywordKind.PRIMARY_KEY),),
    KeywordKind.FOREIGN: ((("KEY",), KeywordKind.FOREIGN_KEY),),
    KeywordKind.ROWS: ((("BETWEEN",), KeywordKind.ROWS_BETWEEN),),
    KeywordKind.RANGE: ((("BETWEEN",), KeywordKind.RANGE_BETWEEN),),
    KeywordKind.FULL: (
        (("JOIN",), KeywordKind.FULL_JOIN),
        (("OUTER", "JOIN"), KeywordKind.FULL_JOIN),
    ),
    KeywordKind.IF: (
        (("EXISTS",), KeywordKind.IF_EXISTS),
        (("NOT", "EXISTS"), KeywordKind.IF_NOT_EXISTS),
    ),
}

_SINGLE_WORD = {kind.value: kind for kind in KeywordKind if not kind.is_multi_word}


def lookup_keyword(word: str) -> Optional[KeywordKind]:
    """Case-insensitive lookup of a single word. Multi-word kinds are never returned."""
    if not word.isascii():
        return None
    return _SINGLE_WORD.get(word.upper())
