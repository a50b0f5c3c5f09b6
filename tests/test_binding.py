from sqlindent.binding import format_sql_text


def test_binding_formats_with_style() -> None:
    assert format_sql_text("select id, name from users", True, "aligned") == (
        "SELECT id\n       , name\n  FROM users"
    )


def test_binding_lowercase() -> None:
    assert format_sql_text("select id from users", False, "basic") == "select\n    id\nfrom\n    users"


def test_binding_unknown_style_falls_back_to_basic() -> None:
    assert format_sql_text("select id from users", True, "nope") == "SELECT\n    id\nFROM\n    users"


def test_binding_explicit_casing_wins_over_style_default() -> None:
    assert format_sql_text("select a from t", True, "streamline") == "SELECT\n  a\nFROM\n  t"


def test_binding_blank_input() -> None:
    assert format_sql_text("   ") == ""
