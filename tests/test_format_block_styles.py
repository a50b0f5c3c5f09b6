def test_dataops_leading_commas(fmt) -> None:
    assert fmt("select velocity, color from rockets", style="dataops") == (
        "SELECT\n    velocity\n    , color\nFROM\n    rockets"
    )


def test_dataops_create_table(fmt) -> None:
    sql = "create table users (id int primary key, name varchar(255) not null, email varchar(255) unique)"
    assert fmt(sql, style="dataops") == (
        "CREATE TABLE users (\n"
        "    id int PRIMARY KEY\n"
        "    , name varchar(255) NOT NULL\n"
        "    , email varchar(255) UNIQUE\n"
        ")"
    )


def test_dataops_group_by_list(fmt) -> None:
    assert fmt("select a from t group by a, b order by a, b desc", style="dataops") == (
        "SELECT\n"
        "    a\n"
        "FROM\n"
        "    t\n"
        "GROUP BY\n"
        "    a\n"
        "    , b\n"
        "ORDER BY\n"
        "    a\n"
        "    , b DESC"
    )


def test_dataops_set_list(fmt) -> None:
    assert fmt("update t set a = 1, b = 2", style="dataops") == "UPDATE\n    t\nSET\n    a = 1\n    , b = 2"


def test_dataops_inline_call_commas(fmt) -> None:
    assert fmt("select coalesce(a, b) from t", style="dataops") == "SELECT\n    coalesce(a, b)\nFROM\n    t"


def test_dataops_paren_after_leading_comma(fmt) -> None:
    assert fmt("select a, (b + c) as d from t", style="dataops") == (
        "SELECT\n    a\n    , (b + c) AS d\nFROM\n    t"
    )



def test_streamline_two_space_indent(fmt) -> None:
    assert fmt("select wingspan from dragons", style="streamline", uppercase=False) == (
        "select\n  wingspan\nfrom\n  dragons"
    )


def test_streamline_trailing_commas_and_subquery(fmt) -> None:
    sql = "select a, b from t where a in (select x from y)"
    assert fmt(sql, style="streamline") == (
        "SELECT\n"
        "  a,\n"
        "  b\n"
        "FROM\n"
        "  t\n"
        "WHERE\n"
        "  a IN (\n"
        "  SELECT\n"
        "    x\n"
        "  FROM\n"
        "    y\n"
        "  )"
    )


def test_block_styles_share_statement_splitting(fmt) -> None:
    for style in ("basic", "streamline", "dataops"):
        out = fmt("select 1; select 2", style=style)
        assert out.count("SELECT") == 2
        assert ";\n\nSELECT" in out
