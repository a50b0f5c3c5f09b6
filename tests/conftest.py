from __future__ import annotations

import pytest

from sqlindent import FormatOptions, format_sql


@pytest.fixture
def fmt():
    def _fmt(sql: str, style: str = "basic", uppercase: bool = True) -> str:
        return format_sql(sql, FormatOptions(style=style, uppercase=uppercase))

    return _fmt
