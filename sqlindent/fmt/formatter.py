from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..config import FormatOptions, Layout, policy_for
from ..lexer import tokenize
from ..tokens import Token
from .aligned import AlignedLayout
from .block import BlockLayout
from .engine import LayoutEngine

logger = logging.getLogger(__name__)

ENGINES: dict[Layout, type[LayoutEngine]] = {
    Layout.BLOCK: BlockLayout,
    Layout.ALIGNED: AlignedLayout,
}


def format_tokens(tokens: Sequence[Token], options: FormatOptions) -> str:
    if not tokens:
        return ""
    policy = policy_for(options.style)
    logger.debug(
        "formatting %d tokens: style=%s layout=%s uppercase=%s",
        len(tokens),
        policy.style.value,
        policy.layout.value,
        options.uppercase,
    )
    engine = ENGINES[policy.layout](policy, options)
    return engine.run(tokens)


def format_sql(text: str, options: Optional[FormatOptions] = None) -> str:
    """Re-layout ``text``. Never raises for malformed SQL; blank input gives ``""``."""
    if options is None:
        options = FormatOptions()
    return format_tokens(tokenize(text), options)
