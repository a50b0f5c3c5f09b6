from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from .errors import ConfigError

logger = logging.getLogger(__name__)


class FormatStyle(str, Enum):
    BASIC = "basic"
    STREAMLINE = "streamline"
    ALIGNED = "aligned"
    DATAOPS = "dataops"

    @classmethod
    def from_name(cls, name: str) -> FormatStyle:
        """Exact-match lookup that falls back to ``DEFAULT_STYLE`` for unknown names."""
        try:
            return cls(name)
        except ValueError:
            logger.warning("unknown style %r, falling back to %r", name, DEFAULT_STYLE.value)
            return DEFAULT_STYLE


DEFAULT_STYLE = FormatStyle.BASIC
STYLE_NAMES = tuple(style.value for style in FormatStyle)


class Layout(Enum):
    BLOCK = "block"
    ALIGNED = "aligned"


@dataclass(frozen=True)
class StylePolicy:
    style: FormatStyle
    layout: Layout
    indent_width: int = 4
    leading_comma: bool = False
    uppercase_default: bool = True


STYLE_POLICIES: dict[FormatStyle, StylePolicy] = {
    FormatStyle.BASIC: StylePolicy(FormatStyle.BASIC, Layout.BLOCK),
    FormatStyle.STREAMLINE: StylePolicy(
        FormatStyle.STREAMLINE, Layout.BLOCK, indent_width=2, uppercase_default=False
    ),
    FormatStyle.DATAOPS: StylePolicy(FormatStyle.DATAOPS, Layout.BLOCK, leading_comma=True),
    FormatStyle.ALIGNED: StylePolicy(FormatStyle.ALIGNED, Layout.ALIGNED, leading_comma=True),
}


def policy_for(style: FormatStyle) -> StylePolicy:
    return STYLE_POLICIES[style]


class FormatOptions(BaseModel):
    """Options for one format call. ``uppercase`` only affects keywords."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    uppercase: bool = True
    style: FormatStyle = DEFAULT_STYLE

    @model_validator(mode="before")
    @classmethod
    def _style_default_casing(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("uppercase") is not None:
            return data
        try:
            style = FormatStyle(data.get("style", DEFAULT_STYLE))
        except ValueError:
            return data
        return {**data, "uppercase": policy_for(style).uppercase_default}


def load_options(style: str, uppercase: Optional[bool] = None) -> FormatOptions:
    """Validate externally supplied options (CLI flags, config values)."""
    try:
        return FormatOptions.model_validate({"style": style, "uppercase": uppercase})
    except ValidationError as exc:
        fields = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
        if "style" in fields:
            raise ConfigError(
                f"unsupported style '{style}' (expected one of: {', '.join(STYLE_NAMES)})"
            ) from exc
        raise ConfigError(f"invalid options: {exc.error_count()} validation error(s)") from exc
