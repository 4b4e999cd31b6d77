from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any, Literal
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, ConfigDict

_HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


# ---------------------------------------------------------------------------
# Reusable field types
# ---------------------------------------------------------------------------

def _non_empty(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


def _hex_color(value: str) -> str:
    if not _HEX_COLOR_RE.match(value):
        raise ValueError("Invalid hex color, expected #RRGGBB")
    return value


def _hex_or_transparent(value: str) -> str:
    if value == "transparent":
        return value
    return _hex_color(value)


def _link(value: str) -> str:
    """Absolute http(s) URL, site-relative path or in-page anchor."""
    value = value.strip()
    if value.startswith("#"):
        if len(value) == 1:
            raise ValueError("Anchor link must name a section")
        return value
    if value.startswith("/"):
        return value
    parsed = urlparse(value)
    if parsed.scheme in ("http", "https") and parsed.netloc:
        return value
    raise ValueError("Must be a valid URL, relative path (/page), or anchor link (#section)")


def _optional_url(value: str | None) -> str | None:
    if value is None or value.strip() == "":
        return None
    return _link(value)


NonEmptyStr = Annotated[str, AfterValidator(_non_empty)]
HexColor = Annotated[str, AfterValidator(_hex_color)]
HexOrTransparent = Annotated[str, AfterValidator(_hex_or_transparent)]
Link = Annotated[str, AfterValidator(_link)]
OptionalUrl = Annotated[str | None, AfterValidator(_optional_url)]

CTAStyle = Literal[
    "primary", "secondary", "accent", "ghost", "destructive", "success", "info", "outline", "muted"
]
LinkTarget = Literal["_self", "_blank"]
Alignment = Literal["left", "center", "right"]


# ---------------------------------------------------------------------------
# Shared request / response shapes
# ---------------------------------------------------------------------------

class ReadModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class TimestampedRead(ReadModel):
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ReorderRequest(BaseModel):
    """Renumbered display order of a collection.

    Scoped resources carry the scope value as an extra key named after the
    scope column, e.g. ``{"ids": [3, 1, 2], "category_id": 7}``.
    """

    model_config = ConfigDict(extra="allow")

    ids: list[int]


class Envelope(BaseModel):
    success: bool = True
    data: Any = None
    message: str | None = None


def ok(data: Any = None, message: str | None = None) -> dict:
    """Standard success envelope used by every admin endpoint."""
    return Envelope(data=data, message=message).model_dump(mode="json")
