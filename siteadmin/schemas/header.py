from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, field_validator

from siteadmin.schemas.common import ReadModel, TimestampedRead
from siteadmin.schemas.cta import CTARead


class HeaderCTAItem(BaseModel):
    """One CTA slot in the header; list position is the display order."""

    cta_id: int
    is_visible: bool = True
    sort_order: int | None = None  # recomputed from list position


def _unique_ctas(items: list[HeaderCTAItem]) -> list[HeaderCTAItem]:
    seen: set[int] = set()
    for item in items:
        if item.cta_id in seen:
            raise ValueError(f"CTA {item.cta_id} appears more than once")
        seen.add(item.cta_id)
    return items


class HeaderConfigCreate(BaseModel):
    cta_buttons: list[HeaderCTAItem] = []

    @field_validator("cta_buttons")
    @classmethod
    def validate_unique(cls, v: list[HeaderCTAItem]) -> list[HeaderCTAItem]:
        return _unique_ctas(v)


class HeaderConfigUpdate(BaseModel):
    """Replaces the CTA list. Activation only changes by creating a configuration."""

    id: int
    cta_buttons: list[HeaderCTAItem] | None = None

    @field_validator("cta_buttons")
    @classmethod
    def validate_unique(cls, v: list[HeaderCTAItem] | None) -> list[HeaderCTAItem] | None:
        if v is not None:
            _unique_ctas(v)
        return v


class HeaderAction(BaseModel):
    """Single-CTA edits on the active header configuration."""

    action: Literal["add_cta", "remove_cta", "toggle_cta_visibility"]
    cta_id: int | None = None
    header_cta_id: int | None = None
    is_visible: bool | None = None


class HeaderCTARead(ReadModel):
    id: int
    cta_id: int
    sort_order: int
    is_visible: bool
    cta: CTARead | None = None


class HeaderConfigRead(TimestampedRead):
    id: int
    is_active: bool
    cta_buttons: list[HeaderCTARead] = []
