from __future__ import annotations

from pydantic import BaseModel, Field

from siteadmin.schemas.common import CTAStyle, Link, LinkTarget, NonEmptyStr, TimestampedRead


class CTACreate(BaseModel):
    text: NonEmptyStr = Field(..., max_length=50)
    url: Link = Field(..., max_length=500)
    icon: str | None = Field(None, max_length=50)
    style: CTAStyle = "primary"
    target: LinkTarget = "_self"
    is_active: bool = True


class CTAUpdate(BaseModel):
    id: int
    text: NonEmptyStr | None = Field(None, max_length=50)
    url: Link | None = Field(None, max_length=500)
    icon: str | None = Field(None, max_length=50)
    style: CTAStyle | None = None
    target: LinkTarget | None = None
    is_active: bool | None = None


class CTARead(TimestampedRead):
    id: int
    text: str
    url: str
    icon: str | None = None
    style: str
    target: str
    is_active: bool
