from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from siteadmin.schemas.common import (
    Alignment,
    HexColor,
    HexOrTransparent,
    NonEmptyStr,
    OptionalUrl,
    TimestampedRead,
)

LayoutType = Literal["split", "centered", "overlay"]
MediaType = Literal["image", "video", "animation", "3d"]
BackgroundType = Literal["color", "gradient", "image", "video"]
MediaPosition = Literal["left", "right"]


class HeroSectionCreate(BaseModel):
    """New hero section. Colours left unset fall back to the active design tokens."""

    name: NonEmptyStr = Field("Untitled Hero Section", max_length=100)
    layout_type: LayoutType = "split"
    section_height: str = Field("100vh", max_length=50)
    tagline: str | None = Field(None, max_length=100)
    headline: NonEmptyStr = Field(..., max_length=200)
    subheading: str | None = None
    text_alignment: Alignment = "left"
    cta_primary_id: int | None = None
    cta_secondary_id: int | None = None
    media_url: OptionalUrl = None
    media_type: MediaType = "image"
    media_alt: str | None = Field(None, max_length=200)
    media_position: MediaPosition = "right"
    background_type: BackgroundType = "color"
    background_value: str = Field("#FFFFFF", max_length=500)
    tagline_color: HexColor | None = None
    headline_color: HexColor | None = None
    subheading_color: HexColor | None = None
    cta_primary_bg_color: HexOrTransparent | None = None
    cta_primary_text_color: HexColor = "#FFFFFF"
    padding_top: int = Field(80, ge=0, le=400)
    padding_bottom: int = Field(80, ge=0, le=400)
    visible: bool = True


class HeroSectionUpdate(BaseModel):
    id: int
    name: NonEmptyStr | None = Field(None, max_length=100)
    layout_type: LayoutType | None = None
    section_height: str | None = Field(None, max_length=50)
    tagline: str | None = Field(None, max_length=100)
    headline: NonEmptyStr | None = Field(None, max_length=200)
    subheading: str | None = None
    text_alignment: Alignment | None = None
    cta_primary_id: int | None = None
    cta_secondary_id: int | None = None
    media_url: OptionalUrl = None
    media_type: MediaType | None = None
    media_alt: str | None = Field(None, max_length=200)
    media_position: MediaPosition | None = None
    background_type: BackgroundType | None = None
    background_value: str | None = Field(None, max_length=500)
    tagline_color: HexColor | None = None
    headline_color: HexColor | None = None
    subheading_color: HexColor | None = None
    cta_primary_bg_color: HexOrTransparent | None = None
    cta_primary_text_color: HexColor | None = None
    padding_top: int | None = Field(None, ge=0, le=400)
    padding_bottom: int | None = Field(None, ge=0, le=400)
    visible: bool | None = None


class HeroSectionRead(TimestampedRead):
    id: int
    name: str
    layout_type: str
    section_height: str
    tagline: str | None = None
    headline: str
    subheading: str | None = None
    text_alignment: str
    cta_primary_id: int | None = None
    cta_secondary_id: int | None = None
    media_url: str | None = None
    media_type: str
    media_alt: str | None = None
    media_position: str
    background_type: str
    background_value: str
    tagline_color: str
    headline_color: str
    subheading_color: str
    cta_primary_bg_color: str
    cta_primary_text_color: str
    padding_top: int
    padding_bottom: int
    visible: bool
