from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from siteadmin.schemas.common import (
    Alignment,
    CTAStyle,
    HexColor,
    Link,
    NonEmptyStr,
    OptionalUrl,
    ReadModel,
    TimestampedRead,
)

MediaLayout = Literal["media_left", "media_right"]
MediaKind = Literal["image", "video"]


class FeatureItem(BaseModel):
    id: int | None = None  # ignored, the feature list is replaced wholesale
    icon: str = Field("MessageSquare", max_length=50)
    label: NonEmptyStr = Field(..., max_length=100)
    color: HexColor = "#5243E9"
    is_visible: bool = True
    sort_order: int | None = None  # recomputed from list position


class MediaSectionCreate(BaseModel):
    headline: NonEmptyStr = Field(..., max_length=200)
    subheading: str | None = None
    badge_text: str | None = Field(None, max_length=100)
    badge_color: HexColor | None = None
    show_badge: bool = True
    layout_type: MediaLayout = "media_right"
    alignment: Alignment = "left"
    media_type: MediaKind = "image"
    media_url: OptionalUrl = None
    media_alt: str | None = Field(None, max_length=200)
    show_cta_button: bool = False
    cta_text: str | None = Field(None, max_length=50)
    cta_url: Link | None = None
    cta_style: CTAStyle = "primary"
    background_color: HexColor | None = None
    text_color: HexColor | None = None
    padding_top: int = Field(80, ge=0, le=400)
    padding_bottom: int = Field(80, ge=0, le=400)
    is_active: bool = True
    features: list[FeatureItem] = []

    @model_validator(mode="after")
    def validate_cta(self) -> MediaSectionCreate:
        if self.show_cta_button and not (self.cta_text and self.cta_url):
            raise ValueError("cta_text and cta_url are required when show_cta_button is set")
        return self


class MediaSectionUpdate(BaseModel):
    id: int
    headline: NonEmptyStr | None = Field(None, max_length=200)
    subheading: str | None = None
    badge_text: str | None = Field(None, max_length=100)
    badge_color: HexColor | None = None
    show_badge: bool | None = None
    layout_type: MediaLayout | None = None
    alignment: Alignment | None = None
    media_type: MediaKind | None = None
    media_url: OptionalUrl = None
    media_alt: str | None = Field(None, max_length=200)
    show_cta_button: bool | None = None
    cta_text: str | None = Field(None, max_length=50)
    cta_url: Link | None = None
    cta_style: CTAStyle | None = None
    background_color: HexColor | None = None
    text_color: HexColor | None = None
    padding_top: int | None = Field(None, ge=0, le=400)
    padding_bottom: int | None = Field(None, ge=0, le=400)
    is_active: bool | None = None
    features: list[FeatureItem] | None = None


class FeatureRead(ReadModel):
    id: int
    media_section_id: int
    icon: str
    label: str
    color: str
    is_visible: bool
    sort_order: int


class MediaSectionRead(TimestampedRead):
    id: int
    headline: str
    subheading: str | None = None
    badge_text: str | None = None
    badge_color: str
    show_badge: bool
    layout_type: str
    alignment: str
    media_type: str
    media_url: str | None = None
    media_alt: str | None = None
    show_cta_button: bool
    cta_text: str | None = None
    cta_url: str | None = None
    cta_style: str
    background_color: str
    text_color: str
    padding_top: int
    padding_bottom: int
    is_active: bool
    features: list[FeatureRead] = []
