from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

from siteadmin.schemas.common import NonEmptyStr, OptionalUrl, TimestampedRead

_GA_RE = re.compile(r"^G-[A-Z0-9]{10}$")
_GTM_RE = re.compile(r"^GTM-[A-Z0-9]{5,8}$")
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class SiteSettingsUpdate(BaseModel):
    site_name: NonEmptyStr | None = Field(None, max_length=100)
    base_url: OptionalUrl = None
    default_meta_title: str | None = Field(None, max_length=200)
    default_meta_description: str | None = Field(None, max_length=500)
    og_image_url: OptionalUrl = None
    logo_url: OptionalUrl = None
    favicon_url: OptionalUrl = None
    robots_txt: str | None = None
    ga_measurement_id: str | None = None
    gtm_container_id: str | None = None
    gtm_enabled: bool | None = None
    company_email: str | None = Field(None, max_length=200)
    company_phone: str | None = Field(None, max_length=50)
    footer_copyright_message: str | None = Field(None, max_length=300)

    @field_validator("ga_measurement_id")
    @classmethod
    def validate_ga(cls, v: str | None) -> str | None:
        v = _blank_to_none(v)
        if v is not None and not _GA_RE.match(v):
            raise ValueError("Invalid GA4 Measurement ID format. Expected: G-XXXXXXXXXX")
        return v

    @field_validator("gtm_container_id")
    @classmethod
    def validate_gtm(cls, v: str | None) -> str | None:
        v = _blank_to_none(v)
        if v is not None and not _GTM_RE.match(v):
            raise ValueError("Invalid GTM Container ID format. Expected: GTM-XXXXXXX")
        return v

    @field_validator("company_email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        v = _blank_to_none(v)
        if v is not None and not _EMAIL_RE.match(v):
            raise ValueError("Invalid email address")
        return v


class SiteSettingsRead(TimestampedRead):
    id: int
    site_name: str
    base_url: str | None = None
    default_meta_title: str | None = None
    default_meta_description: str | None = None
    og_image_url: str | None = None
    logo_url: str | None = None
    favicon_url: str | None = None
    robots_txt: str | None = None
    ga_measurement_id: str | None = None
    gtm_container_id: str | None = None
    gtm_enabled: bool
    company_email: str | None = None
    company_phone: str | None = None
    footer_copyright_message: str | None = None
