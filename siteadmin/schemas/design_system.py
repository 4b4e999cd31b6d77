from __future__ import annotations

import json
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from siteadmin.schemas.common import HexColor, TimestampedRead

ThemeMode = Literal["light", "dark", "auto"]


def _json_object(value: str | None) -> str | None:
    if value is None or value.strip() == "":
        return None
    try:
        parsed = json.loads(value)
    except ValueError as exc:
        raise ValueError("custom_variables must be valid JSON") from exc
    if not isinstance(parsed, dict):
        raise ValueError("custom_variables must be a JSON object")
    return value


class DesignSystemWrite(BaseModel):
    """Upsert body for the active design system; every field is optional."""

    id: int | None = None
    primary_color: HexColor | None = None
    primary_color_light: HexColor | None = None
    primary_color_dark: HexColor | None = None
    secondary_color: HexColor | None = None
    accent_color: HexColor | None = None
    success_color: HexColor | None = None
    warning_color: HexColor | None = None
    error_color: HexColor | None = None
    info_color: HexColor | None = None
    background_primary: HexColor | None = None
    background_secondary: HexColor | None = None
    background_dark: HexColor | None = None
    text_primary: HexColor | None = None
    text_secondary: HexColor | None = None
    text_muted: HexColor | None = None
    font_family: str | None = Field(None, max_length=200)
    font_family_mono: str | None = Field(None, max_length=200)
    font_size_base: str | None = Field(None, max_length=10)
    line_height_base: str | None = Field(None, max_length=10)
    theme_mode: ThemeMode | None = None
    custom_variables: str | None = None

    @field_validator("custom_variables")
    @classmethod
    def validate_custom_variables(cls, v: str | None) -> str | None:
        return _json_object(v)


class DesignSystemRead(TimestampedRead):
    id: int | None = None
    primary_color: str
    primary_color_light: str
    primary_color_dark: str
    secondary_color: str
    accent_color: str
    success_color: str
    warning_color: str
    error_color: str
    info_color: str
    background_primary: str
    background_secondary: str
    background_dark: str
    text_primary: str
    text_secondary: str
    text_muted: str
    font_family: str
    font_family_mono: str
    font_size_base: str
    line_height_base: str
    theme_mode: str
    custom_variables: str | None = None
    is_active: bool = True
