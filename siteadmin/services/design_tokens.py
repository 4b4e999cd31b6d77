"""Immutable snapshot of the active design system.

Handlers that need theme defaults (hero and media section colours) receive a
``DesignTokens`` value through a FastAPI dependency instead of consulting
shared state, so a request always sees one consistent set of tokens.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from siteadmin.models.design_system import DesignSystem


@dataclass(frozen=True)
class DesignTokens:
    primary_color: str = "#5243E9"
    primary_color_light: str = "#7C73ED"
    primary_color_dark: str = "#3A2FD1"
    secondary_color: str = "#7C3AED"
    accent_color: str = "#06B6D4"
    success_color: str = "#10B981"
    warning_color: str = "#F59E0B"
    error_color: str = "#EF4444"
    info_color: str = "#3B82F6"
    background_primary: str = "#FFFFFF"
    background_secondary: str = "#F6F8FC"
    background_dark: str = "#0F1A2A"
    text_primary: str = "#1F2937"
    text_secondary: str = "#6B7280"
    text_muted: str = "#9CA3AF"
    font_family: str = "Manrope, sans-serif"
    font_family_mono: str = "IBM Plex Mono, monospace"
    font_size_base: str = "16px"
    line_height_base: str = "1.6"
    theme_mode: str = "light"

    @classmethod
    def from_record(cls, record: DesignSystem | None) -> DesignTokens:
        if record is None:
            return cls()
        values = {}
        for f in fields(cls):
            value = getattr(record, f.name, None)
            if value is not None:
                values[f.name] = value
        return cls(**values)

    def hero_defaults(self) -> dict[str, str]:
        return {
            "tagline_color": self.primary_color,
            "headline_color": self.text_primary,
            "subheading_color": self.text_secondary,
            "cta_primary_bg_color": self.primary_color,
        }

    def media_section_defaults(self) -> dict[str, str]:
        return {
            "badge_color": self.primary_color,
            "background_color": self.background_primary,
            "text_color": self.text_primary,
        }


async def get_active_design_system(db: AsyncSession) -> DesignSystem | None:
    result = await db.execute(
        select(DesignSystem)
        .where(DesignSystem.is_active.is_(True))
        .order_by(DesignSystem.id.desc())
        .limit(1)
    )
    return result.scalar_one_or_none()


async def load_design_tokens(db: AsyncSession) -> DesignTokens:
    return DesignTokens.from_record(await get_active_design_system(db))
