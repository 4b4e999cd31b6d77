from __future__ import annotations

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from siteadmin.models.base import Base, IdMixin, TimestampMixin


class DesignSystem(Base, IdMixin, TimestampMixin):
    """Design tokens for the public site. Only one row is active at a time."""

    __tablename__ = "design_systems"

    primary_color: Mapped[str] = mapped_column(String(20), default="#5243E9")
    primary_color_light: Mapped[str] = mapped_column(String(20), default="#7C73ED")
    primary_color_dark: Mapped[str] = mapped_column(String(20), default="#3A2FD1")
    secondary_color: Mapped[str] = mapped_column(String(20), default="#7C3AED")
    accent_color: Mapped[str] = mapped_column(String(20), default="#06B6D4")

    success_color: Mapped[str] = mapped_column(String(20), default="#10B981")
    warning_color: Mapped[str] = mapped_column(String(20), default="#F59E0B")
    error_color: Mapped[str] = mapped_column(String(20), default="#EF4444")
    info_color: Mapped[str] = mapped_column(String(20), default="#3B82F6")

    background_primary: Mapped[str] = mapped_column(String(20), default="#FFFFFF")
    background_secondary: Mapped[str] = mapped_column(String(20), default="#F6F8FC")
    background_dark: Mapped[str] = mapped_column(String(20), default="#0F1A2A")

    text_primary: Mapped[str] = mapped_column(String(20), default="#1F2937")
    text_secondary: Mapped[str] = mapped_column(String(20), default="#6B7280")
    text_muted: Mapped[str] = mapped_column(String(20), default="#9CA3AF")

    font_family: Mapped[str] = mapped_column(String(200), default="Manrope, sans-serif")
    font_family_mono: Mapped[str] = mapped_column(String(200), default="IBM Plex Mono, monospace")
    font_size_base: Mapped[str] = mapped_column(String(10), default="16px")
    line_height_base: Mapped[str] = mapped_column(String(10), default="1.6")

    theme_mode: Mapped[str] = mapped_column(String(10), default="light")  # light/dark/auto
    custom_variables: Mapped[str | None] = mapped_column(Text)  # JSON string
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
