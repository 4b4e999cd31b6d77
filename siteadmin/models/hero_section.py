from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from siteadmin.models.base import Base, IdMixin, TimestampMixin


class HeroSection(Base, IdMixin, TimestampMixin):
    __tablename__ = "hero_sections"

    name: Mapped[str] = mapped_column(String(100), default="Untitled Hero Section")
    layout_type: Mapped[str] = mapped_column(String(20), default="split")  # split/centered/overlay
    section_height: Mapped[str] = mapped_column(String(50), default="100vh")
    tagline: Mapped[str | None] = mapped_column(String(100))
    headline: Mapped[str] = mapped_column(String(200), nullable=False)
    subheading: Mapped[str | None] = mapped_column(Text)
    text_alignment: Mapped[str] = mapped_column(String(10), default="left")

    cta_primary_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("ctas.id", ondelete="SET NULL")
    )
    cta_secondary_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("ctas.id", ondelete="SET NULL")
    )

    media_url: Mapped[str | None] = mapped_column(String(500))
    media_type: Mapped[str] = mapped_column(String(20), default="image")
    media_alt: Mapped[str | None] = mapped_column(String(200))
    media_position: Mapped[str] = mapped_column(String(10), default="right")
    background_type: Mapped[str] = mapped_column(String(20), default="color")
    background_value: Mapped[str] = mapped_column(String(500), default="#FFFFFF")

    # Colours default to the active design tokens at creation time
    tagline_color: Mapped[str] = mapped_column(String(20), nullable=False)
    headline_color: Mapped[str] = mapped_column(String(20), nullable=False)
    subheading_color: Mapped[str] = mapped_column(String(20), nullable=False)
    cta_primary_bg_color: Mapped[str] = mapped_column(String(20), nullable=False)
    cta_primary_text_color: Mapped[str] = mapped_column(String(20), default="#FFFFFF")

    padding_top: Mapped[int] = mapped_column(Integer, default=80)
    padding_bottom: Mapped[int] = mapped_column(Integer, default=80)
    visible: Mapped[bool] = mapped_column(Boolean, default=True)
