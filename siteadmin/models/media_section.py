from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from siteadmin.models.base import Base, IdMixin, OrderableMixin, TimestampMixin


class MediaSection(Base, IdMixin, TimestampMixin):
    __tablename__ = "media_sections"

    headline: Mapped[str] = mapped_column(String(200), nullable=False)
    subheading: Mapped[str | None] = mapped_column(Text)
    badge_text: Mapped[str | None] = mapped_column(String(100))
    badge_color: Mapped[str] = mapped_column(String(20), nullable=False)
    show_badge: Mapped[bool] = mapped_column(Boolean, default=True)
    layout_type: Mapped[str] = mapped_column(String(20), default="media_right")
    alignment: Mapped[str] = mapped_column(String(10), default="left")
    media_type: Mapped[str] = mapped_column(String(10), default="image")
    media_url: Mapped[str | None] = mapped_column(String(500))
    media_alt: Mapped[str | None] = mapped_column(String(200))
    show_cta_button: Mapped[bool] = mapped_column(Boolean, default=False)
    cta_text: Mapped[str | None] = mapped_column(String(50))
    cta_url: Mapped[str | None] = mapped_column(String(500))
    cta_style: Mapped[str] = mapped_column(String(20), default="primary")
    background_color: Mapped[str] = mapped_column(String(20), nullable=False)
    text_color: Mapped[str] = mapped_column(String(20), nullable=False)
    padding_top: Mapped[int] = mapped_column(Integer, default=80)
    padding_bottom: Mapped[int] = mapped_column(Integer, default=80)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    features = relationship(
        "MediaSectionFeature",
        back_populates="media_section",
        cascade="all, delete-orphan",
        order_by="MediaSectionFeature.sort_order",
        lazy="selectin",
    )


class MediaSectionFeature(Base, IdMixin, OrderableMixin):
    __tablename__ = "media_section_features"

    media_section_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("media_sections.id", ondelete="CASCADE"), nullable=False, index=True
    )
    icon: Mapped[str] = mapped_column(String(50), default="MessageSquare")
    label: Mapped[str] = mapped_column(String(100), nullable=False)
    color: Mapped[str] = mapped_column(String(20), default="#5243E9")
    is_visible: Mapped[bool] = mapped_column(Boolean, default=True)

    media_section = relationship("MediaSection", back_populates="features")
