from __future__ import annotations

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from siteadmin.models.base import Base, IdMixin, TimestampMixin


class SiteSettings(Base, IdMixin, TimestampMixin):
    """Singleton site-wide SEO, branding and analytics settings."""

    __tablename__ = "site_settings"

    site_name: Mapped[str] = mapped_column(String(100), default="My Site")
    base_url: Mapped[str | None] = mapped_column(String(500))
    default_meta_title: Mapped[str | None] = mapped_column(String(200))
    default_meta_description: Mapped[str | None] = mapped_column(String(500))
    og_image_url: Mapped[str | None] = mapped_column(String(500))
    logo_url: Mapped[str | None] = mapped_column(String(500))
    favicon_url: Mapped[str | None] = mapped_column(String(500))
    robots_txt: Mapped[str | None] = mapped_column(Text)

    ga_measurement_id: Mapped[str | None] = mapped_column(String(20))
    gtm_container_id: Mapped[str | None] = mapped_column(String(20))
    gtm_enabled: Mapped[bool] = mapped_column(Boolean, default=False)

    company_email: Mapped[str | None] = mapped_column(String(200))
    company_phone: Mapped[str | None] = mapped_column(String(50))
    footer_copyright_message: Mapped[str | None] = mapped_column(String(300))
