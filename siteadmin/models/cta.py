from __future__ import annotations

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from siteadmin.models.base import Base, IdMixin, TimestampMixin


class CTA(Base, IdMixin, TimestampMixin):
    __tablename__ = "ctas"

    text: Mapped[str] = mapped_column(String(50), nullable=False)
    url: Mapped[str] = mapped_column(String(500), nullable=False)
    icon: Mapped[str | None] = mapped_column(String(50))
    style: Mapped[str] = mapped_column(String(20), default="primary")  # primary/secondary/accent/...
    target: Mapped[str] = mapped_column(String(10), default="_self")  # _self/_blank
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
