from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from siteadmin.models.base import Base, IdMixin, OrderableMixin, TimestampMixin


class HeaderConfig(Base, IdMixin, TimestampMixin):
    """Site header configuration. Only one row is active at a time."""

    __tablename__ = "header_configs"

    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    cta_buttons = relationship(
        "HeaderCTA",
        back_populates="header_config",
        cascade="all, delete-orphan",
        order_by="HeaderCTA.sort_order",
        lazy="selectin",
    )


class HeaderCTA(Base, IdMixin, OrderableMixin):
    __tablename__ = "header_ctas"
    __table_args__ = (
        UniqueConstraint("header_config_id", "cta_id", name="uq_header_ctas_config_cta"),
    )

    header_config_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("header_configs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    cta_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("ctas.id", ondelete="CASCADE"), nullable=False
    )
    is_visible: Mapped[bool] = mapped_column(Boolean, default=True)

    header_config = relationship("HeaderConfig", back_populates="cta_buttons")
    cta = relationship("CTA", lazy="selectin")
