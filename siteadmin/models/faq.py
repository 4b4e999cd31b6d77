from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from siteadmin.models.base import Base, IdMixin, OrderableMixin, TimestampMixin


class FAQCategory(Base, IdMixin, OrderableMixin, TimestampMixin):
    __tablename__ = "faq_categories"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    icon: Mapped[str | None] = mapped_column(String(50))
    color: Mapped[str] = mapped_column(String(20), default="#5243E9")
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class FAQ(Base, IdMixin, OrderableMixin, TimestampMixin):
    __tablename__ = "faqs"

    # Ordering is scoped per category; uncategorised FAQs form their own group
    category_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("faq_categories.id", ondelete="SET NULL"), index=True
    )
    question: Mapped[str] = mapped_column(String(300), nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class FAQSection(Base, IdMixin, TimestampMixin):
    __tablename__ = "faq_sections"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    heading: Mapped[str] = mapped_column(String(200), nullable=False)
    subheading: Mapped[str | None] = mapped_column(Text)
    search_placeholder: Mapped[str] = mapped_column(String(100), default="Search FAQs...")
    show_hero_title: Mapped[bool] = mapped_column(Boolean, default=True)
    show_categories: Mapped[bool] = mapped_column(Boolean, default=True)
    background_color: Mapped[str] = mapped_column(String(20), default="#F6F8FC")
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    categories = relationship(
        "FAQSectionCategory",
        back_populates="faq_section",
        cascade="all, delete-orphan",
        order_by="FAQSectionCategory.sort_order",
        lazy="selectin",
    )


class FAQSectionCategory(Base, IdMixin, OrderableMixin):
    __tablename__ = "faq_section_categories"
    __table_args__ = (
        UniqueConstraint("faq_section_id", "category_id", name="uq_faq_section_categories"),
    )

    faq_section_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("faq_sections.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("faq_categories.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    faq_section = relationship("FAQSection", back_populates="categories")
    category = relationship("FAQCategory", lazy="selectin")
