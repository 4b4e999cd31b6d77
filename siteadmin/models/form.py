from __future__ import annotations

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from siteadmin.models.base import Base, IdMixin, OrderableMixin, TimestampMixin


class Form(Base, IdMixin, TimestampMixin):
    __tablename__ = "forms"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    title: Mapped[str | None] = mapped_column(String(200))
    subheading: Mapped[str | None] = mapped_column(Text)
    success_message: Mapped[str] = mapped_column(
        Text, default="Thank you! Your message has been sent successfully."
    )
    error_message: Mapped[str] = mapped_column(
        Text, default="Sorry, there was an error. Please try again."
    )
    cta_text: Mapped[str] = mapped_column(String(50), default="Send Message")
    cta_style: Mapped[str] = mapped_column(String(20), default="primary")
    cta_loading_text: Mapped[str] = mapped_column(String(50), default="Sending...")
    redirect_url: Mapped[str | None] = mapped_column(String(500))
    email_notification: Mapped[bool] = mapped_column(Boolean, default=False)
    email_recipients: Mapped[str | None] = mapped_column(Text)  # comma separated
    admin_email_subject: Mapped[str] = mapped_column(String(200), default="New Form Submission")
    webhook_url: Mapped[str | None] = mapped_column(String(500))
    enable_captcha: Mapped[bool] = mapped_column(Boolean, default=True)
    captcha_type: Mapped[str] = mapped_column(String(20), default="math")  # math/text/image
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    fields = relationship(
        "FormField",
        back_populates="form",
        cascade="all, delete-orphan",
        order_by="FormField.sort_order",
        lazy="selectin",
    )


class FormField(Base, IdMixin, OrderableMixin):
    __tablename__ = "form_fields"

    form_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("forms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    field_type: Mapped[str] = mapped_column(String(20), nullable=False)
    field_name: Mapped[str] = mapped_column(String(100), nullable=False)
    label: Mapped[str] = mapped_column(String(200), nullable=False)
    placeholder: Mapped[str | None] = mapped_column(String(200))
    help_text: Mapped[str | None] = mapped_column(Text)
    is_required: Mapped[bool] = mapped_column(Boolean, default=False)
    field_width: Mapped[str] = mapped_column(String(10), default="full")  # full/half/third/quarter
    field_options: Mapped[list | None] = mapped_column(JSON)  # choices for select/radio/checkbox
    is_visible: Mapped[bool] = mapped_column(Boolean, default=True)

    form = relationship("Form", back_populates="fields")
