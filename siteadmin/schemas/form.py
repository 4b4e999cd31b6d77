from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from siteadmin.schemas.common import CTAStyle, NonEmptyStr, OptionalUrl, ReadModel, TimestampedRead

FieldType = Literal["text", "email", "phone", "textarea", "select", "checkbox", "radio", "number", "date"]
FieldWidth = Literal["full", "half", "third", "quarter"]
CaptchaType = Literal["math", "text", "image"]

# A single checkbox needs no options; these types render a list of choices
CHOICE_FIELD_TYPES = frozenset({"select", "radio"})


class FormFieldItem(BaseModel):
    """One form field; its position in the submitted list is its display order."""

    id: int | None = None  # ignored, the field list is replaced wholesale
    field_type: FieldType
    field_name: NonEmptyStr = Field(..., max_length=100)
    label: NonEmptyStr = Field(..., max_length=200)
    placeholder: str | None = Field(None, max_length=200)
    help_text: str | None = None
    is_required: bool = False
    field_width: FieldWidth = "full"
    field_options: list[str] | None = None
    is_visible: bool = True
    sort_order: int | None = None  # recomputed from list position

    @model_validator(mode="after")
    def validate_options(self) -> FormFieldItem:
        if self.field_type in CHOICE_FIELD_TYPES and not self.field_options:
            raise ValueError(f"'{self.field_type}' fields need at least one option")
        return self


def _unique_names(fields: list[FormFieldItem]) -> list[FormFieldItem]:
    seen: set[str] = set()
    for field in fields:
        if field.field_name in seen:
            raise ValueError(f"Duplicate field_name '{field.field_name}'")
        seen.add(field.field_name)
    return fields


class FormCreate(BaseModel):
    name: NonEmptyStr = Field(..., max_length=100)
    title: str | None = Field(None, max_length=200)
    subheading: str | None = None
    success_message: str = "Thank you! Your message has been sent successfully."
    error_message: str = "Sorry, there was an error. Please try again."
    cta_text: NonEmptyStr = Field("Send Message", max_length=50)
    cta_style: CTAStyle = "primary"
    cta_loading_text: str = Field("Sending...", max_length=50)
    redirect_url: OptionalUrl = None
    email_notification: bool = False
    email_recipients: str | None = None
    admin_email_subject: str = Field("New Form Submission", max_length=200)
    webhook_url: OptionalUrl = None
    enable_captcha: bool = True
    captcha_type: CaptchaType = "math"
    is_active: bool = True
    fields: list[FormFieldItem] = []

    @field_validator("fields")
    @classmethod
    def validate_fields(cls, v: list[FormFieldItem]) -> list[FormFieldItem]:
        return _unique_names(v)


class FormUpdate(BaseModel):
    id: int
    name: NonEmptyStr | None = Field(None, max_length=100)
    title: str | None = Field(None, max_length=200)
    subheading: str | None = None
    success_message: str | None = None
    error_message: str | None = None
    cta_text: NonEmptyStr | None = Field(None, max_length=50)
    cta_style: CTAStyle | None = None
    cta_loading_text: str | None = Field(None, max_length=50)
    redirect_url: OptionalUrl = None
    email_notification: bool | None = None
    email_recipients: str | None = None
    admin_email_subject: str | None = Field(None, max_length=200)
    webhook_url: OptionalUrl = None
    enable_captcha: bool | None = None
    captcha_type: CaptchaType | None = None
    is_active: bool | None = None
    fields: list[FormFieldItem] | None = None

    @field_validator("fields")
    @classmethod
    def validate_fields(cls, v: list[FormFieldItem] | None) -> list[FormFieldItem] | None:
        if v is not None:
            _unique_names(v)
        return v


class FormFieldRead(ReadModel):
    id: int
    form_id: int
    field_type: str
    field_name: str
    label: str
    placeholder: str | None = None
    help_text: str | None = None
    is_required: bool
    field_width: str
    field_options: list[str] | None = None
    is_visible: bool
    sort_order: int


class FormRead(TimestampedRead):
    id: int
    name: str
    title: str | None = None
    subheading: str | None = None
    success_message: str
    error_message: str
    cta_text: str
    cta_style: str
    cta_loading_text: str
    redirect_url: str | None = None
    email_notification: bool
    email_recipients: str | None = None
    admin_email_subject: str
    webhook_url: str | None = None
    enable_captcha: bool
    captcha_type: str
    is_active: bool
    fields: list[FormFieldRead] = []
