from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from siteadmin.schemas.common import HexColor, NonEmptyStr, ReadModel, TimestampedRead


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------

class FAQCategoryCreate(BaseModel):
    name: NonEmptyStr = Field(..., max_length=100)
    description: str | None = None
    icon: str | None = Field(None, max_length=50)
    color: HexColor = "#5243E9"
    sort_order: int | None = Field(None, ge=0)
    is_active: bool = True


class FAQCategoryUpdate(BaseModel):
    id: int
    name: NonEmptyStr | None = Field(None, max_length=100)
    description: str | None = None
    icon: str | None = Field(None, max_length=50)
    color: HexColor | None = None
    sort_order: int | None = Field(None, ge=0)
    is_active: bool | None = None


class FAQCategoryRead(TimestampedRead):
    id: int
    name: str
    description: str | None = None
    icon: str | None = None
    color: str
    sort_order: int
    is_active: bool


# ---------------------------------------------------------------------------
# FAQs
# ---------------------------------------------------------------------------

class FAQCreate(BaseModel):
    category_id: int | None = None
    question: NonEmptyStr = Field(..., max_length=300)
    answer: NonEmptyStr = Field(..., max_length=2000)
    sort_order: int | None = Field(None, ge=0)
    is_active: bool = True


class FAQUpdate(BaseModel):
    id: int
    category_id: int | None = None
    question: NonEmptyStr | None = Field(None, max_length=300)
    answer: NonEmptyStr | None = Field(None, max_length=2000)
    sort_order: int | None = Field(None, ge=0)
    is_active: bool | None = None


class FAQRead(TimestampedRead):
    id: int
    category_id: int | None = None
    question: str
    answer: str
    sort_order: int
    is_active: bool


# ---------------------------------------------------------------------------
# FAQ sections and their ordered category links
# ---------------------------------------------------------------------------

class FAQSectionCreate(BaseModel):
    name: NonEmptyStr = Field(..., max_length=100)
    heading: NonEmptyStr = Field(..., max_length=200)
    subheading: str | None = None
    search_placeholder: str = Field("Search FAQs...", max_length=100)
    show_hero_title: bool = True
    show_categories: bool = True
    background_color: HexColor = "#F6F8FC"
    is_active: bool = True


class FAQSectionUpdate(BaseModel):
    id: int
    name: NonEmptyStr | None = Field(None, max_length=100)
    heading: NonEmptyStr | None = Field(None, max_length=200)
    subheading: str | None = None
    search_placeholder: str | None = Field(None, max_length=100)
    show_hero_title: bool | None = None
    show_categories: bool | None = None
    background_color: HexColor | None = None
    is_active: bool | None = None


class FAQSectionCategoryRead(ReadModel):
    id: int
    faq_section_id: int
    category_id: int
    sort_order: int
    category: FAQCategoryRead | None = None


class FAQSectionRead(TimestampedRead):
    id: int
    name: str
    heading: str
    subheading: str | None = None
    search_placeholder: str
    show_hero_title: bool
    show_categories: bool
    background_color: str
    is_active: bool
    categories: list[FAQSectionCategoryRead] = []


class FAQSectionCategoriesSet(BaseModel):
    faq_section_id: int
    category_ids: list[int]

    @field_validator("category_ids")
    @classmethod
    def validate_unique(cls, v: list[int]) -> list[int]:
        if len(set(v)) != len(v):
            raise ValueError("category_ids must not contain duplicates")
        return v
