from __future__ import annotations

from siteadmin.api.admin.crud import build_crud_router
from siteadmin.schemas.faq import FAQCategoryCreate, FAQCategoryRead, FAQCategoryUpdate
from siteadmin.services import resources

router = build_crud_router(
    resources.faq_categories,
    read_schema=FAQCategoryRead,
    create_schema=FAQCategoryCreate,
    update_schema=FAQCategoryUpdate,
)
