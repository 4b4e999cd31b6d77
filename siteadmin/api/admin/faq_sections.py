from __future__ import annotations

from siteadmin.api.admin.crud import build_crud_router
from siteadmin.schemas.faq import FAQSectionCreate, FAQSectionRead, FAQSectionUpdate
from siteadmin.services import resources

router = build_crud_router(
    resources.faq_sections,
    read_schema=FAQSectionRead,
    create_schema=FAQSectionCreate,
    update_schema=FAQSectionUpdate,
)
