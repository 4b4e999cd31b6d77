from __future__ import annotations

from siteadmin.api.admin.crud import build_crud_router
from siteadmin.schemas.faq import FAQCreate, FAQRead, FAQUpdate
from siteadmin.services import resources

# Ordered per category: GET ?category_id=, PUT /reorder {"ids": [...], "category_id": ...}
router = build_crud_router(
    resources.faqs,
    read_schema=FAQRead,
    create_schema=FAQCreate,
    update_schema=FAQUpdate,
)
