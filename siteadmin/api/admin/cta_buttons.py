from __future__ import annotations

from siteadmin.api.admin.crud import build_crud_router
from siteadmin.schemas.cta import CTACreate, CTARead, CTAUpdate
from siteadmin.services import resources

router = build_crud_router(
    resources.cta_buttons,
    read_schema=CTARead,
    create_schema=CTACreate,
    update_schema=CTAUpdate,
)
