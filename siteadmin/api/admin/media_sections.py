from __future__ import annotations

from siteadmin.api.admin.crud import build_crud_router
from siteadmin.schemas.media_section import MediaSectionCreate, MediaSectionRead, MediaSectionUpdate
from siteadmin.services import resources

router = build_crud_router(
    resources.media_sections,
    read_schema=MediaSectionRead,
    create_schema=MediaSectionCreate,
    update_schema=MediaSectionUpdate,
)
