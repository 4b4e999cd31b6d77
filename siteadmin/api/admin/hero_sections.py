from __future__ import annotations

from siteadmin.api.admin.crud import build_crud_router
from siteadmin.schemas.hero_section import HeroSectionCreate, HeroSectionRead, HeroSectionUpdate
from siteadmin.services import resources

router = build_crud_router(
    resources.hero_sections,
    read_schema=HeroSectionRead,
    create_schema=HeroSectionCreate,
    update_schema=HeroSectionUpdate,
)
