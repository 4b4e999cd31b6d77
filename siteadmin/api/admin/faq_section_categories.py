from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from siteadmin.api.admin.crud import coerce_scope, serializer
from siteadmin.database import get_db
from siteadmin.schemas.common import ReorderRequest, ok
from siteadmin.schemas.faq import FAQSectionCategoriesSet, FAQSectionCategoryRead
from siteadmin.services import resources
from siteadmin.services.resource_service import UNSCOPED

router = APIRouter(prefix="/faq-section-categories", tags=["faq-section-categories"])

service = resources.faq_section_categories
_dump = serializer(FAQSectionCategoryRead)


@router.get("")
async def list_section_categories(faq_section_id: int = Query(...), db: AsyncSession = Depends(get_db)):
    links = await service.list(db, faq_section_id)
    return ok([_dump(link) for link in links])


@router.post("", status_code=201)
async def set_section_categories(body: FAQSectionCategoriesSet, db: AsyncSession = Depends(get_db)):
    links = await service.replace(db, body.faq_section_id, body.category_ids)
    return ok([_dump(link) for link in links], "Section categories saved")


@router.put("/reorder")
async def reorder_section_categories(body: ReorderRequest, db: AsyncSession = Depends(get_db)):
    extra = body.model_extra or {}
    scope = UNSCOPED
    if "faq_section_id" in extra:
        scope = coerce_scope("faq_section_id", extra["faq_section_id"])
    links = await service.reorder(db, body.ids, scope)
    return ok([_dump(link) for link in links], "Order saved")


@router.delete("")
async def clear_section_categories(faq_section_id: int = Query(...), db: AsyncSession = Depends(get_db)):
    await service.clear(db, faq_section_id)
    return ok(message="Section categories removed")
