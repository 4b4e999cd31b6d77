from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from siteadmin.api.admin.crud import serializer
from siteadmin.database import get_db
from siteadmin.schemas.common import ok
from siteadmin.schemas.site_settings import SiteSettingsRead, SiteSettingsUpdate
from siteadmin.services import resources

router = APIRouter(prefix="/site-settings", tags=["site-settings"])

service = resources.site_settings
_dump = serializer(SiteSettingsRead)


@router.get("")
async def get_site_settings(db: AsyncSession = Depends(get_db)):
    return ok(_dump(await service.current(db)))


@router.put("")
async def update_site_settings(body: SiteSettingsUpdate, db: AsyncSession = Depends(get_db)):
    record = await service.upsert(db, body)
    return ok(_dump(record), "Settings saved")
