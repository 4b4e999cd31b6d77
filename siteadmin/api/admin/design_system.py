from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from siteadmin.api.admin.crud import serializer
from siteadmin.api.deps import get_design_tokens
from siteadmin.database import get_db
from siteadmin.schemas.common import ok
from siteadmin.schemas.design_system import DesignSystemRead, DesignSystemWrite
from siteadmin.services import resources
from siteadmin.services.design_tokens import DesignTokens

router = APIRouter(prefix="/design-system", tags=["design-system"])

service = resources.design_system
_dump = serializer(DesignSystemRead)


@router.get("")
async def get_design_system(db: AsyncSession = Depends(get_db)):
    record = await service.current(db)
    if record is None:
        # Nothing saved yet: report the built-in tokens
        return ok(DesignSystemRead(**asdict(DesignTokens())).model_dump(mode="json"))
    return ok(_dump(record))


@router.get("/tokens")
async def get_tokens(tokens: DesignTokens = Depends(get_design_tokens)):
    return ok(asdict(tokens))


async def _save(body: DesignSystemWrite, db: AsyncSession):
    record = await service.upsert(db, body)
    return ok(_dump(record), "Design system saved")


@router.post("")
async def create_design_system(body: DesignSystemWrite, db: AsyncSession = Depends(get_db)):
    return await _save(body, db)


@router.put("")
async def update_design_system(body: DesignSystemWrite, db: AsyncSession = Depends(get_db)):
    return await _save(body, db)
