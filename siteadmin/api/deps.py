from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from siteadmin.database import get_db
from siteadmin.services.design_tokens import DesignTokens, load_design_tokens


async def get_design_tokens(db: AsyncSession = Depends(get_db)) -> DesignTokens:
    """Tokens of the active design system, read once per request."""
    return await load_design_tokens(db)
