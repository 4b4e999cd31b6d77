"""Header configuration: generic CRUD plus single-CTA actions on PUT.

PUT accepts either a full update (``{"id": 1, "cta_buttons": [...]}``) or an
action body (``{"action": "add_cta", "cta_id": 3}``) applied to the active
configuration.
"""

from __future__ import annotations

from typing import Any

from fastapi import Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from siteadmin.api.admin.crud import build_crud_router, serializer
from siteadmin.core.validation import validate
from siteadmin.database import get_db
from siteadmin.schemas.common import ok
from siteadmin.schemas.header import HeaderAction, HeaderConfigCreate, HeaderConfigRead, HeaderConfigUpdate
from siteadmin.services import resources

service = resources.header_config
_dump = serializer(HeaderConfigRead)

router = build_crud_router(
    service,
    read_schema=HeaderConfigRead,
    create_schema=HeaderConfigCreate,
    routes=("list", "get", "create", "delete"),
)


@router.put("")
async def update_header_config(body: dict[str, Any] = Body(...), db: AsyncSession = Depends(get_db)):
    if "action" in body:
        action = validate(HeaderAction, body).unwrap()
        config = await service.apply_action(db, action)
        return ok(_dump(config), "Header updated")

    data = validate(HeaderConfigUpdate, body).unwrap()
    config = await service.update(db, data.id, data)
    return ok(_dump(config), "Header configuration updated")
