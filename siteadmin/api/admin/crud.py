"""Router factory for the admin CRUD surface shared by every resource.

    GET    /<resource>            list (scoped resources accept ?<scope>=)
    GET    /<resource>/{id}       one record
    POST   /<resource>            create, 201
    PUT    /<resource>            update, id in the body
    PUT    /<resource>/reorder    persist a renumbered collection
    DELETE /<resource>?id=        delete

Request schemas are bound at runtime, so this module keeps real annotation
objects for FastAPI to inspect.
"""

from typing import Any

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from siteadmin.api.deps import get_design_tokens
from siteadmin.core.errors import ValidationError
from siteadmin.database import get_db
from siteadmin.schemas.common import ReorderRequest, ok
from siteadmin.services.design_tokens import DesignTokens
from siteadmin.services.resource_service import UNSCOPED, ResourceService

ALL_ROUTES = ("list", "get", "create", "update", "delete", "reorder")


def coerce_scope(field: str, value: Any) -> Any:
    """Scope value from a query string or JSON body: an integer id or null."""
    if value is None or value in ("", "null"):
        return None
    if isinstance(value, bool):
        raise ValidationError.for_field(field, "must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError.for_field(field, "must be an integer") from None


def serializer(read_schema: type[BaseModel]):
    def dump(record) -> dict:
        return read_schema.model_validate(record).model_dump(mode="json")

    return dump


def build_crud_router(
    service: ResourceService,
    *,
    read_schema: type[BaseModel],
    create_schema: type[BaseModel] | None = None,
    update_schema: type[BaseModel] | None = None,
    routes: tuple[str, ...] = ALL_ROUTES,
) -> APIRouter:
    router = APIRouter(prefix=f"/{service.name}", tags=[service.name])
    dump = serializer(read_schema)

    if "list" in routes:

        @router.get("")
        async def list_records(request: Request, db: AsyncSession = Depends(get_db)):
            scope = UNSCOPED
            if service.scope_field and service.scope_field in request.query_params:
                scope = coerce_scope(service.scope_field, request.query_params[service.scope_field])
            records = await service.list(db, scope)
            return ok([dump(r) for r in records])

    if "reorder" in routes and service.orderable:

        @router.put("/reorder")
        async def reorder_records(body: ReorderRequest, db: AsyncSession = Depends(get_db)):
            scope = UNSCOPED
            extra = body.model_extra or {}
            if service.scope_field and service.scope_field in extra:
                scope = coerce_scope(service.scope_field, extra[service.scope_field])
            records = await service.reorder(db, body.ids, scope)
            return ok([dump(r) for r in records], "Order saved")

    if "get" in routes:

        @router.get("/{record_id}")
        async def get_record(record_id: int, db: AsyncSession = Depends(get_db)):
            return ok(dump(await service.get(db, record_id)))

    if "create" in routes and create_schema is not None:
        if service.token_defaults is not None:

            @router.post("", status_code=201)
            async def create_record(
                body: create_schema,
                db: AsyncSession = Depends(get_db),
                tokens: DesignTokens = Depends(get_design_tokens),
            ):
                record = await service.create(db, body, tokens)
                return ok(dump(record), f"{service.label} created")

        else:

            @router.post("", status_code=201)
            async def create_record(body: create_schema, db: AsyncSession = Depends(get_db)):
                record = await service.create(db, body)
                return ok(dump(record), f"{service.label} created")

    if "update" in routes and update_schema is not None:

        @router.put("")
        async def update_record(body: update_schema, db: AsyncSession = Depends(get_db)):
            record = await service.update(db, body.id, body)
            return ok(dump(record), f"{service.label} updated")

    if "delete" in routes:

        @router.delete("")
        async def delete_record(id: int = Query(...), db: AsyncSession = Depends(get_db)):
            await service.delete(db, id)
            return ok(message=f"{service.label} deleted")

    return router
