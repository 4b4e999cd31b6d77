"""Generic persistence for admin resources.

A :class:`ResourceService` is bound to one model and implements the handler
contract shared by every ``/api/admin/<resource>`` endpoint:

* list / get / create / update / delete / reorder, one commit per mutation;
* embedded child collections are replaced wholesale and renumbered from
  body order, never diffed;
* deleting a record never renumbers its siblings, the client does that
  with a follow-up reorder;
* database failures are rolled back, logged and surfaced as ``StoreError``.

Services are stateless; the session is passed into every call.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel
from sqlalchemy import delete as sa_delete
from sqlalchemy import func, select
from sqlalchemy import update as sa_update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from siteadmin.core.errors import AdminError, FieldProblem, NotFoundError, StoreError, ValidationError
from siteadmin.core.metrics import resource_operations_total
from siteadmin.core.ordering import SORT_ATTR, renumber
from siteadmin.services.design_tokens import DesignTokens

logger = logging.getLogger(__name__)

UNSCOPED = object()


@dataclass(frozen=True)
class ChildCollection:
    """An ordered child list embedded in its parent's request body."""

    attr: str  # relationship on the parent and key in the body
    model: type
    parent_key: str


class ResourceService:
    def __init__(
        self,
        model: type,
        name: str,
        label: str,
        *,
        scope_field: str | None = None,
        children: Sequence[ChildCollection] = (),
        references: dict[str, type] | None = None,
        token_defaults: Callable[[DesignTokens], dict[str, Any]] | None = None,
        nullify_on_delete: Sequence[Any] = (),
        delete_dependents: Sequence[Any] = (),
    ):
        self.model = model
        self.name = name
        self.label = label
        self.scope_field = scope_field
        self.children = tuple(children)
        self.references = references or {}
        self.token_defaults = token_defaults
        # Columns pointing at this model, cleared or deleted before the record goes
        self.nullify_on_delete = tuple(nullify_on_delete)
        self.delete_dependents = tuple(delete_dependents)

    @property
    def orderable(self) -> bool:
        return hasattr(self.model, SORT_ATTR)

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------

    def _count(self, operation: str, outcome: str) -> None:
        resource_operations_total.labels(resource=self.name, operation=operation, outcome=outcome).inc()

    @asynccontextmanager
    async def operation(self, db: AsyncSession, operation: str):
        """Wrap one handler call: metrics, rollback and store-error mapping."""
        try:
            yield
        except SQLAlchemyError as exc:
            await db.rollback()
            self._count(operation, "store_error")
            logger.exception(
                "%s %s failed",
                self.label,
                operation,
                extra={"resource": self.name, "operation": operation},
            )
            raise StoreError() from exc
        except AdminError as exc:
            self._count(operation, exc.code.lower())
            raise
        self._count(operation, "success")

    def _log(self, operation: str, record_id: Any) -> None:
        logger.info(
            "%s %s %s",
            self.label,
            record_id,
            operation,
            extra={"resource": self.name, "operation": operation, "record_id": record_id},
        )

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------

    def _scope_clause(self, scope: Any):
        column = getattr(self.model, self.scope_field)
        if scope is None:
            return column.is_(None)
        return column == scope

    def _ordering(self) -> tuple:
        if self.orderable:
            return (self.model.sort_order, self.model.id)
        return (self.model.created_at.desc(), self.model.id.desc())

    def _select(self):
        return select(self.model).execution_options(populate_existing=True)

    async def _fetch_all(self, db: AsyncSession, scope: Any = UNSCOPED) -> list:
        query = self._select()
        if self.scope_field and scope is not UNSCOPED:
            query = query.where(self._scope_clause(scope))
        result = await db.execute(query.order_by(*self._ordering()))
        return list(result.scalars().all())

    async def _fetch(self, db: AsyncSession, record_id: int):
        result = await db.execute(self._select().where(self.model.id == record_id))
        record = result.scalar_one_or_none()
        if record is None:
            raise NotFoundError(self.label, record_id)
        return record

    async def _count_siblings(self, db: AsyncSession, scope: Any) -> int:
        query = select(func.count()).select_from(self.model)
        if self.scope_field:
            query = query.where(self._scope_clause(scope))
        return (await db.execute(query)).scalar_one()

    # ------------------------------------------------------------------
    # Value checks
    # ------------------------------------------------------------------

    def _columns(self, values: dict[str, Any]) -> dict[str, Any]:
        table = self.model.__table__
        return {k: v for k, v in values.items() if k in table.c and k != "id"}

    def _check_nullable(self, values: dict[str, Any]) -> None:
        table = self.model.__table__
        problems = [
            FieldProblem(key, "must not be null")
            for key, value in values.items()
            if value is None and key in table.c and not table.c[key].nullable
        ]
        if problems:
            raise ValidationError(problems)

    async def _check_references(self, db: AsyncSession, values: dict[str, Any]) -> None:
        problems = []
        for key, target in self.references.items():
            ref_id = values.get(key)
            if ref_id is None:
                continue
            if await db.get(target, ref_id) is None:
                problems.append(FieldProblem(key, f"{target.__name__} {ref_id} does not exist"))
        if problems:
            raise ValidationError(problems)

    def _pop_children(self, values: dict[str, Any]) -> list[tuple[ChildCollection, list[dict]]]:
        popped = []
        for spec in self.children:
            items = values.pop(spec.attr, None)
            if items is not None:
                popped.append((spec, items))
        return popped

    @staticmethod
    def _build_children(spec: ChildCollection, items: list[dict]) -> list:
        columns = spec.model.__table__.c
        built = []
        for item in renumber(dict(item) for item in items):
            values = {k: v for k, v in item.items() if k in columns and k not in ("id", spec.parent_key)}
            built.append(spec.model(**values))
        return built

    async def _check_children(self, db: AsyncSession, children: list[tuple[ChildCollection, list[dict]]]) -> None:
        """Referential checks on embedded children; none by default."""

    async def _before_create(self, db: AsyncSession, values: dict[str, Any]) -> None:
        """Runs after every check passed, inside the create transaction."""

    async def _check_update(self, db: AsyncSession, record, changes: dict[str, Any]) -> None:
        """Cross-field checks on the record as it will look after ``changes``; none by default."""

    async def _replace_children(self, db: AsyncSession, record, spec: ChildCollection, items: list[dict]) -> None:
        collection = getattr(record, spec.attr)
        collection.clear()
        # Orphans must be gone before the replacements hit unique constraints
        await db.flush()
        collection.extend(self._build_children(spec, items))

    # ------------------------------------------------------------------
    # Handler contract
    # ------------------------------------------------------------------

    async def list(self, db: AsyncSession, scope: Any = UNSCOPED) -> list:
        async with self.operation(db, "list"):
            return await self._fetch_all(db, scope)

    async def get(self, db: AsyncSession, record_id: int):
        async with self.operation(db, "get"):
            return await self._fetch(db, record_id)

    async def create(self, db: AsyncSession, data: BaseModel, tokens: DesignTokens | None = None):
        async with self.operation(db, "create"):
            values = data.model_dump()
            values.pop("id", None)
            children = self._pop_children(values)
            if self.token_defaults and tokens is not None:
                for key, default in self.token_defaults(tokens).items():
                    if values.get(key) is None:
                        values[key] = default
            if self.orderable and values.get(SORT_ATTR) is None:
                scope = values.get(self.scope_field) if self.scope_field else None
                values[SORT_ATTR] = await self._count_siblings(db, scope)
            self._check_nullable(values)
            await self._check_references(db, values)
            await self._check_children(db, children)
            await self._before_create(db, values)

            record = self.model(**self._columns(values))
            for spec, items in children:
                setattr(record, spec.attr, self._build_children(spec, items))
            db.add(record)
            await db.commit()
            self._log("created", record.id)
            return await self._fetch(db, record.id)

    async def update(self, db: AsyncSession, record_id: int, data: BaseModel):
        async with self.operation(db, "update"):
            changes = data.model_dump(exclude_unset=True)
            changes.pop("id", None)
            record = await self._fetch(db, record_id)
            children = self._pop_children(changes)
            self._check_nullable(changes)
            await self._check_references(db, changes)
            await self._check_children(db, children)
            await self._check_update(db, record, changes)

            if (
                self.orderable
                and self.scope_field in changes
                and SORT_ATTR not in changes
                and changes[self.scope_field] != getattr(record, self.scope_field)
            ):
                # Moving to another scope appends to the end of that collection
                changes[SORT_ATTR] = await self._count_siblings(db, changes[self.scope_field])

            for key, value in self._columns(changes).items():
                setattr(record, key, value)
            for spec, items in children:
                await self._replace_children(db, record, spec, items)
            await db.commit()
            self._log("updated", record_id)
            return await self._fetch(db, record_id)

    async def delete(self, db: AsyncSession, record_id: int) -> None:
        async with self.operation(db, "delete"):
            record = await self._fetch(db, record_id)
            for column in self.nullify_on_delete:
                await db.execute(
                    sa_update(column.class_).where(column == record_id).values({column.key: None})
                )
            for column in self.delete_dependents:
                await db.execute(sa_delete(column.class_).where(column == record_id))
            await db.delete(record)
            await db.commit()
            self._log("deleted", record_id)

    async def reorder(self, db: AsyncSession, ids: list[int], scope: Any = UNSCOPED) -> list:
        """Persist a client-renumbered collection: ``sort_order = position``."""
        async with self.operation(db, "reorder"):
            if not self.orderable:
                raise ValidationError.for_field("ids", f"{self.label} records have no display order")
            if self.scope_field and scope is UNSCOPED:
                raise ValidationError.for_field(self.scope_field, "is required to reorder")
            if len(set(ids)) != len(ids):
                raise ValidationError.for_field("ids", "must not contain duplicates")

            records = {record.id: record for record in await self._fetch_all(db, scope)}
            if set(ids) != set(records):
                missing = sorted(set(records) - set(ids))
                unknown = sorted(set(ids) - set(records))
                raise ValidationError.for_field(
                    "ids",
                    f"must list every member exactly once (missing {missing}, unknown {unknown})",
                )
            renumber(records[record_id] for record_id in ids)
            await db.commit()
            logger.info(
                "%s collection reordered (%d items)",
                self.label,
                len(ids),
                extra={"resource": self.name, "operation": "reorder"},
            )
            return await self._fetch_all(db, scope)
