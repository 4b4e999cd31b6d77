from __future__ import annotations

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from siteadmin.services.resource_service import ResourceService


class SingletonService(ResourceService):
    """A resource with a single current record (design system, site settings).

    The current record is the newest one, restricted to active rows when the
    model carries an ``is_active`` flag.
    """

    def __init__(self, model: type, name: str, label: str, *, create_on_read: bool = False):
        super().__init__(model, name, label)
        self.create_on_read = create_on_read

    async def _current(self, db: AsyncSession):
        query = self._select()
        if hasattr(self.model, "is_active"):
            query = query.where(self.model.is_active.is_(True))
        result = await db.execute(query.order_by(self.model.id.desc()).limit(1))
        return result.scalar_one_or_none()

    async def current(self, db: AsyncSession):
        """The current record; created with column defaults on first read when configured."""
        async with self.operation(db, "get"):
            record = await self._current(db)
            if record is None and self.create_on_read:
                record = self.model()
                db.add(record)
                await db.commit()
                self._log("created", record.id)
                record = await self._fetch(db, record.id)
            return record

    async def upsert(self, db: AsyncSession, data: BaseModel):
        async with self.operation(db, "upsert"):
            changes = data.model_dump(exclude_unset=True)
            changes.pop("id", None)
            self._check_nullable(changes)
            record = await self._current(db)
            if record is None:
                record = self.model(**self._columns(changes))
                db.add(record)
            else:
                for key, value in self._columns(changes).items():
                    setattr(record, key, value)
            await db.commit()
            self._log("saved", record.id)
            return await self._fetch(db, record.id)
