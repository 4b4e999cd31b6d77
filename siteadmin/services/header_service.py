from __future__ import annotations

from typing import Any

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from siteadmin.core.errors import FieldProblem, NotFoundError, ValidationError
from siteadmin.core.ordering import renumber
from siteadmin.models.cta import CTA
from siteadmin.models.header import HeaderConfig, HeaderCTA
from siteadmin.schemas.header import HeaderAction
from siteadmin.services.resource_service import ChildCollection, ResourceService, UNSCOPED


class HeaderConfigService(ResourceService):
    """Header configurations; exactly one is active and owns the ordered CTA list."""

    def __init__(self):
        super().__init__(
            HeaderConfig,
            "header-config",
            "Header configuration",
            children=[ChildCollection("cta_buttons", HeaderCTA, "header_config_id")],
        )

    async def list(self, db: AsyncSession, scope: Any = UNSCOPED) -> list:
        async with self.operation(db, "list"):
            result = await db.execute(
                self._select().where(HeaderConfig.is_active.is_(True)).order_by(*self._ordering())
            )
            return list(result.scalars().all())

    async def _check_children(self, db, children) -> None:
        problems = []
        for _spec, items in children:
            for index, item in enumerate(items):
                if await db.get(CTA, item["cta_id"]) is None:
                    problems.append(
                        FieldProblem(f"cta_buttons.{index}.cta_id", f"CTA {item['cta_id']} does not exist")
                    )
        if problems:
            raise ValidationError(problems)

    async def _before_create(self, db, values) -> None:
        await db.execute(update(HeaderConfig).values(is_active=False))
        values["is_active"] = True

    async def active(self, db: AsyncSession) -> HeaderConfig:
        result = await db.execute(
            self._select()
            .where(HeaderConfig.is_active.is_(True))
            .order_by(HeaderConfig.id.desc())
            .limit(1)
        )
        config = result.scalar_one_or_none()
        if config is None:
            raise NotFoundError("Active header configuration")
        return config

    async def _header_cta(self, db: AsyncSession, header_cta_id: int) -> HeaderCTA:
        result = await db.execute(
            select(HeaderCTA)
            .where(HeaderCTA.id == header_cta_id)
            .execution_options(populate_existing=True)
        )
        header_cta = result.scalar_one_or_none()
        if header_cta is None:
            raise NotFoundError("Header CTA", header_cta_id)
        return header_cta

    # ------------------------------------------------------------------
    # Single-CTA actions on the active configuration
    # ------------------------------------------------------------------

    async def apply_action(self, db: AsyncSession, action: HeaderAction) -> HeaderConfig:
        if action.action == "add_cta":
            if action.cta_id is None:
                raise ValidationError.for_field("cta_id", "is required for add_cta")
            return await self.add_cta(db, action.cta_id)
        if action.header_cta_id is None:
            raise ValidationError.for_field("header_cta_id", f"is required for {action.action}")
        if action.action == "remove_cta":
            return await self.remove_cta(db, action.header_cta_id)
        return await self.toggle_cta_visibility(db, action.header_cta_id, action.is_visible)

    async def add_cta(self, db: AsyncSession, cta_id: int) -> HeaderConfig:
        async with self.operation(db, "add_cta"):
            config = await self.active(db)
            if await db.get(CTA, cta_id) is None:
                raise ValidationError.for_field("cta_id", f"CTA {cta_id} does not exist")
            if any(item.cta_id == cta_id for item in config.cta_buttons):
                raise ValidationError.for_field("cta_id", "CTA already in header")
            # Close gaps left by remove_cta so the new slot does not share an order value
            renumber(config.cta_buttons)
            config.cta_buttons.append(
                HeaderCTA(cta_id=cta_id, sort_order=len(config.cta_buttons), is_visible=True)
            )
            await db.commit()
            self._log("cta added", config.id)
            return await self._fetch(db, config.id)

    async def remove_cta(self, db: AsyncSession, header_cta_id: int) -> HeaderConfig:
        async with self.operation(db, "remove_cta"):
            header_cta = await self._header_cta(db, header_cta_id)
            config_id = header_cta.header_config_id
            await db.delete(header_cta)
            await db.commit()
            self._log("cta removed", config_id)
            return await self._fetch(db, config_id)

    async def toggle_cta_visibility(
        self, db: AsyncSession, header_cta_id: int, is_visible: bool | None = None
    ) -> HeaderConfig:
        async with self.operation(db, "toggle_cta_visibility"):
            header_cta = await self._header_cta(db, header_cta_id)
            header_cta.is_visible = (not header_cta.is_visible) if is_visible is None else is_visible
            await db.commit()
            self._log("cta visibility toggled", header_cta.header_config_id)
            return await self._fetch(db, header_cta.header_config_id)
