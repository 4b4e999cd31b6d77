from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from siteadmin.core.errors import FieldProblem, NotFoundError, ValidationError
from siteadmin.models.faq import FAQCategory, FAQSection, FAQSectionCategory
from siteadmin.services.resource_service import ResourceService


class FAQSectionCategoryService(ResourceService):
    """Ordered category links of one FAQ section.

    The link set is written as a whole: ``replace`` swaps every link of a
    section for the given category ids, with order equal to list position.
    """

    def __init__(self):
        super().__init__(
            FAQSectionCategory,
            "faq-section-categories",
            "FAQ section category",
            scope_field="faq_section_id",
        )

    async def _section(self, db: AsyncSession, faq_section_id: int) -> FAQSection:
        result = await db.execute(
            select(FAQSection)
            .where(FAQSection.id == faq_section_id)
            .execution_options(populate_existing=True)
        )
        section = result.scalar_one_or_none()
        if section is None:
            raise NotFoundError("FAQ section", faq_section_id)
        return section

    async def replace(self, db: AsyncSession, faq_section_id: int, category_ids: list[int]) -> list:
        async with self.operation(db, "replace"):
            section = await self._section(db, faq_section_id)
            problems = [
                FieldProblem(f"category_ids.{index}", f"FAQCategory {category_id} does not exist")
                for index, category_id in enumerate(category_ids)
                if await db.get(FAQCategory, category_id) is None
            ]
            if problems:
                raise ValidationError(problems)

            section.categories.clear()
            await db.flush()
            section.categories.extend(
                FAQSectionCategory(category_id=category_id, sort_order=position)
                for position, category_id in enumerate(category_ids)
            )
            await db.commit()
            self._log("categories replaced", faq_section_id)
            return await self._fetch_all(db, faq_section_id)

    async def clear(self, db: AsyncSession, faq_section_id: int) -> None:
        async with self.operation(db, "clear"):
            section = await self._section(db, faq_section_id)
            section.categories.clear()
            await db.commit()
            self._log("categories cleared", faq_section_id)
