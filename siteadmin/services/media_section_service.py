from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from siteadmin.core.errors import FieldProblem, ValidationError
from siteadmin.models.media_section import MediaSection, MediaSectionFeature
from siteadmin.services.design_tokens import DesignTokens
from siteadmin.services.resource_service import ChildCollection, ResourceService


class MediaSectionService(ResourceService):
    """Media sections with their ordered feature list.

    A section that shows its CTA button needs both ``cta_text`` and
    ``cta_url``. The create schema enforces that on the body alone; updates
    are partial, so the rule is checked against the stored record merged
    with the changes.
    """

    def __init__(self):
        super().__init__(
            MediaSection,
            "media-sections",
            "Media section",
            children=[ChildCollection("features", MediaSectionFeature, "media_section_id")],
            token_defaults=DesignTokens.media_section_defaults,
        )

    async def _check_update(self, db: AsyncSession, record: MediaSection, changes: dict[str, Any]) -> None:
        merged = {
            key: changes.get(key, getattr(record, key))
            for key in ("show_cta_button", "cta_text", "cta_url")
        }
        if not merged["show_cta_button"]:
            return
        problems = [
            FieldProblem(key, "is required when show_cta_button is set")
            for key in ("cta_text", "cta_url")
            if not merged[key]
        ]
        if problems:
            raise ValidationError(problems)
