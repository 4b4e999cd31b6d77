"""Service instances for every admin resource."""

from __future__ import annotations

from siteadmin.models.cta import CTA
from siteadmin.models.design_system import DesignSystem
from siteadmin.models.faq import FAQ, FAQCategory, FAQSection, FAQSectionCategory
from siteadmin.models.form import Form, FormField
from siteadmin.models.header import HeaderCTA
from siteadmin.models.hero_section import HeroSection
from siteadmin.models.site_settings import SiteSettings
from siteadmin.services.design_tokens import DesignTokens
from siteadmin.services.faq_section_category_service import FAQSectionCategoryService
from siteadmin.services.header_service import HeaderConfigService
from siteadmin.services.media_section_service import MediaSectionService
from siteadmin.services.resource_service import ChildCollection, ResourceService
from siteadmin.services.singleton_service import SingletonService

cta_buttons = ResourceService(
    CTA,
    "cta-buttons",
    "CTA",
    nullify_on_delete=[HeroSection.cta_primary_id, HeroSection.cta_secondary_id],
    delete_dependents=[HeaderCTA.cta_id],
)

header_config = HeaderConfigService()

faq_categories = ResourceService(
    FAQCategory,
    "faq-categories",
    "FAQ category",
    nullify_on_delete=[FAQ.category_id],
    delete_dependents=[FAQSectionCategory.category_id],
)

faqs = ResourceService(
    FAQ,
    "faqs",
    "FAQ",
    scope_field="category_id",
    references={"category_id": FAQCategory},
)

faq_sections = ResourceService(FAQSection, "faq-sections", "FAQ section")

faq_section_categories = FAQSectionCategoryService()

forms = ResourceService(
    Form,
    "forms",
    "Form",
    children=[ChildCollection("fields", FormField, "form_id")],
)

hero_sections = ResourceService(
    HeroSection,
    "hero-sections",
    "Hero section",
    references={"cta_primary_id": CTA, "cta_secondary_id": CTA},
    token_defaults=DesignTokens.hero_defaults,
)

media_sections = MediaSectionService()

design_system = SingletonService(DesignSystem, "design-system", "Design system")

site_settings = SingletonService(SiteSettings, "site-settings", "Site settings", create_on_read=True)
