from fastapi import APIRouter

from siteadmin.api.admin import (
    cta_buttons,
    design_system,
    faq_categories,
    faq_section_categories,
    faq_sections,
    faqs,
    forms,
    header_config,
    hero_sections,
    media_sections,
    site_settings,
)

admin_router = APIRouter()

admin_router.include_router(cta_buttons.router)
admin_router.include_router(header_config.router)
admin_router.include_router(faq_categories.router)
admin_router.include_router(faqs.router)
admin_router.include_router(faq_sections.router)
admin_router.include_router(faq_section_categories.router)
admin_router.include_router(forms.router)
admin_router.include_router(hero_sections.router)
admin_router.include_router(media_sections.router)
admin_router.include_router(design_system.router)
admin_router.include_router(site_settings.router)
