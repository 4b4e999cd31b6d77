from siteadmin.models.base import Base
from siteadmin.models.cta import CTA
from siteadmin.models.design_system import DesignSystem
from siteadmin.models.faq import FAQ, FAQCategory, FAQSection, FAQSectionCategory
from siteadmin.models.form import Form, FormField
from siteadmin.models.header import HeaderConfig, HeaderCTA
from siteadmin.models.hero_section import HeroSection
from siteadmin.models.media_section import MediaSection, MediaSectionFeature
from siteadmin.models.site_settings import SiteSettings

__all__ = [
    "Base",
    "CTA",
    "HeaderConfig",
    "HeaderCTA",
    "FAQCategory",
    "FAQ",
    "FAQSection",
    "FAQSectionCategory",
    "Form",
    "FormField",
    "HeroSection",
    "MediaSection",
    "MediaSectionFeature",
    "DesignSystem",
    "SiteSettings",
]
