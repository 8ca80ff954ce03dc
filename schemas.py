"""
Content Schemas for Portfolio CMS

Each Pydantic model = one record shape stored under a content key.
Stored JSON uses camelCase field names; Python code uses snake_case.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator
from pydantic.alias_generators import to_camel


class ContentModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# Navigation / site
class NavigationItem(ContentModel):
    id: str
    name: str
    href: str
    order: int = Field(default=1, ge=1)
    is_active: bool = True


class SiteConfig(ContentModel):
    id: str = "site-config"
    logo_text: str = "Portfolio"
    logo_image: Optional[str] = None
    logo_size: Optional[int] = None
    use_text_logo: bool = False


# Content
class Skill(ContentModel):
    id: str
    name: str
    icon: Optional[str] = None  # predefined icon name or uploaded svg path
    icon_type: Literal["predefined", "custom"] = "predefined"
    level: int = Field(ge=1, le=5)
    category: str
    description: Optional[str] = None


class Project(ContentModel):
    id: str
    title: str
    description: str
    technologies: List[str] = []
    image_url: str = ""
    demo_url: Optional[str] = None
    github_url: Optional[str] = None
    featured: bool = False


class Testimonial(ContentModel):
    id: str
    name: str
    role: str = ""
    company: str = ""
    content: str
    avatar_url: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    featured: bool = False


class BlogPost(ContentModel):
    id: str
    title: str
    excerpt: str = ""
    content: str = ""
    image_url: str = ""
    date: str = ""
    author: str = ""
    tags: List[str] = []
    featured: bool = False


class TimelineLink(ContentModel):
    url: str
    text: str


class TimelineItem(ContentModel):
    id: str
    date: str
    title: str
    description: str = ""
    tags: List[str] = []
    link: Optional[TimelineLink] = None


class Service(ContentModel):
    id: str
    title: str
    description: str = ""
    icon: str = "code"
    featured: bool = False


# Footer
class SocialLink(ContentModel):
    id: str
    platform: str
    url: str
    icon: str = ""  # inline svg or path to a local svg
    aria_label: str = ""
    order: int = 1
    is_active: bool = True
    use_local_svg: bool = False
    local_svg_path: Optional[str] = None


class QuickLink(ContentModel):
    id: str
    name: str
    href: str
    order: int = 1
    is_active: bool = True


class LegalLink(QuickLink):
    pass


class ContactInfo(ContentModel):
    email: str = ""
    location: str = ""


class FooterConfig(ContentModel):
    id: str = "footer-config"
    description: str = ""
    copyright_text: str = "© {year} Portfolio. All rights reserved."
    social_links: List[SocialLink] = []
    quick_links: List[QuickLink] = []
    contact_info: ContactInfo = Field(default_factory=ContactInfo)
    legal_links: List[LegalLink] = []
    legal_title: str = "Legal"


# Settings documents
class HeroSettings(ContentModel):
    title: str = "Creative"
    highlighted_text1: str = "Developer"
    highlighted_text2: str = "Designer"
    description: str = ""
    projects_button_text: str = "View Projects"
    projects_button_link: str = "#projects"
    contact_button_text: str = "Contact Me"
    contact_button_link: str = "#contact"


class ModelSettings(ContentModel):
    size_multiplier: float = Field(default=1.0, gt=0)


class LegalPage(ContentModel):
    id: str
    title: str
    slug: str
    content: str = ""
    is_active: bool = True
    created_at: str = ""
    updated_at: str = ""


class LegalPagesContent(ContentModel):
    pages: List[LegalPage] = []


class HighlightStat(ContentModel):
    id: str
    icon: str = ""  # material icon name
    value: int = 0
    label: str
    active: bool = True


class HighlightsConfig(ContentModel):
    title: str = "Portfolio Highlights"
    description: str = ""
    stats: List[HighlightStat] = []


class SectionSettings(ContentModel):
    title: str
    description: str = ""


class AllSectionSettings(ContentModel):
    skills: SectionSettings
    projects: Optional[SectionSettings] = None
    about: Optional[SectionSettings] = None
    contact: Optional[SectionSettings] = None


class ContactSocialLink(ContentModel):
    platform: str = ""
    url: str = ""
    icon: str = "link"


class ContactSettings(ContentModel):
    id: str = "contact-settings"
    title: str = "Get in Touch"
    subtitle: str = ""
    description: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    map_enabled: bool = False
    latitude: float = Field(default=0.0, ge=-90, le=90)
    longitude: float = Field(default=0.0, ge=-180, le=180)
    form_enabled: bool = True
    social_links: List[ContactSocialLink] = []


LogoType = Literal["frontend", "backend"]


class Logo(ContentModel):
    id: str
    name: str
    type: LogoType
    image_url: str = ""
    active: bool = False
    size: int = Field(default=120, gt=0)  # width in pixels
    use_text: bool = False
    text: str = ""

    @model_validator(mode="after")
    def fill_text(self):
        if not self.text:
            self.text = "Portfolio" if self.type == "frontend" else "Portfolio Admin"
        return self


class PageContent(ContentModel):
    content: str = ""
    last_updated: Optional[str] = None


class PageContents(RootModel[Dict[str, PageContent]]):
    root: Dict[str, PageContent] = {}

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# Auth
Role = Literal["admin", "moderator", "content_writer"]


class User(ContentModel):
    id: str
    name: str
    email: str
    image: Optional[str] = None
    role: Role = "content_writer"
    created_at: str = ""
    updated_at: str = ""
