"""
View-model dataclasses handed to the page-section templates.

Every field here is concrete: strings, lists, numbers and booleans are always
set, so a template never has to check for missing data. The only optional
members are whole content sections on ``TemplateViewModel``, where ``None``
means "do not render this section".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

# Fixed in-page menu used when a schema provides no usable navigation.
DEFAULT_NAVIGATION: Tuple[Tuple[str, str], ...] = (
    ("Home", "#home"),
    ("About", "#about"),
    ("Project Details", "#project-detail"),
    ("Gallery", "#gallery"),
    ("Floor Plans", "#floor-plans"),
    ("Location", "#location"),
    ("Register Interest", "#register-interest"),
)

Number = Union[int, float]


@dataclass(frozen=True)
class NavigationLink:
    label: str
    href: str
    external: bool = False


@dataclass(frozen=True)
class HeaderSection:
    project_name: str

    # Logo URL, "" when the business has none.
    logo: str
    navigation: List[NavigationLink]


@dataclass(frozen=True)
class CtaButton:
    text: str
    href: str

    # Either "primary" or "secondary".
    variant: str


@dataclass(frozen=True)
class HeroSection:
    title: str
    subtitle: str
    description: str
    background_image: str
    cta_buttons: List[CtaButton]
    trust_indicators: List[str]


@dataclass(frozen=True)
class UspItem:
    title: str
    description: str
    icon: str


@dataclass(frozen=True)
class StatItem:
    number: str
    label: str


@dataclass(frozen=True)
class ValuePropositionSection:
    title: str
    subtitle: str
    usps: List[UspItem]
    stats: List[StatItem]


@dataclass(frozen=True)
class CtaSection:
    title: str
    subtitle: str
    cta_text: str
    cta_link: str
    background_image: str
    trust_badges: List[str]


@dataclass(frozen=True)
class GalleryImage:
    src: str
    alt: str
    category: str
    title: str
    call_out: str
    call_to_action: str


@dataclass(frozen=True)
class GallerySection:
    title: str
    subtitle: str
    images: List[GalleryImage]
    categories: List[str]


@dataclass(frozen=True)
class LocationSection:
    title: str
    subtitle: str
    address: str
    transportation: List[str]
    nearby_amenities: List[str]
    map_image: str


@dataclass(frozen=True)
class ProjectOverview:
    title: str
    description: str
    features: List[str]


@dataclass(frozen=True)
class SpecificationItem:
    label: str
    value: str


@dataclass(frozen=True)
class SpecificationGroup:
    category: str
    items: List[SpecificationItem]


@dataclass(frozen=True)
class AmenityGroup:
    category: str
    items: List[str]


@dataclass(frozen=True)
class ProjectDetailSection:
    title: str
    subtitle: str
    overview: ProjectOverview
    specifications: List[SpecificationGroup]
    amenities: List[AmenityGroup]


@dataclass(frozen=True)
class FloorPlan:
    name: str
    type: str
    size: str
    bedrooms: Number
    bathrooms: Number
    price: str
    image: str
    features: List[str]


@dataclass(frozen=True)
class FloorPlansSection:
    title: str
    subtitle: str
    plans: List[FloorPlan]


@dataclass(frozen=True)
class FooterContact:
    phone: str
    email: str
    address: str


@dataclass(frozen=True)
class SocialLink:
    platform: str
    url: str


@dataclass(frozen=True)
class FooterLink:
    label: str
    href: str


@dataclass(frozen=True)
class FooterSection:
    project_name: str
    description: str
    contact: FooterContact
    social_links: List[SocialLink]
    navigation_links: List[FooterLink]

    # Only links with a real href; never placeholders.
    legal_links: List[FooterLink]
    disclaimers: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class RegisterContact:
    email: str
    phone: str


@dataclass(frozen=True)
class RegisterInterestSection:
    title: str
    subtitle: str
    business_name: str
    contact_info: RegisterContact


@dataclass(frozen=True)
class TemplateViewModel:
    """Top level props for one rendered marketing site."""

    project_name: str
    route: str
    header: HeaderSection
    hero: HeroSection
    footer: FooterSection
    register_interest: RegisterInterestSection

    # Content sections, None when the schema does not provide them.
    value_proposition: Optional[ValuePropositionSection] = None
    cta: Optional[CtaSection] = None
    gallery: Optional[GallerySection] = None
    location: Optional[LocationSection] = None
    project_detail: Optional[ProjectDetailSection] = None
    floor_plans: Optional[FloorPlansSection] = None
