"""
The canonical internal schema consumed by every page template.

Field names mirror the JSON wire format exactly so a schema can be shown to a
user as text, edited, and validated again without a translation layer.
Array fields default to ``None`` rather than ``[]``: the mapper treats "not
provided" and "explicitly empty" differently.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .errors import SchemaValidationError, ValidationIssue


class InternalBusiness(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    logo: Optional[str] = None
    category: Optional[str] = None


class InternalContact(BaseModel):
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    mobile: Optional[str] = None
    country_code: Optional[str] = None


class HeroCtaButton(BaseModel):
    text: str
    href: str
    variant: Literal["primary", "secondary"] = "primary"


class InternalHero(BaseModel):
    title: str = Field(min_length=1)
    subtitle: Optional[str] = None
    description: Optional[str] = None
    backgroundImage: Optional[str] = None
    ctaButtons: Optional[List[HeroCtaButton]] = None
    trustIndicators: Optional[List[str]] = None


class Usp(BaseModel):
    title: str
    description: str
    icon: Optional[str] = None


class Stat(BaseModel):
    number: str
    label: str


class InternalValueProps(BaseModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    usps: Optional[List[Usp]] = None
    stats: Optional[List[Stat]] = None


class InternalCta(BaseModel):
    title: str
    subtitle: Optional[str] = None
    ctaText: str
    ctaLink: str
    backgroundImage: Optional[str] = None
    trustBadges: Optional[List[str]] = None


class GalleryImage(BaseModel):
    src: str
    alt: str
    category: Optional[str] = None
    title: Optional[str] = None
    callOut: Optional[str] = None
    callToAction: Optional[str] = None


class InternalGallery(BaseModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    images: Optional[List[GalleryImage]] = None
    categories: Optional[List[str]] = None


class InternalLocation(BaseModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    address: Optional[str] = None
    transportation: Optional[List[str]] = None
    nearbyAmenities: Optional[List[str]] = None
    mapImage: Optional[str] = None


class ProjectOverview(BaseModel):
    title: str
    description: str
    features: List[str]


class SpecificationItem(BaseModel):
    label: str
    value: str


class Specification(BaseModel):
    category: str
    items: List[SpecificationItem]


class Amenity(BaseModel):
    category: str
    items: List[str]


class InternalProjectDetail(BaseModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    overview: Optional[ProjectOverview] = None
    specifications: Optional[List[Specification]] = None
    amenities: Optional[List[Amenity]] = None


class FloorPlan(BaseModel):
    name: str
    type: str
    size: str
    bedrooms: Optional[Union[int, float]] = None
    bathrooms: Optional[Union[int, float]] = None
    price: Optional[str] = None
    image: Optional[str] = None
    features: Optional[List[str]] = None


class InternalFloorPlans(BaseModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    plans: Optional[List[FloorPlan]] = None


class RegisterContactInfo(BaseModel):
    email: Optional[str] = None
    phone: Optional[str] = None


class InternalRegisterInterest(BaseModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    businessName: Optional[str] = None
    contactInfo: Optional[RegisterContactInfo] = None


class InternalLegal(BaseModel):
    privacyPolicy: Optional[str] = None
    termsOfService: Optional[str] = None
    disclaimers: Optional[List[str]] = None


class SocialLink(BaseModel):
    platform: Optional[str] = None
    url: Optional[str] = None


# Links may be incomplete; the mapper drops entries without label and href.
class Link(BaseModel):
    label: Optional[str] = None
    href: Optional[str] = None


class InternalFooter(BaseModel):
    description: Optional[str] = None
    socialLinks: Optional[List[SocialLink]] = None
    navigationLinks: Optional[List[Link]] = None
    legalLinks: Optional[List[Link]] = None


class NavigationItem(BaseModel):
    label: Optional[str] = None
    href: Optional[str] = None
    external: Optional[bool] = None


class InternalMetadata(BaseModel):
    campaignId: Optional[str] = None
    campaignName: Optional[str] = None
    platform: Optional[str] = None
    template: Optional[str] = None
    theme: Optional[str] = None


class InternalSchema(BaseModel):
    """Normalized campaign data; ``business``, ``contact`` and ``hero`` are required."""

    business: InternalBusiness
    contact: InternalContact
    hero: InternalHero
    valueProps: Optional[InternalValueProps] = None
    cta: Optional[InternalCta] = None
    gallery: Optional[InternalGallery] = None
    location: Optional[InternalLocation] = None
    projectDetail: Optional[InternalProjectDetail] = None
    floorPlans: Optional[InternalFloorPlans] = None
    registerInterest: Optional[InternalRegisterInterest] = None
    legal: Optional[InternalLegal] = None
    footer: Optional[InternalFooter] = None
    navigation: Optional[List[NavigationItem]] = None
    metadata: Optional[InternalMetadata] = None


def validate_internal(raw: Any) -> InternalSchema:
    """
    Validate a parsed document against the internal schema.

    Raises
    ------
    SchemaValidationError
        When required fields are missing or empty, a value has the wrong
        type, or a CTA button variant is not "primary"/"secondary".
    """
    try:
        return InternalSchema.model_validate(raw)
    except PydanticValidationError as exc:
        raise SchemaValidationError.from_pydantic(exc, schema_name="internal schema") from exc


def dump_internal(schema: InternalSchema) -> Dict[str, Any]:
    """JSON-ready dict; unset optional fields are left out."""
    return schema.model_dump(mode="json", exclude_none=True)


def internal_schema_to_json(schema: InternalSchema) -> str:
    return json.dumps(dump_internal(schema), indent=2, ensure_ascii=False)


def parse_internal_schema_text(text: str) -> InternalSchema:
    """Parse user-edited schema text, reporting bad JSON as a validation issue."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaValidationError(
            [
                ValidationIssue(
                    path="",
                    message=f"Invalid JSON format: {exc.msg} (line {exc.lineno}, column {exc.colno})",
                    code="invalid_json",
                )
            ],
            schema_name="internal schema",
        ) from exc
    return validate_internal(data)
