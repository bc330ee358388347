"""
Map a validated internal schema onto the template view-model.

The mapping is pure: it reads nothing but the schema, holds no state between
calls, and fills every optional value with a fixed default so templates can
render without null checks.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Optional, Sequence

from .internal_schema import InternalSchema, Link, NavigationItem
from .models import (
    DEFAULT_NAVIGATION,
    AmenityGroup,
    CtaButton,
    CtaSection,
    FloorPlan,
    FloorPlansSection,
    FooterContact,
    FooterLink,
    FooterSection,
    GalleryImage,
    GallerySection,
    HeaderSection,
    HeroSection,
    LocationSection,
    NavigationLink,
    ProjectDetailSection,
    ProjectOverview,
    RegisterContact,
    RegisterInterestSection,
    SocialLink,
    SpecificationGroup,
    SpecificationItem,
    StatItem,
    TemplateViewModel,
    UspItem,
    ValuePropositionSection,
)

DEFAULT_HERO_SUBTITLE = "Discover excellence in every detail"
DEFAULT_VALUE_PROPS_TITLE = "Why Choose Us"
DEFAULT_VALUE_PROPS_SUBTITLE = "Discover what makes us special"
DEFAULT_USP_ICON = "check-circle"
DEFAULT_CTA_SUBTITLE = "Take the next step"


def _text(value: Optional[str]) -> str:
    return value or ""


def _list(values: Optional[Sequence[Any]]) -> List[Any]:
    return list(values) if values else []


def _resolve_navigation(items: Optional[Sequence[NavigationItem]]) -> List[NavigationLink]:
    """
    Keep entries that have both label and href; if none survive, use the
    fixed default menu. The default replaces the whole list, never single
    entries.
    """
    links = [
        NavigationLink(label=item.label, href=item.href, external=bool(item.external))
        for item in items or []
        if item.label and item.href
    ]
    if links:
        return links
    return [NavigationLink(label=label, href=href) for label, href in DEFAULT_NAVIGATION]


def _resolve_footer_links(links: Optional[Sequence[Link]]) -> List[FooterLink]:
    resolved = [
        FooterLink(label=link.label, href=link.href)
        for link in links or []
        if link.label and link.href
    ]
    if resolved:
        return resolved
    return [FooterLink(label=label, href=href) for label, href in DEFAULT_NAVIGATION]


def _map_hero(schema: InternalSchema) -> HeroSection:
    hero = schema.hero
    if hero.ctaButtons is None:
        buttons = [CtaButton(text="Learn More", href="#about", variant="primary")]
    else:
        buttons = [
            CtaButton(text=btn.text, href=btn.href, variant=btn.variant)
            for btn in hero.ctaButtons
        ]
    return HeroSection(
        title=hero.title,
        subtitle=hero.subtitle or DEFAULT_HERO_SUBTITLE,
        description=_text(hero.description),
        background_image=_text(hero.backgroundImage),
        cta_buttons=buttons,
        trust_indicators=_list(hero.trustIndicators),
    )


def _map_value_proposition(schema: InternalSchema) -> Optional[ValuePropositionSection]:
    props = schema.valueProps
    if props is None:
        return None
    return ValuePropositionSection(
        title=props.title or DEFAULT_VALUE_PROPS_TITLE,
        subtitle=props.subtitle or DEFAULT_VALUE_PROPS_SUBTITLE,
        usps=[
            UspItem(title=usp.title, description=usp.description, icon=usp.icon or DEFAULT_USP_ICON)
            for usp in props.usps or []
        ],
        stats=[StatItem(number=stat.number, label=stat.label) for stat in props.stats or []],
    )


def _map_cta(schema: InternalSchema) -> Optional[CtaSection]:
    cta = schema.cta
    if cta is None:
        return None
    return CtaSection(
        title=cta.title,
        subtitle=cta.subtitle or DEFAULT_CTA_SUBTITLE,
        cta_text=cta.ctaText,
        cta_link=cta.ctaLink,
        background_image=_text(cta.backgroundImage),
        trust_badges=_list(cta.trustBadges),
    )


def _map_gallery(schema: InternalSchema) -> Optional[GallerySection]:
    gallery = schema.gallery
    if gallery is None:
        return None
    return GallerySection(
        title=gallery.title or "Gallery",
        subtitle=gallery.subtitle or "Explore our collection",
        images=[
            GalleryImage(
                src=img.src,
                alt=img.alt,
                category=_text(img.category),
                title=_text(img.title),
                call_out=_text(img.callOut),
                call_to_action=_text(img.callToAction),
            )
            for img in gallery.images or []
        ],
        categories=_list(gallery.categories),
    )


def _map_location(schema: InternalSchema) -> Optional[LocationSection]:
    location = schema.location
    if location is None:
        return None
    return LocationSection(
        title=location.title or "Location",
        subtitle=location.subtitle or "Find us here",
        address=_text(location.address),
        transportation=_list(location.transportation),
        nearby_amenities=_list(location.nearbyAmenities),
        map_image=_text(location.mapImage),
    )


def _map_project_detail(schema: InternalSchema) -> Optional[ProjectDetailSection]:
    detail = schema.projectDetail
    if detail is None:
        return None
    overview = detail.overview
    return ProjectDetailSection(
        title=detail.title or "Project Details",
        subtitle=detail.subtitle or "Learn more about this project",
        overview=ProjectOverview(
            title=(overview.title if overview else None) or schema.business.name,
            description=(overview.description if overview else None)
                        or schema.business.description
                        or "Premium project details",
            features=list(overview.features) if overview else [],
        ),
        specifications=[
            SpecificationGroup(
                category=group.category,
                items=[SpecificationItem(label=i.label, value=i.value) for i in group.items],
            )
            for group in detail.specifications or []
        ],
        amenities=[
            AmenityGroup(category=amenity.category, items=list(amenity.items))
            for amenity in detail.amenities or []
        ],
    )


def _map_floor_plans(schema: InternalSchema) -> Optional[FloorPlansSection]:
    floor_plans = schema.floorPlans
    if floor_plans is None:
        return None
    return FloorPlansSection(
        title=floor_plans.title or "Floor Plans",
        subtitle=floor_plans.subtitle or "Choose your perfect space",
        plans=[
            FloorPlan(
                name=plan.name,
                type=plan.type,
                size=plan.size,
                bedrooms=plan.bedrooms or 0,
                bathrooms=plan.bathrooms or 0,
                price=_text(plan.price),
                image=_text(plan.image),
                features=_list(plan.features),
            )
            for plan in floor_plans.plans or []
        ],
    )


def _map_footer(schema: InternalSchema) -> FooterSection:
    footer = schema.footer
    contact = schema.contact
    location_address = schema.location.address if schema.location else None

    return FooterSection(
        project_name=schema.business.name,
        description=(footer.description if footer else None)
                    or schema.business.description
                    or f"{schema.business.name} - Your trusted partner",
        contact=FooterContact(
            phone=contact.phone or contact.mobile or "",
            email=_text(contact.email),
            address=contact.address or location_address or "",
        ),
        social_links=[
            SocialLink(platform=link.platform, url=link.url)
            for link in (footer.socialLinks if footer else None) or []
            if link.platform and link.url
        ],
        navigation_links=_resolve_footer_links(footer.navigationLinks if footer else None),
        legal_links=[
            FooterLink(label=link.label, href=link.href)
            for link in (footer.legalLinks if footer else None) or []
            if link.label and link.href and link.href.strip()
        ],
        disclaimers=_list(schema.legal.disclaimers if schema.legal else None),
    )


def _map_register_interest(schema: InternalSchema) -> RegisterInterestSection:
    name = schema.business.name
    contact = schema.contact
    section = schema.registerInterest
    info = section.contactInfo if section else None

    return RegisterInterestSection(
        title=(section.title if section else None) or "Register Your Interest",
        subtitle=(section.subtitle if section else None)
                 or f"Get in touch with us to learn more about {name}",
        business_name=(section.businessName if section else None) or name,
        contact_info=RegisterContact(
            email=(info.email if info else None) or contact.email or "",
            phone=(info.phone if info else None) or contact.phone or contact.mobile or "",
        ),
    )


def map_to_view_model(schema: InternalSchema) -> TemplateViewModel:
    """Project ``schema`` onto the fully defaulted template view-model."""
    return TemplateViewModel(
        project_name=schema.business.name,
        route="home",
        header=HeaderSection(
            project_name=schema.business.name,
            logo=_text(schema.business.logo),
            navigation=_resolve_navigation(schema.navigation),
        ),
        hero=_map_hero(schema),
        footer=_map_footer(schema),
        register_interest=_map_register_interest(schema),
        value_proposition=_map_value_proposition(schema),
        cta=_map_cta(schema),
        gallery=_map_gallery(schema),
        location=_map_location(schema),
        project_detail=_map_project_detail(schema),
        floor_plans=_map_floor_plans(schema),
    )


def view_model_to_dict(view_model: TemplateViewModel) -> Dict[str, Any]:
    return asdict(view_model)
