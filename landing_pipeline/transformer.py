"""
Turn a validated campaign into the internal schema.

Gemini is asked to do the structural transformation. Its answer is only
trusted after it parses as JSON and passes ``validate_internal``; any failure
along the way (transport error, empty text, bad JSON, schema issues) is logged
and replaced by a deterministic, rule-based schema built from the campaign
alone. The external call is made once per campaign and never retried.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Optional

from .campaign_schema import CampaignInput, campaign_to_payload
from .config import GenerationSettings
from .errors import ConfigurationError, SchemaValidationError, TransformationFailure
from .gemini_client import TextGenerator
from .internal_schema import InternalSchema, validate_internal
from .models import DEFAULT_NAVIGATION

DEFAULT_TEMPLATE = "springleaf"
MAX_FALLBACK_USPS = 6

_FENCE_OPEN_RE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE_RE = re.compile(r"\s*```$")


# ---------------------------------------------------------------------------
# Prompt
# ---------------------------------------------------------------------------

_TARGET_SHAPE = """{
  "business": {"name": "string (required)", "description": "string", "logo": "string (URL)", "category": "string"},
  "contact": {"phone": "string", "email": "string", "address": "string", "mobile": "string", "country_code": "string"},
  "hero": {
    "title": "string (required - SHORT headline, MAX 4-6 words)",
    "subtitle": "string", "description": "string", "backgroundImage": "string (URL)",
    "ctaButtons": [{"text": "string", "href": "string", "variant": "primary | secondary"}],
    "trustIndicators": ["string"]
  },
  "valueProps": {"title": "string", "subtitle": "string",
    "usps": [{"title": "string", "description": "string", "icon": "string"}],
    "stats": [{"number": "string", "label": "string"}]},
  "cta": {"title": "string", "subtitle": "string", "ctaText": "string",
    "ctaLink": "string (anchor link such as #register-interest)",
    "backgroundImage": "string", "trustBadges": ["string"]},
  "gallery": {"title": "string", "subtitle": "string",
    "images": [{"src": "string (URL)", "alt": "string", "category": "string",
      "title": "string", "callOut": "string", "callToAction": "string"}],
    "categories": ["string"]},
  "location": {"title": "string", "subtitle": "string", "address": "string",
    "transportation": ["string"], "nearbyAmenities": ["string"], "mapImage": "string (URL)"},
  "projectDetail": {"title": "string", "subtitle": "string",
    "overview": {"title": "string", "description": "string", "features": ["string"]},
    "specifications": [{"category": "string", "items": [{"label": "string", "value": "string"}]}],
    "amenities": [{"category": "string", "items": ["string"]}]},
  "floorPlans": {"title": "string", "subtitle": "string",
    "plans": [{"name": "string", "type": "string", "size": "string", "bedrooms": "number",
      "bathrooms": "number", "price": "string", "image": "string (URL)", "features": ["string"]}]},
  "registerInterest": {"title": "string", "subtitle": "string", "businessName": "string",
    "contactInfo": {"email": "string", "phone": "string"}},
  "legal": {"privacyPolicy": "string (URL)", "termsOfService": "string (URL)", "disclaimers": ["string"]},
  "footer": {"description": "string",
    "socialLinks": [{"platform": "string", "url": "string"}],
    "navigationLinks": [{"label": "string", "href": "string"}],
    "legalLinks": [{"label": "string", "href": "string"}]},
  "navigation": [{"label": "string", "href": "string", "external": "boolean"}],
  "metadata": {"campaignId": "string", "campaignName": "string", "platform": "string",
    "template": "string", "theme": "string"}
}"""


def build_transform_prompt(campaign: CampaignInput) -> str:
    """Construct the transformation instruction followed by the campaign JSON."""
    role = (
        "You are an expert at transforming raw advertising campaign JSON into a "
        "standardized internal schema that drives marketing website templates."
    )

    instructions = (
        "INSTRUCTIONS:\n"
        "1. Convert the campaign JSON below into the exact internal schema format.\n"
        "2. Extract and normalize all relevant information from the input.\n"
        "3. Write compelling, professional copy based on the campaign data.\n"
        "4. Return ONLY valid JSON. No Markdown, no code fences, no commentary."
    )

    shape = "INTERNAL SCHEMA STRUCTURE (every section except business, contact and hero is optional):\n" + _TARGET_SHAPE

    nav_sections = ", ".join(f'"{label}"' for label, _ in DEFAULT_NAVIGATION)
    nav_anchors = ", ".join(f'"{href}"' for _, href in DEFAULT_NAVIGATION)
    mapping_guidelines = (
        "MAPPING GUIDELINES:\n"
        "- business_details.business_name -> business.name\n"
        "- business_details.mobile -> contact.mobile and contact.phone\n"
        "- ai_assisted_product_usps -> valueProps.usps (objects with title and description)\n"
        "- ad_copies[0] -> hero.title / hero.subtitle / hero.description\n"
        "- ad_banners -> gallery.images (one image per banner_data)\n"
        f"- Generate a navigation menu with ALL these sections: [{nav_sections}]\n"
        f"- Navigation hrefs must be these anchor links: [{nav_anchors}]\n"
        "- Create the CTA section from the ad copy data.\n"
        "- For real estate, extract floor plans, location and project details from context."
    )

    hard_rules = (
        "HARD RULES (CRITICAL):\n"
        "- hero.title MUST be short: 4-6 words maximum, punchy and memorable. "
        "Put longer explanatory text in hero.subtitle and hero.description.\n"
        "- Navigation hrefs and cta.ctaLink are in-page anchor links only. "
        "NEVER use external website URLs in navigation.\n"
        "- NEVER fabricate contact details. Only use an email, phone number or "
        "address that appears in the input; otherwise use an empty string.\n"
        "- NEVER create placeholder legal links. Only use privacy policy or terms "
        "of service URLs that appear in the input; otherwise use an empty string.\n"
        "- ctaButtons[].variant must be either \"primary\" or \"secondary\"."
    )

    campaign_json = (
        "INPUT CAMPAIGN JSON:\n"
        + json.dumps(campaign_to_payload(campaign), indent=2, ensure_ascii=False)
    )

    return (
            role
            + "\n\n"
            + instructions
            + "\n\n"
            + shape
            + "\n\n"
            + mapping_guidelines
            + "\n\n"
            + hard_rules
            + "\n\n"
            + campaign_json
            + "\n\nReturn the transformed JSON following the exact schema structure above:"
    )


# ---------------------------------------------------------------------------
# Response handling
# ---------------------------------------------------------------------------


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` (or bare ```) fence, if any."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _FENCE_OPEN_RE.sub("", cleaned, count=1)
        cleaned = _FENCE_CLOSE_RE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_generated_schema(text: Optional[str]) -> InternalSchema:
    """
    Interpret generated text as an internal schema.

    Raises TransformationFailure for empty text, invalid JSON, a non-object
    document, or a document that fails schema validation.
    """
    if not text or not text.strip():
        raise TransformationFailure("Generated text was empty")

    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise TransformationFailure(f"Generated text is not valid JSON: {exc.msg}") from exc

    if not isinstance(data, dict):
        raise TransformationFailure(
            f"Generated JSON is a {type(data).__name__}, expected an object"
        )

    try:
        return validate_internal(data)
    except SchemaValidationError as exc:
        summary = "; ".join(f"{i.path}: {i.message}" for i in exc.issues[:5])
        raise TransformationFailure(f"Generated schema failed validation: {summary}") from exc


# ---------------------------------------------------------------------------
# Rule-based fallback
# ---------------------------------------------------------------------------


def _navigation_links() -> List[Dict[str, str]]:
    return [{"label": label, "href": href} for label, href in DEFAULT_NAVIGATION]


def synthesize_fallback(campaign: CampaignInput) -> InternalSchema:
    """
    Build an internal schema from the campaign alone, without any AI call.

    Contact details are copied only when present in the campaign; email and
    address are always empty strings because the campaign never carries
    them. No legal links are produced.
    """
    record = campaign.campaign
    details = campaign.details
    business = campaign.business

    business_name = business.business_name or "Business Name"
    mobile = business.mobile or ""
    first_copy = details.ad_copies[0] if details.ad_copies else None
    banners = details.ad_banners or []

    business_section: Dict[str, Any] = {
        "name": business_name,
        "description": business.product_or_service_description or "Business description",
        "category": business.business_category or "General",
    }
    logo = business.business_logo.square if business.business_logo else None
    if logo is not None and logo.url:
        business_section["logo"] = logo.url

    contact: Dict[str, Any] = {
        "mobile": mobile,
        "phone": mobile,
        "email": "",
        "address": "",
    }
    if business.country_code:
        contact["country_code"] = business.country_code

    hero: Dict[str, Any] = {
        "title": (first_copy.headline if first_copy else None)
                 or record.name
                 or "Welcome to Our Business",
        "subtitle": (first_copy.primary_text if first_copy else None)
                    or "Discover what makes us special",
        "description": (first_copy.description if first_copy else None)
                       or "Learn more about our services and offerings",
        "ctaButtons": [
            {"text": "Register Interest", "href": "#register-interest", "variant": "primary"},
            {"text": "View Gallery", "href": "#gallery", "variant": "secondary"},
        ],
    }
    if banners:
        hero["backgroundImage"] = banners[0].banner_data.creative_image_url

    usps = [
        {"title": f"Feature {index + 1}", "description": usp}
        for index, usp in enumerate((details.ai_assisted_product_usps or [])[:MAX_FALLBACK_USPS])
    ]

    gallery_images = [
        {
            "src": banner.banner_data.creative_image_url,
            "alt": banner.banner_data.creative_title or "Gallery image",
            "title": banner.banner_data.creative_title,
            "callOut": banner.banner_data.call_out,
            "callToAction": banner.banner_data.call_to_action,
        }
        for banner in banners
    ]

    fallback = {
        "business": business_section,
        "contact": contact,
        "hero": hero,
        "valueProps": {"title": "Why Choose Us", "usps": usps},
        "cta": {
            "title": "Ready to Get Started?",
            "ctaText": "Register Interest",
            "ctaLink": "#register-interest",
        },
        "gallery": {"title": "Gallery", "images": gallery_images},
        "navigation": _navigation_links(),
        "footer": {
            "description": f"{business.business_name or 'Our Business'} - Your trusted partner",
            "navigationLinks": _navigation_links(),
            "legalLinks": [],
        },
        "registerInterest": {
            "title": "Register Your Interest",
            "subtitle": "Get in touch with us to learn more about this opportunity",
            "businessName": business.business_name or "Our Business",
            "contactInfo": {"email": "", "phone": mobile},
        },
        "metadata": {
            "campaignId": record.id,
            "campaignName": record.name,
            "platform": record.platform or "web",
            "template": DEFAULT_TEMPLATE,
        },
    }

    # A failure here is a bug in this function, not a runtime condition.
    return validate_internal(fallback)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class CampaignTransformer:
    """
    Campaign -> internal schema, via one Gemini call with a rule-based fallback.
    """

    def __init__(self, generator: TextGenerator, settings: Optional[GenerationSettings] = None):
        self.generator = generator
        self.settings = settings or GenerationSettings()

    async def transform(self, campaign: CampaignInput) -> InternalSchema:
        """
        Return an internal schema for ``campaign``; never fails for AI-side errors.

        ConfigurationError from the generator is fatal and propagates.
        """
        business_name = campaign.business.business_name or "<unnamed>"
        prompt = build_transform_prompt(campaign)

        try:
            text = await self.generator.generate(prompt, self.settings)
            schema = parse_generated_schema(text)
        except ConfigurationError:
            raise
        except Exception as exc:
            logging.warning(
                "AI transformation failed for business=%s, using rule-based fallback: %s",
                business_name,
                exc,
            )
            return synthesize_fallback(campaign)

        logging.info(
            "Transformed campaign for business=%s with %s (hero title length=%d)",
            business_name,
            self.settings.model,
            len(schema.hero.title),
        )
        return schema


async def transform(
        campaign: CampaignInput,
        generator: TextGenerator,
        settings: Optional[GenerationSettings] = None,
) -> InternalSchema:
    """Convenience wrapper around ``CampaignTransformer(...).transform``."""
    return await CampaignTransformer(generator, settings).transform(campaign)
