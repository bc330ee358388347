import copy
import json

import pytest

SAMPLE_CAMPAIGN = {
    "campaign": {
        "id": "cmp_001",
        "name": "Sample Property Campaign",
        "platform": "meta",
        "details": {
            "business_details": {
                "business_name": "Springleaf Residence",
                "business_category": "Real Estate",
                "product_or_service_description": "Boutique condominium near the park",
                "website": "https://example.com",
                "mobile": "+65 1234 5678",
                "country_code": "+65",
            },
            "ai_assisted_product_usps": [
                "Prime location with excellent connectivity",
                "Modern amenities and facilities",
            ],
            "ad_copies": [
                {
                    "headline": "Your Dream Home Awaits",
                    "primary_text": "Experience luxury living",
                    "description": "Modern comfort meets natural beauty",
                },
            ],
            "ad_banners": [
                {
                    "banner_data": {
                        "creative_title": "Exterior View",
                        "call_out": "Register Now!",
                        "call_to_action": "Register Your Interest",
                        "creative_image_url": "https://images.example.com/exterior.jpg",
                    },
                },
            ],
        },
    },
}

EXTENDED_CAMPAIGN = {
    "campaign": {
        "id": "cmp_002",
        "name": "Lead Gen Campaign",
        "platform": "meta",
        "status": "ACTIVE",
        "created_at": {"_seconds": 1717000000, "_nanoseconds": 120000000},
        "updated_at": {"seconds": 1717000500, "nanoseconds": 0},
        "special_ad_categories": ["HOUSING"],
        "details": {
            "config": {"ad_account_id": "act_1", "partner": None},
            "business_details": {
                "business_name": "Harbor Lofts",
                "business_logo": {"square": {"url": "https://cdn.example.com/logo.png", "width": 200}},
            },
            "targeting": {"age_min": 25, "age_max": 55, "genders": [1, 2]},
            "leadgen_form": {
                "name": "Harbor form",
                "questions": [{"type": "EMAIL", "key": "email"}],
                "privacy_policy": {"link_text": "Privacy", "url": "https://example.com/privacy"},
            },
            "budget_and_scheduling": {"currency": "IDR", "idr": {"daily_budget": 150000}},
            "ad_copies": [{"headline": "Loft Living", "primary_text": "Waterfront lofts"}],
        },
        "tiktok_ads_data": {
            "geo_locations": [{"name": "Jakarta", "isp": None, "status_info": {"reason": None}}],
        },
    },
}

FULL_SCHEMA = {
    "business": {
        "name": "Springleaf Residence",
        "description": "Boutique condominium near the park",
        "logo": "https://cdn.example.com/logo.png",
        "category": "Real Estate",
    },
    "contact": {
        "phone": "+65 1234 5678",
        "email": "sales@springleaf.example",
        "address": "1 Park Lane",
        "mobile": "+65 1234 5678",
        "country_code": "+65",
    },
    "hero": {
        "title": "Your Dream Home",
        "subtitle": "Luxury living by the park",
        "backgroundImage": "https://images.example.com/hero.jpg",
        "ctaButtons": [
            {"text": "Register Interest", "href": "#register-interest", "variant": "primary"},
            {"text": "View Gallery", "href": "#gallery", "variant": "secondary"},
        ],
        "trustIndicators": ["Freehold"],
    },
    "valueProps": {
        "usps": [{"title": "Location", "description": "Next to the MRT"}],
        "stats": [{"number": "120", "label": "Units"}],
    },
    "cta": {"title": "Ready?", "ctaText": "Register", "ctaLink": "#register-interest"},
    "gallery": {
        "images": [{"src": "https://images.example.com/1.jpg", "alt": "Lobby"}],
    },
    "location": {"address": "1 Park Lane", "transportation": ["MRT 3 min"]},
    "projectDetail": {
        "specifications": [
            {"category": "Units", "items": [{"label": "Total", "value": "120"}]},
        ],
    },
    "floorPlans": {
        "plans": [
            {"name": "Type A", "type": "2BR", "size": "750 sqft", "bedrooms": 2},
            {"name": "Type B", "type": "Studio", "size": "450 sqft"},
        ],
    },
    "registerInterest": {
        "contactInfo": {"email": "sales@springleaf.example", "phone": "+65 1234 5678"},
    },
    "legal": {
        "privacyPolicy": "https://springleaf.example/privacy",
        "termsOfService": "https://springleaf.example/terms",
        "disclaimers": ["Artist impressions only"],
    },
    "footer": {
        "socialLinks": [
            {"platform": "instagram", "url": "https://instagram.com/springleaf"},
            {"platform": "facebook", "url": ""},
        ],
        "legalLinks": [
            {"label": "Privacy", "href": "https://springleaf.example/privacy"},
            {"label": "Terms", "href": "   "},
            {"label": "Cookies"},
        ],
    },
    "navigation": [
        {"label": "Home", "href": "#home"},
        {"label": "Gallery", "href": "#gallery"},
    ],
    "metadata": {"campaignName": "Sample Property Campaign", "template": "springleaf"},
}

MINIMAL_SCHEMA = {
    "business": {"name": "Springleaf Residence"},
    "contact": {},
    "hero": {"title": "Your Dream Home"},
}


class FakeGenerator:
    """TextGenerator double that returns canned text and records each call."""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    async def generate(self, prompt, settings):
        self.calls.append((prompt, settings))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def sample_campaign_raw():
    return copy.deepcopy(SAMPLE_CAMPAIGN)


@pytest.fixture
def extended_campaign_raw():
    return copy.deepcopy(EXTENDED_CAMPAIGN)


@pytest.fixture
def full_schema_raw():
    return copy.deepcopy(FULL_SCHEMA)


@pytest.fixture
def minimal_schema_raw():
    return copy.deepcopy(MINIMAL_SCHEMA)


@pytest.fixture
def fake_generator():
    """Factory: fake_generator(text=...) or fake_generator(error=...)."""
    return FakeGenerator


@pytest.fixture
def schema_json_text():
    return json.dumps(FULL_SCHEMA)
