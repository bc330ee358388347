"""
Permissive validation for raw ad-platform campaign JSON.

Campaign exports come in two historical shapes: a legacy one that only
carries business details and creatives, and an extended one that adds ad
account config, targeting, lead-gen forms and budget. Both may arrive wrapped
in a ``{"campaign": ...}`` envelope, as a bare campaign object, or as a flat
details object. ``validate_campaign`` normalizes all of them into a single
``CampaignInput`` so nothing downstream needs to know which shape was sent.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    StrictStr,
    TypeAdapter,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from .errors import SchemaValidationError

_HTTP_URL = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    # Validate with pydantic's URL parser but keep the caller's string as-is.
    try:
        _HTTP_URL.validate_python(value)
    except PydanticValidationError as exc:
        raise PydanticCustomError(
            "invalid_url",
            "Invalid url: {reason}",
            {"reason": exc.errors()[0]["msg"]},
        ) from exc
    return value


UrlStr = Annotated[str, AfterValidator(_check_http_url)]


class CampaignModel(BaseModel):
    """
    Base for campaign sections.

    Numbers sent for optional text fields (a phone number exported as an int)
    become strings; required text leaves are ``StrictStr`` and still reject them.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)


class Timestamp(CampaignModel):
    """Firestore style timestamp; bare numbers (or numeric strings) are epoch seconds."""

    seconds: float = Field(validation_alias=AliasChoices("_seconds", "seconds"))
    nanoseconds: float = Field(
        default=0,
        validation_alias=AliasChoices("_nanoseconds", "nanoseconds"),
    )

    @model_validator(mode="before")
    @classmethod
    def _from_number(cls, data: Any) -> Any:
        if isinstance(data, (int, float)) and not isinstance(data, bool):
            return {"seconds": data, "nanoseconds": 0}
        if isinstance(data, str):
            try:
                return {"seconds": float(data), "nanoseconds": 0}
            except ValueError:
                return data
        return data


# ---------------------------------------------------------------------------
# Extended-shape sections
# ---------------------------------------------------------------------------


class CampaignConfig(CampaignModel):
    ad_account_id: Optional[str] = None
    fb_page_id: Optional[str] = None
    google_ad_account_id: Optional[str] = None
    advantage_campaign_budget: Optional[bool] = None
    google_custom_conversion_action_doc_id: Optional[str] = None
    meta_sales_purchase_event_name: Optional[str] = None
    partner: Optional[str] = None


class GeoLocations(CampaignModel):
    location_types: Optional[List[str]] = None


class Targeting(CampaignModel):
    age_min: Optional[float] = None
    age_max: Optional[float] = None
    genders: Optional[List[float]] = None
    geo_locations: Optional[GeoLocations] = None


class PrivacyPolicyLink(CampaignModel):
    link_text: Optional[str] = None
    url: Optional[str] = None


class LeadgenQuestion(CampaignModel):
    type: StrictStr
    key: StrictStr
    label: Optional[str] = None


class ContextCard(CampaignModel):
    style: Optional[str] = None
    title: Optional[str] = None
    content: Optional[List[str]] = None


class LeadgenForm(CampaignModel):
    is_optimized_for_quality: Optional[bool] = None
    question_page_custom_headline: Optional[str] = None
    follow_up_action_url: Optional[str] = None
    privacy_policy: Optional[PrivacyPolicyLink] = None
    name: Optional[str] = None
    questions: Optional[List[LeadgenQuestion]] = None
    block_display_for_non_targeted_viewer: Optional[bool] = None
    context_card: Optional[ContextCard] = None
    follow_up_action_text: Optional[str] = None


class BudgetAmounts(CampaignModel):
    lifetime_budget: Optional[float] = None
    daily_budget: Optional[float] = None


class BudgetAndScheduling(CampaignModel):
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    currency: Optional[str] = None
    idr: Optional[BudgetAmounts] = None


# ---------------------------------------------------------------------------
# Shared sections
# ---------------------------------------------------------------------------


class LogoImage(CampaignModel):
    url: Optional[str] = None
    width: Optional[float] = None
    height: Optional[float] = None


class BusinessLogo(CampaignModel):
    square: Optional[LogoImage] = None


class BusinessDetails(CampaignModel):
    """The advertiser itself; every leaf is optional."""

    business_name: Optional[str] = None
    business_category: Optional[str] = None
    product_or_service_description: Optional[str] = None
    product_or_service_offers_or_usp: Optional[str] = None
    website: Optional[str] = None
    mobile: Optional[str] = None
    mobile_without_country_code: Optional[str] = None
    country_code: Optional[str] = None
    business_logo: Optional[BusinessLogo] = None
    ideal_customers: Optional[str] = None
    consumer_type: Optional[str] = None


class AdCopy(CampaignModel):
    format_type: Optional[str] = None
    headline: StrictStr
    primary_text: StrictStr
    description: Optional[str] = None
    call_to_action_type: Optional[str] = None


class BannerImage(CampaignModel):
    hash: Optional[str] = None
    width: Optional[float] = None
    height: Optional[float] = None
    s3_url: Optional[str] = None


class BannerData(CampaignModel):
    creative_title: StrictStr
    call_out: StrictStr
    call_to_action: StrictStr
    creative_image_url: UrlStr
    size: Optional[str] = None
    template_id: Optional[str] = None


class AdBanner(CampaignModel):
    image: Optional[BannerImage] = None
    banner_data: BannerData


class VideoThumbnail(CampaignModel):
    image_id: Optional[str] = None
    width: Optional[float] = None
    height: Optional[float] = None
    image_url: Optional[UrlStr] = None


class TiktokVideo(CampaignModel):
    video_id: Optional[str] = None
    thumbnail: Optional[VideoThumbnail] = None


class AdVideo(CampaignModel):
    video_url: Optional[UrlStr] = None
    tiktok: Optional[TiktokVideo] = None


class CampaignDetails(CampaignModel):
    # Extended shape only.
    config: Optional[CampaignConfig] = None

    business_details: BusinessDetails

    # Extended shape only.
    targeting: Optional[Targeting] = None
    leadgen_form: Optional[LeadgenForm] = None
    budget_and_scheduling: Optional[BudgetAndScheduling] = None

    ai_assisted_product_usps: Optional[List[str]] = None
    ad_copies: Optional[List[AdCopy]] = None
    ad_banners: Optional[List[AdBanner]] = None
    ad_videos: Optional[List[AdVideo]] = None


class TiktokGeo(CampaignModel):
    description: Optional[str] = None
    geo_id: Optional[str] = None
    geo_type: Optional[str] = None
    parent_id: Optional[str] = None
    region_code: Optional[str] = None


class TiktokStatusInfo(CampaignModel):
    reason: Optional[str] = None
    status: Optional[str] = None


class TiktokGeoLocation(CampaignModel):
    geo: Optional[TiktokGeo] = None
    isp: Optional[str] = None
    name: Optional[str] = None
    status_info: Optional[TiktokStatusInfo] = None
    targeting_type: Optional[str] = None


class TiktokAdsData(CampaignModel):
    geo_locations: Optional[List[TiktokGeoLocation]] = None


class Campaign(CampaignModel):
    id: Optional[str] = None
    name: Optional[str] = None
    platform: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None
    uid: Optional[str] = None
    special_ad_categories: Optional[List[str]] = None
    details: CampaignDetails
    tiktok_ads_data: Optional[TiktokAdsData] = None


class CampaignInput(CampaignModel):
    """Validated campaign, always in the envelope shape."""

    campaign: Campaign

    # Which historical export format the input was detected as.
    shape: Literal["legacy", "extended"] = "legacy"

    @property
    def details(self) -> CampaignDetails:
        return self.campaign.details

    @property
    def business(self) -> BusinessDetails:
        return self.campaign.details.business_details


# ---------------------------------------------------------------------------
# Shape detection and validation
# ---------------------------------------------------------------------------

# Keys that live on the campaign object rather than inside ``details``.
CAMPAIGN_LEVEL_KEYS = (
    "id",
    "name",
    "platform",
    "type",
    "status",
    "created_at",
    "updated_at",
    "uid",
    "special_ad_categories",
    "tiktok_ads_data",
)

EXTENDED_DETAIL_KEYS = ("config", "targeting", "leadgen_form", "budget_and_scheduling")


def _to_envelope(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Rewrap a bare campaign or flat details object as {"campaign": {...}}."""
    if "campaign" in raw:
        return dict(raw)

    if "details" in raw:
        return {"campaign": dict(raw)}

    campaign = {k: raw[k] for k in CAMPAIGN_LEVEL_KEYS if k in raw}
    campaign["details"] = {k: v for k, v in raw.items() if k not in CAMPAIGN_LEVEL_KEYS}
    return {"campaign": campaign}


def detect_shape(envelope: Dict[str, Any]) -> str:
    """
    Return "extended" when any extended-only key is present.

    Detection is by key presence, so ``"config": null`` still marks the
    extended export format.
    """
    campaign = envelope.get("campaign")
    if not isinstance(campaign, dict):
        return "legacy"
    if "tiktok_ads_data" in campaign:
        return "extended"
    details = campaign.get("details")
    if isinstance(details, dict) and any(
            key in details for key in EXTENDED_DETAIL_KEYS
    ):
        return "extended"
    return "legacy"


def validate_campaign(raw: Any) -> CampaignInput:
    """
    Validate raw campaign JSON and return it as a ``CampaignInput``.

    Only structural problems fail validation: a missing ``business_details``
    object, a malformed URL in a URL-typed field, or a missing/wrongly typed
    required leaf inside an optional list (for example an ad copy without a
    headline).

    Raises
    ------
    SchemaValidationError
        With issues ordered depth-first in field declaration order. Paths
        refer to the normalized envelope, e.g.
        ``campaign.details.ad_copies.0.headline``.
    """
    if isinstance(raw, dict):
        envelope = _to_envelope(raw)
        envelope["shape"] = detect_shape(envelope)
    else:
        envelope = raw

    try:
        return CampaignInput.model_validate(envelope)
    except PydanticValidationError as exc:
        raise SchemaValidationError.from_pydantic(exc, schema_name="campaign") from exc


def campaign_to_payload(campaign: CampaignInput) -> Dict[str, Any]:
    """JSON-ready dict of the campaign, without unset optional fields."""
    return campaign.model_dump(mode="json", exclude_none=True, exclude={"shape"})
