"""
End-to-end pipeline: raw campaign -> internal schema -> audit + view-model.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from .audit import Finding, audit, summarize_findings
from .campaign_schema import CampaignInput, validate_campaign
from .config import GenerationSettings
from .gemini_client import TextGenerator
from .internal_schema import InternalSchema, validate_internal
from .models import TemplateViewModel
from .schema_mapper import map_to_view_model
from .transformer import CampaignTransformer, synthesize_fallback


@dataclass(frozen=True)
class SiteBuild:
    """Everything produced for one campaign."""

    schema: InternalSchema
    view_model: TemplateViewModel

    # Advisory only; a build with findings is still usable.
    findings: List[Finding]


def build_site(schema: InternalSchema) -> SiteBuild:
    """Audit and map an already validated internal schema."""
    findings = audit(schema)
    summary = summarize_findings(findings)
    logging.info(
        "Audit for business=%s: %s %s",
        schema.business.name,
        summary.headline,
        summary.message,
    )
    for finding in findings:
        logging.info("  [%s] %s (%s)", finding.kind, finding.label, finding.field)

    return SiteBuild(schema=schema, view_model=map_to_view_model(schema), findings=findings)


async def process_campaign(
        raw: Any,
        generator: Optional[TextGenerator],
        settings: Optional[GenerationSettings] = None,
) -> SiteBuild:
    """
    Validate raw campaign JSON, transform it, then audit and map the result.

    ``raw`` may also be an already validated ``CampaignInput``. With no
    ``generator`` the rule-based fallback is used directly (offline mode).

    Raises SchemaValidationError when the campaign itself is malformed; AI
    failures never surface here.
    """
    campaign = raw if isinstance(raw, CampaignInput) else validate_campaign(raw)
    logging.info(
        "Validated %s campaign for business=%s (ad copies=%d, banners=%d)",
        campaign.shape,
        campaign.business.business_name or "<unnamed>",
        len(campaign.details.ad_copies or []),
        len(campaign.details.ad_banners or []),
    )

    if generator is None:
        logging.info("Offline mode: using rule-based transformation.")
        schema = synthesize_fallback(campaign)
    else:
        schema = await CampaignTransformer(generator, settings).transform(campaign)
    return build_site(schema)


def process_internal_schema(raw: Any) -> SiteBuild:
    """Rebuild from a user-edited internal schema, skipping transformation."""
    return build_site(validate_internal(raw))
