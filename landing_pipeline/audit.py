"""
Completeness and consistency checks for a populated internal schema.

The audit is advisory: it never blocks mapping or rendering, it only lists
what a user should fill in or reconcile before publishing. Findings come out
in a fixed order:

  1. missing business contact fields (email, phone, address),
  2. cross-section mismatches (email, phone, address),
  3. missing content (logo, hero image, gallery, privacy policy, terms).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .internal_schema import InternalSchema

MISSING = "missing"
INCONSISTENT = "inconsistent"

# Joins the two paths of a cross-field finding.
PATH_SEPARATOR = " ↔ "


@dataclass(frozen=True)
class Finding:
    """One missing or inconsistent field."""

    # Dotted path, or two paths joined by PATH_SEPARATOR.
    field: str
    label: str
    description: str

    # "missing" or "inconsistent".
    kind: str


@dataclass(frozen=True)
class AuditSummary:
    missing_count: int
    inconsistent_count: int
    headline: str
    message: str


def _blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def _missing(field: str, label: str, description: str) -> Finding:
    return Finding(field=field, label=label, description=description, kind=MISSING)


def _mismatch(
        left_path: str,
        right_path: str,
        label: str,
        left_value: Optional[str],
        right_value: Optional[str],
        left_name: str,
        right_name: str,
) -> Optional[Finding]:
    """A finding only when both sides are filled in and differ after trimming."""
    if _blank(left_value) or _blank(right_value):
        return None
    if left_value.strip() == right_value.strip():
        return None
    noun = label.split(" ", 1)[0]
    return Finding(
        field=f"{left_path}{PATH_SEPARATOR}{right_path}",
        label=label,
        description=(
            f"{noun} differs between {left_name} ({left_value}) and {right_name} "
            f"({right_value}). They should match for consistency."
        ),
        kind=INCONSISTENT,
    )


def audit(schema: Optional[InternalSchema]) -> List[Finding]:
    """
    Return missing-field and inconsistency findings for ``schema``.

    Every check runs independently; an empty list means nothing to report.
    ``None`` yields ``[]``.
    """
    if schema is None:
        return []

    findings: List[Finding] = []
    contact = schema.contact

    # Business contact details.
    if _blank(contact.email):
        findings.append(_missing(
            "contact.email",
            "Email Address",
            "Business email address for customer inquiries and communication",
        ))
    if _blank(contact.phone) and _blank(contact.mobile):
        findings.append(_missing(
            "contact.phone",
            "Phone Number",
            "Contact phone number for direct customer communication",
        ))
    if _blank(contact.address):
        findings.append(_missing(
            "contact.address",
            "Business Address",
            "Physical business address for location and contact purposes",
        ))

    # Cross-section consistency.
    register_info = (
        schema.registerInterest.contactInfo if schema.registerInterest else None
    )
    main_phone = contact.phone if not _blank(contact.phone) else contact.mobile
    location_address = schema.location.address if schema.location else None

    mismatches = [
        _mismatch(
            "contact.email",
            "registerInterest.contactInfo.email",
            "Email Mismatch",
            contact.email,
            register_info.email if register_info else None,
            "main contact",
            "register interest form",
        ),
        _mismatch(
            "contact.phone",
            "registerInterest.contactInfo.phone",
            "Phone Mismatch",
            main_phone,
            register_info.phone if register_info else None,
            "main contact",
            "register interest form",
        ),
        _mismatch(
            "contact.address",
            "location.address",
            "Address Mismatch",
            contact.address,
            location_address,
            "main contact",
            "location section",
        ),
    ]
    findings.extend(f for f in mismatches if f is not None)

    # Content.
    if _blank(schema.business.logo):
        findings.append(_missing(
            "business.logo",
            "Business Logo",
            "Company logo to enhance brand recognition and professionalism",
        ))
    if _blank(schema.hero.backgroundImage):
        findings.append(_missing(
            "hero.backgroundImage",
            "Hero Background Image",
            "Main background image for the hero section to create visual impact",
        ))
    if not (schema.gallery and schema.gallery.images):
        findings.append(_missing(
            "gallery.images",
            "Gallery Images",
            "Product or service images to showcase your offerings",
        ))
    legal = schema.legal
    if _blank(legal.privacyPolicy if legal else None):
        findings.append(_missing(
            "legal.privacyPolicy",
            "Privacy Policy URL",
            "Link to your privacy policy document for legal compliance",
        ))
    if _blank(legal.termsOfService if legal else None):
        findings.append(_missing(
            "legal.termsOfService",
            "Terms of Service URL",
            "Link to your terms of service document for legal compliance",
        ))

    return findings


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def summarize_findings(findings: List[Finding]) -> AuditSummary:
    """Headline and one-line message suitable for a notification banner."""
    missing_count = sum(1 for f in findings if f.kind != INCONSISTENT)
    inconsistent_count = sum(1 for f in findings if f.kind == INCONSISTENT)

    if inconsistent_count:
        headline = "Schema Issues Detected"
    elif missing_count:
        headline = "Missing Fields Detected"
    else:
        headline = "No Issues Detected"

    if not findings:
        message = "No missing or inconsistent fields."
    elif inconsistent_count and missing_count:
        message = (
            f"Found {_plural(missing_count, 'missing field', 'missing fields')} and "
            f"{_plural(inconsistent_count, 'inconsistency', 'inconsistencies')}."
        )
    elif inconsistent_count:
        message = (
            f"Found {_plural(inconsistent_count, 'inconsistency', 'inconsistencies')} "
            "in contact information."
        )
    else:
        message = f"Found {_plural(missing_count, 'missing field', 'missing fields')}."

    return AuditSummary(
        missing_count=missing_count,
        inconsistent_count=inconsistent_count,
        headline=headline,
        message=message,
    )
