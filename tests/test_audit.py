from landing_pipeline.audit import audit, summarize_findings
from landing_pipeline.internal_schema import validate_internal


def _schema(**overrides):
    raw = {
        "business": {"name": "Springleaf Residence", "logo": "https://cdn.example.com/logo.png"},
        "contact": {
            "email": "sales@springleaf.example",
            "phone": "+65 1234 5678",
            "address": "1 Park Lane",
        },
        "hero": {"title": "Your Dream Home", "backgroundImage": "https://images.example.com/hero.jpg"},
        "gallery": {"images": [{"src": "https://images.example.com/1.jpg", "alt": "Lobby"}]},
        "legal": {
            "privacyPolicy": "https://springleaf.example/privacy",
            "termsOfService": "https://springleaf.example/terms",
        },
    }
    for section, values in overrides.items():
        if values is None:
            raw.pop(section, None)
        elif isinstance(values, dict) and isinstance(raw.get(section), dict):
            raw[section] = {**raw[section], **values}
        else:
            raw[section] = values
    return validate_internal(raw)


def test_audit_of_none_is_empty():
    assert audit(None) == []


def test_complete_consistent_schema_has_no_findings():
    assert audit(_schema()) == []


def test_documented_scenario_order_and_triggers():
    schema = _schema(
        contact={"email": "a@x.com", "phone": "", "mobile": "", "address": "1 Main St"},
        registerInterest={"contactInfo": {"email": "b@x.com"}},
        location={"address": " 1 Main St "},
        business={"logo": ""},
        gallery={"images": []},
    )

    findings = audit(schema)

    assert [(f.field, f.kind) for f in findings] == [
        ("contact.phone", "missing"),
        ("contact.email ↔ registerInterest.contactInfo.email", "inconsistent"),
        ("business.logo", "missing"),
        ("gallery.images", "missing"),
    ]
    mismatch = findings[1]
    assert mismatch.label == "Email Mismatch"
    assert "a@x.com" in mismatch.description
    assert "b@x.com" in mismatch.description


def test_every_check_fires_in_fixed_order():
    schema = validate_internal(
        {
            "business": {"name": "Bare"},
            "contact": {},
            "hero": {"title": "Hello"},
        }
    )
    assert [f.field for f in audit(schema)] == [
        "contact.email",
        "contact.phone",
        "contact.address",
        "business.logo",
        "hero.backgroundImage",
        "gallery.images",
        "legal.privacyPolicy",
        "legal.termsOfService",
    ]


def test_all_cross_field_checks_in_order():
    schema = _schema(
        contact={"email": "a@x.com", "phone": "", "mobile": "+65 1111", "address": "1 Main St"},
        registerInterest={"contactInfo": {"email": "b@x.com", "phone": "+65 2222"}},
        location={"address": "9 Other Rd"},
    )

    findings = audit(schema)

    assert [f.field for f in findings] == [
        "contact.email ↔ registerInterest.contactInfo.email",
        "contact.phone ↔ registerInterest.contactInfo.phone",
        "contact.address ↔ location.address",
    ]
    assert all(f.kind == "inconsistent" for f in findings)
    # Mobile stands in for an empty phone on the main contact side.
    assert "+65 1111" in findings[1].description
    assert "9 Other Rd" in findings[2].description


def test_mobile_alone_satisfies_phone_check():
    schema = _schema(contact={"phone": "", "mobile": "+65 1111"})
    assert "contact.phone" not in [f.field for f in audit(schema)]


def test_whitespace_counts_as_missing():
    schema = _schema(contact={"email": "   "}, legal={"termsOfService": " "})
    assert [f.field for f in audit(schema)] == ["contact.email", "legal.termsOfService"]


def test_one_sided_values_do_not_trigger_mismatch():
    schema = _schema(
        registerInterest={"contactInfo": {"email": "", "phone": "+65 2222"}},
        contact={"phone": "", "mobile": ""},
    )

    fields = [f.field for f in audit(schema)]
    assert "contact.phone" in fields
    assert not any("↔" in field for field in fields)


def test_summary_counts_and_headline():
    schema = _schema(
        contact={"email": "a@x.com", "address": ""},
        registerInterest={"contactInfo": {"email": "b@x.com"}},
    )
    summary = summarize_findings(audit(schema))

    assert summary.missing_count == 1
    assert summary.inconsistent_count == 1
    assert summary.headline == "Schema Issues Detected"
    assert summary.message == "Found 1 missing field and 1 inconsistency."


def test_summary_for_missing_only_and_clean():
    missing = summarize_findings(audit(_schema(business={"logo": ""}, gallery=None)))
    assert missing.headline == "Missing Fields Detected"
    assert missing.message == "Found 2 missing fields."

    clean = summarize_findings([])
    assert clean.headline == "No Issues Detected"
    assert clean.missing_count == 0
