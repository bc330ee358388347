import json

import pytest

from landing_pipeline.errors import SchemaValidationError
from landing_pipeline.internal_schema import (
    dump_internal,
    internal_schema_to_json,
    parse_internal_schema_text,
    validate_internal,
)


def test_minimal_schema_is_valid(minimal_schema_raw):
    schema = validate_internal(minimal_schema_raw)

    assert schema.business.name == "Springleaf Residence"
    assert schema.hero.title == "Your Dream Home"
    assert schema.contact.email is None
    assert schema.navigation is None
    assert schema.gallery is None


def test_contact_may_hold_only_empty_strings(minimal_schema_raw):
    minimal_schema_raw["contact"] = {"phone": "", "email": "", "address": ""}
    schema = validate_internal(minimal_schema_raw)
    assert schema.contact.email == ""


@pytest.mark.parametrize(
    "mutate, expected_path, expected_code",
    [
        (lambda s: s["business"].update(name=""), "business.name", "string_too_short"),
        (lambda s: s["business"].pop("name"), "business.name", "missing"),
        (lambda s: s.pop("contact"), "contact", "missing"),
        (lambda s: s["hero"].update(title=""), "hero.title", "string_too_short"),
    ],
)
def test_required_fields(minimal_schema_raw, mutate, expected_path, expected_code):
    mutate(minimal_schema_raw)

    with pytest.raises(SchemaValidationError) as excinfo:
        validate_internal(minimal_schema_raw)

    assert excinfo.value.issues[0].path == expected_path
    assert excinfo.value.issues[0].code == expected_code


def test_invalid_cta_variant_is_rejected(minimal_schema_raw):
    minimal_schema_raw["hero"]["ctaButtons"] = [
        {"text": "Go", "href": "#go", "variant": "tertiary"},
    ]

    with pytest.raises(SchemaValidationError) as excinfo:
        validate_internal(minimal_schema_raw)

    issue = excinfo.value.issues[0]
    assert issue.path == "hero.ctaButtons.0.variant"
    assert issue.code == "literal_error"


def test_cta_variant_defaults_to_primary(minimal_schema_raw):
    minimal_schema_raw["hero"]["ctaButtons"] = [{"text": "Go", "href": "#go"}]
    schema = validate_internal(minimal_schema_raw)
    assert schema.hero.ctaButtons[0].variant == "primary"


def test_absent_arrays_stay_absent_and_empty_arrays_stay_empty(minimal_schema_raw):
    minimal_schema_raw["gallery"] = {"images": []}
    schema = validate_internal(minimal_schema_raw)

    assert schema.gallery.images == []
    assert schema.gallery.categories is None
    assert schema.hero.ctaButtons is None


def test_errors_are_reported_in_traversal_order(minimal_schema_raw):
    minimal_schema_raw["business"]["name"] = ""
    minimal_schema_raw["hero"]["title"] = ""
    minimal_schema_raw["cta"] = {"title": "Ready?"}

    with pytest.raises(SchemaValidationError) as excinfo:
        validate_internal(minimal_schema_raw)

    assert [i.path for i in excinfo.value.issues] == [
        "business.name",
        "hero.title",
        "cta.ctaText",
        "cta.ctaLink",
    ]


def test_json_round_trip_preserves_schema(full_schema_raw):
    schema = validate_internal(full_schema_raw)

    assert validate_internal(json.loads(json.dumps(dump_internal(schema)))) == schema
    assert parse_internal_schema_text(internal_schema_to_json(schema)) == schema


def test_dump_internal_leaves_out_unset_fields(minimal_schema_raw):
    dumped = dump_internal(validate_internal(minimal_schema_raw))
    assert dumped == {
        "business": {"name": "Springleaf Residence"},
        "contact": {},
        "hero": {"title": "Your Dream Home"},
    }


def test_floor_plan_counts_keep_integers(full_schema_raw):
    schema = validate_internal(full_schema_raw)
    assert schema.floorPlans.plans[0].bedrooms == 2
    assert isinstance(schema.floorPlans.plans[0].bedrooms, int)


def test_parse_internal_schema_text_reports_bad_json():
    with pytest.raises(SchemaValidationError) as excinfo:
        parse_internal_schema_text('{"business": ')

    assert excinfo.value.issues[0].code == "invalid_json"
    assert excinfo.value.issues[0].path == ""
