"""
Helpers for loading campaign exports and edited internal schemas from disk.

Campaigns may be stored as JSON or YAML; internal schemas are always JSON,
since that is the format users edit and paste back.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

import yaml

from .campaign_schema import CampaignInput, validate_campaign
from .errors import SchemaValidationError, ValidationIssue
from .internal_schema import InternalSchema, parse_internal_schema_text

# Implicit YAML types that would turn phone codes ("+65") and dates into
# ints or date objects. Scalars of these kinds are kept as strings and left to
# the campaign models to coerce.
_STRING_TAGS = frozenset({
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
})


class CampaignYamlLoader(yaml.SafeLoader):
    """``SafeLoader`` that leaves unquoted numbers and dates as plain strings."""


CampaignYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _STRING_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def read_campaign_document(path: Union[str, Path]) -> Any:
    """
    Parse a campaign file without validating it.

    Syntax errors are reported as a SchemaValidationError with a single
    root-level issue so callers handle them like any other bad input.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Campaign file not found: {path}")

    text = path.read_text(encoding="utf-8")

    # Support both YAML and JSON so the caller can choose their preferred format.
    if path.suffix.lower() in {".yml", ".yaml"}:
        try:
            return yaml.load(text, Loader=CampaignYamlLoader)
        except yaml.YAMLError as exc:
            raise SchemaValidationError(
                [ValidationIssue(path="", message=f"Invalid YAML format: {exc}", code="invalid_yaml")],
                schema_name="campaign",
            ) from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaValidationError(
            [
                ValidationIssue(
                    path="",
                    message=f"Invalid JSON format: {exc.msg} (line {exc.lineno}, column {exc.colno})",
                    code="invalid_json",
                )
            ],
            schema_name="campaign",
        ) from exc


def load_campaign(path: Union[str, Path]) -> CampaignInput:
    """
    Load a campaign export from a .json, .yml or .yaml file and validate it.

    Parameters
    ----------
    path:
        Filesystem path to the campaign document.

    Returns
    -------
    CampaignInput
        The validated campaign, normalized to the envelope shape.
    """
    return validate_campaign(read_campaign_document(path))


def load_internal_schema(path: Union[str, Path]) -> InternalSchema:
    """Load and validate a (possibly hand-edited) internal schema JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Internal schema file not found: {path}")
    return parse_internal_schema_text(path.read_text(encoding="utf-8"))
