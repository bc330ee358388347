"""
Exception types shared by the validation, transformation and CLI layers.

Validation failures are carried as structured issues so callers can show
field-level feedback instead of a single error string.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List

from pydantic import ValidationError as PydanticValidationError


@dataclass(frozen=True)
class ValidationIssue:
    """One field-level problem found while validating a document."""

    # Dot-joined location of the offending field, "" for the document root.
    path: str
    message: str
    code: str


class SchemaValidationError(ValueError):
    """Raised when a document does not conform to a schema."""

    def __init__(self, issues: Iterable[ValidationIssue], schema_name: str = "document"):
        self.issues: List[ValidationIssue] = list(issues)
        self.schema_name = schema_name
        super().__init__(
            f"{schema_name} failed validation with {len(self.issues)} issue(s)"
        )

    @classmethod
    def from_pydantic(
            cls,
            exc: PydanticValidationError,
            schema_name: str = "document",
    ) -> "SchemaValidationError":
        """Convert pydantic's error list, keeping its traversal order."""
        issues = [
            ValidationIssue(
                path=".".join(str(part) for part in err.get("loc", ())),
                message=err.get("msg", "Validation error"),
                code=err.get("type", "invalid"),
            )
            for err in exc.errors()
        ]
        return cls(issues, schema_name=schema_name)

    def to_dicts(self) -> List[Dict[str, str]]:
        return [asdict(issue) for issue in self.issues]


class ConfigurationError(RuntimeError):
    """A required setting (such as the Gemini API key) is missing."""


class TransformationFailure(RuntimeError):
    """
    The AI transformation could not produce a usable internal schema.

    Always absorbed by the transformer, which falls back to rule-based
    synthesis.
    """
