from __future__ import annotations

import datetime
from typing import Optional


def slugify(text: str) -> str:
    """
    Convert an arbitrary string into a simple filesystem and id friendly slug.

    - Lowercases the input.
    - Keeps only alphanumeric characters and simple separators.
    - Collapses runs of whitespace and separators into single hyphens.
    - Returns "site" if everything is stripped away.
    """
    text = text.strip().lower()
    out_chars = []
    for ch in text:
        if ch.isalnum():
            out_chars.append(ch)
        elif ch in (" ", "-", "_", "\t"):
            if out_chars and out_chars[-1] != "-":
                out_chars.append("-")
    result = "".join(out_chars).strip("-")
    return result or "site"


def build_output_name(business_name: str, today: Optional[datetime.date] = None) -> str:
    """Directory name for a build, e.g. "springleaf-residence-2024-05-01"."""
    today = today or datetime.date.today()
    return f"{slugify(business_name)}-{today.isoformat()}"
