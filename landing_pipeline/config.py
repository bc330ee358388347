"""
Runtime configuration for the Gemini text generation call.

Values come from the environment once, at process start, and are then passed
explicitly to the generator and transformer.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError

DEFAULT_TEXT_MODEL = "gemini-2.0-flash"


@dataclass(frozen=True)
class GenerationSettings:
    """Sampling configuration for the structured transformation request."""

    model: str = DEFAULT_TEXT_MODEL

    # Low temperature for stable structured JSON.
    temperature: float = 0.1
    top_k: int = 40
    top_p: float = 0.95
    max_output_tokens: int = 4000

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GenerationSettings":
        """
        Build settings from GEMINI_TEXT_MODEL, GEMINI_TEMPERATURE and
        GEMINI_MAX_OUTPUT_TOKENS, keeping the defaults for anything unset.
        """
        env = os.environ if env is None else env
        defaults = cls()
        try:
            temperature = float(env.get("GEMINI_TEMPERATURE", defaults.temperature))
            max_tokens = int(env.get("GEMINI_MAX_OUTPUT_TOKENS", defaults.max_output_tokens))
        except ValueError as exc:
            raise ConfigurationError(f"Invalid Gemini generation setting: {exc}") from exc

        return cls(
            model=env.get("GEMINI_TEXT_MODEL") or defaults.model,
            temperature=temperature,
            top_k=defaults.top_k,
            top_p=defaults.top_p,
            max_output_tokens=max_tokens,
        )


def resolve_api_key(env: Optional[Mapping[str, str]] = None) -> str:
    """Return the Gemini API key from GEMINI_API_KEY or GOOGLE_API_KEY."""
    env = os.environ if env is None else env
    api_key = env.get("GEMINI_API_KEY") or env.get("GOOGLE_API_KEY")
    if not api_key:
        raise ConfigurationError(
            "GEMINI_API_KEY or GOOGLE_API_KEY must be set in the environment "
            "for campaign transformation."
        )
    return api_key
