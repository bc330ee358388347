"""
Text generation through the Google Gen AI SDK.

The transformer only depends on the ``TextGenerator`` protocol, so tests and
offline runs can pass any object with a matching ``generate`` coroutine.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from google import genai
from google.genai import types

from .config import GenerationSettings, resolve_api_key
from .errors import TransformationFailure


class TextGenerator(Protocol):
    """Anything that can turn a prompt into generated text."""

    async def generate(self, prompt: str, settings: GenerationSettings) -> str:
        ...


def _extract_first_text_from_response(response: Any) -> str:
    """Return the text of the first candidate's first text part."""
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        if not content:
            continue
        for part in getattr(content, "parts", None) or []:
            text = getattr(part, "text", None)
            if text:
                return text
        # Only the first candidate is considered.
        break

    raise TransformationFailure("Empty response from Gemini API")


class GeminiTextGenerator:
    """
    ``TextGenerator`` backed by a Gemini model.

    The client is created per instance; pass ``client`` to reuse an existing
    ``genai.Client`` (or a test double exposing ``aio.models.generate_content``).
    """

    def __init__(self, api_key: Optional[str] = None, client: Optional[Any] = None):
        # Only a client created here is closed by aclose().
        self._owns_client = client is None
        if client is None:
            # Raises ConfigurationError before any request when no key is set.
            api_key = api_key or resolve_api_key()
            client = genai.Client(api_key=api_key)
            # Do not log the key or prompt, only that the client exists.
            logging.info("Initialized Gemini client for campaign transformation.")
        self._client = client

    async def aclose(self) -> None:
        """Close the underlying client if this generator created it."""
        if self._owns_client:
            await self._client.aio.aclose()
            logging.info("Closed Gemini client.")

    async def __aenter__(self) -> "GeminiTextGenerator":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def generate(self, prompt: str, settings: GenerationSettings) -> str:
        logging.info(
            "Calling text model %s (temperature=%s, max_output_tokens=%d, prompt length=%d)",
            settings.model,
            settings.temperature,
            settings.max_output_tokens,
            len(prompt),
        )

        try:
            response = await self._client.aio.models.generate_content(
                model=settings.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=settings.temperature,
                    top_k=settings.top_k,
                    top_p=settings.top_p,
                    max_output_tokens=settings.max_output_tokens,
                ),
            )
        except Exception as exc:
            raise TransformationFailure(f"Gemini API error: {exc}") from exc

        return _extract_first_text_from_response(response)
