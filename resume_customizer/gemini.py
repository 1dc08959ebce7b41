"""
Minimal async client for the Gemini generateContent endpoint.

Each call is a single POST with the API key passed as the ``key`` query
parameter. There are no retries: a failed call raises and the caller
aborts the pipeline.
"""

import logging
import time
from typing import Any, Dict, Optional

import httpx

from .config import Settings, load_settings
from .exceptions import GeminiAPIError, ResponseFormatError

logger = logging.getLogger(__name__)


def build_request_body(prompt: str) -> Dict[str, Any]:
    return {"contents": [{"parts": [{"text": prompt}]}]}


def extract_generated_text(data: Any) -> str:
    """Read ``candidates[0].content.parts[0].text`` from a response body.

    A bare string in ``parts[0]`` is accepted as the text as well.
    """
    try:
        part = data["candidates"][0]["content"]["parts"][0]
    except (KeyError, IndexError, TypeError):
        raise ResponseFormatError("Unexpected Gemini API response format.")

    if isinstance(part, str):
        return part
    if isinstance(part, dict) and isinstance(part.get("text"), str) and part["text"]:
        return part["text"]
    raise ResponseFormatError("Unexpected Gemini API response format.")


class GeminiClient:
    """Sends prompts to Gemini and returns the generated text."""

    def __init__(
        self,
        api_key: str,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.settings = settings or load_settings()
        self._http_client = http_client

    async def generate(self, prompt: str) -> str:
        """POST one prompt and return the model's text."""
        logger.debug("Sending prompt to Gemini (%s chars): %s", len(prompt), prompt[:200])
        start = time.perf_counter()

        if self._http_client is not None:
            response = await self._post(self._http_client, prompt)
        else:
            async with httpx.AsyncClient(timeout=self.settings.timeout) as client:
                response = await self._post(client, prompt)

        duration = time.perf_counter() - start
        if not response.is_success:
            logger.error(
                "Gemini call failed status=%s duration=%.2fs",
                response.status_code,
                duration,
            )
            raise GeminiAPIError(
                f"Gemini API Error: {response.reason_phrase or response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            raise ResponseFormatError("Unexpected Gemini API response format.")

        text = extract_generated_text(data)
        logger.info(
            "Gemini call complete model=%s duration=%.2fs chars=%s",
            self.settings.model,
            duration,
            len(text),
        )
        return text

    async def _post(self, client: httpx.AsyncClient, prompt: str) -> httpx.Response:
        try:
            return await client.post(
                self.settings.endpoint,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=build_request_body(prompt),
            )
        except httpx.TimeoutException as exc:
            logger.error("Gemini request timed out after %.0fs", self.settings.timeout)
            raise GeminiAPIError("Gemini API Error: request timed out") from exc
        except httpx.HTTPError as exc:
            logger.error("Gemini request failed: %s", exc)
            raise GeminiAPIError(f"Gemini API Error: {exc}") from exc
