"""Tests for the Gemini HTTP client using httpx's mock transport."""

import json

import httpx
import pytest

from resume_customizer.exceptions import GeminiAPIError, ResponseFormatError
from resume_customizer.gemini import GeminiClient, build_request_body, extract_generated_text


def gemini_body(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def make_client(settings, handler):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GeminiClient("secret-key", settings=settings, http_client=http_client)


@pytest.mark.asyncio
async def test_generate_posts_prompt_and_returns_text(settings):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=gemini_body("# Tailored"))

    client = make_client(settings, handler)
    assert await client.generate("Rewrite this") == "# Tailored"

    assert seen["url"].path == "/v1beta/models/gemini-1.5-flash:generateContent"
    assert seen["url"].host == "generativelanguage.googleapis.com"
    assert seen["url"].params["key"] == "secret-key"
    assert seen["body"] == {"contents": [{"parts": [{"text": "Rewrite this"}]}]}


@pytest.mark.asyncio
async def test_non_success_status_raises_api_error(settings):
    client = make_client(settings, lambda request: httpx.Response(403, json={"error": {}}))
    with pytest.raises(GeminiAPIError, match="Gemini API Error: Forbidden") as exc_info:
        await client.generate("prompt")
    assert exc_info.value.status_code == 403


@pytest.mark.asyncio
async def test_missing_text_raises_format_error(settings):
    client = make_client(settings, lambda request: httpx.Response(200, json={"candidates": []}))
    with pytest.raises(ResponseFormatError, match="Unexpected Gemini API response format."):
        await client.generate("prompt")


@pytest.mark.asyncio
async def test_transport_failure_raises_api_error(settings):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(settings, handler)
    with pytest.raises(GeminiAPIError):
        await client.generate("prompt")


@pytest.mark.asyncio
async def test_timeout_raises_api_error(settings):
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    client = make_client(settings, handler)
    with pytest.raises(GeminiAPIError, match="timed out"):
        await client.generate("prompt")


class TestExtractGeneratedText:

    def test_text_part(self):
        assert extract_generated_text(gemini_body("hello")) == "hello"

    def test_bare_string_part(self):
        data = {"candidates": [{"content": {"parts": ["plain string"]}}]}
        assert extract_generated_text(data) == "plain string"

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"candidates": []},
            {"candidates": [{"content": {}}]},
            {"candidates": [{"content": {"parts": [{}]}}]},
            {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
            None,
        ],
    )
    def test_malformed_bodies(self, data):
        with pytest.raises(ResponseFormatError):
            extract_generated_text(data)


def test_request_body_shape():
    assert build_request_body("p") == {"contents": [{"parts": [{"text": "p"}]}]}
