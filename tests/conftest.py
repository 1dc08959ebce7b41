"""Shared fakes for the resume customizer tests.

The pipeline talks to two outside systems, the PDF library and the Gemini
endpoint. Both are replaced here so the tests never touch a real file
format or the network.
"""

import json
from typing import List, Union

import pytest

from resume_customizer.ai_tailor import JobDetails, ResumeCustomizer
from resume_customizer.config import Settings
from resume_customizer.extractor import TextExtractor

KEYWORDS_JSON = json.dumps({
    "resumeKeywords": ["Java", "Spring Boot"],
    "jobKeywords": ["Java", "Spring Boot", "Microservices"],
    "matchedKeywords": ["Java", "Spring Boot"],
    "missingKeywords": ["Microservices"],
})

RESUME_MARKDOWN = "# Jane Doe\n## Experience\n* Built **Java** services with *Spring Boot*"


class FakeExtractor(TextExtractor):
    """Returns canned text and records what it was given."""

    def __init__(self, text: str = "Jane Doe\nJava developer with Spring Boot"):
        self.text = text
        self.calls: List[bytes] = []

    def extract_text(self, data: bytes) -> str:
        self.calls.append(data)
        return self.text


class FakeGeminiClient:
    """Answers prompts from a queue; an Exception in the queue is raised."""

    def __init__(self, responses: List[Union[str, Exception]]):
        self.responses = list(responses)
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key=None, model="gemini-1.5-flash", timeout=5.0)


@pytest.fixture
def job() -> JobDetails:
    return JobDetails(
        title="Backend Engineer",
        description="Build Java microservices with Spring Boot.",
        skills="Java, Spring Boot, Microservices",
    )


@pytest.fixture
def happy_responses() -> List[str]:
    return [
        "Customized Resume:\n" + RESUME_MARKDOWN,
        "Here you go:\n" + KEYWORDS_JSON + "\nHope this helps.",
        "- Add Microservices experience\n\n- Quantify your impact",
    ]


@pytest.fixture
def make_customizer(settings):
    """Factory for a customizer wired to fakes."""

    def _make(responses, extractor=None):
        return ResumeCustomizer(
            api_key="test-key",
            settings=settings,
            extractor=extractor or FakeExtractor(),
            client=FakeGeminiClient(responses),
        )

    return _make
