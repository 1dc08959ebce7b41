"""
AI-powered resume customization using the Gemini API.

The pipeline runs sequentially: extract the resume text, rewrite the resume
for the job, extract keywords, score the match, and ask for suggestions.
"""

import json
import logging
import re
import time
from dataclasses import dataclass, field
from typing import Any, AsyncGenerator, Dict, List, Optional

from .config import Settings, load_settings
from .exceptions import KeywordExtractionError, MissingInputError
from .extractor import TextExtractor, get_default_extractor
from .gemini import GeminiClient
from .matcher import ScoreTier, calculate_ats_score, score_tier
from .prompts import (
    CUSTOMIZE_RESUME_PROMPT,
    KEYWORDS_PROMPT,
    SUGGESTIONS_PROMPT,
    build_prompt,
)

logger = logging.getLogger(__name__)

RESUME_LABEL = "customized resume:"
JSON_OBJECT_PATTERN = re.compile(r"{[\s\S]*}")


@dataclass(frozen=True)
class JobDetails:
    """Job fields from one form submission."""
    title: str = ""
    description: str = ""
    skills: str = ""


def _keyword_list(value: Any) -> List[str]:
    # Anything but an array counts as no keywords; items are stringified
    if not isinstance(value, (list, tuple)):
        return []
    return [str(item) for item in value]


@dataclass
class KeywordResult:
    """Keyword breakdown returned by the model."""
    resume_keywords: List[str] = field(default_factory=list)
    job_keywords: List[str] = field(default_factory=list)
    matched_keywords: List[str] = field(default_factory=list)
    missing_keywords: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeywordResult":
        return cls(
            resume_keywords=_keyword_list(data.get("resumeKeywords")),
            job_keywords=_keyword_list(data.get("jobKeywords")),
            matched_keywords=_keyword_list(data.get("matchedKeywords")),
            missing_keywords=_keyword_list(data.get("missingKeywords")),
        )


@dataclass
class CustomizationResult:
    """Everything one submission produces."""
    resume_text: str
    customized_resume: str
    keywords: KeywordResult
    ats_score: int
    tier: ScoreTier
    suggestions_text: str
    suggestions: List[str]


def strip_resume_label(text: str) -> str:
    """Drop a leading "Customized Resume:" label the model sometimes adds."""
    text = text.strip()
    if text.lower().startswith(RESUME_LABEL):
        text = re.sub(RESUME_LABEL, "", text, count=1, flags=re.IGNORECASE).strip()
    return text


def parse_keyword_json(text: str) -> KeywordResult:
    """Parse the keyword response, recovering JSON wrapped in extra prose."""
    text = text.strip()
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        match = JSON_OBJECT_PATTERN.search(text)
        if not match:
            raise KeywordExtractionError("Failed to extract keywords.")
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError as exc:
            raise KeywordExtractionError("Failed to extract keywords.") from exc

    if not isinstance(data, dict):
        raise KeywordExtractionError("Failed to extract keywords.")
    return KeywordResult.from_dict(data)


def normalize_suggestions(suggestions: Any) -> str:
    """Coerce a suggestions payload into one newline-separated string."""
    if isinstance(suggestions, str):
        return suggestions
    if isinstance(suggestions, (list, tuple)):
        return "\n".join(str(s) for s in suggestions)
    return str(suggestions)


def split_suggestions(text: str) -> List[str]:
    """One entry per non-blank line, without the leading "- " bullet."""
    items = []
    for line in text.split("\n"):
        if not line.strip():
            continue
        if line.startswith("- "):
            line = line[2:]
        items.append(line.strip())
    return items


async def get_customized_resume(client: GeminiClient, resume_text: str, job: JobDetails) -> str:
    prompt = build_prompt(CUSTOMIZE_RESUME_PROMPT, resume_text, job)
    return strip_resume_label(await client.generate(prompt))


async def extract_keywords(client: GeminiClient, resume_text: str, job: JobDetails) -> KeywordResult:
    prompt = build_prompt(KEYWORDS_PROMPT, resume_text, job)
    return parse_keyword_json(await client.generate(prompt))


async def get_resume_suggestions(client: GeminiClient, resume_text: str, job: JobDetails) -> str:
    prompt = build_prompt(SUGGESTIONS_PROMPT, resume_text, job)
    return await client.generate(prompt)


class ResumeCustomizer:
    """Runs the whole customization pipeline for one submission."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        settings: Optional[Settings] = None,
        extractor: Optional[TextExtractor] = None,
        client: Optional[GeminiClient] = None,
    ):
        self.settings = settings or load_settings()
        self.api_key = (api_key or "").strip() or self.settings.api_key
        if not self.api_key and client is None:
            raise MissingInputError()

        self.extractor = extractor or get_default_extractor()
        self.client = client or GeminiClient(self.api_key, settings=self.settings)

    async def customize_with_progress(
        self, pdf_bytes: bytes, job: JobDetails
    ) -> AsyncGenerator[Dict, None]:
        """Run the pipeline, yielding progress updates and finally the result."""
        if not pdf_bytes:
            raise MissingInputError()

        start = time.perf_counter()
        logger.info("Customization start title=%r job_chars=%s", job.title, len(job.description))

        # Step 1: Extract resume text
        yield {"step": "extracting", "message": "Reading your resume...", "progress": 10}
        resume_text = self.extractor.extract_text(pdf_bytes)

        # Step 2: Rewrite the resume for the job
        yield {"step": "generating", "message": "Customizing resume for the job...", "progress": 25}
        customized = await get_customized_resume(self.client, resume_text, job)

        # Step 3: Keyword breakdown
        yield {"step": "keywords", "message": "Extracting keywords...", "progress": 55}
        keywords = await extract_keywords(self.client, resume_text, job)

        # Step 4: Score
        score = calculate_ats_score(keywords.matched_keywords, keywords.job_keywords)
        tier = score_tier(score)
        yield {
            "step": "scoring",
            "message": f"ATS score: {score}%",
            "progress": 70,
            "data": {"ats_score": score, "tier": tier.name},
        }

        # Step 5: Suggestions
        yield {"step": "suggestions", "message": "Generating improvement suggestions...", "progress": 80}
        suggestions_text = normalize_suggestions(
            await get_resume_suggestions(self.client, resume_text, job)
        )

        yield {"step": "complete", "message": "Done!", "progress": 100}
        logger.info(
            "Customization complete score=%s tier=%s duration=%.2fs",
            score,
            tier.name,
            time.perf_counter() - start,
        )

        result = CustomizationResult(
            resume_text=resume_text,
            customized_resume=customized,
            keywords=keywords,
            ats_score=score,
            tier=tier,
            suggestions_text=suggestions_text,
            suggestions=split_suggestions(suggestions_text),
        )
        yield {"step": "result", "result": result}

    async def customize(self, pdf_bytes: bytes, job: JobDetails) -> CustomizationResult:
        """Non-streaming version of customize_with_progress."""
        result = None
        async for update in self.customize_with_progress(pdf_bytes, job):
            if update.get("step") == "result":
                result = update["result"]
        return result
