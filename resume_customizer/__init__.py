"""
Resume Customizer

Takes a PDF resume and a job description, then uses Gemini to produce a
tailored resume, an ATS keyword-match score and improvement suggestions.
"""

from .ai_tailor import (
    CustomizationResult,
    JobDetails,
    KeywordResult,
    ResumeCustomizer,
    parse_keyword_json,
    strip_resume_label,
)
from .exporters import ExportArtifact, Exporter, get_exporter
from .extractor import PdfPlumberExtractor, TextExtractor, extract_text_from_pdf
from .matcher import ScoreTier, calculate_ats_score, score_tier
from .markdown import markdown_to_html, markdown_to_word_text

__version__ = "1.0.0"
__all__ = [
    "ResumeCustomizer",
    "JobDetails",
    "KeywordResult",
    "CustomizationResult",
    "parse_keyword_json",
    "strip_resume_label",
    "calculate_ats_score",
    "score_tier",
    "ScoreTier",
    "markdown_to_html",
    "markdown_to_word_text",
    "extract_text_from_pdf",
    "TextExtractor",
    "PdfPlumberExtractor",
    "Exporter",
    "ExportArtifact",
    "get_exporter",
]
