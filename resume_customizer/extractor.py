"""
Resume text extraction from uploaded PDF documents.
"""

import io
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import pdfplumber

from .exceptions import PdfExtractionError

logger = logging.getLogger(__name__)


class TextExtractor(ABC):
    """Turns the raw bytes of an uploaded document into plain text."""

    @abstractmethod
    def extract_text(self, data: bytes) -> str:
        raise NotImplementedError


class PdfPlumberExtractor(TextExtractor):
    """Reads every page's word tokens with pdfplumber.

    Tokens on a page are joined with a single space, pages with a newline,
    and the final text is trimmed.
    """

    def extract_text(self, data: bytes) -> str:
        if not data:
            raise PdfExtractionError("The uploaded file is empty.")

        pages: List[str] = []
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                for page in pdf.pages:
                    words = page.extract_words()
                    pages.append(" ".join(word["text"] for word in words))
        except Exception as exc:
            logger.warning("PDF extraction failed: %s", exc)
            raise PdfExtractionError(f"Could not read the PDF: {exc}") from exc

        text = "\n".join(pages).strip()
        logger.info("Extracted %s characters from %s page(s)", len(text), len(pages))
        return text


_default_extractor: Optional[TextExtractor] = None


def get_default_extractor() -> TextExtractor:
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = PdfPlumberExtractor()
    return _default_extractor


def extract_text_from_pdf(data: bytes, extractor: Optional[TextExtractor] = None) -> str:
    """Extract plain text from PDF bytes."""
    return (extractor or get_default_extractor()).extract_text(data)
