"""
Errors raised by the resume customization pipeline.
"""

from typing import Optional

MISSING_INPUT_MESSAGE = "Please upload a resume and enter your API key."


class CustomizerError(RuntimeError):
    """Base class for every failure that aborts a customization run."""


class MissingInputError(CustomizerError):
    """Raised when the resume file or the API key was not supplied."""

    def __init__(self, message: str = MISSING_INPUT_MESSAGE):
        super().__init__(message)


class PdfExtractionError(CustomizerError):
    """Raised when the uploaded document cannot be read as a PDF."""


class GeminiAPIError(CustomizerError):
    """Raised when the Gemini endpoint answers with a non-success status
    or cannot be reached at all."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ResponseFormatError(CustomizerError):
    """Raised when the Gemini response lacks the generated text field."""


class KeywordExtractionError(CustomizerError):
    """Raised when the keyword response is not parseable JSON."""
