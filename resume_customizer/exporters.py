"""
Download formats for the customized resume.
"""

import base64
import hashlib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Type

from .markdown import markdown_to_html, markdown_to_word_text

PRINT_DELAY_MS = 500

# Inserted verbatim between the <script> tags; the CSP hash covers these exact bytes
PRINT_SCRIPT = (
    "window.focus();"
    " setTimeout(function () {{ window.print(); window.close(); }}, {delay});"
).format(delay=PRINT_DELAY_MS)

PRINT_VIEW_TEMPLATE = """<html>
  <head>
    <title>Resume PDF Export</title>
    <style>
      body {{ font-family: 'Segoe UI', Arial, sans-serif; background: #fff; margin: 0; padding: 30px; }}
      h1, h2, h3 {{ color: #234E70; }}
      li {{ margin-bottom: 8px; }}
    </style>
  </head>
  <body>{body}
    <script>{script}</script>
  </body>
</html>
"""


def script_hash(script: str) -> str:
    """CSP source expression allowing exactly this inline script."""
    digest = hashlib.sha256(script.encode("utf-8")).digest()
    return "'sha256-" + base64.b64encode(digest).decode("ascii") + "'"


# Model-written markup in the body cannot run scripts or load anything
PRINT_VIEW_CSP = (
    "default-src 'none'; style-src 'unsafe-inline'; script-src " + script_hash(PRINT_SCRIPT)
)


@dataclass
class ExportArtifact:
    """A file ready to hand to the browser."""
    filename: str
    media_type: str
    content: str
    disposition: str = "attachment"
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def content_disposition(self) -> str:
        return f'{self.disposition}; filename="{self.filename}"'


class Exporter(ABC):
    kind: str = ""

    @abstractmethod
    def export(self, markdown_resume: str) -> ExportArtifact:
        raise NotImplementedError


class PlainTextExporter(Exporter):
    """The raw Markdown as a .txt download."""
    kind = "plain-text"

    def export(self, markdown_resume: str) -> ExportArtifact:
        return ExportArtifact("customized_resume.txt", "text/plain", markdown_resume)


class PrintViewExporter(Exporter):
    """A standalone page that opens the print dialog, for saving as PDF."""
    kind = "print-view"

    def export(self, markdown_resume: str) -> ExportArtifact:
        page = PRINT_VIEW_TEMPLATE.format(
            body=markdown_to_html(markdown_resume), script=PRINT_SCRIPT
        )
        return ExportArtifact(
            "customized_resume.html",
            "text/html",
            page,
            disposition="inline",
            headers={"Content-Security-Policy": PRINT_VIEW_CSP},
        )


class WordDocumentExporter(Exporter):
    """Plain text served with the Word MIME type and a .doc name.

    This is not a binary Word container; Word opens it as text.
    """
    kind = "rich-document"

    def export(self, markdown_resume: str) -> ExportArtifact:
        return ExportArtifact(
            "customized_resume.doc",
            "application/msword",
            markdown_to_word_text(markdown_resume),
        )


EXPORTERS: Dict[str, Type[Exporter]] = {
    "plain-text": PlainTextExporter,
    "txt": PlainTextExporter,
    "print-view": PrintViewExporter,
    "pdf": PrintViewExporter,
    "rich-document": WordDocumentExporter,
    "doc": WordDocumentExporter,
}


def get_exporter(kind: str) -> Exporter:
    try:
        return EXPORTERS[kind.lower()]()
    except KeyError:
        raise ValueError(f"Unknown export format: {kind}")
