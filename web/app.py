"""
FastAPI web application for the Resume Customizer.
Serves the single page and the customize / export API it calls.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Callable, List, Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse, Response, StreamingResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from resume_customizer import __version__
from resume_customizer.ai_tailor import CustomizationResult, JobDetails, ResumeCustomizer
from resume_customizer.config import Settings, load_settings
from resume_customizer.exceptions import (
    CustomizerError,
    GeminiAPIError,
    KeywordExtractionError,
    MissingInputError,
    PdfExtractionError,
    ResponseFormatError,
)
from resume_customizer.exporters import get_exporter
from resume_customizer.generator import (
    render_matched_keywords,
    render_missing_keywords,
    render_resume_panel,
    render_score_gauge,
    render_suggestions,
)
from resume_customizer.logging_config import configure_logging

load_dotenv()

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred. Please try again."

app = FastAPI(title="Resume Customizer", version=__version__)

static_path = Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=str(static_path)), name="static")


# === Dependencies ===

@lru_cache()
def get_settings() -> Settings:
    settings = load_settings()
    configure_logging(settings.log_level)
    return settings


def get_customizer_factory() -> Callable[..., ResumeCustomizer]:
    return ResumeCustomizer


# === Models ===

class CustomizeResponse(BaseModel):
    customized_resume: str
    resume_keywords: List[str]
    job_keywords: List[str]
    matched_keywords: List[str]
    missing_keywords: List[str]
    ats_score: int
    score_tier: str
    score_color: str
    score_message: str
    suggestions: List[str]
    resume_html: str
    score_html: str
    matched_html: str
    missing_html: str
    suggestions_html: str


def build_response(result: CustomizationResult) -> CustomizeResponse:
    keywords = result.keywords
    return CustomizeResponse(
        customized_resume=result.customized_resume,
        resume_keywords=keywords.resume_keywords,
        job_keywords=keywords.job_keywords,
        matched_keywords=keywords.matched_keywords,
        missing_keywords=keywords.missing_keywords,
        ats_score=result.ats_score,
        score_tier=result.tier.name,
        score_color=result.tier.color,
        score_message=result.tier.message,
        suggestions=result.suggestions,
        resume_html=render_resume_panel(result.customized_resume),
        score_html=render_score_gauge(result.ats_score, result.tier),
        matched_html=render_matched_keywords(keywords.matched_keywords),
        missing_html=render_missing_keywords(keywords.missing_keywords),
        suggestions_html=render_suggestions(result.suggestions),
    )


def error_status(exc: CustomizerError) -> int:
    if isinstance(exc, MissingInputError):
        return 400
    if isinstance(exc, PdfExtractionError):
        return 422
    if isinstance(exc, (GeminiAPIError, ResponseFormatError, KeywordExtractionError)):
        return 502
    return 500


async def _read_submission(resume: Optional[UploadFile], api_key: str, settings: Settings) -> bytes:
    data = await resume.read() if resume is not None else b""
    if not data or not (api_key.strip() or settings.api_key):
        raise MissingInputError()
    return data


# === Routes ===

@app.get("/", response_class=HTMLResponse)
async def root():
    html_path = static_path / "index.html"
    return HTMLResponse(content=html_path.read_text(encoding="utf-8"))


@app.get("/api/health")
async def health_check(settings: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "version": __version__,
        "model": settings.model,
        "server_key_configured": bool(settings.api_key),
    }


@app.post("/api/customize", response_model=CustomizeResponse)
async def customize_resume(
    resume: Optional[UploadFile] = File(None),
    job_title: str = Form(""),
    job_description: str = Form(""),
    job_skills: str = Form(""),
    api_key: str = Form(""),
    settings: Settings = Depends(get_settings),
    customizer_factory: Callable[..., ResumeCustomizer] = Depends(get_customizer_factory),
):
    """Run the full pipeline and return the dashboard data."""
    try:
        pdf_bytes = await _read_submission(resume, api_key, settings)
        job = JobDetails(title=job_title, description=job_description, skills=job_skills)
        customizer = customizer_factory(api_key=api_key, settings=settings)
        result = await customizer.customize(pdf_bytes, job)
        return build_response(result)

    except CustomizerError as e:
        logger.warning("Customization failed: %s", e)
        raise HTTPException(status_code=error_status(e), detail=str(e))
    except Exception:
        logger.exception("Unexpected error during customization")
        raise HTTPException(status_code=500, detail=GENERIC_ERROR_MESSAGE)


@app.post("/api/customize/stream")
async def customize_resume_stream(
    resume: Optional[UploadFile] = File(None),
    job_title: str = Form(""),
    job_description: str = Form(""),
    job_skills: str = Form(""),
    api_key: str = Form(""),
    settings: Settings = Depends(get_settings),
    customizer_factory: Callable[..., ResumeCustomizer] = Depends(get_customizer_factory),
):
    """Streaming customization with progress updates via SSE."""
    pdf_bytes = await resume.read() if resume is not None else b""
    job = JobDetails(title=job_title, description=job_description, skills=job_skills)

    async def generate_events():
        try:
            if not pdf_bytes or not (api_key.strip() or settings.api_key):
                raise MissingInputError()
            customizer = customizer_factory(api_key=api_key, settings=settings)

            async for update in customizer.customize_with_progress(pdf_bytes, job):
                if update.get("step") == "result":
                    final_data = build_response(update["result"]).model_dump()
                    final_data["step"] = "result"
                    yield f"data: {json.dumps(final_data)}\n\n"
                else:
                    yield f"data: {json.dumps(update)}\n\n"

        except CustomizerError as e:
            logger.warning("Customization failed: %s", e)
            yield f"data: {json.dumps({'step': 'error', 'message': str(e)})}\n\n"
        except Exception:
            logger.exception("Unexpected error during streaming customization")
            yield f"data: {json.dumps({'step': 'error', 'message': GENERIC_ERROR_MESSAGE})}\n\n"

    return StreamingResponse(
        generate_events(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no"
        }
    )


@app.post("/api/export/{kind}")
async def export_resume(kind: str, markdown: str = Form(...)):
    """Export the customized resume as .txt, .doc or a print-to-PDF page."""
    try:
        exporter = get_exporter(kind)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    artifact = exporter.export(markdown)
    logger.info("Export kind=%s filename=%s chars=%s", exporter.kind, artifact.filename, len(markdown))
    return Response(
        content=artifact.content,
        media_type=artifact.media_type,
        headers={"Content-Disposition": artifact.content_disposition, **artifact.headers},
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
