"""
FastAPI web application for JobFit ATS.
Exposes analysis, generation, study plan and export routes over the jobfit pipeline.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, List

sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from jobfit import __version__
from jobfit.company import resolve_company
from jobfit.config import AnalysisConfig, configure_logging
from jobfit.errors import ExportError
from jobfit.exporter import export_pdf, pdflatex_available
from jobfit.generator import STUDY_PLAN_TIP
from jobfit.intensity import BADGE_LABELS, IntensityLevel
from jobfit.pipeline import AnalysisResult, GenerationResult, analyze, build_document, generate
from jobfit.renderer import clipboard_text, export_filename, render_latex, render_text

configure_logging()
logger = logging.getLogger(__name__)

config = AnalysisConfig.from_env()

app = FastAPI(title="JobFit ATS", version=__version__)


# === Models ===

class AnalyzeRequest(BaseModel):
    resume_text: str = ""
    job_description: str = ""


class GenerateRequest(BaseModel):
    resume_text: str = ""
    job_description: str = ""
    current_keywords: Optional[List[str]] = None
    company: Optional[str] = None


class ExportRequest(BaseModel):
    resume_text: str = ""
    job_description: str = ""
    company: Optional[str] = None


# === Serialization ===

def _level(level: Optional[IntensityLevel]) -> Optional[str]:
    return level.value if level else None


def analysis_payload(result: AnalysisResult) -> dict:
    return {
        "keywords": list(result.keywords),
        "initial_score": result.initial_score,
        "intensity": _level(result.intensity),
        "badge": BADGE_LABELS.get(result.intensity) if result.intensity else None,
        "auto_company": result.auto_company,
        "notes": list(result.notes),
    }


def generation_payload(result: GenerationResult) -> dict:
    return {
        "keywords": list(result.keywords),
        "initial_score": result.initial_score,
        "post_score": result.post_score,
        "intensity": _level(result.intensity),
        "summary": result.content.summary,
        "skills": list(result.content.skills),
        "bullets": list(result.content.bullets),
        "practice_project": result.practice_project,
        "study_plan": list(result.study_plan) if result.study_plan else None,
        "notes": list(result.notes),
        "export_enabled": result.intensity not in (None, IntensityLevel.HIGH),
    }


def _build(request: ExportRequest):
    analysis = analyze(request.resume_text, request.job_description, config)
    generation = generate(request.resume_text, request.job_description, analysis.keywords, config)
    if not generation.content.bullets:
        return generation, None
    company = resolve_company(analysis.auto_company, request.company)
    return generation, build_document(request.resume_text, generation, company, config)


# === Routes ===

@app.get("/api/health")
async def health_check():
    return {
        "status": "healthy",
        "version": __version__,
        "pdflatex": pdflatex_available(),
        "features": ["analyze", "generate", "study_plan", "export"]
    }


@app.post("/api/analyze")
async def analyze_job(request: AnalyzeRequest):
    """Keywords, initial score, intensity, company and notes for a job description."""
    result = analyze(request.resume_text, request.job_description, config)
    return JSONResponse(analysis_payload(result))


@app.post("/api/generate")
async def generate_tailored(request: GenerateRequest):
    """Tailored summary, skills and bullets plus post score and notes."""
    analysis = analyze(request.resume_text, request.job_description, config)
    current = request.current_keywords if request.current_keywords is not None else list(analysis.keywords)
    result = generate(request.resume_text, request.job_description, current, config)

    payload = generation_payload(result)
    company = resolve_company(analysis.auto_company, request.company)
    payload["company"] = company
    payload["clipboard_text"] = clipboard_text(result.content.bullets)
    if result.content.bullets:
        document = build_document(request.resume_text, result, company, config)
        payload["candidate_name"] = document.candidate_name
        payload["filename"] = export_filename(document.candidate_name, company)
    return JSONResponse(payload)


@app.post("/api/study-plan")
async def study_plan(request: AnalyzeRequest):
    """Short study plan; only moderate roles get one."""
    result = generate(request.resume_text, request.job_description, None, config)
    if result.study_plan is None:
        return JSONResponse({
            "available": False,
            "intensity": _level(result.intensity),
            "message": "Study plan available only for moderate roles.",
        })
    return JSONResponse({
        "available": True,
        "intensity": _level(result.intensity),
        "plan": list(result.study_plan),
        "tip": STUDY_PLAN_TIP,
    })


@app.post("/api/export/pdf")
async def export_pdf_route(request: ExportRequest):
    """Export the tailored resume as PDF; refused for heavy programming roles."""
    generation, document = _build(request)
    if generation.intensity is IntensityLevel.HIGH:
        raise HTTPException(status_code=403, detail="Apply disabled (Heavy)")

    try:
        pdf = await export_pdf(document, config)
    except ExportError:
        logger.exception("PDF export failed")
        raise HTTPException(status_code=502, detail="PDF export failed")

    if pdf is None:
        return Response(status_code=204)

    filename = export_filename(document.candidate_name, document.company)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )


@app.post("/api/export/tex")
async def export_tex(request: ExportRequest):
    """Export the tailored resume as a .tex file for manual compilation."""
    _, document = _build(request)
    if document is None:
        raise HTTPException(status_code=400, detail="Nothing to export")
    filename = export_filename(document.candidate_name, document.company, "tex")
    return Response(
        content=render_latex(document),
        media_type="application/x-tex",
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )


@app.post("/api/export/txt")
async def export_txt(request: ExportRequest):
    """Export the tailored resume as plain text."""
    _, document = _build(request)
    if document is None:
        raise HTTPException(status_code=400, detail="Nothing to export")
    return JSONResponse({
        "success": True,
        "content": render_text(document),
        "filename": export_filename(document.candidate_name, document.company, "txt")
    })


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
