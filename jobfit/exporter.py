"""
PDF export for the tailored resume.

Compiles the rendered LaTeX with a local pdflatex when one is installed and
falls back to an online LaTeX build service otherwise. Every failure surfaces
as ExportError; the exporter never looks at analysis state.
"""

import asyncio
import logging
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Optional

import httpx

from .config import AnalysisConfig, DEFAULT_CONFIG
from .errors import ExportError
from .pipeline import TailoredDocument
from .renderer import render_latex


logger = logging.getLogger(__name__)

PDFLATEX_TIMEOUT = 30


def pdflatex_available() -> bool:
    return shutil.which("pdflatex") is not None


def _compile_locally(latex_content: str) -> bytes:
    try:
        with tempfile.TemporaryDirectory() as tmpdir:
            tex_path = Path(tmpdir) / "resume.tex"
            pdf_path = Path(tmpdir) / "resume.pdf"
            tex_path.write_text(latex_content, encoding="utf-8")

            result = subprocess.run(
                ["pdflatex", "-interaction=nonstopmode", "-output-directory", tmpdir, str(tex_path)],
                capture_output=True,
                text=True,
                timeout=PDFLATEX_TIMEOUT,
            )

            if not pdf_path.exists():
                raise ExportError(f"LaTeX compilation failed: {(result.stdout or result.stderr)[-500:]}")
            return pdf_path.read_bytes()
    except subprocess.TimeoutExpired as exc:
        raise ExportError("LaTeX compilation timed out") from exc
    except OSError as exc:
        raise ExportError(f"Local LaTeX compilation failed: {exc}") from exc


async def _compile_online(latex_content: str, config: AnalysisConfig) -> bytes:
    try:
        async with httpx.AsyncClient(timeout=config.export_timeout) as client:
            response = await client.post(
                config.latex_service_url,
                json={
                    "compiler": "pdflatex",
                    "resources": [{"main": True, "content": latex_content}],
                },
            )
    except httpx.TimeoutException as exc:
        raise ExportError("Online LaTeX compilation timed out") from exc
    except httpx.HTTPError as exc:
        raise ExportError(f"Online LaTeX compilation failed: {exc}") from exc

    if response.status_code not in (200, 201):
        error_msg = response.text[:500] if response.text else "Unknown error"
        raise ExportError(f"Online LaTeX compilation failed: {error_msg}")
    return response.content


async def compile_pdf(latex_content: str, config: Optional[AnalysisConfig] = None) -> bytes:
    """Compile LaTeX source to PDF bytes."""
    config = config or DEFAULT_CONFIG
    if pdflatex_available():
        logger.debug("Compiling PDF with local pdflatex")
        return await asyncio.to_thread(_compile_locally, latex_content)
    logger.debug("pdflatex not found; using %s", config.latex_service_url)
    return await _compile_online(latex_content, config)


async def export_pdf(
    document: Optional[TailoredDocument],
    config: Optional[AnalysisConfig] = None,
) -> Optional[bytes]:
    """Render and compile the document; returns None when there is nothing to export."""
    if document is None:
        return None
    try:
        latex = render_latex(document)
    except (KeyError, TypeError, ValueError) as exc:
        raise ExportError(f"Rendering failed: {exc}") from exc
    pdf = await compile_pdf(latex, config)
    logger.info("Exported PDF (%d bytes)", len(pdf))
    return pdf
