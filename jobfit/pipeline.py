"""
Analysis pipeline.

`analyze` and `generate` are pure functions of their inputs: each call takes
the raw resume and job description text and returns a fresh immutable record.
Callers decide when to run them and keep any state themselves.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .company import extract_company_name, resolve_company
from .config import AnalysisConfig, DEFAULT_CONFIG
from .extractor import extract_keywords
from .generator import ContentGenerator, TailoredContent, extract_candidate_name
from .intensity import IntensityLevel, analysis_note, classify_intensity
from .matcher import compute_score


logger = logging.getLogger(__name__)

EMPTY_CONTENT = TailoredContent(summary='', skills=(), bullets=())


@dataclass(frozen=True)
class AnalysisResult:
    """Derived state after analyzing a resume against a job description."""
    keywords: Tuple[str, ...] = ()
    initial_score: Optional[int] = None
    intensity: Optional[IntensityLevel] = None
    auto_company: str = ''
    notes: Tuple[str, ...] = ()

    @property
    def is_set(self) -> bool:
        return self.intensity is not None


@dataclass(frozen=True)
class GenerationResult:
    """Derived state after generating tailored content."""
    keywords: Tuple[str, ...] = ()
    initial_score: Optional[int] = None
    post_score: Optional[int] = None
    intensity: Optional[IntensityLevel] = None
    content: TailoredContent = field(default=EMPTY_CONTENT)
    notes: Tuple[str, ...] = ()
    study_plan: Optional[Tuple[str, ...]] = None
    practice_project: Optional[str] = None

    @property
    def bullets(self) -> Tuple[str, ...]:
        return self.content.bullets


@dataclass(frozen=True)
class TailoredDocument:
    """Everything a renderer needs to lay out the tailored resume."""
    candidate_name: str
    company: str
    intensity: Optional[IntensityLevel]
    content: TailoredContent
    notes: Tuple[str, ...] = ()


def _is_blank(text: Optional[str]) -> bool:
    return not text or not text.strip()


def analyze(resume_text: str, job_text: str, config: Optional[AnalysisConfig] = None) -> AnalysisResult:
    """Extract keywords, score the resume, classify intensity and find the company."""
    config = config or DEFAULT_CONFIG
    if _is_blank(job_text):
        logger.debug("Blank job description; analysis unset")
        return AnalysisResult()

    keywords = tuple(extract_keywords(job_text, config.analyze_top_n))
    intensity = classify_intensity(job_text)
    note = analysis_note(intensity)
    result = AnalysisResult(
        keywords=keywords,
        initial_score=compute_score(resume_text, keywords),
        intensity=intensity,
        auto_company=extract_company_name(job_text),
        notes=(note,) if note else (),
    )
    logger.info(
        "Analyzed job description: %d keywords, score=%s, intensity=%s, company=%r",
        len(keywords), result.initial_score, intensity.value, result.auto_company,
    )
    return result


def generate(
    resume_text: str,
    job_text: str,
    current_keywords: Optional[Sequence[str]] = None,
    config: Optional[AnalysisConfig] = None,
) -> GenerationResult:
    """Generate tailored content and re-score it against the job keywords.

    `current_keywords` are the keywords the caller last showed the user; the
    missing-keyword note is computed against them when given.
    """
    config = config or DEFAULT_CONFIG
    if _is_blank(job_text):
        logger.debug("Blank job description; generation unset")
        return GenerationResult()

    keywords = tuple(extract_keywords(job_text, config.generate_top_n))
    intensity = classify_intensity(job_text)
    generator = ContentGenerator(resume_text, keywords, config)
    content, project = generator.generate()

    reference = tuple(current_keywords) if current_keywords is not None else None
    result = GenerationResult(
        keywords=keywords,
        initial_score=compute_score(resume_text, keywords),
        post_score=compute_score(generator.scoring_text(), keywords),
        intensity=intensity,
        content=content,
        notes=tuple(generator.notes(intensity, reference)),
        study_plan=generator.study_plan(intensity),
        practice_project=project.title if project else None,
    )
    logger.info(
        "Generated %d bullets (%s), score %s -> %s",
        len(content.bullets),
        project.title if project else "resume sentences",
        result.initial_score, result.post_score,
    )
    return result


def build_document(
    resume_text: str,
    generation: GenerationResult,
    company: str = '',
    config: Optional[AnalysisConfig] = None,
) -> TailoredDocument:
    """Assemble the render-surface record for a generation result."""
    config = config or DEFAULT_CONFIG
    return TailoredDocument(
        candidate_name=extract_candidate_name(resume_text, config.default_candidate),
        company=company or '',
        intensity=generation.intensity,
        content=generation.content,
        notes=generation.notes,
    )


def tailor(
    resume_text: str,
    job_text: str,
    user_company: Optional[str] = None,
    config: Optional[AnalysisConfig] = None,
) -> Tuple[AnalysisResult, GenerationResult, TailoredDocument]:
    """Run analyze then generate and assemble the document in one step."""
    analysis = analyze(resume_text, job_text, config)
    generation = generate(resume_text, job_text, analysis.keywords, config)
    company = resolve_company(analysis.auto_company, user_company)
    return analysis, generation, build_document(resume_text, generation, company, config)
