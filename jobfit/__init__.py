"""
JobFit ATS

Matches a resume against a job description, classifies how programming-heavy
the role is, and generates tailored resume content.
"""

from .extractor import extract_keywords, tokenize, split_sentences, KeywordExtractor
from .matcher import compute_score, match_keywords, MatchResult
from .intensity import classify_intensity, IntensityClassifier, IntensityLevel
from .company import extract_company_name, resolve_company, CompanyExtractor
from .generator import ContentGenerator, TailoredContent, PracticeProject
from .pipeline import analyze, generate, build_document, tailor, AnalysisResult, GenerationResult, TailoredDocument
from .errors import JobFitError, ExportError

__version__ = "1.0.0"
__all__ = [
    "extract_keywords",
    "tokenize",
    "split_sentences",
    "compute_score",
    "match_keywords",
    "classify_intensity",
    "extract_company_name",
    "resolve_company",
    "analyze",
    "generate",
    "build_document",
    "tailor",
    "KeywordExtractor",
    "MatchResult",
    "IntensityClassifier",
    "IntensityLevel",
    "CompanyExtractor",
    "ContentGenerator",
    "TailoredContent",
    "PracticeProject",
    "AnalysisResult",
    "GenerationResult",
    "TailoredDocument",
    "JobFitError",
    "ExportError",
]
