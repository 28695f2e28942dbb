"""
Content matcher and scorer.
Scores documents against job keywords and selects keyword-bearing resume sentences.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .extractor import split_sentences


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching a document against a keyword list."""
    score: int
    matched_keywords: Tuple[str, ...]
    missing_keywords: Tuple[str, ...]


def compute_score(document: str, keywords: Sequence[str]) -> int:
    """Percentage of keywords found as substrings of the document, rounded half up.

    Containment is not token aware: "java" matches inside "javascript".
    """
    if not keywords:
        return 0
    text_lower = (document or '').lower()
    found = sum(1 for keyword in keywords if keyword in text_lower)
    return int(math.floor(found / len(keywords) * 100 + 0.5))


def match_keywords(document: str, keywords: Sequence[str]) -> MatchResult:
    """Split keywords into found and missing, and score the document."""
    text_lower = (document or '').lower()
    matched = tuple(k for k in keywords if k in text_lower)
    missing = tuple(k for k in keywords if k not in text_lower)
    return MatchResult(
        score=compute_score(document, keywords),
        matched_keywords=matched,
        missing_keywords=missing,
    )


def find_missing_keywords(document: str, keywords: Sequence[str], limit: int = 8) -> List[str]:
    """Keywords absent from the document, in ranking order, at most limit."""
    return list(match_keywords(document, keywords).missing_keywords[:limit])


def select_matching_sentences(text: str, keywords: Sequence[str]) -> List[str]:
    """Resume sentences that mention any keyword (case-insensitive substring)."""
    if not keywords:
        return []
    return [
        sentence for sentence in split_sentences(text)
        if any(keyword in sentence.lower() for keyword in keywords)
    ]
