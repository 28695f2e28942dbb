"""
Company name extraction from job descriptions.

Tries a fixed sequence of pattern heuristics and returns the first candidate
that survives sanitizing and the salary/number rejection check. A miss is a
normal outcome and yields an empty string.
"""

import re
from typing import Callable, Iterable, List, Optional


# Anything that looks like pay or a figure disqualifies a candidate
REJECT_PATTERN = re.compile(r'\d|[$€£¥₹]|lpa|per month|salary', re.IGNORECASE)

COMPANY_LINE_PATTERN = re.compile(r'^\s*company', re.IGNORECASE)
COMPANY_SEPARATOR = re.compile(r'[:\-–]')
AT_PATTERN = re.compile(r'\bat\s+([A-Z][A-Za-z0-9&.\- ]{2,60})')
IS_A_PATTERN = re.compile(r'([A-Z][A-Za-z0-9&.\- ]{2,60})\s+is\s+an?\b')
FALLBACK_SEPARATOR = re.compile(r'[\-:|]')

CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f]')
DISALLOWED_CHARS = re.compile(r'[^A-Za-z0-9&.\- ]')

MAX_FALLBACK_LENGTH = 40


def sanitize_company(text: str) -> str:
    """Strip control characters, extra whitespace and disallowed characters."""
    text = CONTROL_CHARS.sub(' ', text or '')
    text = re.sub(r'\s+', ' ', text)
    text = DISALLOWED_CHARS.sub('', text)
    return text.strip()


def is_rejected(candidate: str) -> bool:
    """True when the candidate carries digits, currency or salary wording."""
    return bool(REJECT_PATTERN.search(candidate))


class CompanyExtractor:
    """Locate a plausible company name with ordered heuristics."""

    def __init__(self):
        self.heuristics: List[Callable[[str], Iterable[str]]] = [
            self._from_company_line,
            self._from_at_phrase,
            self._from_is_a_phrase,
            self._from_short_line,
        ]

    def extract(self, job_description: str) -> str:
        if not job_description or not job_description.strip():
            return ''
        for heuristic in self.heuristics:
            for candidate in heuristic(job_description):
                if is_rejected(candidate):
                    continue
                cleaned = sanitize_company(candidate)
                if cleaned:
                    return cleaned
        return ''

    def _from_company_line(self, text: str) -> Iterable[str]:
        for line in text.splitlines():
            if not COMPANY_LINE_PATTERN.match(line) or not re.search(r'[A-Z]', line):
                continue
            parts = COMPANY_SEPARATOR.split(line, maxsplit=1)
            if len(parts) == 2:
                yield parts[1]

    def _from_at_phrase(self, text: str) -> Iterable[str]:
        for match in AT_PATTERN.finditer(text):
            yield match.group(1)

    def _from_is_a_phrase(self, text: str) -> Iterable[str]:
        for match in IS_A_PATTERN.finditer(text):
            yield match.group(1)

    def _from_short_line(self, text: str) -> Iterable[str]:
        for line in text.splitlines():
            segment = FALLBACK_SEPARATOR.split(line, maxsplit=1)[0].strip()
            if re.search(r'[A-Za-z]', segment) and len(segment) < MAX_FALLBACK_LENGTH:
                yield segment


def resolve_company(auto_company: str, user_company: Optional[str] = None) -> str:
    """Prefer the user's edited company name over the extracted one."""
    if user_company and user_company.strip():
        return user_company.strip()
    return auto_company or ''


_default_extractor = CompanyExtractor()


def extract_company_name(job_description: str) -> str:
    """Convenience function to extract a company name from a job description."""
    return _default_extractor.extract(job_description)
