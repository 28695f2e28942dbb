"""
Technical intensity classifier for job descriptions.
Counts heavy, moderate and light programming signals and maps them to a level.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


logger = logging.getLogger(__name__)


class IntensityLevel(Enum):
    """How programming-heavy a role is."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


HEAVY_KEYWORDS = (
    'algorithm', 'data structures', 'system design', 'distributed', 'concurrency',
    'multithread', 'profiling', 'latency', 'throughput', 'advanced', 'low-level',
    'c++', 'rust', 'compiler', 'scalability', 'grpc', 'real-time', 'deep learning',
    'research', 'phd',
)

MODERATE_KEYWORDS = (
    'api', 'rest', 'backend', 'node', 'java', 'python', 'django', 'spring',
    'react', 'angular', 'vue', 'sql', 'database', 'ci/cd', 'docker', 'devops',
    'automation', 'scripting', 'bash', 'shell', 'aws', 'azure', 'gcp',
)

LIGHT_KEYWORDS = (
    'basic', 'entry', 'fresher', 'intern', 'support', 'excel', 'data entry',
    'documentation', 'testing', 'manual testing', 'helpdesk', 'no coding',
)

DEVOPS_PATTERN = re.compile(r'devops|ci/cd|docker|kubernetes|automation|scripting')

# Suitability notes shown after analysis
ANALYSIS_NOTES = {
    IntensityLevel.HIGH: "This job looks heavy on programming; recommended to skip "
                         "unless you have 2-3+ yrs experience.",
    IntensityLevel.MODERATE: "Moderate programming, possible with quick learning (see study plan).",
    IntensityLevel.LOW: "Light programming or non-coding role; safe to apply as a fresher.",
}

# Traffic-light notes shown after generation
GENERATION_NOTES = {
    IntensityLevel.HIGH: "Red: heavy programming demand. The tool strongly suggests not applying.",
    IntensityLevel.MODERATE: "Yellow: consider applying and prepare the short study plan.",
    IntensityLevel.LOW: "Green: safe to apply.",
}

BADGE_LABELS = {
    IntensityLevel.HIGH: "RED - Heavy programming",
    IntensityLevel.MODERATE: "YELLOW - Moderate",
    IntensityLevel.LOW: "GREEN - Light",
}


@dataclass(frozen=True)
class IntensitySignals:
    """Number of distinct terms from each table present in a job description."""
    heavy: int
    moderate: int
    light: int


class IntensityClassifier:
    """Classify a job description as low, moderate or high intensity."""

    def __init__(
        self,
        heavy: Tuple[str, ...] = HEAVY_KEYWORDS,
        moderate: Tuple[str, ...] = MODERATE_KEYWORDS,
        light: Tuple[str, ...] = LIGHT_KEYWORDS,
    ):
        self.heavy = heavy
        self.moderate = moderate
        self.light = light

    def signals(self, job_description: str) -> IntensitySignals:
        """Count how many terms of each table occur in the text."""
        text = (job_description or '').lower()
        return IntensitySignals(
            heavy=sum(1 for k in self.heavy if k in text),
            moderate=sum(1 for k in self.moderate if k in text),
            light=sum(1 for k in self.light if k in text),
        )

    def classify(self, job_description: str) -> IntensityLevel:
        """Apply the ordered rules; the first one that fires decides."""
        text = (job_description or '').lower()
        s = self.signals(text)
        logger.debug("Intensity signals heavy=%d moderate=%d light=%d", s.heavy, s.moderate, s.light)

        if s.heavy >= 2 or s.moderate >= 5:
            return IntensityLevel.HIGH
        if s.moderate >= 2 or s.heavy == 1:
            # DevOps-flavoured roles without heavy terms stay moderate as well
            if DEVOPS_PATTERN.search(text) and s.heavy == 0:
                return IntensityLevel.MODERATE
            return IntensityLevel.MODERATE
        if s.light >= 1 or (s.moderate == 0 and s.heavy == 0):
            return IntensityLevel.LOW
        return IntensityLevel.MODERATE


def analysis_note(level: Optional[IntensityLevel]) -> Optional[str]:
    """Suitability note for the analyze step, or None when unset."""
    return ANALYSIS_NOTES.get(level) if level else None


def generation_note(level: Optional[IntensityLevel]) -> Optional[str]:
    """Traffic-light note for the generate step, or None when unset."""
    return GENERATION_NOTES.get(level) if level else None


_default_classifier = IntensityClassifier()


def classify_intensity(job_description: str) -> IntensityLevel:
    """Convenience function to classify a job description."""
    return _default_classifier.classify(job_description)
