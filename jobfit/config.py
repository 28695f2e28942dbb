"""
Runtime configuration and logging setup.
"""

import logging
import os
from dataclasses import dataclass, fields


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AnalysisConfig:
    """Tunable limits for analysis, generation and export."""
    analyze_top_n: int = 40
    generate_top_n: int = 40
    summary_terms: int = 4
    skill_terms: int = 8
    max_bullets: int = 12
    max_bullet_chars: int = 180
    missing_limit: int = 8
    default_candidate: str = "Candidate"
    default_company: str = "Company"
    latex_service_url: str = "https://latex.ytotech.com/builds/sync"
    export_timeout: float = 60.0

    @classmethod
    def from_env(cls, prefix: str = "JOBFIT_") -> "AnalysisConfig":
        """Build a config, overriding defaults with JOBFIT_* environment variables."""
        overrides = {}
        for f in fields(cls):
            raw = os.environ.get(prefix + f.name.upper())
            if raw is None or not raw.strip():
                continue
            try:
                if f.type in (int, "int"):
                    overrides[f.name] = int(raw)
                elif f.type in (float, "float"):
                    overrides[f.name] = float(raw)
                else:
                    overrides[f.name] = raw.strip()
            except ValueError:
                logging.getLogger(__name__).warning(
                    "Ignoring invalid %s%s=%r", prefix, f.name.upper(), raw
                )
        return cls(**overrides)


DEFAULT_CONFIG = AnalysisConfig()


def configure_logging(level=None) -> None:
    """Configure root logging once; level defaults to JOBFIT_LOG_LEVEL or INFO."""
    if level is None:
        level = os.environ.get("JOBFIT_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
