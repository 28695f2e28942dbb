"""
Renderers for the tailored resume.
Produces a single-column ATS LaTeX document, plain text and export filenames.
"""

import re
from typing import List, Sequence

from .config import DEFAULT_CONFIG
from .intensity import BADGE_LABELS
from .pipeline import TailoredDocument


LATEX_SPECIAL_CHARS = {
    '\\': r'\textbackslash{}',
    '&': r'\&',
    '%': r'\%',
    '$': r'\$',
    '#': r'\#',
    '_': r'\_',
    '{': r'\{',
    '}': r'\}',
    '~': r'\textasciitilde{}',
    '^': r'\textasciicircum{}',
}

_LATEX_ESCAPE_PATTERN = re.compile('|'.join(re.escape(c) for c in LATEX_SPECIAL_CHARS))

EDUCATION_PLACEHOLDER = "B.Tech - Your College - Year"

LATEX_PREAMBLE = r"""\documentclass[10pt,letterpaper]{article}

\usepackage[utf8]{inputenc}
\usepackage[T1]{fontenc}
\usepackage{lmodern}
\usepackage[top=0.5in,bottom=0.5in,left=0.5in,right=0.5in]{geometry}
\usepackage{enumitem}
\usepackage{titlesec}
\usepackage{newunicodechar}

% ATS-friendly formatting
\pagestyle{empty}
\setlength{\parindent}{0pt}
\setlength{\parskip}{0pt}
\newunicodechar{…}{\ldots}
\newunicodechar{•}{\textbullet}

% Section formatting
\titleformat{\section}{\large\bfseries}{}{0em}{}[\titlerule]
\titlespacing*{\section}{0pt}{6pt}{6pt}

% List formatting
\setlist[itemize]{noitemsep, topsep=0pt, parsep=0pt, partopsep=0pt, leftmargin=*}
"""


def escape_latex(text: str) -> str:
    """Escape LaTeX special characters in plain text."""
    if not text:
        return ""
    return _LATEX_ESCAPE_PATTERN.sub(lambda m: LATEX_SPECIAL_CHARS[m.group(0)], text)


def document_subtitle(document: TailoredDocument) -> str:
    if document.company:
        return f"{document.company} - Tailored Resume"
    return "Tailored Resume"


def render_latex(document: TailoredDocument) -> str:
    """Render the tailored resume as a complete LaTeX document."""
    content = document.content
    lines = [LATEX_PREAMBLE, r"\begin{document}", ""]

    lines.append(r"\begin{center}")
    lines.append(f"  {{\\Large\\bfseries {escape_latex(document.candidate_name)}}} \\\\")
    lines.append(f"  {escape_latex(document_subtitle(document))}")
    lines.append(r"\end{center}")
    lines.append("")

    lines.append(r"\section{Summary}")
    lines.append(escape_latex(content.summary))
    lines.append("")

    if content.skills:
        lines.append(r"\section{Skills}")
        lines.append(escape_latex(" • ".join(content.skills)))
        lines.append("")

    lines.append(r"\section{Projects / Experience}")
    if content.bullets:
        lines.append(r"\begin{itemize}")
        for bullet in content.bullets:
            lines.append(f"  \\item {escape_latex(bullet)}")
        lines.append(r"\end{itemize}")
    lines.append("")

    lines.append(r"\section{Education}")
    lines.append(escape_latex(EDUCATION_PLACEHOLDER))
    lines.append("")
    lines.append(r"\end{document}")
    return "\n".join(lines)


def render_text(document: TailoredDocument) -> str:
    """Render the tailored resume as plain text."""
    content = document.content
    lines: List[str] = [document.candidate_name, document_subtitle(document)]
    if document.intensity:
        lines.append(f"[{BADGE_LABELS[document.intensity]}]")

    lines += ["", "=== SUMMARY ===", content.summary]
    if content.skills:
        lines += ["", "=== SKILLS ===", " • ".join(content.skills)]
    lines += ["", "=== PROJECTS / EXPERIENCE ==="]
    lines += [f"  - {bullet}" for bullet in content.bullets]
    lines += ["", "=== EDUCATION ===", EDUCATION_PLACEHOLDER]
    return "\n".join(lines).strip() + "\n"


def clipboard_text(bullets: Sequence[str]) -> str:
    """Bullets joined as plain text for copying."""
    return "\n\n".join(bullets)


def sanitize_filename_part(text: str) -> str:
    return re.sub(r'[^A-Za-z0-9_-]', '_', text)


def export_filename(candidate_name: str, company: str = '', extension: str = "pdf") -> str:
    """File name of the form <Candidate>_<Company>_resume.<extension>."""
    candidate = sanitize_filename_part(candidate_name or DEFAULT_CONFIG.default_candidate)
    company = sanitize_filename_part(company or DEFAULT_CONFIG.default_company)
    return f"{candidate}_{company}_resume.{extension}"
