"""
Tailored content generator.
Builds the summary, skill list, bullets, practice projects and study plan for a resume.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .config import AnalysisConfig, DEFAULT_CONFIG
from .intensity import IntensityLevel, generation_note
from .matcher import find_missing_keywords, select_matching_sentences


SKILLS_LINE_PATTERN = re.compile(r'Skills?:\s*(.+)', re.IGNORECASE)
SKILL_SEPARATOR = re.compile(r'[,•|;]')

# Words that rank high in postings but say nothing about the candidate
GENERIC_TERMS = frozenset({
    'apply', 'company', 'role', 'job', 'candidate', 'candidates', 'position',
    'team', 'work', 'looking', 'join', 'opportunity', 'required', 'preferred',
})

ELLIPSIS = '…'

SUMMARY_FROM_SKILLS = (
    "Motivated candidate with hands-on skills in {terms}. "
    "Quick learner and able to adapt to role requirements."
)
SUMMARY_FROM_KEYWORDS = (
    "Aspiring candidate with knowledge in {terms}. "
    "Quick learner and able to adapt to role requirements."
)
SUMMARY_GENERIC = (
    "Motivated candidate eager to learn new tools and contribute to the team. "
    "Quick learner and able to adapt to role requirements."
)

SQL_PATTERN = re.compile(r'sql|database|mysql|postgres|query|stored procedure')
PROJECT_UI_PATTERN = re.compile(r'ui|ux|figma|design|prototype|wireframe')
PLAN_UI_PATTERN = re.compile(r'ui|ux|figma|prototype|wireframe')
WEB_PATTERN = re.compile(r'python|java|node|react|angular|vue|javascript|backend|frontend|web')
DEVOPS_PATTERN = re.compile(r'devops|docker|kubernetes|ci/cd|automation|scripting')


@dataclass(frozen=True)
class PracticeProject:
    """A synthesized project used when no resume sentence matches the job."""
    title: str
    bullets: Tuple[str, ...]


SQL_PROJECT = PracticeProject(
    title="SQL Practice Project",
    bullets=(
        "Built sample databases and practiced SELECT, JOIN, GROUP BY queries on public datasets.",
        "Implemented CRUD operations and simple stored procedures to manipulate data.",
        "Optimized queries using proper indexes and analyzed performance.",
    ),
)

UI_PROJECT = PracticeProject(
    title="UI/UX Practice Project",
    bullets=(
        "Designed 2-3 app screens using Figma and created a clickable prototype.",
        "Applied basic UX principles: user flow, visual hierarchy, and accessibility.",
        "Recreated an existing app screen to improve usability.",
    ),
)

WEB_PROJECT = PracticeProject(
    title="Web Development Practice Project",
    bullets=(
        "Built a small web app using HTML/CSS/JavaScript (or React) to understand components.",
        "Implemented basic REST API calls using mock data.",
        "Deployed a simple static site and practiced debugging and console logs.",
    ),
)

GENERIC_PROJECT = PracticeProject(
    title="Practice Project",
    bullets=(
        "Completed role-relevant exercises and small tasks to build practical familiarity.",
        "Documented learning and results in a short project summary to discuss in interviews.",
    ),
)

SQL_PLAN = (
    "Learn SELECT, WHERE, ORDER BY",
    "Practice JOINs (INNER, LEFT) and GROUP BY",
    "Solve 10 SQL problems from online platforms",
    "Build a small sample DB and write CRUD queries",
)

UI_PLAN = (
    "Watch a short Figma intro (30-60 min) and follow along",
    "Create 2 screens and make a clickable prototype",
    "Learn basic UX principles: user flow, hierarchy",
    "Practice by recreating a simple app screen",
)

DEVOPS_PLAN = (
    "Learn Docker basics and run a container",
    "Understand CI/CD concepts and simple pipelines",
    "Practice basic shell scripting (bash)",
    "Deploy a simple app using a PaaS or static host",
)

GENERIC_PLAN = (
    "Review the missing keywords listed in suggestions",
    "Prepare quick examples or small practice tasks to show in interviews",
)

STUDY_PLAN_TIP = (
    "Tip: spend 1-2 days on each bullet, create a small output "
    "(repo, prototype, SQL file) to show during interviews."
)

MISSING_KEYWORDS_PREFIX = "Missing / recommended keywords: "


@dataclass(frozen=True)
class TailoredContent:
    """Generated resume content; replaced wholesale on every generation."""
    summary: str
    skills: Tuple[str, ...]
    bullets: Tuple[str, ...]


def truncate(text: str, limit: int = 180) -> str:
    """Shorten text to at most limit characters, ending in an ellipsis when cut."""
    if len(text) <= limit:
        return text
    return text[:limit - len(ELLIPSIS)].rstrip() + ELLIPSIS


def parse_resume_skills(resume_text: str) -> List[str]:
    """Skills listed on the first 'Skills:' line of the resume, de-duplicated."""
    match = SKILLS_LINE_PATTERN.search(resume_text or '')
    if not match:
        return []
    skills = []
    seen = set()
    for item in SKILL_SEPARATOR.split(match.group(1)):
        skill = item.strip()
        if skill and skill.lower() not in seen:
            seen.add(skill.lower())
            skills.append(skill)
    return skills


def filter_generic(keywords: Sequence[str]) -> List[str]:
    """Drop posting boilerplate such as 'apply' or 'company'."""
    return [k for k in keywords if k not in GENERIC_TERMS]


def select_practice_project(keywords: Sequence[str]) -> PracticeProject:
    """Pick one bundle by testing the joined keywords: SQL, UI/UX, web, generic."""
    joined = ' '.join(keywords)
    if SQL_PATTERN.search(joined):
        return SQL_PROJECT
    if PROJECT_UI_PATTERN.search(joined):
        return UI_PROJECT
    if WEB_PATTERN.search(joined):
        return WEB_PROJECT
    return GENERIC_PROJECT


def select_study_plan(keywords: Sequence[str]) -> Tuple[str, ...]:
    """Pick one plan by testing the joined keywords: SQL, UI/UX, DevOps, generic."""
    joined = ' '.join(keywords)
    if SQL_PATTERN.search(joined):
        return SQL_PLAN
    if PLAN_UI_PATTERN.search(joined):
        return UI_PLAN
    if DEVOPS_PATTERN.search(joined):
        return DEVOPS_PLAN
    return GENERIC_PLAN


class ContentGenerator:
    """Generate tailored resume content from a resume and ranked job keywords."""

    def __init__(self, resume_text: str, keywords: Sequence[str], config: AnalysisConfig = DEFAULT_CONFIG):
        self.resume_text = resume_text or ''
        self.keywords = list(keywords)
        self.config = config
        self.resume_skills = parse_resume_skills(self.resume_text)

    def summary(self) -> str:
        """One of three fixed templates, chosen by what data is available."""
        limit = self.config.summary_terms
        if self.resume_skills:
            return SUMMARY_FROM_SKILLS.format(terms=', '.join(self.resume_skills[:limit]))
        terms = filter_generic(self.keywords)[:limit]
        if terms:
            return SUMMARY_FROM_KEYWORDS.format(terms=', '.join(terms))
        return SUMMARY_GENERIC

    def skills(self) -> Tuple[str, ...]:
        if self.resume_skills:
            return tuple(self.resume_skills)
        return tuple(filter_generic(self.keywords)[:self.config.skill_terms])

    def matched_bullets(self) -> List[str]:
        """Resume sentences mentioning a keyword, capped and truncated."""
        matched = select_matching_sentences(self.resume_text, self.keywords)
        return [truncate(s, self.config.max_bullet_chars) for s in matched[:self.config.max_bullets]]

    def practice_project(self) -> PracticeProject:
        return select_practice_project(self.keywords)

    def scoring_text(self) -> str:
        """Text the post-score is measured on.

        All matched resume sentences in full, or the practice project bundle
        when nothing matched.
        """
        matched = select_matching_sentences(self.resume_text, self.keywords)
        if matched:
            return ' '.join(matched)
        project = self.practice_project()
        return ' '.join([project.title, *project.bullets])

    def bullets(self) -> Tuple[Tuple[str, ...], Optional[PracticeProject]]:
        """Matched resume bullets, or a practice project bundle when none match.

        Returns the bullets and the project used, which is None when the
        resume itself supplied them.
        """
        matched = self.matched_bullets()
        if matched:
            return tuple(matched), None
        project = self.practice_project()
        lines = [project.title, *project.bullets]
        lines = [truncate(line, self.config.max_bullet_chars) for line in lines]
        return tuple(lines[:self.config.max_bullets]), project

    def generate(self) -> Tuple[TailoredContent, Optional[PracticeProject]]:
        bullets, project = self.bullets()
        content = TailoredContent(summary=self.summary(), skills=self.skills(), bullets=bullets)
        return content, project

    def study_plan(self, intensity: Optional[IntensityLevel]) -> Optional[Tuple[str, ...]]:
        """Study plan for moderate roles only."""
        if intensity is not IntensityLevel.MODERATE:
            return None
        return select_study_plan(self.keywords)

    def notes(self, intensity: Optional[IntensityLevel], reference_keywords: Optional[Sequence[str]] = None) -> List[str]:
        """Intensity note followed by keywords the resume is missing."""
        notes = []
        note = generation_note(intensity)
        if note:
            notes.append(note)
        keywords = self.keywords if reference_keywords is None else reference_keywords
        missing = find_missing_keywords(self.resume_text, keywords, self.config.missing_limit)
        if missing:
            notes.append(MISSING_KEYWORDS_PREFIX + ', '.join(missing))
        return notes


def extract_candidate_name(resume_text: str, default: str = "Candidate") -> str:
    """First resume line when it looks like a name rather than a field."""
    for line in (resume_text or '').splitlines():
        line = line.strip()
        if not line:
            continue
        if len(line) < 60 and ':' not in line and re.search(r'[A-Za-z]', line):
            return line
        break
    return default
