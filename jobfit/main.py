#!/usr/bin/env python3
"""
JobFit ATS - CLI Entry Point

Analyzes a plain-text resume against a job description, classifies how
programming-heavy the role is, and writes a tailored resume.

Usage:
    python -m jobfit.main --resume input/resume.txt --job input/job_description.txt
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .company import resolve_company
from .config import AnalysisConfig, configure_logging
from .errors import ExportError
from .exporter import export_pdf
from .generator import STUDY_PLAN_TIP
from .intensity import BADGE_LABELS, IntensityLevel
from .pipeline import analyze, build_document, generate
from .renderer import export_filename, render_latex, render_text


logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="JobFit ATS - Match a resume to a job description and tailor it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m jobfit.main --resume resume.txt --job job.txt
    python -m jobfit.main -r resume.txt -j job.txt -o custom_output/ --pdf
    python -m jobfit.main -r resume.txt -j job.txt --company "Acme Corp"
        """
    )

    parser.add_argument(
        "-r", "--resume",
        type=str,
        required=True,
        help="Path to plain-text resume file"
    )

    parser.add_argument(
        "-j", "--job",
        type=str,
        required=True,
        help="Path to job description text file"
    )

    parser.add_argument(
        "-c", "--company",
        type=str,
        default=None,
        help="Company name (overrides the name extracted from the job description)"
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default="output",
        help="Output directory (default: output/)"
    )

    parser.add_argument(
        "--top-n",
        type=positive_int,
        default=None,
        help="Number of job keywords to extract (default: 40)"
    )

    parser.add_argument(
        "--pdf",
        action="store_true",
        help="Also export a PDF (refused for heavy programming roles)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    return parser.parse_args(argv)


def load_file(path: str) -> str:
    """Load content from a file."""
    file_path = Path(path)
    if not file_path.exists():
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)

    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading {path}: {e}", file=sys.stderr)
        sys.exit(1)


def save_file(path: Path, content) -> None:
    """Save text or bytes to a file."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    except OSError as e:
        print(f"Error writing {path}: {e}", file=sys.stderr)
        sys.exit(1)


def print_summary(analysis, generation, company: str, verbose: bool = False) -> None:
    """Print a summary of the analysis and generation results."""
    print("\n" + "=" * 60)
    print("JOBFIT ATS - MATCH SUMMARY")
    print("=" * 60)

    print(f"\nIntensity: {BADGE_LABELS[generation.intensity]}")
    print(f"Company:   {company or '-'}")

    # Score bars
    for label, score in (("Initial score", generation.initial_score), ("Post score", generation.post_score)):
        filled = int(score / 10)
        bar = "█" * filled + "░" * (10 - filled)
        print(f"{label + ':':<15}[{bar}] {score}%")

    if verbose:
        print(f"Extracted: {analysis.auto_company or '-'}")
        print("\n--- Job Keywords ---")
        print(f"  {', '.join(generation.keywords)}")

    print("\n--- Notes ---")
    for note in generation.notes:
        print(f"  - {note}")

    if generation.study_plan:
        print("\n--- Short Study Plan ---")
        for step in generation.study_plan:
            print(f"  - {step}")
        print(f"  {STUDY_PLAN_TIP}")

    print("\n" + "=" * 60)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    config = AnalysisConfig.from_env()
    if args.top_n is not None:
        config = replace(config, analyze_top_n=args.top_n, generate_top_n=args.top_n)

    print("JobFit ATS")
    print("-" * 40)

    print(f"Loading resume: {args.resume}")
    resume_content = load_file(args.resume)

    print(f"Loading job description: {args.job}")
    job_content = load_file(args.job)

    if not job_content.strip():
        print("Error: Job description is empty", file=sys.stderr)
        return 1

    print("\nAnalyzing job description...")
    analysis = analyze(resume_content, job_content, config)
    company = resolve_company(analysis.auto_company, args.company)

    print("Generating tailored content...")
    generation = generate(resume_content, job_content, analysis.keywords, config)
    document = build_document(resume_content, generation, company, config)

    output_dir = Path(args.output)
    tex_path = output_dir / "tailored_resume.tex"
    txt_path = output_dir / "tailored_resume.txt"

    print(f"\nSaving tailored resume: {tex_path}")
    save_file(tex_path, render_latex(document))

    print(f"Saving plain text: {txt_path}")
    save_file(txt_path, render_text(document))

    if args.pdf:
        if generation.intensity is IntensityLevel.HIGH:
            print("PDF export disabled for heavy programming roles.")
        else:
            pdf_path = output_dir / export_filename(document.candidate_name, company)
            try:
                pdf = asyncio.run(export_pdf(document, config))
            except ExportError as e:
                logger.debug("Export failed", exc_info=True)
                print(f"PDF export failed: {e}", file=sys.stderr)
            else:
                print(f"Saving PDF: {pdf_path}")
                save_file(pdf_path, pdf)

    print_summary(analysis, generation, company, args.verbose)

    print(f"\nOutput files saved to: {output_dir}/")

    if generation.intensity is IntensityLevel.HIGH:
        print("\n✗ Heavy programming role. Consider skipping this one.")
        return 1
    if generation.intensity is IntensityLevel.MODERATE:
        print("\n⚠ Moderate role. Work through the study plan before applying.")
        return 0
    print("\n✓ Light role. Safe to apply.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
