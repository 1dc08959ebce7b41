#!/usr/bin/env python3
"""
Resume Customizer - CLI Entry Point

Takes a PDF resume and job details, asks Gemini for a customized resume,
and writes the .txt, .doc and print-view exports to an output directory.

Usage:
    python -m resume_customizer.main --resume resume.pdf --title "Backend Engineer" --description-file job.txt
"""

import argparse
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

from .ai_tailor import CustomizationResult, JobDetails, ResumeCustomizer
from .config import load_settings
from .exceptions import CustomizerError
from .exporters import PlainTextExporter, PrintViewExporter, WordDocumentExporter
from .logging_config import configure_logging


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Resume Customizer - Tailor a PDF resume to a job with Gemini",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m resume_customizer.main -r resume.pdf -t "Data Engineer" -d "Build pipelines..."
    python -m resume_customizer.main -r resume.pdf --description-file job.txt -s "Python, Spark" -o out/
        """
    )

    parser.add_argument(
        "-r", "--resume",
        type=str,
        required=True,
        help="Path to the PDF resume"
    )

    parser.add_argument(
        "-t", "--title",
        type=str,
        default="",
        help="Job title"
    )

    description = parser.add_mutually_exclusive_group()
    description.add_argument(
        "-d", "--description",
        type=str,
        default="",
        help="Job description text"
    )
    description.add_argument(
        "--description-file",
        type=str,
        help="Path to a text file holding the job description"
    )

    parser.add_argument(
        "-s", "--skills",
        type=str,
        default="",
        help="Key skills / requirements"
    )

    parser.add_argument(
        "--api-key",
        type=str,
        default="",
        help="Gemini API key (default: GEMINI_API_KEY)"
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default="output",
        help="Output directory (default: output/)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    return parser.parse_args(argv)


def load_file(path: str) -> bytes:
    """Load raw bytes from a file."""
    file_path = Path(path)
    if not file_path.exists():
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)
    return file_path.read_bytes()


def save_file(path: Path, content: str) -> None:
    """Save content to a file."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        print(f"Error writing {path}: {e}", file=sys.stderr)
        sys.exit(1)


def print_summary(result: CustomizationResult, verbose: bool = False) -> None:
    """Print a summary of the ATS score and keywords."""
    print("\n" + "=" * 60)
    print("RESUME CUSTOMIZER - ATS SUMMARY")
    print("=" * 60)

    filled = result.ats_score // 10
    bar = "█" * filled + "░" * (10 - filled)
    print(f"\nATS Score: [{bar}] {result.ats_score}%  {result.tier.message}")

    keywords = result.keywords
    print(f"\nMatched Keywords: {len(keywords.matched_keywords)}")
    print(f"Missing Keywords: {len(keywords.missing_keywords)}")

    if verbose:
        if keywords.matched_keywords:
            print(f"  Matched: {', '.join(keywords.matched_keywords)}")
        if keywords.missing_keywords:
            print(f"  Missing: {', '.join(keywords.missing_keywords)}")

    if result.suggestions:
        print("\n--- Suggestions ---")
        for idx, suggestion in enumerate(result.suggestions, start=1):
            print(f"  {idx}. {suggestion}")

    print("\n" + "=" * 60)


def main(argv=None) -> int:
    """Main entry point."""
    load_dotenv()
    args = parse_args(argv)
    settings = load_settings()
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    print("Resume Customizer")
    print("-" * 40)

    print(f"Loading resume: {args.resume}")
    pdf_bytes = load_file(args.resume)

    description = args.description
    if args.description_file:
        print(f"Loading job description: {args.description_file}")
        description = load_file(args.description_file).decode("utf-8")

    job = JobDetails(title=args.title, description=description, skills=args.skills)

    print("Customizing resume with Gemini...")
    try:
        customizer = ResumeCustomizer(api_key=args.api_key, settings=settings)
        result = asyncio.run(customizer.customize(pdf_bytes, job))
    except CustomizerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output_dir = Path(args.output)
    for exporter in (PlainTextExporter(), WordDocumentExporter(), PrintViewExporter()):
        artifact = exporter.export(result.customized_resume)
        path = output_dir / artifact.filename
        print(f"Saving {exporter.kind}: {path}")
        save_file(path, artifact.content)

    print_summary(result, args.verbose)
    print(f"\nOutput files saved to: {output_dir}/")
    return 0


if __name__ == "__main__":
    sys.exit(main())
