"""CLI entry point: screen resumes against a job posting."""

import argparse
import json
import logging
import sys

from talent_match.config import LOG_LEVELS, AppConfig, load_config, validate_config
from talent_match.documents.text_extractor import DocumentError
from talent_match.interview.prep import InterviewPrepError, generate_interview_questions
from talent_match.pipeline import ScreeningReport, load_job, screen_resumes
from talent_match.utils.logging_config import setup_logging

logger = logging.getLogger("talent_match")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Talent Match - score resumes against a job description",
    )
    parser.add_argument("resumes", nargs="+", help="Resume files (.pdf, .docx, .txt)")
    parser.add_argument("--job", required=True, help="Job description file")
    parser.add_argument("--company", default=None, help="Company name for the posting")
    parser.add_argument(
        "--config", default=None,
        help="Path to config file (default: built-in defaults)",
    )
    parser.add_argument("--workers", type=int, default=None, help="Parallel resume workers")
    parser.add_argument("--top", type=int, default=0, help="Only show the top N candidates")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument(
        "--interview", action="store_true",
        help="Generate interview questions for the top candidate (needs an OpenAI key)",
    )
    return parser.parse_args(argv)


def print_report(report: ScreeningReport, top: int = 0):
    """Print a ranked, human-readable screening summary."""
    job = report.job
    print(f"\n=== {job.title} @ {job.company} ===")
    print(f"Required skills: {', '.join(sorted(job.requirements.skills)) or 'none detected'}")
    print(f"Required experience: {job.requirements.experience} years")
    print(f"Education: {', '.join(job.requirements.education) or 'not specified'}")

    candidates = report.candidates[:top] if top else report.candidates
    for rank, candidate in enumerate(candidates, 1):
        score = candidate.result.score
        print(f"\n#{rank} [{score.overall:3d}] {candidate.profile.name} ({candidate.file_name})")
        print(
            f"  skills {score.skill_match} | experience {score.experience_match} | "
            f"education {score.education_match} | keywords {score.keyword_match}"
        )
        if candidate.result.semantic_score is not None:
            print(f"  semantic {candidate.result.semantic_score}")
        for strength in candidate.result.strengths:
            print(f"  + {strength}")
        for improvement in candidate.result.improvements:
            print(f"  - {improvement}")

    if report.failures:
        print("\nCould not read:")
        for failure in report.failures:
            print(f"  {failure.file_name}: {failure.message}")
    print()


def report_to_dict(report: ScreeningReport, top: int = 0) -> dict:
    candidates = report.candidates[:top] if top else report.candidates
    return {
        "job": report.job.to_dict(),
        "candidates": [c.to_dict() for c in candidates],
        "failures": [{"file_name": f.file_name, "message": f.message} for f in report.failures],
    }


def main(argv=None):
    args = parse_args(argv)

    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        config = AppConfig()

    if args.workers is not None:
        config.screening.max_workers = args.workers

    warnings = validate_config(config)
    level = "DEBUG" if args.verbose else config.log_level
    if level not in LOG_LEVELS:
        level = "INFO"
    setup_logging(config.log_dir, level)

    for w in warnings:
        logger.warning("Config: %s", w)

    try:
        job = load_job(args.job, config, args.company)
    except (DocumentError, FileNotFoundError) as e:
        print(f"Error reading job description: {e}", file=sys.stderr)
        sys.exit(1)

    report = screen_resumes(job, args.resumes, config)

    if args.json:
        print(json.dumps(report_to_dict(report, args.top), indent=2))
    else:
        print_report(report, args.top)

    if args.interview and report.candidates:
        best = report.candidates[0]
        try:
            prep = generate_interview_questions(job.raw_text, best.profile.raw_text, config.interview)
        except InterviewPrepError as e:
            print(f"Interview prep unavailable: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Interview questions for {best.profile.name}:")
        print(json.dumps(prep.to_dict(), indent=2))

    if not report.candidates:
        sys.exit(1)


if __name__ == "__main__":
    main()
