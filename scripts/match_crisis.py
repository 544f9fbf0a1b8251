#!/usr/bin/env python3
"""Rank volunteers from the directory file for a crisis case.

Usage:
    python scripts/match_crisis.py --skills anxiety depression --complexity 2
    python scripts/match_crisis.py --skills trauma --json

Environment variables:
    VOLUNTEER_DIRECTORY_FILE: YAML volunteer directory (optional)
    LOG_LEVEL: Log level (optional)
"""
import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from scripts.bootstrap import settings

from src.directory import DirectoryError, build_matcher
from src.logging_config import setup_logging
from src.matching import CrisisCase, MatchResult

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """argparse type for counts of 1 or more."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def format_table(matches: list[MatchResult]) -> str:
    """Render matches as a fixed-width table."""
    lines = [f"{'#':>2}  {'VOLUNTEER':<16} {'SCORE':>6} {'LOAD':>4} {'ETA(s)':>6}  SPECIALIZATIONS"]
    for rank, match in enumerate(matches, start=1):
        lines.append(
            f"{rank:>2}  {match.volunteer_id:<16} {match.match_score:>6.3f} "
            f"{match.current_load:>4} {match.estimated_response_time_seconds:>6}  "
            f"{', '.join(match.specializations)}"
        )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Match a crisis case against the volunteer directory."""
    parser = argparse.ArgumentParser(description="Rank volunteers for a crisis case")
    parser.add_argument("--skills", nargs="*", default=[], help="Required skill tags")
    parser.add_argument("--complexity", type=int, default=1, help="Case complexity level")
    parser.add_argument("--crisis-id", default=None, help="Case identifier for logs")
    parser.add_argument("--directory", default=None, help="Volunteer directory YAML file")
    parser.add_argument(
        "--max-matches",
        type=positive_int,
        default=settings.default_max_matches,
        help="Maximum number of candidates",
    )
    parser.add_argument("--json", action="store_true", help="Print matches as JSON")
    args = parser.parse_args(argv)

    setup_logging()

    directory = args.directory or settings.directory_path
    try:
        matcher = build_matcher(directory)
    except DirectoryError as e:
        logger.error("Error: %s", e)
        return 1

    crisis = CrisisCase(
        required_skills=args.skills,
        complexity_level=args.complexity,
        crisis_id=args.crisis_id,
    )
    matches = matcher.find_best_matches(crisis, max_matches=args.max_matches)

    if args.json:
        print(json.dumps([m.to_dict() for m in matches], indent=2))
    elif matches:
        print(format_table(matches))
    else:
        print("No volunteers meet the minimum match score.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
