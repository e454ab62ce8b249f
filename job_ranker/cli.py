"""
Job Ranker CLI - Command line interface for scoring and ranking jobs.

Usage:
    python -m job_ranker.cli [command] [options]

Commands:
    score       Score a single job against your preferences
    rank        Rank a list of jobs by match score
    recommend   Show recommended jobs
    config      Manage configuration

Examples:
    python -m job_ranker.cli score --job job.json --preferences prefs.json
    python -m job_ranker.cli rank --jobs jobs.json --preferences prefs.json --top 10
    python -m job_ranker.cli recommend --jobs jobs.json --preferences prefs.json --limit 6
    python -m job_ranker.cli config --set recommendations.threshold 40
"""

import argparse
import json
import logging
import sys
from typing import Optional

from job_ranker.core import (
    Job,
    JobMatcher,
    JobMatchScore,
    UserPreferences,
    get_job_recommendations,
    get_match_label,
    get_match_percentage,
    is_neutral,
    rank_jobs,
)
from job_ranker.utils import Config


def main(argv: Optional[list[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Job Ranker - Preference-based job scoring and ranking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", "-c", help="Path to config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Score command
    score_parser = subparsers.add_parser("score", help="Score a single job")
    score_parser.add_argument("--job", "-j", required=True, help="Path to job file (JSON)")
    score_parser.add_argument("--preferences", "-p", help="Path to preferences file (JSON)")

    # Rank command
    rank_parser = subparsers.add_parser("rank", help="Rank jobs by match score")
    rank_parser.add_argument("--jobs", "-j", required=True, help="Path to jobs file (JSON)")
    rank_parser.add_argument("--preferences", "-p", help="Path to preferences file (JSON)")
    rank_parser.add_argument("--top", "-t", type=int, default=10, help="Show top N matches")
    rank_parser.add_argument("--output", "-o", help="Output file (JSON)")

    # Recommend command
    rec_parser = subparsers.add_parser("recommend", help="Show recommended jobs")
    rec_parser.add_argument("--jobs", "-j", required=True, help="Path to jobs file (JSON)")
    rec_parser.add_argument("--preferences", "-p", help="Path to preferences file (JSON)")
    rec_parser.add_argument("--limit", "-n", type=int, help="Max recommendations")
    rec_parser.add_argument("--threshold", type=float, help="Minimum score to recommend")

    # Config command
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument("--show", action="store_true", help="Show current config")
    config_parser.add_argument("--set", nargs=2, metavar=("KEY", "VALUE"), help="Set a config value")
    config_parser.add_argument("--init", action="store_true", help="Initialize default config")

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute command
    try:
        config = Config(args.config)
        setup_logging("DEBUG" if args.verbose else config.get_log_level())

        if args.command == "score":
            cmd_score(args, config)
        elif args.command == "rank":
            cmd_rank(args, config)
        elif args.command == "recommend":
            cmd_recommend(args, config)
        elif args.command == "config":
            cmd_config(args, config)
        else:
            parser.print_help()

    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)


def setup_logging(level: str) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def load_jobs(path: str) -> list[Job]:
    """Load jobs from a JSON list, or an object with a "jobs" list."""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("jobs", [data] if "title" in data else [])

    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a job object or a list of jobs")

    return [Job.from_dict(item) for item in data if isinstance(item, dict)]


def load_preferences(path: Optional[str]) -> Optional[UserPreferences]:
    """Load preferences. No file, or a file holding null, means none on file."""
    if not path:
        return None

    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if data is not None and not isinstance(data, dict):
        raise ValueError(f"{path} must contain a preferences object or null")

    return UserPreferences.from_dict(data)


def build_matcher(config: Config) -> JobMatcher:
    return JobMatcher(weights=config.get_weights())


def print_match(rank: int, match: JobMatchScore) -> None:
    job = match.job
    print(f"\n{rank}. {job.title} @ {job.company or 'Unknown company'}")
    print(f"   Location: {job.location or 'Not specified'}{' (remote)' if job.remote else ''}")

    if is_neutral(match):
        print("   Match: unranked (no preferences on file)")
        return

    print(f"   Match: {get_match_percentage(match.score)}% - {get_match_label(match.score)}")
    for reason in match.match_reasons:
        print(f"   - {reason}")


def cmd_score(args, config: Config):
    """Execute score command."""
    jobs = load_jobs(args.job)
    if not jobs:
        raise ValueError(f"No job found in {args.job}")

    preferences = load_preferences(args.preferences)
    match = build_matcher(config).match_job(jobs[0], preferences)

    print_match(1, match)


def cmd_rank(args, config: Config):
    """Execute rank command."""
    jobs = load_jobs(args.jobs)
    preferences = load_preferences(args.preferences)

    ranked = rank_jobs(jobs, preferences, matcher=build_matcher(config))

    print(f"Ranked {len(ranked)} jobs, showing top {min(args.top, len(ranked))}:")
    print("-" * 80)

    for i, match in enumerate(ranked[:args.top], 1):
        print_match(i, match)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            json.dump([match.to_dict() for match in ranked], f, indent=2)
        print(f"\n✅ Saved ranking to {args.output}")


def cmd_recommend(args, config: Config):
    """Execute recommend command."""
    settings = config.get_recommendation_settings()
    limit = args.limit if args.limit is not None else settings["limit"]
    threshold = args.threshold if args.threshold is not None else settings["threshold"]

    jobs = load_jobs(args.jobs)
    preferences = load_preferences(args.preferences)

    recommendations = get_job_recommendations(
        jobs,
        preferences,
        limit=limit,
        threshold=threshold,
        matcher=build_matcher(config),
    )

    if not recommendations:
        print("No recommendations yet. Try broadening your preferences.")
        return

    print(f"Recommended for you ({len(recommendations)}):")
    print("-" * 80)

    for i, match in enumerate(recommendations, 1):
        print_match(i, match)


def cmd_config(args, config: Config):
    """Execute config command."""
    if args.init:
        config.save()
        print(f"✅ Created config at: {config.config_path}")

    elif args.show:
        print("\nCurrent Configuration\n")
        config.print_config()

    elif args.set:
        key, value = args.set
        # Try to parse as JSON for numbers and nested values
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            pass

        config.set(key, value)
        if key.startswith("matching.weights"):
            build_matcher(config)
        config.save()
        print(f"✅ Set {key} = {value}")

    else:
        print("Use --show, --set, or --init")


if __name__ == "__main__":
    main()
