"""
Ranking and recommendation helpers built on top of the matcher.
"""

from datetime import datetime, timezone
from typing import Iterable, Optional

from .matcher import JobMatcher, NEUTRAL_SCORE, MAX_SCORE, calculate_job_match
from .models import Job, JobMatchScore, UserPreferences


DEFAULT_RECOMMENDATION_LIMIT = 5
DEFAULT_RECOMMENDATION_THRESHOLD = 30.0

MATCH_LABELS = [
    (80, "Excellent match"),
    (60, "Good match"),
    (40, "Fair match"),
]
BASIC_MATCH_LABEL = "Basic match"


def _score_jobs(
    jobs: Iterable[Job],
    preferences: Optional[UserPreferences],
    matcher: Optional[JobMatcher],
) -> list[JobMatchScore]:
    if matcher is None:
        return [calculate_job_match(job, preferences) for job in jobs]
    return [matcher.match_job(job, preferences) for job in jobs]


def _posted_key(match: JobMatchScore) -> tuple:
    # Undated jobs sort after dated ones; aware dates compare as naive UTC
    posted = match.job.posted_date
    if posted is None:
        return (0, datetime.min)
    if posted.tzinfo is not None:
        posted = posted.astimezone(timezone.utc).replace(tzinfo=None)
    return (1, posted)


def rank_jobs(
    jobs: Iterable[Job],
    preferences: Optional[UserPreferences],
    matcher: Optional[JobMatcher] = None,
) -> list[JobMatchScore]:
    """
    Score and rank jobs against a preference set.

    Args:
        jobs: Jobs to rank
        preferences: User preferences, or None when none are on file
        matcher: Matcher to score with (default weights if not given)

    Returns:
        Matches sorted by score (highest first), then posted date (newest
        first). Full ties keep their input order.
    """
    matches = sorted(_score_jobs(jobs, preferences, matcher), key=_posted_key, reverse=True)
    return sorted(matches, key=lambda match: -match.score)


def get_job_recommendations(
    jobs: Iterable[Job],
    preferences: Optional[UserPreferences],
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    threshold: float = DEFAULT_RECOMMENDATION_THRESHOLD,
    matcher: Optional[JobMatcher] = None,
) -> list[JobMatchScore]:
    """
    Pick the best matching jobs to recommend.

    Without preferences every job is unranked, so the newest jobs are
    returned instead of filtering on a threshold they can never reach.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")

    ranked = rank_jobs(jobs, preferences, matcher)
    if preferences is not None:
        ranked = [match for match in ranked if match.score > threshold]
    return ranked[:limit]


def is_neutral(match: JobMatchScore) -> bool:
    """True for the unranked result returned when no preferences exist."""
    return match.score == NEUTRAL_SCORE and not match.match_reasons


def get_match_percentage(score: float) -> int:
    """Score as a whole percentage. The neutral score is not a percentage."""
    if score == NEUTRAL_SCORE:
        return 0
    return max(0, min(MAX_SCORE, int(score + 0.5)))


def get_match_label(score: float) -> str:
    for minimum, label in MATCH_LABELS:
        if score >= minimum:
            return label
    return BASIC_MATCH_LABEL
