"""Core models, scoring and ranking for job matching."""

from .models import (
    Job,
    JobMatchScore,
    PayPeriod,
    Salary,
    UserPreferences,
)
from .matcher import (
    DEFAULT_WEIGHTS,
    NEUTRAL_SCORE,
    JobMatcher,
    calculate_job_match,
)
from .ranking import (
    get_job_recommendations,
    get_match_label,
    get_match_percentage,
    is_neutral,
    rank_jobs,
)

__all__ = [
    "Job",
    "JobMatchScore",
    "PayPeriod",
    "Salary",
    "UserPreferences",
    "DEFAULT_WEIGHTS",
    "NEUTRAL_SCORE",
    "JobMatcher",
    "calculate_job_match",
    "get_job_recommendations",
    "get_match_label",
    "get_match_percentage",
    "is_neutral",
    "rank_jobs",
]
