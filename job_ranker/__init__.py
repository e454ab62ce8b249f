"""
Job Ranker - Preference-based job matching and ranking

This package:
1. Scores a job posting against a user's stated preferences
2. Explains every score with a list of match reasons
3. Ranks job listings and picks recommendations by score
"""

from job_ranker.core import (
    Job,
    JobMatchScore,
    JobMatcher,
    PayPeriod,
    Salary,
    UserPreferences,
    calculate_job_match,
    get_job_recommendations,
    rank_jobs,
)

__version__ = "1.0.0"
__author__ = "Job Ranker"

__all__ = [
    "Job",
    "JobMatchScore",
    "JobMatcher",
    "PayPeriod",
    "Salary",
    "UserPreferences",
    "calculate_job_match",
    "get_job_recommendations",
    "rank_jobs",
]
