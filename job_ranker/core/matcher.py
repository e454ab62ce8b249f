"""
Job Matcher - Rule-based scoring of a job against a user's preferences.

Each criterion is gated on both the preference and the job data it needs.
Satisfied criteria add their weight to the score and one reason to the list;
anything unset or missing is skipped, never penalised.

Criteria, in reason order:
- Title: exact or partial match against the preferred job titles
- Location: job location mentions the preferred city or country
- Remote: user wants remote work and the job offers it
- Salary: pay meets the user's floor in the same pay period
- Job type: the posting lists its job types
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from .models import Job, JobMatchScore, PayPeriod, UserPreferences
from .text import normalize, contains, overlaps


# Returned when there are no preferences at all. Weights are integers, so the
# weighted path can never land on this value.
NEUTRAL_SCORE = 0.5
MAX_SCORE = 100

DEFAULT_WEIGHTS = MappingProxyType({
    "title_exact": 35,
    "title_partial": 20,
    "location": 25,
    "remote": 15,
    "salary_full": 20,
    "salary_partial": 10,
    "job_type": 5,
})

# Weights a job earns when it satisfies every criterion
FULL_WEIGHT_KEYS = ("title_exact", "location", "remote", "salary_full", "job_type")

# Partial weight -> the full weight it must stay strictly below
PARTIAL_WEIGHT_KEYS = {
    "title_partial": "title_exact",
    "salary_partial": "salary_full",
}

REASON_TITLE_EXACT = "Matches your preferred job titles"
REASON_TITLE_PARTIAL = "Similar to your preferred job titles"
REASON_LOCATION = "Located in your preferred area"
REASON_REMOTE = "Remote work available"
REASON_SALARY_FULL = "Meets your salary expectations"
REASON_SALARY_PARTIAL = "Partially meets your salary expectations"
REASON_JOB_TYPE = "Job type information provided"


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_weights(weights: Mapping[str, int]) -> None:
    """
    Check a weight table keeps scores inside 0-100.

    Raises:
        ValueError: on unknown or missing keys, non-integer weights, a zero
            full weight, full weights not summing to MAX_SCORE, or a partial
            weight outside (0, full).
    """
    unknown = set(weights) - set(DEFAULT_WEIGHTS)
    if unknown:
        raise ValueError(f"Unknown weight(s): {', '.join(sorted(unknown))}")

    missing = set(DEFAULT_WEIGHTS) - set(weights)
    if missing:
        raise ValueError(f"Missing weight(s): {', '.join(sorted(missing))}")

    for key, value in weights.items():
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Weight '{key}' must be an integer, got {value!r}")
        if value < 0:
            raise ValueError(f"Weight '{key}' must not be negative")

    for key in FULL_WEIGHT_KEYS:
        if weights[key] == 0:
            raise ValueError(f"Weight '{key}' must be greater than 0")

    total = sum(weights[key] for key in FULL_WEIGHT_KEYS)
    if total != MAX_SCORE:
        raise ValueError(f"Full weights must sum to {MAX_SCORE}, got {total}")

    for partial, full in PARTIAL_WEIGHT_KEYS.items():
        if not 0 < weights[partial] < weights[full]:
            raise ValueError(
                f"Weight '{partial}' must be between 0 and '{full}' "
                f"({weights[full]}), got {weights[partial]}"
            )


class JobMatcher:
    """Scores jobs against user preferences."""

    def __init__(self, weights: Optional[Mapping[str, int]] = None):
        """
        Args:
            weights: Overrides for DEFAULT_WEIGHTS. Keys not given keep their
                default value; the merged table is validated.
        """
        merged = dict(DEFAULT_WEIGHTS)
        if weights:
            merged.update(weights)
        validate_weights(merged)

        self.weights = MappingProxyType(merged)
        self.logger = logging.getLogger(self.__class__.__name__)

    def match_job(self, job: Job, preferences: Optional[UserPreferences]) -> JobMatchScore:
        """Calculate the match score and reasons for a single job."""
        if preferences is None:
            return JobMatchScore(job=job, score=NEUTRAL_SCORE, match_reasons=[])

        score = 0
        reasons: list[str] = []

        for criterion in (
            self._title_match,
            self._location_match,
            self._remote_match,
            self._salary_match,
            self._job_type_match,
        ):
            result = criterion(job, preferences)
            if result is not None:
                points, reason = result
                score += points
                reasons.append(reason)

        self.logger.debug(f"Scored '{job.title}' ({job.id or 'no id'}): {score} from {len(reasons)} criteria")

        return JobMatchScore(job=job, score=score, match_reasons=reasons)

    def _title_match(self, job: Job, preferences: UserPreferences) -> Optional[tuple[int, str]]:
        """Best of exact or partial title match across the preferred titles."""
        titles = preferences.job_titles
        if not titles:
            return None
        if isinstance(titles, str):
            titles = [titles]

        job_title = normalize(job.title)
        if not job_title:
            return None

        partial = False
        for preferred in titles:
            preferred = normalize(preferred)
            if not preferred:
                continue
            if preferred == job_title:
                return self.weights["title_exact"], REASON_TITLE_EXACT
            if overlaps(job_title, preferred):
                partial = True

        if partial:
            return self.weights["title_partial"], REASON_TITLE_PARTIAL
        return None

    def _location_match(self, job: Job, preferences: UserPreferences) -> Optional[tuple[int, str]]:
        # Job location may carry suffixes ("Singapore CBD"), so only the job
        # side is searched.
        job_location = normalize(job.location)
        city = normalize(preferences.city)
        country = normalize(preferences.country)

        if contains(job_location, city) or contains(job_location, country):
            return self.weights["location"], REASON_LOCATION
        return None

    def _remote_match(self, job: Job, preferences: UserPreferences) -> Optional[tuple[int, str]]:
        if preferences.remote_work is True and job.remote is True:
            return self.weights["remote"], REASON_REMOTE
        return None

    def _salary_match(self, job: Job, preferences: UserPreferences) -> Optional[tuple[int, str]]:
        """
        Compare pay against the user's floor.

        Periods must match exactly; there is no conversion between units, so
        a mismatch is treated as not comparable.
        """
        floor = preferences.minimum_pay
        period = PayPeriod.parse(preferences.pay_period)
        salary = job.salary

        if not _is_number(floor) or period is None or salary is None:
            return None
        if PayPeriod.parse(salary.period) is not period:
            return None

        if _is_number(salary.max) and salary.max >= floor:
            return self.weights["salary_full"], REASON_SALARY_FULL
        if _is_number(salary.min) and salary.min >= floor:
            return self.weights["salary_partial"], REASON_SALARY_PARTIAL
        return None

    def _job_type_match(self, job: Job, preferences: UserPreferences) -> Optional[tuple[int, str]]:
        # Rewards the posting for listing its job types; there is no job type
        # preference to compare against. An empty preference record earns nothing.
        if not job.job_type or preferences.is_empty():
            return None
        types = ", ".join(str(job_type) for job_type in job.job_type)
        return self.weights["job_type"], f"{REASON_JOB_TYPE} ({types})"


_default_matcher = JobMatcher()


def calculate_job_match(job: Job, preferences: Optional[UserPreferences]) -> JobMatchScore:
    """Score a job with the default weights."""
    return _default_matcher.match_job(job, preferences)
