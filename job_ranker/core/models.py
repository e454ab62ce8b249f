"""
Core data models for job matching and ranking.

Job and UserPreferences mirror the records served by the job board backend.
Their from_dict helpers accept those JSON shapes directly; to_dict writes the
same keys back out.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


DEFAULT_CURRENCY = "S$"


class PayPeriod(Enum):
    """Unit a salary or pay floor is quoted in."""
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def parse(cls, value: Any) -> Optional["PayPeriod"]:
        """Return the matching period, or None for anything unrecognised."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


def _parse_date(value: Any) -> Optional[datetime]:
    """Parse an ISO date string. Aware values are converted to naive UTC."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _as_number(value: Any) -> Optional[float]:
    # bool is an int subclass; a flag is never a pay amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _as_str_list(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


@dataclass
class Salary:
    """Advertised pay range for a job."""
    min: Optional[float] = None
    max: Optional[float] = None
    period: Optional[PayPeriod] = None
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional["Salary"]:
        if not isinstance(data, dict):
            return None
        return cls(
            min=_as_number(data.get("min")),
            max=_as_number(data.get("max")),
            period=PayPeriod.parse(data.get("period")),
            currency=data.get("currency") or DEFAULT_CURRENCY,
        )

    def to_dict(self) -> dict:
        return {
            "min": self.min,
            "max": self.max,
            "period": self.period.value if self.period else None,
            "currency": self.currency,
        }


@dataclass
class Job:
    """A job posting as listed on the board."""
    id: str = ""
    title: str = ""
    company: str = ""
    location: str = ""
    remote: bool = False
    job_type: list[str] = field(default_factory=list)  # e.g. "Full-time", "Contract"
    salary: Optional[Salary] = None
    description: str = ""
    requirements: str = ""
    benefits: str = ""
    posted_date: Optional[datetime] = None
    featured: bool = False
    easy_apply: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Job":
        """Build a Job from a backend job record."""
        job_type = data.get("jobType", data.get("job_type"))
        easy_apply = data.get("easyApply", data.get("easy_apply", False))
        requirements = data.get("requirements") or ""
        benefits = data.get("benefits") or ""
        if isinstance(requirements, list):
            requirements = "\n".join(str(r) for r in requirements)
        if isinstance(benefits, list):
            benefits = "\n".join(str(b) for b in benefits)

        return cls(
            id=str(data.get("id") or ""),
            title=data.get("title") or "",
            company=data.get("company") or "",
            location=data.get("location") or "",
            remote=bool(data.get("remote", False)),
            job_type=_as_str_list(job_type),
            salary=Salary.from_dict(data.get("salary")),
            description=data.get("description") or "",
            requirements=requirements,
            benefits=benefits,
            posted_date=_parse_date(data.get("postedDate", data.get("posted_date"))),
            featured=bool(data.get("featured", False)),
            easy_apply=bool(easy_apply),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "remote": self.remote,
            "jobType": list(self.job_type),
            "salary": self.salary.to_dict() if self.salary else None,
            "description": self.description,
            "requirements": self.requirements,
            "benefits": self.benefits,
            "postedDate": self.posted_date.isoformat() if self.posted_date else None,
            "featured": self.featured,
            "easyApply": self.easy_apply,
        }


@dataclass
class UserPreferences:
    """
    Job preferences captured during onboarding.

    Every field is optional. None means the user did not state a preference;
    an instance with every field unset is still a valid preference record.
    """
    job_titles: Optional[list[str]] = None
    city: Optional[str] = None
    country: Optional[str] = None
    postcode: Optional[str] = None
    remote_work: Optional[bool] = None
    minimum_pay: Optional[float] = None
    pay_period: Optional[PayPeriod] = None
    onboarding_completed: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional["UserPreferences"]:
        """Build preferences from a profile record. None stays None."""
        if data is None:
            return None

        job_titles = data.get("job_titles")
        remote_work = data.get("remote_work")
        completed = data.get("onboarding_completed")

        return cls(
            job_titles=_as_str_list(job_titles) if job_titles is not None else None,
            city=data.get("city") if isinstance(data.get("city"), str) else None,
            country=data.get("country") if isinstance(data.get("country"), str) else None,
            postcode=data.get("postcode") if isinstance(data.get("postcode"), str) else None,
            remote_work=remote_work if isinstance(remote_work, bool) else None,
            minimum_pay=_as_number(data.get("minimum_pay")),
            pay_period=PayPeriod.parse(data.get("pay_period")),
            onboarding_completed=completed if isinstance(completed, bool) else None,
        )

    def is_empty(self) -> bool:
        """True when no preference used for scoring has been stated."""
        job_titles = [self.job_titles] if isinstance(self.job_titles, str) else self.job_titles or []
        titles = [t for t in job_titles if isinstance(t, str) and t.strip()]
        places = [p for p in (self.city, self.country) if isinstance(p, str) and p.strip()]
        return (
            not titles
            and not places
            and self.remote_work is not True
            and self.minimum_pay is None
            and self.pay_period is None
        )

    def to_dict(self) -> dict:
        data = {
            "job_titles": list(self.job_titles) if self.job_titles is not None else None,
            "city": self.city,
            "country": self.country,
            "postcode": self.postcode,
            "remote_work": self.remote_work,
            "minimum_pay": self.minimum_pay,
            "pay_period": self.pay_period.value if self.pay_period else None,
            "onboarding_completed": self.onboarding_completed,
        }
        return {key: value for key, value in data.items() if value is not None}


@dataclass
class JobMatchScore:
    """Score and reasons for one job against one preference set."""
    job: Job
    score: float = 0.0
    match_reasons: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "job": self.job.to_dict(),
            "score": self.score,
            "matchReasons": list(self.match_reasons),
        }
