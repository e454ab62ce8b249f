"""
Pytest configuration and shared fixtures.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

import pytest

from job_ranker.core.models import Job, PayPeriod, Salary, UserPreferences


@pytest.fixture
def job_record() -> Dict[str, Any]:
    """Job record as served by the backend."""
    return {
        "id": "job-1",
        "title": "Senior Software Engineer",
        "company": "Tech Corp",
        "location": "Singapore",
        "salary": {
            "min": 5000,
            "max": 8000,
            "period": "month",
            "currency": "S$",
        },
        "jobType": ["Full-time"],
        "remote": False,
        "description": "Senior software engineer position",
        "requirements": "JavaScript, React, Node.js",
        "benefits": "Health insurance",
        "postedDate": "2024-01-01",
        "easyApply": True,
    }


@pytest.fixture
def preferences_record() -> Dict[str, Any]:
    """Preferences as stored on a user profile."""
    return {
        "job_titles": ["Software Engineer", "Developer"],
        "city": "Singapore",
        "country": "Singapore",
        "remote_work": False,
        "minimum_pay": 4000,
        "pay_period": "month",
    }


@pytest.fixture
def perfect_job() -> Job:
    """Job satisfying every criterion against perfect_preferences."""
    return Job(
        id="job-perfect",
        title="Software Engineer",
        company="Tech Corp",
        location="Singapore",
        remote=True,
        job_type=["Full-time"],
        salary=Salary(min=5000, max=8000, period=PayPeriod.MONTH, currency="S$"),
        posted_date=datetime(2024, 1, 1),
    )


@pytest.fixture
def perfect_preferences() -> UserPreferences:
    return UserPreferences(
        job_titles=["Software Engineer"],
        city="Singapore",
        remote_work=True,
        minimum_pay=4000,
        pay_period=PayPeriod.MONTH,
    )


@pytest.fixture
def jobs_file(tmp_path, job_record) -> Path:
    """Jobs file with three postings."""
    remote_job = dict(job_record, id="job-2", title="Software Engineer", remote=True, postedDate="2024-02-01")
    other_job = dict(job_record, id="job-3", title="Barista", location="London", jobType=[], salary=None)

    jobs_path = tmp_path / "jobs.json"
    jobs_path.write_text(json.dumps([job_record, remote_job, other_job]))
    return jobs_path


@pytest.fixture
def preferences_file(tmp_path, preferences_record) -> Path:
    prefs_path = tmp_path / "preferences.json"
    prefs_path.write_text(json.dumps(dict(preferences_record, remote_work=True)))
    return prefs_path


@pytest.fixture
def config_file(tmp_path) -> Path:
    """Path for a config file that does not exist yet."""
    return tmp_path / "config" / "config.json"
