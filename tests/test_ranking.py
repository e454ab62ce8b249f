"""
Tests for ranking and recommendation helpers.
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from job_ranker.core.matcher import JobMatcher
from job_ranker.core.models import Job, UserPreferences
from job_ranker.core.ranking import (
    get_job_recommendations,
    get_match_label,
    get_match_percentage,
    is_neutral,
    rank_jobs,
)


@pytest.fixture
def listing(perfect_job):
    """Jobs with distinct expected scores against perfect_preferences."""
    return [
        replace(perfect_job, id="weak", title="Barista", location="London", remote=False, salary=None),
        replace(perfect_job, id="best"),
        replace(perfect_job, id="middle", title="Junior Developer", remote=False),
    ]


class TestRankJobs:
    """Test rank_jobs()."""

    def test_sorted_by_score_desc(self, listing, perfect_preferences):
        ranked = rank_jobs(listing, perfect_preferences)

        assert [m.job.id for m in ranked] == ["best", "middle", "weak"]
        assert [m.score for m in ranked] == sorted((m.score for m in ranked), reverse=True)

    def test_ties_broken_by_newest(self, perfect_job, perfect_preferences):
        old = replace(perfect_job, id="old", posted_date=datetime(2023, 5, 1))
        new = replace(perfect_job, id="new", posted_date=datetime(2024, 5, 1))
        undated = replace(perfect_job, id="undated", posted_date=None)

        ranked = rank_jobs([undated, old, new], perfect_preferences)

        assert [m.job.id for m in ranked] == ["new", "old", "undated"]

    def test_full_ties_keep_input_order(self, perfect_job, perfect_preferences):
        jobs = [replace(perfect_job, id=str(i)) for i in range(4)]
        assert [m.job.id for m in rank_jobs(jobs, perfect_preferences)] == ["0", "1", "2", "3"]

    def test_aware_dates_ranked(self, perfect_job, perfect_preferences):
        """Timezone-aware dates rank alongside naive and undated ones."""
        sgt = timezone(timedelta(hours=8))
        aware_new = replace(perfect_job, id="aware-new", posted_date=datetime(2024, 3, 1, tzinfo=timezone.utc))
        # 2024-02-01 08:00 SGT is 2024-02-01 00:00 UTC
        aware_old = replace(perfect_job, id="aware-old", posted_date=datetime(2024, 2, 1, 8, tzinfo=sgt))
        naive_mid = replace(perfect_job, id="naive-mid", posted_date=datetime(2024, 2, 15))
        undated = replace(perfect_job, id="undated", posted_date=None)

        ranked = rank_jobs([undated, aware_old, naive_mid, aware_new], perfect_preferences)

        assert [m.job.id for m in ranked] == ["aware-new", "naive-mid", "aware-old", "undated"]

    def test_recommendations_with_aware_dates(self, perfect_job, perfect_preferences):
        job = replace(perfect_job, posted_date=datetime(2024, 1, 1, tzinfo=timezone.utc))
        assert len(get_job_recommendations([job, perfect_job], perfect_preferences)) == 2

    def test_microsecond_apart_newest_first(self, perfect_job, perfect_preferences):
        first = replace(perfect_job, id="first", posted_date=datetime(2024, 1, 1, 0, 0, 0, 1))
        second = replace(perfect_job, id="second", posted_date=datetime(2024, 1, 1, 0, 0, 0, 2))

        ranked = rank_jobs([first, second], perfect_preferences)

        assert [m.job.id for m in ranked] == ["second", "first"]

    def test_score_beats_date(self, perfect_job, perfect_preferences):
        """A newer but weaker match still ranks below a stronger one."""
        strong = replace(perfect_job, id="strong", posted_date=datetime(2020, 1, 1))
        weak = replace(perfect_job, id="weak", remote=False, posted_date=datetime(2024, 1, 1))

        ranked = rank_jobs([weak, strong], perfect_preferences)

        assert [m.job.id for m in ranked] == ["strong", "weak"]

    def test_no_preferences_orders_by_date(self, perfect_job):
        old = replace(perfect_job, id="old", posted_date=datetime(2023, 1, 1))
        new = replace(perfect_job, id="new", posted_date=datetime(2024, 1, 1))

        ranked = rank_jobs([old, new], None)

        assert [m.job.id for m in ranked] == ["new", "old"]
        assert all(is_neutral(m) for m in ranked)

    def test_custom_matcher(self, listing, perfect_preferences):
        matcher = JobMatcher({"title_exact": 40, "remote": 10})
        ranked = rank_jobs(listing, perfect_preferences, matcher=matcher)
        assert ranked[0].score == 100

    def test_empty_listing(self, perfect_preferences):
        assert rank_jobs([], perfect_preferences) == []


class TestRecommendations:
    """Test get_job_recommendations()."""

    def test_threshold_filters(self, listing, perfect_preferences):
        recs = get_job_recommendations(listing, perfect_preferences)
        # weak job only earns the job type bonus
        assert [m.job.id for m in recs] == ["best", "middle"]

    def test_limit(self, listing, perfect_preferences):
        recs = get_job_recommendations(listing, perfect_preferences, limit=1)
        assert [m.job.id for m in recs] == ["best"]

    def test_threshold_is_exclusive(self, perfect_job):
        prefs = UserPreferences(city="Singapore")  # 25 + 5 job type bonus
        assert get_job_recommendations([perfect_job], prefs, threshold=30) == []
        assert len(get_job_recommendations([perfect_job], prefs, threshold=29.9)) == 1

    def test_no_preferences_returns_newest(self, perfect_job):
        jobs = [
            replace(perfect_job, id=f"job-{month}", posted_date=datetime(2024, month, 1))
            for month in range(1, 9)
        ]

        recs = get_job_recommendations(jobs, None, limit=3)

        assert [m.job.id for m in recs] == ["job-8", "job-7", "job-6"]

    def test_negative_limit(self, listing):
        with pytest.raises(ValueError):
            get_job_recommendations(listing, None, limit=-1)


class TestMatchDisplay:
    """Test percentage and label helpers."""

    @pytest.mark.parametrize("score,expected", [
        (0, 0),
        (84.5, 85),
        (100, 100),
        (120, 100),
        (0.5, 0),
    ])
    def test_percentage(self, score, expected):
        assert get_match_percentage(score) == expected

    @pytest.mark.parametrize("score,label", [
        (100, "Excellent match"),
        (80, "Excellent match"),
        (65, "Good match"),
        (40, "Fair match"),
        (39, "Basic match"),
        (0, "Basic match"),
    ])
    def test_label(self, score, label):
        assert get_match_label(score) == label

    def test_is_neutral(self, perfect_job):
        assert is_neutral(rank_jobs([perfect_job], None)[0])
        assert not is_neutral(rank_jobs([perfect_job], UserPreferences())[0])
