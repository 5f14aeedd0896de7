import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from api.requests import ActivityLog, Commit, Developer, DeveloperMetrics, PullRequest, Repository


NOW = datetime(2026, 6, 1, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


def make_commits(count: int, start: datetime = datetime(2020, 1, 1, tzinfo=timezone.utc), languages=("Python",)):
    return [
        Commit(date=start + timedelta(days=i), language=languages[i % len(languages)])
        for i in range(count)
    ]


def make_activity(commits=0, prs=(), repos=(), languages=("Python",)) -> ActivityLog:
    return ActivityLog(
        commits=make_commits(commits, languages=languages),
        prs=[PullRequest(date=d, reviews=r) for d, r in prs],
        repos=[Repository(created=d, stars=s, role=role) for d, s, role in repos],
    )


@pytest.fixture
def user1_metrics() -> DeveloperMetrics:
    return DeveloperMetrics(
        commit_frequency=15,
        pr_velocity=10,
        issue_resolution_rate=85,
        code_review_participation=1.5,
        code_quality_score=80,
        test_coverage_average=75,
        documentation_score=70,
        bug_rate=2.5,
        collaboration_score=75,
        mentorship_activity=2,
        community_engagement=65,
        skill_diversity=6,
        learning_velocity=2,
        project_complexity=70,
        repo_stars=150,
        forks=25,
        dependents=10,
        downloads=5000,
    )


@pytest.fixture
def user2_metrics() -> DeveloperMetrics:
    return DeveloperMetrics(
        commit_frequency=12,
        pr_velocity=8,
        issue_resolution_rate=78,
        code_review_participation=1.2,
        code_quality_score=85,
        test_coverage_average=80,
        documentation_score=75,
        bug_rate=2.0,
        collaboration_score=80,
        mentorship_activity=3,
        community_engagement=70,
        skill_diversity=5,
        learning_velocity=1.5,
        project_complexity=75,
        repo_stars=200,
        forks=30,
        dependents=15,
        downloads=8000,
    )


@pytest.fixture
def user1(user1_metrics) -> Developer:
    return Developer(id="1", name="User 1", metrics=user1_metrics)


@pytest.fixture
def user2(user2_metrics) -> Developer:
    return Developer(id="2", name="User 2", metrics=user2_metrics)
