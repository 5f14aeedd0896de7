"""
Test cases for milestone extraction from contribution activity, covering each rule, chronological ordering and empty input.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import datetime, timezone

from api.requests import ActivityLog, Commit
from config import settings
from engine.career.milestones import extract_milestones
from engine.enums import Impact, MilestoneType
from conftest import make_activity, make_commits


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def test_empty_activity_has_no_milestones():
    assert extract_milestones(ActivityLog()) == []


def test_hundred_commits_yield_first_commit_and_commits_100():
    commits = make_commits(100)
    milestones = extract_milestones(ActivityLog(commits=commits))
    assert [m.id for m in milestones] == ["first-commit", "commits-100"]
    assert milestones[0].type == MilestoneType.contribution
    assert milestones[0].impact == Impact.low
    assert milestones[1].date == commits[99].date
    assert milestones[1].impact == Impact.medium


def test_commit_milestone_uses_chronological_order():
    commits = list(reversed(make_commits(120)))
    milestones = {m.id: m for m in extract_milestones(ActivityLog(commits=commits))}
    ordered = sorted(commits, key=lambda c: c.date)
    assert milestones["first-commit"].date == ordered[0].date
    assert milestones["commits-100"].date == ordered[99].date


def test_commit_count_threshold_is_configurable(monkeypatch):
    monkeypatch.setattr(settings, "milestone_commit_count", 10)
    ids = [m.id for m in extract_milestones(ActivityLog(commits=make_commits(10)))]
    assert ids == ["first-commit", "commits-10"]


def test_repository_and_review_rules():
    activity = make_activity(
        prs=[(_utc(2021, 5, 1), 0), (_utc(2021, 3, 1), 2)],
        repos=[
            (_utc(2021, 1, 1), 0, "owner"),
            (_utc(2021, 2, 1), 3, "owner"),
            (_utc(2021, 6, 1), 250, "maintainer"),
            (_utc(2021, 8, 1), 120, "owner"),
        ],
    )
    milestones = {m.id: m for m in extract_milestones(activity)}

    assert milestones["first-star"].date == _utc(2021, 2, 1)
    assert milestones["popular-repo"].date == _utc(2021, 6, 1)
    assert "250+ stars" in milestones["popular-repo"].description
    assert milestones["popular-repo"].impact == Impact.high
    assert milestones["first-review"].date == _utc(2021, 3, 1)
    assert milestones["first-review"].type == MilestoneType.leadership
    assert milestones["first-maintainer"].date == _utc(2021, 6, 1)
    assert milestones["first-maintainer"].impact == Impact.high


def test_polyglot_needs_five_languages():
    four = make_activity(commits=8, languages=("Python", "Go", "Rust", "C"))
    assert "polyglot" not in [m.id for m in extract_milestones(four)]

    five = make_activity(commits=8, languages=("Python", "Go", "Rust", "C", "Java"))
    milestones = {m.id: m for m in extract_milestones(five)}
    assert milestones["polyglot"].type == MilestoneType.skill
    assert milestones["polyglot"].date == max(c.date for c in five.commits)
    assert "5 programming languages" in milestones["polyglot"].description


def test_output_is_date_sorted():
    activity = ActivityLog(
        commits=[
            Commit(date=_utc(2022, 1, 1), language=lang)
            for lang in ("a", "b", "c", "d", "e")
        ],
        prs=make_activity(prs=[(_utc(2019, 1, 1), 1)]).prs,
        repos=make_activity(repos=[(_utc(2020, 1, 1), 500, "maintainer")]).repos,
    )
    milestones = extract_milestones(activity)
    dates = [m.date for m in milestones]
    assert dates == sorted(dates)
    assert milestones[0].id == "first-review"


def test_same_date_milestones_keep_rule_order():
    day = _utc(2020, 1, 1)
    activity = make_activity(repos=[(day, 200, "maintainer")])
    ids = [m.id for m in extract_milestones(activity)]
    assert ids == ["first-star", "popular-repo", "first-maintainer"]
