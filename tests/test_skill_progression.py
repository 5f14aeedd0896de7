"""
Test cases for per-skill progression tracking and skill categorization.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import datetime, timedelta, timezone

import pytest

from api.requests import SkillActivity
from engine.career.skills import categorize_skill, track_skill_progression
from engine.enums import SkillLevel

START = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _activities(count: int, complexity: float = 3.0, kind: str = "commit"):
    return [
        SkillActivity(date=START + timedelta(days=i), type=kind, complexity=complexity)
        for i in range(count)
    ]


@pytest.mark.parametrize(
    "skill,category",
    [
        ("TypeScript", "Language"),
        ("Vue", "Framework"),
        ("Redis", "Database"),
        ("Kubernetes", "DevOps"),
        ("Jest", "Testing"),
        ("Terraform", "Other"),
    ],
)
def test_categorize_skill(skill, category):
    assert categorize_skill(skill) == category


def test_empty_activity_is_beginner(now):
    progression = track_skill_progression("Python", [], now=now)
    assert progression.current_level == SkillLevel.beginner
    assert progression.milestones == []
    assert progression.proficiency_score == 0
    assert progression.years_of_experience == 0
    assert progression.projects_completed == 0


def test_intermediate_after_ten_activities(now):
    activities = list(reversed(_activities(12)))
    progression = track_skill_progression("Python", activities, now=now)
    assert [m.level for m in progression.milestones] == [SkillLevel.beginner, SkillLevel.intermediate]
    assert progression.milestones[1].achieved_date == START + timedelta(days=9)
    assert progression.current_level == SkillLevel.intermediate
    # 6 (volume) + 3 (complexity) + 11 days of experience
    assert progression.proficiency_score == 9
    assert progression.years_of_experience == pytest.approx(11 / 365)


def test_expert_requires_complex_work(now):
    simple = track_skill_progression("Go", _activities(100, complexity=4), now=now)
    assert simple.current_level == SkillLevel.intermediate

    complex_ = track_skill_progression("Go", _activities(100, complexity=8), now=now)
    assert [m.level for m in complex_.milestones] == [
        SkillLevel.beginner, SkillLevel.intermediate, SkillLevel.advanced, SkillLevel.expert,
    ]
    assert complex_.milestones[-1].achieved_date == START + timedelta(days=99)


def test_projects_counted_per_day(now):
    activities = [
        SkillActivity(date=START, type="project", complexity=5),
        SkillActivity(date=START + timedelta(hours=3), type="project", complexity=5),
        SkillActivity(date=START + timedelta(days=2), type="project", complexity=5),
        SkillActivity(date=START + timedelta(days=3), type="review", complexity=5),
    ]
    progression = track_skill_progression("React", activities, now=now)
    assert progression.projects_completed == 2
    assert progression.category == "Framework"
