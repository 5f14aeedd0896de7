"""
Per-skill progression tracking: level milestones from activity volume and complexity, a proficiency score, and keyword-based skill categorization.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from api.requests import SkillActivity
from api.responses import SkillLevelMilestone, SkillProgression
from engine.enums import SkillLevel
from engine.numeric import round_half_up
from engine.timeutils import years_between
from config import SKILL_CATEGORIES

# (level, min activities, complexity floor, min complex activities, evidence)
_LEVEL_RULES = [
    (SkillLevel.beginner, 1, None, 0, ["First use of skill"]),
    (SkillLevel.intermediate, 10, None, 0, ["10+ contributions", "Consistent usage"]),
    (
        SkillLevel.advanced, 50, 5, 10,
        ["50+ contributions", "Complex projects completed", "Code reviews provided"],
    ),
    (
        SkillLevel.expert, 100, 7, 20,
        ["100+ contributions", "High-complexity projects", "Mentorship activity", "Community recognition"],
    ),
]


def categorize_skill(skill: str) -> str:
    lowered = skill.lower()
    for category, keywords in SKILL_CATEGORIES.items():
        if any(k in lowered for k in keywords):
            return category
    return "Other"


def identify_skill_milestones(activities: List[SkillActivity]) -> List[SkillLevelMilestone]:
    milestones: List[SkillLevelMilestone] = []
    for level, min_count, floor, min_complex, evidence in _LEVEL_RULES:
        if len(activities) < min_count:
            continue
        if floor is not None and sum(1 for a in activities if a.complexity > floor) < min_complex:
            continue
        milestones.append(SkillLevelMilestone(
            level=level,
            achieved_date=activities[min_count - 1].date,
            evidence=list(evidence),
        ))
    return milestones


def proficiency_score(activities: List[SkillActivity], years_of_experience: float) -> int:
    if not activities:
        return 0
    activity_score = min(50.0, len(activities) / 2)
    complexity_score = min(30.0, sum(a.complexity for a in activities) / len(activities))
    experience_score = min(20.0, years_of_experience * 5)
    return round_half_up(activity_score + complexity_score + experience_score)


def track_skill_progression(
    skill: str,
    activities: List[SkillActivity],
    *,
    now: datetime,
) -> SkillProgression:
    ordered = sorted(activities, key=lambda a: a.date)
    first_use = ordered[0].date if ordered else now
    last_use = ordered[-1].date if ordered else now
    years = years_between(first_use, last_use)

    milestones = identify_skill_milestones(ordered)
    projects = {a.date.date() for a in ordered if a.type == "project"}

    return SkillProgression(
        skill=skill,
        category=categorize_skill(skill),
        milestones=milestones,
        current_level=milestones[-1].level if milestones else SkillLevel.beginner,
        proficiency_score=proficiency_score(ordered, years),
        years_of_experience=years,
        projects_completed=len(projects),
    )
