"""
Enumerations for metric identifiers, career stages, milestone kinds, trends and comparison outcomes.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from config import STAGE_ORDER


class MetricName(str, Enum):
    commit_frequency = "commit_frequency"
    pr_velocity = "pr_velocity"
    issue_resolution_rate = "issue_resolution_rate"
    code_review_participation = "code_review_participation"
    code_quality_score = "code_quality_score"
    test_coverage_average = "test_coverage_average"
    documentation_score = "documentation_score"
    bug_rate = "bug_rate"
    collaboration_score = "collaboration_score"
    mentorship_activity = "mentorship_activity"
    community_engagement = "community_engagement"
    skill_diversity = "skill_diversity"
    learning_velocity = "learning_velocity"
    project_complexity = "project_complexity"
    repo_stars = "repo_stars"
    forks = "forks"
    dependents = "dependents"
    downloads = "downloads"

    @property
    def display_name(self) -> str:
        return format_metric_name(self.value)


def format_metric_name(key: str) -> str:
    # "repo_stars" -> "Repo Stars"
    return " ".join(part.capitalize() for part in key.split("_") if part)


class StageName(str, Enum):
    junior = "junior"
    mid = "mid"
    senior = "senior"
    lead = "lead"
    principal = "principal"

    def successor(self) -> Optional[StageName]:
        idx = STAGE_ORDER.index(self.value)
        if idx >= len(STAGE_ORDER) - 1:
            return None
        return StageName(STAGE_ORDER[idx + 1])


class MilestoneType(str, Enum):
    skill = "skill"
    achievement = "achievement"
    contribution = "contribution"
    recognition = "recognition"
    leadership = "leadership"


class Impact(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"


class Trend(str, Enum):
    increasing = "increasing"
    decreasing = "decreasing"
    stable = "stable"


class TrendDirection(str, Enum):
    rising = "rising"
    falling = "falling"
    stable = "stable"

    @classmethod
    def from_trend(cls, trend: Trend) -> TrendDirection:
        if trend == Trend.increasing:
            return cls.rising
        if trend == Trend.decreasing:
            return cls.falling
        return cls.stable


class SkillLevel(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"
    expert = "expert"


class Priority(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class Winner(str, Enum):
    user1 = "user1"
    user2 = "user2"
    tie = "tie"


class Significance(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"

    @classmethod
    def from_percentage(cls, percentage_diff: float) -> Significance:
        from config import settings

        magnitude = abs(percentage_diff)
        if magnitude >= settings.comparison_significance_high:
            return cls.high
        if magnitude >= settings.comparison_significance_medium:
            return cls.medium
        return cls.low


class Position(str, Enum):
    top = "top"
    above_average = "above-average"
    average = "average"
    below_average = "below-average"

    @classmethod
    def from_percentile(cls, percentile: float) -> Position:
        from config import settings

        for cutoff, label in settings.insight_position_bands:
            if percentile >= cutoff:
                return cls(label)
        return cls.below_average
