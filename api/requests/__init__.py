"""
Input models for the growth analytics engine: activity logs, metric snapshots, developers, job postings and usage series supplied by upstream collaborators.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterator, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from engine.enums import MetricName


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Commit(FrozenModel):
    date: datetime
    language: str = ""


class PullRequest(FrozenModel):
    date: datetime
    reviews: int = 0


class Repository(FrozenModel):
    created: datetime
    stars: int = 0
    role: str = "owner"


class SkillUsage(FrozenModel):
    skill: str
    first_used: datetime
    last_used: datetime


class ActivityLog(FrozenModel):
    commits: List[Commit] = Field(default_factory=list)
    prs: List[PullRequest] = Field(default_factory=list)
    repos: List[Repository] = Field(default_factory=list)
    skills: List[SkillUsage] = Field(default_factory=list)


class StageAggregates(FrozenModel):
    total_commits: int = 0
    total_reviews: int = 0
    maintainer_repo_count: int = 0
    total_stars: int = 0

    @classmethod
    def from_activity(cls, activity: ActivityLog) -> StageAggregates:
        return cls(
            total_commits=len(activity.commits),
            total_reviews=sum(pr.reviews for pr in activity.prs),
            maintainer_repo_count=sum(1 for r in activity.repos if r.role == "maintainer"),
            total_stars=sum(r.stars for r in activity.repos),
        )


class DeveloperMetrics(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    commit_frequency: float = 0.0
    pr_velocity: float = 0.0
    issue_resolution_rate: float = 0.0
    code_review_participation: float = 0.0
    code_quality_score: float = 0.0
    test_coverage_average: float = 0.0
    documentation_score: float = 0.0
    bug_rate: float = 0.0
    collaboration_score: float = 0.0
    mentorship_activity: float = 0.0
    community_engagement: float = 0.0
    skill_diversity: float = 0.0
    learning_velocity: float = 0.0
    project_complexity: float = 0.0
    repo_stars: float = 0.0
    forks: float = 0.0
    dependents: float = 0.0
    downloads: float = 0.0

    def value(self, metric: MetricName) -> float:
        return float(getattr(self, metric.value))

    def items(self) -> Iterator[Tuple[MetricName, float]]:
        for metric in MetricName:
            yield metric, self.value(metric)


class Developer(FrozenModel):
    id: str
    name: str
    metrics: DeveloperMetrics


class MetricSnapshot(FrozenModel):
    date: datetime
    metrics: Dict[str, float] = Field(default_factory=dict)


class UsagePoint(FrozenModel):
    date: datetime
    value: float


class JobRequirement(FrozenModel):
    id: str
    title: str
    required_skills: List[str] = Field(default_factory=list)
    experience_level: str = "mid"


class SkillActivity(FrozenModel):
    date: datetime
    type: Literal["commit", "pr", "review", "project"]
    complexity: float = 0.0


class GrowthAnalysisRequest(FrozenModel):
    developer_id: str
    activity: ActivityLog = Field(default_factory=ActivityLog)
    history: List[MetricSnapshot] = Field(default_factory=list)
    metric_names: List[str] = Field(default_factory=lambda: [m.value for m in MetricName])
    metrics: Optional[DeveloperMetrics] = None
    peers: List[DeveloperMetrics] = Field(default_factory=list)
    now: datetime
