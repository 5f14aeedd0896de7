"""
Result models produced by the growth analytics engine. Every model serializes to plain JSON through ``model_dump(mode="json")``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

import numpy as np
from pydantic import BaseModel, Field, model_serializer

from api.requests import DeveloperMetrics
from engine.enums import (
    Impact, MilestoneType, Position, Priority, Significance, SkillLevel,
    StageName, Trend, TrendDirection, Winner,
)


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class CareerMilestone(NpModel):

    id: str
    type: MilestoneType
    title: str
    description: str
    date: datetime
    impact: Impact
    category: str


class StageIndicators(NpModel):

    technical_skills: float = Field(ge=0.0, le=100.0)
    leadership: float = Field(ge=0.0, le=100.0)
    impact: float = Field(ge=0.0, le=100.0)
    communication: float = Field(ge=0.0, le=100.0)

    def as_dict(self) -> dict[str, float]:
        return {
            "technical_skills": self.technical_skills,
            "leadership": self.leadership,
            "impact": self.impact,
            "communication": self.communication,
        }

    def total(self) -> float:
        return sum(self.as_dict().values())


class CareerStage(NpModel):

    stage: StageName
    start_date: datetime
    end_date: Optional[datetime] = None
    indicators: StageIndicators
    achievements: List[CareerMilestone] = Field(default_factory=list)


class ProjectedStage(NpModel):

    stage: StageName
    estimated_date: datetime
    requirements: List[str]
    progress: float = Field(ge=0.0, le=100.0)


class CareerTrajectory(NpModel):

    stages: List[CareerStage]
    current_stage: CareerStage
    projected_next_stage: Optional[ProjectedStage] = None
    overall_growth_rate: float
    strength_areas: List[str]
    improvement_areas: List[str]


class SkillLevelMilestone(NpModel):

    level: SkillLevel
    achieved_date: datetime
    evidence: List[str]


class SkillProgression(NpModel):

    skill: str
    category: str
    milestones: List[SkillLevelMilestone]
    current_level: SkillLevel
    proficiency_score: int
    years_of_experience: float
    projects_completed: int


class GrowthPrediction(NpModel):

    metric: str
    current_value: float
    predicted_3_months: float = Field(ge=0.0)
    predicted_6_months: float = Field(ge=0.0)
    predicted_12_months: float = Field(ge=0.0)
    confidence: int = Field(ge=0, le=100)
    trend: Trend
    factors: List[str]


class MilestoneForecast(NpModel):

    title: str
    estimated_date: datetime
    probability: int


class SkillRecommendation(NpModel):

    skill: str
    priority: Priority
    market_demand: int
    learning_path: List[str]


class CareerPathStep(NpModel):

    stage: StageName
    estimated_date: datetime
    requirements: List[str]


class CareerPrediction(NpModel):

    next_milestone: MilestoneForecast
    skill_recommendations: List[SkillRecommendation]
    career_path: List[CareerPathStep]


class SkillDemand(NpModel):

    current_demand: int
    predicted_demand: int
    trend_direction: TrendDirection
    recommendation: str


class JobMatch(NpModel):

    job_id: str
    match_score: int
    skill_match: int
    experience_match: int
    growth_potential: int
    recommendation: str


class ComparisonResult(NpModel):

    metric: str
    user1_value: float
    user2_value: float
    difference: float
    percentage_diff: float
    winner: Winner
    significance: Significance


class OverallScore(NpModel):

    user1: int
    user2: int
    winner: Winner


class StrengthSummary(NpModel):

    user1: List[str] = Field(default_factory=list)
    user2: List[str] = Field(default_factory=list)


class DeveloperRef(NpModel):

    id: str
    name: str


class ComparedDeveloper(DeveloperRef):

    metrics: DeveloperMetrics


class DeveloperComparison(NpModel):

    user1: ComparedDeveloper
    user2: ComparedDeveloper
    comparisons: List[ComparisonResult]
    overall_score: OverallScore
    strengths: StrengthSummary
    recommendations: List[str] = Field(default_factory=list)


class RankedDeveloper(NpModel):

    rank: int
    developer: DeveloperRef
    score: int
    metrics: DeveloperMetrics


class SimilarDeveloper(NpModel):

    developer: DeveloperRef
    similarity: int
    matching_areas: List[str]


class CompetitiveInsights(NpModel):

    position: Position
    percentile: int = Field(ge=0, le=100)
    outperforming_areas: List[str]
    underperforming_areas: List[str]
    actionable_insights: List[str]


class GrowthReport(NpModel):

    developer_id: str
    generated_at: datetime
    trajectory: CareerTrajectory
    predictions: List[GrowthPrediction]
    insights: Optional[CompetitiveInsights] = None
    summary: str
