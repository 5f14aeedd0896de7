"""
Career milestone prediction: the next unmet commit/star milestone with ETA and probability, static skill recommendations, and a projected career path.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import List, Mapping

from api.responses import CareerPathStep, CareerPrediction, MilestoneForecast, SkillRecommendation
from engine.enums import StageName
from engine.numeric import clamp, round_half_up
from engine.timeutils import add_months, add_years
from config import CAREER_PATH_REQUIREMENTS, MILESTONE_TABLE, SKILL_RECOMMENDATIONS, STAGE_ORDER, settings

log = logging.getLogger(__name__)


def _month_offset(months: float, now: datetime) -> int:
    if not math.isfinite(months):
        log.warning("predict_next_milestone: non-finite month estimate; using %d", settings.milestone_default_months)
        months = settings.milestone_default_months
    # keep the rolled-over day inside datetime's year range
    latest = (datetime.max.year - now.year) * 12 + (12 - now.month) - 1
    earliest = -((now.year - datetime.min.year) * 12 + (now.month - 1))
    return int(clamp(math.ceil(months), earliest, latest))


def predict_next_milestone(
    current_metrics: Mapping[str, float],
    historical_trend: float,
    current_stage: str,
    *,
    now: datetime,
) -> MilestoneForecast:
    entry = next(
        (row for row in MILESTONE_TABLE if (current_metrics.get(row[3]) or 0) < row[2]),
        MILESTONE_TABLE[-1],
    )
    _, title, threshold, metric = entry

    remaining = threshold - (current_metrics.get(metric) or 0)
    if historical_trend > 0:
        months = remaining / historical_trend
    else:
        months = settings.milestone_default_months

    probability = min(
        settings.milestone_probability_cap,
        settings.milestone_probability_base + historical_trend * settings.milestone_probability_scale,
    )
    return MilestoneForecast(
        title=title,
        estimated_date=add_months(now, _month_offset(months, now)),
        probability=round_half_up(clamp(probability, 0.0, settings.milestone_probability_cap)),
    )


def recommend_skills() -> List[SkillRecommendation]:
    return [
        SkillRecommendation(**row)
        for row in SKILL_RECOMMENDATIONS[: settings.skill_recommendation_limit]
    ]


def project_career_path(
    current_stage: str,
    historical_trend: float,
    *,
    now: datetime,
) -> List[CareerPathStep]:
    stage = current_stage.lower()
    if stage not in STAGE_ORDER:
        log.warning("project_career_path: unknown stage %r", current_stage)
        return []

    idx = STAGE_ORDER.index(stage)
    if historical_trend > settings.career_path_fast_trend:
        years_per_stage = settings.career_path_fast_years
    else:
        years_per_stage = settings.career_path_slow_years

    last = min(idx + 1 + settings.career_path_lookahead, len(STAGE_ORDER))
    return [
        CareerPathStep(
            stage=StageName(STAGE_ORDER[i]),
            estimated_date=add_years(now, years_per_stage * (i - idx)),
            requirements=list(CAREER_PATH_REQUIREMENTS.get(STAGE_ORDER[i], [])),
        )
        for i in range(idx + 1, last)
    ]


def predict_career_milestones(
    current_metrics: Mapping[str, float],
    historical_trend: float,
    current_stage: str,
    *,
    now: datetime,
) -> CareerPrediction:
    return CareerPrediction(
        next_milestone=predict_next_milestone(current_metrics, historical_trend, current_stage, now=now),
        skill_recommendations=recommend_skills(),
        career_path=project_career_path(current_stage, historical_trend, now=now),
    )
