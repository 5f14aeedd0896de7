"""
Career stage classification: a deterministic threshold ladder over extracted milestones and aggregate activity counters, producing a chronological junior/mid/senior stage timeline.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from api.requests import StageAggregates
from api.responses import CareerMilestone, CareerStage, StageIndicators
from engine.enums import StageName
from engine.timeutils import add_days, add_years
from config import STAGE_INDICATORS, settings

log = logging.getLogger(__name__)


def _indicators(stage: StageName) -> StageIndicators:
    return StageIndicators(**STAGE_INDICATORS[stage.value])


def _achieved_between(
    milestones: List[CareerMilestone],
    start: datetime,
    end: Optional[datetime] = None,
) -> List[CareerMilestone]:
    return [m for m in milestones if m.date >= start and (end is None or m.date <= end)]


def _qualifies_for_mid(aggregates: StageAggregates) -> bool:
    return (
        aggregates.total_commits > settings.stage_mid_min_commits
        and aggregates.total_reviews > settings.stage_mid_min_reviews
    )


def _qualifies_for_senior(aggregates: StageAggregates) -> bool:
    return (
        aggregates.maintainer_repo_count > 0
        and aggregates.total_stars > settings.stage_senior_min_stars
    )


def identify_career_stages(
    milestones: List[CareerMilestone],
    aggregates: StageAggregates,
    *,
    now: datetime,
) -> List[CareerStage]:
    start = milestones[0].date if milestones else now
    junior_end = add_years(start, settings.stage_junior_years)

    stages: List[CareerStage] = [
        CareerStage(
            stage=StageName.junior,
            start_date=start,
            end_date=junior_end,
            indicators=_indicators(StageName.junior),
            achievements=_achieved_between(milestones, start, junior_end),
        )
    ]

    if _qualifies_for_mid(aggregates):
        mid_start = add_days(junior_end, 1)
        stages.append(CareerStage(
            stage=StageName.mid,
            start_date=mid_start,
            indicators=_indicators(StageName.mid),
            achievements=_achieved_between(milestones, mid_start),
        ))

    if _qualifies_for_senior(aggregates):
        senior_start = now if len(stages) > 1 else junior_end
        stages.append(CareerStage(
            stage=StageName.senior,
            start_date=senior_start,
            indicators=_indicators(StageName.senior),
            achievements=_achieved_between(milestones, senior_start),
        ))

    log.debug(
        "identify_career_stages: commits=%d reviews=%d maintainer=%d stars=%d -> %s",
        aggregates.total_commits,
        aggregates.total_reviews,
        aggregates.maintainer_repo_count,
        aggregates.total_stars,
        [s.stage.value for s in stages],
    )
    return stages
