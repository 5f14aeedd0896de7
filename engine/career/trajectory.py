"""
Trajectory projection over a classified stage timeline: next stage and ETA, overall growth rate, and strength/improvement areas of the current stage.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Tuple

import numpy as np

from api.requests import ActivityLog, StageAggregates
from api.responses import CareerStage, CareerTrajectory, ProjectedStage
from engine.career.milestones import extract_milestones
from engine.career.stages import identify_career_stages
from engine.numeric import clamp, round_half_up
from engine.timeutils import add_years, years_between
from config import STAGE_REQUIREMENTS, settings

log = logging.getLogger(__name__)


def average_stage_length(stages: List[CareerStage]) -> float:
    if len(stages) < 2:
        return settings.stage_default_length_years
    lengths = [
        years_between(prev.start_date, nxt.start_date)
        for prev, nxt in zip(stages, stages[1:])
    ]
    return float(np.mean(lengths))


def stage_requirements(stage: str) -> List[str]:
    return list(STAGE_REQUIREMENTS.get(stage, []))


def stage_progress(stage: CareerStage) -> float:
    avg = stage.indicators.total() / 4
    return clamp(round_half_up(avg), 0, 100)


def project_next_stage(
    current_stage: CareerStage,
    all_stages: List[CareerStage],
) -> Optional[ProjectedStage]:
    nxt = current_stage.stage.successor()
    if nxt is None:
        return None
    avg_length = average_stage_length(all_stages)
    return ProjectedStage(
        stage=nxt,
        estimated_date=add_years(current_stage.start_date, avg_length),
        requirements=stage_requirements(nxt.value),
        progress=stage_progress(current_stage),
    )


def calculate_growth_rate(stages: List[CareerStage]) -> float:
    if len(stages) < 2:
        return 0.0
    deltas = [
        (nxt.indicators.total() - prev.indicators.total()) / 4
        for prev, nxt in zip(stages, stages[1:])
    ]
    return np.mean(deltas)


def analyze_strengths_weaknesses(stage: CareerStage) -> Tuple[List[str], List[str]]:
    # with four dimensions the top two and bottom two always partition the set
    ranked = sorted(stage.indicators.as_dict().items(), key=lambda kv: kv[1], reverse=True)
    names = [name for name, _ in ranked]
    return names[:2], names[-2:]


def analyze_progression(activity: ActivityLog, *, now: datetime) -> CareerTrajectory:
    milestones = extract_milestones(activity)
    stages = identify_career_stages(milestones, StageAggregates.from_activity(activity), now=now)
    current = stages[-1]
    strengths, improvements = analyze_strengths_weaknesses(current)
    trajectory = CareerTrajectory(
        stages=stages,
        current_stage=current,
        projected_next_stage=project_next_stage(current, stages),
        overall_growth_rate=calculate_growth_rate(stages),
        strength_areas=strengths,
        improvement_areas=improvements,
    )
    log.debug(
        "analyze_progression: milestones=%d current=%s growth=%.2f",
        len(milestones), current.stage.value, trajectory.overall_growth_rate,
    )
    return trajectory
