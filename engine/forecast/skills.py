"""
Skill market demand prediction from a historical usage series and a static demand table.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

from api.requests import UsagePoint
from api.responses import SkillDemand
from engine.enums import TrendDirection
from engine.numeric import classify_trend, round_half_up
from config import MARKET_DEMAND, settings


def market_demand(skill: str) -> int:
    return MARKET_DEMAND.get(skill.lower(), settings.market_demand_default)


def usage_growth_rate(values: Sequence[float]) -> float:
    if len(values) < 2 or values[0] == 0:
        return 0.0
    return (values[-1] - values[0]) / values[0]


def skill_recommendation(skill: str, demand: float, direction: TrendDirection) -> str:
    if demand >= settings.demand_high_cutoff and direction == TrendDirection.rising:
        return f"High priority: {skill} is in high demand and growing"
    if demand >= settings.demand_good_cutoff:
        return f"Good investment: {skill} has strong market presence"
    if direction == TrendDirection.falling:
        return f"Consider alternatives: {skill} demand is declining"
    return f"Monitor: {skill} has moderate demand"


def predict_skill_demand(skill: str, historical_usage: Sequence[UsagePoint]) -> SkillDemand:
    values = [p.value for p in historical_usage]
    direction = TrendDirection.from_trend(classify_trend(values))
    current = market_demand(skill)
    predicted = min(100.0, current * (1 + usage_growth_rate(values)))
    return SkillDemand(
        current_demand=current,
        predicted_demand=round_half_up(predicted),
        trend_direction=direction,
        recommendation=skill_recommendation(skill, current, direction),
    )
