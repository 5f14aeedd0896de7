"""
Competitive positioning of a developer within a peer group: per-metric rank percentiles, an overall position band, and actionable insights keyed on strong and weak metrics.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

import numpy as np

from api.requests import DeveloperMetrics
from api.responses import CompetitiveInsights
from engine.enums import MetricName, Position
from engine.numeric import clamp, round_half_up
from config import settings

log = logging.getLogger(__name__)

_WEAK_ADVICE = {
    MetricName.commit_frequency: "Increase daily coding activity and maintain consistency",
    MetricName.code_quality_score: "Focus on code reviews and testing to improve quality",
    MetricName.collaboration_score: "Participate more in code reviews and team discussions",
}
_STRONG_ADVICE = {
    MetricName.skill_diversity: "Leverage your polyglot expertise in diverse projects",
    MetricName.repo_stars: "Build on your OSS success with more community projects",
}
_FALLBACK_ADVICE = "Maintain current momentum and explore new technologies"


def metric_percentile(user_value: float, peer_values: Sequence[float]) -> float:
    ranked = sorted([*peer_values, user_value], reverse=True)
    rank = ranked.index(user_value) + 1
    return (len(ranked) - rank) / len(ranked) * 100


def actionable_insights(weak: List[MetricName], strong: List[MetricName]) -> List[str]:
    insights = [advice for metric, advice in _WEAK_ADVICE.items() if metric in weak]
    insights += [advice for metric, advice in _STRONG_ADVICE.items() if metric in strong]
    if not insights:
        insights.append(_FALLBACK_ADVICE)
    return insights[: settings.insight_limit]


def generate_competitive_insights(
    user_metrics: DeveloperMetrics,
    peer_metrics: Sequence[DeveloperMetrics],
) -> CompetitiveInsights:
    percentiles: Dict[MetricName, float] = {
        metric: metric_percentile(value, [peer.value(metric) for peer in peer_metrics])
        for metric, value in user_metrics.items()
    }
    avg = float(np.mean(list(percentiles.values()))) if percentiles else 0.0

    strong = [m for m, p in percentiles.items() if p >= settings.insight_outperform_percentile]
    weak = [m for m, p in percentiles.items() if p < settings.insight_underperform_percentile]
    log.debug(
        "generate_competitive_insights: peers=%d avg_percentile=%.1f strong=%d weak=%d",
        len(peer_metrics), avg, len(strong), len(weak),
    )

    return CompetitiveInsights(
        position=Position.from_percentile(avg),
        percentile=int(clamp(round_half_up(avg), 0, 100)),
        outperforming_areas=[m.display_name for m in strong],
        underperforming_areas=[m.display_name for m in weak],
        actionable_insights=actionable_insights(weak, strong),
    )
