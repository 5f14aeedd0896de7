"""
Pairwise developer comparison: per-metric differences with winner and significance, an overall win-share score, per-side strengths and improvement recommendations.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List

from api.requests import Developer, DeveloperMetrics
from api.responses import (
    ComparedDeveloper, ComparisonResult, DeveloperComparison,
    OverallScore, StrengthSummary,
)
from engine.enums import MetricName, Significance, Winner
from engine.numeric import round_half_up, safe_ratio
from config import settings


def percentage_diff(v1: float, v2: float) -> float:
    if v2 != 0:
        return (v1 - v2) / v2 * 100
    return 100.0 if v1 > 0 else 0.0


def compare_metrics(metrics1: DeveloperMetrics, metrics2: DeveloperMetrics) -> List[ComparisonResult]:
    results: List[ComparisonResult] = []
    for metric in MetricName:
        v1 = metrics1.value(metric)
        v2 = metrics2.value(metric)
        difference = v1 - v2
        pct = percentage_diff(v1, v2)
        if abs(difference) < settings.comparison_tie_epsilon:
            winner = Winner.tie
        else:
            winner = Winner.user1 if v1 > v2 else Winner.user2
        results.append(ComparisonResult(
            metric=metric.display_name,
            user1_value=v1,
            user2_value=v2,
            difference=difference,
            percentage_diff=pct,
            winner=winner,
            significance=Significance.from_percentage(pct),
        ))
    return results


def overall_score(comparisons: List[ComparisonResult]) -> OverallScore:
    total = len(comparisons)
    score1 = safe_ratio(sum(1 for c in comparisons if c.winner == Winner.user1), total) * 100
    score2 = safe_ratio(sum(1 for c in comparisons if c.winner == Winner.user2), total) * 100
    if abs(score1 - score2) < settings.comparison_overall_tie_band:
        winner = Winner.tie
    else:
        winner = Winner.user1 if score1 > score2 else Winner.user2
    return OverallScore(user1=round_half_up(score1), user2=round_half_up(score2), winner=winner)


def identify_strengths(comparisons: List[ComparisonResult]) -> StrengthSummary:
    limit = settings.comparison_strengths_limit

    def _for(side: Winner) -> List[str]:
        return [
            c.metric for c in comparisons
            if c.winner == side and c.significance != Significance.low
        ][:limit]

    return StrengthSummary(user1=_for(Winner.user1), user2=_for(Winner.user2))


def comparison_recommendations(comparisons: List[ComparisonResult]) -> List[str]:
    recs: List[str] = []

    significant = [c for c in comparisons if c.significance == Significance.high]
    if significant:
        recs.append(f"Focus on {significant[0].metric.lower()} to improve competitiveness")

    collaboration = next((c for c in comparisons if "collaboration" in c.metric.lower()), None)
    if collaboration is not None and collaboration.winner == Winner.user2:
        recs.append("Increase code review participation and community engagement")

    quality = next((c for c in comparisons if "quality" in c.metric.lower()), None)
    if quality is not None and quality.winner == Winner.user2:
        recs.append("Focus on code quality and testing practices")

    return recs[: settings.comparison_recommendations_limit]


def _compared(dev: Developer) -> ComparedDeveloper:
    return ComparedDeveloper(id=dev.id, name=dev.name, metrics=dev.metrics)


def compare_developers(user1: Developer, user2: Developer) -> DeveloperComparison:
    comparisons = compare_metrics(user1.metrics, user2.metrics)
    return DeveloperComparison(
        user1=_compared(user1),
        user2=_compared(user2),
        comparisons=comparisons,
        overall_score=overall_score(comparisons),
        strengths=identify_strengths(comparisons),
        recommendations=comparison_recommendations(comparisons),
    )
