"""
Test cases for pairwise developer comparison: winners, significance tiers, overall score, strengths and recommendations.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from api.requests import Developer, DeveloperMetrics
from engine.comparison.compare import compare_developers, percentage_diff
from engine.enums import MetricName, Significance, Winner


def test_identical_developers_tie(user1_metrics):
    a = Developer(id="a", name="A", metrics=user1_metrics)
    b = Developer(id="b", name="B", metrics=user1_metrics)
    result = compare_developers(a, b)

    assert len(result.comparisons) == len(MetricName)
    assert all(c.winner == Winner.tie for c in result.comparisons)
    assert (result.overall_score.user1, result.overall_score.user2) == (0, 0)
    assert result.overall_score.winner == Winner.tie
    assert result.strengths.user1 == [] and result.strengths.user2 == []
    assert result.recommendations == []


def test_compare_two_developers(user1, user2):
    result = compare_developers(user1, user2)
    assert result.user1.id == "1"
    assert result.user2.metrics == user2.metrics

    by_metric = {c.metric: c for c in result.comparisons}
    commits = by_metric["Commit Frequency"]
    assert commits.winner == Winner.user1
    assert commits.difference == pytest.approx(3)
    assert commits.percentage_diff == pytest.approx(25.0)
    assert commits.significance == Significance.medium
    assert by_metric["Issue Resolution Rate"].significance == Significance.low
    assert by_metric["Repo Stars"].winner == Winner.user2

    # 7 of 18 metrics favour user1
    assert result.overall_score.user1 == 39
    assert result.overall_score.user2 == 61
    assert result.overall_score.winner == Winner.user2

    assert result.strengths.user1 == ["Commit Frequency", "Pr Velocity", "Code Review Participation"]
    assert len(result.strengths.user2) == 3
    assert result.recommendations == [
        "Increase code review participation and community engagement",
        "Focus on code quality and testing practices",
    ]


def test_high_significance_recommendation():
    strong = Developer(id="s", name="S", metrics=DeveloperMetrics(repo_stars=300))
    weak = Developer(id="w", name="W", metrics=DeveloperMetrics(repo_stars=100))
    result = compare_developers(weak, strong)
    assert result.recommendations[0] == "Focus on repo stars to improve competitiveness"
    assert result.strengths.user2 == ["Repo Stars"]
    assert result.overall_score.winner == Winner.user2


def test_zero_baseline_percentage():
    assert percentage_diff(5, 0) == 100.0
    assert percentage_diff(0, 0) == 0.0
    assert percentage_diff(-1, 0) == 0.0
    assert percentage_diff(15, 10) == pytest.approx(50.0)


def test_small_differences_are_ties():
    a = Developer(id="a", name="A", metrics=DeveloperMetrics(bug_rate=1.000))
    b = Developer(id="b", name="B", metrics=DeveloperMetrics(bug_rate=1.005))
    result = compare_developers(a, b)
    bug = next(c for c in result.comparisons if c.metric == "Bug Rate")
    assert bug.winner == Winner.tie
