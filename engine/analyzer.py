"""
Single-developer growth report: runs trajectory analysis, metric forecasts and, when a metric snapshot is supplied, competitive positioning, then summarizes the result in one line.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging

from api.requests import GrowthAnalysisRequest
from api.responses import GrowthReport
from engine.career import analyze_progression
from engine.comparison import generate_competitive_insights
from engine.enums import Trend
from engine.forecast import predict_growth

log = logging.getLogger(__name__)


def _summary(report: GrowthReport) -> str:
    trajectory = report.trajectory
    parts = [f"{len(trajectory.stages)} stage(s)"]
    milestones = sum(len(s.achievements) for s in trajectory.stages)
    if milestones:
        parts.append(f"{milestones} milestone(s)")
    rising = [p.metric for p in report.predictions if p.trend == Trend.increasing]
    falling = [p.metric for p in report.predictions if p.trend == Trend.decreasing]
    if rising:
        parts.append(f"{len(rising)} rising metric(s)")
    if falling:
        parts.append(f"{len(falling)} declining metric(s)")
    if report.insights is not None:
        parts.append(f"{report.insights.percentile}th percentile among peers")
    nxt = trajectory.projected_next_stage
    tail = f" Next: {nxt.stage.value} ({nxt.progress:.0f}% ready)." if nxt else ""
    return f"[{trajectory.current_stage.stage.value.upper()}] {' | '.join(parts)}.{tail}"


def run(req: GrowthAnalysisRequest) -> GrowthReport:
    trajectory = analyze_progression(req.activity, now=req.now)
    predictions = predict_growth(req.history, req.metric_names, now=req.now)
    insights = (
        generate_competitive_insights(req.metrics, req.peers)
        if req.metrics is not None
        else None
    )

    report = GrowthReport(
        developer_id=req.developer_id,
        generated_at=req.now,
        trajectory=trajectory,
        predictions=predictions,
        insights=insights,
        summary="",
    )
    report = report.model_copy(update={"summary": _summary(report)})
    log.info("growth report for %s: %s", req.developer_id, report.summary)
    return report
