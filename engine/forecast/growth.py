"""
Multi-horizon metric forecasting. Trend direction comes from a least-squares slope over sample positions, while the 3/6/12-month values come from a least-squares line over epoch-millisecond timestamps, with a fit-error based confidence score.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Sequence

from api.requests import MetricSnapshot
from api.responses import GrowthPrediction
from engine.numeric import classify_trend, fit_confidence, round_half_up, time_fit
from engine.timeutils import to_epoch_ms
from config import DEFAULT_GROWTH_FACTORS, GROWTH_FACTORS, MONTH_MS, settings

log = logging.getLogger(__name__)


def growth_factors(metric: str) -> List[str]:
    return list(GROWTH_FACTORS.get(metric, DEFAULT_GROWTH_FACTORS))


def _series(historical_data: Sequence[MetricSnapshot], metric: str) -> List[float]:
    if historical_data and not any(metric in snap.metrics for snap in historical_data):
        log.warning("predict_growth: metric %r absent from history; using zero series", metric)
    return [float(snap.metrics.get(metric, 0.0) or 0.0) for snap in historical_data]


def predict_metric(
    historical_data: Sequence[MetricSnapshot],
    metric: str,
    *,
    now: datetime,
) -> GrowthPrediction:
    values = _series(historical_data, metric)
    timestamps = [to_epoch_ms(snap.date) for snap in historical_data]

    trend = classify_trend(values)
    fit = time_fit(timestamps, values)
    now_ms = to_epoch_ms(now)
    short, medium, long_ = (
        max(0.0, fit.predict(now_ms + months * MONTH_MS))
        for months in settings.forecast_horizons_months
    )
    confidence = fit_confidence(timestamps, values, fit)

    return GrowthPrediction(
        metric=metric,
        current_value=values[-1] if values else 0.0,
        predicted_3_months=short,
        predicted_6_months=medium,
        predicted_12_months=long_,
        confidence=round_half_up(confidence),
        trend=trend,
        factors=growth_factors(metric),
    )


def predict_growth(
    historical_data: Sequence[MetricSnapshot],
    metric_names: Sequence[str],
    *,
    now: datetime,
) -> List[GrowthPrediction]:
    return [predict_metric(historical_data, metric, now=now) for metric in metric_names]
