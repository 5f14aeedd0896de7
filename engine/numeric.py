"""
Numeric primitives shared by the forecasting and comparison modules: least-squares line fits on index and timestamp axes, trend classification, half-up rounding and clamping.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from engine.enums import Trend
from config import settings


@dataclass(frozen=True)
class LineFit:
    slope: float
    intercept: float
    origin: float = 0.0

    def predict(self, x: float) -> float:
        return self.slope * (x - self.origin) + self.intercept


def _least_squares(x: np.ndarray, y: np.ndarray) -> tuple[float, float]:
    if float(np.ptp(x)) == 0:
        return 0.0, float(np.mean(y))
    slope, intercept = np.polyfit(x, y, 1)
    return float(slope), float(intercept)


def index_fit(values: Sequence[float]) -> LineFit:
    """Fit values against their positions 0..n-1."""
    if len(values) < 2:
        return LineFit(slope=0.0, intercept=float(values[0]) if values else 0.0)
    y = np.array(values, dtype=float)
    slope, intercept = _least_squares(np.arange(len(y), dtype=float), y)
    return LineFit(slope=slope, intercept=intercept)


def time_fit(timestamps_ms: Sequence[float], values: Sequence[float]) -> LineFit:
    """Fit values against epoch-millisecond timestamps.

    The axis is shifted to the first timestamp before fitting so squared
    epoch values never enter the sums; ``LineFit.predict`` takes raw epoch
    milliseconds and yields the same line as an unshifted fit.
    """
    if len(timestamps_ms) < 2:
        return LineFit(slope=0.0, intercept=float(values[0]) if values else 0.0)
    origin = float(timestamps_ms[0])
    t = np.array(timestamps_ms, dtype=float) - origin
    y = np.array(values, dtype=float)
    slope, intercept = _least_squares(t, y)
    return LineFit(slope=slope, intercept=intercept, origin=origin)


def classify_trend(values: Sequence[float], threshold: float | None = None) -> Trend:
    if threshold is None:
        threshold = settings.trend_slope_threshold
    if len(values) < 2:
        return Trend.stable
    slope = index_fit(values).slope
    if slope > threshold:
        return Trend.increasing
    if slope < -threshold:
        return Trend.decreasing
    return Trend.stable


def fit_confidence(timestamps_ms: Sequence[float], values: Sequence[float], fit: LineFit) -> float:
    """Score 0-100 of how closely the fitted line tracks the observed points."""
    if len(values) < settings.confidence_min_points:
        return settings.confidence_default
    y = np.array(values, dtype=float)
    predicted = np.array([fit.predict(float(t)) for t in timestamps_ms], dtype=float)
    avg_error = float(np.mean(np.abs(y - predicted)))
    avg_value = float(np.mean(y))
    if avg_value <= 0:
        return settings.confidence_default
    return clamp((1.0 - avg_error / avg_value) * 100.0, 0.0, 100.0)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def safe_ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
    return numerator / denominator if denominator else default
