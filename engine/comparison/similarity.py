"""
Similarity search: normalized per-metric distance between a target profile and candidates, with the metrics on which they closely agree.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from api.requests import Developer, DeveloperMetrics
from api.responses import DeveloperRef, SimilarDeveloper
from engine.enums import MetricName
from engine.numeric import round_half_up
from config import settings


def similarity(metrics1: DeveloperMetrics, metrics2: DeveloperMetrics) -> int:
    v1 = np.array([metrics1.value(m) for m in MetricName], dtype=float)
    v2 = np.array([metrics2.value(m) for m in MetricName], dtype=float)
    scale = np.maximum(np.maximum(v1, v2), 1.0)
    avg_diff = float(np.mean(np.abs(v1 - v2) / scale))
    return round_half_up((1.0 - avg_diff) * 100)


def matching_areas(metrics1: DeveloperMetrics, metrics2: DeveloperMetrics) -> List[str]:
    matching: List[str] = []
    for metric in MetricName:
        v1 = metrics1.value(metric)
        v2 = metrics2.value(metric)
        avg = (v1 + v2) / 2
        if avg == 0:
            continue
        if abs(v1 - v2) / avg < settings.similarity_match_ratio:
            matching.append(metric.display_name)
    return matching[: settings.similarity_areas_limit]


def find_similar_developers(
    target: DeveloperMetrics,
    candidates: Sequence[Developer],
    limit: Optional[int] = None,
) -> List[SimilarDeveloper]:
    if limit is None:
        limit = settings.similarity_default_limit
    results = [
        SimilarDeveloper(
            developer=DeveloperRef(id=c.id, name=c.name),
            similarity=similarity(target, c.metrics),
            matching_areas=matching_areas(target, c.metrics),
        )
        for c in candidates
    ]
    results.sort(key=lambda r: r.similarity, reverse=True)
    return results[: max(0, limit)]
