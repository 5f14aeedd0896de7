"""
Population ranking by a weighted composite score over eight headline metrics.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from api.requests import Developer, DeveloperMetrics
from api.responses import DeveloperRef, RankedDeveloper
from engine.enums import MetricName
from engine.numeric import round_half_up
from config import COMPOSITE_WEIGHTS

_WEIGHT_METRICS = [MetricName(name) for name in COMPOSITE_WEIGHTS]
_WEIGHTS = np.array([COMPOSITE_WEIGHTS[m.value] for m in _WEIGHT_METRICS], dtype=float)


def composite_score(metrics: DeveloperMetrics) -> int:
    values = np.array([metrics.value(m) for m in _WEIGHT_METRICS], dtype=float)
    return round_half_up(float(np.dot(values, _WEIGHTS)))


def rank_developers(developers: Sequence[Developer]) -> List[RankedDeveloper]:
    scored = [(composite_score(dev.metrics), dev) for dev in developers]
    # equal scores keep input order
    scored.sort(key=lambda item: item[0], reverse=True)
    return [
        RankedDeveloper(
            rank=position,
            developer=DeveloperRef(id=dev.id, name=dev.name),
            score=score,
            metrics=dev.metrics,
        )
        for position, (score, dev) in enumerate(scored, start=1)
    ]
