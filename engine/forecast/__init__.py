"""
Forecasting built on least-squares regression: multi-horizon metric growth, next career milestone, skill market demand and job match scoring.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.growth import predict_growth
from engine.forecast.milestones import predict_career_milestones, predict_next_milestone
from engine.forecast.skills import predict_skill_demand
from engine.forecast.jobs import predict_job_matches

__all__ = [
    "predict_growth",
    "predict_career_milestones",
    "predict_next_milestone",
    "predict_skill_demand",
    "predict_job_matches",
]
