"""
Career progression analysis: milestone extraction, stage classification, trajectory projection and per-skill progression tracking.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.career.milestones import extract_milestones
from engine.career.stages import identify_career_stages
from engine.career.trajectory import (
    analyze_progression,
    analyze_strengths_weaknesses,
    calculate_growth_rate,
    project_next_stage,
)
from engine.career.skills import track_skill_progression

__all__ = [
    "extract_milestones",
    "identify_career_stages",
    "analyze_progression",
    "analyze_strengths_weaknesses",
    "calculate_growth_rate",
    "project_next_stage",
    "track_skill_progression",
]
