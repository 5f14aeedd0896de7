"""
Developer comparison: pairwise comparison, composite ranking, similarity search and competitive positioning.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.comparison.compare import compare_developers
from engine.comparison.ranking import composite_score, rank_developers
from engine.comparison.similarity import find_similar_developers
from engine.comparison.insights import generate_competitive_insights

__all__ = [
    "compare_developers",
    "composite_score",
    "rank_developers",
    "find_similar_developers",
    "generate_competitive_insights",
]
