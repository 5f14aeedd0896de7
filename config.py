"""
Constants and configuration for the developer growth analytics engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict, List, Tuple

from pydantic_settings import BaseSettings


MONTH_MS: int = 30 * 24 * 60 * 60 * 1000
YEAR_MS: int = 365 * 24 * 60 * 60 * 1000

STAGE_ORDER: List[str] = ["junior", "mid", "senior", "lead", "principal"]

# fixed indicator baselines assigned when a stage is classified
STAGE_INDICATORS: Dict[str, Dict[str, int]] = {
    "junior": {"technical_skills": 40, "leadership": 20, "impact": 30, "communication": 35},
    "mid": {"technical_skills": 70, "leadership": 50, "impact": 60, "communication": 65},
    "senior": {"technical_skills": 85, "leadership": 75, "impact": 80, "communication": 80},
}

# checklist shown when projecting the next stage of a trajectory
STAGE_REQUIREMENTS: Dict[str, List[str]] = {
    "mid": [
        "Technical Skills: 70+",
        "Leadership: 50+",
        "Impact: 60+",
        "500+ commits",
        "50+ code reviews",
    ],
    "senior": [
        "Technical Skills: 85+",
        "Leadership: 75+",
        "Impact: 80+",
        "Maintainer of projects",
        "100+ GitHub stars",
        "Mentorship activity",
    ],
    "lead": [
        "Technical Skills: 90+",
        "Leadership: 85+",
        "Impact: 90+",
        "Multiple popular projects",
        "Team leadership experience",
        "Technical writing/speaking",
    ],
    "principal": [
        "Technical Skills: 95+",
        "Leadership: 95+",
        "Impact: 95+",
        "Industry recognition",
        "Significant OSS contributions",
        "Strategic technical vision",
    ],
}

# shorter checklist used by the career path forecast
CAREER_PATH_REQUIREMENTS: Dict[str, List[str]] = {
    "mid": ["500+ commits", "50+ code reviews", "Team collaboration"],
    "senior": ["1000+ commits", "Project leadership", "100+ stars"],
    "lead": ["Technical mentorship", "Architecture decisions", "Team management"],
    "principal": ["Strategic vision", "Industry recognition", "Major OSS impact"],
}

GROWTH_FACTORS: Dict[str, List[str]] = {
    "commit_frequency": [
        "Consistent coding practice",
        "Project complexity",
        "Available time",
    ],
    "code_quality_score": [
        "Code review participation",
        "Testing practices",
        "Experience level",
    ],
    "collaboration_score": [
        "Team size",
        "Communication skills",
        "Community engagement",
    ],
}
DEFAULT_GROWTH_FACTORS: List[str] = ["General experience", "Learning curve", "Motivation"]

# (stage, title, threshold, metric) evaluated in order; first unmet entry wins
MILESTONE_TABLE: List[Tuple[str, str, float, str]] = [
    ("junior", "100 Commits", 100, "commits"),
    ("mid", "500 Commits", 500, "commits"),
    ("mid", "First Popular Repo (50 stars)", 50, "stars"),
    ("senior", "1000 Commits", 1000, "commits"),
    ("senior", "Major OSS Contribution (100 stars)", 100, "stars"),
]

SKILL_RECOMMENDATIONS: List[Dict] = [
    {
        "skill": "TypeScript",
        "priority": "high",
        "market_demand": 90,
        "learning_path": ["JavaScript Fundamentals", "TypeScript Basics", "Advanced Types"],
    },
    {
        "skill": "React",
        "priority": "high",
        "market_demand": 95,
        "learning_path": ["Component Basics", "Hooks", "State Management", "Performance"],
    },
    {
        "skill": "Node.js",
        "priority": "medium",
        "market_demand": 85,
        "learning_path": ["Server Basics", "Express.js", "Database Integration"],
    },
    {
        "skill": "Docker",
        "priority": "medium",
        "market_demand": 80,
        "learning_path": ["Containerization Basics", "Docker Compose", "Kubernetes Intro"],
    },
    {
        "skill": "AWS",
        "priority": "low",
        "market_demand": 88,
        "learning_path": ["Cloud Fundamentals", "EC2", "S3", "Lambda"],
    },
]

MARKET_DEMAND: Dict[str, int] = {
    "typescript": 90,
    "react": 95,
    "python": 92,
    "nodejs": 85,
    "docker": 80,
    "kubernetes": 78,
    "aws": 88,
    "go": 75,
}

# commits expected for each experience level of a job posting
LEVEL_COMMIT_THRESHOLDS: Dict[str, int] = {
    "junior": 100,
    "mid": 500,
    "senior": 1000,
    "lead": 2000,
}

COMPOSITE_WEIGHTS: Dict[str, float] = {
    "commit_frequency": 0.10,
    "pr_velocity": 0.10,
    "code_quality_score": 0.15,
    "collaboration_score": 0.15,
    "skill_diversity": 0.10,
    "repo_stars": 0.15,
    "community_engagement": 0.10,
    "issue_resolution_rate": 0.15,
}

SKILL_CATEGORIES: Dict[str, List[str]] = {
    "Language": ["javascript", "typescript", "python", "java", "go", "rust", "c++"],
    "Framework": ["react", "vue", "angular", "nextjs", "express", "django"],
    "Database": ["postgresql", "mongodb", "redis", "mysql"],
    "DevOps": ["docker", "kubernetes", "aws", "azure", "gcp"],
    "Testing": ["jest", "cypress", "playwright", "junit"],
}

DEVGROWTH_TREND_SLOPE_THRESHOLD = float(os.getenv("DEVGROWTH_TREND_SLOPE_THRESHOLD", "0.05"))


class Settings(BaseSettings):
    # trend classification on the index-based slope
    trend_slope_threshold: float = DEVGROWTH_TREND_SLOPE_THRESHOLD

    # forecast confidence
    confidence_min_points: int = 3
    confidence_default: float = 50.0
    forecast_horizons_months: Tuple[int, int, int] = (3, 6, 12)

    # milestone extraction
    milestone_commit_count: int = 100
    milestone_popular_repo_stars: int = 100
    milestone_polyglot_languages: int = 5

    # stage classification ladder
    stage_junior_years: int = 2
    stage_mid_min_commits: int = 500
    stage_mid_min_reviews: int = 50
    stage_senior_min_stars: int = 100
    stage_default_length_years: float = 2.0

    # next milestone prediction
    milestone_default_months: float = 12.0
    milestone_probability_base: float = 60.0
    milestone_probability_scale: float = 5.0
    milestone_probability_cap: float = 95.0
    career_path_fast_trend: float = 5.0
    career_path_fast_years: int = 2
    career_path_slow_years: int = 3
    career_path_lookahead: int = 2
    skill_recommendation_limit: int = 3

    # skill demand
    market_demand_default: int = 60
    demand_high_cutoff: float = 80.0
    demand_good_cutoff: float = 70.0

    # job matching
    job_skill_weight: float = 0.5
    job_experience_weight: float = 0.3
    job_growth_weight: float = 0.2
    job_default_commit_threshold: int = 500
    job_excellent_cutoff: float = 80.0
    job_good_cutoff: float = 60.0
    job_skill_match_cutoff: float = 70.0

    # pairwise comparison
    comparison_tie_epsilon: float = 0.01
    comparison_significance_high: float = 50.0
    comparison_significance_medium: float = 20.0
    comparison_overall_tie_band: float = 5.0
    comparison_strengths_limit: int = 3
    comparison_recommendations_limit: int = 5

    # similarity search
    similarity_match_ratio: float = 0.2
    similarity_areas_limit: int = 5
    similarity_default_limit: int = 5

    # competitive positioning: list of (min_percentile, position)
    insight_position_bands: List[Tuple[float, str]] = [
        (75.0, "top"),
        (60.0, "above-average"),
        (40.0, "average"),
    ]
    insight_outperform_percentile: float = 70.0
    insight_underperform_percentile: float = 40.0
    insight_limit: int = 5

    model_config = {
        "env_prefix": "DEVGROWTH_",
        "extra": "ignore",
    }


settings = Settings()
