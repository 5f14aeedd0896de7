"""
Job match scoring: blends skill overlap, commit-based experience fit and new-skill growth potential into a ranked list of job postings.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Mapping, Sequence

from api.requests import JobRequirement
from api.responses import JobMatch
from engine.numeric import round_half_up
from config import LEVEL_COMMIT_THRESHOLDS, settings


def _has_skill(user_skills: Sequence[str], skill: str) -> bool:
    wanted = skill.lower()
    return any(u.lower() == wanted for u in user_skills)


def skill_match(user_skills: Sequence[str], required: Sequence[str]) -> float:
    if not required:
        return 100.0
    matched = sum(1 for r in required if _has_skill(user_skills, r))
    return matched / len(required) * 100


def experience_match(metrics: Mapping[str, float], level: str) -> float:
    commits = metrics.get("commits") or 0
    threshold = LEVEL_COMMIT_THRESHOLDS.get(level.lower(), settings.job_default_commit_threshold)
    return min(100.0, commits / threshold * 100)


def growth_potential(user_skills: Sequence[str], required: Sequence[str]) -> float:
    if not required:
        return 0.0
    new = sum(1 for r in required if not _has_skill(user_skills, r))
    return min(100.0, new / len(required) * 100)


def job_recommendation(match_score: float, skill_score: float) -> str:
    if match_score >= settings.job_excellent_cutoff:
        return "Excellent match! Apply with confidence"
    if match_score >= settings.job_good_cutoff:
        return "Good fit! Consider applying"
    if skill_score >= settings.job_skill_match_cutoff:
        return "Skills match but need more experience"
    return "Consider building more relevant experience first"


def predict_job_matches(
    user_metrics: Mapping[str, float],
    user_skills: Sequence[str],
    jobs: Sequence[JobRequirement],
) -> List[JobMatch]:
    matches: List[JobMatch] = []
    for job in jobs:
        skills = skill_match(user_skills, job.required_skills)
        experience = experience_match(user_metrics, job.experience_level)
        growth = growth_potential(user_skills, job.required_skills)
        score = (
            skills * settings.job_skill_weight
            + experience * settings.job_experience_weight
            + growth * settings.job_growth_weight
        )
        matches.append(JobMatch(
            job_id=job.id,
            match_score=round_half_up(score),
            skill_match=round_half_up(skills),
            experience_match=round_half_up(experience),
            growth_potential=round_half_up(growth),
            recommendation=job_recommendation(score, skills),
        ))
    return sorted(matches, key=lambda m: m.match_score, reverse=True)
