"""
Milestone extraction from raw contribution activity. A fixed, ordered rule set scans commits, pull requests and repositories; every rule that matches contributes one dated milestone and the collected list is returned date-ascending.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from api.requests import ActivityLog
from api.responses import CareerMilestone
from engine.enums import Impact, MilestoneType
from config import settings

log = logging.getLogger(__name__)

Rule = Callable[[ActivityLog], Optional[CareerMilestone]]


def _first_commit(activity: ActivityLog) -> Optional[CareerMilestone]:
    if not activity.commits:
        return None
    first = min(activity.commits, key=lambda c: c.date)
    return CareerMilestone(
        id="first-commit",
        type=MilestoneType.contribution,
        title="First Contribution",
        description="Made first commit to version control",
        date=first.date,
        impact=Impact.low,
        category="Getting Started",
    )


def _commit_count(activity: ActivityLog) -> Optional[CareerMilestone]:
    target = settings.milestone_commit_count
    if len(activity.commits) < target:
        return None
    ordered = sorted(activity.commits, key=lambda c: c.date)
    return CareerMilestone(
        id=f"commits-{target}",
        type=MilestoneType.achievement,
        title=f"{target} Commits",
        description=f"Reached {target} commits milestone",
        date=ordered[target - 1].date,
        impact=Impact.medium,
        category="Consistency",
    )


def _first_star(activity: ActivityLog) -> Optional[CareerMilestone]:
    starred = [r for r in activity.repos if r.stars > 0]
    if not starred:
        return None
    first = min(starred, key=lambda r: r.created)
    return CareerMilestone(
        id="first-star",
        type=MilestoneType.recognition,
        title="First GitHub Star",
        description="Created first repository that received community recognition",
        date=first.created,
        impact=Impact.medium,
        category="Impact",
    )


def _popular_repo(activity: ActivityLog) -> Optional[CareerMilestone]:
    popular = [r for r in activity.repos if r.stars >= settings.milestone_popular_repo_stars]
    if not popular:
        return None
    top = max(popular, key=lambda r: r.stars)
    return CareerMilestone(
        id="popular-repo",
        type=MilestoneType.recognition,
        title="Popular Open Source Project",
        description=f"Created repository with {top.stars}+ stars",
        date=top.created,
        impact=Impact.high,
        category="Community Impact",
    )


def _first_review(activity: ActivityLog) -> Optional[CareerMilestone]:
    reviewed = [pr for pr in activity.prs if pr.reviews > 0]
    if not reviewed:
        return None
    first = min(reviewed, key=lambda pr: pr.date)
    return CareerMilestone(
        id="first-review",
        type=MilestoneType.leadership,
        title="First Code Review",
        description="Started contributing to code reviews",
        date=first.date,
        impact=Impact.medium,
        category="Collaboration",
    )


def _first_maintainer(activity: ActivityLog) -> Optional[CareerMilestone]:
    maintained = [r for r in activity.repos if r.role == "maintainer"]
    if not maintained:
        return None
    first = min(maintained, key=lambda r: r.created)
    return CareerMilestone(
        id="first-maintainer",
        type=MilestoneType.leadership,
        title="Repository Maintainer",
        description="Became maintainer of an open source project",
        date=first.created,
        impact=Impact.high,
        category="Leadership",
    )


def _polyglot(activity: ActivityLog) -> Optional[CareerMilestone]:
    languages = {c.language for c in activity.commits}
    if not activity.commits or len(languages) < settings.milestone_polyglot_languages:
        return None
    latest = max(activity.commits, key=lambda c: c.date)
    return CareerMilestone(
        id="polyglot",
        type=MilestoneType.skill,
        title="Polyglot Developer",
        description=f"Proficient in {len(languages)} programming languages",
        date=latest.date,
        impact=Impact.high,
        category="Technical Skills",
    )


RULES: List[Rule] = [
    _first_commit,
    _commit_count,
    _first_star,
    _popular_repo,
    _first_review,
    _first_maintainer,
    _polyglot,
]


def extract_milestones(activity: ActivityLog) -> List[CareerMilestone]:
    found = [m for m in (rule(activity) for rule in RULES) if m is not None]
    log.debug("extract_milestones: %d of %d rules matched", len(found), len(RULES))
    # stable sort keeps rule order for milestones sharing a date
    return sorted(found, key=lambda m: m.date)
