"""Hire-zone analyzer: compare the readiness score to the band historically associated with offers.

Flow:
    round thresholds (scaled by company difficulty)
      -> status (below / in_zone / above) + gap to the band minimum
      -> percentile vs. the industry average
      -> per-category gaps vs. round targets -> top 3 remediation actions
"""

import math
from types import MappingProxyType
from typing import Mapping

from models.schemas.company_difficulty import CompanyDifficultyContext
from models.schemas.hire_zone import HireZoneAction, HireZoneAnalysis, HireZoneCategoryGap
from models.schemas.score_breakdown import ScoreBreakdown
from services.scoring.rules import clamp, round_half_up

HIRE_ZONE_VERSION = "v0.1"

PERCENTILE_STD_DEV = 17
MAX_ACTIONS = 3

# round type -> (min, max, industry average)
HIRE_ZONE_THRESHOLDS: Mapping[str, tuple[int, int, int]] = MappingProxyType({
    "technical": (78, 85, 62),
    "behavioral": (72, 80, 58),
    "case": (75, 82, 60),
    "finance": (76, 83, 61),
})

# Research loops are scored against the technical band
ROUND_ALIASES = {"research": "technical"}

CATEGORY_LABELS = {
    "hard_requirement_match": "Hard Requirement Match",
    "evidence_depth": "Evidence Depth",
    "round_readiness": "Round Readiness",
    "resume_clarity": "Resume Clarity",
    "company_proxy": "Company Alignment",
}

CATEGORY_TARGETS: Mapping[str, Mapping[str, int]] = MappingProxyType({
    "technical": MappingProxyType({
        "hard_requirement_match": 82,
        "evidence_depth": 75,
        "round_readiness": 80,
        "resume_clarity": 70,
        "company_proxy": 68,
    }),
    "behavioral": MappingProxyType({
        "hard_requirement_match": 75,
        "evidence_depth": 78,
        "round_readiness": 74,
        "resume_clarity": 76,
        "company_proxy": 65,
    }),
    "case": MappingProxyType({
        "hard_requirement_match": 78,
        "evidence_depth": 76,
        "round_readiness": 78,
        "resume_clarity": 72,
        "company_proxy": 66,
    }),
    "finance": MappingProxyType({
        "hard_requirement_match": 80,
        "evidence_depth": 76,
        "round_readiness": 78,
        "resume_clarity": 72,
        "company_proxy": 67,
    }),
})

# category -> (action, estimated impact)
IMPROVEMENT_ACTIONS: Mapping[str, tuple[str, str]] = MappingProxyType({
    "hard_requirement_match": (
        "For each must-have JD skill missing from your resume, add a bullet with a concrete example "
        'of adjacent experience — e.g., if the JD says "Kubernetes" and you used Docker Compose, write '
        '"orchestrated containerized services" and prepare to discuss the migration path',
        "+5-8 pts",
    ),
    "evidence_depth": (
        "Pick your top 5 resume bullets and add a specific metric to each — if you don't have exact "
        'numbers, estimate conservatively (e.g., "reduced latency by ~30%" or "served ~10K daily users")',
        "+4-7 pts",
    ),
    "round_readiness": (
        "Do 3 timed practice sessions targeting your weakest question category, recording yourself and "
        "reviewing for filler words, vague answers, and missing structure",
        "+6-10 pts",
    ),
    "resume_clarity": (
        "Rewrite your top 5 bullets using: [Action verb] + [what you built/did] + [measurable result] — "
        "then read each aloud to check it takes under 10 seconds",
        "+3-5 pts",
    ),
    "company_proxy": (
        "Find 3 recent engineering blog posts or talks from the company, identify patterns in how they "
        "describe their technical challenges, and mirror that language in your resume",
        "+3-6 pts",
    ),
})


def compute_percentile(score: float, industry_avg: float) -> int:
    """Logistic approximation of the normal CDF, clamped to 1-99."""
    z = (score - industry_avg) / PERCENTILE_STD_DEV
    percentile = 100 / (1 + math.exp(-1.7 * z))
    return round_half_up(clamp(percentile, 1, 99))


def _gap_priority(gap_points: int) -> str:
    if gap_points >= 15:
        return "critical"
    if gap_points >= 8:
        return "high"
    return "medium"


def compute_hire_zone_analysis(
    score: int,
    round_type: str,
    breakdown: ScoreBreakdown,
    company_difficulty: CompanyDifficultyContext | None = None,
) -> HireZoneAnalysis:
    band_round = ROUND_ALIASES.get(round_type, round_type)
    base_min, base_max, industry_avg = HIRE_ZONE_THRESHOLDS[band_round]
    targets = CATEGORY_TARGETS[band_round]

    factor = 1.0
    if company_difficulty is not None and company_difficulty.tier != "STANDARD":
        factor = company_difficulty.adjustment_factor
    zone_min = min(95, round_half_up(base_min * factor))
    zone_max = min(100, round_half_up(base_max * factor))

    if score >= zone_max:
        status = "above"
    elif score >= zone_min:
        status = "in_zone"
    else:
        status = "below"
    gap = zone_min - score if status == "below" else 0

    gaps = []
    for category, target in targets.items():
        current = round_half_up(getattr(breakdown, category))
        gap_points = max(0, target - current)
        gaps.append(
            HireZoneCategoryGap(
                category=category,
                label=CATEGORY_LABELS[category],
                current_score=current,
                target_score=target,
                gap_points=gap_points,
                priority=_gap_priority(gap_points),
            )
        )
    gaps.sort(key=lambda g: g.gap_points, reverse=True)

    top_actions = []
    for g in [g for g in gaps if g.gap_points > 0][:MAX_ACTIONS]:
        action, impact = IMPROVEMENT_ACTIONS[g.category]
        top_actions.append(HireZoneAction(action=action, category=g.label, estimated_impact=impact))

    return HireZoneAnalysis(
        hire_zone_min=zone_min,
        hire_zone_max=zone_max,
        current_score=score,
        gap=gap,
        percentile=compute_percentile(score, industry_avg),
        status=status,
        category_gaps=gaps,
        top_actions=top_actions,
        round_type=round_type,
        industry_average=industry_avg,
        version=HIRE_ZONE_VERSION,
    )
