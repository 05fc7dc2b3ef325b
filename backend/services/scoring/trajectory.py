"""Trajectory projector: projected readiness score after 3 prep horizons.

Each category improves at a fixed daily rate, slowed by 30% past 0.7
(diminishing returns), scaled by daily study hours and capped so no
category exceeds 1.0. Improvements are weighted by the score engine's
weights, so the projection stays on the readiness-score scale.
"""

import math

from models.schemas.llm_analysis import CategoryScores, LLMAnalysis
from models.schemas.study_plan import PrepPreferences
from models.schemas.trajectory import Projection, TrajectoryProjection
from services.scoring.engine import WEIGHTS
from services.scoring.rules import round_half_up

TRAJECTORY_VERSION = "v0.2"

# Score points (0-1 scale) gained per day of focused prep
DAILY_IMPROVEMENT_RATES = {
    "hard_match": 0.005,  # technical skills move slowly
    "evidence_depth": 0.008,
    "round_readiness": 0.015,  # interview prep improves fastest
    "clarity": 0.01,
    "company_proxy": 0.003,  # culture signals hardest to change
}

DIMINISHING_THRESHOLD = 0.7
DIMINISHING_FACTOR = 0.7

DEFAULT_HORIZONS = (3, 7, 14)

TIMELINE_DAYS = {
    "1day": 1,
    "3days": 3,
    "1week": 7,
    "2weeks": 14,
    "4weeks_plus": 28,
}

DEFAULT_ASSUMPTIONS = {
    3: [
        "2-3 hours daily focused prep",
        "Review top 3 risks identified",
        "Practice behavioral STAR responses",
    ],
    7: [
        "Consistent daily practice maintained",
        "2+ mock interviews completed",
        "Technical concepts reviewed",
    ],
    14: [
        "Intensive prep regimen maintained",
        "5+ mock interviews completed",
        "All critical risks addressed",
    ],
}


def hours_multiplier(daily_hours: float | None) -> float:
    """0.5x for an hour or less, 1x for 2-3 hours, 1.5x for 4+."""
    if not daily_hours:
        return 1.0
    if daily_hours <= 1:
        return 0.5
    if daily_hours <= 3:
        return 1.0
    return 1.5


def _assumptions(days: int, daily_hours: float | None) -> list[str]:
    if not daily_hours:
        return list(DEFAULT_ASSUMPTIONS.get(days, []))

    assumptions = [f"{daily_hours:g}h daily focused prep"]
    if days >= 7:
        mock_count = min(days // 3, 10)
        assumptions.append(f"{mock_count}+ mock interviews completed")
    if days >= 3:
        assumptions.append("Top risks systematically addressed")
    return assumptions


def project_score_at_day(
    current_score: int,
    scores: CategoryScores,
    days: int,
    daily_hours: float | None = None,
) -> Projection:
    multiplier = hours_multiplier(daily_hours)
    values = scores.as_dict()

    total = 0.0
    for category, rate in DAILY_IMPROVEMENT_RATES.items():
        value = values[category]
        if value > DIMINISHING_THRESHOLD:
            rate *= DIMINISHING_FACTOR
        improvement = min(1.0 - value, rate * multiplier * days)
        total += improvement * WEIGHTS[category] * 100

    return Projection(
        score=min(100, round_half_up(current_score + total)),
        assumptions=_assumptions(days, daily_hours),
    )


def improvement_potential(current_score: int, analysis: LLMAnalysis) -> str:
    improvable = sum(1 for v in analysis.category_scores.as_dict().values() if v < 0.6)
    actionable = sum(1 for r in analysis.ranked_risks if r.severity in ("medium", "high"))

    if current_score < 50 and improvable >= 3 and actionable >= 5:
        return "high"
    if current_score >= 75 or improvable <= 1:
        return "low"
    return "medium"


def milestone_days(preferences: PrepPreferences | None) -> tuple[int, int, int]:
    """The three projection horizons, scaled into the user's timeline when given."""
    if preferences is None:
        return DEFAULT_HORIZONS

    days = TIMELINE_DAYS[preferences.timeline]
    if days <= 3:
        return 1, math.ceil(days / 2), days
    if days <= 7:
        return 3, math.ceil(days * 0.7), days
    return min(3, days), min(7, days), days


def compute_trajectory_projection(
    current_score: int,
    analysis: LLMAnalysis,
    preferences: PrepPreferences | None = None,
) -> TrajectoryProjection:
    daily_hours = preferences.daily_hours if preferences else None
    first, second, third = milestone_days(preferences)
    scores = analysis.category_scores

    return TrajectoryProjection(
        current_score=current_score,
        day3_projection=project_score_at_day(current_score, scores, first, daily_hours),
        day7_projection=project_score_at_day(current_score, scores, second, daily_hours),
        day14_projection=project_score_at_day(current_score, scores, third, daily_hours),
        improvement_potential=improvement_potential(current_score, analysis),
        milestone1_day=first,
        milestone2_day=second,
        milestone3_day=third,
        version=TRAJECTORY_VERSION,
    )
