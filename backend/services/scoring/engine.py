"""Score engine: the deterministic readiness score and its headline derivatives.

The analysis call is the analyst; this module is the authority. Every
number here is a pure function of the validated category scores.
"""

import math

from models.schemas.company_difficulty import CompanyDifficultyContext
from models.schemas.llm_analysis import LLMAnalysis
from models.schemas.prior_employment import PriorEmploymentSignal
from models.schemas.recruiter import FirstImpression, RecruiterSignals, RecruiterSimulation
from models.schemas.score_breakdown import ExecutiveScores, RiskBand, ScoreBreakdown, ScoreWeights
from services.scoring.rules import clamp, round_half_up

SCORING_VERSION = "v0.2"

# Keyed by CategoryScores field
WEIGHTS: dict[str, float] = {
    "hard_match": 0.35,
    "evidence_depth": 0.25,
    "round_readiness": 0.20,
    "clarity": 0.10,
    "company_proxy": 0.10,
}

SCORE_WEIGHTS = ScoreWeights(
    hard_requirement_match=WEIGHTS["hard_match"],
    evidence_depth=WEIGHTS["evidence_depth"],
    round_readiness=WEIGHTS["round_readiness"],
    resume_clarity=WEIGHTS["clarity"],
    company_proxy=WEIGHTS["company_proxy"],
)


def compute_readiness_score(analysis: LLMAnalysis) -> tuple[int, ScoreBreakdown]:
    """Weighted sum of the five category scores on a 0-100 scale."""
    scaled = {key: value * 100 for key, value in analysis.category_scores.as_dict().items()}
    score = round_half_up(sum(scaled[key] * weight for key, weight in WEIGHTS.items()))

    breakdown = ScoreBreakdown(
        hard_requirement_match=scaled["hard_match"],
        evidence_depth=scaled["evidence_depth"],
        round_readiness=scaled["round_readiness"],
        resume_clarity=scaled["clarity"],
        company_proxy=scaled["company_proxy"],
        weights=SCORE_WEIGHTS,
        version=SCORING_VERSION,
    )
    return score, breakdown


def compute_risk_band(score: int) -> RiskBand:
    """0-39 High, 40-69 Medium, 70-100 Low."""
    if score < 40:
        return "High"
    if score < 70:
        return "Medium"
    return "Low"


def _sigmoid(x: float, mid: float, k: float) -> float:
    return 100 / (1 + math.exp(-k * (x - mid)))


def compute_conversion_likelihood(
    readiness_score: int,
    analysis: LLMAnalysis,
    adjustment_factor: float = 1.0,
) -> int:
    """Chance of converting the loop into an offer, 5-95.

    S-curve around 60 (steep below, plateau above 85), then penalties for
    company difficulty and for critical/high risks.
    """
    base = _sigmoid(readiness_score, 60, 0.08)

    if adjustment_factor > 1.0:
        base -= (adjustment_factor - 1.0) * 50

    critical = sum(1 for r in analysis.ranked_risks if r.severity == "critical")
    high = sum(1 for r in analysis.ranked_risks if r.severity == "high")
    base -= critical * 8 + high * 3

    return round_half_up(clamp(base, 5, 95))


def compute_technical_fit(analysis: LLMAnalysis, adjustment_factor: float = 1.0) -> int:
    """Hard-skill alignment only; clarity and company proxy are excluded."""
    scores = analysis.category_scores
    base = (
        scores.hard_match * 0.55 * 100
        + scores.round_readiness * 0.25 * 100
        + scores.evidence_depth * 0.20 * 100
    )

    if adjustment_factor > 1.0:
        base -= (adjustment_factor - 1.0) * 20

    # JD-linked critical/high risks are technical gaps
    tech_risks = [
        r for r in analysis.ranked_risks
        if r.severity in ("critical", "high") and r.jd_refs
    ]
    base -= len(tech_risks) * 3

    return round_half_up(clamp(base, 0, 100))


def compute_executive_scores(
    readiness_score: int,
    analysis: LLMAnalysis,
    difficulty: CompanyDifficultyContext | None = None,
    prior: PriorEmploymentSignal | None = None,
) -> ExecutiveScores:
    factor = difficulty.adjustment_factor if difficulty else 1.0
    conversion = compute_conversion_likelihood(readiness_score, analysis, factor)
    technical_fit = compute_technical_fit(analysis, factor)

    if prior is not None and prior.detected:
        readiness_score = min(100, readiness_score + prior.boosts.readiness_boost)
        conversion = min(95, conversion + prior.boosts.conversion_boost)
        technical_fit = min(100, technical_fit + prior.boosts.technical_fit_boost)

    return ExecutiveScores(
        readiness_score=readiness_score,
        conversion_likelihood=conversion,
        technical_fit=technical_fit,
        version=SCORING_VERSION,
    )


# --- Recruiter simulation ---

MAX_RED_FLAGS = 4
HIDDEN_STRENGTH_RULES = (
    ("hard_match", "Strong technical skills alignment"),
    ("evidence_depth", "Well-documented impact and achievements"),
    ("clarity", "Clear and professional communication"),
)
HIDDEN_STRENGTH_THRESHOLD = 0.7

IMPRESSION_NOTES = {
    "proceed": "Likely to advance to phone screen.",
    "maybe": "On the fence - may depend on candidate pool.",
    "reject": "Risk of being filtered out early.",
}


def compute_first_impression(readiness_score: int) -> FirstImpression:
    """70+ proceed, 45-69 maybe, below 45 reject."""
    if readiness_score >= 70:
        return "proceed"
    if readiness_score >= 45:
        return "maybe"
    return "reject"


def generate_recruiter_notes(signals: RecruiterSignals) -> str:
    parts = []

    seconds = signals.estimated_screen_time_seconds
    if seconds < 30:
        parts.append("Very quick scan - resume may not stand out.")
    elif seconds < 60:
        parts.append("Standard review time.")
    else:
        parts.append("Extended review - something caught attention.")

    flags = len(signals.immediate_red_flags)
    if flags == 0:
        parts.append("No immediate concerns.")
    elif flags <= 2:
        parts.append("Minor concerns to address.")
    else:
        parts.append("Multiple red flags may cause hesitation.")

    if len(signals.hidden_strengths) >= 3:
        parts.append("Hidden strengths could differentiate in interview.")

    parts.append(IMPRESSION_NOTES[signals.first_impression])
    return " ".join(parts)


def infer_recruiter_signals(analysis: LLMAnalysis, readiness_score: int) -> RecruiterSignals:
    """Recruiter signals derived from the scores when the analysis carries none."""
    scores = analysis.category_scores.as_dict()
    return RecruiterSignals(
        immediate_red_flags=[
            r.title for r in analysis.ranked_risks if r.severity in ("critical", "high")
        ][:MAX_RED_FLAGS],
        hidden_strengths=[
            label for key, label in HIDDEN_STRENGTH_RULES if scores[key] >= HIDDEN_STRENGTH_THRESHOLD
        ],
        # a clearer resume holds the reader longer: 30s to 90s
        estimated_screen_time_seconds=round_half_up(30 + scores["clarity"] * 60),
        first_impression=compute_first_impression(readiness_score),
    )


def build_recruiter_simulation(analysis: LLMAnalysis, readiness_score: int) -> RecruiterSimulation:
    """Pass the model's recruiter signals through, or infer them, and add notes."""
    signals = analysis.recruiter_signals or infer_recruiter_signals(analysis, readiness_score)
    return RecruiterSimulation(
        **signals.model_dump(),
        recruiter_notes=generate_recruiter_notes(signals),
        version=SCORING_VERSION,
    )
