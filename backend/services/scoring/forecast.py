"""Round forecaster: pass probability per interview round type."""

from models.schemas.company_difficulty import CompanyDifficultyContext
from models.schemas.forecast import InterviewRoundForecasts, RoundForecastItem
from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import CategoryScores, LLMAnalysis
from models.schemas.resume_extracted import ExtractedResume
from services.scoring.evidence import find_matches
from services.scoring.rules import clamp, pluralize, round_to

FORECAST_VERSION = "v0.2"

MIN_PERSONALIZED_FOCUS_CHARS = 30

# Each vector sums to 1.0; insertion order breaks strength/risk ties.
ROUND_WEIGHTS: dict[str, dict[str, float]] = {
    "technical": {
        "hard_match": 0.4,
        "round_readiness": 0.4,
        "evidence_depth": 0.2,
        "clarity": 0.0,
        "company_proxy": 0.0,
    },
    "behavioral": {
        "clarity": 0.4,
        "company_proxy": 0.3,
        "evidence_depth": 0.2,
        "hard_match": 0.1,
        "round_readiness": 0.0,
    },
    "case": {
        "hard_match": 0.3,
        "round_readiness": 0.3,
        "clarity": 0.2,
        "company_proxy": 0.2,
        "evidence_depth": 0.0,
    },
}

DIMENSION_LABELS = {
    "hard_match": "Technical Skills Match",
    "evidence_depth": "Demonstrated Impact",
    "round_readiness": "Interview Preparation",
    "clarity": "Communication Clarity",
    "company_proxy": "Culture Fit Signals",
}

FOCUS_MAP = {
    "technical": "Focus on technical fundamentals and coding practice",
    "behavioral": "Practice storytelling and refine your narrative",
    "case": "Study problem-solving frameworks and structured thinking",
}


def compute_round_probability(
    scores: CategoryScores,
    round_type: str,
    adjustment_factor: float = 1.0,
) -> float:
    """Weighted pass probability, 0-1 with 2 decimals.

    Harder companies dampen it exponentially (p ** factor), which
    compresses high probabilities more than low ones.
    """
    weights = ROUND_WEIGHTS[round_type]
    values = scores.as_dict()
    probability = sum(values[key] * weight for key, weight in weights.items())

    if adjustment_factor > 1.0:
        probability = probability ** adjustment_factor

    return round_to(clamp(probability, 0.0, 1.0), 2)


def _strength_and_risk(
    scores: CategoryScores,
    round_type: str,
    resume: ExtractedResume | None,
    jd: ExtractedJD | None,
) -> tuple[str, str]:
    values = scores.as_dict()
    relevant = [key for key, weight in ROUND_WEIGHTS[round_type].items() if weight > 0]

    strength_key = risk_key = relevant[0]
    for key in relevant:
        if values[key] > values[strength_key]:
            strength_key = key
        if values[key] < values[risk_key]:
            risk_key = key

    strength = DIMENSION_LABELS[strength_key]
    risk = DIMENSION_LABELS[risk_key]
    if resume is None or jd is None:
        return strength, risk

    matched_must, _ = find_matches(resume.skills, jd.must_have)
    matched_nice, _ = find_matches(resume.skills + resume.recency_signals, jd.nice_to_have)

    if strength_key == "hard_match" and jd.must_have:
        strength = f"{strength} ({len(matched_must)}/{len(jd.must_have)} must-haves)"
    elif strength_key == "company_proxy" and jd.nice_to_have:
        strength = f"{strength} ({len(matched_nice)}/{len(jd.nice_to_have)} nice-to-haves)"
    elif strength_key == "evidence_depth" and resume.metrics:
        strength = f"{strength} ({len(resume.metrics)} quantified metrics)"

    if risk_key == "hard_match" and jd.must_have:
        unmatched = len(jd.must_have) - len(matched_must)
        risk = f"{risk} ({pluralize(unmatched, 'unmatched must-have')})"
    elif risk_key == "company_proxy" and jd.nice_to_have:
        unmatched = len(jd.nice_to_have) - len(matched_nice)
        risk = f"{risk} ({pluralize(unmatched, 'unmatched nice-to-have')})"
    elif risk_key == "evidence_depth":
        risk = f"{risk} ({pluralize(len(resume.metrics), 'metric')} found)"

    return strength, risk


def compute_round_forecasts(
    analysis: LLMAnalysis,
    personalized_focus: str | None = None,
    resume: ExtractedResume | None = None,
    jd: ExtractedJD | None = None,
    company_difficulty: CompanyDifficultyContext | None = None,
) -> InterviewRoundForecasts:
    factor = company_difficulty.adjustment_factor if company_difficulty else 1.0
    scores = analysis.category_scores

    forecasts = []
    for round_type in ROUND_WEIGHTS:
        strength, risk = _strength_and_risk(scores, round_type, resume, jd)
        forecasts.append(
            RoundForecastItem(
                round_type=round_type,
                pass_probability=compute_round_probability(scores, round_type, factor),
                primary_strength=strength,
                primary_risk=risk,
            )
        )

    weakest = min(forecasts, key=lambda f: f.pass_probability)
    if personalized_focus and len(personalized_focus) >= MIN_PERSONALIZED_FOCUS_CHARS:
        focus = personalized_focus
    else:
        focus = FOCUS_MAP[weakest.round_type]

    return InterviewRoundForecasts(
        forecasts=forecasts,
        recommended_focus=focus,
        version=FORECAST_VERSION,
    )
