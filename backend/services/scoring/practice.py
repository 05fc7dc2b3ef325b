"""Practice intelligence: how the candidate should practice, not just what.

Four independent readings of the same validated analysis:
    practice sync         coding exposure vs mock-interview readiness
    practice Rx           one prescription per top risk, sized by severity
    pressure index        four stress dimensions, penalized by severe risks
    consistency/momentum  four preparation signals, lifted by a long study plan
"""

import re

from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import LLMAnalysis, RiskItem
from models.schemas.practice import (
    ConsistencyMomentumScore,
    Level,
    MomentumBand,
    MomentumSignals,
    PracticeIntelligence,
    PracticePrescription,
    PracticeSyncIntelligence,
    PracticeType,
    PrecisionPracticeRx,
    PressureBand,
    PressureDimensions,
    PressureHandlingIndex,
    ReadinessSignal,
)
from models.schemas.resume_extracted import ExtractedResume
from services.scoring.evidence import find_matches
from services.scoring.rules import first_match, pluralize, round_half_up, round_to

PRACTICE_VERSION = "v0.1"

CODING_RISK_KEYWORDS = ("coding", "algorithm", "data structure", "leetcode", "technical", "implementation")
CODING_RISK_PENALTY = 0.05
MAX_PRESCRIPTIONS = 6
MAX_PRESCRIPTION_TITLE = 50


def _level(score: float) -> Level:
    if score >= 0.7:
        return "high"
    if score >= 0.4:
        return "moderate"
    return "low"


# --- Practice sync ---

def _is_coding_risk(risk: RiskItem) -> bool:
    title, rationale = risk.title.lower(), risk.rationale.lower()
    return any(kw in title or kw in rationale for kw in CODING_RISK_KEYWORDS)


def _sync_recommendation(coding: float, mock: float, overall: int) -> str:
    result = first_match([
        (
            lambda: coding < 0.4 and mock < 0.4,
            lambda: "Both coding practice and mock interviews need significant attention. "
                    "Start with coding fundamentals, then layer in mock sessions.",
        ),
        (
            lambda: coding < mock - 0.15,
            lambda: "Your communication readiness outpaces your coding exposure. "
                    "Prioritize coding practice and problem-solving drills.",
        ),
        (
            lambda: mock < coding - 0.15,
            lambda: "Your technical preparation is ahead of your interview delivery. "
                    "Focus on mock interviews and presentation skills.",
        ),
        (
            lambda: overall >= 70,
            lambda: "Practice readiness is solid. Fine-tune with targeted mock interviews "
                    "and edge-case coding challenges.",
        ),
    ])
    return result or (
        "Balanced practice across coding and mock interviews recommended. "
        "Alternate daily between technical drills and interview simulations."
    )


def compute_practice_sync(
    analysis: LLMAnalysis,
    resume: ExtractedResume | None = None,
    jd: ExtractedJD | None = None,
) -> PracticeSyncIntelligence:
    """Coding exposure (hard x0.6 + evidence x0.4, minus 0.05 per coding risk)
    against mock readiness (clarity x0.5 + round x0.3 + company x0.2)."""
    s = analysis.category_scores

    matched_must: list[str] = []
    unmatched_must: list[str] = []
    matched_nice: list[str] = []
    if resume is not None and jd is not None:
        matched_must, unmatched_must = find_matches(resume.skills, jd.must_have)
        matched_nice, _ = find_matches(resume.skills + resume.recency_signals, jd.nice_to_have)

    coding_risks = [r for r in analysis.ranked_risks if _is_coding_risk(r)]
    coding = s.hard_match * 0.6 + s.evidence_depth * 0.4
    coding = round_to(max(0.0, coding - len(coding_risks) * CODING_RISK_PENALTY))

    coding_signals = []
    if s.hard_match >= 0.7:
        if matched_must:
            coding_signals.append(
                "Strong technical skills alignment: matched " + ", ".join(matched_must) + " from JD must-haves"
            )
        else:
            coding_signals.append("Strong technical skills alignment")
    if s.hard_match < 0.4:
        if jd is not None and jd.must_have:
            missing = unmatched_must if resume is not None else jd.must_have
            coding_signals.append(
                "Technical skills gap detected: missing key JD requirements: " + ", ".join(missing[:3])
            )
        else:
            coding_signals.append("Technical skills gap detected")
    if s.evidence_depth >= 0.7:
        if resume is not None and resume.metrics:
            coding_signals.append(
                f"Well-documented coding evidence: {len(resume.metrics)} quantified metrics including: "
                + "; ".join(resume.metrics[:2])
            )
        else:
            coding_signals.append("Well-documented coding evidence")
    if s.evidence_depth < 0.4:
        if resume is not None:
            coding_signals.append(
                f"Limited coding evidence: only {pluralize(len(resume.metrics), 'quantified metric')} found in resume"
            )
        else:
            coding_signals.append("Limited coding evidence in resume")
    if coding_risks:
        coding_signals.append(f"{len(coding_risks)} coding-related risk(s) flagged")

    mock = round_to(s.clarity * 0.5 + s.round_readiness * 0.3 + s.company_proxy * 0.2)

    mock_signals = []
    if s.clarity >= 0.7:
        if resume is not None and resume.project_evidence:
            mock_signals.append(
                "Clear communication style: "
                f"{pluralize(len(resume.project_evidence), 'well-described project')} in resume"
            )
        else:
            mock_signals.append("Clear communication style detected")
    if s.clarity < 0.4:
        mock_signals.append("Communication clarity needs work")
    if s.round_readiness >= 0.7:
        mock_signals.append("Good round-specific preparation signals")
    if s.round_readiness < 0.4:
        mock_signals.append("Interview readiness signals are weak")
    if s.company_proxy >= 0.6:
        if jd is not None and matched_nice:
            mock_signals.append(
                f"Culture fit alignment: {len(matched_nice)} of {len(jd.nice_to_have)} nice-to-have skills present: "
                + ", ".join(matched_nice)
            )
        else:
            mock_signals.append("Positive culture fit indicators")

    overall = round_half_up((coding * 0.5 + mock * 0.5) * 100)

    return PracticeSyncIntelligence(
        coding_exposure=ReadinessSignal(score=coding, level=_level(coding), signals=coding_signals),
        mock_readiness=ReadinessSignal(score=mock, level=_level(mock), signals=mock_signals),
        overall_practice_readiness=overall,
        recommendation=_sync_recommendation(coding, mock, overall),
        version=PRACTICE_VERSION,
    )


# --- Practice Rx ---

# First match wins
PRACTICE_TYPE_PATTERNS: list[tuple[PracticeType, re.Pattern]] = [
    ("coding", re.compile(r"coding|algorithm|data structure|leetcode")),
    ("mock_interview", re.compile(r"behavioral|communication|storytelling|\bstar\b")),
    ("project", re.compile(r"system design|architecture|scalab")),
    ("drill", re.compile(r"practice|preparation|mock")),
]

PRESCRIPTION_PREFIXES: dict[str, str] = {
    "coding": "Coding Drill:",
    "mock_interview": "Mock Interview:",
    "review": "Concept Review:",
    "drill": "Practice Drill:",
    "project": "Design Exercise:",
}

# severity -> (sessions, minutes per session, difficulty, priority)
SEVERITY_DOSAGE = {
    "critical": (8, 45, "advanced", "critical"),
    "high": (5, 40, "intermediate", "high"),
}
DEFAULT_DOSAGE = (3, 30, "beginner", "medium")


def infer_practice_type(risk: RiskItem) -> PracticeType:
    text = f"{risk.title} {risk.rationale}".lower()
    for practice_type, pattern in PRACTICE_TYPE_PATTERNS:
        if pattern.search(text):
            return practice_type
    return "review"


def _prescription_title(practice_type: PracticeType, risk_title: str) -> str:
    if len(risk_title) > MAX_PRESCRIPTION_TITLE:
        risk_title = risk_title[: MAX_PRESCRIPTION_TITLE - 3] + "..."
    return f"{PRESCRIPTION_PREFIXES[practice_type]} {risk_title}"


def compute_practice_rx(analysis: LLMAnalysis) -> PrecisionPracticeRx:
    """One prescription per ranked risk, top six only."""
    prescriptions = []
    for index, risk in enumerate(analysis.ranked_risks[:MAX_PRESCRIPTIONS], start=1):
        practice_type = infer_practice_type(risk)
        sessions, minutes, difficulty, priority = SEVERITY_DOSAGE.get(risk.severity, DEFAULT_DOSAGE)
        prescriptions.append(PracticePrescription(
            id=f"rx-{index}",
            title=_prescription_title(practice_type, risk.title),
            target_gap=risk.title,
            mapped_risk_id=risk.id,
            practice_type=practice_type,
            estimated_sessions=sessions,
            estimated_minutes_per_session=minutes,
            difficulty=difficulty,
            priority=priority,
            rationale=risk.rationale,
        ))

    total_minutes = sum(p.estimated_sessions * p.estimated_minutes_per_session for p in prescriptions)
    total_hours = round_to(total_minutes / 60, 1)

    critical = sum(1 for p in prescriptions if p.priority == "critical")
    high = sum(1 for p in prescriptions if p.priority == "high")
    parts = []
    if critical:
        parts.append(f"{critical} critical-priority prescription(s)")
    if high:
        parts.append(f"{high} high-priority prescription(s)")
    if parts:
        summary = f"Your plan includes {' and '.join(parts)}, totaling ~{total_hours:g} hours of targeted practice."
    else:
        summary = f"{len(prescriptions)} prescriptions totaling ~{total_hours:g} hours of balanced practice."

    return PrecisionPracticeRx(
        prescriptions=prescriptions,
        total_estimated_hours=total_hours,
        focus_summary=summary,
        version=PRACTICE_VERSION,
    )


# --- Pressure handling ---

PRESSURE_LABELS = {
    "time_constraint_resilience": "Time Constraint Resilience",
    "ambiguity_tolerance": "Ambiguity Tolerance",
    "technical_confidence": "Technical Confidence",
    "communication_under_stress": "Communication Under Stress",
}

PRESSURE_COACHING = {
    "time_constraint_resilience": (
        "Practice timed coding challenges and mock interviews with strict time limits "
        "to build speed under pressure."
    ),
    "ambiguity_tolerance": (
        "Work on open-ended problems without clear constraints. "
        "Practice asking clarifying questions before diving in."
    ),
    "technical_confidence": (
        "Deepen your fundamentals in core areas. Confidence comes from mastery: "
        "drill until concepts feel automatic."
    ),
    "communication_under_stress": (
        "Record yourself explaining solutions under time pressure. "
        "Practice structured responses (situation, approach, result)."
    ),
}

PRESSURE_WEIGHTS = {
    "time_constraint_resilience": 0.3,
    "ambiguity_tolerance": 0.2,
    "technical_confidence": 0.3,
    "communication_under_stress": 0.2,
}


def _pressure_band(score: int) -> PressureBand:
    if score >= 80:
        return "elite"
    if score >= 60:
        return "high"
    if score >= 40:
        return "moderate"
    return "low"


def compute_pressure_index(analysis: LLMAnalysis) -> PressureHandlingIndex:
    s = analysis.category_scores
    critical = sum(1 for r in analysis.ranked_risks if r.severity == "critical")
    high = sum(1 for r in analysis.ranked_risks if r.severity == "high")
    penalty = critical * 0.03 + high * 0.015

    raw = {
        "time_constraint_resilience": s.round_readiness * 0.6 + s.hard_match * 0.4,
        "ambiguity_tolerance": s.company_proxy * 0.4 + s.clarity * 0.3 + s.evidence_depth * 0.3,
        "technical_confidence": s.hard_match * 0.7 + s.evidence_depth * 0.3,
        "communication_under_stress": s.clarity * 0.6 + s.round_readiness * 0.2 + s.company_proxy * 0.2,
    }
    dimensions = {key: max(0.0, round_to(value - penalty)) for key, value in raw.items()}
    score = round_half_up(sum(dimensions[key] * w for key, w in PRESSURE_WEIGHTS.items()) * 100)

    # min/max return the first of equal values, so ties keep declaration order
    weakest = min(dimensions, key=dimensions.get)
    strongest = max(dimensions, key=dimensions.get)

    return PressureHandlingIndex(
        score=score,
        band=_pressure_band(score),
        dimensions=PressureDimensions(**dimensions),
        weakest_dimension=PRESSURE_LABELS[weakest],
        strongest_dimension=PRESSURE_LABELS[strongest],
        coaching_note=PRESSURE_COACHING[weakest],
        version=PRACTICE_VERSION,
    )


# --- Consistency & momentum ---

STUDY_PLAN_BONUS_FROM = 5
STUDY_PLAN_BONUS_STEP = 0.05
STUDY_PLAN_BONUS_CAP = 0.15
CRITICAL_GAPS_INSIGHT = 3

# (min score, band, recommendation), highest first
MOMENTUM_BANDS: list[tuple[int, MomentumBand, str]] = [
    (75, "strong_momentum",
     "Strong momentum. Maintain your current preparation cadence and focus on "
     "peak performance for interview day."),
    (55, "steady",
     "Steady progress. Increase consistency by setting daily practice targets and tracking completion."),
    (35, "inconsistent",
     "Preparation is inconsistent. Create a structured daily schedule and commit to at least "
     "one focused practice session per day."),
    (0, "stalled",
     "Preparation momentum is stalled. Start with small, achievable daily goals (30 min) and "
     "build gradually. Focus on one area at a time."),
]


def _momentum_insights(signals: MomentumSignals, resume: ExtractedResume | None) -> list[str]:
    insights = []
    if signals.skill_breadth >= 0.7:
        if resume is not None:
            companies = len({e.company for e in resume.experiences})
            insights.append(
                f"Broad skill coverage ({len(resume.skills)} skills across {pluralize(companies, 'role')}) "
                "signals well-rounded preparation"
            )
        else:
            insights.append("Broad skill coverage signals well-rounded preparation")
    if signals.skill_breadth < 0.4:
        insights.append("Narrow skill coverage: consider expanding practice areas")
    if signals.evidence_recency >= 0.7:
        if resume is not None and resume.recency_signals:
            insights.append("Recent experience signals: " + ", ".join(resume.recency_signals[:3]))
        else:
            insights.append("Strong evidence of recent, relevant experience")
    if signals.evidence_recency < 0.4:
        insights.append("Evidence may appear dated: refresh with recent examples")
    if signals.depth_vs_breadth >= 0.7:
        if resume is not None and resume.metrics:
            insights.append(
                f"Good depth with {pluralize(len(resume.metrics), 'quantified achievement')} backing technical claims"
            )
        else:
            insights.append("Good balance of depth and breadth in technical areas")
    if signals.depth_vs_breadth < 0.4:
        insights.append("Consider going deeper in your strongest technical area")
    if signals.progression_clarity >= 0.7:
        if resume is not None and len(resume.experiences) > 1:
            insights.append(f"Career progression across {len(resume.experiences)} roles tells a clear story")
        else:
            insights.append("Career progression tells a clear story")
    if signals.progression_clarity < 0.4:
        insights.append("Career narrative could be clearer: practice your story")
    return insights


def compute_consistency_momentum(
    analysis: LLMAnalysis,
    resume: ExtractedResume | None = None,
) -> ConsistencyMomentumScore:
    """Average of four preparation signals; five or more study tasks lift each by up to 0.15."""
    s = analysis.category_scores
    raw = {
        "skill_breadth": s.hard_match * 0.4 + s.company_proxy * 0.3 + s.clarity * 0.3,
        "evidence_recency": s.evidence_depth * 0.6 + s.round_readiness * 0.4,
        "depth_vs_breadth": s.hard_match * 0.5 + s.evidence_depth * 0.5,
        "progression_clarity": s.clarity * 0.4 + s.round_readiness * 0.3 + s.evidence_depth * 0.3,
    }

    task_count = len(analysis.study_plan)
    if task_count >= STUDY_PLAN_BONUS_FROM:
        bonus = min((task_count - STUDY_PLAN_BONUS_FROM + 1) * STUDY_PLAN_BONUS_STEP, STUDY_PLAN_BONUS_CAP)
        raw = {key: min(1.0, value + bonus) for key, value in raw.items()}

    signals = MomentumSignals(**{key: round_to(value) for key, value in raw.items()})
    values = list(signals.model_dump().values())
    score = round_half_up(sum(values) / len(values) * 100)
    band, recommendation = next((b, rec) for floor, b, rec in MOMENTUM_BANDS if score >= floor)

    insights = _momentum_insights(signals, resume)
    if sum(1 for r in analysis.ranked_risks if r.severity == "critical") >= CRITICAL_GAPS_INSIGHT:
        insights.append("Multiple critical gaps suggest inconsistent preparation across areas")

    return ConsistencyMomentumScore(
        score=score,
        band=band,
        signals=signals,
        insights=insights,
        recommendation=recommendation,
        version=PRACTICE_VERSION,
    )


def compute_practice_intelligence(
    analysis: LLMAnalysis,
    resume: ExtractedResume | None = None,
    jd: ExtractedJD | None = None,
) -> PracticeIntelligence:
    return PracticeIntelligence(
        practice_sync=compute_practice_sync(analysis, resume, jd),
        practice_rx=compute_practice_rx(analysis),
        pressure_index=compute_pressure_index(analysis),
        consistency_momentum=compute_consistency_momentum(analysis, resume),
        version=PRACTICE_VERSION,
    )
