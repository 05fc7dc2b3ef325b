"""Evidence context: cross-reference extracted facts with the analysis.

Every category gets one human-readable evidence string so the scores in
the report can point at concrete resume/JD data points.
"""

import re

from models.schemas.evidence import CategoryEvidence, EvidenceContext
from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import LLMAnalysis
from models.schemas.resume_extracted import ExtractedResume
from services.scoring.rules import pluralize

EVIDENCE_VERSION = "v0.1"

ROUND_KEYWORDS = (
    "interview",
    "round",
    "preparation",
    "mock",
    "practice",
    "whiteboard",
    "coding challenge",
)

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")


def normalize(text: str) -> str:
    """Lowercase and drop punctuation for fuzzy matching."""
    return _NON_ALNUM.sub("", text.lower()).strip()


def skill_matches(skill: str, requirement: str) -> bool:
    """Bidirectional substring containment on normalized text."""
    ns, nr = normalize(skill), normalize(requirement)
    if not ns or not nr:
        return False
    return nr in ns or ns in nr


def find_matches(skills: list[str], requirements: list[str]) -> tuple[list[str], list[str]]:
    """Split requirements into (matched, unmatched) by the given skills."""
    matched: list[str] = []
    unmatched: list[str] = []
    for req in requirements:
        if any(skill_matches(s, req) for s in skills):
            matched.append(req)
        else:
            unmatched.append(req)
    return matched, unmatched


def compute_evidence_context(
    analysis: LLMAnalysis,
    resume: ExtractedResume,
    jd: ExtractedJD,
) -> EvidenceContext:
    matched_must, unmatched_must = find_matches(resume.skills, jd.must_have)
    matched_nice, _ = find_matches(resume.skills + resume.recency_signals, jd.nice_to_have)

    strongest_metrics = resume.metrics[:3]
    total_achievements = sum(len(exp.achievements) for exp in resume.experiences)

    round_risks = [
        r for r in analysis.ranked_risks
        if any(kw in r.title.lower() or kw in r.rationale.lower() for kw in ROUND_KEYWORDS)
    ]

    evidence = CategoryEvidence(
        hard_match=_hard_match_evidence(jd, matched_must, unmatched_must),
        evidence_depth=_evidence_depth_evidence(resume, total_achievements, strongest_metrics),
        round_readiness=(
            f"{pluralize(len(round_risks), 'interview-specific risk')} identified. "
            f"Areas flagged: {'; '.join(r.title for r in round_risks)}."
            if round_risks
            else "No interview-specific risks flagged."
        ),
        clarity=_clarity_evidence(resume),
        company_proxy=_company_proxy_evidence(jd, matched_nice),
    )

    return EvidenceContext(
        category_evidence=evidence,
        matched_must_haves=matched_must,
        unmatched_must_haves=unmatched_must,
        matched_nice_to_haves=matched_nice,
        strongest_metrics=strongest_metrics,
        version=EVIDENCE_VERSION,
    )


# ---------------------------------------------------------------------------
# Evidence string builders
# ---------------------------------------------------------------------------

def _hard_match_evidence(jd: ExtractedJD, matched: list[str], unmatched: list[str]) -> str:
    if matched:
        text = (
            f"Matched {len(matched)} of {len(jd.must_have)} must-have requirements: "
            f"{', '.join(matched)}."
        )
        if unmatched:
            text += f" Missing: {', '.join(unmatched)}."
        return text
    if jd.must_have:
        return (
            f"No direct skill matches found for {len(jd.must_have)} must-have requirements: "
            f"{', '.join(jd.must_have)}."
        )
    return "No must-have requirements specified in job description."


def _evidence_depth_evidence(
    resume: ExtractedResume, total_achievements: int, metrics: list[str]
) -> str:
    text = (
        f"{pluralize(len(resume.experiences), 'role')} with "
        f"{pluralize(total_achievements, 'achievement')}."
    )
    if metrics:
        return text + f" Strongest metrics: {'; '.join(metrics)}."
    return text + " No quantified metrics found."


def _clarity_evidence(resume: ExtractedResume) -> str:
    text = (
        f"Resume includes {pluralize(len(resume.recency_signals), 'recent technology signal')} "
        f"and {pluralize(len(resume.project_evidence), 'project description')}."
    )
    if resume.recency_signals:
        text += f" Technologies: {', '.join(resume.recency_signals[:5])}."
    return text


def _company_proxy_evidence(jd: ExtractedJD, matched: list[str]) -> str:
    seniority = (
        f" Seniority signals in JD: {', '.join(jd.seniority_signals)}."
        if jd.seniority_signals
        else ""
    )
    if matched:
        return (
            f"Aligned with {len(matched)} of {len(jd.nice_to_have)} nice-to-have requirements: "
            f"{', '.join(matched)}.{seniority}"
        )
    if jd.nice_to_have:
        return f"No matches found for {len(jd.nice_to_have)} nice-to-have requirements.{seniority}"
    return "No nice-to-have requirements specified in job description."
