"""Post-analysis quality validation.

Catches content the model should not have produced:
    - parroted advice ("learn X", "brush up on Y") that just restates a JD term
    - risks grounded only in soft company-context signals (downgraded to low)
    - risks that belong to a different interview round than the one requested

Every filter has a minimum-count floor. If filtering would break it, the
filter is reverted for that field and a warning is recorded instead.
The input analysis is never modified; a new one is returned.
"""

import logging
import re

from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import LLMAnalysis

logger = logging.getLogger(__name__)

# Tunable: generic study-verb openers. Only counts as parroted when the
# text also mentions a JD term.
PARROT_PATTERN = re.compile(
    r"^(learn|study|get proficient in|practice|explore|develop|gain experience"
    r"|complete a .* course|read about|familiarize|take a .* course|enroll in"
    r"|brush up on|improve your|build expertise in|acquire knowledge)",
    re.IGNORECASE,
)

MIN_STUDY_TASKS = 3
MIN_ARCHETYPE_TIPS = 3
MIN_PRIORITY_ACTIONS = 2
MIN_RANKED_RISKS = 3
MIN_CONTEXT_TERM_CHARS = 3

ROUND_MARKERS: dict[str, re.Pattern] = {
    "technical": re.compile(
        r"\b(coding|algorithms?|data structures?|leetcode|system design|debugging|complexity)\b", re.I
    ),
    "behavioral": re.compile(
        r"\b(star|storytelling|stories|conflict|behavioral|teamwork|leadership principles)\b", re.I
    ),
    "case": re.compile(
        r"\b(case interview|market sizing|profitability|case framework|consulting)\b", re.I
    ),
    "finance": re.compile(
        r"\b(dcf|valuation|accounting|lbo|financial model(ing)?|three[- ]statement)\b", re.I
    ),
    "research": re.compile(
        r"\b(papers?|publications?|experiment design|research proposal|ablation)\b", re.I
    ),
}

# Rounds whose risks stay relevant to each other
RELATED_ROUNDS = {
    "technical": {"technical", "research"},
    "research": {"research", "technical"},
    "case": {"case", "finance"},
    "finance": {"finance", "case"},
    "behavioral": {"behavioral"},
}


class _TermMatcher:
    def __init__(self, jd: ExtractedJD):
        self.jd_terms = [
            t.lower().strip()
            for t in jd.must_have + jd.nice_to_have + jd.keywords
            if t.strip()
        ]
        self.context_terms = [
            t.lower().strip()
            for t in jd.company_context_keywords
            if len(t.strip()) >= MIN_CONTEXT_TERM_CHARS
        ]

    def references_jd(self, text: str) -> bool:
        lower = text.lower()
        return any(term in lower for term in self.jd_terms)

    def references_company_context(self, text: str) -> bool:
        lower = text.lower()
        return any(term in lower for term in self.context_terms)

    def is_parroted(self, text: str) -> bool:
        return bool(PARROT_PATTERN.match(text.strip())) and self.references_jd(text)


def _filter_with_floor(items, reject, describe, floor, field, warnings):
    """Drop items where ``reject(item)`` holds unless that leaves fewer than ``floor``."""
    kept = [item for item in items if not reject(item)]
    removed = [item for item in items if reject(item)]
    if not removed:
        return list(items)
    if len(kept) < floor:
        warnings.append(
            f"{field} filter would leave {len(kept)} (minimum {floor}), keeping originals"
        )
        return list(items)
    for item in removed:
        warnings.append(f"Filtered {describe(item)}")
    return kept


def _is_round_irrelevant(text: str, round_type: str, matcher: _TermMatcher) -> bool:
    related = RELATED_ROUNDS.get(round_type)
    if related is None or matcher.references_jd(text):
        return False
    if any(ROUND_MARKERS[r].search(text) for r in related):
        return False
    return any(
        pattern.search(text)
        for other, pattern in ROUND_MARKERS.items()
        if other not in related
    )


def validate_analysis_quality(
    analysis: LLMAnalysis,
    jd: ExtractedJD,
    round_type: str | None = None,
) -> tuple[LLMAnalysis, list[str]]:
    """Return a cleaned copy of ``analysis`` plus the warnings raised while cleaning."""
    warnings: list[str] = []
    matcher = _TermMatcher(jd)

    study_plan = _filter_with_floor(
        analysis.study_plan,
        lambda t: matcher.is_parroted(t.task),
        lambda t: f'parroted study task: "{t.task}"',
        MIN_STUDY_TASKS,
        "Study plan",
        warnings,
    )

    coaching = analysis.personalized_coaching
    if coaching is not None:
        tips = _filter_with_floor(
            coaching.archetype_tips,
            matcher.is_parroted,
            lambda tip: f'parroted archetype tip: "{tip}"',
            MIN_ARCHETYPE_TIPS,
            "Archetype tips",
            warnings,
        )
        actions = _filter_with_floor(
            coaching.priority_actions,
            lambda pa: matcher.is_parroted(pa.action),
            lambda pa: f'parroted priority action: "{pa.action}"',
            MIN_PRIORITY_ACTIONS,
            "Priority actions",
            warnings,
        )
        coaching = coaching.model_copy(update={"archetype_tips": tips, "priority_actions": actions})

    risks = []
    for risk in analysis.ranked_risks:
        text = f"{risk.title} {risk.rationale} {risk.missing_evidence}"
        if (
            risk.severity != "low"
            and matcher.references_company_context(text)
            and not matcher.references_jd(text)
        ):
            warnings.append(
                f'Downgraded company-context risk "{risk.title}" from {risk.severity} to low'
            )
            risk = risk.model_copy(update={"severity": "low"})
        risks.append(risk)

    if round_type is not None:
        risks = _filter_with_floor(
            risks,
            lambda r: _is_round_irrelevant(f"{r.title} {r.rationale}", round_type, matcher),
            lambda r: f'risk irrelevant to {round_type} round: "{r.title}"',
            MIN_RANKED_RISKS,
            "Ranked risks",
            warnings,
        )

    if warnings:
        logger.warning("Quality validation caught %d issues: %s", len(warnings), warnings)

    cleaned = analysis.model_copy(
        update={
            "study_plan": study_plan,
            "personalized_coaching": coaching,
            "ranked_risks": risks,
        }
    )
    return cleaned, warnings
