"""Company difficulty resolver.

Resolution is an explicit fallback chain:

    direct table lookup (normalized name + aliases)
      -> tier inference from JD signals
      -> STANDARD default (factor exactly 1.0)

The resulting adjustment factor (1.0-1.5) dampens forecasts, raises the
hire-zone bar and penalizes the executive scores downstream.
"""

import logging
import re

from models.schemas.company_difficulty import CompanyDifficultyContext
from models.schemas.jd_extracted import ExtractedJD
from models.schemas.resume_extracted import ExtractedResume
from services.scoring.company_database import (
    ALIAS_MAP,
    COMPANY_DATABASE,
    DIFFERENTIATION_STRATEGIES,
    TIER_META,
)
from services.scoring.rules import first_resolved, round_half_up, round_to

logger = logging.getLogger(__name__)

COMPANY_DIFFICULTY_VERSION = "v0.1"

MAX_ADJUSTMENT_FACTOR = 1.5
INFERRED_INTERN_MULTIPLIER = 1.1
MAX_STRATEGIES = 6
TIER_STRATEGY_COUNT = 4
LOW_METRIC_COUNT = 3

_TRAILING_PUNCT = re.compile(r"[,.]+$")
_LEGAL_SUFFIX = re.compile(
    r"[\s,]+(inc|llc|corp|corporation|co|ltd|limited|plc|group|holdings"
    r"|technologies|technology|labs|laboratory|laboratories)\.?$"
)

# Ordered; the first pattern found in the JD decides the tier.
TIER_INFERENCE_PATTERNS: tuple[tuple[re.Pattern, str, float], ...] = (
    (re.compile(r"fortune\s*100\b", re.I), "BIG_TECH", 1.2),
    (re.compile(r"fortune\s*500\b", re.I), "BIG_TECH", 1.15),
    (re.compile(r"series\s*[de]\b", re.I), "UNICORN", 1.15),
    (re.compile(r"series\s*[bc]\b", re.I), "GROWTH", 1.1),
    (re.compile(r"series\s*a\b", re.I), "GROWTH", 1.05),
    (re.compile(r"\bunicorn\b", re.I), "UNICORN", 1.15),
    (re.compile(r"\bpre-ipo\b|\bipo\b|publicly\s*traded", re.I), "BIG_TECH", 1.15),
    (re.compile(r"faang|big\s*tech|top-tier\s*tech", re.I), "FAANG_PLUS", 1.3),
    (re.compile(r"hedge\s*fund|quant\s*fund", re.I), "TOP_FINANCE", 1.3),
    (re.compile(r"investment\s*bank", re.I), "TOP_FINANCE", 1.25),
    (re.compile(r"private\s*equity", re.I), "TOP_FINANCE", 1.3),
)

_ML_SIGNAL = re.compile(r"\b(machine learning|ml|ai)\b")
_DISTRIBUTED_SIGNAL = re.compile(r"distributed|microservices")

INTERN_STRATEGY = (
    "As an intern candidate, emphasize relevant coursework, personal projects, "
    "and learning velocity over years of experience"
)
ML_STRATEGY = (
    "Prepare to discuss ML model lifecycle: training, evaluation, deployment, "
    "and monitoring in production"
)
DISTRIBUTED_STRATEGY = (
    "Prepare distributed systems design examples with specific discussion of consistency, "
    "availability, and partition tolerance trade-offs"
)
METRICS_STRATEGY = (
    "Quantify your impact before the interview — add specific numbers to every project "
    "(users served, latency reduced, revenue impact)"
)


def normalize_company_name(name: str) -> str:
    """Lowercase, strip trailing punctuation and legal suffixes, resolve aliases.

    >>> normalize_company_name("Google Inc.")
    'google'
    >>> normalize_company_name("Facebook")
    'meta'
    """
    normalized = name.strip().lower()
    while True:
        stripped = _LEGAL_SUFFIX.sub("", _TRAILING_PUNCT.sub("", normalized)).strip()
        if stripped == normalized:
            break
        normalized = stripped
    return ALIAS_MAP.get(normalized, normalized)


def generate_differentiation_strategies(
    tier: str,
    experience_level: str | None,
    jd: ExtractedJD | None = None,
    resume: ExtractedResume | None = None,
) -> list[str]:
    """Top tier strategies plus candidate-specific additions, at most six."""
    strategies = list(DIFFERENTIATION_STRATEGIES[tier][:TIER_STRATEGY_COUNT])

    if experience_level == "intern":
        strategies.append(INTERN_STRATEGY)

    if jd is not None:
        jd_text = " ".join(jd.must_have + jd.nice_to_have + jd.keywords).lower()
        if _ML_SIGNAL.search(jd_text):
            strategies.append(ML_STRATEGY)
        if _DISTRIBUTED_SIGNAL.search(jd_text):
            strategies.append(DISTRIBUTED_STRATEGY)

    if resume is not None and len(resume.metrics) < LOW_METRIC_COUNT:
        strategies.append(METRICS_STRATEGY)

    return strategies[:MAX_STRATEGIES]


def _capped(factor: float) -> float:
    return min(MAX_ADJUSTMENT_FACTOR, factor)


def _jd_signal_text(jd: ExtractedJD | None, jd_text: str) -> str:
    parts = [jd_text]
    if jd is not None:
        parts += [jd.company_name or "", jd.job_title or ""]
        parts += jd.must_have + jd.nice_to_have + jd.keywords
        parts += jd.seniority_signals + jd.company_context_keywords
    return " ".join(p for p in parts if p)


def compute_company_difficulty(
    company_name: str | None,
    experience_level: str | None = None,
    jd: ExtractedJD | None = None,
    resume: ExtractedResume | None = None,
    jd_text: str = "",
) -> CompanyDifficultyContext:
    """Resolve the difficulty context for the target company.

    Missing context is never an error: an unknown company with no JD
    signals resolves to the STANDARD tier with a factor of exactly 1.0.
    """
    is_intern = experience_level == "intern"
    resolved_name = normalize_company_name(company_name) if company_name else ""
    display_name = company_name or "Unknown"

    def from_database() -> CompanyDifficultyContext | None:
        entry = COMPANY_DATABASE.get(resolved_name) if resolved_name else None
        if entry is None:
            return None
        factor = entry.difficulty_multiplier
        if is_intern:
            factor = round_to(factor * entry.intern_multiplier, 2)
        factor = _capped(factor)
        return CompanyDifficultyContext(
            company_name=company_name or resolved_name,
            tier=entry.tier,
            difficulty_score=round_half_up(factor * 100),
            is_intern=is_intern,
            acceptance_rate_estimate=entry.acceptance_rate_estimate,
            competition_level=entry.competition_level,
            interview_bar_description=entry.interview_bar_description,
            adjustment_factor=factor,
            differentiation_strategies=generate_differentiation_strategies(
                entry.tier, experience_level, jd, resume
            ),
            version=COMPANY_DIFFICULTY_VERSION,
        )

    def from_jd_signals() -> CompanyDifficultyContext | None:
        text = _jd_signal_text(jd, jd_text)
        if not text:
            return None
        for pattern, tier, multiplier in TIER_INFERENCE_PATTERNS:
            if not pattern.search(text):
                continue
            factor = round_to(multiplier * INFERRED_INTERN_MULTIPLIER, 2) if is_intern else multiplier
            factor = _capped(factor)
            meta = TIER_META[tier]
            logger.info("Inferred tier %s for %r from JD pattern %s", tier, display_name, pattern.pattern)
            return CompanyDifficultyContext(
                company_name=display_name,
                tier=tier,
                difficulty_score=round_half_up(factor * 100),
                is_intern=is_intern,
                acceptance_rate_estimate=meta.acceptance_rate,
                competition_level=meta.competition_level,
                interview_bar_description=meta.bar_description,
                adjustment_factor=factor,
                differentiation_strategies=generate_differentiation_strategies(
                    tier, experience_level, jd, resume
                ),
                version=COMPANY_DIFFICULTY_VERSION,
            )
        return None

    resolved = first_resolved([from_database, from_jd_signals])
    if resolved is not None:
        return resolved
    return standard_difficulty(display_name, is_intern)


def standard_difficulty(company_name: str = "Unknown", is_intern: bool = False) -> CompanyDifficultyContext:
    meta = TIER_META["STANDARD"]
    return CompanyDifficultyContext(
        company_name=company_name,
        tier="STANDARD",
        difficulty_score=100,
        is_intern=is_intern,
        acceptance_rate_estimate=meta.acceptance_rate,
        competition_level=meta.competition_level,
        interview_bar_description=meta.bar_description,
        adjustment_factor=1.0,
        differentiation_strategies=[],
        version=COMPANY_DIFFICULTY_VERSION,
    )
