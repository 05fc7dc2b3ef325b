"""Prior-employment detector: boost candidates who already worked at the target company.

Boosts scale with how recently the candidate left and how long they stayed.
No company name or no matching experience is a valid result
(``detected=False``, all boosts 0), never an error.
"""

import re
from dataclasses import dataclass
from datetime import date

from models.schemas.jd_extracted import ExtractedJD
from models.schemas.prior_employment import (
    EmploymentBoosts,
    PriorEmploymentSignal,
    PriorEmploymentStint,
)
from models.schemas.resume_extracted import ExtractedResume
from services.scoring.company_difficulty import normalize_company_name
from services.scoring.rules import round_half_up, round_to

PRIOR_EMPLOYMENT_VERSION = "v0.1"

BASE_BOOSTS = {
    "readiness": 8,
    "conversion": 12,
    "technical_fit": 5,
}

# Shorter names only match exactly ("x" must not match "exxon")
MIN_SUBSTRING_MATCH_CHARS = 3

# Used when a matching stint has unparseable dates
UNPARSED_DURATION_YEARS = 1.0
UNPARSED_YEARS_AGO = 3

_CURRENT = re.compile(r"\b(present|current|now|ongoing)\b", re.I)
_YEAR = re.compile(r"(\d{4})")


@dataclass(frozen=True)
class DateRange:
    start_year: int
    end_year: int
    is_current: bool


def parse_date_range(dates: str, reference_year: int | None = None) -> DateRange | None:
    """Parse free text like "Jan 2020 - Dec 2022", "2020-2022" or "March 2021 - Present".

    Returns None when no four-digit year is present.
    """
    if not dates:
        return None
    if reference_year is None:
        reference_year = date.today().year

    text = dates.strip().lower()
    is_current = bool(_CURRENT.search(text))
    years = [int(y) for y in _YEAR.findall(text)]
    if not years:
        return None

    start_year = years[0]
    if is_current:
        end_year = reference_year
    else:
        end_year = years[1] if len(years) > 1 else start_year
    return DateRange(start_year, end_year, is_current)


def recency_multiplier(years_ago: int, is_current: bool) -> float:
    if is_current:
        return 1.15
    if years_ago < 1:
        return 1.0
    if years_ago <= 3:
        return 0.75
    if years_ago <= 5:
        return 0.5
    return 0.3


def duration_multiplier(total_years: float) -> float:
    if total_years >= 2:
        return 1.0
    if total_years >= 1:
        return 0.8
    if total_years >= 0.5:
        return 0.6
    return 0.35


def is_company_match(resume_company: str, target_normalized: str) -> bool:
    """Normalized exact match, or substring containment for names long enough to be specific."""
    candidate = normalize_company_name(resume_company)
    if not candidate or not target_normalized:
        return False
    if candidate == target_normalized:
        return True
    if min(len(candidate), len(target_normalized)) < MIN_SUBSTRING_MATCH_CHARS:
        return False
    # e.g. "Ericsson Canada" vs "ericsson"
    return target_normalized in candidate or candidate in target_normalized


def detect_prior_employment(
    resume: ExtractedResume,
    jd: ExtractedJD,
    company_name: str | None = None,
    reference_year: int | None = None,
) -> PriorEmploymentSignal:
    """Detect stints at the target company and derive the three score boosts.

    Args:
        resume, jd: extracted facts.
        company_name: explicit target company; falls back to the JD's.
        reference_year: "now" for recency arithmetic. Defaults to the
            current calendar year; pass it explicitly for reproducible runs.
    """
    if reference_year is None:
        reference_year = date.today().year

    target = company_name or jd.company_name or ""
    no_match = PriorEmploymentSignal(
        detected=False,
        company_name=target,
        version=PRIOR_EMPLOYMENT_VERSION,
    )

    target_normalized = normalize_company_name(target) if target else ""
    if not target_normalized:
        return no_match

    stints: list[PriorEmploymentStint] = []
    for exp in resume.experiences:
        if not is_company_match(exp.company, target_normalized):
            continue

        parsed = parse_date_range(exp.dates, reference_year)
        if parsed is None:
            stints.append(
                PriorEmploymentStint(
                    role=exp.role,
                    duration_years=UNPARSED_DURATION_YEARS,
                    years_ago=UNPARSED_YEARS_AGO,
                    is_current=False,
                )
            )
            continue

        # Same start and end year counts as six months
        duration = max(0, parsed.end_year - parsed.start_year) or 0.5
        years_ago = 0 if parsed.is_current else max(0, reference_year - parsed.end_year)
        stints.append(
            PriorEmploymentStint(
                role=exp.role,
                duration_years=round_to(duration, 1),
                years_ago=years_ago,
                is_current=parsed.is_current,
            )
        )

    if not stints:
        return no_match

    total_years = round_to(sum(s.duration_years for s in stints), 1)
    # a current stint beats one that ended this year
    most_recent = min(stints, key=lambda s: (s.years_ago, not s.is_current))

    multiplier = (
        recency_multiplier(most_recent.years_ago, most_recent.is_current)
        * duration_multiplier(total_years)
    )
    boosts = EmploymentBoosts(
        readiness_boost=round_half_up(BASE_BOOSTS["readiness"] * multiplier),
        conversion_boost=round_half_up(BASE_BOOSTS["conversion"] * multiplier),
        technical_fit_boost=round_half_up(BASE_BOOSTS["technical_fit"] * multiplier),
    )

    return PriorEmploymentSignal(
        detected=True,
        company_name=target,
        stints=stints,
        total_years_at_company=total_years,
        most_recent_departure_years_ago=most_recent.years_ago,
        is_internal_transfer=most_recent.is_current,
        boosts=boosts,
        version=PRIOR_EMPLOYMENT_VERSION,
    )
