"""Company difficulty resolution output."""

from typing import Literal

from pydantic import BaseModel

CompanyTier = Literal["FAANG_PLUS", "BIG_TECH", "TOP_FINANCE", "UNICORN", "GROWTH", "STANDARD"]
CompetitionLevel = Literal["extreme", "very_high", "high", "moderate"]


class CompanyDifficultyContext(BaseModel):
    """Resolved difficulty for the target company.

    ``difficulty_score`` is on a 100-150 scale (100 = baseline) and
    ``adjustment_factor`` is the same value as a 1.0-1.5 multiplier.
    """
    company_name: str
    tier: CompanyTier
    difficulty_score: int
    is_intern: bool = False
    acceptance_rate_estimate: str
    competition_level: CompetitionLevel
    interview_bar_description: str
    adjustment_factor: float
    differentiation_strategies: list[str] = []
    version: str
