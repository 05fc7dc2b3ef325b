"""Score engine output."""

from typing import Literal

from pydantic import BaseModel

RiskBand = Literal["Low", "Medium", "High"]


class ScoreWeights(BaseModel):
    hard_requirement_match: float
    evidence_depth: float
    round_readiness: float
    resume_clarity: float
    company_proxy: float


class ScoreBreakdown(BaseModel):
    """Category scores on a 0-100 scale plus the weights that combine them."""
    hard_requirement_match: float
    evidence_depth: float
    round_readiness: float
    resume_clarity: float
    company_proxy: float
    weights: ScoreWeights
    version: str


class ExecutiveScores(BaseModel):
    """Headline numbers after company-difficulty and prior-employment adjustments."""
    readiness_score: int
    conversion_likelihood: int
    technical_fit: int
    version: str
