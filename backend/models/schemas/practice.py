"""Practice intelligence: practice sync, prescriptions, pressure and momentum."""

from typing import Literal

from pydantic import BaseModel

Level = Literal["low", "moderate", "high"]
PracticeType = Literal["coding", "mock_interview", "review", "drill", "project"]
PressureBand = Literal["low", "moderate", "high", "elite"]
MomentumBand = Literal["stalled", "inconsistent", "steady", "strong_momentum"]


class ReadinessSignal(BaseModel):
    score: float  # 0-1
    level: Level
    signals: list[str] = []


class PracticeSyncIntelligence(BaseModel):
    """Coding exposure vs mock-interview readiness."""
    coding_exposure: ReadinessSignal
    mock_readiness: ReadinessSignal
    overall_practice_readiness: int  # 0-100
    recommendation: str
    version: str


class PracticePrescription(BaseModel):
    id: str
    title: str
    target_gap: str
    mapped_risk_id: str
    practice_type: PracticeType
    estimated_sessions: int
    estimated_minutes_per_session: int
    difficulty: Literal["beginner", "intermediate", "advanced"]
    priority: Literal["critical", "high", "medium"]
    rationale: str = ""


class PrecisionPracticeRx(BaseModel):
    prescriptions: list[PracticePrescription] = []
    total_estimated_hours: float
    focus_summary: str
    version: str


class PressureDimensions(BaseModel):
    time_constraint_resilience: float
    ambiguity_tolerance: float
    technical_confidence: float
    communication_under_stress: float


class PressureHandlingIndex(BaseModel):
    score: int
    band: PressureBand
    dimensions: PressureDimensions
    weakest_dimension: str
    strongest_dimension: str
    coaching_note: str
    version: str


class MomentumSignals(BaseModel):
    skill_breadth: float
    evidence_recency: float
    depth_vs_breadth: float
    progression_clarity: float


class ConsistencyMomentumScore(BaseModel):
    score: int
    band: MomentumBand
    signals: MomentumSignals
    insights: list[str] = []
    recommendation: str
    version: str


class PracticeIntelligence(BaseModel):
    practice_sync: PracticeSyncIntelligence
    practice_rx: PrecisionPracticeRx
    pressure_index: PressureHandlingIndex
    consistency_momentum: ConsistencyMomentumScore
    version: str
