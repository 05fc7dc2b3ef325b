from datetime import datetime

from pydantic import BaseModel, Field

from models.schemas.archetype import ArchetypeProfile
from models.schemas.cognitive import CognitiveRiskMap
from models.schemas.company_difficulty import CompanyDifficultyContext
from models.schemas.evidence import EvidenceContext
from models.schemas.forecast import InterviewRoundForecasts
from models.schemas.hire_zone import HireZoneAnalysis
from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import InterviewQuestion, LLMAnalysis, RiskItem
from models.schemas.practice import PracticeIntelligence
from models.schemas.prior_employment import PriorEmploymentSignal
from models.schemas.recruiter import RecruiterSimulation
from models.schemas.resume_extracted import ExtractedResume
from models.schemas.score_breakdown import ExecutiveScores, RiskBand, ScoreBreakdown
from models.schemas.study_plan import PersonalizedStudyPlan
from models.schemas.trajectory import TrajectoryProjection

REPORT_VERSION = "v0.2"


class DiagnosticReport(BaseModel):
    """Everything one pipeline run produces, ready for the report layer."""
    round_type: str
    readiness_score: int
    risk_band: RiskBand = Field(description="High / Medium / Low band of readiness_score, see score_breakdown.version")
    score_breakdown: ScoreBreakdown
    ranked_risks: list[RiskItem] = []
    interview_questions: list[InterviewQuestion] = []
    analysis: LLMAnalysis
    extracted_resume: ExtractedResume
    extracted_jd: ExtractedJD
    retrieved_context_ids: list[str] = []
    evidence_context: EvidenceContext
    archetype_profile: ArchetypeProfile
    round_forecasts: InterviewRoundForecasts
    cognitive_risk_map: CognitiveRiskMap
    company_difficulty: CompanyDifficultyContext
    prior_employment_signal: PriorEmploymentSignal
    hire_zone_analysis: HireZoneAnalysis
    trajectory_projection: TrajectoryProjection
    executive_scores: ExecutiveScores
    recruiter_simulation: RecruiterSimulation
    practice_intelligence: PracticeIntelligence
    personalized_study_plan: PersonalizedStudyPlan | None = None
    warnings: list[str] = []
    generated_at: datetime
    version: str = REPORT_VERSION


class DeltaComparison(BaseModel):
    previous_score: int
    current_score: int
    score_delta: int
    resolved_risks: list[RiskItem] = []
    remaining_risks: list[RiskItem] = []
    new_risks: list[RiskItem] = []
