"""Pydantic contracts shared by the pipeline stages and the scoring suite."""

from models.schemas.resume_extracted import Experience, ExtractedResume
from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import (
    CategoryScores,
    InterviewQuestion,
    LLMAnalysis,
    PersonalizedCoaching,
    PriorityAction,
    RiskItem,
    StudyTask,
)
from models.schemas.retrieval import QuestionArchetype, RetrievalResult, RubricChunk
from models.schemas.score_breakdown import ExecutiveScores, ScoreBreakdown
from models.schemas.evidence import EvidenceContext
from models.schemas.archetype import ArchetypeProfile
from models.schemas.forecast import InterviewRoundForecasts
from models.schemas.cognitive import CognitiveRiskMap
from models.schemas.company_difficulty import CompanyDifficultyContext
from models.schemas.prior_employment import PriorEmploymentSignal
from models.schemas.hire_zone import HireZoneAnalysis
from models.schemas.trajectory import TrajectoryProjection
from models.schemas.study_plan import PersonalizedStudyPlan, PrepPreferences
from models.schemas.practice import PracticeIntelligence
from models.schemas.recruiter import RecruiterSignals, RecruiterSimulation

__all__ = [
    "Experience",
    "ExtractedResume",
    "ExtractedJD",
    "CategoryScores",
    "InterviewQuestion",
    "LLMAnalysis",
    "PersonalizedCoaching",
    "PriorityAction",
    "RiskItem",
    "StudyTask",
    "QuestionArchetype",
    "RetrievalResult",
    "RubricChunk",
    "ExecutiveScores",
    "ScoreBreakdown",
    "EvidenceContext",
    "ArchetypeProfile",
    "InterviewRoundForecasts",
    "CognitiveRiskMap",
    "CompanyDifficultyContext",
    "PriorEmploymentSignal",
    "HireZoneAnalysis",
    "TrajectoryProjection",
    "PersonalizedStudyPlan",
    "PrepPreferences",
    "PracticeIntelligence",
    "RecruiterSignals",
    "RecruiterSimulation",
]
