"""Analysis call output: category scores, ranked risks and coaching."""

from typing import Literal

from pydantic import BaseModel, Field

from models.schemas.recruiter import RecruiterSignals

Severity = Literal["critical", "high", "medium", "low"]
TaskCategory = Literal["technical", "behavioral", "practice", "review"]

CATEGORY_KEYS = ("hard_match", "evidence_depth", "round_readiness", "clarity", "company_proxy")


class CategoryScores(BaseModel):
    """The five normalized sub-scores. Every downstream transform reads these."""
    model_config = {"frozen": True}

    hard_match: float = Field(ge=0.0, le=1.0)
    evidence_depth: float = Field(ge=0.0, le=1.0)
    round_readiness: float = Field(ge=0.0, le=1.0)
    clarity: float = Field(ge=0.0, le=1.0)
    company_proxy: float = Field(ge=0.0, le=1.0)

    def as_dict(self) -> dict[str, float]:
        return {key: getattr(self, key) for key in CATEGORY_KEYS}


class RiskItem(BaseModel):
    """A single ranked interview risk. Copied, never mutated, by quality validation."""
    model_config = {"frozen": True}

    id: str
    title: str
    severity: Severity
    rationale: str = ""
    missing_evidence: str = ""
    rubric_refs: tuple[str, ...] = ()
    jd_refs: tuple[str, ...] = ()


class InterviewQuestion(BaseModel):
    question: str
    mapped_risk_id: str = ""
    why: str = ""


class StudyTask(BaseModel):
    task: str
    time_estimate_minutes: int = Field(gt=0)
    mapped_risk_id: str = ""
    description: str | None = None
    priority: Severity | None = None
    category: TaskCategory | None = None


class PriorityAction(BaseModel):
    action: str
    rationale: str = ""
    resources: list[str] = []


class PersonalizedCoaching(BaseModel):
    """Candidate-specific advice; replaces canned tips when rich enough."""
    archetype_tips: list[str] = []
    round_focus: str = ""
    priority_actions: list[PriorityAction] = []


class LLMAnalysis(BaseModel):
    """Validated output of the single analysis call."""
    category_scores: CategoryScores
    ranked_risks: list[RiskItem] = []
    interview_questions: list[InterviewQuestion] = []
    study_plan: list[StudyTask] = []
    personalized_coaching: PersonalizedCoaching | None = None
    recruiter_signals: RecruiterSignals | None = None
