"""Personalized, day-by-day study plan."""

from typing import Literal

from pydantic import BaseModel, Field

from models.schemas.llm_analysis import Severity, TaskCategory

InterviewTimeline = Literal["1day", "3days", "1week", "2weeks", "4weeks_plus"]
ExperienceLevel = Literal["intern", "entry", "mid"]
FocusArea = Literal[
    "technical_depth",
    "behavioral_stories",
    "system_design",
    "communication",
    "domain_knowledge",
]


class PrepPreferences(BaseModel):
    timeline: InterviewTimeline
    daily_hours: float = Field(gt=0, le=16)
    experience_level: ExperienceLevel = "entry"
    focus_areas: list[FocusArea] = []
    additional_context: str | None = None


class DetailedTask(BaseModel):
    id: str
    task: str
    description: str = ""
    time_estimate_minutes: int
    priority: Severity
    mapped_risk_id: str
    category: TaskCategory


class DailyPlan(BaseModel):
    day_number: int
    label: str
    theme: str
    total_minutes: int = 0
    tasks: list[DetailedTask] = []


class PersonalizedStudyPlan(BaseModel):
    preferences: PrepPreferences
    total_days: int
    total_hours: float
    daily_plans: list[DailyPlan] = []
    version: str
