from typing import Literal

from pydantic import BaseModel, Field

from models.schemas.study_plan import ExperienceLevel, PrepPreferences

RoundType = Literal["technical", "behavioral", "case", "finance", "research"]


class AnalysisRequest(BaseModel):
    resume_text: str = Field(..., min_length=1, max_length=50000, description="Plain text resume content")
    job_description: str = Field(..., min_length=1, max_length=10000, description="Job description text")
    round_type: RoundType = "technical"
    company_name: str | None = Field(None, description="Overrides the company named in the JD")
    experience_level: ExperienceLevel | None = None
    prep_preferences: PrepPreferences | None = None
