"""Recruiter six-second screen simulation."""

from typing import Literal

from pydantic import BaseModel, Field

FirstImpression = Literal["proceed", "maybe", "reject"]


class RecruiterInternalNotes(BaseModel):
    first_glance_reaction: str = ""
    starred_item: str = ""
    internal_concerns: list[str] = []
    phone_screen_questions: list[str] = []


class RecruiterDebriefSummary(BaseModel):
    one_liner_verdict: str = ""
    advocate_reasons: list[str] = []
    pushback_reasons: list[str] = []
    recommendation_paragraph: str = ""
    comparative_note: str = ""


class CandidatePositioning(BaseModel):
    estimated_pool_percentile: int = Field(0, ge=0, le=100)
    standout_differentiator: str = ""
    biggest_liability: str = ""
    advance_rationale: str = ""


class RecruiterSignals(BaseModel):
    """What the analysis call reports about a recruiter's first pass."""
    immediate_red_flags: list[str] = []
    hidden_strengths: list[str] = []
    estimated_screen_time_seconds: int = Field(ge=0)
    first_impression: FirstImpression
    internal_notes: RecruiterInternalNotes | None = None
    debrief_summary: RecruiterDebriefSummary | None = None
    candidate_positioning: CandidatePositioning | None = None


class RecruiterSimulation(BaseModel):
    immediate_red_flags: list[str] = []
    hidden_strengths: list[str] = []
    estimated_screen_time_seconds: int
    first_impression: FirstImpression
    recruiter_notes: str
    internal_notes: RecruiterInternalNotes | None = None
    debrief_summary: RecruiterDebriefSummary | None = None
    candidate_positioning: CandidatePositioning | None = None
    version: str
