"""Fact extraction output: structured facts pulled from a resume."""

from pydantic import BaseModel


class Experience(BaseModel):
    """A single work experience entry."""
    company: str = ""
    role: str = ""
    dates: str = ""  # free text, e.g. "Jan 2019 - Present"
    achievements: list[str] = []


class ExtractedResume(BaseModel):
    """Structured facts from the resume extraction call."""
    skills: list[str] = []
    experiences: list[Experience] = []
    metrics: list[str] = []  # quantified outcomes, e.g. "cut p99 latency 40%"
    recency_signals: list[str] = []
    project_evidence: list[str] = []
