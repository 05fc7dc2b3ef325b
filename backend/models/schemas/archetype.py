"""Candidate archetype classification output."""

from typing import Literal

from pydantic import BaseModel, Field

ArchetypeTag = Literal[
    "technical_potential_low_polish",
    "strong_theoretical_weak_execution",
    "resume_strong_system_weak",
    "balanced_but_unproven",
    "high_ceiling_low_volume_practice",
]


class ArchetypeProfile(BaseModel):
    archetype: ArchetypeTag
    confidence: float = Field(ge=0.0, le=1.0)
    label: str
    description: str
    coaching_tips: list[str] = []
    version: str
