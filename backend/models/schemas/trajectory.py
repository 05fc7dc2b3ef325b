"""Multi-day improvement projection."""

from typing import Literal

from pydantic import BaseModel


class Projection(BaseModel):
    score: int
    assumptions: list[str] = []


class TrajectoryProjection(BaseModel):
    current_score: int
    day3_projection: Projection
    day7_projection: Projection
    day14_projection: Projection
    improvement_potential: Literal["low", "medium", "high"]
    # actual horizon days; 3/7/14 unless scaled to a prep timeline
    milestone1_day: int = 3
    milestone2_day: int = 7
    milestone3_day: int = 14
    version: str
