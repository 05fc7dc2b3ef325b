"""Hire zone analysis output."""

from typing import Literal

from pydantic import BaseModel

HireZoneStatus = Literal["below", "in_zone", "above"]


class HireZoneCategoryGap(BaseModel):
    category: str
    label: str
    current_score: int
    target_score: int
    gap_points: int
    priority: Literal["critical", "high", "medium"]


class HireZoneAction(BaseModel):
    action: str
    category: str
    estimated_impact: str


class HireZoneAnalysis(BaseModel):
    hire_zone_min: int
    hire_zone_max: int
    current_score: int
    gap: int
    percentile: int
    status: HireZoneStatus
    category_gaps: list[HireZoneCategoryGap] = []
    top_actions: list[HireZoneAction] = []
    round_type: str
    industry_average: int
    version: str
