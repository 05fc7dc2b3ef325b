"""Cognitive skill map (spider chart) output."""

from pydantic import BaseModel


class CognitiveDimensions(BaseModel):
    analytical_reasoning: float
    communication_clarity: float
    technical_depth: float
    adaptability: float
    problem_structuring: float


class CognitiveRiskMap(BaseModel):
    dimensions: CognitiveDimensions
    lowest_dimension: str
    highest_dimension: str
    version: str
