"""Per-round pass forecasts."""

from typing import Literal

from pydantic import BaseModel


class RoundForecastItem(BaseModel):
    round_type: Literal["technical", "behavioral", "case"]
    pass_probability: float
    primary_strength: str
    primary_risk: str


class InterviewRoundForecasts(BaseModel):
    forecasts: list[RoundForecastItem] = []
    recommended_focus: str
    version: str
