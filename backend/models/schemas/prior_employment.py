"""Prior employment at the target company."""

from pydantic import BaseModel


class PriorEmploymentStint(BaseModel):
    role: str
    duration_years: float
    years_ago: int  # 0 = currently employed
    is_current: bool = False


class EmploymentBoosts(BaseModel):
    readiness_boost: int = 0
    conversion_boost: int = 0
    technical_fit_boost: int = 0


class PriorEmploymentSignal(BaseModel):
    """Absence of a match is a valid value: ``detected`` False and zero boosts."""
    detected: bool = False
    company_name: str = ""
    stints: list[PriorEmploymentStint] = []
    total_years_at_company: float = 0.0
    most_recent_departure_years_ago: int = 0
    is_internal_transfer: bool = False
    boosts: EmploymentBoosts = EmploymentBoosts()
    version: str
