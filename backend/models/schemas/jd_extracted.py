"""Fact extraction output: structured facts pulled from a job description."""

from pydantic import BaseModel


class ExtractedJD(BaseModel):
    """Structured facts from the JD extraction call.

    ``company_context_keywords`` holds soft signals about the company
    (culture, values, products) that are not hard requirements.
    """
    must_have: list[str] = []
    nice_to_have: list[str] = []
    keywords: list[str] = []
    seniority_signals: list[str] = []
    company_name: str | None = None
    job_title: str | None = None
    company_context_keywords: list[str] = []
