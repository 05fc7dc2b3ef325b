"""Evidence context: which resume facts back each category."""

from pydantic import BaseModel


class CategoryEvidence(BaseModel):
    hard_match: str
    evidence_depth: str
    round_readiness: str
    clarity: str
    company_proxy: str


class EvidenceContext(BaseModel):
    category_evidence: CategoryEvidence
    matched_must_haves: list[str] = []
    unmatched_must_haves: list[str] = []
    matched_nice_to_haves: list[str] = []
    strongest_metrics: list[str] = []
    version: str
