"""Tests for the evidence context builder."""

from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import CategoryScores, LLMAnalysis, RiskItem
from models.schemas.resume_extracted import Experience, ExtractedResume
from services.scoring.evidence import (
    EVIDENCE_VERSION,
    compute_evidence_context,
    find_matches,
    normalize,
    skill_matches,
)

SCORES = CategoryScores(hard_match=0.7, evidence_depth=0.6, round_readiness=0.5, clarity=0.6, company_proxy=0.5)


def _make_resume(**overrides) -> ExtractedResume:
    data = {
        "skills": ["Python", "PostgreSQL", "Docker"],
        "experiences": [
            Experience(company="Stripe", role="Backend Engineer", dates="2021 - Present",
                       achievements=["Built billing API", "Cut p99 latency 40%"]),
            Experience(company="Acme", role="Intern", dates="2020", achievements=["Wrote ETL jobs"]),
        ],
        "metrics": ["cut p99 latency 40%", "served 2M requests/day", "saved $120k/yr", "4 launches"],
        "recency_signals": ["Kubernetes"],
        "project_evidence": ["Open-source rate limiter"],
    }
    data.update(overrides)
    return ExtractedResume(**data)


def _make_jd(**overrides) -> ExtractedJD:
    data = {
        "must_have": ["Python", "Kubernetes", "Go"],
        "nice_to_have": ["Kubernetes", "Terraform"],
        "seniority_signals": ["5+ years"],
    }
    data.update(overrides)
    return ExtractedJD(**data)


class TestSkillMatching:
    def test_normalize_strips_punctuation(self):
        assert normalize("Node.js!") == "nodejs"

    def test_bidirectional_containment(self):
        assert skill_matches("PostgreSQL", "SQL")
        assert skill_matches("Go", "Go (Golang)")
        assert not skill_matches("Java", "Python")

    def test_empty_never_matches(self):
        assert not skill_matches("", "Python")
        assert not skill_matches("!!!", "Python")

    def test_find_matches_preserves_order(self):
        matched, unmatched = find_matches(["python"], ["Go", "Python", "Rust"])
        assert matched == ["Python"]
        assert unmatched == ["Go", "Rust"]


class TestEvidenceContext:
    def test_must_have_split(self):
        ctx = compute_evidence_context(LLMAnalysis(category_scores=SCORES), _make_resume(), _make_jd())
        assert ctx.matched_must_haves == ["Python"]
        assert ctx.unmatched_must_haves == ["Kubernetes", "Go"]
        assert ctx.version == EVIDENCE_VERSION

    def test_nice_to_haves_match_recency_signals(self):
        ctx = compute_evidence_context(LLMAnalysis(category_scores=SCORES), _make_resume(), _make_jd())
        assert ctx.matched_nice_to_haves == ["Kubernetes"]
        assert "Aligned with 1 of 2 nice-to-have requirements" in ctx.category_evidence.company_proxy
        assert "Seniority signals in JD: 5+ years." in ctx.category_evidence.company_proxy

    def test_top_three_metrics(self):
        ctx = compute_evidence_context(LLMAnalysis(category_scores=SCORES), _make_resume(), _make_jd())
        assert len(ctx.strongest_metrics) == 3
        assert ctx.category_evidence.evidence_depth.startswith("2 roles with 3 achievements.")

    def test_round_risks_listed(self):
        analysis = LLMAnalysis(
            category_scores=SCORES,
            ranked_risks=[
                RiskItem(id="r1", title="Little mock interview exposure", severity="high"),
                RiskItem(id="r2", title="Go gap", severity="medium", rationale="No Go in resume"),
            ],
        )
        ctx = compute_evidence_context(analysis, _make_resume(), _make_jd())
        assert ctx.category_evidence.round_readiness.startswith("1 interview-specific risk identified.")
        assert "Little mock interview exposure" in ctx.category_evidence.round_readiness

    def test_empty_inputs(self):
        ctx = compute_evidence_context(LLMAnalysis(category_scores=SCORES), ExtractedResume(), ExtractedJD())
        ev = ctx.category_evidence
        assert ev.hard_match == "No must-have requirements specified in job description."
        assert ev.round_readiness == "No interview-specific risks flagged."
        assert ev.evidence_depth == "0 roles with 0 achievements. No quantified metrics found."
        assert ev.company_proxy == "No nice-to-have requirements specified in job description."
