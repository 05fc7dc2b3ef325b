"""Tests for the cognitive mapper."""

from models.schemas.llm_analysis import CategoryScores, LLMAnalysis
from services.scoring.cognitive import COGNITIVE_VERSION, compute_cognitive_risk_map


def _make_analysis(**scores) -> LLMAnalysis:
    base = {
        "hard_match": 0.8,
        "evidence_depth": 0.6,
        "round_readiness": 0.7,
        "clarity": 0.3,
        "company_proxy": 0.5,
    }
    base.update(scores)
    return LLMAnalysis(category_scores=CategoryScores(**base))


class TestCognitiveRiskMap:
    def test_blends(self):
        result = compute_cognitive_risk_map(_make_analysis())
        d = result.dimensions
        assert d.analytical_reasoning == 0.68
        assert d.communication_clarity == 0.3
        assert d.technical_depth == 0.74
        assert d.adaptability == 0.52
        assert d.problem_structuring == 0.52
        assert result.version == COGNITIVE_VERSION

    def test_extremes_by_label(self):
        result = compute_cognitive_risk_map(_make_analysis())
        assert result.lowest_dimension == "Communication Clarity"
        assert result.highest_dimension == "Technical Depth"

    def test_ties_keep_declaration_order(self):
        flat = {k: 0.5 for k in ("hard_match", "evidence_depth", "round_readiness", "clarity", "company_proxy")}
        result = compute_cognitive_risk_map(_make_analysis(**flat))
        assert result.lowest_dimension == "Analytical Reasoning"
        assert result.highest_dimension == "Problem Structuring"
