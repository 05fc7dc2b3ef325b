"""Tests for the round forecaster."""

import pytest

from models.schemas.company_difficulty import CompanyDifficultyContext
from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import CategoryScores, LLMAnalysis
from models.schemas.resume_extracted import ExtractedResume
from services.scoring.forecast import (
    FOCUS_MAP,
    FORECAST_VERSION,
    ROUND_WEIGHTS,
    compute_round_forecasts,
    compute_round_probability,
)

SCORES = CategoryScores(hard_match=0.8, evidence_depth=0.6, round_readiness=0.7, clarity=0.3, company_proxy=0.5)


def _difficulty(factor: float) -> CompanyDifficultyContext:
    return CompanyDifficultyContext(
        company_name="Google",
        tier="FAANG_PLUS",
        difficulty_score=round(factor * 100),
        acceptance_rate_estimate="1-2%",
        competition_level="extreme",
        interview_bar_description="",
        adjustment_factor=factor,
        version="v0.1",
    )


class TestRoundProbability:
    def test_weights_sum_to_one(self):
        for weights in ROUND_WEIGHTS.values():
            assert sum(weights.values()) == pytest.approx(1.0)

    @pytest.mark.parametrize("round_type,expected", [("technical", 0.72), ("behavioral", 0.47), ("case", 0.61)])
    def test_weighted_sum(self, round_type, expected):
        assert compute_round_probability(SCORES, round_type) == expected

    def test_difficulty_dampens(self):
        assert compute_round_probability(SCORES, "technical", 1.45) == 0.62

    def test_factor_at_or_below_one_is_ignored(self):
        assert compute_round_probability(SCORES, "technical", 1.0) == 0.72
        assert compute_round_probability(SCORES, "technical", 0.8) == 0.72


class TestRoundForecasts:
    def test_all_three_rounds(self):
        result = compute_round_forecasts(LLMAnalysis(category_scores=SCORES))
        assert [f.round_type for f in result.forecasts] == ["technical", "behavioral", "case"]
        assert result.version == FORECAST_VERSION

    def test_focus_targets_weakest_round(self):
        result = compute_round_forecasts(LLMAnalysis(category_scores=SCORES))
        assert result.recommended_focus == FOCUS_MAP["behavioral"]

    def test_personalized_focus_needs_substance(self):
        analysis = LLMAnalysis(category_scores=SCORES)
        long_focus = "Rehearse the payments migration story with concrete latency numbers"
        assert compute_round_forecasts(analysis, long_focus).recommended_focus == long_focus
        assert compute_round_forecasts(analysis, "Practice more").recommended_focus == FOCUS_MAP["behavioral"]

    def test_strength_and_risk_ignore_zero_weight_categories(self):
        technical = compute_round_forecasts(LLMAnalysis(category_scores=SCORES)).forecasts[0]
        # clarity (0.3) is the lowest score overall but carries no technical weight
        assert technical.primary_strength == "Technical Skills Match"
        assert technical.primary_risk == "Demonstrated Impact"

    def test_evidence_annotations(self):
        resume = ExtractedResume(skills=["Python"], metrics=["cut latency 40%"])
        jd = ExtractedJD(must_have=["Python", "Go"])
        technical = compute_round_forecasts(LLMAnalysis(category_scores=SCORES), resume=resume, jd=jd).forecasts[0]
        assert technical.primary_strength == "Technical Skills Match (1/2 must-haves)"
        assert technical.primary_risk == "Demonstrated Impact (1 metric found)"

    def test_difficulty_lowers_every_round(self):
        analysis = LLMAnalysis(category_scores=SCORES)
        easy = compute_round_forecasts(analysis)
        hard = compute_round_forecasts(analysis, company_difficulty=_difficulty(1.45))
        for e, h in zip(easy.forecasts, hard.forecasts):
            assert h.pass_probability <= e.pass_probability
