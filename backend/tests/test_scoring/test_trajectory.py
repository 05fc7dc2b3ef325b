"""Tests for the trajectory projector."""

import pytest

from models.schemas.llm_analysis import CategoryScores, LLMAnalysis, RiskItem
from models.schemas.study_plan import PrepPreferences
from services.scoring.trajectory import (
    TRAJECTORY_VERSION,
    compute_trajectory_projection,
    hours_multiplier,
    improvement_potential,
    milestone_days,
    project_score_at_day,
)

SCORES = CategoryScores(hard_match=0.8, evidence_depth=0.6, round_readiness=0.7, clarity=0.3, company_proxy=0.5)


class TestProjection:
    def test_monotonic_default_horizons(self):
        result = compute_trajectory_projection(65, LLMAnalysis(category_scores=SCORES))
        scores = [result.day3_projection.score, result.day7_projection.score, result.day14_projection.score]
        assert 65 <= scores[0] <= scores[1] <= scores[2] <= 100
        assert (result.milestone1_day, result.milestone2_day, result.milestone3_day) == (3, 7, 14)
        assert result.version == TRAJECTORY_VERSION

    def test_three_day_gain(self):
        assert project_score_at_day(65, SCORES, 3).score == 67

    def test_never_exceeds_100(self):
        perfect = CategoryScores(hard_match=1.0, evidence_depth=1.0, round_readiness=1.0, clarity=1.0, company_proxy=1.0)
        assert project_score_at_day(100, perfect, 28, daily_hours=8).score == 100

    def test_more_hours_project_higher(self):
        slow = project_score_at_day(50, SCORES, 14, daily_hours=1).score
        fast = project_score_at_day(50, SCORES, 14, daily_hours=5).score
        assert fast > slow

    def test_default_assumptions_without_preferences(self):
        projection = project_score_at_day(65, SCORES, 7)
        assert projection.assumptions[0] == "Consistent daily practice maintained"

    def test_assumptions_from_hours(self):
        projection = project_score_at_day(65, SCORES, 14, daily_hours=2.5)
        assert projection.assumptions == [
            "2.5h daily focused prep",
            "4+ mock interviews completed",
            "Top risks systematically addressed",
        ]


class TestMilestones:
    @pytest.mark.parametrize(
        "timeline,expected",
        [
            ("1day", (1, 1, 1)),
            ("3days", (1, 2, 3)),
            ("1week", (3, 5, 7)),
            ("2weeks", (3, 7, 14)),
            ("4weeks_plus", (3, 7, 28)),
        ],
    )
    def test_scaled_into_timeline(self, timeline, expected):
        assert milestone_days(PrepPreferences(timeline=timeline, daily_hours=2)) == expected

    def test_projection_uses_milestones(self):
        prefs = PrepPreferences(timeline="1week", daily_hours=2)
        result = compute_trajectory_projection(65, LLMAnalysis(category_scores=SCORES), prefs)
        assert result.milestone2_day == 5
        assert result.day3_projection.score <= result.day7_projection.score <= result.day14_projection.score


class TestHelpers:
    @pytest.mark.parametrize("hours,expected", [(None, 1.0), (0.5, 0.5), (1, 0.5), (3, 1.0), (4, 1.5)])
    def test_hours_multiplier(self, hours, expected):
        assert hours_multiplier(hours) == expected

    def test_improvement_potential(self):
        assert improvement_potential(65, LLMAnalysis(category_scores=SCORES)) == "medium"
        assert improvement_potential(80, LLMAnalysis(category_scores=SCORES)) == "low"

        weak = CategoryScores(hard_match=0.3, evidence_depth=0.3, round_readiness=0.3, clarity=0.3, company_proxy=0.3)
        risks = [RiskItem(id=f"r{i}", title=f"risk {i}", severity="high") for i in range(5)]
        assert improvement_potential(30, LLMAnalysis(category_scores=weak, ranked_risks=risks)) == "high"
