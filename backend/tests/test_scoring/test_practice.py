"""Tests for practice intelligence."""

from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import CategoryScores, LLMAnalysis, RiskItem, StudyTask
from models.schemas.resume_extracted import Experience, ExtractedResume
from services.scoring.practice import (
    PRACTICE_VERSION,
    compute_consistency_momentum,
    compute_practice_intelligence,
    compute_practice_rx,
    compute_practice_sync,
    compute_pressure_index,
    infer_practice_type,
)


def _make_analysis(risks=None, tasks=0, **scores) -> LLMAnalysis:
    base = {
        "hard_match": 0.8,
        "evidence_depth": 0.6,
        "round_readiness": 0.7,
        "clarity": 0.3,
        "company_proxy": 0.5,
    }
    base.update(scores)
    return LLMAnalysis(
        category_scores=CategoryScores(**base),
        ranked_risks=risks or [],
        study_plan=[StudyTask(task=f"Task {i}", time_estimate_minutes=30) for i in range(tasks)],
    )


def _risk(title, severity="medium", rationale="", risk_id="r1") -> RiskItem:
    return RiskItem(id=risk_id, title=title, severity=severity, rationale=rationale)


RESUME = ExtractedResume(
    skills=["Python", "Go"],
    experiences=[Experience(company="Stripe", role="Backend Engineer", dates="2021 - Present")],
    metrics=["cut p99 latency 40%"],
)
JD = ExtractedJD(must_have=["Python", "Kubernetes"], nice_to_have=["Terraform"])


class TestPracticeSync:
    def test_worked_example(self):
        sync = compute_practice_sync(_make_analysis(), RESUME, JD)
        assert sync.coding_exposure.score == 0.72
        assert sync.coding_exposure.level == "high"
        assert sync.mock_readiness.score == 0.46
        assert sync.mock_readiness.level == "moderate"
        assert sync.overall_practice_readiness == 59
        assert sync.recommendation.startswith("Your technical preparation is ahead")
        assert sync.version == PRACTICE_VERSION

    def test_signals_cite_matched_requirements(self):
        sync = compute_practice_sync(_make_analysis(), RESUME, JD)
        assert sync.coding_exposure.signals == [
            "Strong technical skills alignment: matched Python from JD must-haves"
        ]
        assert sync.mock_readiness.signals == [
            "Communication clarity needs work",
            "Good round-specific preparation signals",
        ]

    def test_gap_names_unmatched_requirements(self):
        sync = compute_practice_sync(_make_analysis(hard_match=0.3), RESUME, JD)
        assert sync.coding_exposure.score == 0.42
        assert "missing key JD requirements: Kubernetes" in sync.coding_exposure.signals[0]

    def test_coding_risks_penalize(self):
        risks = [
            _risk("Weak coding fundamentals", risk_id="r1"),
            _risk("Shallow answers", rationale="No algorithm practice", risk_id="r2"),
            _risk("Thin metrics", risk_id="r3"),
        ]
        sync = compute_practice_sync(_make_analysis(risks=risks))
        assert sync.coding_exposure.score == 0.62
        assert sync.coding_exposure.signals[-1] == "2 coding-related risk(s) flagged"

    def test_without_context(self):
        sync = compute_practice_sync(_make_analysis())
        assert sync.coding_exposure.signals == ["Strong technical skills alignment"]

    def test_both_low(self):
        sync = compute_practice_sync(
            _make_analysis(hard_match=0.2, evidence_depth=0.2, clarity=0.2, round_readiness=0.2, company_proxy=0.2)
        )
        assert sync.recommendation.startswith("Both coding practice and mock interviews")


class TestPracticeRx:
    def setup_method(self):
        self.risks = [
            _risk("Weak coding fundamentals", "critical", risk_id="r1"),
            _risk("Behavioral storytelling", "high", risk_id="r2"),
            _risk("System design at scale", "medium", risk_id="r3"),
            _risk("Thin metrics", "low", risk_id="r4"),
        ]

    def test_types_and_dosage(self):
        rx = compute_practice_rx(_make_analysis(risks=self.risks))
        p = rx.prescriptions
        assert [x.practice_type for x in p] == ["coding", "mock_interview", "project", "review"]
        assert (p[0].estimated_sessions, p[0].estimated_minutes_per_session, p[0].difficulty) == (8, 45, "advanced")
        assert (p[1].estimated_sessions, p[1].estimated_minutes_per_session, p[1].priority) == (5, 40, "high")
        assert (p[3].estimated_sessions, p[3].priority) == (3, "medium")
        assert p[0].id == "rx-1"
        assert p[0].title == "Coding Drill: Weak coding fundamentals"
        assert p[1].mapped_risk_id == "r2"

    def test_total_hours_and_summary(self):
        rx = compute_practice_rx(_make_analysis(risks=self.risks))
        assert rx.total_estimated_hours == 12.3
        assert rx.focus_summary == (
            "Your plan includes 1 critical-priority prescription(s) and 1 high-priority prescription(s), "
            "totaling ~12.3 hours of targeted practice."
        )

    def test_balanced_summary(self):
        rx = compute_practice_rx(_make_analysis(risks=[_risk("Thin metrics", "low")]))
        assert rx.total_estimated_hours == 1.5
        assert rx.focus_summary == "1 prescriptions totaling ~1.5 hours of balanced practice."

    def test_capped_at_six(self):
        risks = [_risk(f"Gap {i}", risk_id=f"r{i}") for i in range(9)]
        assert len(compute_practice_rx(_make_analysis(risks=risks)).prescriptions) == 6

    def test_long_titles_truncated(self):
        rx = compute_practice_rx(_make_analysis(risks=[_risk("x" * 60)]))
        assert rx.prescriptions[0].title == "Concept Review: " + "x" * 47 + "..."

    def test_star_matches_whole_word(self):
        assert infer_practice_type(_risk("No STAR stories")) == "mock_interview"
        assert infer_practice_type(_risk("Startup experience gap")) == "review"

    def test_empty(self):
        rx = compute_practice_rx(_make_analysis())
        assert rx.prescriptions == []
        assert rx.total_estimated_hours == 0


class TestPressureIndex:
    def test_worked_example(self):
        index = compute_pressure_index(_make_analysis())
        d = index.dimensions
        assert (d.time_constraint_resilience, d.ambiguity_tolerance) == (0.74, 0.47)
        assert (d.technical_confidence, d.communication_under_stress) == (0.74, 0.42)
        assert index.score == 62
        assert index.band == "high"
        assert index.weakest_dimension == "Communication Under Stress"
        assert index.coaching_note.startswith("Record yourself")

    def test_ties_keep_declaration_order(self):
        index = compute_pressure_index(_make_analysis())
        assert index.strongest_dimension == "Time Constraint Resilience"

    def test_severe_risks_penalize(self):
        risks = [_risk("a", "critical"), _risk("b", "high"), _risk("c", "high")]
        index = compute_pressure_index(_make_analysis(risks=risks))
        assert index.dimensions.communication_under_stress == 0.36
        assert index.score == 56
        assert index.band == "moderate"

    def test_never_negative(self):
        risks = [_risk(str(i), "critical") for i in range(10)]
        index = compute_pressure_index(
            _make_analysis(risks=risks, hard_match=0.1, evidence_depth=0.1, round_readiness=0.1, clarity=0.1, company_proxy=0.1)
        )
        assert index.dimensions.time_constraint_resilience == 0.0
        assert index.score == 0
        assert index.band == "low"


class TestConsistencyMomentum:
    def test_worked_example(self):
        momentum = compute_consistency_momentum(_make_analysis(), RESUME)
        s = momentum.signals
        assert (s.skill_breadth, s.evidence_recency, s.depth_vs_breadth, s.progression_clarity) == (0.56, 0.64, 0.7, 0.51)
        assert momentum.score == 60
        assert momentum.band == "steady"
        assert momentum.insights == ["Good depth with 1 quantified achievement backing technical claims"]
        assert momentum.recommendation.startswith("Steady progress")

    def test_study_plan_bonus(self):
        assert compute_consistency_momentum(_make_analysis(tasks=4)).score == 60
        assert compute_consistency_momentum(_make_analysis(tasks=6)).score == 70
        strong = compute_consistency_momentum(_make_analysis(tasks=7))
        assert strong.score == 75
        assert strong.band == "strong_momentum"
        assert compute_consistency_momentum(_make_analysis(tasks=12)).score == 75

    def test_critical_gaps_insight(self):
        risks = [_risk(str(i), "critical") for i in range(3)]
        momentum = compute_consistency_momentum(_make_analysis(risks=risks))
        assert momentum.insights[-1] == "Multiple critical gaps suggest inconsistent preparation across areas"

    def test_stalled(self):
        low = {k: 0.1 for k in ("hard_match", "evidence_depth", "round_readiness", "clarity", "company_proxy")}
        momentum = compute_consistency_momentum(_make_analysis(**low))
        assert momentum.band == "stalled"
        assert "Narrow skill coverage: consider expanding practice areas" in momentum.insights


class TestPracticeIntelligence:
    def test_bundles_all_four(self):
        result = compute_practice_intelligence(_make_analysis(), RESUME, JD)
        assert result.practice_sync.overall_practice_readiness == 59
        assert result.pressure_index.score == 62
        assert result.consistency_momentum.score == 60
        assert result.practice_rx.prescriptions == []
        assert result.version == PRACTICE_VERSION
