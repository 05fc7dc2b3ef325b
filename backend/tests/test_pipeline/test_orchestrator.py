"""Tests for the pipeline orchestrator."""

from datetime import datetime, timezone

import numpy as np
import pytest

from models.requests import AnalysisRequest
from models.responses import DiagnosticReport
from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import (
    CategoryScores,
    InterviewQuestion,
    LLMAnalysis,
    PersonalizedCoaching,
    RiskItem,
    StudyTask,
)
from models.schemas.resume_extracted import Experience, ExtractedResume
from models.schemas.retrieval import QuestionArchetype, RubricChunk
from models.schemas.study_plan import PrepPreferences
from services.pipeline.base import BaseModelService
from services.pipeline.errors import ExtractionError
from services.pipeline.model_registry import clear as clear_registry
from services.pipeline.model_registry import register
from services.pipeline.orchestrator import compute_diagnostics, run_pipeline
from services.pipeline.retriever import InMemoryVectorStore

SAMPLE_RESUME = """
Jane Doe

Senior Software Engineer, Meta
2019 - 2021
- Built payment microservices in Python and Go
- Cut p99 latency 40%
"""

SAMPLE_JD = """
Senior Python Developer at Google
Requirements: Python, Kubernetes, distributed systems
"""

RESUME = ExtractedResume(
    skills=["Python", "Go", "PostgreSQL"],
    experiences=[
        Experience(company="Meta", role="Senior Software Engineer", dates="2019 - 2021",
                   achievements=["Built payment microservices", "Cut p99 latency 40%"]),
    ],
    metrics=["cut p99 latency 40%"],
)

JD = ExtractedJD(
    must_have=["Python", "Kubernetes", "Distributed systems"],
    keywords=["gRPC"],
    company_name="Google",
    job_title="Senior Python Developer",
)

ANALYSIS = LLMAnalysis(
    category_scores=CategoryScores(
        hard_match=0.8, evidence_depth=0.6, round_readiness=0.7, clarity=0.3, company_proxy=0.5
    ),
    ranked_risks=[
        RiskItem(id="r1", title="Kubernetes gap", severity="high", jd_refs=("Kubernetes",)),
        RiskItem(id="r2", title="Shallow system design", severity="medium"),
        RiskItem(id="r3", title="Thin metrics", severity="medium"),
    ],
    interview_questions=[InterviewQuestion(question="How would you shard payments?", mapped_risk_id="r2")],
    study_plan=[
        StudyTask(task="Deploy the payments service on a local kind cluster", time_estimate_minutes=60, mapped_risk_id="r1"),
        StudyTask(task="Mock system design: global rate limiter", time_estimate_minutes=45, mapped_risk_id="r2"),
        StudyTask(task="Add numbers to three resume bullets", time_estimate_minutes=20, mapped_risk_id="r3"),
    ],
    personalized_coaching=PersonalizedCoaching(
        archetype_tips=["Lead with the payments story", "Quantify the latency work", "Rehearse a 2-minute intro"],
        round_focus="Walk through the payments architecture and its scaling limits out loud",
    ),
)


class _StaticService(BaseModelService):
    """Stage double: returns a fixed result and records its inputs."""

    def __init__(self, name, result):
        self.model_name = name
        self.result = result
        self.calls = []

    def load(self) -> None:
        pass

    async def predict(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


@pytest.fixture(autouse=True)
def _reset_registry():
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def stages():
    services = {
        "resume_extractor": _StaticService("resume_extractor", RESUME),
        "jd_extractor": _StaticService("jd_extractor", JD),
        "analyzer": _StaticService("analyzer", ANALYSIS),
    }
    for name, svc in services.items():
        register(name, svc)
    return services


def _request(**overrides) -> AnalysisRequest:
    data = {"resume_text": SAMPLE_RESUME, "job_description": SAMPLE_JD, "round_type": "technical"}
    data.update(overrides)
    return AnalysisRequest(**data)


class TestRunPipeline:
    @pytest.mark.asyncio
    async def test_full_report(self, stages):
        report = await run_pipeline(_request(), reference_year=2026)

        assert isinstance(report, DiagnosticReport)
        assert report.readiness_score == 65
        assert report.risk_band == "Medium"
        assert report.archetype_profile.archetype == "technical_potential_low_polish"
        assert report.archetype_profile.coaching_tips == ANALYSIS.personalized_coaching.archetype_tips
        assert report.round_forecasts.recommended_focus == ANALYSIS.personalized_coaching.round_focus
        assert report.company_difficulty.tier == "FAANG_PLUS"
        assert report.personalized_study_plan is None

    @pytest.mark.asyncio
    async def test_recruiter_and_practice_sections(self, stages):
        report = await run_pipeline(_request(), reference_year=2026)

        assert report.recruiter_simulation.first_impression == "maybe"
        assert report.recruiter_simulation.immediate_red_flags == ["Kubernetes gap"]
        assert report.recruiter_simulation.version == report.score_breakdown.version
        assert len(report.practice_intelligence.practice_rx.prescriptions) == 3
        assert report.practice_intelligence.pressure_index.dimensions.communication_under_stress < 0.5

    @pytest.mark.asyncio
    async def test_stage_inputs(self, stages):
        await run_pipeline(_request(round_type="behavioral"), reference_year=2026)

        assert stages["resume_extractor"].calls == [{"resume_text": SAMPLE_RESUME}]
        assert stages["jd_extractor"].calls == [{"jd_text": SAMPLE_JD}]
        analyzer_call = stages["analyzer"].calls[0]
        assert analyzer_call["round_type"] == "behavioral"
        assert analyzer_call["resume"] is RESUME

    @pytest.mark.asyncio
    async def test_without_store_warns(self, stages):
        report = await run_pipeline(_request(), reference_year=2026)
        assert report.retrieved_context_ids == []
        assert any("No vector store configured" in w for w in report.warnings)

    @pytest.mark.asyncio
    async def test_with_store(self, stages, monkeypatch):
        monkeypatch.setattr("services.pipeline.retriever.embed_text", lambda text: np.array([1.0, 0.0]))
        store = InMemoryVectorStore(
            rubric_chunks=[RubricChunk(id="rb-1", round_type="technical", chunk_text="Depth over breadth")],
            question_archetypes=[
                QuestionArchetype(id="qa-1", round_type="technical", question_template="Design a cache")
            ],
            embeddings={
                "rubric_chunks": np.array([[1.0, 0.0]]),
                "question_archetypes": np.array([[0.0, 1.0]]),
            },
        )

        report = await run_pipeline(_request(), store=store, reference_year=2026)

        assert report.retrieved_context_ids == ["rb-1", "qa-1"]
        assert stages["analyzer"].calls[0]["context"].rubric_chunks[0].id == "rb-1"

    @pytest.mark.asyncio
    async def test_request_company_overrides_jd(self, stages):
        report = await run_pipeline(_request(company_name="Meta"), reference_year=2026)
        assert report.company_difficulty.company_name == "Meta"
        assert report.prior_employment_signal.detected
        assert report.prior_employment_signal.most_recent_departure_years_ago == 5
        assert report.executive_scores.readiness_score == 65 + report.prior_employment_signal.boosts.readiness_boost

    @pytest.mark.asyncio
    async def test_study_plan_when_preferences_given(self, stages):
        prefs = PrepPreferences(timeline="1week", daily_hours=2, focus_areas=["system_design"])
        report = await run_pipeline(_request(prep_preferences=prefs), reference_year=2026)

        plan = report.personalized_study_plan
        assert plan is not None
        assert plan.total_days == 7
        assert report.trajectory_projection.milestone3_day == 7

    @pytest.mark.asyncio
    async def test_extraction_failure_propagates(self, stages):
        stages["jd_extractor"].result = ExtractionError("Model returned no valid ExtractedJD")
        with pytest.raises(ExtractionError):
            await run_pipeline(_request(), reference_year=2026)
        assert stages["analyzer"].calls == []


class TestComputeDiagnostics:
    def test_deterministic(self):
        stamp = datetime(2026, 1, 1, tzinfo=timezone.utc)
        first = compute_diagnostics(ANALYSIS, RESUME, JD, "technical", reference_year=2026, generated_at=stamp)
        second = compute_diagnostics(ANALYSIS, RESUME, JD, "technical", reference_year=2026, generated_at=stamp)
        assert first.model_dump() == second.model_dump()

    def test_quality_warnings_collected(self):
        noisy = ANALYSIS.model_copy(
            update={
                "study_plan": ANALYSIS.study_plan
                + [StudyTask(task="Learn Kubernetes", time_estimate_minutes=30, mapped_risk_id="r1")]
            }
        )
        report = compute_diagnostics(noisy, RESUME, JD, "technical", warnings=["upstream warning"])
        assert report.warnings[0] == "upstream warning"
        assert any("parroted study task" in w for w in report.warnings)
        assert len(report.analysis.study_plan) == 3

    def test_experience_level_from_preferences(self):
        prefs = PrepPreferences(timeline="3days", daily_hours=1, experience_level="intern")
        report = compute_diagnostics(ANALYSIS, RESUME, JD, "technical", prep_preferences=prefs)
        assert report.company_difficulty.is_intern
        assert report.company_difficulty.adjustment_factor == 1.5

    def test_missing_context_is_not_an_error(self):
        report = compute_diagnostics(ANALYSIS, ExtractedResume(), ExtractedJD(), "finance")
        assert report.company_difficulty.tier == "STANDARD"
        assert not report.prior_employment_signal.detected
        assert report.hire_zone_analysis.round_type == "finance"

    def test_risk_band_versioned_by_breakdown(self):
        report = compute_diagnostics(ANALYSIS, RESUME, JD, "technical")
        assert report.risk_band == "Medium"
        assert report.score_breakdown.version == "v0.2"
        assert "score_breakdown.version" in DiagnosticReport.model_fields["risk_band"].description
