"""Pipeline orchestrator: wires the model-backed stages and the scoring suite together.

Flow:
    resume_text + jd_text
      ├─ resume_extractor.predict(resume_text)  → ExtractedResume   (concurrent)
      ├─ jd_extractor.predict(jd_text)          → ExtractedJD       (concurrent)
      │       ↓                                         ↓
      ├─ retrieve_context(resume summary, jd summary, round)  → RetrievalResult
      │                                         ↓
      ├─ analyzer.predict(resume, jd, round, context)         → LLMAnalysis
      │                                         ↓
      └─ compute_diagnostics()  (sync, deterministic)
            validate_analysis_quality → readiness score + band
              → evidence, archetype, forecasts, cognitive map
              → company difficulty, prior employment → executive scores
              → hire zone, trajectory, study plan (when preferences given)
              → recruiter simulation, practice intelligence
                       ↓
         DiagnosticReport
"""

import asyncio
import logging
from datetime import datetime, timezone

from models.requests import AnalysisRequest
from models.responses import DiagnosticReport
from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import LLMAnalysis
from models.schemas.resume_extracted import ExtractedResume
from models.schemas.retrieval import RetrievalResult
from models.schemas.study_plan import PrepPreferences
from services.pipeline.model_registry import get_model
from services.pipeline.quality import validate_analysis_quality
from services.pipeline.retriever import (
    VectorStore,
    retrieve_context,
    summarize_jd_for_retrieval,
    summarize_resume_for_retrieval,
)
from services.scoring.archetype import classify_archetype
from services.scoring.cognitive import compute_cognitive_risk_map
from services.scoring.company_difficulty import compute_company_difficulty
from services.scoring.engine import (
    build_recruiter_simulation,
    compute_executive_scores,
    compute_readiness_score,
    compute_risk_band,
)
from services.scoring.evidence import compute_evidence_context
from services.scoring.forecast import compute_round_forecasts
from services.scoring.hire_zone import compute_hire_zone_analysis
from services.scoring.practice import compute_practice_intelligence
from services.scoring.prior_employment import detect_prior_employment
from services.scoring.study_plan import generate_personalized_study_plan
from services.scoring.trajectory import compute_trajectory_projection

logger = logging.getLogger(__name__)


async def run_pipeline(
    request: AnalysisRequest,
    *,
    store: VectorStore | None = None,
    reference_year: int | None = None,
) -> DiagnosticReport:
    """Run extraction, retrieval and analysis, then the deterministic diagnostics.

    Raises ExtractionError / AnalysisError once a model call exhausts its
    retries, and LLMUnavailableError when no API key is configured. The
    pipeline sets no timeout of its own; wrap the call in
    ``asyncio.wait_for`` if one is needed.
    """
    warnings: list[str] = []

    # --- Stage 1: Extraction (independent) ---
    resume_extractor = get_model("resume_extractor")
    jd_extractor = get_model("jd_extractor")
    resume, jd = await asyncio.gather(
        resume_extractor.predict(resume_text=request.resume_text),
        jd_extractor.predict(jd_text=request.job_description),
    )

    # --- Stage 2: Retrieval ---
    if store is None:
        context = RetrievalResult()
        warnings.append("No vector store configured; analysis ran without rubric context")
    else:
        context = await retrieve_context(
            summarize_resume_for_retrieval(resume.skills, resume.experiences, resume.metrics),
            summarize_jd_for_retrieval(jd.must_have, jd.keywords),
            request.round_type,
            store,
            warnings=warnings,
        )

    # --- Stage 3: Analysis ---
    analyzer = get_model("analyzer")
    analysis: LLMAnalysis = await analyzer.predict(
        resume=resume,
        jd=jd,
        round_type=request.round_type,
        context=context,
    )

    # --- Stage 4: Diagnostics ---
    return compute_diagnostics(
        analysis,
        resume,
        jd,
        request.round_type,
        company_name=request.company_name,
        experience_level=request.experience_level,
        prep_preferences=request.prep_preferences,
        jd_text=request.job_description,
        retrieved_context_ids=context.context_ids,
        warnings=warnings,
        reference_year=reference_year,
    )


def compute_diagnostics(
    analysis: LLMAnalysis,
    resume: ExtractedResume,
    jd: ExtractedJD,
    round_type: str,
    *,
    company_name: str | None = None,
    experience_level: str | None = None,
    prep_preferences: PrepPreferences | None = None,
    jd_text: str = "",
    retrieved_context_ids: list[str] | None = None,
    warnings: list[str] | None = None,
    reference_year: int | None = None,
    generated_at: datetime | None = None,
) -> DiagnosticReport:
    """Deterministic half of the pipeline: same inputs, same report.

    ``company_name`` overrides the one extracted from the JD;
    ``experience_level`` falls back to the prep preferences' level.
    """
    warnings = list(warnings or [])
    analysis, quality_warnings = validate_analysis_quality(analysis, jd, round_type)
    warnings.extend(quality_warnings)

    readiness_score, breakdown = compute_readiness_score(analysis)
    coaching = analysis.personalized_coaching

    target_company = company_name or jd.company_name
    if experience_level is None and prep_preferences is not None:
        experience_level = prep_preferences.experience_level

    company_difficulty = compute_company_difficulty(target_company, experience_level, jd, resume, jd_text)
    prior_employment = detect_prior_employment(resume, jd, target_company, reference_year)

    study_plan = None
    if prep_preferences is not None:
        study_plan = generate_personalized_study_plan(
            analysis.study_plan, prep_preferences, analysis.ranked_risks, round_type
        )

    report = DiagnosticReport(
        round_type=round_type,
        readiness_score=readiness_score,
        risk_band=compute_risk_band(readiness_score),
        score_breakdown=breakdown,
        ranked_risks=analysis.ranked_risks,
        interview_questions=analysis.interview_questions,
        analysis=analysis,
        extracted_resume=resume,
        extracted_jd=jd,
        retrieved_context_ids=list(retrieved_context_ids or []),
        evidence_context=compute_evidence_context(analysis, resume, jd),
        archetype_profile=classify_archetype(
            analysis, coaching.archetype_tips if coaching else None, resume, jd
        ),
        round_forecasts=compute_round_forecasts(
            analysis, coaching.round_focus if coaching else None, resume, jd, company_difficulty
        ),
        cognitive_risk_map=compute_cognitive_risk_map(analysis),
        company_difficulty=company_difficulty,
        prior_employment_signal=prior_employment,
        hire_zone_analysis=compute_hire_zone_analysis(
            readiness_score, round_type, breakdown, company_difficulty
        ),
        trajectory_projection=compute_trajectory_projection(readiness_score, analysis, prep_preferences),
        executive_scores=compute_executive_scores(readiness_score, analysis, company_difficulty, prior_employment),
        recruiter_simulation=build_recruiter_simulation(analysis, readiness_score),
        practice_intelligence=compute_practice_intelligence(analysis, resume, jd),
        personalized_study_plan=study_plan,
        warnings=warnings,
        generated_at=generated_at or datetime.now(timezone.utc),
    )

    logger.info(
        "Diagnostics complete: score=%d band=%s archetype=%s tier=%s (%d warnings)",
        report.readiness_score, report.risk_band, report.archetype_profile.archetype,
        company_difficulty.tier, len(warnings),
    )
    return report
