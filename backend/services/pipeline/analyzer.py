"""Analyzer: extracted facts + retrieved context -> LLMAnalysis.

The model acts as analyst, not scoring authority. It returns normalized
category scores, ranked risks, likely questions, study tasks and coaching;
the readiness score itself is computed deterministically downstream.
"""

import logging
from typing import Any

from config import settings
from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import LLMAnalysis
from models.schemas.resume_extracted import ExtractedResume
from models.schemas.retrieval import RetrievalResult
from services.gemini_client import generate_validated
from services.pipeline.base import BaseModelService
from services.pipeline.errors import AnalysisError
from services.prompt_builder import build_analysis_prompt

logger = logging.getLogger(__name__)


class AnalyzerService(BaseModelService):
    model_name = "analyzer"

    async def predict(self, **kwargs: Any) -> LLMAnalysis:
        resume: ExtractedResume = kwargs["resume"]
        jd: ExtractedJD = kwargs["jd"]
        round_type: str = kwargs["round_type"]
        context: RetrievalResult = kwargs["context"]

        prompt = build_analysis_prompt(resume, jd, round_type, context)
        analysis = await generate_validated(
            prompt,
            LLMAnalysis,
            error_cls=AnalysisError,
            model=settings.gemini_model,
            temperature=settings.llm_temperature,
        )
        logger.info(
            "Analysis complete: %d risks, %d questions, %d study tasks",
            len(analysis.ranked_risks), len(analysis.interview_questions), len(analysis.study_plan),
        )
        return analysis
