"""Resume extractor: raw resume text -> ExtractedResume.

One JSON-mode model call, validated against the schema and retried on
malformed output. Extraction only; no judgement of fit happens here.
"""

import logging
from typing import Any

from config import settings
from models.schemas.resume_extracted import ExtractedResume
from services.gemini_client import generate_validated
from services.pipeline.base import BaseModelService
from services.pipeline.errors import ExtractionError
from services.prompt_builder import build_resume_extraction_prompt

logger = logging.getLogger(__name__)


class ResumeExtractorService(BaseModelService):
    model_name = "resume_extractor"

    async def predict(self, **kwargs: Any) -> ExtractedResume:
        resume_text: str = kwargs["resume_text"]
        prompt = build_resume_extraction_prompt(resume_text[: settings.max_resume_chars])

        result = await generate_validated(
            prompt,
            ExtractedResume,
            error_cls=ExtractionError,
            model=settings.extraction_model,
            temperature=settings.extraction_temperature,
        )
        logger.info(
            "Resume extracted: %d skills, %d experiences, %d metrics",
            len(result.skills), len(result.experiences), len(result.metrics),
        )
        return result
