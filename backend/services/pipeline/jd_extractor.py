"""JD extractor: raw job description text -> ExtractedJD (must-haves separated from nice-to-haves)."""

import logging
from typing import Any

from config import settings
from models.schemas.jd_extracted import ExtractedJD
from services.gemini_client import generate_validated
from services.pipeline.base import BaseModelService
from services.pipeline.errors import ExtractionError
from services.prompt_builder import build_jd_extraction_prompt

logger = logging.getLogger(__name__)


class JDExtractorService(BaseModelService):
    model_name = "jd_extractor"

    async def predict(self, **kwargs: Any) -> ExtractedJD:
        jd_text: str = kwargs["jd_text"]
        prompt = build_jd_extraction_prompt(jd_text[: settings.max_jd_chars])

        result = await generate_validated(
            prompt,
            ExtractedJD,
            error_cls=ExtractionError,
            model=settings.extraction_model,
            temperature=settings.extraction_temperature,
        )
        # Models sometimes echo the literal "null" from the template
        if result.company_name and result.company_name.strip().lower() in ("null", "none", ""):
            result = result.model_copy(update={"company_name": None})

        logger.info(
            "JD extracted: %d must-have, %d nice-to-have (company=%s)",
            len(result.must_have), len(result.nice_to_have), result.company_name,
        )
        return result
