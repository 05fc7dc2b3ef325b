"""Google Gemini API wrapper: JSON generation with schema validation and bounded retry."""

import json
import logging
from typing import TypeVar

from google import genai
from google.genai import types
from pydantic import BaseModel, ValidationError

from config import settings
from services.pipeline.errors import LLMUnavailableError, PipelineError

logger = logging.getLogger(__name__)

_client: genai.Client | None = None

T = TypeVar("T", bound=BaseModel)


def get_client() -> genai.Client:
    global _client
    if not settings.gemini_api_key:
        raise LLMUnavailableError("No GEMINI_API_KEY set - model calls disabled")
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence (```json ... ```), if any."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def generate_json(prompt: str, model: str | None = None, temperature: float | None = None) -> dict:
    """Send a prompt to Gemini and parse the JSON response.

    Raises json.JSONDecodeError when the response is not JSON.
    """
    client = get_client()
    response = await client.aio.models.generate_content(
        model=model or settings.gemini_model,
        contents=prompt,
        config=types.GenerateContentConfig(
            temperature=settings.llm_temperature if temperature is None else temperature,
            max_output_tokens=settings.llm_max_output_tokens,
            response_mime_type="application/json",
        ),
    )
    return json.loads(strip_code_fences(response.text or ""))


async def generate_validated(
    prompt: str,
    schema: type[T],
    *,
    error_cls: type[PipelineError] = PipelineError,
    max_retries: int | None = None,
    model: str | None = None,
    temperature: float | None = None,
) -> T:
    """Generate JSON and validate it against ``schema``.

    Malformed JSON or a schema violation is retried immediately, up to
    ``max_retries`` extra attempts. Once exhausted, ``error_cls`` is raised
    chained to the last parse/validation error.
    """
    retries = settings.llm_max_retries if max_retries is None else max_retries
    last_error: Exception | None = None

    for attempt in range(retries + 1):
        try:
            data = await generate_json(prompt, model=model, temperature=temperature)
            return schema.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            last_error = e
            logger.warning(
                "%s response rejected (attempt %d/%d): %s",
                schema.__name__, attempt + 1, retries + 1, e,
            )

    logger.error("%s generation failed after %d attempts", schema.__name__, retries + 1)
    raise error_cls(f"Model returned no valid {schema.__name__}") from last_error
