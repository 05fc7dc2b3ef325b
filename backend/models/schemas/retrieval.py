"""Retrieved grounding context: rubric chunks and question archetypes."""

from pydantic import BaseModel


class RubricChunk(BaseModel):
    id: str
    domain: str = "general"  # swe | ds | finance | general
    round_type: str
    chunk_text: str
    source_name: str = ""
    version: str = "v1"
    score: float = 0.0


class QuestionArchetype(BaseModel):
    id: str
    domain: str = "general"
    round_type: str
    question_template: str
    tags: list[str] = []
    source_name: str = ""
    score: float = 0.0


class RetrievalResult(BaseModel):
    """Diversity-capped context for the analysis prompt.

    ``degraded`` is set when ranked search failed and the unranked
    filter-only lookup was used instead.
    """
    rubric_chunks: list[RubricChunk] = []
    question_archetypes: list[QuestionArchetype] = []
    context_ids: list[str] = []
    degraded: bool = False
