"""Context retriever: rubric chunks and question archetypes for the analysis prompt.

Flow:
    resume summary + JD summary + round type -> one query embedding
      ├─ store.search("rubric_chunks", k x overfetch)        (concurrent)
      └─ store.search("question_archetypes", k x overfetch)  (concurrent)
              ↓
    enforce_source_diversity() per corpus -> top k, no source above the cap
              ↓
    RetrievalResult

Any embedding or search failure falls back to store.filter_lookup()
(unranked, round-type filter only) and marks the result degraded.
"""

import asyncio
import logging
from typing import Literal, Protocol, Sequence, TypeVar

import numpy as np

from config import settings
from models.schemas.resume_extracted import Experience
from models.schemas.retrieval import QuestionArchetype, RetrievalResult, RubricChunk
from services.similarity import cosine_scores, embed_text, embed_texts

logger = logging.getLogger(__name__)

Corpus = Literal["rubric_chunks", "question_archetypes"]
ContextItem = RubricChunk | QuestionArchetype
T = TypeVar("T", RubricChunk, QuestionArchetype)

SUMMARY_SKILLS = 15
SUMMARY_ROLES = 5
SUMMARY_METRICS = 5
SUMMARY_REQUIREMENTS = 10
SUMMARY_KEYWORDS = 10


def summarize_resume_for_retrieval(skills: list[str], experiences: list[Experience], metrics: list[str]) -> str:
    """Compact resume summary: top skills, recent roles, strongest metrics."""
    parts = []
    if skills:
        parts.append("Skills: " + ", ".join(skills[:SUMMARY_SKILLS]))
    roles = [f"{e.role} at {e.company}".strip() for e in experiences[:SUMMARY_ROLES] if e.role or e.company]
    if roles:
        parts.append("Roles: " + "; ".join(roles))
    if metrics:
        parts.append("Metrics: " + "; ".join(metrics[:SUMMARY_METRICS]))
    return "\n".join(parts)


def summarize_jd_for_retrieval(must_have: list[str], keywords: list[str]) -> str:
    parts = []
    if must_have:
        parts.append("Requirements: " + ", ".join(must_have[:SUMMARY_REQUIREMENTS]))
    if keywords:
        parts.append("Keywords: " + ", ".join(keywords[:SUMMARY_KEYWORDS]))
    return "\n".join(parts)


def build_query(resume_summary: str, jd_summary: str, round_type: str) -> str:
    return f"{round_type} interview\n{resume_summary}\n{jd_summary}".strip()


class VectorStore(Protocol):
    """Storage contract for the two retrieval corpora."""

    async def search(self, corpus: Corpus, embedding: np.ndarray, k: int, round_type: str) -> list[ContextItem]:
        """Top ``k`` items by similarity, best first, with ``score`` set."""
        ...

    async def filter_lookup(self, corpus: Corpus, round_type: str, limit: int) -> list[ContextItem]:
        """Up to ``limit`` items for the round type, unranked."""
        ...


def _text_of(item: ContextItem) -> str:
    return item.chunk_text if isinstance(item, RubricChunk) else item.question_template


def _matches_round(item: ContextItem, round_type: str) -> bool:
    return item.round_type in (round_type, "general")


class InMemoryVectorStore:
    """numpy-backed store for local runs and tests.

    Item embeddings are computed on first search unless supplied up front,
    row-aligned with the item lists.
    """

    def __init__(
        self,
        rubric_chunks: Sequence[RubricChunk] = (),
        question_archetypes: Sequence[QuestionArchetype] = (),
        embeddings: dict[str, np.ndarray] | None = None,
    ):
        self._items: dict[str, list[ContextItem]] = {
            "rubric_chunks": list(rubric_chunks),
            "question_archetypes": list(question_archetypes),
        }
        self._embeddings: dict[str, np.ndarray] = dict(embeddings or {})

    def _corpus_embeddings(self, corpus: Corpus) -> np.ndarray:
        if corpus not in self._embeddings:
            items = self._items[corpus]
            self._embeddings[corpus] = embed_texts([_text_of(i) for i in items]) if items else np.zeros((0, 1))
        return self._embeddings[corpus]

    async def search(self, corpus: Corpus, embedding: np.ndarray, k: int, round_type: str) -> list[ContextItem]:
        items = self._items[corpus]
        matrix = self._corpus_embeddings(corpus)
        rows = [i for i, item in enumerate(items) if _matches_round(item, round_type)]
        if not rows:
            return []

        scores = cosine_scores(embedding, matrix[rows])
        order = np.argsort(-scores, kind="stable")[:k]
        return [items[rows[i]].model_copy(update={"score": float(scores[i])}) for i in order]

    async def filter_lookup(self, corpus: Corpus, round_type: str, limit: int) -> list[ContextItem]:
        return [item for item in self._items[corpus] if _matches_round(item, round_type)][:limit]


def enforce_source_diversity(ranked: list[T], k: int, max_share: float) -> list[T]:
    """Keep the top ``k`` items with no source above ``max_share`` of ``k``.

    Each source gets at least one slot. Slots the cap leaves open are
    backfilled from the skipped items in rank order.
    """
    cap = max(1, int(max_share * k))
    selected: list[int] = []
    skipped: list[int] = []
    per_source: dict[str, int] = {}

    for index, item in enumerate(ranked):
        if len(selected) >= k:
            break
        if per_source.get(item.source_name, 0) < cap:
            selected.append(index)
            per_source[item.source_name] = per_source.get(item.source_name, 0) + 1
        else:
            skipped.append(index)

    open_slots = max(0, k - len(selected))
    selected.extend(skipped[:open_slots])
    return [ranked[i] for i in sorted(selected)]


def _result(rubric_chunks: list, question_archetypes: list, degraded: bool) -> RetrievalResult:
    return RetrievalResult(
        rubric_chunks=rubric_chunks,
        question_archetypes=question_archetypes,
        context_ids=[c.id for c in rubric_chunks] + [q.id for q in question_archetypes],
        degraded=degraded,
    )


async def retrieve_context(
    resume_summary: str,
    jd_summary: str,
    round_type: str,
    store: VectorStore,
    top_k: int | None = None,
    warnings: list[str] | None = None,
) -> RetrievalResult:
    """Rank both corpora against the combined summary and cap per-source share."""
    k = top_k or settings.retrieval_top_k
    fetch_k = k * settings.retrieval_overfetch_factor
    query = build_query(resume_summary, jd_summary, round_type)

    try:
        embedding = await asyncio.to_thread(embed_text, query)
        chunks, archetypes = await asyncio.gather(
            store.search("rubric_chunks", embedding, fetch_k, round_type),
            store.search("question_archetypes", embedding, fetch_k, round_type),
        )
    except Exception as e:
        logger.warning("Ranked retrieval failed, using filter-only lookup: %s", e)
        if warnings is not None:
            warnings.append(f"Context retrieval degraded to unranked lookup: {e}")
        chunks, archetypes = await asyncio.gather(
            store.filter_lookup("rubric_chunks", round_type, k),
            store.filter_lookup("question_archetypes", round_type, k),
        )
        return _result(list(chunks), list(archetypes), degraded=True)

    share = settings.retrieval_max_source_share
    result = _result(
        enforce_source_diversity(list(chunks), k, share),
        enforce_source_diversity(list(archetypes), k, share),
        degraded=False,
    )
    logger.info(
        "Retrieved %d rubric chunks, %d question archetypes for %s round",
        len(result.rubric_chunks), len(result.question_archetypes), round_type,
    )
    return result
