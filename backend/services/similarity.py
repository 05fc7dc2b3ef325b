"""JobBERT-v2 embeddings and cosine ranking for context retrieval."""

import logging

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine

from config import settings

logger = logging.getLogger(__name__)

# Lazy-loaded embedding model (loaded on first use, ~425MB)
# TechWolf/JobBERT-v2: trained on millions of job postings, 1024-dim embeddings
_sbert_model = None


def _get_sbert_model():
    """Load the embedding model lazily on first call.

    Load failures propagate; callers decide whether to degrade.
    """
    global _sbert_model
    if _sbert_model is None:
        from sentence_transformers import SentenceTransformer

        _sbert_model = SentenceTransformer(settings.embedding_model)
        logger.info("Embedding model loaded: %s", settings.embedding_model)
    return _sbert_model


def embed_texts(texts: list[str]) -> np.ndarray:
    """Encode texts into a (len(texts), dim) float32 matrix."""
    model = _get_sbert_model()
    embeddings = model.encode(texts, convert_to_numpy=True, show_progress_bar=False)
    return np.asarray(embeddings, dtype="float32")


def embed_text(text: str) -> np.ndarray:
    """Encode a single text into a 1-D vector."""
    return embed_texts([text])[0]


def cosine_scores(query: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """Cosine similarity of one query vector against every row of ``matrix``."""
    if matrix.shape[0] == 0:
        return np.zeros(0, dtype="float32")
    return sklearn_cosine(query.reshape(1, -1), matrix)[0]
