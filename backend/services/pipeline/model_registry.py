"""Lazy-loading registry for the model-backed pipeline stages.

Global singletons, created and checked on first use.
"""

import logging

from services.pipeline.base import BaseModelService

logger = logging.getLogger(__name__)

_registry: dict[str, BaseModelService] = {}


def _create_model(name: str) -> BaseModelService:
    """Factory: create a stage service by name with deferred imports."""
    if name == "resume_extractor":
        from services.pipeline.resume_extractor import ResumeExtractorService
        return ResumeExtractorService()
    elif name == "jd_extractor":
        from services.pipeline.jd_extractor import JDExtractorService
        return JDExtractorService()
    elif name == "analyzer":
        from services.pipeline.analyzer import AnalyzerService
        return AnalyzerService()
    else:
        raise ValueError(f"Unknown model: {name}")


def get_model(name: str) -> BaseModelService:
    """Get a stage service by name, creating and loading it on first access."""
    if name not in _registry:
        _registry[name] = _create_model(name)
    svc = _registry[name]
    svc.ensure_loaded()
    return svc


def register(name: str, service: BaseModelService) -> None:
    """Install a pre-built service under ``name`` (e.g. a test double)."""
    _registry[name] = service


def clear() -> None:
    """Drop all stage instances. Useful for testing."""
    _registry.clear()
