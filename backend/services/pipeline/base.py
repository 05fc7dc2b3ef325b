"""Abstract base class for all model-backed pipeline stages."""

from abc import ABC, abstractmethod
from typing import Any
import logging

from services.gemini_client import get_client

logger = logging.getLogger(__name__)


class BaseModelService(ABC):
    """Base class for pipeline stages that call a hosted model.

    Subclasses must implement:
        - model_name: identifier used in model_registry
        - predict(**kwargs): run the call and return a validated schema

    load() checks that a client can be created, so a missing API key
    fails at first use with LLMUnavailableError instead of mid-run.
    """

    model_name: str = ""
    _loaded: bool = False

    def load(self) -> None:
        get_client()

    @abstractmethod
    async def predict(self, **kwargs: Any) -> Any:
        """Run the model call. Returns a Pydantic schema defined per stage."""

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        """Load if not already loaded."""
        if not self._loaded:
            logger.info("Loading stage: %s", self.model_name)
            self.load()
            self._loaded = True
