"""Typed failures raised by the pipeline's model-backed stages."""


class PipelineError(Exception):
    """Base class for pipeline failures."""


class LLMUnavailableError(PipelineError):
    """No API key is configured, so no model call can be made."""


class ExtractionError(PipelineError):
    """Resume or JD extraction returned nothing usable after all retries."""


class AnalysisError(PipelineError):
    """The analysis call returned nothing usable after all retries."""
