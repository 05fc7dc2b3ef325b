from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    extraction_model: str = "gemini-2.5-flash"
    llm_temperature: float = 0.1  # analysis call
    extraction_temperature: float = 0.0
    llm_max_output_tokens: int = 8192
    llm_max_retries: int = 2  # retries after the first attempt, no backoff

    # Retrieval (rubric chunks + question archetypes)
    embedding_model: str = "TechWolf/JobBERT-v2"
    retrieval_top_k: int = 8
    retrieval_overfetch_factor: int = 2
    retrieval_max_source_share: float = 0.4

    max_resume_chars: int = 50000
    max_jd_chars: int = 10000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "protected_namespaces": ("settings_",)}


settings = Settings()
