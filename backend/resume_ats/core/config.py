from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API keys
    groq_api_key: str | None = Field(None, alias="GROQ_API_KEY")

    # LLM
    llm_model: str = Field("llama-3.1-8b-instant", alias="LLM_MODEL")
    llm_temperature: float = Field(0.2, alias="LLM_TEMPERATURE")
    llm_timeout_seconds: float = Field(45.0, alias="LLM_TIMEOUT_SECONDS")
    llm_max_tokens: int = Field(1500, alias="LLM_MAX_TOKENS")

    # Uploads
    pdf_max_pages: int = Field(5, alias="PDF_MAX_PAGES")
    max_upload_bytes: int = Field(5 * 1024 * 1024, alias="MAX_UPLOAD_BYTES")

    # Redis (rate limiting + saved reviews)
    redis_host: str = Field("localhost", alias="REDIS_HOST")
    redis_port: int = Field(6379, alias="REDIS_PORT")
    redis_db: int = Field(0, alias="REDIS_DB")
    rate_limit: int = Field(5, alias="RATE_LIMIT")
    rate_window_seconds: int = Field(60, alias="RATE_WINDOW_SECONDS")
    review_ttl_seconds: int = Field(60 * 60 * 24 * 30, alias="REVIEW_TTL_SECONDS")

    # App environment
    env: str = Field("development", alias="ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def scorer_configured(self) -> bool:
        return bool(self.groq_api_key and self.groq_api_key.strip())


@lru_cache()
def get_settings() -> Settings:
    return Settings()
