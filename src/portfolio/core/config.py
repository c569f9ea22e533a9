from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Portfolio API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_echo: bool = False
    auto_migrate: bool = False  # Run alembic upgrade head after the store init

    # CORS
    cors_origins: list[str] = ["*"]

    # Admin routes (project writes, contact inbox). Open when unset.
    admin_api_key: str | None = None

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    # AI chat (OpenAI-compatible chat completions)
    ai_api_url: str = "https://api.openai.com/v1"
    ai_api_key: str | None = None
    ai_model: str = "gpt-4o-mini"
    ai_temperature: float = 0.3
    ai_timeout_seconds: float | None = None  # None waits for the upstream indefinitely

    # Action table targets
    owner_name: str = "Maviya"
    cv_url: str = "/cv.pdf"
    github_url: str = "https://github.com/"
    linkedin_url: str = "https://www.linkedin.com/"
    instagram_url: str = "https://www.instagram.com/"

    @field_validator("ai_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def cors_allow_credentials(self) -> bool:
        """Credentials cannot be combined with a wildcard origin."""
        return "*" not in self.cors_origins


@lru_cache
def get_settings() -> Settings:
    return Settings()
