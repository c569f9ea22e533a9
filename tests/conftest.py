"""Root test fixtures shared across all test types.

Database-backed fixtures and the HTTP client are in tests/integration/conftest.py.
"""

import os

# Set APP_ENV and a throwaway database before any app imports
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# ruff: noqa: E402 - Imports must be after env var setup
import httpx
import pytest

from src.portfolio.core.config import Settings, get_settings
from tests.fakes import FakeChatUpstream

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()

TEST_AI_URL = "https://chat.test/v1"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings for one test, backed by a file database in tmp_path."""
    return Settings(
        _env_file=None,
        app_env="testing",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'portfolio.db'}",
        ai_api_url=TEST_AI_URL,
        ai_api_key="test-ai-key",
        ai_model="test-model",
        owner_name="Maviya",
        cv_url="https://example.com/cv.pdf",
        github_url="https://github.com/maviya",
        linkedin_url="https://www.linkedin.com/in/maviya",
        instagram_url="https://www.instagram.com/maviya",
    )


@pytest.fixture
def chat_upstream() -> FakeChatUpstream:
    return FakeChatUpstream()


@pytest.fixture
async def chat_http_client(settings: Settings, chat_upstream: FakeChatUpstream):
    """HTTP client whose requests are answered by ``chat_upstream``."""
    async with httpx.AsyncClient(
        base_url=settings.ai_api_url,
        transport=httpx.MockTransport(chat_upstream.handler),
    ) as client:
        yield client
