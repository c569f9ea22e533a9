"""Chat completion client for an OpenAI-compatible API."""

from typing import Any

import httpx

from src.portfolio.core.config import Settings
from src.portfolio.core.exceptions import UpstreamFailureError
from src.portfolio.core.logging import get_logger

logger = get_logger(__name__)


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Build the shared HTTP client used for outbound chat calls.

    ``ai_timeout_seconds`` unset means the request waits for the upstream.
    """
    return httpx.AsyncClient(
        base_url=settings.ai_api_url,
        timeout=httpx.Timeout(settings.ai_timeout_seconds),
    )


class ChatCompletionClient:
    """Sends one chat completion request and returns the first choice's text."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings):
        self.http_client = http_client
        self.settings = settings

    async def complete(self, messages: list[dict[str, str]]) -> str:
        """Request a completion and return the raw assistant text.

        Raises:
            UpstreamFailureError: On network errors, non-success status codes,
                or a response body without ``choices[0].message.content``.
        """
        if not self.settings.ai_api_key:
            raise UpstreamFailureError("AI_API_KEY is not configured")

        payload: dict[str, Any] = {
            "model": self.settings.ai_model,
            "messages": messages,
            "temperature": self.settings.ai_temperature,
        }
        headers = {"Authorization": f"Bearer {self.settings.ai_api_key}"}

        try:
            response = await self.http_client.post(
                "/chat/completions", json=payload, headers=headers
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Chat completion rejected",
                status_code=e.response.status_code,
                model=self.settings.ai_model,
            )
            raise UpstreamFailureError(
                f"Chat completion returned status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("Chat completion request failed", error=str(e))
            raise UpstreamFailureError(f"Chat completion request failed: {e}") from e

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Malformed chat completion response", error=str(e))
            raise UpstreamFailureError("Malformed chat completion response") from e

        if not isinstance(content, str):
            raise UpstreamFailureError("Chat completion content is not text")
        return content
