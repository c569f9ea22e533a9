"""Outbound AI chat integration."""

from src.portfolio.core.ai.client import ChatCompletionClient, create_http_client

__all__ = ["ChatCompletionClient", "create_http_client"]
