"""AI chat endpoint tests against a fake chat completion API."""

import json

import httpx
import pytest
from httpx import AsyncClient

from tests.fakes import FakeChatUpstream

pytestmark = pytest.mark.integration


async def test_action_reply(client: AsyncClient, chat_upstream: FakeChatUpstream) -> None:
    chat_upstream.reply_with("ACTION_DARK")

    response = await client.post("/ai/chat", json={"message": "turn on dark mode"})

    assert response.status_code == 200
    assert response.json() == {"type": "action", "value": "DARK_MODE"}


async def test_action_reply_with_surrounding_whitespace(
    client: AsyncClient, chat_upstream: FakeChatUpstream
) -> None:
    chat_upstream.reply_with("\n  ACTION_GITHUB \n")

    response = await client.post("/ai/chat", json={"message": "github?"})

    assert response.json() == {"type": "action", "value": "https://github.com/maviya"}


async def test_text_reply_relayed_verbatim(
    client: AsyncClient, chat_upstream: FakeChatUpstream
) -> None:
    chat_upstream.reply_with("Sure, here's info about Maviya's skills")

    response = await client.post("/ai/chat", json={"message": "What are the skills?"})

    assert response.status_code == 200
    assert response.json() == {
        "type": "text",
        "value": "Sure, here's info about Maviya's skills",
    }


async def test_near_miss_token_is_text(
    client: AsyncClient, chat_upstream: FakeChatUpstream
) -> None:
    chat_upstream.reply_with("ACTION_CV.")

    response = await client.post("/ai/chat", json={"message": "cv"})

    assert response.json() == {"type": "text", "value": "ACTION_CV."}


async def test_request_sent_upstream(client: AsyncClient, chat_upstream: FakeChatUpstream) -> None:
    chat_upstream.reply_with("Hello!")

    await client.post("/ai/chat", json={"message": "Hi"})

    [request] = chat_upstream.requests
    assert request.method == "POST"
    assert request.url.path == "/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer test-ai-key"
    body = json.loads(request.content)
    assert body["model"] == "test-model"
    assert [m["role"] for m in body["messages"]] == ["system", "user"]
    assert body["messages"][1]["content"] == "Hi"
    assert "ACTION_CV" in body["messages"][0]["content"]


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("timed out"),
    ],
)
async def test_upstream_network_error(
    client: AsyncClient, chat_upstream: FakeChatUpstream, error: Exception
) -> None:
    chat_upstream.raise_error(error)

    response = await client.post("/ai/chat", json={"message": "Hi"})

    assert response.status_code == 500
    data = response.json()
    assert data["detail"] == "AI request failed"
    assert "request_id" in data


async def test_upstream_error_status(client: AsyncClient, chat_upstream: FakeChatUpstream) -> None:
    chat_upstream.respond_with_status(429, {"error": {"message": "rate limited, key sk-123"}})

    response = await client.post("/ai/chat", json={"message": "Hi"})

    assert response.status_code == 500
    assert response.json()["detail"] == "AI request failed"
    assert "sk-123" not in response.text


@pytest.mark.parametrize(
    "body",
    [
        {"choices": []},
        {"choices": [{"message": {}}]},
        {"choices": [{"message": {"content": None}}]},
        {"unexpected": True},
    ],
)
async def test_upstream_malformed_body(
    client: AsyncClient, chat_upstream: FakeChatUpstream, body: dict
) -> None:
    chat_upstream.respond_with_body(body)

    response = await client.post("/ai/chat", json={"message": "Hi"})

    assert response.status_code == 500


async def test_upstream_not_retried(client: AsyncClient, chat_upstream: FakeChatUpstream) -> None:
    chat_upstream.respond_with_status(503)

    await client.post("/ai/chat", json={"message": "Hi"})

    assert len(chat_upstream.requests) == 1


async def test_long_message_forwarded(
    client: AsyncClient, chat_upstream: FakeChatUpstream
) -> None:
    chat_upstream.reply_with("Thanks for the detail!")
    message = "tell me more " * 500

    response = await client.post("/ai/chat", json={"message": message})

    assert response.status_code == 200
    sent = json.loads(chat_upstream.requests[0].content)
    assert sent["messages"][-1]["content"] == message


@pytest.mark.parametrize("body", [{}, {"message": ""}, {"message": 42}])
async def test_invalid_chat_request(client: AsyncClient, body: dict) -> None:
    response = await client.post("/ai/chat", json=body)

    assert response.status_code == 400
