"""AI chat endpoint."""

from fastapi import APIRouter

from src.portfolio.api.dependencies import ChatServiceDep
from src.portfolio.schemas import ChatReply, ChatRequest

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post(
    "/chat",
    response_model=ChatReply,
    summary="Ask the portfolio assistant",
    description=(
        "Returns `{type: 'action', value}` when the assistant answers with a known "
        "action token, otherwise `{type: 'text', value}` with the reply verbatim."
    ),
    responses={500: {"description": "Chat API unreachable or errored"}},
)
async def chat(request: ChatRequest, service: ChatServiceDep) -> ChatReply:
    return await service.reply(request.message)
