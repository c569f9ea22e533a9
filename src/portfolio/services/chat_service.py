"""AI chat service - routes assistant replies to client-side actions.

The model is told to answer with a bare action token when the visitor asks
for one of the actions below. A reply is treated as an action only when its
trimmed text equals a token exactly; anything else is relayed as text.
"""

from dataclasses import dataclass

from src.portfolio.core.ai import ChatCompletionClient
from src.portfolio.core.config import Settings
from src.portfolio.core.logging import get_logger
from src.portfolio.models.enums import ReplyType
from src.portfolio.schemas.chat import ChatReply

logger = get_logger(__name__)

DARK_MODE = "DARK_MODE"
LIGHT_MODE = "LIGHT_MODE"


@dataclass(frozen=True)
class ChatAction:
    token: str
    trigger: str
    value: str


def build_action_table(settings: Settings) -> dict[str, ChatAction]:
    """Map each action token to its trigger phrase and client-side value."""
    actions = [
        ChatAction("ACTION_CV", "asks for the CV or resume", settings.cv_url),
        ChatAction("ACTION_GITHUB", "asks for GitHub", settings.github_url),
        ChatAction("ACTION_LINKEDIN", "asks for LinkedIn", settings.linkedin_url),
        ChatAction("ACTION_INSTAGRAM", "asks for Instagram", settings.instagram_url),
        ChatAction("ACTION_DARK", "asks for dark mode", DARK_MODE),
        ChatAction("ACTION_LIGHT", "asks for light mode", LIGHT_MODE),
    ]
    return {action.token: action for action in actions}


def build_system_prompt(owner_name: str, actions: dict[str, ChatAction]) -> str:
    action_lines = "\n".join(
        f"- If the user {action.trigger}, reply ONLY with {action.token}"
        for action in actions.values()
    )
    return (
        f"You are the assistant on {owner_name}'s portfolio website.\n"
        f"Only answer questions about {owner_name}'s projects, skills, experience "
        "and how to get in touch. Politely decline anything else.\n"
        "Keep answers short and friendly.\n"
        "When the user asks for one of these actions, reply with the token alone, "
        "with no other words or punctuation:\n"
        f"{action_lines}"
    )


def classify_reply(reply: str, actions: dict[str, ChatAction]) -> ChatReply:
    """Turn raw assistant text into an action or a text reply.

    Exact membership only: no case folding, punctuation stripping or
    partial matches.
    """
    text = reply.strip()
    action = actions.get(text)
    if action is not None:
        return ChatReply(type=ReplyType.ACTION, value=action.value)
    return ChatReply(type=ReplyType.TEXT, value=text)


class ChatService:
    """Forwards visitor messages to the chat API and classifies the answer."""

    def __init__(self, client: ChatCompletionClient, settings: Settings):
        self.client = client
        self.actions = build_action_table(settings)
        self.system_prompt = build_system_prompt(settings.owner_name, self.actions)

    def build_messages(self, message: str) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": message},
        ]

    async def reply(self, message: str) -> ChatReply:
        """Send one message upstream and return the routed reply.

        Raises:
            UpstreamFailureError: If the chat API call fails. Not retried.
        """
        raw = await self.client.complete(self.build_messages(message))
        result = classify_reply(raw, self.actions)
        logger.info("Chat reply routed", reply_type=result.type.value)
        return result
