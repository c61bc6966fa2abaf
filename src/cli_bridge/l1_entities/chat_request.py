"""Chat request entity — the subset of the OpenAI chat-completion body we accept."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from cli_bridge.l1_entities.chat_message import ChatMessage


class ChatRequest(BaseModel):
    """An OpenAI-compatible chat-completion request.

    Generation parameters are carried for downstream collaborators; the
    conversion core never reads them. Unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, extra='ignore')

    model: str
    messages: tuple[ChatMessage, ...]
    stream: bool = False
    temperature: float | None = None
    max_tokens: int | None = None
    top_p: float | None = None
    frequency_penalty: float | None = None
    presence_penalty: float | None = None
    user: str | None = None  # session mapping
