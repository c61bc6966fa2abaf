"""Chat message entity — OpenAI-style role + string or multi-part content."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field


class ImageUrl(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    detail: str | None = None


class ContentPart(BaseModel):
    """One element of a multi-part message body. Types other than text/image_url are kept and later ignored."""

    model_config = ConfigDict(frozen=True)

    type: str
    text: str | None = None
    image_url: ImageUrl | None = None


class ChatMessage(BaseModel):
    """A single message in an OpenAI chat-completion request.

    Roles and content are accepted as sent: the prompt builder drops roles it
    does not render and coerces content shapes it does not recognize.
    """

    model_config = ConfigDict(frozen=True)

    role: str
    # first member that validates wins; anything else is kept raw
    content: Annotated[str | tuple[ContentPart, ...] | Any, Field(union_mode='left_to_right')] = None
