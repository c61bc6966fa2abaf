"""Port: chat request loader."""

from __future__ import annotations

from typing import Protocol

from cli_bridge.l1_entities.chat_request import ChatRequest


class RequestLoader(Protocol):
    """Abstract request loader — turns a serialized request into a ChatRequest."""

    def load_text(self, text: str) -> ChatRequest:
        """Parse and validate *text*. Raises InvalidRequestError on malformed input."""
        ...

    def load(self, path: str) -> ChatRequest:
        """Read *path* and parse it. Raises FileNotFoundError if missing."""
        ...
