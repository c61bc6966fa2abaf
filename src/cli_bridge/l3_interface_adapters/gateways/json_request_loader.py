"""Gateway: JSON request loader — implements RequestLoader port."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from cli_bridge.l1_entities.chat_request import ChatRequest
from cli_bridge.l1_entities.errors import InvalidRequestError

log = logging.getLogger('clib.loader')


class JsonRequestLoader:
    """Parses OpenAI chat-completion JSON bodies into ChatRequest entities."""

    def load_text(self, text: str) -> ChatRequest:
        try:
            request = ChatRequest.model_validate_json(text)
        except ValidationError as e:
            log.warning('Rejected request: %d validation error(s)', e.error_count())
            raise InvalidRequestError(f'Invalid chat request: {e}') from e
        log.debug('Loaded request: model=%s, %d messages', request.model, len(request.messages))
        return request

    def load(self, path: str) -> ChatRequest:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f'Request file not found: {p}')
        return self.load_text(p.read_text(encoding='utf-8'))
