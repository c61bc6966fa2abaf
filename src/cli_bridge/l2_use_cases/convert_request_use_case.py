"""Use case: convert an OpenAI chat request into CLI input."""

from __future__ import annotations

from cli_bridge.l1_entities.chat_request import ChatRequest
from cli_bridge.l1_entities.cli_input import CliInput
from cli_bridge.l2_use_cases.utils.model_alias import resolve_model_alias
from cli_bridge.l2_use_cases.utils.prompt_builder import messages_to_prompt


class ConvertRequestUseCase:
    """Flattens messages, resolves the model alias and carries the session id through."""

    def execute(self, request: ChatRequest) -> CliInput:
        return CliInput(
            prompt=messages_to_prompt(request.messages),
            model=resolve_model_alias(request.model),
            session_id=request.user,
        )
