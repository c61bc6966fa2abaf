"""Use case: list the models this bridge advertises."""

from __future__ import annotations

from cli_bridge.l1_entities.model_catalog import ModelInfo, ModelList
from cli_bridge.l2_use_cases.utils.model_alias import canonical_model_ids

OWNER = 'anthropic'


class ListModelsUseCase:
    """Builds an OpenAI-style model list from the canonical model table."""

    def execute(self, created: int | None = None) -> ModelList:
        return ModelList(
            data=tuple(ModelInfo(id=model_id, owned_by=OWNER, created=created) for model_id in canonical_model_ids()),
        )
