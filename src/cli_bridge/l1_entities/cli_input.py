"""CLI input entity — what the single-turn CLI invocation layer consumes."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

ModelAlias = Literal['opus', 'sonnet', 'haiku']


class CliInput(BaseModel):
    """Flattened prompt, normalized model alias, optional session id."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    model: ModelAlias
    session_id: str | None = None
