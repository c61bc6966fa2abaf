"""Model catalog entities in OpenAI `/v1/models` shape."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ModelInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    object: Literal['model'] = 'model'
    owned_by: str
    created: int | None = None


class ModelList(BaseModel):
    model_config = ConfigDict(frozen=True)

    object: Literal['list'] = 'list'
    data: tuple[ModelInfo, ...] = ()
