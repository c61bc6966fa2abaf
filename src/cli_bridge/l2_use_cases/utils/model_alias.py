"""Pure functions for mapping request model identifiers to CLI model aliases."""

from __future__ import annotations

from types import MappingProxyType

from cli_bridge.l1_entities.cli_input import ModelAlias

PROVIDER_PREFIX = 'claude-code-cli/'
DEFAULT_ALIAS: ModelAlias = 'opus'

CANONICAL_MODELS: MappingProxyType[str, ModelAlias] = MappingProxyType(
    {
        'claude-opus-4': 'opus',
        'claude-sonnet-4': 'sonnet',
        'claude-haiku-4': 'haiku',
    }
)

MODEL_MAP: MappingProxyType[str, ModelAlias] = MappingProxyType(
    {
        **CANONICAL_MODELS,
        **{f'{PROVIDER_PREFIX}{name}': alias for name, alias in CANONICAL_MODELS.items()},
        'opus': 'opus',
        'sonnet': 'sonnet',
        'haiku': 'haiku',
    }
)


def resolve_model_alias(model: str) -> ModelAlias:
    """Resolve *model* to a CLI alias. Exact name, then prefix-stripped name, then the default."""
    alias = MODEL_MAP.get(model)
    if alias is not None:
        return alias

    alias = MODEL_MAP.get(model.removeprefix(PROVIDER_PREFIX))
    if alias is not None:
        return alias

    # unknown and future model names run on the top tier
    return DEFAULT_ALIAS


def canonical_model_ids() -> list[str]:
    """Bare model names advertised to clients, in table order."""
    return list(CANONICAL_MODELS)
