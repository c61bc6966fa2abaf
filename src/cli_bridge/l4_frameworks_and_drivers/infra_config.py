"""Configuration defaults — lives in L4, not domain."""

from __future__ import annotations

import copy

from cli_bridge.l1_entities.config import AppConfig
from cli_bridge.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'output': {
        'format': 'json',
        'indent': 2,
    },
    'logging': {
        'level': 'WARNING',
        'file': None,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
