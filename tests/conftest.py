"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from cli_bridge.l1_entities.chat_request import ChatRequest
from cli_bridge.l1_entities.config import AppConfig
from cli_bridge.l1_entities.errors import InvalidRequestError
from cli_bridge.l4_frameworks_and_drivers.infra_config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeRequestLoader:
    """Fake request loader — returns a canned request, records calls."""

    def __init__(self, request: ChatRequest | None = None, error: str = ''):
        self._request = request
        self._error = error
        self.load_text_calls: list[str] = []
        self.load_calls: list[str] = []

    def load_text(self, text: str) -> ChatRequest:
        self.load_text_calls.append(text)
        return self._result()

    def load(self, path: str) -> ChatRequest:
        self.load_calls.append(path)
        return self._result()

    def _result(self) -> ChatRequest:
        if self._error or self._request is None:
            raise InvalidRequestError(self._error or 'no request configured')
        return self._request


# --- Standard Fixtures ---


@pytest.fixture(autouse=True)
def _isolate_default_config(tmp_path: Path, monkeypatch):
    """Keep the developer's real config file out of tests."""
    import cli_bridge.l3_interface_adapters.gateways.yaml_config_loader as mod

    nonexistent = tmp_path / 'no-user-config'
    monkeypatch.setattr(mod, 'DEFAULT_CONFIG_PATHS', [nonexistent / 'config.yaml', nonexistent / 'config.yml'])


@pytest.fixture(autouse=True)
def _reset_clib_logger():
    yield
    root = logging.getLogger('clib')
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def sample_request_body() -> dict:
    return {
        'model': 'claude-code-cli/claude-sonnet-4',
        'messages': [
            {'role': 'system', 'content': 'be nice'},
            {'role': 'user', 'content': 'hello'},
        ],
        'user': 'abc',
        'temperature': 0.2,
    }


@pytest.fixture
def sample_request(sample_request_body: dict) -> ChatRequest:
    return ChatRequest.model_validate(sample_request_body)


@pytest.fixture
def sample_request_json(tmp_path: Path, sample_request_body: dict) -> Path:
    p = tmp_path / 'request.json'
    p.write_text(json.dumps(sample_request_body), encoding='utf-8')
    return p


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
output:
  format: "prompt"
  indent: null
logging:
  level: "DEBUG"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def fake_loader(sample_request: ChatRequest) -> FakeRequestLoader:
    return FakeRequestLoader(sample_request)
