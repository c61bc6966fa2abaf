"""Tests for configuration Pydantic models — schema validation only."""

import pytest
from pydantic import ValidationError

from cli_bridge.l1_entities.config import AppConfig, LoggingConfig, OutputConfig


class TestOutputConfig:
    def test_valid(self):
        cfg = OutputConfig(format='prompt', indent=None)
        assert cfg.format == 'prompt'
        assert cfg.indent is None

    def test_unknown_format_raises(self):
        with pytest.raises(ValidationError):
            OutputConfig(format='yaml', indent=2)  # type: ignore[arg-type]

    def test_missing_field_raises(self):
        with pytest.raises(ValidationError):
            OutputConfig(format='json')  # type: ignore[call-arg]


class TestLoggingConfig:
    def test_file_defaults_to_none(self):
        assert LoggingConfig(level='INFO').file is None

    def test_bad_level_raises(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level='LOUD')  # type: ignore[arg-type]


class TestAppConfig:
    def test_requires_all_sections(self):
        with pytest.raises(ValidationError):
            AppConfig.model_validate({'output': {'format': 'json', 'indent': 2}})
