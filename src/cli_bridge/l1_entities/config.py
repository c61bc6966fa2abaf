"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class OutputConfig(BaseModel):
    format: Literal['json', 'prompt']
    indent: int | None  # None → compact single-line JSON


class LoggingConfig(BaseModel):
    level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
    file: str | None = None  # None → stderr


class AppConfig(BaseModel):
    output: OutputConfig
    logging: LoggingConfig
