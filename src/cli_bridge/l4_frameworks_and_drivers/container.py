"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from cli_bridge.l1_entities.config import AppConfig
from cli_bridge.l2_use_cases.convert_request_use_case import ConvertRequestUseCase
from cli_bridge.l2_use_cases.list_models_use_case import ListModelsUseCase
from cli_bridge.l2_use_cases.ports.request_loader import RequestLoader
from cli_bridge.l3_interface_adapters.gateways.json_request_loader import JsonRequestLoader


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(self, config: AppConfig, request_loader: RequestLoader | None = None) -> None:
        self.config = config
        self.request_loader: RequestLoader = request_loader or JsonRequestLoader()
        self.convert_request = ConvertRequestUseCase()
        self.list_models = ListModelsUseCase()
