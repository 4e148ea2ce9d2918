"""
Public API layer (composition root).

Turns `BlueprintConfig` into ready-to-use blueprints and machines, wiring
logger adapters and named handlers.
"""

from __future__ import annotations

from blueprint_fsm.api.factory import create_blueprint, create_machine
from blueprint_fsm.api.loading import (
    blueprint_config_from_dict,
    blueprint_config_from_json,
    has_pydantic,
)
from blueprint_fsm.api.registries import (
    DefaultLoggerRegistry,
    DictHandlerRegistry,
    HandlerRegistry,
    LoggerRegistry,
)

__all__ = [
    "DefaultLoggerRegistry",
    "DictHandlerRegistry",
    "HandlerRegistry",
    "LoggerRegistry",
    "blueprint_config_from_dict",
    "blueprint_config_from_json",
    "create_blueprint",
    "create_machine",
    "has_pydantic",
]
