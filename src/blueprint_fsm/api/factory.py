from __future__ import annotations

from typing import TYPE_CHECKING

from blueprint_fsm.api.registries import (
    DefaultLoggerRegistry,
    DictHandlerRegistry,
    HandlerRegistry,
    LoggerRegistry,
)
from blueprint_fsm.domain.fsm import Blueprint, Machine, TransitionEdge

if TYPE_CHECKING:
    from collections.abc import Mapping

    from blueprint_fsm.application.config import BlueprintConfig
    from blueprint_fsm.domain.fsm.table import Handler
    from blueprint_fsm.domain.ports import ClockPort, IdGeneratorPort


def create_blueprint(
    config: BlueprintConfig,
    /,
    *,
    handlers: Mapping[str, Handler] | None = None,
    handler_registry: HandlerRegistry | None = None,
    logger_registry: LoggerRegistry | None = None,
    clock: ClockPort | None = None,
    id_generator: IdGeneratorPort | None = None,
) -> Blueprint:
    """
    Build a `Blueprint` from declarative config.

    Handler names are resolved up front, so an unknown name fails before any
    transition is declared.
    """
    if handlers is not None and handler_registry is not None:
        raise ValueError("Pass either 'handlers' or 'handler_registry', not both.")
    registry = handler_registry or DictHandlerRegistry(handlers=dict(handlers or {}))
    logger = (logger_registry or DefaultLoggerRegistry()).build(config.logger)

    edges = [
        TransitionEdge(
            item.from_state,
            item.to_state,
            registry.resolve(item.handler) if item.handler is not None else None,
        )
        for item in config.transitions
    ]

    blueprint = Blueprint(logger=logger, clock=clock, id_generator=id_generator)
    blueprint.start(config.start)
    for edge in edges:
        blueprint.add(edge)
    return blueprint


def create_machine(
    config: BlueprintConfig,
    /,
    *,
    handlers: Mapping[str, Handler] | None = None,
    handler_registry: HandlerRegistry | None = None,
    logger_registry: LoggerRegistry | None = None,
    clock: ClockPort | None = None,
    id_generator: IdGeneratorPort | None = None,
) -> Machine:
    return create_blueprint(
        config,
        handlers=handlers,
        handler_registry=handler_registry,
        logger_registry=logger_registry,
        clock=clock,
        id_generator=id_generator,
    ).machine()
