from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from blueprint_fsm.application.config import LoggerConfig
from blueprint_fsm.domain.fsm.table import Handler
from blueprint_fsm.domain.ports import LoggerPort


class LoggerRegistry(Protocol):
    """Select/build a `LoggerPort` (or None) from `LoggerConfig`."""

    def build(self, config: LoggerConfig, /) -> LoggerPort | None: ...


class HandlerRegistry(Protocol):
    """Resolve the handler names used in `TransitionConfig` to callables."""

    def resolve(self, name: str, /) -> Handler: ...


@dataclass(frozen=True, slots=True)
class DictHandlerRegistry(HandlerRegistry):
    handlers: Mapping[str, Handler]

    def resolve(self, name: str, /) -> Handler:
        try:
            return self.handlers[name]
        except KeyError as e:
            raise ValueError(
                f"Unknown handler {name!r}. Available: {sorted(self.handlers)}"
            ) from e


@dataclass(frozen=True, slots=True)
class DefaultLoggerRegistry(LoggerRegistry):
    """
    Supported values:
    - logger='none': disables logging
    - logger='console': `ConsoleLoggerAdapter` (optional `enabled`)
    - logger='jsonl': `JsonlLoggerAdapter` (requires `log_dir`)
    """

    def build(self, config: LoggerConfig, /) -> LoggerPort | None:
        match config.logger:
            case "none":
                return None
            case "console":
                from blueprint_fsm.adapters.logger.console import ConsoleLoggerAdapter

                enabled = config.logger_kwargs.get("enabled", True)
                if not isinstance(enabled, bool):
                    raise ValueError("LoggerConfig.logger_kwargs['enabled'] must be a bool")
                return ConsoleLoggerAdapter(enabled=enabled)
            case "jsonl":
                log_dir = config.logger_kwargs.get("log_dir")
                if not isinstance(log_dir, str) or not log_dir.strip():
                    raise ValueError("LoggerConfig for 'jsonl' requires logger_kwargs['log_dir']")
                file_name = config.logger_kwargs.get("file_name", "fsm")
                if not isinstance(file_name, str) or not file_name.strip():
                    raise ValueError(
                        "LoggerConfig.logger_kwargs['file_name'] must be a non-empty string"
                    )

                from blueprint_fsm.adapters.logger.jsonl import JsonlLoggerAdapter

                return JsonlLoggerAdapter(log_dir=log_dir, file_name=file_name)
            case _:
                # LoggerConfig validation should prevent this.
                raise ValueError(f"Unknown logger: {config.logger!r}")
