from __future__ import annotations

from blueprint_fsm.adapters.logger.console import ConsoleLoggerAdapter
from blueprint_fsm.adapters.logger.jsonl import JsonlLoggerAdapter
from blueprint_fsm.adapters.logger.noop import NoopLoggerAdapter

__all__ = ["ConsoleLoggerAdapter", "JsonlLoggerAdapter", "NoopLoggerAdapter"]
